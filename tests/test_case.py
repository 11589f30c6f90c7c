import pytest
from pydantic import ValidationError

from suitetree.models.case import ResultAppendError, TestCase
from suitetree.models.outcome import Outcome


def test_create_without_function():
	case = TestCase(name="Add")
	assert case.name == "Add"
	assert case.test_func is None
	assert case.outcomes == []
	assert not case.should_execute


@pytest.mark.parametrize("name", ["", "   "])
def test_empty_name_rejected(name):
	with pytest.raises(ValidationError):
		TestCase(name=name)


def test_non_callable_function_rejected():
	with pytest.raises(ValidationError):
		TestCase(name="Add", test_func="not callable")


def test_add_result_preserves_order():
	case = TestCase(name="Seq")
	case.add_result(Outcome.SUCCESS)
	case.add_result(Outcome.BUILD_ERROR)
	case.add_result(Outcome.SUCCESS)
	assert case.outcomes == [
	    Outcome.SUCCESS, Outcome.BUILD_ERROR, Outcome.SUCCESS
	]
	assert case.result_count == 3


def test_add_result_accepts_string_values():
	case = TestCase(name="Str")
	case.add_result("runtime_error")
	assert case.outcomes == [Outcome.RUNTIME_ERROR]


def test_add_result_invalid_leaves_log_untouched():
	case = TestCase(name="Bad")
	case.add_result(Outcome.SUCCESS)
	with pytest.raises(ResultAppendError):
		case.add_result("exploded")
	assert case.outcomes == [Outcome.SUCCESS]


class _FullLog(list):
	"""Outcome log that can no longer grow."""

	def append(self, item):
		raise MemoryError


def test_add_result_out_of_memory_leaves_log_untouched():
	case = TestCase(name="Full")
	case.outcomes = _FullLog([Outcome.SUCCESS])
	with pytest.raises(ResultAppendError, match="out of memory"):
		case.add_result(Outcome.BUILD_ERROR)
	assert list(case.outcomes) == [Outcome.SUCCESS]


def test_add_results_equals_sequential_appends():
	batch = TestCase(name="Batch")
	batch.add_results(Outcome.SUCCESS, Outcome.RUNTIME_ERROR)

	single = TestCase(name="Single")
	single.add_result(Outcome.SUCCESS)
	single.add_result(Outcome.RUNTIME_ERROR)

	assert batch.outcomes == single.outcomes


def test_add_results_keeps_appends_before_failure():
	case = TestCase(name="Partial")
	with pytest.raises(ResultAppendError):
		case.add_results(Outcome.SUCCESS, Outcome.BUILD_ERROR, "nope",
		                 Outcome.SUCCESS)
	assert case.outcomes == [Outcome.SUCCESS, Outcome.BUILD_ERROR]


def test_add_results_requires_at_least_one():
	case = TestCase(name="Empty")
	with pytest.raises(ResultAppendError):
		case.add_results()
	assert case.outcomes == []


def test_should_execute_only_without_results():
	case = TestCase(name="Fn", test_func=lambda: Outcome.SUCCESS)
	assert case.should_execute
	case.add_result(Outcome.UNEXPECTED_OUTPUT)
	assert not case.should_execute


def test_execute_records_returned_outcome():
	case = TestCase(name="Fn", test_func=lambda: Outcome.EXPECTED_BUILD_ERROR)
	assert case.execute() is Outcome.EXPECTED_BUILD_ERROR
	assert case.outcomes == [Outcome.EXPECTED_BUILD_ERROR]


def test_execute_without_function_fails():
	with pytest.raises(ValueError):
		TestCase(name="Manual").execute()


def test_execute_propagates_function_errors():

	def boom():
		raise ZeroDivisionError("boom")

	case = TestCase(name="Boom", test_func=boom)
	with pytest.raises(ZeroDivisionError):
		case.execute()
	assert case.outcomes == []
