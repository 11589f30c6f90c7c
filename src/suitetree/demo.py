"""Example tree shown by ``suitetree demo``."""

from __future__ import annotations

from suitetree.core.runner import TestRunner
from suitetree.models.case import TestCase
from suitetree.models.outcome import Outcome
from suitetree.models.suite import TestSuite


def _add() -> Outcome:
	return Outcome.SUCCESS if 2 + 2 == 4 else Outcome.UNEXPECTED_OUTPUT


def _overflow() -> Outcome:
	return Outcome.BUILD_ERROR


def _divide_by_zero() -> Outcome:
	return Outcome.EXPECTED_RUNTIME_ERROR


def _never_called() -> Outcome:
	return Outcome.RUNTIME_ERROR


def build_demo_runner() -> TestRunner:
	"""Build a small two-level tree with executed and manual results."""
	math = TestSuite(name="Math")
	math.add_test_case(TestCase(name="Add", test_func=_add))

	edge = TestSuite(name="Edge")
	edge.add_test_case(TestCase(name="Overflow", test_func=_overflow))
	edge.add_test_case(
	    TestCase(name="DivideByZero", test_func=_divide_by_zero))
	math.add_child(edge)

	io = TestSuite(name="IO")
	flaky = TestCase(name="Flaky", test_func=_never_called)
	flaky.add_results(Outcome.SUCCESS, Outcome.UNEXPECTED_OUTPUT,
	                  Outcome.SUCCESS)
	io.add_test_case(flaky)
	parse = TestCase(name="Parse")
	parse.add_results(Outcome.EXPECTED_BUILD_ERROR, Outcome.SUCCESS)
	io.add_test_case(parse)

	runner = TestRunner()
	runner.add_suite(math)
	runner.add_suite(io)
	return runner


__all__ = ["build_demo_runner"]
