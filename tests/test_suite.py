import pytest
from pydantic import ValidationError

from suitetree.models.case import TestCase
from suitetree.models.stats import SuiteStats
from suitetree.models.suite import TestSuite


def test_create_empty_suite():
	suite = TestSuite(name="Math")
	assert suite.cases == []
	assert suite.children == []
	assert suite.stats == SuiteStats()
	assert suite.is_empty


def test_empty_name_rejected():
	with pytest.raises(ValidationError):
		TestSuite(name="")


def test_add_child_preserves_order():
	parent = TestSuite(name="Root")
	a, b, c = (TestSuite(name=n) for n in "abc")
	parent.add_child(a).add_child(b).add_child(c)
	assert [s.name for s in parent.children] == ["a", "b", "c"]
	assert parent.children[0] is a


def test_add_test_case_preserves_order():
	suite = TestSuite(name="Root")
	for name in ("one", "two", "three"):
		suite.add_test_case(TestCase(name=name))
	assert [c.name for c in suite.cases] == ["one", "two", "three"]


def test_none_arguments_are_ignored():
	suite = TestSuite(name="Root")
	suite.add_child(None)
	suite.add_test_case(None)
	assert suite.is_empty


def test_walk_and_iter_cases_are_pre_order():
	root = TestSuite(name="root")
	root.add_test_case(TestCase(name="r1"))
	left = TestSuite(name="left")
	left.add_test_case(TestCase(name="l1"))
	deep = TestSuite(name="deep")
	deep.add_test_case(TestCase(name="d1"))
	left.add_child(deep)
	right = TestSuite(name="right")
	right.add_test_case(TestCase(name="x1"))
	root.add_child(left).add_child(right)

	assert [s.name for s in root.walk()] == ["root", "left", "deep", "right"]
	assert [c.name for c in root.iter_cases()] == ["r1", "l1", "d1", "x1"]
