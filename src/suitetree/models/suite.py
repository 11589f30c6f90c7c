"""
Test suite model.

A named branch of the tree owning ordered test cases, ordered child
suites and a cached statistics snapshot.
"""

from __future__ import annotations

from typing import ClassVar, Iterator

from pydantic import BaseModel, Field, field_validator

from .case import TestCase
from .stats import SuiteStats


class TestSuite(BaseModel):
	"""
	Named grouping node in the test hierarchy.

	``stats`` is derived data. It reflects the whole subtree only
	right after a recompute pass (see ``suitetree.core.aggregator``)
	and is stale after any outcome changes.
	"""

	__test__: ClassVar[bool] = False

	name: str = Field(description="Suite name")
	cases: list[TestCase] = Field(default_factory=list,
	                              description="Directly owned test cases")
	children: list[TestSuite] = Field(default_factory=list,
	                                  description="Nested suites")
	stats: SuiteStats = Field(default_factory=SuiteStats,
	                          description="Cached subtree statistics")

	@field_validator("name")
	@classmethod
	def validate_name(cls, v: str) -> str:
		if not v or not v.strip():
			raise ValueError("name must be a non-empty string")
		return v

	def add_child(self, child: TestSuite | None) -> TestSuite:
		"""Append a nested suite. ``None`` is ignored."""
		if child is not None:
			self.children.append(child)
		return self

	def add_test_case(self, case: TestCase | None) -> TestSuite:
		"""Append a test case. ``None`` is ignored."""
		if case is not None:
			self.cases.append(case)
		return self

	@property
	def is_empty(self) -> bool:
		return not self.cases and not self.children

	def walk(self) -> Iterator[TestSuite]:
		"""Yield this suite and every descendant suite, pre-order."""
		yield self
		for child in self.children:
			yield from child.walk()

	def iter_cases(self) -> Iterator[TestCase]:
		"""Yield every case in the subtree, own cases first."""
		for suite in self.walk():
			yield from suite.cases


__all__ = ["TestSuite"]
