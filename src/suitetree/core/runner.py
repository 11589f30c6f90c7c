"""
Test runner.

Owns the top-level suites, executes pending test functions and hands
the tree to the renderer for the final report.
"""

from __future__ import annotations

from typing import ClassVar

from pydantic import BaseModel, Field

from suitetree.models.case import ResultAppendError, TestCase
from suitetree.models.stats import SuiteStats
from suitetree.models.suite import TestSuite
from suitetree.ui.tree import TreeRenderer
from suitetree.utils.logging import get_logger

logger = get_logger(__name__)


def execute_case(case: TestCase) -> bool:
	"""
	Run a case's function if it has no recorded outcomes yet.

	A result that cannot be recorded is logged and skipped.

	Returns:
		True if the function was invoked.
	"""
	if not case.should_execute:
		logger.debug("skipping %s (%d recorded result(s))", case.name,
		             case.result_count)
		return False
	logger.debug("running %s", case.name)
	try:
		case.execute()
	except ResultAppendError as exc:
		logger.warning("failed to add test result for %s: %s", case.name,
		               exc)
	return True


def execute_suite(suite: TestSuite, recursive: bool = True) -> int:
	"""
	Execute the cases owned by a suite.

	Parameters:
		suite: Suite whose cases are executed in insertion order.
		recursive: Also execute nested suites after the suite's own cases.

	Returns:
		Number of test functions invoked.
	"""
	invoked = sum(1 for case in suite.cases if execute_case(case))
	if recursive:
		for child in suite.children:
			invoked += execute_suite(child, recursive=True)
	return invoked


class TestRunner(BaseModel):
	"""
	Root of the test tree.

	Attributes:
		suites: Top-level suites in report order.
		run_child_suites: Execute cases of nested suites too. When False
			only cases owned directly by top-level suites are executed;
			nested cases still appear in statistics and the report.
		global_stats: Grand total from the last report.
	"""

	__test__: ClassVar[bool] = False

	suites: list[TestSuite] = Field(default_factory=list)
	run_child_suites: bool = True
	global_stats: SuiteStats = Field(default_factory=SuiteStats)

	def add_suite(self, suite: TestSuite | None) -> TestRunner:
		"""Append a top-level suite. ``None`` is ignored."""
		if suite is not None:
			self.suites.append(suite)
		return self

	def execute(self) -> int:
		"""Invoke every pending test function once.

		Returns:
			Number of test functions invoked.
		"""
		logger.info("running %d suite(s)", len(self.suites))
		invoked = sum(
		    execute_suite(suite, recursive=self.run_child_suites)
		    for suite in self.suites)
		logger.info("invoked %d test function(s)", invoked)
		return invoked

	def run(self, renderer: TreeRenderer | None = None) -> SuiteStats:
		"""
		Execute pending cases, then print the report.

		Parameters:
			renderer: Renderer to print with. Defaults to one writing ANSI
				colored text to stdout with the default column width, even
				when stdout is not a terminal.

		Returns:
			Grand total of all recorded outcomes.
		"""
		self.execute()
		renderer = renderer or TreeRenderer()
		self.global_stats = renderer.print_results(self.suites)
		if self.global_stats.failures:
			logger.info("%d unexpected outcome(s) recorded",
			            self.global_stats.failures)
		return self.global_stats


__all__ = ["TestRunner", "execute_case", "execute_suite"]
