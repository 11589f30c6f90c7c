"""
Statistics aggregation.

Recomputes suite statistics bottom-up from recorded outcomes. Every
call is a full pass over the subtree; nothing is tracked incrementally.
"""

from __future__ import annotations

from typing import Iterable

from suitetree.models.stats import SuiteStats
from suitetree.models.suite import TestSuite


def recompute(suite: TestSuite) -> SuiteStats:
	"""
	Recompute a suite's statistics from its whole subtree.

	Direct cases are counted first, then each child suite is
	recomputed and merged in.

	Parameters:
		suite: Root of the subtree to fold.

	Returns:
		The fresh statistics, also stored on ``suite.stats``.
	"""
	stats = SuiteStats()
	for case in suite.cases:
		for outcome in case.outcomes:
			stats.record(outcome)
	for child in suite.children:
		stats.merge(recompute(child))
	suite.stats = stats
	return stats


def recompute_all(suites: Iterable[TestSuite]) -> SuiteStats:
	"""Recompute every suite in a forest and return the grand total."""
	total = SuiteStats()
	for suite in suites:
		total.merge(recompute(suite))
	return total


__all__ = ["recompute", "recompute_all"]
