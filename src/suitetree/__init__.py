"""
suitetree - hierarchical test harness with a colored tree report.

Cases are grouped into nested suites, executed once, and their
recorded outcomes are rolled up per suite and printed as a tree.

Main entry points:
    - suitetree.core.runner: TestRunner for building and running a tree
    - suitetree.ui.tree: TreeRenderer for the report
    - suitetree.main: CLI entrypoint
"""

from suitetree.core.runner import TestRunner
from suitetree.models import Outcome, SuiteStats, TestCase, TestSuite
from suitetree.ui.tree import TreeRenderer

__all__ = [
    "Outcome",
    "SuiteStats",
    "TestCase",
    "TestSuite",
    "TestRunner",
    "TreeRenderer",
]
