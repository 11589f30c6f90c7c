"""Core harness logic.

This subpackage contains statistics aggregation and test execution.

Key modules:
    - aggregator: Bottom-up statistics recompute via recompute()
    - runner: TestRunner and case execution helpers
"""

from suitetree.core.aggregator import recompute, recompute_all
from suitetree.core.runner import TestRunner, execute_case, execute_suite

__all__ = [
    # aggregator
    "recompute",
    "recompute_all",
    # runner
    "TestRunner",
    "execute_case",
    "execute_suite",
]
