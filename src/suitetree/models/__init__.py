"""
suitetree models.

This subpackage contains the Pydantic models for the test tree,
outcomes, statistics, configuration and CLI parameters.

Key models:
    - Outcome: Closed set of recordable results
    - SuiteStats: Per-outcome counts for a suite subtree
    - TestCase: Named leaf with an outcome log
    - TestSuite: Named branch owning cases and nested suites
    - HarnessConfig: Settings loaded from environment
    - RunParams: Validated CLI parameters
"""

from .outcome import (
    Outcome,
    OutcomeDisplay,
    OUTCOME_DISPLAY,
    OUTCOME_GROUPS,
    coerce_outcome,
)
from .stats import SuiteStats
from .case import TestCase, TestFunc, ResultAppendError
from .suite import TestSuite
from .config import HarnessConfig, load_env, DEFAULT_COLUMN_WIDTH
from .run_params import RunParams

__all__ = [
    "Outcome",
    "OutcomeDisplay",
    "OUTCOME_DISPLAY",
    "OUTCOME_GROUPS",
    "coerce_outcome",
    "SuiteStats",
    "TestCase",
    "TestFunc",
    "ResultAppendError",
    "TestSuite",
    "HarnessConfig",
    "load_env",
    "DEFAULT_COLUMN_WIDTH",
    "RunParams",
]
