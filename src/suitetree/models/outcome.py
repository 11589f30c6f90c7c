"""
Outcome model.

Defines the closed set of outcome kinds a test case can record and
their fixed display rules (glyph and color style).
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import NamedTuple


class Outcome(str, Enum):
	"""Recorded result of one test execution or manual assertion."""

	SUCCESS = "success"
	UNEXPECTED_OUTPUT = "unexpected_output"
	EXPECTED_BUILD_ERROR = "expected_build_error"
	BUILD_ERROR = "build_error"
	EXPECTED_RUNTIME_ERROR = "expected_runtime_error"
	RUNTIME_ERROR = "runtime_error"

	@property
	def is_failure(self) -> bool:
		"""Return True for outcomes the caller did not expect."""
		return self in _FAILURES

	@property
	def is_expected(self) -> bool:
		return not self.is_failure

	@property
	def glyph(self) -> str:
		return OUTCOME_DISPLAY[self].glyph

	@property
	def style(self) -> str:
		return OUTCOME_DISPLAY[self].style


class OutcomeDisplay(NamedTuple):
	"""Glyph and rich style used to draw one outcome."""

	glyph: str
	style: str
	label: str


# rich "bright_black" is ANSI 90 (gray)
OUTCOME_DISPLAY = MappingProxyType({
    Outcome.SUCCESS:
        OutcomeDisplay("K", "green", "success"),
    Outcome.UNEXPECTED_OUTPUT:
        OutcomeDisplay("K", "yellow", "unexpected output"),
    Outcome.EXPECTED_BUILD_ERROR:
        OutcomeDisplay("B", "bright_black", "expected build error"),
    Outcome.BUILD_ERROR:
        OutcomeDisplay("B", "red", "build error"),
    Outcome.EXPECTED_RUNTIME_ERROR:
        OutcomeDisplay("R", "bright_black", "expected runtime error"),
    Outcome.RUNTIME_ERROR:
        OutcomeDisplay("R", "red", "runtime error"),
})

_FAILURES = frozenset({
    Outcome.UNEXPECTED_OUTPUT,
    Outcome.BUILD_ERROR,
    Outcome.RUNTIME_ERROR,
})

# (expected, unexpected) pairs in report column order
OUTCOME_GROUPS: tuple[tuple[Outcome, Outcome], ...] = (
    (Outcome.SUCCESS, Outcome.UNEXPECTED_OUTPUT),
    (Outcome.EXPECTED_BUILD_ERROR, Outcome.BUILD_ERROR),
    (Outcome.EXPECTED_RUNTIME_ERROR, Outcome.RUNTIME_ERROR),
)


def coerce_outcome(value: Outcome | str) -> Outcome:
	"""
	Convert a value to an Outcome.

	Parameters:
		value: An Outcome member or its string value (e.g. "build_error").

	Returns:
		The matching Outcome.

	Raises:
		ValueError: If the value does not name an outcome.
	"""
	if isinstance(value, Outcome):
		return value
	if isinstance(value, str):
		return Outcome(value.strip().lower())
	raise ValueError(f"not an outcome: {value!r}")


__all__ = [
    "Outcome",
    "OutcomeDisplay",
    "OUTCOME_DISPLAY",
    "OUTCOME_GROUPS",
    "coerce_outcome",
]
