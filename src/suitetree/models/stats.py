"""
Aggregate statistics model.

Per-outcome counts for a suite subtree, in fixed report column order.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from .outcome import Outcome


class SuiteStats(BaseModel):
	"""
	Outcome counts for a suite and all of its descendants.

	Field names match the Outcome values so counts can be looked up
	by outcome.
	"""

	success: int = Field(default=0, ge=0)
	unexpected_output: int = Field(default=0, ge=0)
	expected_build_error: int = Field(default=0, ge=0)
	build_error: int = Field(default=0, ge=0)
	expected_runtime_error: int = Field(default=0, ge=0)
	runtime_error: int = Field(default=0, ge=0)

	def count(self, outcome: Outcome) -> int:
		"""Return the count recorded for an outcome kind."""
		return getattr(self, outcome.value)

	def record(self, outcome: Outcome) -> None:
		"""Increment the count for one outcome."""
		setattr(self, outcome.value, self.count(outcome) + 1)

	def merge(self, other: SuiteStats) -> None:
		"""Add another snapshot into this one component-wise."""
		for outcome in Outcome:
			setattr(self, outcome.value,
			        self.count(outcome) + other.count(outcome))

	@property
	def total(self) -> int:
		return sum(self.count(o) for o in Outcome)

	@property
	def failures(self) -> int:
		"""Number of unexpected outcomes (unexpected output and errors)."""
		return sum(self.count(o) for o in Outcome if o.is_failure)

	@property
	def passed(self) -> bool:
		return self.failures == 0


__all__ = ["SuiteStats"]
