"""
Test case model.

A named leaf of the suite tree: an optional test function and the
ordered log of outcomes recorded for it.
"""

from __future__ import annotations

from typing import Callable, ClassVar

from pydantic import BaseModel, Field, field_validator

from .outcome import Outcome, coerce_outcome

TestFunc = Callable[[], Outcome]


class ResultAppendError(ValueError):
	"""Raised when an outcome cannot be appended to a case's log."""


class TestCase(BaseModel):
	"""
	Named test unit holding zero or more recorded outcomes.

	Attributes:
		name: Display name, non-empty.
		test_func: Zero-argument callable returning an Outcome. Optional
			when all outcomes are recorded manually.
		outcomes: Recorded outcomes in insertion order.
	"""

	__test__: ClassVar[bool] = False

	name: str = Field(description="Case name")
	test_func: TestFunc | None = Field(default=None,
	                                   description="Test function")
	outcomes: list[Outcome] = Field(default_factory=list,
	                                description="Recorded outcomes")

	@field_validator("name")
	@classmethod
	def validate_name(cls, v: str) -> str:
		if not v or not v.strip():
			raise ValueError("name must be a non-empty string")
		return v

	@property
	def has_results(self) -> bool:
		return bool(self.outcomes)

	@property
	def result_count(self) -> int:
		return len(self.outcomes)

	@property
	def should_execute(self) -> bool:
		"""True when a run pass must invoke the test function.

		Manually recorded outcomes take precedence over the function.
		"""
		return self.test_func is not None and not self.outcomes

	def add_result(self, outcome: Outcome | str) -> None:
		"""
		Append one outcome to the log.

		The value is validated before the log is touched, so a failed
		call leaves the case unchanged.

		Parameters:
			outcome: Outcome member or its string value.

		Raises:
			ResultAppendError: If the value is not an outcome or the log
				cannot grow.
		"""
		try:
			status = coerce_outcome(outcome)
		except ValueError as exc:
			raise ResultAppendError(
			    f"cannot record {outcome!r} for {self.name}") from exc
		try:
			self.outcomes.append(status)
		except MemoryError as exc:
			raise ResultAppendError(
			    f"out of memory recording result for {self.name}") from exc

	def add_results(self, *outcomes: Outcome | str) -> None:
		"""
		Append several outcomes in order.

		Stops at the first failure. Outcomes appended before the
		failing one stay recorded.

		Raises:
			ResultAppendError: If no outcomes are given or any append fails.
		"""
		if not outcomes:
			raise ResultAppendError(
			    f"no outcomes given for {self.name}")
		for outcome in outcomes:
			self.add_result(outcome)

	def execute(self) -> Outcome:
		"""Invoke the test function once and record its return value.

		Exceptions raised by the function itself propagate.
		"""
		if self.test_func is None:
			raise ValueError(f"{self.name} has no test function")
		result = self.test_func()
		self.add_result(result)
		return self.outcomes[-1]


__all__ = ["TestCase", "TestFunc", "ResultAppendError"]
