"""
Run parameters model.

Defines validated CLI parameters for a harness run.
"""

from __future__ import annotations

import re
from typing import Optional
from pydantic import BaseModel, Field, field_validator

TARGET_RE = re.compile(
    r"^[A-Za-z_][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*)*"
    r":[A-Za-z_][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*)*$")


class RunParams(BaseModel):
	"""Validated run parameters for the CLI."""

	target: str = Field(description="module:attribute of the runner")
	column_width: Optional[int] = Field(default=None,
	                                    description="Override column width")
	run_child_suites: Optional[bool] = Field(
	    default=None, description="Override nested suite execution")
	color: Optional[bool] = Field(default=None,
	                              description="Force or disable colors")
	strict: bool = Field(default=False,
	                     description="Exit non-zero on unexpected outcomes")

	@field_validator("target")
	@classmethod
	def validate_target(cls, v: str) -> str:
		v = v.strip()
		if not TARGET_RE.match(v):
			raise ValueError("target must look like package.module:attribute")
		return v

	@field_validator("column_width")
	@classmethod
	def validate_positive(cls, v: Optional[int]) -> Optional[int]:
		if v is None:
			return v
		if v <= 0:
			raise ValueError("column_width must be > 0")
		return v

	@property
	def module_name(self) -> str:
		return self.target.split(":", 1)[0]

	@property
	def attribute(self) -> str:
		return self.target.split(":", 1)[1]


__all__ = ["RunParams"]
