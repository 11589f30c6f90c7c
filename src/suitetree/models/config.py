from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv
from rich.console import Console

if TYPE_CHECKING:
	from .run_params import RunParams

DEFAULT_COLUMN_WIDTH = 50


def load_env(env_file: str | Path | None = None) -> None:
	"""Load environment variables from an `.env` file if present."""
	env_path = Path(env_file) if env_file else Path(".env")
	if env_path.exists():
		load_dotenv(env_path)


class HarnessConfig(BaseSettings):
	"""Report and run settings loaded from environment variables."""

	model_config = SettingsConfigDict(env_prefix="", case_sensitive=False,
	                                  populate_by_name=True)

	column_width: int = Field(
	    DEFAULT_COLUMN_WIDTH,
	    alias="SUITETREE_COLUMN_WIDTH",
	    description="Column at which suite statistics start",
	)
	run_child_suites: bool = Field(
	    True,
	    alias="SUITETREE_RUN_CHILD_SUITES",
	    description="Execute cases of nested suites, not only top-level ones",
	)
	force_color: bool = Field(
	    False,
	    alias="SUITETREE_FORCE_COLOR",
	    description="Emit ANSI colors even when stdout is not a terminal",
	)
	no_color: bool = Field(False, alias="SUITETREE_NO_COLOR",
	                       description="Disable ANSI colors")
	log_level: str = Field("warning", alias="SUITETREE_LOG_LEVEL",
	                       description="Log level")

	@field_validator("column_width")
	@classmethod
	def validate_positive(cls, v: Any) -> Any:
		if int(v) <= 0:
			raise ValueError("column_width must be > 0")
		return v

	def apply_overrides(self, run_params: "RunParams") -> None:
		"""Apply CLI overrides from RunParams onto this config.

		Only non-None fields in run_params are applied, preserving
		environment-based defaults for anything the user didn't set.
		"""
		_OVERRIDES: list[tuple[str, str]] = [
			("column_width", "column_width"),
			("run_child_suites", "run_child_suites"),
		]
		for param_field, config_field in _OVERRIDES:
			value = getattr(run_params, param_field)
			if value is not None:
				setattr(self, config_field, value)
		# --color forces ANSI output, --no-color strips it
		if run_params.color is not None:
			self.force_color = run_params.color
			self.no_color = not run_params.color

	def make_console(self) -> Console:
		"""Build the console the report is written to."""
		return Console(
		    force_terminal=True if self.force_color else None,
		    no_color=self.no_color,
		    highlight=False,
		)


__all__ = ["HarnessConfig", "load_env", "DEFAULT_COLUMN_WIDTH"]
