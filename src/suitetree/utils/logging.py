"""
Logging configuration module.

Provides centralized logging setup with configurable log levels and
consistent formatting. Records go to stderr so they never mix with
the report printed on stdout.
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "warning") -> None:
	"""
	Configure basic logging with level and format.

	Parameters:
		level: Log level string (e.g., "info", "debug", "warning").
	"""
	lvl = logging._nameToLevel.get(level.upper(), logging.WARNING)
	logging.basicConfig(level=lvl, format=LOG_FORMAT, stream=sys.stderr)
	logging.getLogger("suitetree").setLevel(lvl)


def get_logger(name: str) -> logging.Logger:
	"""
	Get a logger for the specified module.

	Parameters:
		name: The logger name, typically __name__.

	Returns:
		Configured logger instance.
	"""
	return logging.getLogger(name)


__all__ = ["configure_logging", "get_logger", "LOG_FORMAT"]
