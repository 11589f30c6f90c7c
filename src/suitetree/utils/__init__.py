"""Shared utility functions.

Key modules:
    - logging: Logging configuration
    - loading: Resolving module:attribute targets to a TestRunner
"""

from .logging import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
]
