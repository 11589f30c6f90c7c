"""User interface components.

This subpackage provides terminal rendering of the suite tree.

Key modules:
    - tree: Rich-based tree report with aligned statistics
"""

from suitetree.ui.tree import (
    TreeRenderer,
    legend_lines,
    stats_text,
    outcome_text,
)

__all__ = [
    "TreeRenderer",
    "legend_lines",
    "stats_text",
    "outcome_text",
]
