"""
Tree report rendering.

Draws the suite hierarchy as a box-drawing tree with an aligned
statistics column per suite and one colored glyph per recorded
outcome for every case.
"""

from __future__ import annotations

from typing import Sequence

from rich.cells import cell_len
from rich.console import Console
from rich.text import Text

from suitetree.core.aggregator import recompute_all
from suitetree.models.config import DEFAULT_COLUMN_WIDTH
from suitetree.models.outcome import OUTCOME_DISPLAY, OUTCOME_GROUPS, Outcome
from suitetree.models.stats import SuiteStats
from suitetree.models.suite import TestSuite
from suitetree.models.case import TestCase

BRANCH = "├"
CORNER = "└"
HORIZONTAL = "─"
VERTICAL = "│"

# cell where the second legend entry of each line starts
_LEGEND_SPLIT = 27


def outcome_text(outcome: Outcome) -> Text:
	"""Render one outcome as its colored glyph."""
	display = OUTCOME_DISPLAY[outcome]
	return Text(display.glyph, style=display.style)


def legend_lines() -> list[Text]:
	"""Return the fixed legend, one line per expected/unexpected pair."""
	lines = []
	for expected, unexpected in OUTCOME_GROUPS:
		first = OUTCOME_DISPLAY[expected]
		second = OUTCOME_DISPLAY[unexpected]
		line = Text()
		line.append_text(outcome_text(expected))
		line.append(f" - {first.label}".ljust(_LEGEND_SPLIT - 1))
		line.append_text(outcome_text(unexpected))
		line.append(f" - {second.label}")
		lines.append(line)
	lines.append(Text())
	return lines


def stats_text(stats: SuiteStats) -> Text:
	"""
	Render the six counts as ``K: SS/U  B: EE/B  R: EE/R``.

	The expected count of each pair is right-aligned to two digits.
	"""
	text = Text()
	for i, (expected, unexpected) in enumerate(OUTCOME_GROUPS):
		if i:
			text.append("  ")
		text.append(f"{OUTCOME_DISPLAY[expected].glyph}: ")
		text.append(f"{stats.count(expected):2d}",
		            style=OUTCOME_DISPLAY[expected].style)
		text.append("/")
		text.append(f"{stats.count(unexpected)}",
		            style=OUTCOME_DISPLAY[unexpected].style)
	return text


def _connector(is_last: bool) -> str:
	return (CORNER if is_last else BRANCH) + HORIZONTAL


class TreeRenderer:
	"""
	Depth-first printer for a forest of suites.

	Rendering never mutates the tree. ``print_results`` is the entry
	point that refreshes statistics before printing.
	"""

	def __init__(self, column_width: int = DEFAULT_COLUMN_WIDTH,
	             console: Console | None = None):
		if column_width <= 0:
			raise ValueError("column_width must be > 0")
		self.column_width = column_width
		# ANSI colors are always emitted unless a console is supplied
		self.console = console or Console(
		    force_terminal=True, color_system="standard", highlight=False)

	def suite_header(self, suite: TestSuite, prefix: str,
	                 is_last: bool) -> Text:
		"""Render a suite's name line with its padded statistics."""
		line = Text(f"{prefix}{_connector(is_last)}{suite.name}")
		padding = max(1, self.column_width - cell_len(line.plain))
		line.append(" " * padding)
		line.append_text(stats_text(suite.stats))
		return line

	def case_line(self, case: TestCase, prefix: str, is_last: bool) -> Text:
		"""Render a case's name followed by its outcome glyphs."""
		line = Text(f"{prefix}{_connector(is_last)}{case.name}: ")
		for i, outcome in enumerate(case.outcomes):
			if i:
				line.append(" ")
			line.append_text(outcome_text(outcome))
		return line

	def suite_lines(self, suite: TestSuite, prefix: str = "",
	                is_last: bool = True) -> list[Text]:
		"""
		Render a suite subtree, pre-order.

		Child suites come first, then the suite's own cases at the
		same depth. A case is drawn as last only when it is the final
		case of a suite without child suites.
		"""
		lines = [self.suite_header(suite, prefix, is_last)]
		child_prefix = f"{prefix}{' ' if is_last else VERTICAL} "

		for i, child in enumerate(suite.children):
			lines.extend(
			    self.suite_lines(child, child_prefix,
			                     i == len(suite.children) - 1))

		for i, case in enumerate(suite.cases):
			last_case = (i == len(suite.cases) - 1 and not suite.children)
			lines.append(self.case_line(case, child_prefix, last_case))
		return lines

	def render_lines(self, suites: Sequence[TestSuite]) -> list[Text]:
		"""Render legend and tree for a forest without touching stats."""
		if not suites:
			return []
		lines = legend_lines()
		for i, suite in enumerate(suites):
			lines.extend(self.suite_lines(suite, "", i == len(suites) - 1))
		return lines

	def print_legend(self) -> None:
		for line in legend_lines():
			self.console.print(line, soft_wrap=True)

	def print_results(self, suites: Sequence[TestSuite]) -> SuiteStats:
		"""
		Recompute statistics for every suite, then print the report.

		Parameters:
			suites: Top-level suites in report order.

		Returns:
			Grand total over all suites.
		"""
		total = recompute_all(suites)
		for line in self.render_lines(suites):
			self.console.print(line, soft_wrap=True)
		return total


__all__ = [
    "TreeRenderer",
    "legend_lines",
    "stats_text",
    "outcome_text",
]
