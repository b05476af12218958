"""Terminal-cell layout oracle."""

from __future__ import annotations

import unicodedata

from seemore.core.models import TextStyle

from .base import LineBreakingOracle


def char_cells(ch: str) -> int:
    """Number of terminal cells *ch* occupies (0, 1 or 2)."""
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in ("W", "F"):
        return 2
    return 1


class MonospaceOracle(LineBreakingOracle):
    """Measures text in fixed-width cells; the style is ignored.

    Every code point is one cell wide except East Asian wide characters
    (two cells) and combining marks (zero). Deterministic, so it doubles
    as the reference stub for the truncation engine.
    """

    def __init__(self, cell_width: float = 1.0, line_height: float = 1.0) -> None:
        self._cell_width = cell_width
        self._line_height = line_height

    def run_width(self, text: str, style: TextStyle) -> float:
        return sum(char_cells(ch) for ch in text) * self._cell_width

    def line_height(self, style: TextStyle) -> float:
        return self._line_height
