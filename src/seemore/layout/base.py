"""Layout oracle protocol, exceptions and the shared greedy line breaker.

The truncation engine never measures text itself. It asks a
``LayoutOracle`` two questions: does this text overflow the given
constraints, and which character offset sits at a given point. Anything
that can answer those (a GUI toolkit's paragraph, a terminal, a font
rasteriser) can drive it.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Protocol

from seemore.core.models import (
    LayoutConstraints,
    LayoutMetrics,
    Point,
    Size,
    TextAlign,
    TextDirection,
    TextStyle,
)

# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class SeeMoreError(Exception):
    """Base class for errors raised by the package."""


class FontLoadError(SeeMoreError):
    """Raised when a font cannot be loaded for measurement."""


# ---------------------------------------------------------------------------
# Protocol
# ---------------------------------------------------------------------------


class LayoutOracle(Protocol):
    """Structural protocol for anything that can lay out styled text."""

    def measure(
        self, text: str, style: TextStyle, constraints: LayoutConstraints
    ) -> LayoutMetrics: ...

    def offset_at_point(
        self,
        text: str,
        style: TextStyle,
        constraints: LayoutConstraints,
        point: Point,
    ) -> int: ...


# ---------------------------------------------------------------------------
# Greedy line breaker
# ---------------------------------------------------------------------------

# A run of leading whitespace, or a word with the whitespace that follows it.
_CHUNK_REGEX = re.compile(r"\s+|\S+\s*")


@dataclass(frozen=True)
class LineBox:
    """One laid-out line: ``text[start:end]``, hard break excluded.

    ``width`` ignores trailing whitespace, which hangs past the edge.
    """

    start: int
    end: int
    width: float


class LineBreakingOracle(ABC):
    """Greedy word-wrapping oracle over an abstract run-width measure.

    Subclasses only say how wide a run of text is and how tall a line is.
    Lines break on ``\\n``, then at whitespace; a word wider than the line
    is broken between characters, never leaving a line empty.
    """

    @abstractmethod
    def run_width(self, text: str, style: TextStyle) -> float:
        """Advance width of *text* laid out on a single line."""

    @abstractmethod
    def line_height(self, style: TextStyle) -> float:
        """Height of one line of text in *style*."""

    # -- line breaking -----------------------------------------------------

    def break_lines(
        self, text: str, style: TextStyle, max_width: float
    ) -> list[LineBox]:
        lines: list[LineBox] = []
        pos = 0
        for paragraph in text.split("\n"):
            end = pos + len(paragraph)
            lines.extend(self._break_paragraph(text, pos, end, style, max_width))
            pos = end + 1
        return lines

    def _break_paragraph(
        self, text: str, start: int, end: int, style: TextStyle, max_width: float
    ) -> list[LineBox]:
        lines: list[LineBox] = []
        line_start = start
        cursor = start
        for chunk in _CHUNK_REGEX.finditer(text, start, end):
            chunk_end = chunk.end()
            if self._visible_width(text, line_start, chunk_end, style) <= max_width:
                cursor = chunk_end
                continue
            if cursor > line_start:
                lines.append(self._line(text, line_start, cursor, style))
                line_start = cursor
            while self._visible_width(text, line_start, chunk_end, style) > max_width:
                cut = self._fit_chars(text, line_start, chunk_end, style, max_width)
                if cut >= chunk_end:
                    # An over-wide last glyph stays on the open line.
                    break
                lines.append(self._line(text, line_start, cut, style))
                line_start = cut
            cursor = chunk_end
        lines.append(self._line(text, line_start, end, style))
        return lines

    def _fit_chars(
        self, text: str, start: int, end: int, style: TextStyle, max_width: float
    ) -> int:
        """Largest cut in ``(start, end]`` whose run fits; at least one character.

        Whitespace right after the cut hangs, so it is taken along.
        """
        cut = start + 1
        while cut < end and self._visible_width(text, start, cut + 1, style) <= max_width:
            cut += 1
        while cut < end and text[cut].isspace():
            cut += 1
        return cut

    def _visible_width(self, text: str, start: int, end: int, style: TextStyle) -> float:
        return self.run_width(text[start:end].rstrip(), style)

    def _line(self, text: str, start: int, end: int, style: TextStyle) -> LineBox:
        return LineBox(start=start, end=end, width=self._visible_width(text, start, end, style))

    # -- LayoutOracle ------------------------------------------------------

    def measure(
        self, text: str, style: TextStyle, constraints: LayoutConstraints
    ) -> LayoutMetrics:
        lines = self.break_lines(text, style, constraints.max_width)
        visible = self._visible_lines(lines, constraints)
        return LayoutMetrics(
            overflowed=len(visible) < len(lines),
            size=Size(
                width=max((line.width for line in visible), default=0.0),
                height=len(visible) * self.line_height(style),
            ),
            line_count=len(visible),
        )

    def offset_at_point(
        self,
        text: str,
        style: TextStyle,
        constraints: LayoutConstraints,
        point: Point,
    ) -> int:
        visible = self._visible_lines(
            self.break_lines(text, style, constraints.max_width), constraints
        )
        index = int(point.y // self.line_height(style))
        line = visible[min(max(index, 0), len(visible) - 1)]

        origin = _line_origin(line, constraints)
        if constraints.direction is TextDirection.RTL:
            x = origin + line.width - point.x
        else:
            x = point.x - origin
        return self._offset_in_line(text, line, style, x)

    def _offset_in_line(self, text: str, line: LineBox, style: TextStyle, x: float) -> int:
        if x <= 0:
            return line.start
        previous = 0.0
        for index in range(line.start, line.end):
            width = self.run_width(text[line.start : index + 1], style)
            if x < (previous + width) / 2:
                return index
            previous = width
        return line.end

    @staticmethod
    def _visible_lines(
        lines: list[LineBox], constraints: LayoutConstraints
    ) -> list[LineBox]:
        if constraints.max_lines is None:
            return lines
        return lines[: constraints.max_lines]


def _line_origin(line: LineBox, constraints: LayoutConstraints) -> float:
    """X coordinate of the left edge of *line* inside the layout box."""
    align = constraints.align
    rtl = constraints.direction is TextDirection.RTL
    if align is TextAlign.START:
        align = TextAlign.RIGHT if rtl else TextAlign.LEFT
    elif align is TextAlign.END:
        align = TextAlign.LEFT if rtl else TextAlign.RIGHT

    slack = max(constraints.max_width - line.width, 0.0)
    if align is TextAlign.RIGHT:
        return slack
    if align is TextAlign.CENTER:
        return slack / 2
    return 0.0
