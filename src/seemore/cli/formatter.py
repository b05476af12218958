"""Terminal renderer for Presentations."""

from typing import TextIO

from seemore.core.models import Presentation, Span, SpanKind, TextStyle
from seemore.layout.base import LineBreakingOracle

ANSI_RESET = "\033[0m"
_KIND_COLORS = {
    SpanKind.URL: "\033[4;34m",  # underlined blue
    SpanKind.HASHTAG: "\033[36m",
    SpanKind.MENTION: "\033[35m",
    SpanKind.TOGGLE_LABEL: "\033[1;33m",
}


class SpanFormatter:
    """Writes a Presentation to a text stream, wrapped like the oracle wraps it."""

    def __init__(
        self, output: TextIO, oracle: LineBreakingOracle, use_color: bool = True
    ):
        """Initialize the formatter.

        Parameters
        ----------
        output
            File-like object to write rendered lines to.
        oracle
            Oracle whose line breaker decides where lines wrap; it must be
            the one the widget truncated against.
        use_color
            Whether to colour tokens and toggle labels with ANSI codes.
        """
        self.output = output
        self.oracle = oracle
        self.use_color = use_color

    def render(self, presentation: Presentation, width: float) -> None:
        style = presentation.text_style or TextStyle()
        lines = self.oracle.break_lines(presentation.text, style, width)
        if presentation.max_lines is not None:
            lines = lines[: presentation.max_lines]
        for line in lines:
            self._print(self._paint(presentation, line.start, line.end).rstrip() + "\n")

    def render_tokens(self, presentation: Presentation) -> None:
        """List the tappable tokens with the index ``tap`` commands use."""
        for index, span in enumerate(tappable_spans(presentation)):
            self._print(f"  [{index}] {span.kind.value}: {span.text}\n")

    def _paint(self, presentation: Presentation, start: int, end: int) -> str:
        parts = []
        for span in presentation.spans:
            lo, hi = max(span.start, start), min(span.end, end)
            if lo >= hi:
                continue
            parts.append(self._style(presentation.text[lo:hi], span))
        return "".join(parts)

    def _style(self, segment: str, span: Span) -> str:
        color = _KIND_COLORS.get(span.kind)
        if not self.use_color or color is None:
            return segment
        return f"{color}{segment}{ANSI_RESET}"

    def _print(self, text: str) -> None:
        """Print text to output."""
        self.output.write(text)


def tappable_spans(presentation: Presentation) -> list[Span]:
    return [span for span in presentation.spans if span.is_token or span.kind is SpanKind.TOGGLE_LABEL]
