"""Assemble scanner spans and toggle affordances into a Presentation."""

from __future__ import annotations

from typing import Optional, Sequence

from .models import (
    Presentation,
    Span,
    SpanAction,
    SpanKind,
    TextStyle,
    WidgetConfig,
)

_TOKEN_ACTIONS = {
    SpanKind.URL: SpanAction.OPEN_URL,
    SpanKind.HASHTAG: SpanAction.OPEN_HASHTAG,
    SpanKind.MENTION: SpanAction.OPEN_MENTION,
}


def effective_line_cap(
    max_lines: int, expanded: bool, overflowing: bool, reserve_toggle_line: bool
) -> Optional[int]:
    """Line cap handed to the view layer; ``None`` means unbounded."""
    if expanded and overflowing:
        return None
    if overflowing and reserve_toggle_line:
        return max_lines + 1
    return max_lines


class PresentationAssembler:
    """Builds the final span sequence for one widget configuration.

    Tokens keep their own tap action, so tapping one never also toggles;
    plain runs toggle only when whole-text tapping is enabled and the text
    actually overflows. The see more / see less label always toggles.
    """

    def __init__(
        self, config: WidgetConfig, text_style: TextStyle, link_style: TextStyle
    ) -> None:
        self._config = config
        self._text_style = text_style
        self._link_style = link_style

    def assemble(
        self,
        display_text: str,
        tokens: Sequence[Span],
        expanded: bool,
        overflowing: bool,
        needs_suffix: bool = True,
    ) -> Presentation:
        config = self._config
        text_tap = (
            SpanAction.TOGGLE
            if config.enable_text_tap_toggle and overflowing
            else None
        )
        spans = [self._bind(token, text_tap) for token in tokens]

        if overflowing:
            if expanded:
                affordance = [
                    (config.spacer, SpanKind.PLAIN),
                    (config.see_less_label, SpanKind.TOGGLE_LABEL),
                ]
            else:
                affordance = [(config.see_more_label, SpanKind.TOGGLE_LABEL)]
                if needs_suffix:
                    affordance.insert(0, (config.ellipsis, SpanKind.PLAIN))
            spans.extend(self._affordance_spans(affordance, len(display_text)))

        return Presentation(
            text="".join(span.text for span in spans),
            spans=tuple(spans),
            max_lines=effective_line_cap(
                config.max_lines, expanded, overflowing, config.reserve_toggle_line
            ),
            is_overflowing=overflowing,
            is_expanded=expanded,
            selectable=config.enable_selection,
            text_align=config.text_align,
            text_style=self._text_style,
            animation=config.animation,
        )

    def _bind(self, token: Span, text_tap: Optional[SpanAction]) -> Span:
        if token.kind in _TOKEN_ACTIONS:
            return token.model_copy(
                update={"action": _TOKEN_ACTIONS[token.kind], "style": self._link_style}
            )
        return token.model_copy(update={"action": text_tap, "style": self._text_style})

    def _affordance_spans(
        self, pieces: list[tuple[str, SpanKind]], start: int
    ) -> list[Span]:
        spans = []
        cursor = start
        for text, kind in pieces:
            if not text:
                continue
            is_label = kind is SpanKind.TOGGLE_LABEL
            spans.append(
                Span(
                    text=text,
                    kind=kind,
                    start=cursor,
                    end=cursor + len(text),
                    action=SpanAction.TOGGLE if is_label else None,
                    style=self._link_style if is_label else self._text_style,
                )
            )
            cursor += len(text)
        return spans
