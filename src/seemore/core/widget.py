"""SeeMoreText: per-instance glue between config, state and the core."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from seemore.infra.processor_utils import apply_processors
from seemore.layout.base import LayoutOracle

from .assembler import PresentationAssembler
from .cache import TruncationCache, TruncationKey
from .models import Presentation, Span, SpanAction, TextDirection, WidgetConfig
from .scanner import TokenScanner
from .styles import Theme, resolve_text_and_link_styles
from .toggle import ToggleController
from .truncation import TruncationEngine

logger = logging.getLogger(__name__)


class SeeMoreText:
    """Collapsible, linkified text for one mounted widget.

    Owns its toggle state and truncation cache; nothing is shared between
    instances. A host calls :meth:`layout` whenever the widget is shown,
    the available width changes, or the config changes, and forwards taps
    on spans to :meth:`tap`. Toggling re-renders at the last width through
    ``on_rebuild``.
    """

    def __init__(
        self,
        config: WidgetConfig,
        oracle: LayoutOracle,
        *,
        theme: Optional[Theme] = None,
        on_rebuild: Optional[Callable[[Presentation], None]] = None,
        scanner: Optional[TokenScanner] = None,
    ) -> None:
        self._oracle = oracle
        self._theme = theme or Theme()
        self._scanner = scanner or TokenScanner()
        self._cache = TruncationCache()
        self._toggle = ToggleController(
            on_change=self._handle_toggle, animation=config.animation
        )
        self.on_rebuild = on_rebuild

        self._source: Optional[tuple[str, tuple[str, ...]]] = None
        self._processed_text = ""
        self._last_width: Optional[float] = None
        self._last_direction = TextDirection.LTR
        self._config = config
        self._configure(config)

    # -- configuration -----------------------------------------------------

    @property
    def config(self) -> WidgetConfig:
        return self._config

    @property
    def expanded(self) -> bool:
        return self._toggle.expanded

    @property
    def toggle_controller(self) -> ToggleController:
        return self._toggle

    @property
    def cache(self) -> TruncationCache:
        return self._cache

    @property
    def processed_text(self) -> str:
        return self._processed_text

    def update(self, config: WidgetConfig) -> None:
        """Swap in a new config; the toggle state survives."""
        if config == self._config:
            return
        self._config = config
        self._configure(config)

    def _configure(self, config: WidgetConfig) -> None:
        source = (config.text, config.processors)
        if source != self._source:
            self._source = source
            self._processed_text = apply_processors(config.text, config.processors)
        self._text_style, self._link_style = resolve_text_and_link_styles(
            config.text_style, config.link_style, self._theme
        )
        self._engine = TruncationEngine(self._oracle, config.truncation_strategy)
        self._assembler = PresentationAssembler(config, self._text_style, self._link_style)
        self._toggle.animation = config.animation

    # -- layout ------------------------------------------------------------

    def layout(
        self, max_width: float, direction: TextDirection = TextDirection.LTR
    ) -> Presentation:
        """Run one layout pass at *max_width*."""
        self._last_width = max_width
        self._last_direction = direction
        config = self._config
        text = self._processed_text

        key = TruncationKey(
            text=text,
            style=self._text_style,
            width=max_width,
            max_lines=config.max_lines,
            label=config.see_more_label,
            ellipsis=config.ellipsis,
            direction=direction,
            align=config.text_align,
            strategy=self._engine.strategy_name,
        )
        truncation = self._cache.get_or_compute(
            key,
            lambda: self._engine.compute(
                text,
                self._text_style,
                max_width,
                config.max_lines,
                config.see_more_label,
                ellipsis=config.ellipsis,
                direction=direction,
                align=config.text_align,
            ),
        )

        overflowing = truncation is not None
        expanded = self._toggle.expanded
        if overflowing and not expanded:
            display_text = truncation.truncated_text
            needs_suffix = truncation.needs_ellipsis_suffix
        else:
            display_text = text
            needs_suffix = True

        return self._assembler.assemble(
            display_text,
            self._scanner.scan(display_text),
            expanded=expanded,
            overflowing=overflowing,
            needs_suffix=needs_suffix,
        )

    # -- interaction -------------------------------------------------------

    def toggle(self) -> bool:
        return self._toggle.toggle()

    def tap(self, span: Span) -> None:
        """Dispatch a tap on *span* to the matching callback."""
        config = self._config
        action = span.action
        if action is None:
            return
        if action is SpanAction.TOGGLE:
            self._toggle.toggle()
        elif action is SpanAction.OPEN_URL:
            if config.on_url_tap is not None:
                config.on_url_tap(span.text)
        elif action is SpanAction.OPEN_HASHTAG:
            if config.on_hashtag_tap is not None:
                config.on_hashtag_tap(span.text)
        elif action is SpanAction.OPEN_MENTION:
            if config.on_mention_tap is not None:
                config.on_mention_tap(span.text)

    def _handle_toggle(self, expanded: bool) -> None:
        logger.debug("SeeMoreText %s", "expanded" if expanded else "collapsed")
        if self._config.on_toggle is not None:
            self._config.on_toggle(expanded)
        if self.on_rebuild is not None and self._last_width is not None:
            self.on_rebuild(self.layout(self._last_width, self._last_direction))
