"""Value types shared by the scanner, truncation engine and assembler."""

from __future__ import annotations

from enum import Enum
from typing import Callable, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .constants import (
    DEFAULT_ANIMATION_DURATION_MS,
    DEFAULT_ELLIPSIS,
    DEFAULT_MAX_LINES,
    DEFAULT_SEE_LESS_TEXT,
    DEFAULT_SEE_MORE_TEXT,
    DEFAULT_SPACER,
    MIN_LINES,
    STRATEGY_PRECISION,
)

UrlTapCallback = Callable[[str], None]
HashtagTapCallback = Callable[[str], None]
MentionTapCallback = Callable[[str], None]
ToggleCallback = Callable[[bool], None]


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class SpanKind(str, Enum):
    PLAIN = "plain"
    URL = "url"
    HASHTAG = "hashtag"
    MENTION = "mention"
    TOGGLE_LABEL = "toggle_label"


class SpanAction(str, Enum):
    """Opaque tap action carried by a span; the view layer binds it."""

    OPEN_URL = "open_url"
    OPEN_HASHTAG = "open_hashtag"
    OPEN_MENTION = "open_mention"
    TOGGLE = "toggle"


class TextDirection(str, Enum):
    LTR = "ltr"
    RTL = "rtl"


class TextAlign(str, Enum):
    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"
    JUSTIFY = "justify"
    START = "start"
    END = "end"


AnimationCurve = Literal["linear", "ease_in", "ease_out", "ease_in_out"]


# ---------------------------------------------------------------------------
# Geometry and style
# ---------------------------------------------------------------------------


class Size(BaseModel):
    model_config = ConfigDict(frozen=True)

    width: float = 0.0
    height: float = 0.0


class Point(BaseModel):
    model_config = ConfigDict(frozen=True)

    x: float
    y: float


class TextStyle(BaseModel):
    """Style descriptor; only a layout oracle interprets the font fields."""

    model_config = ConfigDict(frozen=True)

    font_family: Optional[str] = Field(default=None, description="Font family name")
    font_path: Optional[str] = Field(
        default=None, description="Path to a TrueType/OpenType font file"
    )
    font_size: float = Field(default=14.0, gt=0, description="Font size in pixels")
    color: Optional[str] = Field(default=None, description="Foreground colour")
    font_weight: Optional[str] = Field(default=None, description="e.g. 'bold'")
    line_height: float = Field(
        default=1.0, gt=0, description="Line height multiplier"
    )


class LayoutConstraints(BaseModel):
    """Immutable constraints for a single oracle query."""

    model_config = ConfigDict(frozen=True)

    max_width: float = Field(gt=0, description="Available width")
    max_lines: Optional[int] = Field(
        default=None, ge=MIN_LINES, description="Line cap; None means unbounded"
    )
    direction: TextDirection = TextDirection.LTR
    align: TextAlign = TextAlign.START


class LayoutMetrics(BaseModel):
    """Answer to a ``measure`` query."""

    model_config = ConfigDict(frozen=True)

    overflowed: bool
    size: Size
    line_count: int = Field(description="Visible lines after applying the cap")


# ---------------------------------------------------------------------------
# Spans and results
# ---------------------------------------------------------------------------


class Span(BaseModel):
    """A typed, positioned substring of a source or display string."""

    model_config = ConfigDict(frozen=True)

    text: str
    kind: SpanKind = SpanKind.PLAIN
    start: int = Field(ge=0)
    end: int = Field(ge=0)
    action: Optional[SpanAction] = None
    style: Optional[TextStyle] = None

    @model_validator(mode="after")
    def _check_range(self) -> "Span":
        if self.end - self.start != len(self.text):
            raise ValueError(
                f"span range [{self.start}, {self.end}) does not match "
                f"text of length {len(self.text)}"
            )
        return self

    @property
    def is_token(self) -> bool:
        return self.kind in (SpanKind.URL, SpanKind.HASHTAG, SpanKind.MENTION)


class TruncationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    truncated_text: str = Field(min_length=1)
    needs_ellipsis_suffix: bool = True


class AnimationSpec(BaseModel):
    """Expand/collapse animation description, interpolated by the view layer."""

    model_config = ConfigDict(frozen=True)

    duration_ms: int = Field(default=DEFAULT_ANIMATION_DURATION_MS, ge=0)
    curve: AnimationCurve = "ease_in_out"


class ToggleState(BaseModel):
    expanded: bool = False


# ---------------------------------------------------------------------------
# Widget configuration and output
# ---------------------------------------------------------------------------


class WidgetConfig(BaseModel):
    """Everything one SeeMoreText instance is configured with.

    Compared by value, so an unchanged config never invalidates caches.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    text: str
    max_lines: int = Field(default=DEFAULT_MAX_LINES, ge=MIN_LINES)
    text_style: Optional[TextStyle] = None
    link_style: Optional[TextStyle] = None
    see_more_label: str = DEFAULT_SEE_MORE_TEXT
    see_less_label: str = DEFAULT_SEE_LESS_TEXT
    ellipsis: str = DEFAULT_ELLIPSIS
    spacer: str = DEFAULT_SPACER
    on_url_tap: Optional[UrlTapCallback] = None
    on_hashtag_tap: Optional[HashtagTapCallback] = None
    on_mention_tap: Optional[MentionTapCallback] = None
    on_toggle: Optional[ToggleCallback] = None
    text_align: TextAlign = TextAlign.START
    enable_text_tap_toggle: bool = True
    enable_selection: bool = True
    animation: AnimationSpec = Field(default_factory=AnimationSpec)
    truncation_strategy: str = STRATEGY_PRECISION
    reserve_toggle_line: bool = Field(
        default=False,
        description="Allow max_lines + 1 while collapsed so the label is never clipped",
    )
    processors: tuple[str, ...] = Field(
        default=(), description="Text processors applied to the raw text"
    )

    @classmethod
    def from_display_config(cls, display, *, text: str, **overrides) -> "WidgetConfig":
        """Build a config from ``DisplayConfig`` defaults plus overrides."""
        values = {
            "text": text,
            "max_lines": display.max_lines,
            "see_more_label": display.see_more_label,
            "see_less_label": display.see_less_label,
            "ellipsis": display.ellipsis,
            "spacer": display.spacer,
            "text_align": display.text_align,
            "enable_text_tap_toggle": display.enable_text_tap_toggle,
            "enable_selection": display.enable_selection,
            "animation": AnimationSpec(
                duration_ms=display.animation_duration_ms,
                curve=display.animation_curve,
            ),
            "truncation_strategy": display.truncation_strategy,
            "reserve_toggle_line": display.reserve_toggle_line,
            "processors": tuple(display.processors),
        }
        values.update(overrides)
        return cls(**values)


class Presentation(BaseModel):
    """Result of one layout pass, ready for a view layer to draw."""

    model_config = ConfigDict(frozen=True)

    text: str
    spans: tuple[Span, ...]
    max_lines: Optional[int]
    is_overflowing: bool
    is_expanded: bool
    selectable: bool = True
    text_align: TextAlign = TextAlign.START
    text_style: Optional[TextStyle] = None
    animation: AnimationSpec = Field(default_factory=AnimationSpec)
