from typing import List, Literal

from pydantic import BaseModel, Field

from seemore.core.constants import (
    DEFAULT_ACCENT_COLOR,
    DEFAULT_ANIMATION_DURATION_MS,
    DEFAULT_ELLIPSIS,
    DEFAULT_MAX_LINES,
    DEFAULT_SEE_LESS_TEXT,
    DEFAULT_SEE_MORE_TEXT,
    DEFAULT_SPACER,
    DEFAULT_TEXT_COLOR,
    MIN_LINES,
    STRATEGY_PRECISION,
)
from seemore.core.models import AnimationCurve, TextAlign


class DisplayConfig(BaseModel):
    """Default widget behaviour applied when a caller does not override it."""

    max_lines: int = Field(
        default=DEFAULT_MAX_LINES,
        ge=MIN_LINES,
        description="Lines shown while collapsed",
    )
    see_more_label: str = Field(
        default=DEFAULT_SEE_MORE_TEXT, description="Label that expands the text"
    )
    see_less_label: str = Field(
        default=DEFAULT_SEE_LESS_TEXT, description="Label that collapses the text"
    )
    ellipsis: str = Field(
        default=DEFAULT_ELLIPSIS, description="Inserted before the see more label"
    )
    spacer: str = Field(
        default=DEFAULT_SPACER, description="Inserted before the see less label"
    )
    text_align: TextAlign = Field(default=TextAlign.START)
    enable_text_tap_toggle: bool = Field(
        default=True, description="Tapping plain text also toggles"
    )
    enable_selection: bool = Field(default=True, description="Allow text selection")
    truncation_strategy: str = Field(
        default=STRATEGY_PRECISION,
        description="'precision' (binary search) or 'fast_corner' (single query)",
    )
    reserve_toggle_line: bool = Field(
        default=False,
        description="Allow one extra line while collapsed for the toggle label",
    )
    animation_duration_ms: int = Field(
        default=DEFAULT_ANIMATION_DURATION_MS, ge=0, description="Expand/collapse duration"
    )
    animation_curve: AnimationCurve = Field(default="ease_in_out")
    processors: List[str] = Field(
        default_factory=list,
        description="Text processors applied to raw input, e.g. ['html_clean']",
    )


class ThemeConfig(BaseModel):
    """Ambient styling used when a widget has no explicit style."""

    text_color: str = Field(default=DEFAULT_TEXT_COLOR)
    accent_color: str = Field(
        default=DEFAULT_ACCENT_COLOR, description="Tint for links and toggle labels"
    )
    font_family: str | None = Field(default=None)
    font_path: str | None = Field(default=None, description="TrueType font file")
    font_size: float = Field(default=14.0, gt=0)


class LayoutConfig(BaseModel):
    """Which layout oracle measures text."""

    oracle: Literal["monospace", "pillow"] = Field(
        default="monospace", description="Measurement backend"
    )
    cell_width: float = Field(default=1.0, gt=0, description="Monospace cell width")
    line_height: float = Field(default=1.0, gt=0, description="Monospace line height")


class LoggingConfig(BaseModel):
    """Logging output configuration."""

    level: str = Field(default="INFO", description="Root log level")
    json_output: bool = Field(
        default=False, description="Emit JSON lines instead of human-readable logs"
    )
