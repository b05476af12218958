"""Explicit style resolution; no ambient context is read implicitly."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .constants import DEFAULT_ACCENT_COLOR, DEFAULT_TEXT_COLOR
from .models import TextStyle


class Theme(BaseModel):
    """Ambient styling a host supplies to every widget it renders."""

    model_config = ConfigDict(frozen=True)

    default_text_style: TextStyle = Field(default_factory=TextStyle)
    text_color: str = DEFAULT_TEXT_COLOR
    accent_color: str = DEFAULT_ACCENT_COLOR

    @classmethod
    def from_theme_config(cls, theme) -> "Theme":
        return cls(
            default_text_style=TextStyle(
                font_family=theme.font_family,
                font_path=theme.font_path,
                font_size=theme.font_size,
            ),
            text_color=theme.text_color,
            accent_color=theme.accent_color,
        )


def resolve_style(
    explicit: Optional[TextStyle],
    ambient_default: TextStyle,
    theme_accent: Optional[str] = None,
) -> TextStyle:
    """Return *explicit* if set, else *ambient_default* tinted with *theme_accent*."""
    if explicit is not None:
        return explicit
    if theme_accent is not None:
        return ambient_default.model_copy(update={"color": theme_accent})
    return ambient_default


def resolve_text_and_link_styles(
    text_style: Optional[TextStyle],
    link_style: Optional[TextStyle],
    theme: Theme,
) -> tuple[TextStyle, TextStyle]:
    effective_text = resolve_style(text_style, theme.default_text_style, theme.text_color)
    effective_link = resolve_style(link_style, effective_text, theme.accent_color)
    return effective_text, effective_link
