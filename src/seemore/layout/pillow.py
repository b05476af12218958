"""Proportional layout oracle backed by Pillow font metrics."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional, Union

from PIL import ImageFont

from seemore.core.models import TextStyle

from .base import FontLoadError, LineBreakingOracle

logger = logging.getLogger(__name__)

Font = Union[ImageFont.FreeTypeFont, ImageFont.ImageFont]


@lru_cache(maxsize=32)
def load_font(font_path: Optional[str], size: float) -> Font:
    """Load (and cache) a font; Pillow's bundled font when *font_path* is None."""
    try:
        if font_path:
            font = ImageFont.truetype(font_path, size=size)
        else:
            font = ImageFont.load_default(size=size)
    except OSError as exc:
        raise FontLoadError(f"Cannot load font '{font_path}': {exc}") from exc
    logger.debug("Loaded font %s at %.1fpx", font_path or "<default>", size)
    return font


class PillowOracle(LineBreakingOracle):
    """Measures glyph advances with ``ImageFont.getlength``.

    ``TextStyle.font_path`` selects a TrueType/OpenType file; without one
    the default font Pillow ships is used at ``TextStyle.font_size``.
    """

    def font_for(self, style: TextStyle) -> Font:
        return load_font(style.font_path, style.font_size)

    def run_width(self, text: str, style: TextStyle) -> float:
        if not text:
            return 0.0
        return float(self.font_for(style).getlength(text))

    def line_height(self, style: TextStyle) -> float:
        font = self.font_for(style)
        if isinstance(font, ImageFont.FreeTypeFont):
            ascent, descent = font.getmetrics()
            height = ascent + descent
        else:
            _, top, _, bottom = font.getbbox("Ag")
            height = bottom - top
        return float(height) * style.line_height
