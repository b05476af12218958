"""Collapsible "see more" text with clickable URLs, hashtags and mentions."""

from seemore.core.models import (
    Presentation,
    Span,
    SpanAction,
    SpanKind,
    TextStyle,
    TruncationResult,
    WidgetConfig,
)
from seemore.core.styles import Theme, resolve_style
from seemore.core.truncation import TruncationEngine
from seemore.core.widget import SeeMoreText
from seemore.infra.processor_utils import clean as clean_html
from seemore.layout import LayoutOracle, MonospaceOracle

__all__ = [
    "LayoutOracle",
    "MonospaceOracle",
    "Presentation",
    "SeeMoreText",
    "Span",
    "SpanAction",
    "SpanKind",
    "TextStyle",
    "Theme",
    "TruncationEngine",
    "TruncationResult",
    "WidgetConfig",
    "clean_html",
    "resolve_style",
]
