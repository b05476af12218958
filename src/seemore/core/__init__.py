from .assembler import PresentationAssembler, effective_line_cap
from .models import (
    AnimationSpec,
    LayoutConstraints,
    LayoutMetrics,
    Point,
    Presentation,
    Size,
    Span,
    SpanAction,
    SpanKind,
    TextAlign,
    TextDirection,
    TextStyle,
    ToggleState,
    TruncationResult,
    WidgetConfig,
)
from .scanner import TokenScanner, scan
from .toggle import ToggleController
from .truncation import (
    FastCornerTruncation,
    PrecisionTruncation,
    TruncationEngine,
    TruncationStrategy,
    get_strategy,
)

__all__ = [
    "AnimationSpec",
    "FastCornerTruncation",
    "LayoutConstraints",
    "LayoutMetrics",
    "Point",
    "PrecisionTruncation",
    "Presentation",
    "PresentationAssembler",
    "Size",
    "Span",
    "SpanAction",
    "SpanKind",
    "TextAlign",
    "TextDirection",
    "TextStyle",
    "ToggleController",
    "ToggleState",
    "TokenScanner",
    "TruncationEngine",
    "TruncationResult",
    "TruncationStrategy",
    "WidgetConfig",
    "effective_line_cap",
    "get_strategy",
    "scan",
]
