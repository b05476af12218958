"""Defaults and token patterns used throughout the package."""

DEFAULT_MAX_LINES = 4
DEFAULT_ANIMATION_DURATION_MS = 200
DEFAULT_SEE_MORE_TEXT = "See more"
DEFAULT_SEE_LESS_TEXT = "See less"
DEFAULT_ELLIPSIS = "... "
DEFAULT_SPACER = "  "
MIN_LINES = 1

DEFAULT_TEXT_COLOR = "#000000"
DEFAULT_ACCENT_COLOR = "#6750A4"

# Token patterns
URL_PATTERN = r"https?://[a-zA-Z0-9./?=_-]+"
HASHTAG_PATTERN = r"#[a-zA-Z0-9_]+"
MENTION_PATTERN = r"@[a-zA-Z0-9_]+"

# Truncation strategy names
STRATEGY_PRECISION = "precision"
STRATEGY_FAST_CORNER = "fast_corner"
