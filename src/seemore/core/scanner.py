"""Token scanner: split text into plain runs and URL/hashtag/mention tokens."""

from __future__ import annotations

import re

from .constants import HASHTAG_PATTERN, MENTION_PATTERN, URL_PATTERN
from .models import Span, SpanKind

URL_REGEX = re.compile(URL_PATTERN, re.IGNORECASE)
HASHTAG_REGEX = re.compile(HASHTAG_PATTERN)
MENTION_REGEX = re.compile(MENTION_PATTERN)

TOKEN_PATTERNS: tuple[tuple[SpanKind, re.Pattern[str]], ...] = (
    (SpanKind.URL, URL_REGEX),
    (SpanKind.HASHTAG, HASHTAG_REGEX),
    (SpanKind.MENTION, MENTION_REGEX),
)


class TokenScanner:
    """Finds tokens with independent patterns and merges them in order.

    The output partitions the input exactly: joining ``span.text`` for
    every span gives back the scanned string.
    """

    def __init__(
        self,
        patterns: tuple[tuple[SpanKind, re.Pattern[str]], ...] = TOKEN_PATTERNS,
    ) -> None:
        self._patterns = patterns

    def find_matches(self, text: str) -> list[tuple[int, int, SpanKind]]:
        """Return every candidate match as ``(start, end, kind)``, sorted by start."""
        matches = [
            (m.start(), m.end(), kind)
            for kind, regex in self._patterns
            for m in regex.finditer(text)
        ]
        matches.sort(key=lambda match: match[0])
        return matches

    def scan(self, text: str) -> list[Span]:
        if not text:
            return [Span(text="", kind=SpanKind.PLAIN, start=0, end=0)]

        spans: list[Span] = []
        cursor = 0
        for start, end, kind in self.find_matches(text):
            if start < cursor:
                # Overlaps a token that was already emitted.
                continue
            if start > cursor:
                spans.append(_plain(text, cursor, start))
            spans.append(Span(text=text[start:end], kind=kind, start=start, end=end))
            cursor = end

        if cursor < len(text):
            spans.append(_plain(text, cursor, len(text)))
        return spans


def _plain(text: str, start: int, end: int) -> Span:
    return Span(text=text[start:end], kind=SpanKind.PLAIN, start=start, end=end)


_default_scanner = TokenScanner()


def scan(text: str) -> list[Span]:
    """Scan *text* with the default URL/hashtag/mention patterns."""
    return _default_scanner.scan(text)
