"""Per-widget memo of the last truncation result."""

from __future__ import annotations

import logging
from typing import Callable, NamedTuple, Optional

from .models import TextAlign, TextDirection, TextStyle, TruncationResult

logger = logging.getLogger(__name__)


class TruncationKey(NamedTuple):
    text: str
    style: TextStyle
    width: float
    max_lines: int
    label: str
    ellipsis: str
    direction: TextDirection
    align: TextAlign
    strategy: str


class TruncationCache:
    """Holds one ``(key, result)`` pair; any key change is a miss.

    A cached ``None`` ("no truncation needed") is a hit, not a miss.
    """

    def __init__(self) -> None:
        self._key: Optional[TruncationKey] = None
        self._result: Optional[TruncationResult] = None
        self.hits = 0
        self.misses = 0

    def get_or_compute(
        self,
        key: TruncationKey,
        compute: Callable[[], Optional[TruncationResult]],
    ) -> Optional[TruncationResult]:
        if self._key == key:
            self.hits += 1
            return self._result

        self.misses += 1
        logger.debug("Truncation cache miss (width=%s, max_lines=%d)", key.width, key.max_lines)
        self._result = compute()
        self._key = key
        return self._result

    def invalidate(self) -> None:
        self._key = None
        self._result = None
