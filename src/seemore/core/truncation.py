"""Truncation engine: find the longest prefix that fits with a "see more" suffix.

Two strategies share one interface:

* ``precision``: binary search over the prefix length, verifying every
  candidate ``prefix + ellipsis + label`` with the layout oracle.
  O(log n) oracle calls; assumes the fit predicate is monotonic in the
  prefix length.
* ``fast_corner``: one offset query at the bottom corner of the box
  laid out under the line cap, backed off by the suffix length.
  Cheaper, less exact.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Optional

from seemore.layout.base import LayoutOracle

from .constants import (
    DEFAULT_ELLIPSIS,
    DEFAULT_SEE_MORE_TEXT,
    MIN_LINES,
    STRATEGY_FAST_CORNER,
    STRATEGY_PRECISION,
)
from .models import (
    LayoutConstraints,
    LayoutMetrics,
    Point,
    TextAlign,
    TextDirection,
    TextStyle,
    TruncationResult,
)

logger = logging.getLogger(__name__)


def validate_inputs(text: str, max_width: float, max_lines: int) -> bool:
    return bool(text) and max_width > 0 and max_lines >= MIN_LINES


class TruncationStrategy(ABC):
    """Base class; subclasses implement the slow path in ``_truncate``."""

    name = ""

    def __init__(self, oracle: LayoutOracle) -> None:
        self._oracle = oracle
        self.oracle_calls = 0

    def compute(
        self,
        text: str,
        style: TextStyle,
        max_width: float,
        max_lines: int,
        label: str = DEFAULT_SEE_MORE_TEXT,
        *,
        ellipsis: str = DEFAULT_ELLIPSIS,
        direction: TextDirection = TextDirection.LTR,
        align: TextAlign = TextAlign.START,
    ) -> Optional[TruncationResult]:
        """Return the collapsed prefix, or ``None`` when the text already fits.

        Invalid inputs (empty text, non-positive width, ``max_lines`` below
        one) also return ``None``: there is nothing to truncate.
        """
        self.oracle_calls = 0
        if not validate_inputs(text, max_width, max_lines):
            return None

        constraints = LayoutConstraints(
            max_width=max_width,
            max_lines=max_lines,
            direction=direction,
            align=align,
        )
        metrics = self._measure(text, style, constraints)
        if not metrics.overflowed:
            return None

        result = self._truncate(text, style, constraints, label, ellipsis, metrics)
        logger.debug(
            "%s truncation: %d -> %d chars after %d oracle calls",
            self.name,
            len(text),
            len(result.truncated_text),
            self.oracle_calls,
        )
        return result

    @abstractmethod
    def _truncate(
        self,
        text: str,
        style: TextStyle,
        constraints: LayoutConstraints,
        label: str,
        ellipsis: str,
        metrics: LayoutMetrics,
    ) -> TruncationResult: ...

    def _measure(
        self, text: str, style: TextStyle, constraints: LayoutConstraints
    ) -> LayoutMetrics:
        self.oracle_calls += 1
        return self._oracle.measure(text, style, constraints)

    def _fits(self, text: str, style: TextStyle, constraints: LayoutConstraints) -> bool:
        return not self._measure(text, style, constraints).overflowed


def _clamp_cut(cut: int, text: str) -> int:
    # Never collapse to an empty display.
    return min(max(cut, 1), len(text))


class PrecisionTruncation(TruncationStrategy):
    """Binary search with full verification of every candidate."""

    name = STRATEGY_PRECISION

    def _truncate(self, text, style, constraints, label, ellipsis, metrics):
        suffix = ellipsis + label
        left, right = 0, len(text)
        best = 0
        while left <= right:
            mid = (left + right) // 2
            if self._fits(text[:mid] + suffix, style, constraints):
                best = mid
                left = mid + 1
            else:
                right = mid - 1

        cut = _clamp_cut(best, text)
        return TruncationResult(truncated_text=text[:cut], needs_ellipsis_suffix=True)


class FastCornerTruncation(TruncationStrategy):
    """Cut at the caret left of the suffix at the bottom trailing corner.

    The suffix is measured once and the corner query is moved back by its
    width, so wide label glyphs reserve the room they actually take. When
    ``ellipsis + label`` cannot fit on a line of its own there is no width
    left for the ellipsis glyphs, so the result asks the caller to append
    the label alone (``needs_ellipsis_suffix=False``).
    """

    name = STRATEGY_FAST_CORNER

    def _truncate(self, text, style, constraints, label, ellipsis, metrics):
        single_line = constraints.model_copy(update={"max_lines": 1})
        needs_ellipsis = True
        reserved = self._suffix_width(ellipsis + label, style, single_line)
        if reserved is None:
            needs_ellipsis = False
            reserved = self._suffix_width(label, style, single_line)
        if reserved is None:
            reserved = constraints.max_width

        if constraints.direction is TextDirection.RTL:
            # Trailing edge of the widest line in a box laid out right to left.
            x = constraints.max_width - metrics.size.width + reserved
        else:
            x = metrics.size.width - reserved
        corner = Point(x=x, y=metrics.size.height)
        self.oracle_calls += 1
        offset = self._oracle.offset_at_point(text, style, constraints, corner)

        cut = _clamp_cut(offset, text)
        return TruncationResult(
            truncated_text=text[:cut], needs_ellipsis_suffix=needs_ellipsis
        )

    def _suffix_width(
        self, suffix: str, style: TextStyle, single_line: LayoutConstraints
    ) -> Optional[float]:
        """Width of *suffix* on one line, or ``None`` when it cannot fit one."""
        suffix_metrics = self._measure(suffix, style, single_line)
        if suffix_metrics.overflowed:
            return None
        return suffix_metrics.size.width


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

_KNOWN_STRATEGIES: dict[str, type[TruncationStrategy]] = {
    PrecisionTruncation.name: PrecisionTruncation,
    FastCornerTruncation.name: FastCornerTruncation,
}

AVAILABLE_STRATEGIES = tuple(_KNOWN_STRATEGIES)


def get_strategy(name: str, oracle: LayoutOracle) -> TruncationStrategy:
    """Look up a truncation strategy by name and bind it to *oracle*."""
    cls = _KNOWN_STRATEGIES.get(name)
    if cls is None:
        raise NotImplementedError(f"Truncation strategy '{name}' is not supported.")
    return cls(oracle)


class TruncationEngine:
    """Facade that runs the configured strategy against one oracle."""

    def __init__(self, oracle: LayoutOracle, strategy: str = STRATEGY_PRECISION) -> None:
        self._strategy = get_strategy(strategy, oracle)

    @property
    def strategy(self) -> TruncationStrategy:
        return self._strategy

    @property
    def strategy_name(self) -> str:
        return self._strategy.name

    def compute(self, text, style, max_width, max_lines, label=DEFAULT_SEE_MORE_TEXT, **kwargs):
        return self._strategy.compute(text, style, max_width, max_lines, label, **kwargs)
