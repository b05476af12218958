"""Tests for the per-widget truncation cache."""

from seemore.core.cache import TruncationCache, TruncationKey
from seemore.core.models import TextAlign, TextDirection, TextStyle, TruncationResult


def _key(**overrides) -> TruncationKey:
    values = dict(
        text="some text",
        style=TextStyle(),
        width=100.0,
        max_lines=2,
        label="See more",
        ellipsis="... ",
        direction=TextDirection.LTR,
        align=TextAlign.START,
        strategy="precision",
    )
    values.update(overrides)
    return TruncationKey(**values)


class TestTruncationCache:
    def setup_method(self):
        self.cache = TruncationCache()
        self.computed = 0

    def _compute(self, result=None):
        def compute():
            self.computed += 1
            return result

        return compute

    def test_same_key_is_a_hit(self):
        result = TruncationResult(truncated_text="some")

        first = self.cache.get_or_compute(_key(), self._compute(result))
        second = self.cache.get_or_compute(_key(), self._compute(result))

        assert first is second
        assert self.computed == 1
        assert (self.cache.hits, self.cache.misses) == (1, 1)

    def test_cached_none_is_a_hit(self):
        self.cache.get_or_compute(_key(), self._compute(None))

        assert self.cache.get_or_compute(_key(), self._compute(None)) is None
        assert self.computed == 1

    def test_any_input_change_is_a_miss(self):
        self.cache.get_or_compute(_key(), self._compute())

        for change in (
            {"width": 99.0},
            {"style": TextStyle(font_size=20)},
            {"label": "More"},
            {"direction": TextDirection.RTL},
            {"strategy": "fast_corner"},
        ):
            self.cache.get_or_compute(_key(**change), self._compute())

        assert self.cache.misses == 6

    def test_invalidate(self):
        self.cache.get_or_compute(_key(), self._compute())
        self.cache.invalidate()
        self.cache.get_or_compute(_key(), self._compute())

        assert self.computed == 2
