"""Tests for the truncation engine and its two strategies."""

import math

import pytest

from seemore.core.models import TextAlign, TextDirection, TextStyle
from seemore.core.truncation import (
    AVAILABLE_STRATEGIES,
    FastCornerTruncation,
    PrecisionTruncation,
    TruncationEngine,
    get_strategy,
)
from seemore.layout.monospace import MonospaceOracle

from helpers import CountingOracle, fits

STYLE = TextStyle()
LONG_TEXT = (
    "The quick brown fox jumps over the lazy dog while the cat watches "
    "from the windowsill and the bird sings a song about the morning sun."
)


# ---------------------------------------------------------------------------
# Precision (binary search)
# ---------------------------------------------------------------------------


class TestPrecisionTruncation:
    def setup_method(self):
        self.oracle = MonospaceOracle()
        self.engine = TruncationEngine(self.oracle)

    def test_default_strategy_is_precision(self):
        assert self.engine.strategy_name == "precision"
        assert isinstance(self.engine.strategy, PrecisionTruncation)

    def test_fixed_width_scenario(self):
        # 10 one-cell glyphs, 7 cells wide: "AA" + "…" + "More" fills it exactly.
        result = self.engine.compute("A" * 10, STYLE, 7, 1, "More", ellipsis="…")

        assert result is not None
        assert result.truncated_text == "AA"
        assert result.needs_ellipsis_suffix is True
        assert fits(self.oracle, result.truncated_text + "…More", 7, 1)
        assert not fits(self.oracle, "AAA…More", 7, 1)

    def test_suffix_alone_fills_line_clamps_to_one_char(self):
        # At 5 cells only "…More" fits, but the prefix never collapses to empty.
        result = self.engine.compute("A" * 10, STYLE, 5, 1, "More", ellipsis="…")

        assert result is not None
        assert result.truncated_text == "A"

    @pytest.mark.parametrize("length", [10, 37, 100])
    def test_matches_brute_force_longest_prefix(self, length):
        text = "A" * length
        result = self.engine.compute(text, STYLE, 9, 1, "More", ellipsis="…")

        expected = max(
            (n for n in range(length + 1) if fits(self.oracle, text[:n] + "…More", 9, 1)),
            default=0,
        )
        assert result is not None
        assert len(result.truncated_text) == max(expected, 1)

    def test_text_that_fits_needs_no_truncation(self):
        assert self.engine.compute("short", STYLE, 80, 1) is None

    def test_wide_width_never_truncates(self):
        for max_lines in range(1, 5):
            assert self.engine.compute(LONG_TEXT, STYLE, 10_000, max_lines) is None

    def test_result_is_a_shorter_nonempty_prefix(self):
        for width in (10, 17, 25, 40):
            for max_lines in (1, 2, 3):
                result = self.engine.compute(LONG_TEXT, STYLE, width, max_lines)
                if result is None:
                    continue
                assert 1 <= len(result.truncated_text) < len(LONG_TEXT)
                assert LONG_TEXT.startswith(result.truncated_text)

    def test_collapsed_text_with_suffix_fits_budget(self):
        result = self.engine.compute(LONG_TEXT, STYLE, 30, 2, "See more")

        assert result is not None
        assert fits(self.oracle, result.truncated_text + "... See more", 30, 2)

    def test_more_lines_never_reintroduces_truncation(self):
        for width in (10, 20, 40, 80, 200):
            for max_lines in range(1, 8):
                if self.engine.compute(LONG_TEXT, STYLE, width, max_lines) is None:
                    assert self.engine.compute(LONG_TEXT, STYLE, width, max_lines + 1) is None

    @pytest.mark.parametrize(
        "text, width, max_lines",
        [
            ("", 100, 2),
            ("some text", 0, 2),
            ("some text", -5, 2),
            ("some text", 100, 0),
        ],
    )
    def test_invalid_inputs_are_a_no_op(self, text, width, max_lines):
        assert self.engine.compute(text, STYLE, width, max_lines) is None

    @pytest.mark.parametrize("length", [10, 100, 1000])
    def test_oracle_calls_are_logarithmic(self, length):
        counting = CountingOracle(MonospaceOracle())
        engine = TruncationEngine(counting)

        result = engine.compute("A" * length, STYLE, 8, 1, "More", ellipsis="…")

        assert result is not None
        assert counting.calls <= math.ceil(math.log2(length + 1)) + 2
        assert engine.strategy.oracle_calls == counting.calls

    def test_handles_proportional_widths(self):
        # Wide CJK glyphs take two cells each.
        text = "日本語のテキストはとても長いです" * 3
        result = self.engine.compute(text, STYLE, 12, 1, "More", ellipsis="…")

        assert result is not None
        assert fits(self.oracle, result.truncated_text + "…More", 12, 1)
        assert result.truncated_text == "日本語"


# ---------------------------------------------------------------------------
# Fast corner (single offset query)
# ---------------------------------------------------------------------------


class TestFastCornerTruncation:
    def setup_method(self):
        self.oracle = MonospaceOracle()
        self.engine = TruncationEngine(self.oracle, "fast_corner")

    def test_strategy_selected_by_name(self):
        assert isinstance(self.engine.strategy, FastCornerTruncation)

    def test_cuts_at_corner_minus_suffix(self):
        result = self.engine.compute("A" * 20, STYLE, 10, 1, "More", ellipsis="…")

        assert result is not None
        assert result.truncated_text == "AAAAA"
        assert result.needs_ellipsis_suffix is True

    def test_uses_three_oracle_calls(self):
        self.engine.compute("A" * 20, STYLE, 10, 1, "More", ellipsis="…")

        assert self.engine.strategy.oracle_calls == 3

    def test_drops_ellipsis_when_suffix_cannot_fit_a_line(self):
        # "…More" needs 5 cells; only 4 are available.
        result = self.engine.compute("A" * 20, STYLE, 4, 2, "More", ellipsis="…")

        assert result is not None
        assert result.truncated_text == "AAAA"
        assert result.needs_ellipsis_suffix is False
        assert fits(self.oracle, result.truncated_text + "More", 4, 2)

    def test_reserves_the_width_of_wide_label_glyphs(self):
        # Five wide glyphs take ten cells, twice their character count.
        label = "\u3082\u3063\u3068\u898b\u308b"

        result = self.engine.compute("a" * 40, STYLE, 20, 1, label, ellipsis="…")

        assert result is not None
        assert result.truncated_text == "a" * 9
        assert fits(self.oracle, result.truncated_text + "…" + label, 20, 1)

    def test_rtl_uses_bottom_left_corner(self):
        # The last visible line "BBB " is short, so the two bottom corners differ.
        text = "AAAAAAAAAA BBB CCCCCCCCCC"
        kwargs = dict(ellipsis="…", align=TextAlign.START)

        ltr = self.engine.compute(text, STYLE, 10, 2, "M", **kwargs)
        rtl = self.engine.compute(
            text, STYLE, 10, 2, "M", direction=TextDirection.RTL, **kwargs
        )

        assert rtl is not None
        assert rtl.truncated_text == "AAAAAAAAAA BBB "
        assert rtl == ltr
        assert fits(self.oracle, rtl.truncated_text + "…M", 10, 2)

    def test_never_returns_empty_prefix(self):
        result = self.engine.compute("A" * 10, STYLE, 5, 1, "More", ellipsis="…")

        assert result is not None
        assert result.truncated_text == "A"

    def test_fits_and_invalid_inputs_return_none(self):
        assert self.engine.compute("short", STYLE, 80, 1) is None
        assert self.engine.compute("", STYLE, 80, 1) is None
        assert self.engine.compute("text", STYLE, 0, 1) is None


class TestRegistry:
    def test_available_strategies(self):
        assert set(AVAILABLE_STRATEGIES) == {"precision", "fast_corner"}

    def test_unknown_strategy_raises(self):
        with pytest.raises(NotImplementedError):
            get_strategy("guess", MonospaceOracle())
