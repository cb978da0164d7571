"""Tests for greedy word wrapping."""

from __future__ import annotations

import pytest
from helpers.metrics import MonospaceMetrics
from hypothesis import given
from hypothesis import strategies as st

from talkbox.assets.loader import Loader
from talkbox.layout.metrics import PygameFontMetrics
from talkbox.layout.wrap import split_lines, wrap

_WORDS = st.lists(
    st.text(alphabet="abcdefghijklmnopqrstuvwxyz", min_size=1, max_size=12),
    min_size=0,
    max_size=30,
)


class TestSplitLines:
    def test_keeps_blank_lines(self) -> None:
        """Blank lines survive splitting because pagination uses them as page breaks."""
        assert split_lines("A\n\nB") == ["A", "", "B"]

    def test_single_line(self) -> None:
        assert split_lines("Hello world") == ["Hello world"]


class TestWrap:
    """Examples that pin down the greedy wrapping rules."""

    def test_short_line_is_unchanged(self) -> None:
        """Verify a line that fits is passed through untouched."""
        metrics = MonospaceMetrics()

        assert wrap(["Hello world"], 390, metrics) == ["Hello world"]

    def test_hello_world_with_default_font(self) -> None:
        """Confirm the stock pygame font keeps a short greeting on one line of a 390px box."""
        metrics = PygameFontMetrics(Loader.load_font())

        assert wrap(split_lines("Hello world"), 390, metrics) == ["Hello world"]

    def test_blank_lines_are_preserved(self) -> None:
        assert wrap(["A", "", "B"], 100, MonospaceMetrics()) == ["A", "", "B"]

    def test_line_exactly_as_wide_as_box_is_kept(self) -> None:
        """A whole line whose width equals the limit still fits."""
        metrics = MonospaceMetrics(char_width=10)

        assert wrap(["abc de"], 60, metrics) == ["abc de"]

    def test_wraps_at_word_boundaries(self) -> None:
        metrics = MonospaceMetrics(char_width=10)

        result = wrap(["the quick brown fox"], 100, metrics)

        assert result == ["the quick", "brown fox"]

    def test_accumulated_line_reaching_width_is_pushed_down(self) -> None:
        """Verify a candidate that reaches the width exactly starts a new row."""
        metrics = MonospaceMetrics(char_width=10)

        result = wrap(["aaaa bbbb cc"], 90, metrics)

        assert result == ["aaaa", "bbbb cc"]

    def test_overlong_word_gets_its_own_row(self) -> None:
        """Ensure unsplittable words are placed alone instead of being cut or preceded by a blank row."""
        metrics = MonospaceMetrics(char_width=10)

        result = wrap(["supercalifragilistic is long"], 60, metrics)

        assert result == ["supercalifragilistic", "is", "long"]

    def test_whitespace_is_normalised_when_wrapping(self) -> None:
        metrics = MonospaceMetrics(char_width=10)

        result = wrap(["one    two   three"], 100, metrics)

        assert result == ["one two", "three"]

    @pytest.mark.parametrize("width", [0, 1, 5])
    def test_tiny_width_puts_each_word_alone(self, width: int) -> None:
        assert wrap(["a bb ccc"], width, MonospaceMetrics()) == ["a", "bb", "ccc"]


class TestWrapProperties:
    """Property checks so wrapping stays faithful to the source words."""

    @given(words=_WORDS, width=st.integers(min_value=0, max_value=300))
    def test_lines_fit_or_hold_a_single_word(self, words: list[str], width: int) -> None:
        """Verify every row fits the width unless it is one unsplittable word."""
        metrics = MonospaceMetrics(char_width=7)

        for line in wrap([" ".join(words)], width, metrics):
            assert metrics.measure_width(line) <= width or " " not in line

    @given(
        paragraphs=st.lists(_WORDS, min_size=1, max_size=5),
        width=st.integers(min_value=0, max_value=300),
    )
    def test_word_sequence_is_preserved(
        self, paragraphs: list[list[str]], width: int
    ) -> None:
        """Confirm joining the output rows with spaces reproduces the input words in order."""
        metrics = MonospaceMetrics(char_width=7)
        lines = [" ".join(words) for words in paragraphs]

        wrapped = wrap(lines, width, metrics)

        assert " ".join(wrapped).split() == " ".join(lines).split()

    @given(words=_WORDS, width=st.integers(min_value=0, max_value=300))
    def test_wrap_is_deterministic(self, words: list[str], width: int) -> None:
        metrics = MonospaceMetrics(char_width=7)
        lines = [" ".join(words)]

        assert wrap(lines, width, metrics) == wrap(lines, width, metrics)
