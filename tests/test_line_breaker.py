"""Tests for greedy line breaking."""

import pytest

from celltext.line_breaker import break_lines, count_lines, split_hard_lines


def char_width(text):
    """Synthetic width oracle: one unit per character."""
    return float(len(text))


def test_empty_text_has_no_lines():
    assert break_lines("", 10, char_width) == []


def test_short_line_is_kept_unchanged():
    assert break_lines("Hello", 10, char_width) == ["Hello"]


def test_quick_brown_fox_wraps_after_quick():
    """'The quick ' fits just under the width, adding 'brown' does not."""
    lines = break_lines("The quick brown fox", 11, char_width)
    assert lines == ["The quick ", "brown fox"]


def test_single_long_word_is_emitted_whole():
    word = "Supercalifragilisticexpialidocious"
    lines = break_lines(word, 10, char_width)
    assert lines == [word]


def test_exact_width_wraps():
    """A line exactly as wide as the column does not fit."""
    assert break_lines("aaaa bbbb", 9, char_width) == ["aaaa ", "bbbb"]
    assert break_lines("aaaa bbbb", 10, char_width) == ["aaaa bbbb"]


def test_long_word_does_not_disturb_accumulated_line():
    lines = break_lines("ab averyveryverylongword cd", 8, char_width)
    assert lines == ["averyveryverylongword ", "ab cd"]


def test_word_filling_whole_column_does_not_emit_empty_line():
    lines = break_lines("abcde fg", 6, char_width)
    assert lines == ["abcde ", "fg"]
    assert "" not in lines


def test_hard_newlines_are_forced_breaks():
    assert break_lines("a\nb", 10, char_width) == ["a", "b"]


def test_blank_line_between_paragraphs_is_kept():
    assert break_lines("a\n\nb", 10, char_width) == ["a", "", "b"]


def test_crlf_and_trailing_newline():
    assert break_lines("a\r\nb\n", 10, char_width) == ["a", "b"]


def test_each_hard_line_wraps_independently():
    text = "one two three\nfour five six"
    lines = break_lines(text, 9, char_width)
    assert lines == ["one two ", "three", "four ", "five six"]


def test_extrapolate_keeps_overflowing_lines():
    text = "a very long line that overflows\nanother long line"
    lines = break_lines(text, 5, char_width, extrapolate=True)
    assert lines == ["a very long line that overflows", "another long line"]


@pytest.mark.parametrize("text", [
    "short",
    "some words\nmore words that are longer than the column",
    "x" * 40 + "\n\n" + "y " * 30,
    "\n",
])
def test_extrapolate_count_equals_hard_line_count(text):
    expected = len(list(split_hard_lines(text)))
    assert count_lines(text, 3, char_width, extrapolate=True) == expected


SAMPLE = ("It was the best of times it was the worst of times it was the age of "
          "wisdom it was the age of foolishness")


@pytest.mark.parametrize("width", [8, 12, 20, 33, 50])
def test_multi_word_lines_fit_in_column(width):
    for line in break_lines(SAMPLE, width, char_width):
        if len(line.split()) > 1:
            assert char_width(line) < width


@pytest.mark.parametrize("width", [12, 20, 33, 50, 500])
def test_word_order_is_preserved(width):
    lines = break_lines(SAMPLE, width, char_width)
    words = [word for line in lines for word in line.split()]
    assert words == SAMPLE.split()


def test_count_lines_matches_break_lines():
    assert count_lines(SAMPLE, 20, char_width) == len(break_lines(SAMPLE, 20, char_width))


def test_width_oracle_is_honoured():
    """Wide glyphs wrap earlier than narrow ones."""
    def wide(text):
        return 2.0 * len(text)

    assert break_lines("ab cd", 6, char_width) == ["ab cd"]
    assert break_lines("ab cd", 6, wide) == ["ab ", "cd"]
