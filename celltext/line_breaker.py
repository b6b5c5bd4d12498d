"""Greedy line breaking of text into width-constrained lines."""

from typing import Callable, Iterator

WidthOracle = Callable[[str], float]


def split_hard_lines(text: str) -> Iterator[str]:
    """Yield the newline-delimited lines of text.

    ``\\r\\n`` counts as a single newline and a trailing newline does not
    start an extra line, so "a\\n" yields just "a" and "" yields nothing.
    """
    if not text:
        return
    segments = text.split("\n")
    if segments[-1] == "":
        segments.pop()
    for segment in segments:
        if segment.endswith("\r"):
            segment = segment[:-1]
        yield segment


def break_lines(text: str, col_width: float, string_width: WidthOracle,
                extrapolate: bool = False) -> list[str]:
    """Break text into lines that fit in col_width.

    Every hard line is handled on its own. A hard line narrower than the
    column (or any hard line when extrapolate is set) is kept as is.
    Wider ones are packed greedily word by word: each word except the last
    keeps one trailing space, a word only joins the current line while the
    total stays strictly below col_width, and a word wider than the column
    on its own is emitted as a separate, overflowing line.

    Args:
        text: Text to break; may contain newlines.
        col_width: Available width. Must be positive.
        string_width: Returns the rendered width of a string.
        extrapolate: Keep hard lines whole even when they overflow.

    Returns:
        Lines in reading order.
    """
    lines: list[str] = []
    for hard_line in split_hard_lines(text):
        if extrapolate or string_width(hard_line) < col_width:
            lines.append(hard_line)
            continue

        current_line = ""
        current_width = 0.0
        words = hard_line.split(" ")
        for i, word in enumerate(words):
            if i != len(words) - 1:
                word += " "
            word_width = string_width(word)
            if word_width > col_width:
                # Unbreakable word, let it overflow on its own line
                lines.append(word)
                continue

            if current_width + word_width < col_width:
                current_line += word
                current_width += word_width
            else:
                if current_line:
                    lines.append(current_line)
                current_line = word
                current_width = word_width

        if current_line:
            lines.append(current_line)

    return lines


def count_lines(text: str, col_width: float, string_width: WidthOracle,
                extrapolate: bool = False) -> int:
    """Number of lines break_lines would produce."""
    return len(break_lines(text, col_width, string_width, extrapolate))
