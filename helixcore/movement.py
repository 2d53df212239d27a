"""Cursor movement by character, line and word."""

from __future__ import annotations

import re
import unicodedata
from bisect import bisect_right
from collections.abc import Callable
from enum import Enum
from typing import Optional

from helixcore.graphemes import nth_next_grapheme_boundary, nth_prev_grapheme_boundary
from helixcore.position import Position, coords_at_pos, pos_at_coords
from helixcore.selection import Range

_LINE_BREAK = re.compile(r"\r\n|[\n\v\f\r\x85\u2028\u2029]")

_PUNCTUATION_CATEGORIES = frozenset({"Po", "Ps", "Pe", "Pi", "Pf", "Pc", "Pd", "Sm", "Sc", "Sk"})


class Direction(Enum):
    FORWARD = "forward"
    BACKWARD = "backward"


class Category(Enum):
    WHITESPACE = "whitespace"
    EOL = "eol"
    WORD = "word"
    PUNCTUATION = "punctuation"
    UNKNOWN = "unknown"


def _line_starts(text: str) -> list[int]:
    return [0, *(m.end() for m in _LINE_BREAK.finditer(text))]


def _line_to_char(text: str, starts: list[int], line: int) -> int:
    if line < len(starts):
        return starts[line]
    if line == len(starts):
        return len(text)
    raise IndexError(f"line {line} is out of range for {len(starts)} lines")


def move_horizontally(
    text: str, range: Range, direction: Direction, count: int, extend: bool
) -> Range:
    """Move the head ``count`` graphemes along, staying within its line."""
    pos = range.head
    starts = _line_starts(text)
    line = bisect_right(starts, pos) - 1
    if direction is Direction.BACKWARD:
        start = _line_to_char(text, starts, line)
        pos = max(nth_prev_grapheme_boundary(text, pos, count), start)
    else:
        end = max(_line_to_char(text, starts, line + 1) - 1, 0)
        pos = min(nth_next_grapheme_boundary(text, pos, count), end)
    return Range(range.anchor if extend else pos, pos)


def move_vertically(
    text: str, range: Range, direction: Direction, count: int, extend: bool
) -> Range:
    """Move the head ``count`` lines up or down, keeping the preferred column."""
    coords = coords_at_pos(text, range.head)
    horiz = range.horiz if range.horiz is not None else coords.col
    starts = _line_starts(text)

    if direction is Direction.BACKWARD:
        new_line = max(coords.row - count, 0)
    else:
        new_line = min(coords.row + count, max(len(starts) - 2, 0))

    line_len = _line_to_char(text, starts, new_line + 1) - starts[new_line]
    # the line length counts its line break, and columns are zero indexed
    new_line_len = max(line_len - 2, 0)
    new_col = min(horiz, new_line_len)

    pos = pos_at_coords(text, Position(new_line, new_col))
    return Range(range.anchor if extend else pos, pos, horiz)


def move_next_word_start(text: str, begin: int, count: int) -> Optional[Range]:
    """Select from ``begin`` to the start of the ``count``-th next word."""
    end = begin
    for _ in range(count):
        if begin + 1 == len(text):
            return None
        if categorize(text[begin]) != categorize(text[begin + 1]):
            begin += 1
        begin, more = skip_over_next(text, begin, lambda c: c == "\n")
        if not more:
            return None
        ch = text[begin]
        end = begin + 1
        if is_word(ch):
            end, _ = skip_over_next(text, end, is_word)
        elif is_punctuation(ch):
            end, _ = skip_over_next(text, end, is_punctuation)
        end, _ = skip_over_next(text, end, str.isspace)
    return Range(begin, end - 1)


def move_prev_word_start(text: str, begin: int, count: int) -> Optional[Range]:
    """Select from ``begin`` back to the start of the ``count``-th previous word."""
    with_end = False
    end = begin
    for _ in range(count):
        if begin == 0:
            return None
        if categorize(text[begin]) != categorize(text[begin - 1]):
            begin -= 1
        begin, _ = skip_over_prev(text, begin, lambda c: c == "\n")
        end, with_end = skip_over_prev(text, begin, str.isspace)
        ch = text[end]
        if is_word(ch):
            end, with_end = skip_over_prev(text, end, is_word)
        elif is_punctuation(ch):
            end, with_end = skip_over_prev(text, end, is_punctuation)
    return Range(begin, end if with_end else end + 1)


def move_next_word_end(text: str, begin: int, count: int) -> Optional[Range]:
    """Select from ``begin`` to the end of the ``count``-th next word."""
    end = begin
    for _ in range(count):
        if begin + 2 >= len(text):
            return None
        if categorize(text[begin]) != categorize(text[begin + 1]):
            begin += 1
        begin, more = skip_over_next(text, begin, lambda c: c == "\n")
        if not more:
            return None
        end, _ = skip_over_next(text, begin, str.isspace)
        ch = text[end]
        if is_word(ch):
            end, _ = skip_over_next(text, end, is_word)
        elif is_punctuation(ch):
            end, _ = skip_over_next(text, end, is_punctuation)
    return Range(begin, end - 1)


def is_word(ch: str) -> bool:
    return ch.isalnum() or ch == "_"


def is_punctuation(ch: str) -> bool:
    return unicodedata.category(ch) in _PUNCTUATION_CATEGORIES


def categorize(ch: str) -> Category:
    if ch == "\n":
        return Category.EOL
    if ch.isspace():
        return Category.WHITESPACE
    if is_word(ch):
        return Category.WORD
    if is_punctuation(ch):
        return Category.PUNCTUATION
    return Category.UNKNOWN


def skip_over_next(text: str, pos: int, fun: Callable[[str], bool]) -> tuple[int, bool]:
    """Advance ``pos`` over characters matching ``fun``.

    Returns the new position and whether characters remain after it.
    """
    if not 0 <= pos <= len(text):
        raise IndexError(f"position {pos} is out of range for length {len(text)}")
    while pos < len(text) and fun(text[pos]):
        pos += 1
    return pos, pos + 1 < len(text)


def skip_over_prev(text: str, pos: int, fun: Callable[[str], bool]) -> tuple[int, bool]:
    """Move ``pos`` back over characters matching ``fun``, the one at ``pos`` included.

    Returns the new position and whether the character there matches ``fun``.
    """
    if not 0 <= pos < len(text):
        raise IndexError(f"position {pos} is out of range for length {len(text)}")
    i = pos
    while i >= 0 and fun(text[i]):
        i -= 1
    pos = max(i, 0)
    return pos, fun(text[pos])