"""Grapheme cluster helpers over plain strings indexed by code point."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Iterator
from itertools import accumulate

import regex
from wcwidth import wcswidth

_GRAPHEME = regex.compile(r"\X")


def grapheme_width(g: str) -> int:
    """Return the display width of a grapheme cluster, never less than one."""
    if ord(g[0]) <= 127:
        # ASCII, control characters included, is always one cell wide so it
        # can be edited like any other text.
        return 1
    return max(wcswidth(g), 1)


def graphemes(text: str) -> Iterator[str]:
    """Yield the extended grapheme clusters of ``text`` in order."""
    for match in _GRAPHEME.finditer(text):
        yield match.group()


def _boundaries(text: str) -> list[int]:
    return [0, *accumulate(len(g) for g in graphemes(text))]


def nth_prev_grapheme_boundary(text: str, char_idx: int, n: int) -> int:
    """Return the position ``n`` grapheme boundaries before ``char_idx``."""
    if not 0 <= char_idx <= len(text):
        raise IndexError(f"position {char_idx} is out of range for length {len(text)}")
    if n == 0:
        return char_idx
    bounds = _boundaries(text)
    index = bisect_left(bounds, char_idx) - n
    return bounds[index] if index >= 0 else 0


def prev_grapheme_boundary(text: str, char_idx: int) -> int:
    """Return the grapheme boundary before ``char_idx``."""
    return nth_prev_grapheme_boundary(text, char_idx, 1)


def nth_next_grapheme_boundary(text: str, char_idx: int, n: int) -> int:
    """Return the position ``n`` grapheme boundaries after ``char_idx``."""
    if not 0 <= char_idx <= len(text):
        raise IndexError(f"position {char_idx} is out of range for length {len(text)}")
    if n == 0:
        return char_idx
    bounds = _boundaries(text)
    index = bisect_right(bounds, char_idx) + n - 1
    return bounds[index] if index < len(bounds) else len(text)


def next_grapheme_boundary(text: str, char_idx: int) -> int:
    """Return the grapheme boundary after ``char_idx``."""
    return nth_next_grapheme_boundary(text, char_idx, 1)


def is_grapheme_boundary(text: str, char_idx: int) -> bool:
    """Tell whether ``char_idx`` lies on a grapheme cluster boundary."""
    if not 0 <= char_idx <= len(text):
        raise IndexError(f"position {char_idx} is out of range for length {len(text)}")
    bounds = _boundaries(text)
    index = bisect_left(bounds, char_idx)
    return index < len(bounds) and bounds[index] == char_idx