"""Row and column positions in a document and conversion to character indices."""

from __future__ import annotations

import re
from bisect import bisect_right
from dataclasses import dataclass

from helixcore.graphemes import graphemes, nth_next_grapheme_boundary

_LINE_BREAK = re.compile(r"\r\n|[\n\v\f\r\x85\u2028\u2029]")


@dataclass(frozen=True, order=True)
class Position:
    """A single point in a text buffer. Zero indexed."""

    row: int = 0
    col: int = 0

    def is_zero(self) -> bool:
        return self.row == 0 and self.col == 0

    def traverse(self, text: str) -> "Position":
        """Return the position reached after walking over ``text``."""
        row, col = self.row, self.col
        for ch in text:
            if ch == "\n":
                row += 1
                col = 0
            else:
                col += 1
        return Position(row, col)


def _line_starts(text: str) -> list[int]:
    return [0, *(m.end() for m in _LINE_BREAK.finditer(text))]


def coords_at_pos(text: str, pos: int) -> Position:
    """Convert a character index to (line, column) coordinates."""
    if not 0 <= pos <= len(text):
        raise IndexError(f"position {pos} is out of range for length {len(text)}")
    starts = _line_starts(text)
    line = bisect_right(starts, pos) - 1
    col = sum(1 for _ in graphemes(text[starts[line]:pos]))
    return Position(line, col)


def pos_at_coords(text: str, coords: Position) -> int:
    """Convert (line, column) coordinates to a character index."""
    starts = _line_starts(text)
    if coords.row < len(starts):
        line_start = starts[coords.row]
    elif coords.row == len(starts):
        line_start = len(text)
    else:
        raise IndexError(f"line {coords.row} is out of range for {len(starts)} lines")
    return nth_next_grapheme_boundary(text, line_start, coords.col)