"""Toggling of line comments."""

from __future__ import annotations

from bisect import bisect_right
from typing import Optional

from helixcore.changeset import Change
from helixcore.selection import Selection
from helixcore.text import find_first_non_whitespace_char
from helixcore.transaction import Transaction

_TOKEN = "//"
_MARGIN = 1


def _line_starts(text: str) -> list[int]:
    return [0, *(i + 1 for i, ch in enumerate(text) if ch == "\n")]


def _line(text: str, starts: list[int], line: int) -> str:
    end = starts[line + 1] if line + 1 < len(starts) else len(text)
    return text[starts[line]:end]


def _char_to_line(starts: list[int], pos: int) -> int:
    return bisect_right(starts, pos) - 1


def find_line_comment(
    token: str, text: str, lines: range
) -> tuple[bool, list[int], Optional[int]]:
    """Inspect ``lines`` of ``text`` for a leading comment ``token``.

    Returns whether every non-blank line is commented, the blank lines that
    were skipped, and the smallest indentation of a non-blank line (None if
    every line is blank).
    """
    starts = _line_starts(text)
    commented = True
    skipped: list[int] = []
    min_col: Optional[int] = None
    for line in lines:
        line_text = _line(text, starts, line)
        pos = find_first_non_whitespace_char(line_text)
        if pos is None:
            skipped.append(line)
            continue
        if min_col is None or pos < min_col:
            min_col = pos
        if line_text[pos:pos + len(token)] != token:
            # one uncommented non-blank line makes the whole block uncommented
            commented = False
    return commented, skipped, min_col


def toggle_line_comments(doc: str, selection: Selection) -> Transaction:
    """Comment the selected lines, or uncomment them if they are all commented."""
    starts = _line_starts(doc)
    comment = f"{_TOKEN} "
    changes: list[Change] = []
    for r in selection:
        lines = range(_char_to_line(starts, r.start), _char_to_line(starts, r.end) + 1)
        commented, skipped, min_col = find_line_comment(_TOKEN, doc, lines)
        for line in lines:
            if line in skipped or min_col is None:
                continue
            pos = starts[line] + min_col
            if commented:
                changes.append((pos, pos + len(_TOKEN) + _MARGIN, None))
            else:
                changes.append((pos, pos, comment))
    return Transaction.change(doc, changes)