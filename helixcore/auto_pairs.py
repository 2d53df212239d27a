"""Automatic insertion and skipping of paired brackets and quotes."""

from __future__ import annotations

from typing import Optional

from helixcore.changeset import Change
from helixcore.selection import Range, Selection
from helixcore.transaction import Transaction

PAIRS: tuple[tuple[str, str], ...] = (
    ("(", ")"),
    ("{", "}"),
    ("[", "]"),
    ("'", "'"),
    ('"', '"'),
    ("`", "`"),
)

# Characters before which an opening bracket gets its closing partner.
CLOSE_BEFORE = ")]}'\":;> \n"


def hook(doc: str, selection: Selection, ch: str) -> Optional[Transaction]:
    """Return a transaction for typing ``ch``, or None if the default insert applies.

    Symmetric pairs such as quotes are left to the default insert handler.
    """
    for open_ch, close_ch in PAIRS:
        if open_ch == ch:
            if open_ch == close_ch:
                return None
            return _handle_open(doc, selection, open_ch, close_ch, CLOSE_BEFORE)
        if close_ch == ch:
            return _handle_close(doc, selection, close_ch)
    return None


def _next_char(doc: str, pos: int) -> Optional[str]:
    return doc[pos] if pos < len(doc) else None


def _moved(r: Range, head: int, offset: int) -> Range:
    # a cursor moves along; a selection keeps its anchor
    return Range(head if r.is_empty() else r.anchor + offset, head)


def _handle_open(
    doc: str, selection: Selection, open_ch: str, close_ch: str, close_before: str
) -> Transaction:
    ranges: list[Range] = []
    changes: list[Change] = []
    offset = 0
    for r in selection:
        pos = r.head
        following = _next_char(doc, pos)
        ranges.append(_moved(r, pos + offset + len(open_ch), offset))
        if following is not None and following not in close_before:
            changes.append((pos, pos, open_ch))
        else:
            changes.append((pos, pos, open_ch + close_ch))
            offset += 2
    transaction = Transaction.change(doc, changes)
    return transaction.with_selection(Selection(ranges, selection.primary_index))


def _handle_close(doc: str, selection: Selection, close_ch: str) -> Transaction:
    ranges: list[Range] = []
    changes: list[Change] = []
    offset = 0
    for r in selection:
        pos = r.head
        following = _next_char(doc, pos)
        ranges.append(_moved(r, pos + offset + len(close_ch), offset))
        if following == close_ch:
            # step over the existing closing character
            changes.append((pos, pos, None))
        else:
            offset += len(close_ch)
            changes.append((pos, pos, close_ch))
    transaction = Transaction.change(doc, changes)
    return transaction.with_selection(Selection(ranges, selection.primary_index))