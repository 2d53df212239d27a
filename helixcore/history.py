"""Undo-tree style history of document revisions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from helixcore.changeset import ChangeSet
from helixcore.state import State
from helixcore.transaction import Transaction


@dataclass
class _Revision:
    parent: int
    revert: Transaction
    children: list[tuple[int, Transaction]] = field(default_factory=list)


class History:
    """A tree of revisions with a cursor on the current one."""

    def __init__(self) -> None:
        # the root revision carries an empty transaction
        self._revisions: list[_Revision] = [
            _Revision(parent=0, revert=Transaction(ChangeSet.for_document("")))
        ]
        self._cursor = 0

    def commit_revision(self, transaction: Transaction, original: State) -> None:
        """Record ``transaction``, to be applied to ``original``, as a new revision."""
        revert = transaction.invert(original.doc).with_selection(original.selection)
        new_cursor = len(self._revisions)
        self._revisions.append(_Revision(parent=self._cursor, revert=revert))
        self._revisions[self._cursor].children.append((new_cursor, transaction))
        self._cursor = new_cursor

    def current_revision(self) -> int:
        return self._cursor

    def at_root(self) -> bool:
        return self._cursor == 0

    def undo(self) -> Optional[Transaction]:
        """Step back one revision; return the transaction that reverts it."""
        if self.at_root():
            return None
        current = self._revisions[self._cursor]
        self._cursor = current.parent
        return current.revert

    def redo(self) -> Optional[Transaction]:
        """Step forward to the latest child revision; return its transaction."""
        children = self._revisions[self._cursor].children
        if not children:
            return None
        index, transaction = children[-1]
        self._cursor = index
        return transaction