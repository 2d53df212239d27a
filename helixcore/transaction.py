"""Transactions: undoable units of change, optionally carrying a new selection."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field, replace
from typing import Optional

from helixcore.changeset import Change, ChangeSet
from helixcore.selection import Range, Selection


@dataclass(frozen=True)
class Transaction:
    """A single undoable set of changes to a document."""

    changes: ChangeSet = field(default_factory=ChangeSet)
    selection: Optional[Selection] = None

    @classmethod
    def for_document(cls, doc: str) -> "Transaction":
        """Return an empty transaction that applies to ``doc``."""
        return cls(ChangeSet.for_document(doc))

    def apply(self, doc: str) -> str:
        """Return ``doc`` with the transaction's changes applied."""
        if self.changes.is_empty():
            return doc
        return self.changes.apply(doc)

    def invert(self, original: str) -> "Transaction":
        """Return a transaction that reverts this one.

        ``original`` is the document before this transaction was applied.
        """
        return Transaction(self.changes.invert(original))

    def with_selection(self, selection: Selection) -> "Transaction":
        """Return a copy of this transaction that sets ``selection``."""
        return replace(self, selection=selection)

    @classmethod
    def change(cls, doc: str, changes: Iterable[Change]) -> "Transaction":
        """Build a transaction from ordered, non-overlapping ``(from, to, text)`` changes."""
        changeset = ChangeSet()
        last = 0
        for start, end, text in changes:
            if start < last or end < start:
                raise ValueError(
                    f"change ({start}, {end}) is out of order or overlaps an earlier one"
                )
            changeset.retain(start - last)
            if text is not None:
                changeset.insert(text)
            changeset.delete(end - start)
            last = end
        if last > len(doc):
            raise ValueError(f"change end {last} is past the document length {len(doc)}")
        changeset.retain(len(doc) - last)
        return cls(changeset)

    @classmethod
    def change_by_selection(
        cls, doc: str, selection: Selection, f: Callable[[Range], Change]
    ) -> "Transaction":
        """Build a transaction with one change per selection range."""
        return cls.change(doc, (f(r) for r in selection))

    @classmethod
    def insert(cls, doc: str, selection: Selection, text: str) -> "Transaction":
        """Insert ``text`` at every selection head."""
        return cls.change_by_selection(doc, selection, lambda r: (r.head, r.head, text))

    def changes_iter(self) -> Iterator[Change]:
        """Yield the changes as ``(from, to, replacement)`` tuples."""
        return self.changes.changes_iter()