"""Change sets: sequences of retain, delete and insert operations over text."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple, Union


@dataclass(frozen=True)
class Retain:
    """Keep ``n`` characters unchanged."""

    n: int


@dataclass(frozen=True)
class Delete:
    """Remove ``n`` characters."""

    n: int


@dataclass(frozen=True)
class Insert:
    """Insert ``text`` at the current position."""

    text: str


Operation = Union[Retain, Delete, Insert]

# (from, to, replacement)
Change = Tuple[int, int, Optional[str]]


class Assoc(Enum):
    """Which side of an insertion a mapped position sticks to."""

    BEFORE = "before"
    AFTER = "after"


def _grouped(ops: Iterable[Operation]) -> Iterator[tuple[Operation, Optional[Delete]]]:
    """Pair each insertion with an immediately following deletion (a replace)."""
    it = iter(ops)
    op = next(it, None)
    while op is not None:
        following = next(it, None)
        if isinstance(op, Insert) and isinstance(following, Delete):
            yield op, following
            op = next(it, None)
        else:
            yield op, None
            op = following


@dataclass
class ChangeSet:
    """An ordered list of operations turning a document of ``len`` characters
    into one of ``len_after`` characters."""

    changes: list[Operation] = field(default_factory=list)
    len: int = 0
    len_after: int = 0

    @classmethod
    def for_document(cls, doc: str) -> "ChangeSet":
        """Return an empty change set that applies to ``doc``."""
        return cls(len=len(doc), len_after=len(doc))

    def retain(self, n: int) -> None:
        if n == 0:
            return
        self.len += n
        self.len_after += n
        if self.changes and isinstance(self.changes[-1], Retain):
            self.changes[-1] = Retain(self.changes[-1].n + n)
        else:
            self.changes.append(Retain(n))

    def delete(self, n: int) -> None:
        if n == 0:
            return
        self.len += n
        if self.changes and isinstance(self.changes[-1], Delete):
            self.changes[-1] = Delete(self.changes[-1].n + n)
        else:
            self.changes.append(Delete(n))

    def insert(self, fragment: str) -> None:
        if not fragment:
            return
        self.len_after += len(fragment)
        last = self.changes[-1] if self.changes else None
        before_last = self.changes[-2] if len(self.changes) >= 2 else None
        if isinstance(last, Insert):
            self.changes[-1] = Insert(last.text + fragment)
        elif isinstance(last, Delete) and isinstance(before_last, Insert):
            self.changes[-2] = Insert(before_last.text + fragment)
        elif isinstance(last, Delete):
            # keep insertions ahead of deletions at the same position
            self.changes[-1] = Insert(fragment)
            self.changes.append(last)
        else:
            self.changes.append(Insert(fragment))

    def compose(self, other: "ChangeSet") -> "ChangeSet":
        """Combine with ``other`` into a single change set.

        If ``self`` turns document A into B and ``other`` turns B into C, the
        result turns A into C.
        """
        if self.len_after != other.len:
            raise ValueError(
                f"cannot compose: length after first ({self.len_after}) "
                f"differs from length before second ({other.len})"
            )
        if not self.changes:
            return other

        changes_a = iter(self.changes)
        changes_b = iter(other.changes)
        head_a = next(changes_a, None)
        head_b = next(changes_b, None)
        result = ChangeSet()

        while head_a is not None or head_b is not None:
            if isinstance(head_a, Delete):
                result.delete(head_a.n)
                head_a = next(changes_a, None)
                continue
            if isinstance(head_b, Insert):
                result.insert(head_b.text)
                head_b = next(changes_b, None)
                continue
            if head_a is None or head_b is None:
                raise ValueError("change sets do not line up")

            match head_a, head_b:
                case Retain(i), Retain(j):
                    result.retain(min(i, j))
                    head_a = Retain(i - j) if i > j else next(changes_a, None)
                    head_b = Retain(j - i) if j > i else next(changes_b, None)
                case Insert(s), Delete(j):
                    size = len(s)
                    head_a = Insert(s[j:]) if size > j else next(changes_a, None)
                    head_b = Delete(j - size) if j > size else next(changes_b, None)
                case Insert(s), Retain(j):
                    size = len(s)
                    result.insert(s[:j])
                    head_a = Insert(s[j:]) if size > j else next(changes_a, None)
                    head_b = Retain(j - size) if j > size else next(changes_b, None)
                case Retain(i), Delete(j):
                    result.delete(min(i, j))
                    head_a = Retain(i - j) if i > j else next(changes_a, None)
                    head_b = Delete(j - i) if j > i else next(changes_b, None)

        return result

    def invert(self, original_doc: str) -> "ChangeSet":
        """Return a change set that reverts this one.

        ``original_doc`` is the document before this change set was applied.
        """
        if len(original_doc) != self.len:
            raise ValueError(
                f"document length {len(original_doc)} does not match change set length {self.len}"
            )
        result = ChangeSet()
        pos = 0
        for op in self.changes:
            match op:
                case Retain(n):
                    result.retain(n)
                    pos += n
                case Delete(n):
                    result.insert(original_doc[pos:pos + n])
                    pos += n
                case Insert(text):
                    result.delete(len(text))
        return result

    def apply(self, text: str) -> str:
        """Return ``text`` with the changes applied."""
        if len(text) != self.len:
            raise ValueError(
                f"document length {len(text)} does not match change set length {self.len}"
            )
        parts: list[str] = []
        pos = 0
        for op in self.changes:
            match op:
                case Retain(n):
                    parts.append(text[pos:pos + n])
                    pos += n
                case Delete(n):
                    pos += n
                case Insert(fragment):
                    parts.append(fragment)
        return "".join(parts)

    def is_empty(self) -> bool:
        return not self.changes

    def map_pos(self, pos: int, assoc: Assoc) -> int:
        """Map a position in the old document to the new one.

        ``Assoc.BEFORE`` keeps the position before text inserted at it,
        ``Assoc.AFTER`` moves it past such text.
        """
        old_pos = 0
        new_pos = 0
        for op, replaced in _grouped(self.changes):
            match op:
                case Retain(n):
                    old_end = old_pos + n
                    if old_end > pos:
                        return new_pos + (pos - old_pos)
                    new_pos += n
                case Delete(n):
                    old_end = old_pos + n
                    if old_end > pos:
                        return new_pos
                case Insert(text):
                    inserted = len(text)
                    if replaced is not None:
                        old_end = old_pos + replaced.n
                        if old_end > pos:
                            if pos == old_pos or assoc is Assoc.BEFORE:
                                return new_pos
                            return new_pos + inserted
                    else:
                        old_end = old_pos
                        if old_pos == pos:
                            return new_pos if assoc is Assoc.BEFORE else new_pos + inserted
                    new_pos += inserted
            old_pos = old_end

        if pos > old_pos:
            raise IndexError(f"Position {pos} is out of range for changeset len {old_pos}!")
        return new_pos

    def changes_iter(self) -> Iterator[Change]:
        """Yield the changes as ``(from, to, replacement)`` tuples."""
        pos = 0
        for op, replaced in _grouped(self.changes):
            match op:
                case Retain(n):
                    pos += n
                case Delete(n):
                    yield pos, pos + n, None
                    pos += n
                case Insert(text):
                    if replaced is not None:
                        yield pos, pos + replaced.n, text
                        pos += replaced.n
                    else:
                        yield pos, pos, text