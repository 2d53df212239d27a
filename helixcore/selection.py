"""Selections: one or more ranges over a document, addressed by character index.

Even a single cursor is an empty range inside a selection.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, replace
from typing import Any, Optional

from helixcore.changeset import Assoc, ChangeSet


@dataclass(frozen=True)
class Range:
    """A single selection range. Anchor-inclusive, head-exclusive."""

    anchor: int
    head: int
    horiz: Optional[int] = None

    @property
    def start(self) -> int:
        """Start of the range."""
        return min(self.anchor, self.head)

    @property
    def end(self) -> int:
        """End of the range."""
        return max(self.anchor, self.head)

    def is_empty(self) -> bool:
        """True when head and anchor are at the same position."""
        return self.anchor == self.head

    def overlaps(self, other: "Range") -> bool:
        """Check two ranges for overlap."""
        if self.is_empty():
            pos = self.head
            return other.start <= pos <= other.end
        return self.end > other.start and other.end > self.start

    def contains(self, pos: int) -> bool:
        if self.is_empty():
            return False
        if self.anchor < self.head:
            return self.anchor <= pos < self.head
        return self.head < pos <= self.anchor

    def map(self, changes: ChangeSet) -> "Range":
        """Return the range at the same place after ``changes`` are applied."""
        anchor = changes.map_pos(self.anchor, Assoc.AFTER)
        head = changes.map_pos(self.head, Assoc.AFTER)
        if anchor == self.anchor and head == self.head:
            return self
        return Range(anchor, head)

    def extend(self, start: int, end: int) -> "Range":
        """Extend the range to cover at least ``start`` to ``end``."""
        if start <= self.anchor <= end:
            return Range(start, end)
        if abs(start - self.anchor) > abs(end - self.anchor):
            return Range(self.anchor, start)
        return Range(self.anchor, end)

    def fragment(self, text: str) -> str:
        """Return the text covered by the range, both ends included."""
        return text[self.start:self.end + 1]


class Selection:
    """One or more ranges with a primary one. Never empty."""

    __slots__ = ("_ranges", "_primary_index")

    def __init__(self, ranges: Iterable[Range], primary_index: int = 0) -> None:
        items = list(ranges)
        if not items:
            raise ValueError("a selection needs at least one range")
        if len(items) == 1:
            self._ranges: tuple[Range, ...] = (items[0],)
            self._primary_index = 0
        else:
            self._ranges, self._primary_index = _normalize(items, primary_index)

    @classmethod
    def _raw(cls, ranges: tuple[Range, ...], primary_index: int) -> "Selection":
        sel = object.__new__(cls)
        sel._ranges = ranges
        sel._primary_index = primary_index
        return sel

    @property
    def ranges(self) -> tuple[Range, ...]:
        return self._ranges

    @property
    def primary_index(self) -> int:
        return self._primary_index

    def primary(self) -> Range:
        return self._ranges[self._primary_index]

    def cursor(self) -> int:
        return self.primary().head

    def into_single(self) -> "Selection":
        """Return a selection holding only the primary range."""
        if len(self._ranges) == 1:
            return self
        return Selection._raw((self.primary(),), 0)

    def push(self, range: Range) -> "Selection":
        """Add a range, which becomes the primary one."""
        items = [*self._ranges, range]
        ranges, primary = _normalize(items, len(items) - 1)
        return Selection._raw(ranges, primary)

    def map(self, changes: ChangeSet) -> "Selection":
        """Move every range through ``changes``."""
        if changes.is_empty():
            return self
        return Selection((r.map(changes) for r in self._ranges), self._primary_index)

    @classmethod
    def single(cls, anchor: int, head: int) -> "Selection":
        """Return a selection holding a single range."""
        return cls._raw((Range(anchor, head),), 0)

    @classmethod
    def point(cls, pos: int) -> "Selection":
        """Return a selection holding a single cursor."""
        return cls.single(pos, pos)

    def transform(self, f: Callable[[Range], Range]) -> "Selection":
        """Return a selection with ``f`` applied to every range."""
        return Selection((f(r) for r in self._ranges), self._primary_index)

    def fragments(self, text: str) -> Iterator[str]:
        for r in self._ranges:
            yield r.fragment(text)

    def __iter__(self) -> Iterator[Range]:
        return iter(self._ranges)

    def __len__(self) -> int:
        return len(self._ranges)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Selection):
            return NotImplemented
        return self._ranges == other._ranges and self._primary_index == other._primary_index

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Selection({list(self._ranges)!r}, primary_index={self._primary_index})"


def _normalize(ranges: list[Range], primary_index: int) -> tuple[tuple[Range, ...], int]:
    """Sort ranges by start and merge overlapping neighbours."""
    primary = ranges[primary_index]
    ranges = sorted(ranges, key=lambda r: r.start)
    primary_index = ranges.index(primary)

    result: list[Range] = []
    for i, current in enumerate(ranges):
        if result and current.overlaps(result[-1]):
            prev = result[-1]
            start = prev.start
            end = max(current.end, prev.end)
            if i <= primary_index:
                primary_index -= 1
            if current.anchor > current.head:
                result[-1] = replace(prev, anchor=end, head=start)
            else:
                result[-1] = replace(prev, anchor=start, head=end)
            continue
        result.append(current)
    return tuple(result), primary_index


def keep_matches(text: str, selection: Selection, pattern: Any) -> Optional[Selection]:
    """Keep only the ranges whose text matches ``pattern``; None if none do."""
    kept = [r for r in selection if pattern.search(r.fragment(text))]
    return Selection(kept, 0) if kept else None


def select_on_matches(text: str, selection: Selection, pattern: Any) -> Optional[Selection]:
    """Select every match of ``pattern`` inside the ranges; None if there is none."""
    result = [
        Range(sel.start + m.start(), sel.start + m.end() - 1)
        for sel in selection
        for m in pattern.finditer(sel.fragment(text))
    ]
    return Selection(result, 0) if result else None


def split_on_matches(text: str, selection: Selection, pattern: Any) -> Selection:
    """Split every range on the matches of ``pattern``."""
    result: list[Range] = []
    for sel in selection:
        sel_start = sel.start
        sel_end = sel.end
        start = sel_start
        for m in pattern.finditer(sel.fragment(text)):
            end = sel_start + m.start()
            result.append(Range(start, max(end - 1, 0)))
            start = sel_start + m.end()
        if start <= sel_end:
            result.append(Range(start, sel_end))
    return Selection(result, 0)