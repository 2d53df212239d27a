"""Editor state of a single buffer."""

from __future__ import annotations

from dataclasses import dataclass, field

from helixcore.selection import Selection


@dataclass
class State:
    """A document together with its current selection."""

    doc: str
    selection: Selection = field(default_factory=lambda: Selection.point(0))