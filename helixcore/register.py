"""Process-wide named registers holding lists of strings."""

from __future__ import annotations

import threading
from typing import Optional

_REGISTRY: dict[str, list[str]] = {}
_LOCK = threading.Lock()


def get(register_name: str) -> Optional[list[str]]:
    """Return a copy of the values stored under ``register_name``, if any."""
    with _LOCK:
        values = _REGISTRY.get(register_name)
        return list(values) if values is not None else None


def set(register_name: str, values: list[str]) -> None:  # noqa: A001
    """Store ``values`` under ``register_name``, replacing earlier ones."""
    with _LOCK:
        _REGISTRY[register_name] = list(values)