"""Character search forwards and backwards from a position."""

from __future__ import annotations

from typing import Optional


def find_nth_next(text: str, ch: str, pos: int, n: int, inclusive: bool) -> Optional[int]:
    """Find the ``n``-th occurrence of ``ch`` after ``pos``.

    When ``inclusive`` is false the position just before the match is returned.
    """
    if pos >= len(text):
        return None
    chars = iter(text[pos + 1:])
    for _ in range(n):
        for c in chars:
            pos += 1
            if c == ch:
                break
        else:
            return None
    return pos if inclusive else pos - 1


def find_nth_prev(text: str, ch: str, pos: int, n: int, inclusive: bool) -> Optional[int]:
    """Find the ``n``-th occurrence of ``ch`` before ``pos``.

    When ``inclusive`` is false the position just after the match is returned.
    """
    if pos > len(text):
        raise IndexError(f"position {pos} is out of range for length {len(text)}")
    chars = reversed(text[:pos])
    for _ in range(n):
        for c in chars:
            pos = max(pos - 1, 0)
            if c == ch:
                break
        else:
            return None
    return pos if inclusive else pos + 1