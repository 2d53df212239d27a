"""Word boundaries."""

from __future__ import annotations

from helixcore.movement import is_punctuation, is_word, skip_over_prev


def nth_prev_word_boundary(text: str, char_idx: int, count: int) -> int:
    """Return the start of the ``count``-th word before ``char_idx``."""
    with_end = False
    for _ in range(count):
        if char_idx == 0:
            break
        char_idx, _ = skip_over_prev(text, char_idx, lambda c: c == "\n")
        char_idx, with_end = skip_over_prev(text, char_idx, str.isspace)
        ch = text[char_idx]
        if is_word(ch):
            char_idx, with_end = skip_over_prev(text, char_idx, is_word)
        elif is_punctuation(ch):
            char_idx, with_end = skip_over_prev(text, char_idx, is_punctuation)
    if with_end or char_idx == 0:
        return char_idx
    return char_idx + 1