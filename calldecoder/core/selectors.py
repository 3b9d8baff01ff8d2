"""Embedded selector detection and word-list splicing."""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from calldecoder.core.words import EMPTY_4, MASK_4, SELECTOR_DIGITS, WORD_DIGITS, chunk, join


def has_selector_head(word: str) -> bool:
    """True when ``word`` starts with 4 non-trivial bytes followed by 4 zero bytes."""
    parts = chunk(word, SELECTOR_DIGITS)
    if len(parts) < 2:
        return False
    head, follow = parts[0], parts[1]
    return head != EMPTY_4 and head != MASK_4 and follow == EMPTY_4


def is_selector(candidate: str) -> bool:
    return candidate not in (EMPTY_4, MASK_4)


def find_embedded_selector(word: str) -> Tuple[str, str]:
    """Return ``(selector, residual)`` for a word that opens with a selector.

    When no selector is found the selector slot holds ``EMPTY_4`` and the
    residual is the word unchanged.
    """
    if has_selector_head(word):
        return word[:SELECTOR_DIGITS], word[SELECTOR_DIGITS:]
    return EMPTY_4, word


def splice_and_shift(words: Sequence[str], index: int, replacement: str) -> Tuple[List[str], str]:
    """Replace ``words[index]``, pad the tail with ``EMPTY_4`` and re-split into words."""
    spliced = list(words)
    spliced[index] = replacement
    flat = join(spliced) + EMPTY_4
    return chunk(flat, WORD_DIGITS), flat


def previous_word(words: Sequence[str], index: int) -> Optional[str]:
    if index <= 0 or index > len(words):
        return None
    return words[index - 1]


def next_word(words: Sequence[str], index: int) -> Optional[str]:
    if index < 0 or index + 1 >= len(words):
        return None
    return words[index + 1]


__all__ = [
    "find_embedded_selector",
    "has_selector_head",
    "is_selector",
    "next_word",
    "previous_word",
    "splice_and_shift",
]
