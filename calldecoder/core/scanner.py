"""Word-scanning decoder: finds nested calls and candidate offsets.

The scanner walks the argument words of the outer call. When a word opens
with a selector and the word before it reads as a byte length, the nested
call is carved out of the stream and the remaining words are re-aligned.
Small word-aligned values are remembered as candidate offsets of dynamic
types.
"""

from __future__ import annotations

from typing import Callable, List, Optional, Sequence

from calldecoder.config import DEFAULT_OFFSET_WINDOW, DEFAULT_SMALL_WORD_DIGITS
from calldecoder.core.records import CallRecord, PendingOffset
from calldecoder.core.selectors import (
    find_embedded_selector,
    is_selector,
    previous_word,
    splice_and_shift,
)
from calldecoder.core.utils import get_logger
from calldecoder.core.words import (
    EMPTY_32,
    SELECTOR_DIGITS,
    WORD_DIGITS,
    big_endian_uint,
    chunk,
    join,
    pad_left_and_realign,
    trim_leading_zero_digits,
)

LOGGER = get_logger("calldecoder.scanner")

LENGTH_BITS = 128

OffsetResolver = Callable[[Sequence[str], Sequence[PendingOffset]], List[PendingOffset]]


def passthrough_resolver(words: Sequence[str], offsets: Sequence[PendingOffset]) -> List[PendingOffset]:
    """Default resolver stage: offsets are handed back without lengths."""
    return list(offsets)


def extract_nested_call(
    words: Sequence[str], start: int, length: int, nested: List[CallRecord]
) -> Optional[int]:
    """Carve a nested call of ``length`` bytes out of ``words[start:]``.

    A nested call is recognised when ``length`` bytes end 4 bytes past a word
    boundary: a selector followed by whole argument words. The call is
    appended to ``nested`` and the number of words the caller should skip is
    returned. ``None`` means nothing further to skip, either because the call
    is a bare selector or because the length matched no known layout.
    """
    cut = join(words[start:])[:length * 2]
    remainder = (length * 2) % WORD_DIGITS

    if remainder == SELECTOR_DIGITS:
        selector, payload = cut[:SELECTOR_DIGITS], cut[SELECTOR_DIGITS:]
        nested.append(CallRecord(selector=selector, words=chunk(payload, WORD_DIGITS)))
        LOGGER.info("Nested call %s at word %s (%s bytes)", selector, start, length)

        if length == 4:
            return None
        return (length - 8) * 2 // WORD_DIGITS

    # TODO: carve out packed bytes/strings (remainder 56) once their layout is pinned down.
    return None


class WordScanner:
    """Single-use scanner over one call's argument words."""

    def __init__(
        self,
        words: Sequence[str],
        *,
        offset_window: int = DEFAULT_OFFSET_WINDOW,
        small_word_digits: int = DEFAULT_SMALL_WORD_DIGITS,
    ) -> None:
        self.words: List[str] = list(words)
        self.offset_window = offset_window
        self.small_word_digits = small_word_digits
        self.nested: List[CallRecord] = []
        self.offsets: List[PendingOffset] = []

    def _length_before(self, index: int) -> Optional[int]:
        last = previous_word(self.words, index)
        if last is None:
            return None
        trimmed = trim_leading_zero_digits(last)
        if len(trimmed) * 4 > LENGTH_BITS:
            LOGGER.debug("Word %s too wide to be a length", index - 1)
            return None
        return big_endian_uint(trimmed, LENGTH_BITS)

    def _try_extract(self, index: int, residual: str) -> int:
        length = self._length_before(index)
        if length is None:
            return 0
        skip = extract_nested_call(self.words, index, length, self.nested)
        if skip is None:
            return 0
        self.words, _ = splice_and_shift(self.words, index, residual)
        return skip

    def _record_offset(self, index: int, trimmed: str) -> None:
        value = big_endian_uint(trimmed, LENGTH_BITS)
        if value < index * WORD_DIGITS + self.offset_window and value % WORD_DIGITS == 0:
            offset = PendingOffset(word_index=index, offset_in_words=value // WORD_DIGITS)
            LOGGER.debug("Candidate offset at word %s -> %s", index, offset.offset_in_words)
            self.offsets.append(offset)

    def scan(self) -> List[str]:
        """Walk the words once and return them with nested payloads excised."""
        i = 0
        skip = 0
        while i < len(self.words):
            if skip:
                i += skip
                skip = 0
                if i >= len(self.words):
                    break

            if self.words[i] == EMPTY_32:
                self.words = pad_left_and_realign(self.words, i)

            word = self.words[i]
            trimmed = trim_leading_zero_digits(word)
            selector, residual = find_embedded_selector(word)

            if is_selector(selector):
                skip = self._try_extract(i, residual)
            elif len(trimmed) <= self.small_word_digits:
                self._record_offset(i, trimmed)

            i += 1

        return self.words


__all__ = [
    "OffsetResolver",
    "WordScanner",
    "extract_nested_call",
    "passthrough_resolver",
]
