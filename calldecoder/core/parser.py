"""Split outer call data into the method selector and its argument words."""

from __future__ import annotations

from typing import List, Tuple

from calldecoder.core.utils import CalldataError, get_logger, normalize_calldata
from calldecoder.core.words import SELECTOR_DIGITS, WORD_DIGITS, chunk, join

LOGGER = get_logger("calldecoder.parser")


def _accumulate_words(byte_chunks: List[str]) -> List[str]:
    words: List[str] = []
    for byte in byte_chunks:
        if not words or len(words[-1]) == WORD_DIGITS:
            words.append("")
        words[-1] += byte
    return words


def split_selector(data: str) -> Tuple[str, List[str]]:
    """Return ``(selector, words)`` for already normalised call data.

    Word-aligned input keeps its 64-digit layout and the first word loses its
    selector digits in place. Anything else is read byte by byte and regrouped
    into words after the 4 selector bytes; the last word may be short.
    """
    if len(data) < SELECTOR_DIGITS:
        raise CalldataError(f"Call data too short for a selector: {len(data)} hex digits")

    if len(data) % WORD_DIGITS == 0:
        words = chunk(data, WORD_DIGITS)
        selector = words[0][:SELECTOR_DIGITS]
        words[0] = words[0][SELECTOR_DIGITS:]
        LOGGER.debug("Word-aligned call data: selector=%s words=%s", selector, len(words))
        return selector, words

    byte_chunks = chunk(data, 2)
    selector = join(byte_chunks[:4])
    words = _accumulate_words(byte_chunks[4:])
    LOGGER.debug("Byte-oriented call data: selector=%s words=%s", selector, len(words))
    return selector, words


def parse_selector(calldata: str) -> Tuple[str, List[str]]:
    """Normalise raw call data and split it with :func:`split_selector`."""
    return split_selector(normalize_calldata(calldata))


__all__ = ["parse_selector", "split_selector"]
