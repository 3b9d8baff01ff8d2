"""Hex word helpers: chunking, joining, trimming and fixed-width integers.

A *word* is 64 hex digits (32 bytes), the unit every ABI argument is padded to.
"""

from __future__ import annotations

from typing import List, Sequence

from calldecoder.core.utils import is_hex_digits

WORD_DIGITS = 64
SELECTOR_DIGITS = 8

EMPTY_4 = "00000000"
MASK_4 = "ffffffff"
EMPTY_32 = "0" * WORD_DIGITS
MAX_U256 = "f" * WORD_DIGITS
MAX_U128 = "0" * 32 + "f" * 32


class HexWordError(ValueError):
    """Raised when hex digits do not fit the requested integer width."""


def chunk(data: str, size: int) -> List[str]:
    """Split ``data`` into ``size``-digit windows; the last one may be short."""
    if size <= 0:
        raise ValueError("chunk size must be positive")
    return [data[pos:pos + size] for pos in range(0, len(data), size)]


def join(words: Sequence[str]) -> str:
    return "".join(words)


def trim_leading_zero_digits(word: str) -> str:
    """Drop leading ``0`` digits; an all-zero word trims to ``""``."""
    return word.lstrip("0")


def pad_left_and_realign(words: Sequence[str], index: int) -> List[str]:
    """Prefix ``words[index]`` with a zero marker, cut it to 56 digits and re-split.

    The stream loses 8 digits at ``index``, so every later word moves left.
    """
    padded = list(words)
    padded[index] = (EMPTY_4 + padded[index])[:WORD_DIGITS - SELECTOR_DIGITS]
    return chunk(join(padded), WORD_DIGITS)


def big_endian_uint(hex_digits: str, bit_width: int = 256) -> int:
    """Read ``hex_digits`` as a big-endian unsigned integer of ``bit_width`` bits."""
    if bit_width % 8 != 0 or not 0 < bit_width <= 512:
        raise HexWordError(f"Unsupported bit width: {bit_width}")
    if len(hex_digits) > bit_width // 4:
        raise HexWordError(
            f"{len(hex_digits)} hex digits do not fit in a {bit_width}-bit integer"
        )
    if not is_hex_digits(hex_digits):
        raise HexWordError(f"Not a hex string: {hex_digits!r}")
    return int(hex_digits, 16) if hex_digits else 0


__all__ = [
    "EMPTY_32",
    "EMPTY_4",
    "HexWordError",
    "MASK_4",
    "MAX_U128",
    "MAX_U256",
    "SELECTOR_DIGITS",
    "WORD_DIGITS",
    "big_endian_uint",
    "chunk",
    "join",
    "pad_left_and_realign",
    "trim_leading_zero_digits",
]
