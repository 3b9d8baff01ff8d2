"""Candidate ABI types for a single 32-byte word."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Tuple

from calldecoder.core.selectors import has_selector_head
from calldecoder.core.words import (
    EMPTY_32,
    MASK_4,
    MAX_U128,
    MAX_U256,
    SELECTOR_DIGITS,
    big_endian_uint,
    trim_leading_zero_digits,
)

ADDRESS_DIGITS = 40


class TypeTag(str, Enum):
    """Closed vocabulary of value interpretations."""

    UINT = "uint"
    INT = "int"
    BYTES = "bytes"
    BOOL = "bool"
    UINT8 = "uint8"
    BYTES1 = "bytes1"
    BYTES20 = "bytes20"
    ADDRESS = "address"
    SELECTOR = "selector"
    STRING = "string"
    ANY_ZERO = "any_zero"
    ANY_MAX = "any_max"
    ZERO_UINT = "zero_uint"
    MAX_UINT128 = "max_uint128"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class CandidateTypes:
    """Every type judged plausible for one word, most likely first."""

    types: Tuple[TypeTag, ...]

    def __post_init__(self) -> None:
        if not self.types:
            raise ValueError("CandidateTypes cannot be empty")

    @classmethod
    def of(cls, *types: TypeTag) -> "CandidateTypes":
        return cls(tuple(types))

    @property
    def best(self) -> TypeTag:
        return self.types[0]

    def __iter__(self) -> Iterator[TypeTag]:
        return iter(self.types)

    def __len__(self) -> int:
        return len(self.types)

    def __contains__(self, tag: object) -> bool:
        return tag in self.types

    def names(self) -> Tuple[str, ...]:
        return tuple(tag.value for tag in self.types)


def infer_types(word: str) -> CandidateTypes:
    """Classify ``word`` into a small set of plausible ABI types.

    Rules are checked in order and the first match wins:

    * exact bit patterns (all zero, ``type(uint128).max``, all ones);
    * a selector-like head (4 meaningful bytes then 4 zero bytes);
    * a leading ``ffffffff`` (negative two's-complement integer);
    * exactly 20 significant bytes (address);
    * small values (zero, boolean, ``uint8``);
    * anything else is left wide open.
    """
    if word == EMPTY_32:
        return CandidateTypes.of(TypeTag.ANY_ZERO)
    if word == MAX_U128:
        return CandidateTypes.of(TypeTag.MAX_UINT128)
    if word == MAX_U256:
        return CandidateTypes.of(TypeTag.ANY_MAX)

    if has_selector_head(word):
        return CandidateTypes.of(TypeTag.SELECTOR, TypeTag.STRING, TypeTag.BYTES)
    if word[:SELECTOR_DIGITS] == MASK_4:
        return CandidateTypes.of(TypeTag.INT)

    trimmed = trim_leading_zero_digits(word)
    if len(trimmed) == ADDRESS_DIGITS:
        return CandidateTypes.of(TypeTag.ADDRESS, TypeTag.BYTES20, TypeTag.UINT)

    value = big_endian_uint(trimmed, 256)
    if value == 0:
        return CandidateTypes.of(TypeTag.ZERO_UINT)
    if value <= 1:
        return CandidateTypes.of(TypeTag.UINT8, TypeTag.BYTES1, TypeTag.BOOL)
    if value <= 8:
        return CandidateTypes.of(TypeTag.UINT8, TypeTag.BYTES1)

    return CandidateTypes.of(TypeTag.INT, TypeTag.STRING, TypeTag.BYTES)


__all__ = ["ADDRESS_DIGITS", "CandidateTypes", "TypeTag", "infer_types"]
