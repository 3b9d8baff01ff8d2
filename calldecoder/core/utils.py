"""Utility helpers shared across decoder core modules."""

from __future__ import annotations

import logging
import string

from web3 import Web3

HEX_DIGITS = frozenset(string.hexdigits)


class CalldataError(ValueError):
    """Raised when raw call data cannot be read at all."""


def get_logger(name: str = "calldecoder") -> logging.Logger:
    """Return a configured logger with a single stream handler."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
    return logger


def set_log_level(level: str) -> None:
    """Apply ``level`` to every ``calldecoder`` logger created so far."""
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level: {level}")
    for name in list(logging.root.manager.loggerDict):
        if name == "calldecoder" or name.startswith("calldecoder."):
            logging.getLogger(name).setLevel(numeric)


def strip_0x(data: str) -> str:
    """Return ``data`` without a leading ``0x`` / ``0X`` marker."""
    return data[2:] if data[:2] in ("0x", "0X") else data


def is_hex_digits(data: str) -> bool:
    return all(ch in HEX_DIGITS for ch in data)


def normalize_calldata(data: str) -> str:
    """Strip, drop the ``0x`` prefix and lowercase raw call data."""
    stripped = strip_0x(data.strip())
    if not is_hex_digits(stripped):
        raise CalldataError("Call data contains non-hex characters")
    return stripped.lower()


def word_to_address(word: str) -> str:
    """Return the checksummed address held in the low 20 bytes of ``word``."""
    return Web3.to_checksum_address("0x" + word[-40:].rjust(40, "0"))


__all__ = [
    "CalldataError",
    "get_logger",
    "is_hex_digits",
    "normalize_calldata",
    "set_log_level",
    "strip_0x",
    "word_to_address",
]
