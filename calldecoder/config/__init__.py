"""Configuration utilities for the decoder."""

from .loader import (
    DEFAULT_OFFSET_WINDOW,
    DEFAULT_SMALL_WORD_DIGITS,
    ConfigError,
    DecoderConfig,
    build_config,
    load_config,
)

__all__ = [
    "ConfigError",
    "DEFAULT_OFFSET_WINDOW",
    "DEFAULT_SMALL_WORD_DIGITS",
    "DecoderConfig",
    "build_config",
    "load_config",
]
