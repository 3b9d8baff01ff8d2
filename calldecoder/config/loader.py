"""Config loader for the decoder."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Mapping, MutableMapping, Optional

DEFAULT_CONFIG_PATH = Path("decoder.json")

DEFAULT_OFFSET_WINDOW = 1920
DEFAULT_SMALL_WORD_DIGITS = 4
# Small words are read as 128-bit integers.
MAX_SMALL_WORD_DIGITS = 32


class ConfigError(ValueError):
    """Raised when configuration data is invalid or missing."""


@dataclass(frozen=True)
class DecoderConfig:
    """Tunable knobs of a decode session."""

    classify_outer: bool = True
    offset_window: int = DEFAULT_OFFSET_WINDOW
    small_word_digits: int = DEFAULT_SMALL_WORD_DIGITS
    log_level: str = "INFO"

    def to_dict(self) -> Dict[str, Any]:
        return {item.name: getattr(self, item.name) for item in fields(self)}


def _reject_unknown_keys(data: Mapping[str, Any]) -> None:
    known = {item.name for item in fields(DecoderConfig)}
    unknown = sorted(key for key in data if key not in known)
    if unknown:
        raise ConfigError(f"config has unknown keys: {', '.join(unknown)}")


def _as_bool(value: Any, *, field_name: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigError(f"{field_name} must be true or false")
    return value


def _as_int(value: Any, *, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"{field_name} must be an integer, got {value!r}")
    return value


def _load_json(path: Path) -> MutableMapping[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as fh:
            data = json.load(fh)
    except FileNotFoundError as exc:
        raise ConfigError(f"Config file not found: {path}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Config file contains invalid JSON: {path}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Config file must hold a JSON object: {path}")
    return data


def build_config(data: Mapping[str, Any]) -> DecoderConfig:
    """Validate a config mapping and fill in defaults."""
    _reject_unknown_keys(data)
    defaults = DecoderConfig()

    config = DecoderConfig(
        classify_outer=_as_bool(data.get("classify_outer", defaults.classify_outer), field_name="classify_outer"),
        offset_window=_as_int(data.get("offset_window", defaults.offset_window), field_name="offset_window"),
        small_word_digits=_as_int(
            data.get("small_word_digits", defaults.small_word_digits), field_name="small_word_digits"
        ),
        log_level=str(data.get("log_level", defaults.log_level)).upper(),
    )
    if config.offset_window < 0:
        raise ConfigError("offset_window must not be negative")
    if not 0 <= config.small_word_digits <= MAX_SMALL_WORD_DIGITS:
        raise ConfigError(f"small_word_digits must be between 0 and {MAX_SMALL_WORD_DIGITS}")
    if not isinstance(logging.getLevelName(config.log_level), int):
        raise ConfigError(f"Unknown log_level: {config.log_level}")
    return config


def load_config(config_path: Optional[Path] = None) -> DecoderConfig:
    """Load and validate decoder configuration.

    Without ``config_path`` a missing ``decoder.json`` falls back to defaults.
    """
    if config_path is None:
        if not DEFAULT_CONFIG_PATH.exists():
            return DecoderConfig()
        config_path = DEFAULT_CONFIG_PATH
    return build_config(_load_json(config_path))


__all__ = [
    "ConfigError",
    "DEFAULT_OFFSET_WINDOW",
    "DEFAULT_SMALL_WORD_DIGITS",
    "DecoderConfig",
    "build_config",
    "load_config",
]
