"""TOML configuration loading (`typolint.toml` or `[tool.typolint]` in `pyproject.toml`)."""

from __future__ import annotations

import dataclasses
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from typolint.lint import SpellcheckOptions

CONFIG_FILE_NAME: Final[str] = "typolint.toml"
PYPROJECT_FILE_NAME: Final[str] = "pyproject.toml"

# config key -> (options field, expected type)
_KEYS: Final[dict[str, tuple[str, type]]] = {
    "suppression-marker": ("suppression_marker", str),
    "language": ("language", str),
    "known-words": ("known_words", list),
    "min-word-length": ("min_word_length", int),
    "check-comments": ("check_comments", bool),
    "check-tokens": ("check_tokens", bool),
    "include": ("include", list),
    "exclude": ("exclude", list),
}


class ConfigError(ValueError):
    """Raised for unreadable or invalid configuration."""


def load_config(config_path: Path | None, search_dir: Path) -> dict[str, Any]:
    """Load the typolint table, returning an empty dict when nothing is configured.

    An explicit `config_path` must exist. Without one, `typolint.toml` in `search_dir` wins
    over a `[tool.typolint]` table in `search_dir/pyproject.toml`.
    """
    if config_path is not None:
        if not config_path.is_file():
            raise ConfigError(f"config file not found: {config_path}")
        return _read_table(config_path)

    for name in (CONFIG_FILE_NAME, PYPROJECT_FILE_NAME):
        candidate = search_dir / name
        if candidate.is_file():
            table = _read_table(candidate)
            if table or name == CONFIG_FILE_NAME:
                return table
    return {}


def options_from_config(
    config: Mapping[str, Any],
    base: SpellcheckOptions | None = None,
) -> SpellcheckOptions:
    """Overlay config values on `base` (defaults when omitted)."""
    options = base if base is not None else SpellcheckOptions()
    changes: dict[str, Any] = {}
    for key, value in config.items():
        if key not in _KEYS:
            raise ConfigError(f"unknown config key: {key!r}")
        field_name, expected = _KEYS[key]
        # bool is an int subclass; reject `min-word-length = true`
        if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
            raise ConfigError(f"{key!r} must be of type {expected.__name__}, got {type(value).__name__}")
        if expected is list:
            if not all(isinstance(item, str) for item in value):
                raise ConfigError(f"{key!r} must be a list of strings")
            value = tuple(value)
        changes[field_name] = value
    return dataclasses.replace(options, **changes)


def _read_table(path: Path) -> dict[str, Any]:
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"invalid TOML in {path}: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"cannot read {path}: {exc}") from exc

    if path.name == PYPROJECT_FILE_NAME:
        table = data.get("tool", {}).get("typolint", {})
        if not isinstance(table, dict):
            raise ConfigError(f"[tool.typolint] in {path} must be a table")
        return table
    return data
