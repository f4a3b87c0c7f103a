"""Utility helpers for loading project-wide configuration."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict

try:  # Python 3.11+
    import tomllib  # type: ignore[attr-defined]
except ModuleNotFoundError:  # pragma: no cover - fallback for older Python
    import tomli as tomllib  # type: ignore[import-untyped]

import jsonschema

from sudoku_errors import ConfigError


_CONFIG_FILENAME = "config.toml"
_CONFIG_ENV = "SUDOKU_CONFIG"

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
_RATIO = {"type": "number", "minimum": 0, "maximum": 1}

CONFIG_SCHEMA: Dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "properties": {
        "generator": {
            "type": "object",
            "properties": {
                "default_level": {"type": "integer", "enum": [1, 2, 3]},
                "empty_ratio": {
                    "type": "object",
                    "properties": {"easy": _RATIO, "medium": _RATIO, "hard": _RATIO},
                    "additionalProperties": False,
                },
            },
        },
        "logging": {
            "type": "object",
            "properties": {
                "level": {
                    "type": "string",
                    "enum": LOG_LEVELS,
                },
                "events_dir": {"type": "string"},
                "max_bytes": {"type": "integer", "minimum": 1},
            },
        },
        "pdf": {
            "type": "object",
            "properties": {
                "page_width_cm": {"type": "number", "exclusiveMinimum": 0},
                "page_height_cm": {"type": "number", "exclusiveMinimum": 0},
                "margin_cm": {"type": "number", "minimum": 0},
                "font_scale": {"type": "number", "exclusiveMinimum": 0},
            },
        },
    },
}


_OVERRIDE_PATH: Path | None = None


def _config_path() -> Path:
    if _OVERRIDE_PATH is not None:
        return _OVERRIDE_PATH
    override = os.environ.get(_CONFIG_ENV)
    if override:
        return Path(override)
    return Path(__file__).resolve().parents[1] / _CONFIG_FILENAME


def use_config(path: str | Path | None) -> None:
    """Point the loader at ``path`` (``None`` restores the default lookup)."""

    global _OVERRIDE_PATH
    _OVERRIDE_PATH = Path(path) if path is not None else None
    get_config.cache_clear()


def validate_config(data: Dict[str, Any]) -> None:
    """Raise :class:`ConfigError` for the first schema violation in ``data``."""

    validator = jsonschema.Draft202012Validator(CONFIG_SCHEMA)
    errors = sorted(validator.iter_errors(data), key=lambda e: list(e.path))
    if errors:
        first = errors[0]
        path = ".".join(str(p) for p in first.path)
        raise ConfigError(first.message, path)


@lru_cache(maxsize=1)
def get_config() -> Dict[str, Any]:
    """Load, validate and cache the project configuration as a dictionary.

    A missing file yields an empty mapping so module defaults apply.
    """
    path = _config_path()
    if not path.exists():
        return {}
    try:
        with path.open("rb") as fh:
            data = tomllib.load(fh)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"cannot parse '{path}': {exc}") from exc
    validate_config(data)
    return data


def reload() -> None:
    """Clear the cached configuration."""

    get_config.cache_clear()


def get_section(path: str, default: Any = None) -> Any:
    """Retrieve a nested configuration value using dotted notation."""

    data: Any = get_config()
    for part in path.split("."):
        if isinstance(data, dict) and part in data:
            data = data[part]
        else:
            if default is not None:
                return default
            raise KeyError(f"Configuration path '{path}' not found")
    return data


__all__ = [
    "CONFIG_SCHEMA",
    "LOG_LEVELS",
    "get_config",
    "get_section",
    "reload",
    "use_config",
    "validate_config",
]
