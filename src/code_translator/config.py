"""YAML settings for the lookup window and the headless ``--lookup`` mode."""
from __future__ import annotations

import copy
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from .storage_warnings import record_storage_warning

CONFIG_FILENAME = "code-translator.config.yaml"

LOGGER = logging.getLogger(__name__)

DEFAULT_SETTINGS: dict[str, Any] = {
    "version": 1,
    "lookup": {
        "platform_lookup": True,
        "input_max_length": 30,
    },
    "ui": {
        "output_foreground": "#FFFFFF",
        "output_background": "#007481",
        "project_url": "https://github.com/codingABI/TranslateErrorCode",
    },
}


class ConfigurationError(RuntimeError):
    """Raised when the YAML configuration cannot be loaded."""


@dataclass(frozen=True)
class LookupSettings:
    platform_lookup: bool
    input_max_length: int

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> "LookupSettings":
        defaults = DEFAULT_SETTINGS["lookup"]
        max_length = int(data.get("input_max_length", defaults["input_max_length"]))
        return cls(
            platform_lookup=bool(data.get("platform_lookup", defaults["platform_lookup"])),
            input_max_length=max_length if max_length > 0 else defaults["input_max_length"],
        )


@dataclass(frozen=True)
class UiSettings:
    output_foreground: str
    output_background: str
    project_url: str

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> "UiSettings":
        defaults = DEFAULT_SETTINGS["ui"]
        # Empty strings count as unset.
        values = {key: str(data.get(key) or default) for key, default in defaults.items()}
        return cls(**values)


@dataclass(frozen=True)
class AppSettings:
    lookup: LookupSettings
    ui: UiSettings
    raw: dict[str, Any]


_SETTINGS_CACHE: AppSettings | None = None


def get_settings() -> AppSettings:
    """Return cached settings, loading from disk when necessary."""

    global _SETTINGS_CACHE
    if _SETTINGS_CACHE is None:
        _SETTINGS_CACHE = load_settings()
    return _SETTINGS_CACHE


def reset_settings_cache() -> None:
    """Reset the cached settings (useful for tests)."""

    global _SETTINGS_CACHE
    _SETTINGS_CACHE = None


def load_settings(config_path: Path | str | None = None) -> AppSettings:
    """Read ``code-translator.config.yaml``, filling in and saving missing defaults."""

    path = Path(config_path) if config_path is not None else Path.cwd() / CONFIG_FILENAME
    if path.exists():
        try:
            with path.open("r", encoding="utf-8") as handle:
                data = yaml.safe_load(handle)
        except yaml.YAMLError as exc:
            raise ConfigurationError(f"Failed to parse configuration file: {path}\n{exc}") from exc
        if data is None:
            data = {}
        elif not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file must contain a mapping: {path}")
    else:
        LOGGER.info("Creating default configuration at %s", path)
        data = {}
    merged = _fill_defaults(DEFAULT_SETTINGS, data)
    if merged != data:
        _write_yaml(path, merged)
    return AppSettings(
        lookup=LookupSettings.from_mapping(_section(merged, "lookup")),
        ui=UiSettings.from_mapping(_section(merged, "ui")),
        raw=merged,
    )


def write_default_config(destination: Path | str) -> Path:
    """Write the default configuration template to ``destination``."""

    target = Path(destination)
    _write_yaml(target, copy.deepcopy(DEFAULT_SETTINGS))
    return target


def _write_yaml(path: Path, data: dict[str, Any]) -> bool:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as handle:
            yaml.safe_dump(data, handle, sort_keys=False, allow_unicode=False)
    except OSError as exc:  # pragma: no cover - depends on system perms
        LOGGER.warning("Failed to write configuration %s: %s", path, exc)
        record_storage_warning(scope="config", action="write", path=path, detail=str(exc))
        return False
    return True


def _fill_defaults(defaults: dict[str, Any], user_values: dict[str, Any]) -> dict[str, Any]:
    """Return ``user_values`` with missing or null keys taken from ``defaults``.

    Unknown keys are kept so hand-written notes survive a rewrite.
    """

    merged = dict(user_values)
    for key, default in defaults.items():
        current = user_values.get(key)
        if current is None:
            merged[key] = copy.deepcopy(default)
        elif isinstance(default, dict) and isinstance(current, dict):
            merged[key] = _fill_defaults(default, current)
    return merged


def _section(data: dict[str, Any], key: str) -> dict[str, Any]:
    value = data.get(key)
    if isinstance(value, dict):
        return value
    LOGGER.warning("Ignoring non-mapping '%s' section in configuration", key)
    return {}
