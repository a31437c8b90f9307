"""Configuration loading for the jukebox console."""

from __future__ import annotations

from dataclasses import dataclass
import json
import logging
import os
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

MAX_TIMEOUT_SECONDS = 60.0


@dataclass(frozen=True)
class AppConfig:
    """Immutable user configuration loaded from disk."""

    base_url: str = "http://localhost:3678"
    timeout_seconds: float = 5.0
    prompt: str = "jukebox> "


def get_config_dir(app_name: str = "spotify-jukebox") -> Path:
    """Return the per-user config directory for the current platform."""
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        root = Path(base) if base else Path.home() / "AppData" / "Roaming"
        return root / app_name
    if os.name == "posix" and _is_macos():
        return Path.home() / "Library" / "Application Support" / app_name
    base = os.environ.get("XDG_CONFIG_HOME")
    root = Path(base) if base else Path.home() / ".config"
    return root / app_name


def get_config_path() -> Path:
    """Return the full config file path."""
    return get_config_dir() / "config.json"


def load_config() -> AppConfig:
    """Load configuration from disk, falling back to defaults on error."""
    path = get_config_path()
    if not path.exists():
        logger.info("No config at %s, using defaults", path)
        return AppConfig()
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError):
        logger.exception("Failed to load config from %s", path)
        return AppConfig()
    if not isinstance(raw, dict):
        return AppConfig()
    return _config_from_mapping(raw)


def _is_macos() -> bool:
    """Return True when running on macOS."""
    return os.uname().sysname == "Darwin" if hasattr(os, "uname") else False


def _get_str(
    raw: dict[str, Any],
    key: str,
    default: str,
    *,
    allow_empty: bool = False,
) -> str:
    """Fetch a string value, optionally allowing empty strings."""
    value = raw.get(key, default)
    if not isinstance(value, str):
        return default
    if not value and not allow_empty:
        return default
    return value


def _get_float(
    raw: dict[str, Any],
    key: str,
    default: float,
    *,
    min_value: float | None = None,
    max_value: float | None = None,
) -> float:
    """Fetch a numeric value with optional clamping."""
    value = raw.get(key, default)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        value = default
    value = float(value)
    if min_value is not None and value < min_value:
        return default
    if max_value is not None:
        value = min(max_value, value)
    return value


def _config_from_mapping(raw: dict[str, Any]) -> AppConfig:
    """Normalize raw JSON data into an AppConfig."""
    defaults = AppConfig()
    base_url = _get_str(raw, "base_url", defaults.base_url)
    if not base_url.startswith(("http://", "https://")):
        logger.warning("Ignoring base_url without http scheme: %s", base_url)
        base_url = defaults.base_url
    timeout = _get_float(
        raw,
        "timeout_seconds",
        defaults.timeout_seconds,
        min_value=0.1,
        max_value=MAX_TIMEOUT_SECONDS,
    )
    prompt = _get_str(raw, "prompt", defaults.prompt)
    return AppConfig(base_url=base_url, timeout_seconds=timeout, prompt=prompt)
