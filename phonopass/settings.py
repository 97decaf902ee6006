#!/usr/bin/env python3
"""Settings loader for phonopass."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

from .exceptions import ConfigError

CONFIG_DIR = Path(__file__).resolve().parent / "configs"
APP_CONFIG_PATH = CONFIG_DIR / "app.yaml"


@lru_cache(maxsize=1)
def load_app_config() -> dict:
    if not APP_CONFIG_PATH.exists():
        raise ConfigError(f"Missing app config: {APP_CONFIG_PATH}")
    data = yaml.safe_load(APP_CONFIG_PATH.read_text(encoding='utf-8'))
    return data or {}


def get_setting(path: str, default: Any = None) -> Any:
    """Get nested setting by dotted path."""
    data = load_app_config()
    current: Any = data
    for part in path.split('.'):
        if not isinstance(current, dict) or part not in current:
            return default
        current = current[part]
    return current


def require_setting(path: str) -> Any:
    """Get nested setting by dotted path, failing if it is not set."""
    value = get_setting(path)
    if value is None:
        raise ConfigError(f"{path} must be set in {APP_CONFIG_PATH.name}")
    return value


__all__ = [
    "load_app_config",
    "get_setting",
    "require_setting",
    "APP_CONFIG_PATH",
]
