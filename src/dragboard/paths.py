"""Per-user config and data locations (platformdirs, env overridable)."""

from __future__ import annotations

import os
from pathlib import Path

from platformdirs import user_config_dir, user_data_dir

APP_NAME = "dragboard"


def _resolve(env_var: str, default: str) -> Path:
    override = os.environ.get(env_var)
    return Path(override) if override else Path(default)


def get_data_dir() -> Path:
    """Where exported debug logs go. ``DRAGBOARD_DATA_DIR`` overrides."""
    return _resolve("DRAGBOARD_DATA_DIR", user_data_dir(APP_NAME))


def get_config_dir() -> Path:
    """Where ``config.toml`` lives. ``DRAGBOARD_CONFIG_DIR`` overrides."""
    return _resolve("DRAGBOARD_CONFIG_DIR", user_config_dir(APP_NAME))


def get_config_path() -> Path:
    return get_config_dir() / "config.toml"


def get_debug_log_path() -> Path:
    return get_data_dir() / "debug.log"
