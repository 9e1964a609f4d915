"""Unit tests for config and data path resolution."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from dragboard.paths import get_config_path, get_data_dir, get_debug_log_path

if TYPE_CHECKING:
    from pathlib import Path

pytestmark = pytest.mark.unit


def test_env_overrides_are_honoured(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    monkeypatch.setenv("DRAGBOARD_CONFIG_DIR", str(tmp_path / "cfg"))
    monkeypatch.setenv("DRAGBOARD_DATA_DIR", str(tmp_path / "data"))

    assert get_config_path() == tmp_path / "cfg" / "config.toml"
    assert get_debug_log_path() == tmp_path / "data" / "debug.log"


def test_platform_default_without_override(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("DRAGBOARD_DATA_DIR", raising=False)

    assert get_data_dir().name == "dragboard"
