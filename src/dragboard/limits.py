"""Tunable limits shared across modules. Imports nothing from the package."""

from __future__ import annotations

import os
from importlib.metadata import PackageNotFoundError, version

_PRERELEASE_MARKERS = ("dev", "a", "b", "rc")


def _installed_version() -> str:
    try:
        return version("dragboard")
    except PackageNotFoundError:
        return "dev"


def _is_debug_build() -> bool:
    """Whether the store re-validates board invariants after every change.

    ``DRAGBOARD_DEBUG`` forces it on ("1"/"true") or off ("0"/"false").
    Otherwise any pre-release or source checkout counts as a debug build.
    """
    forced = os.environ.get("DRAGBOARD_DEBUG", "").strip().lower()
    if forced in ("1", "true"):
        return True
    if forced in ("0", "false"):
        return False
    installed = _installed_version().lower()
    return any(marker in installed for marker in _PRERELEASE_MARKERS)


DEBUG_BUILD: bool = _is_debug_build()

DRAG_ACTIVATION_DISTANCE = 2
"""Cells the pointer must travel before a press becomes a drag."""

MAX_LOG_MESSAGE_LENGTH = 4096
MAX_LOG_LINES = 2000
