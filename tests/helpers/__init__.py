"""Test helpers package."""

from tests.helpers.board import build_state, layout_of, make_id_factory
from tests.helpers.wait import wait_for_focus, wait_until

__all__ = ["build_state", "layout_of", "make_id_factory", "wait_for_focus", "wait_until"]
