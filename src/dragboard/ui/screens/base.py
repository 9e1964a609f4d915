"""Base screen class for Dragboard screens."""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

from textual.screen import Screen

if TYPE_CHECKING:
    from dragboard.app import DragboardApp
    from dragboard.core.store import BoardStore


class DragboardScreen(Screen):
    @property
    def dragboard_app(self) -> DragboardApp:
        """Get the typed DragboardApp instance."""
        return cast("DragboardApp", self.app)

    @property
    def store(self) -> BoardStore:
        """The board store owned by the app."""
        return self.dragboard_app.store
