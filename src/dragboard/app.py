"""Main Dragboard TUI application."""

from __future__ import annotations

from pathlib import Path

from textual.app import App

from dragboard.config import DragboardConfig
from dragboard.constants import DEFAULT_CONFIG_PATH, DEMO_BOARD
from dragboard.core.board import BoardState
from dragboard.core.store import BoardStore
from dragboard.debug_log import export_logs_to_file, log, setup_debug_logging
from dragboard.keybindings import APP_BINDINGS
from dragboard.paths import get_debug_log_path
from dragboard.theme import DRAGBOARD_THEME
from dragboard.ui.screens.board import BoardScreen


class DragboardApp(App):
    """Dragboard TUI Application - drag-and-drop Kanban board."""

    TITLE = "DRAGBOARD"

    CSS = """
    Screen {
        background: $background;
    }

    Toast {
        max-width: 60;
    }
    """

    BINDINGS = APP_BINDINGS

    def __init__(
        self,
        config_path: str | Path = DEFAULT_CONFIG_PATH,
        *,
        config: DragboardConfig | None = None,
        store: BoardStore | None = None,
        seed_demo: bool | None = None,
    ):
        super().__init__()

        self.register_theme(DRAGBOARD_THEME)
        self.theme = "dragboard"

        self.config_path = Path(config_path)
        self.config = config if config is not None else DragboardConfig.load(self.config_path)

        if store is None:
            if seed_demo is None:
                seed_demo = self.config.ui.seed_demo_board
            state = BoardState.seeded(DEMO_BOARD) if seed_demo else BoardState()
            store = BoardStore(state, config=self.config)
        self.store = store

    async def on_mount(self) -> None:
        """Initialize app on mount."""
        setup_debug_logging()
        log.info(
            "Board loaded",
            columns=len(self.store.state.columns),
            cards=len(self.store.state.cards),
        )
        await self.push_screen(BoardScreen())

    def action_export_debug_log(self) -> None:
        """Write the in-memory log buffer to the data directory."""
        log_path = get_debug_log_path()
        try:
            count = export_logs_to_file(log_path)
        except OSError as exc:
            self.notify(f"Failed to export logs: {exc}", severity="error")
            return
        self.notify(f"Exported {count} log entries to {log_path}")
