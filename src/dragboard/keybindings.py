"""Keybindings for the Dragboard TUI."""

from __future__ import annotations

from textual.binding import Binding, BindingType

# =============================================================================
# App Bindings
# =============================================================================

APP_BINDINGS: list[BindingType] = [
    Binding("q", "quit", "Quit"),
    Binding("f12", "export_debug_log", "Export log", show=False),
]

# =============================================================================
# Board Bindings
# =============================================================================

BOARD_BINDINGS: list[BindingType] = [
    Binding("q", "quit", "Quit", priority=True),
    # CRUD
    Binding("c", "add_column", "New column"),
    Binding("n", "add_card", "New card"),
    Binding("x", "delete_card", "Delete card"),
    Binding("X", "delete_column", "Delete column", key_display="Shift+X"),
    # Navigation - vim style
    Binding("h", "focus_left", "Left", show=False),
    Binding("j", "focus_down", "Down", show=False),
    Binding("k", "focus_up", "Up", show=False),
    Binding("l", "focus_right", "Right", show=False),
    # Navigation - arrow keys
    Binding("left", "focus_left", "Left", show=False),
    Binding("right", "focus_right", "Right", show=False),
    Binding("down", "focus_down", "Down", show=False),
    Binding("up", "focus_up", "Up", show=False),
    # Keyboard drag gestures
    Binding("K", "move_card_up", "Move up", show=False),
    Binding("J", "move_card_down", "Move down", show=False),
    Binding("H", "move_card_left", "Move<-"),
    Binding("L", "move_card_right", "Move->"),
    Binding("less_than_sign", "move_column_left", "Column<-", show=False, key_display="<"),
    Binding("greater_than_sign", "move_column_right", "Column->", show=False, key_display=">"),
    Binding("escape", "cancel_drag", "Cancel drag", show=False),
]
