"""Main board screen: renders the store and routes gestures into it."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual.css.query import NoMatches
from textual.widgets import Footer

from dragboard.core.errors import BoardError
from dragboard.core.events import DragEnd
from dragboard.core.models.enums import DragKind
from dragboard.debug_log import log
from dragboard.keybindings import BOARD_BINDINGS
from dragboard.ui.gestures import DropTarget, keyboard_gesture
from dragboard.ui.screens.base import DragboardScreen
from dragboard.ui.widgets.board import BoardView
from dragboard.ui.widgets.card import CardWidget
from dragboard.ui.widgets.column import ColumnHeader, ColumnWidget

if TYPE_CHECKING:
    from textual import events
    from textual.app import ComposeResult
    from textual.widget import Widget

    from dragboard.core.events import BoardChanged


class BoardScreen(DragboardScreen):
    """Kanban board with mouse and keyboard drag-and-drop."""

    BINDINGS = BOARD_BINDINGS

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._pending_focus: DropTarget | None = None
        self._last_focus: DropTarget | None = None
        self._last_column_index = 0

    def compose(self) -> ComposeResult:
        yield BoardView(self.store.config.drag.activation_distance, id="board")
        yield Footer()

    async def on_mount(self) -> None:
        self.store.subscribe(self._on_board_changed)
        await self._refresh_board()

    def on_unmount(self) -> None:
        self.store.unsubscribe(self._on_board_changed)

    def on_descendant_focus(self, event: events.DescendantFocus) -> None:
        focused = self.focused
        if focused is not None and focused.is_attached:
            self._last_focus = self._target_of(focused) or self._last_focus

    def _on_board_changed(self, event: BoardChanged) -> None:
        log.debug(
            "Board changed",
            reason=event.reason,
            active=event.current.active_id,
            event_id=event.event_id,
        )
        self.call_later(self._refresh_board)

    # ── Rendering ──────────────────────────────────────────────────────

    @property
    def board_view(self) -> BoardView:
        return self.query_one(BoardView)

    async def _refresh_board(self) -> None:
        """Rebuild the columns from the current snapshot, keeping focus."""
        wanted = self._pending_focus or self._focused_target() or self._last_focus
        self._pending_focus = None

        state = self.store.state
        view = self.board_view
        with self.app.batch_update():
            await view.remove_children()
            await view.mount_all(
                ColumnWidget(
                    column,
                    list(state.cards_for_column(column.id)),
                    active_id=state.active_id,
                )
                for column in state.columns
            )
        self._restore_focus(wanted)

    def _restore_focus(self, wanted: DropTarget | None) -> None:
        if wanted is not None:
            widget = self._widget_for(wanted)
            if widget is not None:
                self._last_focus = wanted
                widget.focus(scroll_visible=True)
                return
        columns = self._columns()
        if not columns:
            return
        index = min(self._last_column_index, len(columns) - 1)
        targets = columns[index].focus_targets()
        widget = targets[1 if len(targets) > 1 else 0]
        self._last_focus = self._target_of(widget)
        widget.focus(scroll_visible=True)

    def _widget_for(self, target: DropTarget) -> Widget | None:
        prefix = "card" if target.kind is DragKind.TASK else "header"
        try:
            return self.board_view.query_one(f"#{prefix}-{target.id}")
        except NoMatches:
            return None

    # ── Focus helpers ──────────────────────────────────────────────────

    def _columns(self) -> list[ColumnWidget]:
        return list(self.board_view.query(ColumnWidget))

    @staticmethod
    def _target_of(widget: Widget | None) -> DropTarget | None:
        if isinstance(widget, CardWidget) and widget.card is not None:
            return DropTarget(widget.card.id, DragKind.TASK)
        if isinstance(widget, ColumnHeader):
            return DropTarget(widget.column_id, DragKind.COLUMN)
        return None

    def _focused_target(self) -> DropTarget | None:
        focused = self.app.focused
        if focused is None or not focused.is_attached:
            return None
        return self._target_of(focused)

    def _focus_position(self) -> tuple[int, int] | None:
        """Column index and row (0 is the header) of the focused widget."""
        focused = self.app.focused
        for col_idx, column in enumerate(self._columns()):
            targets = column.focus_targets()
            if focused in targets:
                self._last_column_index = col_idx
                return col_idx, targets.index(focused)
        return None

    def _current_column_id(self) -> str | None:
        """Column of the focused card or header, read from the store."""
        state = self.store.state
        target = self._focused_target() or self._last_focus
        if target is not None and target.kind is DragKind.COLUMN and state.has_column(target.id):
            return target.id
        if target is not None and target.kind is DragKind.TASK:
            index = state.card_index(target.id)
            if index is not None:
                return state.cards[index].column_id
        if state.columns:
            return state.columns[min(self._last_column_index, len(state.columns) - 1)].id
        return None

    def _focus_horizontal(self, direction: int) -> None:
        position = self._focus_position()
        if position is None:
            self._restore_focus(None)
            return
        col_idx, row = position
        columns = self._columns()
        target_idx = col_idx + direction
        if not 0 <= target_idx < len(columns):
            return
        targets = columns[target_idx].focus_targets()
        targets[min(row, len(targets) - 1)].focus(scroll_visible=True)
        self._last_column_index = target_idx

    def _focus_vertical(self, direction: int) -> None:
        position = self._focus_position()
        if position is None:
            self._restore_focus(None)
            return
        col_idx, row = position
        targets = self._columns()[col_idx].focus_targets()
        new_row = row + direction
        if 0 <= new_row < len(targets):
            targets[new_row].focus(scroll_visible=True)

    def action_focus_left(self) -> None:
        self._focus_horizontal(-1)

    def action_focus_right(self) -> None:
        self._focus_horizontal(1)

    def action_focus_up(self) -> None:
        self._focus_vertical(-1)

    def action_focus_down(self) -> None:
        self._focus_vertical(1)

    def action_quit(self) -> None:
        """Quit the application."""
        self.app.exit()

    # ── CRUD ───────────────────────────────────────────────────────────

    def action_add_column(self) -> None:
        column = self.store.add_column()
        self._pending_focus = DropTarget(column.id, DragKind.COLUMN)
        self._last_column_index = len(self.store.state.columns) - 1
        self.notify(f"Added column: {column.title}")

    def action_add_card(self) -> None:
        column_id = self._current_column_id()
        if column_id is None:
            self.notify("Add a column first", severity="warning")
            return
        try:
            card = self.store.add_card(column_id)
        except BoardError as exc:
            self.notify(str(exc), severity="error")
            return
        self._pending_focus = DropTarget(card.id, DragKind.TASK)
        self.notify(f"Added card: {card.content}")

    def action_delete_card(self) -> None:
        focused = self.app.focused
        if not isinstance(focused, CardWidget) or focused.card is None:
            self.notify("No card selected", severity="warning")
            return
        card = focused.card
        self._focus_position()
        try:
            self.store.remove_card(card.id)
        except BoardError as exc:
            self.notify(str(exc), severity="error")
            return
        self.notify(f"Deleted card: {card.content}")

    def action_delete_column(self) -> None:
        column_id = self._current_column_id()
        if column_id is None:
            self.notify("No column selected", severity="warning")
            return
        try:
            title = self.store.state.get_column(column_id).title
            self.store.remove_column(column_id)
        except BoardError as exc:
            self.notify(str(exc), severity="error")
            return
        self.notify(f"Deleted column: {title}")

    # ── Keyboard drag gestures ─────────────────────────────────────────

    def _run_gesture(self, source: DropTarget, target: DropTarget) -> None:
        if self.store.state.active is not None:
            self.notify("A drag is already in progress", severity="warning")
            return
        self._pending_focus = source
        for event in keyboard_gesture(source, target):
            log.gesture(event)
            self.store.dispatch(event)

    def _focused_card_target(self) -> DropTarget | None:
        target = self._focused_target() or self._last_focus
        if (
            target is None
            or target.kind is not DragKind.TASK
            or self.store.state.card_index(target.id) is None
        ):
            self.notify("No card selected", severity="warning")
            return None
        return target

    def _move_card_vertical(self, direction: int) -> None:
        source = self._focused_card_target()
        if source is None:
            return
        state = self.store.state
        card = state.get_card(source.id)
        siblings = [c.id for c in state.cards_for_column(card.column_id)]
        index = siblings.index(card.id) + direction
        if not 0 <= index < len(siblings):
            return
        self._run_gesture(source, DropTarget(siblings[index], DragKind.TASK))

    def _move_card_horizontal(self, direction: int) -> None:
        source = self._focused_card_target()
        if source is None:
            return
        state = self.store.state
        card = state.get_card(source.id)
        index = state.column_index(card.column_id)
        if index is None:
            return
        target_idx = index + direction
        if not 0 <= target_idx < len(state.columns):
            side = "last" if direction > 0 else "first"
            self.notify(f"Already in the {side} column", severity="warning")
            return
        self._last_column_index = target_idx
        target = state.columns[target_idx]
        self._run_gesture(source, DropTarget(target.id, DragKind.COLUMN))
        self.notify(f"Moved card to {target.title}")

    def _move_column(self, direction: int) -> None:
        column_id = self._current_column_id()
        if column_id is None:
            return
        state = self.store.state
        index = state.column_index(column_id)
        if index is None:
            return
        target_idx = index + direction
        if not 0 <= target_idx < len(state.columns):
            return
        self._last_column_index = target_idx
        focus = self._focused_target() or self._last_focus
        self._run_gesture(
            DropTarget(column_id, DragKind.COLUMN),
            DropTarget(state.columns[target_idx].id, DragKind.COLUMN),
        )
        if focus is not None:
            self._pending_focus = focus

    def action_move_card_up(self) -> None:
        self._move_card_vertical(-1)

    def action_move_card_down(self) -> None:
        self._move_card_vertical(1)

    def action_move_card_left(self) -> None:
        self._move_card_horizontal(-1)

    def action_move_card_right(self) -> None:
        self._move_card_horizontal(1)

    def action_move_column_left(self) -> None:
        self._move_column(-1)

    def action_move_column_right(self) -> None:
        self._move_column(1)

    def action_cancel_drag(self) -> None:
        view = self.board_view
        if view.gesture.pressed:
            view.cancel_gesture()
            return
        active_id = self.store.state.active_id
        if active_id is not None:
            self.store.dispatch(DragEnd(active_id=active_id))

    # ── Mouse drag gestures ────────────────────────────────────────────

    def on_board_view_drag_gesture(self, message: BoardView.DragGesture) -> None:
        message.stop()
        log.gesture(message.event)
        self.store.dispatch(message.event)
