"""BoardView: the column strip and the mouse side of the gesture adapter."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from textual.containers import Horizontal
from textual.errors import NoWidget
from textual.message import Message

from dragboard.core.models.enums import DragKind
from dragboard.ui.gestures import DropTarget, GestureTracker
from dragboard.ui.widgets.card import CardWidget
from dragboard.ui.widgets.column import ColumnHeader, ColumnWidget

if TYPE_CHECKING:
    from textual import events
    from textual.widget import Widget

    from dragboard.core.events import DragEvent


class BoardView(Horizontal):
    """Holds the column widgets and turns mouse gestures into drag events.

    The view itself survives board refreshes (only its children are
    replaced), so it is the widget that captures the mouse for the whole
    gesture.
    """

    DEFAULT_CSS = """
    BoardView {
        height: 1fr;
        overflow-x: auto;
        padding: 1 0;
    }
    """

    ALLOW_SELECT = False
    can_focus = False

    @dataclass
    class DragGesture(Message):
        event: DragEvent

    def __init__(self, activation_distance: int, **kwargs) -> None:
        super().__init__(**kwargs)
        self.gesture = GestureTracker(activation_distance)

    def target_at(self, screen_x: int, screen_y: int, *, grab: bool = False) -> DropTarget | None:
        """Resolve the droppable under a screen coordinate.

        With ``grab`` only drag handles count: a card, or a column header.
        Otherwise a column body is a valid drop target too.
        """
        try:
            widget, _ = self.screen.get_widget_at(screen_x, screen_y)
        except NoWidget:
            return None
        return self._resolve(widget, grab=grab)

    @staticmethod
    def _resolve(widget: Widget, *, grab: bool) -> DropTarget | None:
        for node in widget.ancestors_with_self:
            if isinstance(node, CardWidget) and node.card is not None:
                return DropTarget(node.card.id, DragKind.TASK)
            if isinstance(node, ColumnHeader):
                return DropTarget(node.column_id, DragKind.COLUMN)
            if isinstance(node, ColumnWidget):
                return None if grab else DropTarget(node.column.id, DragKind.COLUMN)
        return None

    def _emit(self, drag_events: list[DragEvent]) -> None:
        for drag_event in drag_events:
            self.post_message(self.DragGesture(drag_event))

    def on_mouse_down(self, event: events.MouseDown) -> None:
        if event.button != 1:
            return
        source = self.target_at(event.screen_x, event.screen_y, grab=True)
        if source is None:
            return
        self.gesture.press(source, event.screen_x, event.screen_y)
        self.capture_mouse()

    def on_mouse_move(self, event: events.MouseMove) -> None:
        if not self.gesture.pressed:
            return
        target = self.target_at(event.screen_x, event.screen_y)
        self._emit(self.gesture.move(target, event.screen_x, event.screen_y))

    def on_mouse_up(self, event: events.MouseUp) -> None:
        if not self.gesture.pressed:
            return
        self.release_mouse()
        target = self.target_at(event.screen_x, event.screen_y)
        self._emit(self.gesture.release(target))

    def cancel_gesture(self) -> None:
        """Abort an in-flight mouse gesture (released outside any target)."""
        if self.gesture.pressed:
            self.release_mouse()
        self._emit(self.gesture.cancel())
