"""Gesture tracking: turns pointer presses, moves and releases into drag events.

This is the adapter side of the drag contract. It decides when a press
becomes a drag (activation distance) and when the pointer has crossed into a
new droppable, and never touches board state itself.
"""

from __future__ import annotations

from dataclasses import dataclass

from dragboard.core.events import DragEnd, DragEvent, DragOver, DragStart
from dragboard.core.models.enums import DragKind


@dataclass(frozen=True, slots=True)
class DropTarget:
    """A draggable/droppable entity under the pointer."""

    id: str
    kind: DragKind


class GestureTracker:
    """Tracks one pointer gesture at a time."""

    def __init__(self, activation_distance: int) -> None:
        self.activation_distance = activation_distance
        self._source: DropTarget | None = None
        self._origin: tuple[int, int] = (0, 0)
        self._dragging = False
        self._over: DropTarget | None = None

    @property
    def pressed(self) -> bool:
        return self._source is not None

    @property
    def dragging(self) -> bool:
        return self._dragging

    @property
    def source(self) -> DropTarget | None:
        return self._source

    def press(self, source: DropTarget | None, x: int, y: int) -> None:
        """Arm a gesture on ``source``; nothing is emitted until it moves."""
        self._reset()
        self._source = source
        self._origin = (x, y)

    def move(self, target: DropTarget | None, x: int, y: int) -> list[DragEvent]:
        """Pointer moved to ``(x, y)`` over ``target``."""
        source = self._source
        if source is None:
            return []

        events: list[DragEvent] = []
        if not self._dragging:
            origin_x, origin_y = self._origin
            distance = max(abs(x - origin_x), abs(y - origin_y))
            if distance < self.activation_distance:
                return []
            self._dragging = True
            self._over = source
            events.append(DragStart(active_id=source.id, kind=source.kind))

        if target != self._over:
            self._over = target
            if target is not None:
                events.append(
                    DragOver(
                        active_id=source.id,
                        active_kind=source.kind,
                        over_id=target.id,
                        over_kind=target.kind,
                    )
                )
        return events

    def release(self, target: DropTarget | None) -> list[DragEvent]:
        """Pointer released over ``target`` (None outside any droppable).

        A release that never passed the activation distance is a click and
        emits nothing.
        """
        source = self._source
        was_dragging = self._dragging
        self._reset()
        if source is None or not was_dragging:
            return []
        return [
            DragEnd(
                active_id=source.id,
                over_id=target.id if target is not None else None,
                over_kind=target.kind if target is not None else None,
            )
        ]

    def cancel(self) -> list[DragEvent]:
        """Abort the gesture as a release outside any target."""
        return self.release(None)

    def _reset(self) -> None:
        self._source = None
        self._origin = (0, 0)
        self._dragging = False
        self._over = None


def keyboard_gesture(source: DropTarget, target: DropTarget) -> list[DragEvent]:
    """Express a single keyboard move as a complete gesture.

    After the hover the dragged entity occupies the slot under the virtual
    pointer, so the release lands on the source itself.
    """
    return [
        DragStart(active_id=source.id, kind=source.kind),
        DragOver(
            active_id=source.id,
            active_kind=source.kind,
            over_id=target.id,
            over_kind=target.kind,
        ),
        DragEnd(active_id=source.id, over_id=source.id, over_kind=source.kind),
    ]
