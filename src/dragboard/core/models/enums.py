"""Core domain enums."""

from __future__ import annotations

from enum import Enum, StrEnum, auto


class DragKind(StrEnum):
    """Kind of entity taking part in a drag gesture."""

    COLUMN = "Column"
    TASK = "Task"

    @classmethod
    def coerce(cls, value: object) -> DragKind | None:
        """Coerce a value to a DragKind, or return None."""
        if isinstance(value, DragKind):
            return value
        if isinstance(value, str):
            normalized = value.strip().lower()
            for kind in cls:
                if kind.value.lower() == normalized:
                    return kind
        return None


class DragPhase(Enum):
    """Phases of a single drag gesture."""

    IDLE = auto()
    DRAGGING = auto()


class TaskPlacement(StrEnum):
    """Where a card lands when hovered over a column body."""

    KEEP = "keep"
    TOP = "top"
    BOTTOM = "bottom"
