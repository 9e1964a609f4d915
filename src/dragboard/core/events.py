"""Drag events (inbound) and board change events (outbound)."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING, TypeAlias
from uuid import uuid4

from dragboard.core.models.enums import DragKind

if TYPE_CHECKING:
    from dragboard.core.board import BoardState


def _new_event_id() -> str:
    return uuid4().hex


def _now() -> datetime:
    return datetime.now()


@dataclass(frozen=True)
class DragStart:
    """Gesture activated on ``active_id``."""

    active_id: str
    kind: DragKind
    event_id: str = field(default_factory=_new_event_id)
    occurred_at: datetime = field(default_factory=_now)


@dataclass(frozen=True)
class DragOver:
    """Pointer crossed into ``over_id`` while dragging ``active_id``."""

    active_id: str
    active_kind: DragKind
    over_id: str
    over_kind: DragKind
    event_id: str = field(default_factory=_new_event_id)
    occurred_at: datetime = field(default_factory=_now)


@dataclass(frozen=True)
class DragEnd:
    """Gesture released, over ``over_id`` or outside any droppable."""

    active_id: str
    over_id: str | None = None
    over_kind: DragKind | None = None
    event_id: str = field(default_factory=_new_event_id)
    occurred_at: datetime = field(default_factory=_now)


DragEvent: TypeAlias = DragStart | DragOver | DragEnd


@dataclass(frozen=True)
class BoardChanged:
    """Emitted by the store after a state swap that changed the board."""

    previous: BoardState
    current: BoardState
    reason: str
    event_id: str = field(default_factory=_new_event_id)
    occurred_at: datetime = field(default_factory=_now)


BoardChangedHandler = Callable[[BoardChanged], None]


def event_from_dict(data: dict[str, object]) -> DragEvent:
    """Build a drag event from its plain mapping form (used by replay scripts).

    Raises:
        ValueError: If the mapping does not describe a known event.
    """
    event_type = str(data.get("type", "")).strip().lower()
    active_id = data.get("active")
    if not isinstance(active_id, str) or not active_id:
        msg = f"Event {data!r} is missing 'active'"
        raise ValueError(msg)

    if event_type == "start":
        kind = DragKind.coerce(data.get("kind"))
        if kind is None:
            msg = f"Start event {data!r} has invalid 'kind'"
            raise ValueError(msg)
        return DragStart(active_id=active_id, kind=kind)

    if event_type == "over":
        active_kind = DragKind.coerce(data.get("kind"))
        over_kind = DragKind.coerce(data.get("over_kind"))
        over_id = data.get("over")
        if active_kind is None or over_kind is None or not isinstance(over_id, str):
            msg = f"Over event {data!r} needs 'kind', 'over' and 'over_kind'"
            raise ValueError(msg)
        return DragOver(
            active_id=active_id, active_kind=active_kind, over_id=over_id, over_kind=over_kind
        )

    if event_type == "end":
        over_id = data.get("over")
        return DragEnd(
            active_id=active_id,
            over_id=over_id if isinstance(over_id, str) else None,
            over_kind=DragKind.coerce(data.get("over_kind")),
        )

    msg = f"Unknown event type {event_type!r}"
    raise ValueError(msg)
