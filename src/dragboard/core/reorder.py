"""Reorder engine: pure drag-gesture transitions over ``BoardState``.

Gesture lifecycle::

    IDLE --DragStart--> DRAGGING(kind, source) --DragOver*--> ... --DragEnd--> IDLE

Each function takes a state and one event and returns the next state. A
transition that changes nothing returns the very same object, which is how
callers recognise a no-op hover.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, TypeVar

from dragboard.core.events import DragEnd, DragOver, DragStart
from dragboard.core.models.entities import Card, Column
from dragboard.core.models.enums import DragKind, TaskPlacement

if TYPE_CHECKING:
    from collections.abc import Sequence

    from dragboard.core.board import BoardState
    from dragboard.core.events import DragEvent

logger = logging.getLogger(__name__)

T = TypeVar("T")


def move_item(items: Sequence[T], source: int, target: int) -> tuple[T, ...]:
    """Relocate ``items[source]`` so it ends up at index ``target``.

    The element is removed and reinserted; everything strictly between the
    two positions shifts one slot toward the vacated one. This is a move,
    not a swap: ``move_item("abcd", 0, 3)`` gives ``("b", "c", "d", "a")``.

    Raises:
        IndexError: If either index is out of range.
    """
    size = len(items)
    if not 0 <= source < size or not 0 <= target < size:
        msg = f"move_item indices ({source}, {target}) out of range for length {size}"
        raise IndexError(msg)
    moved = list(items)
    if source != target:
        moved.insert(target, moved.pop(source))
    return tuple(moved)


def apply(
    state: BoardState,
    event: DragEvent,
    *,
    placement: TaskPlacement = TaskPlacement.BOTTOM,
) -> BoardState:
    """Feed one drag event through the state machine."""
    if isinstance(event, DragStart):
        return drag_start(state, event)
    if isinstance(event, DragOver):
        return drag_over(state, event, placement=placement)
    if isinstance(event, DragEnd):
        return drag_end(state, event)
    logger.warning("Ignoring unknown drag event %r", event)
    return state


def drag_start(state: BoardState, event: DragStart) -> BoardState:
    """Record a snapshot of the dragged entity as the active selection."""
    entity: Column | Card | None
    if event.kind == DragKind.COLUMN:
        index = state.column_index(event.active_id)
        entity = state.columns[index] if index is not None else None
    else:
        index = state.card_index(event.active_id)
        entity = state.cards[index] if index is not None else None

    if entity is None:
        logger.warning("Drag start on unknown %s %s", event.kind, event.active_id)
        return state
    if state.active is not None:
        logger.warning(
            "Drag start on %s while %s is still active; replacing selection",
            event.active_id,
            state.active.id,
        )
    logger.debug("Drag start %s %s", event.kind, event.active_id)
    return state.with_active(entity)


def drag_over(
    state: BoardState,
    event: DragOver,
    *,
    placement: TaskPlacement = TaskPlacement.BOTTOM,
) -> BoardState:
    """Apply live feedback for the pointer crossing into ``event.over_id``."""
    if event.over_id == event.active_id:
        return state

    active = state.active
    if active is None:
        logger.warning("Drag over %s with no active gesture", event.over_id)
        return state
    if active.id != event.active_id or state.active_kind != event.active_kind:
        logger.warning(
            "Drag over names %s %s but %s %s is active",
            event.active_kind,
            event.active_id,
            state.active_kind,
            active.id,
        )
        return state

    if event.active_kind == DragKind.COLUMN:
        return _relocate_column(state, active.id, event.over_id, event.over_kind)
    if event.over_kind == DragKind.TASK:
        return _move_card_over_card(state, active.id, event.over_id)
    return _move_card_over_column(state, active.id, event.over_id, placement)


def drag_end(state: BoardState, event: DragEnd) -> BoardState:
    """Finish the gesture. The selection is always cleared."""
    active = state.active
    result = state
    if active is None:
        logger.warning("Drag end for %s with no active gesture", event.active_id)
    elif active.id != event.active_id:
        logger.warning("Drag end names %s but %s is active", event.active_id, active.id)
    elif event.over_id is None:
        logger.debug("Drag of %s released outside any target", active.id)
    elif event.over_id == active.id:
        pass
    elif isinstance(active, Column):
        over_kind = event.over_kind or _guess_kind(state, event.over_id)
        if over_kind is not None:
            result = _relocate_column(state, active.id, event.over_id, over_kind)
        else:
            logger.warning("Drag end over unknown target %s", event.over_id)
    return result.clear_active()


def _guess_kind(state: BoardState, target_id: str) -> DragKind | None:
    if state.has_column(target_id):
        return DragKind.COLUMN
    if state.card_index(target_id) is not None:
        return DragKind.TASK
    return None


def _relocate_column(
    state: BoardState, column_id: str, over_id: str, over_kind: DragKind
) -> BoardState:
    active_index = state.column_index(column_id)
    if active_index is None:
        logger.warning("Dragged column %s is no longer on the board", column_id)
        return state

    target_id: str | None = over_id
    if over_kind == DragKind.TASK:
        # A column dropped on a card lands where that card's column is.
        card_index = state.card_index(over_id)
        target_id = state.cards[card_index].column_id if card_index is not None else None

    over_index = state.column_index(target_id) if target_id is not None else None
    if over_index is None:
        logger.warning("Column drag over unknown target %s", over_id)
        return state
    if over_index == active_index:
        return state
    return state.with_columns(move_item(state.columns, active_index, over_index))


def _move_card_over_card(state: BoardState, card_id: str, over_id: str) -> BoardState:
    active_index = state.card_index(card_id)
    if active_index is None:
        logger.warning("Dragged card %s is no longer on the board", card_id)
        return state
    over_index = state.card_index(over_id)
    if over_index is None:
        logger.warning("Card drag over unknown card %s", over_id)
        return state

    cards = list(state.cards)
    moving = cards[active_index]
    target_column = cards[over_index].column_id
    if moving.column_id != target_column:
        cards[active_index] = moving.model_copy(update={"column_id": target_column})
    return state.with_cards(move_item(cards, active_index, over_index))


def _move_card_over_column(
    state: BoardState, card_id: str, column_id: str, placement: TaskPlacement
) -> BoardState:
    active_index = state.card_index(card_id)
    if active_index is None:
        logger.warning("Dragged card %s is no longer on the board", card_id)
        return state
    if not state.has_column(column_id):
        logger.warning("Card drag over unknown column %s", column_id)
        return state

    card = state.cards[active_index]
    moved = card
    if card.column_id != column_id:
        moved = card.model_copy(update={"column_id": column_id})

    if moved is card:
        if placement == TaskPlacement.KEEP:
            return state
        siblings = [other.id for other in state.cards_for_column(column_id)]
        edge = siblings[0] if placement == TaskPlacement.TOP else siblings[-1]
        if edge == card_id:
            return state
    elif placement == TaskPlacement.KEEP:
        cards = list(state.cards)
        cards[active_index] = moved
        return state.with_cards(cards)

    rest = [other for index, other in enumerate(state.cards) if index != active_index]
    members = [index for index, other in enumerate(rest) if other.column_id == column_id]
    if not members:
        insert_at = active_index
    elif placement == TaskPlacement.TOP:
        insert_at = members[0]
    else:
        insert_at = members[-1] + 1
    rest.insert(insert_at, moved)
    return state.with_cards(rest)
