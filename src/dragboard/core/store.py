"""Board store: the single owner of the current ``BoardState``."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from dragboard.config import DragboardConfig
from dragboard.core import reorder
from dragboard.core.board import BoardState
from dragboard.core.errors import NotFoundError
from dragboard.core.events import BoardChanged
from dragboard.core.models.entities import Card, Column, new_id
from dragboard.core.models.enums import TaskPlacement
from dragboard.limits import DEBUG_BUILD

if TYPE_CHECKING:
    from collections.abc import Callable

    from dragboard.core.events import BoardChangedHandler, DragEvent
    from dragboard.core.models.entities import Identifier

logger = logging.getLogger(__name__)


class BoardStore:
    """Routes CRUD calls and drag events to pure transitions and swaps state.

    The store is meant to be driven from one thread of control. Each call
    computes the next ``BoardState`` and publishes it with a single
    assignment, so readers holding an older snapshot keep a consistent view.

    Unknown ids are logged and ignored unless ``board.strict_lookups`` is
    set, in which case the ``NotFoundError`` propagates. Invalid card
    references always propagate.
    """

    def __init__(
        self,
        state: BoardState | None = None,
        *,
        config: DragboardConfig | None = None,
        id_factory: Callable[[], Identifier] = new_id,
    ) -> None:
        self._state = state if state is not None else BoardState()
        self._config = config if config is not None else DragboardConfig()
        self._id_factory = id_factory
        self._handlers: list[BoardChangedHandler] = []

    @property
    def state(self) -> BoardState:
        return self._state

    @property
    def config(self) -> DragboardConfig:
        return self._config

    @property
    def placement(self) -> TaskPlacement:
        return TaskPlacement(self._config.board.task_over_column)

    # ── Subscribers ────────────────────────────────────────────────────

    def subscribe(self, handler: BoardChangedHandler) -> None:
        """Register a synchronous handler called after every change."""
        self._handlers.append(handler)

    def unsubscribe(self, handler: BoardChangedHandler) -> None:
        """Remove a previously registered handler."""
        self._handlers = [h for h in self._handlers if h != handler]

    def _commit(self, new_state: BoardState, reason: str) -> BoardState:
        previous = self._state
        if new_state is previous:
            return previous
        if DEBUG_BUILD:
            new_state.check_invariants()
        self._state = new_state
        event = BoardChanged(previous=previous, current=new_state, reason=reason)
        for handler in list(self._handlers):
            try:
                handler(event)
            except Exception:
                logger.exception("Board change handler %r failed", handler)
        return new_state

    def _not_found(self, error: NotFoundError) -> BoardState:
        if self._config.board.strict_lookups:
            raise error
        logger.warning("%s (%s); ignoring", error, error.code)
        return self._state

    # ── Drag events ────────────────────────────────────────────────────

    def dispatch(self, event: DragEvent) -> BoardState:
        """Apply one drag event and publish the resulting state."""
        new_state = reorder.apply(self._state, event, placement=self.placement)
        return self._commit(new_state, type(event).__name__)

    # ── Column operations ──────────────────────────────────────────────

    def add_column(self, title: str | None = None) -> Column:
        new_state = self._state.add_column(
            title,
            id_factory=self._id_factory,
            title_template=self._config.board.column_title_template,
        )
        self._commit(new_state, "add_column")
        return new_state.columns[-1]

    def remove_column(self, column_id: Identifier) -> BoardState:
        """Remove a column and its cards; cancels a gesture that involves them."""
        try:
            new_state = self._state.remove_column(column_id)
        except NotFoundError as exc:
            return self._not_found(exc)
        if self._config.board.cancel_drag_on_remove and self._drag_involves(column_id):
            logger.info("Column %s removed mid-drag; cancelling gesture", column_id)
            new_state = new_state.clear_active()
        return self._commit(new_state, "remove_column")

    def rename_column(self, column_id: Identifier, title: str) -> BoardState:
        try:
            new_state = self._state.rename_column(column_id, title)
        except NotFoundError as exc:
            return self._not_found(exc)
        return self._commit(new_state, "rename_column")

    # ── Card operations ────────────────────────────────────────────────

    def add_card(self, column_id: Identifier, content: str | None = None) -> Card:
        """Append a card to ``column_id``.

        Raises:
            InvalidReferenceError: If the column does not exist.
        """
        new_state = self._state.add_card(
            column_id,
            content,
            id_factory=self._id_factory,
            content_template=self._config.board.card_content_template,
        )
        self._commit(new_state, "add_card")
        return new_state.cards[-1]

    def remove_card(self, card_id: Identifier) -> BoardState:
        try:
            new_state = self._state.remove_card(card_id)
        except NotFoundError as exc:
            return self._not_found(exc)
        active = self._state.active
        if (
            self._config.board.cancel_drag_on_remove
            and isinstance(active, Card)
            and active.id == card_id
        ):
            logger.info("Card %s removed mid-drag; cancelling gesture", card_id)
            new_state = new_state.clear_active()
        return self._commit(new_state, "remove_card")

    def edit_card(self, card_id: Identifier, content: str) -> BoardState:
        try:
            new_state = self._state.edit_card(card_id, content)
        except NotFoundError as exc:
            return self._not_found(exc)
        return self._commit(new_state, "edit_card")

    def _drag_involves(self, column_id: Identifier) -> bool:
        active = self._state.active
        if isinstance(active, Column):
            return active.id == column_id
        if isinstance(active, Card):
            # The snapshot may be stale; ownership is read from the live card.
            index = self._state.card_index(active.id)
            owner = self._state.cards[index].column_id if index is not None else active.column_id
            return owner == column_id
        return False
