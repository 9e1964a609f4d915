"""Immutable board state: ordered columns, ordered cards and the drag selection."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, TypeAlias

from dragboard.constants import DEFAULT_CARD_CONTENT_TEMPLATE, DEFAULT_COLUMN_TITLE_TEMPLATE
from dragboard.core.errors import (
    BoardError,
    CardNotFoundError,
    ColumnNotFoundError,
    InvalidReferenceError,
)
from dragboard.core.models.entities import Card, Column, new_id
from dragboard.core.models.enums import DragKind, DragPhase

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator, Mapping, Sequence

    from dragboard.core.models.entities import Identifier

    IdFactory: TypeAlias = Callable[[], Identifier]


@dataclass(frozen=True, slots=True)
class BoardState:
    """Snapshot of the whole board.

    ``columns`` is display order left to right. ``cards`` is one global
    sequence; restricted to a ``column_id`` it is that column's display
    order. ``active`` is the snapshot of the entity being dragged, if any.

    Every operation returns a new ``BoardState`` and leaves the receiver
    untouched, so a before/after pair can always be compared.
    """

    columns: tuple[Column, ...] = ()
    cards: tuple[Card, ...] = ()
    active: Column | Card | None = None

    # ── Selection ──────────────────────────────────────────────────────

    @property
    def phase(self) -> DragPhase:
        return DragPhase.IDLE if self.active is None else DragPhase.DRAGGING

    @property
    def active_kind(self) -> DragKind | None:
        if isinstance(self.active, Column):
            return DragKind.COLUMN
        if isinstance(self.active, Card):
            return DragKind.TASK
        return None

    @property
    def active_id(self) -> Identifier | None:
        return self.active.id if self.active is not None else None

    def with_active(self, entity: Column | Card | None) -> BoardState:
        """Return new state with the drag selection replaced."""
        return replace(self, active=entity)

    def clear_active(self) -> BoardState:
        if self.active is None:
            return self
        return replace(self, active=None)

    # ── Lookups ────────────────────────────────────────────────────────

    @property
    def column_ids(self) -> tuple[Identifier, ...]:
        return tuple(column.id for column in self.columns)

    @property
    def card_ids(self) -> tuple[Identifier, ...]:
        return tuple(card.id for card in self.cards)

    def column_index(self, column_id: Identifier) -> int | None:
        for index, column in enumerate(self.columns):
            if column.id == column_id:
                return index
        return None

    def card_index(self, card_id: Identifier) -> int | None:
        for index, card in enumerate(self.cards):
            if card.id == card_id:
                return index
        return None

    def has_column(self, column_id: Identifier) -> bool:
        return self.column_index(column_id) is not None

    def get_column(self, column_id: Identifier) -> Column:
        """Return the column with ``column_id``.

        Raises:
            ColumnNotFoundError: If no column has that id.
        """
        index = self.column_index(column_id)
        if index is None:
            raise ColumnNotFoundError(column_id)
        return self.columns[index]

    def get_card(self, card_id: Identifier) -> Card:
        """Return the card with ``card_id``.

        Raises:
            CardNotFoundError: If no card has that id.
        """
        index = self.card_index(card_id)
        if index is None:
            raise CardNotFoundError(card_id)
        return self.cards[index]

    def cards_for_column(self, column_id: Identifier) -> Iterator[Card]:
        """Project the cards owned by ``column_id`` in sequence order.

        Each call returns a fresh lazy iterator over this snapshot.
        """
        return (card for card in self.cards if card.column_id == column_id)

    # ── Column operations ──────────────────────────────────────────────

    def add_column(
        self,
        title: str | None = None,
        *,
        id_factory: IdFactory = new_id,
        title_template: str = DEFAULT_COLUMN_TITLE_TEMPLATE,
    ) -> BoardState:
        """Append a new column; it becomes ``columns[-1]`` of the result."""
        column_id = id_factory()
        if self.has_column(column_id):
            msg = f"Column id {column_id} already in use"
            raise BoardError(msg, code="DUPLICATE_ID")
        if title is None:
            title = title_template.format(n=len(self.columns) + 1)
        return replace(self, columns=(*self.columns, Column(id=column_id, title=title)))

    def remove_column(self, column_id: Identifier) -> BoardState:
        """Remove a column together with every card it owns."""
        if not self.has_column(column_id):
            raise ColumnNotFoundError(column_id)
        return replace(
            self,
            columns=tuple(column for column in self.columns if column.id != column_id),
            cards=tuple(card for card in self.cards if card.column_id != column_id),
        )

    def rename_column(self, column_id: Identifier, title: str) -> BoardState:
        index = self.column_index(column_id)
        if index is None:
            raise ColumnNotFoundError(column_id)
        columns = list(self.columns)
        columns[index] = columns[index].model_copy(update={"title": title})
        return replace(self, columns=tuple(columns))

    def with_columns(self, columns: Sequence[Column]) -> BoardState:
        return replace(self, columns=tuple(columns))

    # ── Card operations ────────────────────────────────────────────────

    def add_card(
        self,
        column_id: Identifier,
        content: str | None = None,
        *,
        id_factory: IdFactory = new_id,
        content_template: str = DEFAULT_CARD_CONTENT_TEMPLATE,
    ) -> BoardState:
        """Append a new card owned by ``column_id``; it becomes ``cards[-1]``.

        Raises:
            InvalidReferenceError: If ``column_id`` names no column.
        """
        if not self.has_column(column_id):
            raise InvalidReferenceError(column_id)
        card_id = id_factory()
        if self.card_index(card_id) is not None:
            msg = f"Card id {card_id} already in use"
            raise BoardError(msg, code="DUPLICATE_ID")
        if content is None:
            content = content_template.format(n=len(self.cards) + 1)
        card = Card(id=card_id, column_id=column_id, content=content)
        return replace(self, cards=(*self.cards, card))

    def remove_card(self, card_id: Identifier) -> BoardState:
        if self.card_index(card_id) is None:
            raise CardNotFoundError(card_id)
        return replace(self, cards=tuple(card for card in self.cards if card.id != card_id))

    def edit_card(self, card_id: Identifier, content: str) -> BoardState:
        index = self.card_index(card_id)
        if index is None:
            raise CardNotFoundError(card_id)
        cards = list(self.cards)
        cards[index] = cards[index].model_copy(update={"content": content})
        return replace(self, cards=tuple(cards))

    def with_cards(self, cards: Sequence[Card]) -> BoardState:
        return replace(self, cards=tuple(cards))

    # ── Consistency ────────────────────────────────────────────────────

    def check_invariants(self) -> None:
        """Validate id uniqueness and card ownership.

        Raises:
            BoardError: On duplicate column or card ids.
            InvalidReferenceError: On a card whose column does not exist.
        """
        column_ids = self.column_ids
        if len(set(column_ids)) != len(column_ids):
            msg = "Duplicate column ids on board"
            raise BoardError(msg, code="DUPLICATE_ID")
        card_ids = self.card_ids
        if len(set(card_ids)) != len(card_ids):
            msg = "Duplicate card ids on board"
            raise BoardError(msg, code="DUPLICATE_ID")
        known = set(column_ids)
        for card in self.cards:
            if card.column_id not in known:
                raise InvalidReferenceError(card.column_id, card_id=card.id)

    @classmethod
    def seeded(
        cls,
        layout: Mapping[str, Sequence[str]],
        *,
        id_factory: IdFactory = new_id,
    ) -> BoardState:
        """Build a board from ``{column title: [card content, ...]}``."""
        state = cls()
        for title, contents in layout.items():
            state = state.add_column(title, id_factory=id_factory)
            column_id = state.columns[-1].id
            for content in contents:
                state = state.add_card(column_id, content, id_factory=id_factory)
        return state
