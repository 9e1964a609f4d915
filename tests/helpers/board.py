from __future__ import annotations

import itertools
from typing import TYPE_CHECKING

from dragboard.core.board import BoardState

if TYPE_CHECKING:
    from collections.abc import Callable


def make_id_factory(prefix: str = "id") -> Callable[[], str]:
    """Deterministic ids: ``id1``, ``id2``, ..."""
    counter = itertools.count(1)
    return lambda: f"{prefix}{next(counter)}"


def build_state(layout: dict[str, list[str]]) -> BoardState:
    """Board whose column and card ids equal the given keys and items.

    ``{"A": ["t1", "t2"], "B": []}`` gives columns A, B and cards t1, t2 in A,
    each card's content equal to its id.
    """
    state = BoardState()
    for column_id, card_ids in layout.items():
        state = state.add_column(column_id, id_factory=lambda cid=column_id: cid)
        for card_id in card_ids:
            state = state.add_card(column_id, card_id, id_factory=lambda cid=card_id: cid)
    return state


def layout_of(state: BoardState) -> dict[str, list[str]]:
    """Inverse of ``build_state``: column id to card ids in display order."""
    return {
        column.id: [card.id for card in state.cards_for_column(column.id)]
        for column in state.columns
    }
