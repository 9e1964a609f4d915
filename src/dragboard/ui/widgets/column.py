"""ColumnWidget for displaying a board column and its cards."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual.containers import Vertical, VerticalScroll
from textual.widgets import Label

from dragboard.constants import COLUMN_TITLE_MAX_LENGTH
from dragboard.ui.widgets.card import CardWidget

if TYPE_CHECKING:
    from textual.app import ComposeResult

    from dragboard.core.models.entities import Card, Column


class ColumnHeader(Label):
    """Column title; the grab handle for column drags."""

    DEFAULT_CSS = """
    ColumnHeader {
        width: 100%;
        padding: 0 1;
        text-style: bold;
        background: $panel;
    }

    ColumnHeader:focus {
        background: $primary 30%;
    }
    """

    ALLOW_SELECT = False
    can_focus = True

    def __init__(self, column: Column, count: int) -> None:
        title = column.title
        if len(title) > COLUMN_TITLE_MAX_LENGTH:
            title = title[: COLUMN_TITLE_MAX_LENGTH - 3] + "..."
        super().__init__(f"{title} ({count})", id=f"header-{column.id}")
        self.column_id = column.id


class _NSVerticalScroll(VerticalScroll):
    ALLOW_SELECT = False
    can_focus = False


class ColumnWidget(Vertical):
    """A board column: header plus its cards in projection order."""

    DEFAULT_CSS = """
    ColumnWidget {
        width: 32;
        height: 100%;
        margin: 0 1;
        background: $surface;
        border: round $border;
    }

    ColumnWidget.dragging {
        opacity: 60%;
        border: dashed $primary;
    }

    ColumnWidget .column-content {
        padding: 1 1 0 1;
    }

    ColumnWidget .empty-message {
        color: $text-muted;
    }
    """

    ALLOW_SELECT = False
    can_focus = False

    def __init__(
        self,
        column: Column,
        cards: list[Card],
        *,
        active_id: str | None = None,
    ) -> None:
        super().__init__(id=f"column-{column.id}")
        self.column = column
        self._cards = cards
        self._active_id = active_id
        if column.id == active_id:
            self.add_class("dragging")

    def compose(self) -> ComposeResult:
        yield ColumnHeader(self.column, len(self._cards))
        with _NSVerticalScroll(classes="column-content"):
            for card in self._cards:
                yield CardWidget(card, dragging=card.id == self._active_id)
            if not self._cards:
                yield Label("No cards", classes="empty-message")

    def get_cards(self) -> list[CardWidget]:
        return list(self.query(CardWidget))

    def get_header(self) -> ColumnHeader:
        return self.query_one(ColumnHeader)

    def focus_targets(self) -> list[ColumnHeader | CardWidget]:
        """Focusable widgets top to bottom: header first, then cards."""
        return [self.get_header(), *self.get_cards()]
