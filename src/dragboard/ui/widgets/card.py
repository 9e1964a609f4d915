"""CardWidget for displaying a single board card."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual.reactive import reactive
from textual.widget import Widget
from textual.widgets import Label

from dragboard.constants import CARD_CONTENT_LINE_WIDTH
from dragboard.core.models.entities import Card

if TYPE_CHECKING:
    from textual.app import ComposeResult


def _truncate(text: str, max_length: int) -> str:
    if len(text) <= max_length:
        return text
    return text[: max_length - 3] + "..."


class CardWidget(Widget):
    """A card on the board. Focusable so keyboard gestures have a source."""

    DEFAULT_CSS = """
    CardWidget {
        height: auto;
        margin: 0 0 1 0;
        padding: 0 1;
        background: $panel;
        border: round $border;
    }

    CardWidget:focus {
        border: round $primary;
    }

    CardWidget.dragging {
        opacity: 60%;
        border: dashed $primary;
    }

    CardWidget .card-meta {
        color: $text-muted;
    }
    """

    can_focus = True

    card: reactive[Card | None] = reactive(None)

    def __init__(self, card: Card, *, dragging: bool = False, **kwargs) -> None:
        super().__init__(id=f"card-{card.id}", **kwargs)
        self.card = card
        if dragging:
            self.add_class("dragging")

    def compose(self) -> ComposeResult:
        if self.card is None:
            return
        yield Label(_truncate(self.card.content, CARD_CONTENT_LINE_WIDTH), classes="card-content")
        yield Label(f"#{self.card.short_id[:4]}", classes="card-meta")
