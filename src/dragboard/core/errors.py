"""Board error hierarchy with machine-readable codes."""

from __future__ import annotations


class BoardError(ValueError):
    """Base for board domain errors."""

    def __init__(self, message: str, *, code: str) -> None:
        super().__init__(message)
        self.code = code


class NotFoundError(BoardError):
    """Raised when an operation names an id absent from its collection."""

    def __init__(self, message: str, *, code: str, entity_id: str) -> None:
        super().__init__(message, code=code)
        self.entity_id = entity_id


class ColumnNotFoundError(NotFoundError):
    """Raised when the target column does not exist."""

    def __init__(self, column_id: str) -> None:
        super().__init__(
            f"Column {column_id} not found", code="COLUMN_NOT_FOUND", entity_id=column_id
        )


class CardNotFoundError(NotFoundError):
    """Raised when the target card does not exist."""

    def __init__(self, card_id: str) -> None:
        super().__init__(f"Card {card_id} not found", code="CARD_NOT_FOUND", entity_id=card_id)


class InvalidReferenceError(BoardError):
    """Raised when a card would reference a column that does not exist."""

    def __init__(self, column_id: str, *, card_id: str | None = None) -> None:
        subject = f"Card {card_id}" if card_id else "Card"
        super().__init__(
            f"{subject} references missing column {column_id}", code="INVALID_REFERENCE"
        )
        self.column_id = column_id
        self.card_id = card_id
