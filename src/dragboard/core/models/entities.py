"""Core domain entities.

Entities are frozen; board operations produce new instances with
``model_copy(update=...)`` instead of mutating shared objects.
"""

from __future__ import annotations

from typing import TypeAlias
from uuid import uuid4

from pydantic import BaseModel, ConfigDict

Identifier: TypeAlias = str


def new_id() -> Identifier:
    """Generate a fresh opaque identifier."""
    return uuid4().hex


class DomainModel(BaseModel):
    """Base model with common config."""

    model_config = ConfigDict(frozen=True, from_attributes=True)


class Column(DomainModel):
    """Board column. Sequence order is left-to-right display order."""

    id: Identifier
    title: str

    @property
    def short_id(self) -> str:
        """Return shortened ID for display."""
        return self.id[:8]


class Card(DomainModel):
    """Kanban card (a "task" in drag terms).

    Relationships: owned by exactly one column through ``column_id``.
    """

    id: Identifier
    column_id: Identifier
    content: str

    @property
    def short_id(self) -> str:
        """Return shortened ID for display."""
        return self.id[:8]
