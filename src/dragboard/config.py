"""Configuration loader for Dragboard."""

from __future__ import annotations

import tomllib
from typing import TYPE_CHECKING, Literal, TypeAlias

from pydantic import BaseModel, Field, field_validator

from dragboard.constants import (
    DEFAULT_CARD_CONTENT_TEMPLATE,
    DEFAULT_COLUMN_TITLE_TEMPLATE,
    DRAG_ACTIVATION_DISTANCE,
)
from dragboard.paths import get_config_path

if TYPE_CHECKING:
    from pathlib import Path


TaskOverColumnLiteral: TypeAlias = Literal["keep", "top", "bottom"]

TASK_OVER_COLUMN_VALUES = frozenset({"keep", "top", "bottom"})
DEFAULT_TASK_OVER_COLUMN: TaskOverColumnLiteral = "bottom"


class BoardConfig(BaseModel):
    """Board state and reorder policy settings."""

    column_title_template: str = Field(
        default=DEFAULT_COLUMN_TITLE_TEMPLATE,
        description="Title for new columns; {n} is the column count after the add",
    )
    card_content_template: str = Field(
        default=DEFAULT_CARD_CONTENT_TEMPLATE,
        description="Content for new cards; {n} is the card count after the add",
    )
    strict_lookups: bool = Field(
        default=False,
        description="Raise on unknown column/card ids instead of logging a no-op",
    )
    cancel_drag_on_remove: bool = Field(
        default=True,
        description="Removing the dragged entity (or its column) ends the gesture",
    )
    task_over_column: TaskOverColumnLiteral = Field(
        default=DEFAULT_TASK_OVER_COLUMN,
        description="Where a card lands when hovered over a column body",
    )

    @field_validator("task_over_column", mode="before")
    @classmethod
    def validate_task_over_column(cls, value: object) -> str:
        """Gracefully coerce invalid values to the default placement."""
        if isinstance(value, str) and value.strip().lower() in TASK_OVER_COLUMN_VALUES:
            return value.strip().lower()
        return DEFAULT_TASK_OVER_COLUMN


class DragConfig(BaseModel):
    """Gesture adapter settings."""

    activation_distance: int = Field(
        default=DRAG_ACTIVATION_DISTANCE,
        ge=0,
        description="Cells the pointer must travel before a press starts a drag",
    )


class UIConfig(BaseModel):
    """UI-related user preferences."""

    seed_demo_board: bool = Field(
        default=True, description="Start the TUI with a small demo board"
    )


class DragboardConfig(BaseModel):
    """Root configuration model."""

    board: BoardConfig = Field(default_factory=BoardConfig)
    drag: DragConfig = Field(default_factory=DragConfig)
    ui: UIConfig = Field(default_factory=UIConfig)

    @classmethod
    def load(cls, config_path: Path | None = None) -> DragboardConfig:
        """Load configuration from TOML file or use defaults."""
        if config_path is None:
            config_path = get_config_path()

        if config_path.exists():
            with open(config_path, "rb") as f:
                data = tomllib.load(f)
            return cls.model_validate(data)

        return cls()
