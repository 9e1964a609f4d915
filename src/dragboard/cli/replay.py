"""Replay a JSON gesture script through the reorder engine."""

from __future__ import annotations

import json
import tomllib
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click
from pydantic import ValidationError

from dragboard.config import DragboardConfig
from dragboard.core.board import BoardState
from dragboard.core.errors import BoardError
from dragboard.core.events import event_from_dict
from dragboard.core.models.entities import Card, Column
from dragboard.core.store import BoardStore

if TYPE_CHECKING:
    from dragboard.core.events import DragEvent


class ScriptError(click.ClickException):
    """Raised when a replay script cannot be parsed."""


def parse_script(data: dict[str, Any]) -> tuple[BoardState, list[DragEvent]]:
    """Build the starting board and event list from a decoded script.

    Expected shape::

        {
          "columns": [{"id": "X", "title": "Todo", "cards": [{"id": "t1", "content": "..."}]}],
          "events": [{"type": "start", "active": "t1", "kind": "task"}, ...]
        }
    """
    columns: list[Column] = []
    cards: list[Card] = []
    try:
        for raw_column in data.get("columns", []):
            column = Column(id=raw_column["id"], title=raw_column.get("title", raw_column["id"]))
            columns.append(column)
            for raw_card in raw_column.get("cards", []):
                cards.append(
                    Card(
                        id=raw_card["id"],
                        column_id=column.id,
                        content=raw_card.get("content", raw_card["id"]),
                    )
                )
        state = BoardState(columns=tuple(columns), cards=tuple(cards))
        state.check_invariants()
        events = [event_from_dict(raw_event) for raw_event in data.get("events", [])]
    except (AttributeError, KeyError, TypeError, ValueError, ValidationError) as exc:
        raise ScriptError(f"Invalid replay script: {exc}") from exc
    return state, events


def render_board(state: BoardState) -> str:
    """Render columns and their cards as plain text, one column per line."""
    lines = []
    for column in state.columns:
        contents = ", ".join(card.id for card in state.cards_for_column(column.id))
        lines.append(f"{column.id} [{column.title}]: {contents}")
    if state.active is not None:
        lines.append(f"active: {state.active_kind} {state.active.id}")
    return "\n".join(lines)


def board_to_dict(state: BoardState) -> dict[str, Any]:
    return {
        "columns": [column.model_dump() for column in state.columns],
        "cards": [card.model_dump() for card in state.cards],
        "active": state.active.model_dump() if state.active is not None else None,
    }


@click.command()
@click.argument(
    "script", type=click.Path(exists=True, dir_okay=False, readable=True, path_type=Path)
)
@click.option("--json", "as_json", is_flag=True, help="Print the resulting board as JSON")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to config.toml (defaults to the user config)",
)
def replay(script: Path, as_json: bool, config_path: Path | None) -> None:
    """Run a recorded gesture script and print the final board.

    \b
    Examples:
        dragboard replay gestures.json
        dragboard replay gestures.json --json | jq .cards
    """
    try:
        data = json.loads(script.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ScriptError(f"{script} is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise ScriptError(f"{script} must contain a JSON object")

    state, events = parse_script(data)
    try:
        config = DragboardConfig.load(config_path)
    except (OSError, tomllib.TOMLDecodeError, ValidationError) as exc:
        raise click.ClickException(f"Invalid config: {exc}") from exc
    store = BoardStore(state, config=config)
    try:
        for event in events:
            store.dispatch(event)
    except BoardError as exc:
        raise click.ClickException(str(exc)) from exc

    if as_json:
        click.echo(json.dumps(board_to_dict(store.state), indent=2))
    else:
        click.echo(render_board(store.state))
