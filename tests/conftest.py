"""Pytest fixtures for Dragboard tests."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING

import pytest
from hypothesis import Phase, Verbosity, settings

_TEST_BASE_DIR = Path(tempfile.mkdtemp(prefix="dragboard-tests-"))
os.environ["DRAGBOARD_DATA_DIR"] = str(_TEST_BASE_DIR / "data")
os.environ["DRAGBOARD_CONFIG_DIR"] = str(_TEST_BASE_DIR / "config")

from dragboard.config import BoardConfig, DragboardConfig  # noqa: E402
from dragboard.core.board import BoardState  # noqa: E402
from dragboard.core.store import BoardStore  # noqa: E402
from tests.helpers.board import build_state, make_id_factory  # noqa: E402

if TYPE_CHECKING:
    from collections.abc import Callable


settings.register_profile(
    "ci",
    max_examples=100,
    deadline=None,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
)
settings.register_profile(
    "dev",
    max_examples=20,
    deadline=500,
)
settings.register_profile(
    "debug",
    max_examples=10,
    verbosity=Verbosity.verbose,
    deadline=None,
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


@pytest.fixture
def id_factory() -> Callable[[], str]:
    return make_id_factory()


@pytest.fixture
def three_columns() -> BoardState:
    """Columns A, B, C; A holds t1 and t2, B holds t3."""
    return build_state({"A": ["t1", "t2"], "B": ["t3"], "C": []})


@pytest.fixture
def store(three_columns: BoardState, id_factory: Callable[[], str]) -> BoardStore:
    return BoardStore(three_columns, id_factory=id_factory)


@pytest.fixture
def strict_store(three_columns: BoardState) -> BoardStore:
    config = DragboardConfig(board=BoardConfig(strict_lookups=True))
    return BoardStore(three_columns, config=config)
