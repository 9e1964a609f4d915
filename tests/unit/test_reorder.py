"""Unit tests for the reorder engine transitions."""

from __future__ import annotations

import pytest
from tests.helpers import build_state, layout_of

from dragboard.core import reorder
from dragboard.core.board import BoardState
from dragboard.core.events import DragEnd, DragOver, DragStart
from dragboard.core.models.entities import Card, Column
from dragboard.core.models.enums import DragKind, DragPhase, TaskPlacement

pytestmark = pytest.mark.unit

COLUMN = DragKind.COLUMN
TASK = DragKind.TASK


def _card_over(active: str, over: str, over_kind: DragKind = TASK) -> DragOver:
    return DragOver(active_id=active, active_kind=TASK, over_id=over, over_kind=over_kind)


def _column_over(active: str, over: str, over_kind: DragKind = COLUMN) -> DragOver:
    return DragOver(active_id=active, active_kind=COLUMN, over_id=over, over_kind=over_kind)


class TestMoveItem:
    def test_moves_forward_not_swap(self):
        assert reorder.move_item("abcd", 0, 3) == ("b", "c", "d", "a")

    def test_moves_backward(self):
        assert reorder.move_item("abcd", 3, 1) == ("a", "d", "b", "c")

    def test_same_index_is_identity(self):
        assert reorder.move_item([1, 2, 3], 1, 1) == (1, 2, 3)

    def test_does_not_mutate_input(self):
        items = [1, 2, 3]
        reorder.move_item(items, 0, 2)
        assert items == [1, 2, 3]

    @pytest.mark.parametrize(("source", "target"), [(-1, 0), (0, 3), (5, 1)])
    def test_out_of_range_raises(self, source: int, target: int):
        with pytest.raises(IndexError):
            reorder.move_item([1, 2, 3], source, target)


class TestDragStart:
    def test_sets_card_snapshot(self, three_columns):
        state = reorder.apply(three_columns, DragStart("t1", TASK))

        assert state.phase == DragPhase.DRAGGING
        assert state.active_kind == TASK
        assert state.active == three_columns.get_card("t1")

    def test_sets_column_snapshot(self, three_columns):
        state = reorder.apply(three_columns, DragStart("B", COLUMN))

        assert state.active_kind == COLUMN
        assert state.active_id == "B"

    def test_unknown_id_is_ignored(self, three_columns):
        assert reorder.apply(three_columns, DragStart("nope", TASK)) is three_columns

    def test_kind_mismatch_is_ignored(self, three_columns):
        assert reorder.apply(three_columns, DragStart("t1", COLUMN)) is three_columns

    def test_replaces_existing_selection(self, three_columns):
        state = reorder.apply(three_columns, DragStart("t1", TASK))
        state = reorder.apply(state, DragStart("t3", TASK))

        assert state.active_id == "t3"

    def test_collections_untouched(self, three_columns):
        state = reorder.apply(three_columns, DragStart("t1", TASK))

        assert state.cards == three_columns.cards
        assert state.columns == three_columns.columns


class TestTaskOverTask:
    def test_cross_column_relocates_into_target_slot(self):
        state = build_state({"X": ["t1", "t2"], "Y": ["t3"]})
        state = reorder.apply(state, DragStart("t1", TASK))

        state = reorder.apply(state, _card_over("t1", "t3"))

        assert state.card_ids == ("t2", "t3", "t1")
        assert state.get_card("t1").column_id == "Y"
        assert state.get_card("t2").column_id == "X"

        ended = reorder.apply(state, DragEnd("t1", over_id="t3", over_kind=TASK))
        assert ended.cards == state.cards
        assert ended.active is None

    def test_same_column_moves_down(self, three_columns):
        state = reorder.apply(three_columns, DragStart("t1", TASK))
        state = reorder.apply(state, _card_over("t1", "t2"))

        assert layout_of(state)["A"] == ["t2", "t1"]

    def test_same_column_moves_up(self, three_columns):
        state = reorder.apply(three_columns, DragStart("t2", TASK))
        state = reorder.apply(state, _card_over("t2", "t1"))

        assert layout_of(state)["A"] == ["t2", "t1"]

    def test_previous_snapshot_is_untouched(self, three_columns):
        started = reorder.apply(three_columns, DragStart("t1", TASK))
        reorder.apply(started, _card_over("t1", "t3"))

        assert started.get_card("t1").column_id == "A"
        assert started.card_ids == ("t1", "t2", "t3")

    def test_self_hover_is_noop(self, three_columns):
        state = reorder.apply(three_columns, DragStart("t1", TASK))

        assert reorder.apply(state, _card_over("t1", "t1")) is state

    def test_repeated_hover_is_idempotent(self, three_columns):
        state = reorder.apply(three_columns, DragStart("t1", TASK))
        once = reorder.apply(state, _card_over("t1", "t3"))
        twice = reorder.apply(once, _card_over("t1", "t3"))

        assert twice.cards == once.cards

    def test_unknown_target_is_ignored(self, three_columns):
        state = reorder.apply(three_columns, DragStart("t1", TASK))

        assert reorder.apply(state, _card_over("t1", "ghost")) is state

    def test_over_without_active_is_ignored(self, three_columns):
        assert reorder.apply(three_columns, _card_over("t1", "t3")) is three_columns

    def test_over_for_other_card_is_ignored(self, three_columns):
        state = reorder.apply(three_columns, DragStart("t1", TASK))

        assert reorder.apply(state, _card_over("t2", "t3")) is state


class TestTaskOverColumn:
    def test_bottom_appends_to_target_column(self):
        state = build_state({"A": ["t1"], "B": ["t2", "t3"]})
        state = reorder.apply(state, DragStart("t1", TASK))

        state = reorder.apply(state, _card_over("t1", "B", COLUMN), placement=TaskPlacement.BOTTOM)

        assert layout_of(state) == {"A": [], "B": ["t2", "t3", "t1"]}

    def test_top_prepends_to_target_column(self):
        state = build_state({"A": ["t1"], "B": ["t2", "t3"]})
        state = reorder.apply(state, DragStart("t1", TASK))

        state = reorder.apply(state, _card_over("t1", "B", COLUMN), placement=TaskPlacement.TOP)

        assert layout_of(state) == {"A": [], "B": ["t1", "t2", "t3"]}

    def test_keep_only_reassigns_column(self):
        state = build_state({"A": ["t1", "t2"], "B": ["t3"]})
        state = reorder.apply(state, DragStart("t1", TASK))

        state = reorder.apply(state, _card_over("t1", "B", COLUMN), placement=TaskPlacement.KEEP)

        assert state.card_ids == ("t1", "t2", "t3")
        assert layout_of(state) == {"A": ["t2"], "B": ["t1", "t3"]}

    def test_empty_column_receives_card(self, three_columns):
        state = reorder.apply(three_columns, DragStart("t3", TASK))

        state = reorder.apply(state, _card_over("t3", "C", COLUMN))

        assert layout_of(state) == {"A": ["t1", "t2"], "B": [], "C": ["t3"]}

    def test_own_column_at_bottom_is_noop(self, three_columns):
        state = reorder.apply(three_columns, DragStart("t2", TASK))

        assert reorder.apply(state, _card_over("t2", "A", COLUMN)) is state

    @pytest.mark.parametrize(
        ("active", "placement"),
        [("b", TaskPlacement.BOTTOM), ("a", TaskPlacement.TOP)],
    )
    def test_own_column_edge_is_noop_when_interleaved(self, active, placement):
        state = BoardState(
            columns=(Column(id="X", title="X"), Column(id="Y", title="Y")),
            cards=(
                Card(id="a", column_id="X", content="a"),
                Card(id="z", column_id="Y", content="z"),
                Card(id="b", column_id="X", content="b"),
            ),
        )
        state = reorder.apply(state, DragStart(active, TASK))

        result = reorder.apply(state, _card_over(active, "X", COLUMN), placement=placement)

        assert result is state
        assert result.card_ids == ("a", "z", "b")

    def test_own_column_moves_to_edge_when_interleaved(self):
        state = BoardState(
            columns=(Column(id="X", title="X"), Column(id="Y", title="Y")),
            cards=(
                Card(id="a", column_id="X", content="a"),
                Card(id="z", column_id="Y", content="z"),
                Card(id="b", column_id="X", content="b"),
            ),
        )
        state = reorder.apply(state, DragStart("a", TASK))

        result = reorder.apply(state, _card_over("a", "X", COLUMN))

        assert layout_of(result) == {"X": ["b", "a"], "Y": ["z"]}

    def test_own_column_keep_is_noop(self, three_columns):
        state = reorder.apply(three_columns, DragStart("t1", TASK))
        result = reorder.apply(state, _card_over("t1", "A", COLUMN), placement=TaskPlacement.KEEP)

        assert result is state

    def test_unknown_column_is_ignored(self, three_columns):
        state = reorder.apply(three_columns, DragStart("t1", TASK))

        assert reorder.apply(state, _card_over("t1", "Z", COLUMN)) is state


class TestColumnDrag:
    def test_column_over_column_is_a_move(self, three_columns):
        state = reorder.apply(three_columns, DragStart("A", COLUMN))

        state = reorder.apply(state, _column_over("A", "C"))

        assert state.column_ids == ("B", "C", "A")

    def test_column_over_task_uses_owning_column(self, three_columns):
        state = reorder.apply(three_columns, DragStart("C", COLUMN))

        state = reorder.apply(state, _column_over("C", "t1", TASK))

        assert state.column_ids == ("C", "A", "B")

    def test_column_drag_keeps_card_order(self, three_columns):
        state = reorder.apply(three_columns, DragStart("A", COLUMN))
        state = reorder.apply(state, _column_over("A", "C"))

        assert state.cards == three_columns.cards

    def test_drop_commits_pending_relocation(self, three_columns):
        state = reorder.apply(three_columns, DragStart("A", COLUMN))

        state = reorder.apply(state, DragEnd("A", over_id="B", over_kind=COLUMN))

        assert state.column_ids == ("B", "A", "C")
        assert state.active is None

    def test_drop_without_over_kind_guesses_target(self, three_columns):
        state = reorder.apply(three_columns, DragStart("A", COLUMN))

        state = reorder.apply(state, DragEnd("A", over_id="t3"))

        assert state.column_ids == ("B", "A", "C")

    def test_drop_on_self_after_hover_keeps_move(self, three_columns):
        state = reorder.apply(three_columns, DragStart("A", COLUMN))
        state = reorder.apply(state, _column_over("A", "C"))

        state = reorder.apply(state, DragEnd("A", over_id="A", over_kind=COLUMN))

        assert state.column_ids == ("B", "C", "A")

    def test_task_over_event_during_column_drag_is_ignored(self, three_columns):
        state = reorder.apply(three_columns, DragStart("A", COLUMN))

        assert reorder.apply(state, _card_over("A", "t3")) is state


class TestDragEnd:
    def test_clears_selection(self, three_columns):
        state = reorder.apply(three_columns, DragStart("t1", TASK))

        state = reorder.apply(state, DragEnd("t1"))

        assert state.phase == DragPhase.IDLE
        assert state.cards == three_columns.cards

    def test_card_drop_does_not_reorder(self, three_columns):
        state = reorder.apply(three_columns, DragStart("t1", TASK))

        state = reorder.apply(state, DragEnd("t1", over_id="t3", over_kind=TASK))

        assert state.cards == three_columns.cards
        assert state.active is None

    def test_end_without_gesture_is_harmless(self, three_columns):
        assert reorder.apply(three_columns, DragEnd("t1")) is three_columns

    def test_end_for_other_entity_still_clears(self, three_columns):
        state = reorder.apply(three_columns, DragStart("t1", TASK))

        state = reorder.apply(state, DragEnd("t2", over_id="t3"))

        assert state.active is None
        assert state.cards == three_columns.cards

    def test_unknown_event_type_is_ignored(self, three_columns):
        assert reorder.apply(three_columns, object()) is three_columns  # type: ignore[arg-type]
