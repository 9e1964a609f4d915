"""Unit tests for drag event parsing."""

from __future__ import annotations

import pytest

from dragboard.core.events import DragEnd, DragOver, DragStart, event_from_dict
from dragboard.core.models.enums import DragKind

pytestmark = pytest.mark.unit


class TestEventFromDict:
    def test_start(self):
        event = event_from_dict({"type": "start", "active": "t1", "kind": "task"})

        assert isinstance(event, DragStart)
        assert event.kind is DragKind.TASK

    def test_over(self):
        event = event_from_dict(
            {"type": "over", "active": "A", "kind": "Column", "over": "t1", "over_kind": "TASK"}
        )

        assert isinstance(event, DragOver)
        assert event.active_kind is DragKind.COLUMN
        assert event.over_kind is DragKind.TASK

    def test_end_without_target(self):
        event = event_from_dict({"type": "end", "active": "t1"})

        assert isinstance(event, DragEnd)
        assert event.over_id is None
        assert event.over_kind is None

    @pytest.mark.parametrize(
        "data",
        [
            {"type": "start", "kind": "task"},
            {"type": "start", "active": "t1", "kind": "row"},
            {"type": "over", "active": "t1", "kind": "task", "over_kind": "task"},
            {"type": "drop", "active": "t1"},
            {},
        ],
    )
    def test_invalid_events_raise(self, data: dict[str, object]):
        with pytest.raises(ValueError):
            event_from_dict(data)

    def test_events_get_unique_ids(self):
        first = event_from_dict({"type": "end", "active": "t1"})
        second = event_from_dict({"type": "end", "active": "t1"})

        assert first.event_id != second.event_id


class TestDragKind:
    @pytest.mark.parametrize("value", ["task", " Task ", "TASK", DragKind.TASK])
    def test_coerce_task(self, value: object):
        assert DragKind.coerce(value) is DragKind.TASK

    @pytest.mark.parametrize("value", [None, 3, "card"])
    def test_coerce_rejects(self, value: object):
        assert DragKind.coerce(value) is None
