"""
Unit tests for WeekReorganizerService.
"""

from datetime import datetime, timedelta, timezone
from itertools import combinations

import pytest

from agenda_engine.models.enums import EventCategory
from agenda_engine.models.event import ScheduledEvent
from agenda_engine.services.conflict_service import overlaps
from agenda_engine.services.plan_apply_service import apply_reorg_plan
from agenda_engine.services.week_reorganizer_service import (
    REASON_KEPT_PRIORITY,
    REASON_MOVED_FOR_HIGHER,
    WeekReorganizerService,
    reorganize,
)

BASE = datetime(2025, 1, 20, tzinfo=timezone.utc)
NOW = BASE  # midnight, before every event below


def at(hour: int, minute: int = 0) -> datetime:
    return BASE + timedelta(hours=hour, minutes=minute)


def make_event(
    event_id: str,
    start: datetime,
    end: datetime,
    category=EventCategory.WORK,
    completed: bool = False,
) -> ScheduledEvent:
    return ScheduledEvent(
        id=event_id,
        title=f"Event {event_id}",
        start=start,
        end=end,
        category=category,
        completed=completed,
    )


def test_meeting_keeps_slot_and_work_moves_after_it():
    events = [
        make_event("1", at(10), at(11), EventCategory.MEETING),
        make_event("2", at(10, 30), at(11, 30), EventCategory.WORK),
    ]

    changes = reorganize(events, NOW)

    assert len(changes) == 1
    change = changes[0]
    assert change.event_id == "2"
    assert change.old_start == at(10, 30)
    assert change.new_start == at(11)
    assert change.new_end == at(12)
    assert change.reason == REASON_KEPT_PRIORITY


def test_lower_priority_event_is_the_one_that_moves():
    events = [
        make_event("personal", at(14), at(15), EventCategory.PERSONAL),
        make_event("meeting", at(14), at(15), EventCategory.MEETING),
    ]

    changes = reorganize(events, NOW)

    assert [change.event_id for change in changes] == ["personal"]
    assert changes[0].new_start == at(15)
    assert changes[0].reason == REASON_MOVED_FOR_HIGHER


def test_equal_priority_earlier_event_goes_first():
    events = [
        make_event("late", at(9, 30), at(10, 30), EventCategory.ROUTINE),
        make_event("early", at(9), at(10), EventCategory.ROUTINE),
    ]

    changes = reorganize(events, NOW)

    assert [change.event_id for change in changes] == ["late"]
    assert changes[0].new_start == at(10)


def test_no_conflicts_produces_empty_plan():
    events = [
        make_event("a", at(9), at(10)),
        make_event("b", at(10), at(11)),
        make_event("c", at(13), at(14), EventCategory.HEALTH),
    ]
    assert reorganize(events, NOW) == []


def test_small_shift_from_snapping_is_not_reported():
    events = [make_event("a", at(9, 7), at(10, 7))]
    service = WeekReorganizerService()

    week_plan = service.plan(events, NOW)

    assert week_plan.changes == []
    assert week_plan.placed[0].start == at(9, 7)


def test_past_and_completed_events_are_frozen():
    now = at(12)
    events = [
        make_event("past", at(9), at(10), EventCategory.PERSONAL),
        make_event("done", at(14), at(15), EventCategory.PERSONAL, completed=True),
        make_event("meeting", at(14), at(15), EventCategory.MEETING),
    ]

    week_plan = WeekReorganizerService().plan(events, now)

    assert week_plan.changes == []
    assert [event.id for event in week_plan.placed] == ["meeting"]


def test_event_starting_exactly_now_is_frozen():
    now = at(10)
    events = [
        make_event("current", at(10), at(11), EventCategory.PERSONAL),
        make_event("meeting", at(10, 30), at(11), EventCategory.MEETING),
    ]
    assert reorganize(events, now) == []


def test_placed_result_is_conflict_free():
    events = [
        make_event("m1", at(9), at(10), EventCategory.MEETING),
        make_event("w1", at(9), at(11), EventCategory.WORK),
        make_event("h1", at(9, 30), at(10), EventCategory.HEALTH),
        make_event("r1", at(10), at(10, 45), EventCategory.ROUTINE),
        make_event("p1", at(9), at(12), EventCategory.PERSONAL),
        make_event("x1", at(11), at(11, 30), "errand"),
    ]

    week_plan = WeekReorganizerService().plan(events, NOW)

    assert len(week_plan.placed) == len(events)
    for a, b in combinations(week_plan.placed, 2):
        assert not overlaps(a, b), (a.id, b.id)


def test_every_movable_event_is_placed_exactly_once():
    events = [make_event(str(i), at(9), at(10)) for i in range(4)]

    week_plan = WeekReorganizerService().plan(events, NOW)

    assert sorted(event.id for event in week_plan.placed) == ["0", "1", "2", "3"]
    assert [event.start for event in week_plan.placed] == [at(9), at(10), at(11), at(12)]


def test_durations_are_preserved():
    events = [
        make_event("a", at(9), at(10, 30), EventCategory.MEETING),
        make_event("b", at(9), at(9, 45), EventCategory.PERSONAL),
    ]

    changes = reorganize(events, NOW)

    assert changes[0].new_end - changes[0].new_start == timedelta(minutes=45)


def test_reorganize_is_idempotent_on_its_own_output():
    events = [
        make_event("1", at(10), at(11), EventCategory.MEETING),
        make_event("2", at(10, 30), at(11, 30), EventCategory.WORK),
        make_event("3", at(10), at(10, 30), EventCategory.PERSONAL),
        make_event("4", at(11), at(12), EventCategory.ROUTINE),
        make_event("5", at(10, 15), at(11), EventCategory.HEALTH),
    ]

    first = reorganize(events, NOW)
    assert first

    applied = apply_reorg_plan(events, first)
    assert reorganize(applied, NOW) == []


def test_small_shift_into_a_moved_event_is_reported():
    events = [
        make_event("U", at(10), at(10, 30), EventCategory.ROUTINE),
        make_event("X", at(9), at(9, 15), EventCategory.ROUTINE),
        make_event("M", at(9), at(10), EventCategory.MEETING),
    ]

    first = reorganize(events, NOW)

    moves = {change.event_id: (change.new_start, change.new_end) for change in first}
    assert moves == {"X": (at(10), at(10, 15)), "U": (at(10, 15), at(10, 45))}

    applied = apply_reorg_plan(events, first)
    for a, b in combinations(applied, 2):
        assert not overlaps(a, b), (a.id, b.id)
    assert reorganize(applied, NOW) == []


def test_small_shift_keeps_original_slot_when_free():
    events = [
        make_event("M", at(9), at(10), EventCategory.MEETING),
        make_event("P", at(10, 7), at(10, 37), EventCategory.PERSONAL),
        make_event("R", at(10, 37), at(11), EventCategory.PERSONAL),
    ]

    week_plan = WeekReorganizerService().plan(events, NOW)

    assert week_plan.changes == []
    assert [(event.id, event.start) for event in week_plan.placed] == [
        ("M", at(9)),
        ("P", at(10, 7)),
        ("R", at(10, 37)),
    ]


def test_unknown_category_is_placed_last():
    events = [
        make_event("unknown", at(9), at(10), "side-project"),
        make_event("personal", at(9), at(10), EventCategory.PERSONAL),
    ]

    changes = reorganize(events, NOW)

    assert [change.event_id for change in changes] == ["unknown"]
    assert changes[0].reason == REASON_MOVED_FOR_HIGHER


def test_custom_tolerance_reports_small_moves():
    service = WeekReorganizerService(move_tolerance_minutes=0)
    events = [
        make_event("a", at(9), at(10), EventCategory.MEETING),
        make_event("b", at(9, 45), at(10, 15), EventCategory.PERSONAL),
    ]

    changes = service.reorganize(events, NOW)

    assert [change.event_id for change in changes] == ["b"]
    assert changes[0].new_start == at(10)


def test_zero_snap_is_rejected():
    with pytest.raises(ValueError):
        WeekReorganizerService(snap_minutes=0)
