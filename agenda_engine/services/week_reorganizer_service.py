"""
Week reorganization service.

Re-derives a conflict-free placement of upcoming events by category
priority and reports the events that had to move.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Optional

from agenda_engine.core.config import get_settings
from agenda_engine.core.logger import setup_logger
from agenda_engine.models.enums import priority_weight
from agenda_engine.models.event import ScheduledEvent
from agenda_engine.models.plan import ReorgChange, WeekPlan
from agenda_engine.services.conflict_service import has_conflict
from agenda_engine.services.slot_finder_service import SlotFinder
from agenda_engine.utils.datetime_utils import snap_to_minutes

logger = setup_logger(__name__)

REASON_KEPT_PRIORITY = "Reallocated to preserve priority and avoid conflicts."
REASON_MOVED_FOR_HIGHER = "Moved to accommodate higher-priority events."

# Categories at or above this weight are described as keeping their priority
HIGH_PRIORITY_WEIGHT = 3


class WeekReorganizerService:
    """
    Priority-driven reorganization of a set of events.

    Stateless: each call works on its own snapshot and its own virtual
    calendar of already-placed events.
    """

    def __init__(
        self,
        slot_finder: Optional[SlotFinder] = None,
        snap_minutes: Optional[int] = None,
        move_tolerance_minutes: Optional[int] = None,
    ):
        settings = get_settings()
        self.slot_finder = slot_finder or SlotFinder()
        self.snap_minutes = settings.SNAP_MINUTES if snap_minutes is None else snap_minutes
        if self.snap_minutes <= 0:
            raise ValueError("snap_minutes must be positive")
        self.move_tolerance = timedelta(
            minutes=(
                settings.MOVE_TOLERANCE_MINUTES
                if move_tolerance_minutes is None
                else move_tolerance_minutes
            )
        )

    def select_movable(self, events: list[ScheduledEvent], now: datetime) -> list[ScheduledEvent]:
        """Events that are not completed and start strictly after ``now``."""
        return [event for event in events if not event.completed and event.start > now]

    def sort_by_priority(self, events: list[ScheduledEvent]) -> list[ScheduledEvent]:
        """Highest weight first, earlier start first among equals (stable)."""
        return sorted(events, key=lambda event: (-priority_weight(event.category), event.start))

    def plan(self, events: list[ScheduledEvent], now: datetime) -> WeekPlan:
        """
        Place every movable event and collect the moves.

        Args:
            events: Full event snapshot
            now: Reference instant; events starting at or before it are frozen

        Returns:
            WeekPlan with the placed events (conflict-free among themselves)
            and the changes. A shift within the tolerance is only reported when
            the event's original interval collides with an earlier placement.
        """
        movable = self.sort_by_priority(self.select_movable(events, now))
        placed: list[ScheduledEvent] = []
        changes: list[ReorgChange] = []

        for event in movable:
            desired_start = snap_to_minutes(event.start, self.snap_minutes)
            slot = self.slot_finder.find_free_slot(
                placed,
                desired_start,
                event.duration,
                ignore_id=event.id,
            )

            moved = abs(slot.start - event.start) > self.move_tolerance
            if not moved:
                if not has_conflict(placed, event, ignore_id=event.id):
                    # Small shifts are not reported, so the event keeps its real slot
                    placed.append(event)
                    continue
                moved = slot.start != event.start or slot.end != event.end

            if moved:
                weight = priority_weight(event.category)
                reason = REASON_KEPT_PRIORITY if weight >= HIGH_PRIORITY_WEIGHT else REASON_MOVED_FOR_HIGHER
                changes.append(
                    ReorgChange(
                        event_id=event.id,
                        title=event.title,
                        old_start=event.start,
                        old_end=event.end,
                        new_start=slot.start,
                        new_end=slot.end,
                        reason=reason,
                    )
                )
                logger.debug(
                    f"Event {event.id} moved {event.start.isoformat()} -> {slot.start.isoformat()}"
                )

            placed.append(event.with_interval(slot))

        logger.info(
            f"Week reorganization: {len(changes)}/{len(movable)} movable events relocated "
            f"({len(events) - len(movable)} frozen)"
        )
        return WeekPlan(placed=placed, changes=changes)

    def reorganize(self, events: list[ScheduledEvent], now: datetime) -> list[ReorgChange]:
        """Return only the proposed moves for ``events``."""
        return self.plan(events, now).changes


def reorganize(events: list[ScheduledEvent], now: datetime) -> list[ReorgChange]:
    """Reorganize with the configured constants."""
    return WeekReorganizerService().reorganize(events, now)
