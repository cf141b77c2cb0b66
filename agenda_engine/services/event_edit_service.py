"""
Event editing use-cases with conflict feedback.

Each use-case takes the current event list and returns an EditOutcome:
either the updated list, or the unchanged list plus a suggestion the UI
can present before anything is committed.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from agenda_engine.core.exceptions import NotFoundError
from agenda_engine.core.logger import setup_logger
from agenda_engine.models.event import ScheduledEvent, TimeInterval
from agenda_engine.models.plan import EditOutcome, EditSuggestion
from agenda_engine.services.conflict_service import has_conflict
from agenda_engine.services.slot_finder_service import SlotFinder

logger = setup_logger(__name__)


class EventEditService:
    """Create, move and resize events without ever double-booking."""

    def __init__(self, slot_finder: Optional[SlotFinder] = None):
        self.slot_finder = slot_finder or SlotFinder()

    @staticmethod
    def _find(events: list[ScheduledEvent], event_id: str) -> ScheduledEvent:
        for event in events:
            if event.id == event_id:
                return event
        raise NotFoundError(f"Event {event_id} not found", details={"event_id": event_id})

    def check_conflict(
        self,
        events: list[ScheduledEvent],
        candidate: TimeInterval,
        ignore_id: Optional[str] = None,
    ) -> bool:
        """Drag/resize preview: would ``candidate`` collide with anything?"""
        return has_conflict(events, candidate, ignore_id)

    def create_event(
        self,
        events: list[ScheduledEvent],
        new_event: ScheduledEvent,
    ) -> EditOutcome:
        """
        Append ``new_event`` unless its id is taken or it overlaps an existing event.
        """
        if any(event.id == new_event.id for event in events):
            logger.debug(f"Rejected creation of {new_event.id}: id already exists")
            return EditOutcome(
                events=list(events),
                suggestion=EditSuggestion(
                    message=f"An event with id {new_event.id} already exists.",
                    action_label="Keep calendar unchanged",
                ),
            )

        if has_conflict(events, new_event):
            logger.debug(f"Rejected creation of {new_event.id}: slot is taken")
            return EditOutcome(
                events=list(events),
                suggestion=EditSuggestion(
                    message="Conflict detected. That time is already taken.",
                    action_label="Keep calendar unchanged",
                ),
            )
        return EditOutcome(events=[*events, new_event])

    def move_event(
        self,
        events: list[ScheduledEvent],
        event_id: str,
        new_start: datetime,
        new_end: datetime,
    ) -> EditOutcome:
        """
        Move an event to ``[new_start, new_end)``.

        On conflict nothing changes and the suggestion proposes the first
        free slot of the same length at or after ``new_start``.

        Raises:
            NotFoundError: If no event has ``event_id``
        """
        event = self._find(events, event_id)
        target = TimeInterval(start=new_start, end=new_end)

        if has_conflict(events, target, event_id):
            free_slot = self.slot_finder.find_free_slot(
                events, new_start, target.duration, ignore_id=event_id
            )
            time_str = free_slot.start.strftime("%H:%M")
            return EditOutcome(
                events=list(events),
                suggestion=EditSuggestion(
                    message=f"Conflict detected. That time is taken. Move to {time_str} instead?",
                    action_label=f"Move to {time_str}",
                    proposed=free_slot,
                ),
            )

        moved = event.with_interval(target)
        return EditOutcome(events=[moved if e.id == event_id else e for e in events])

    def resize_event(
        self,
        events: list[ScheduledEvent],
        event_id: str,
        new_end: datetime,
    ) -> EditOutcome:
        """
        Change only the end of an event.

        Raises:
            NotFoundError: If no event has ``event_id``
        """
        event = self._find(events, event_id)
        target = TimeInterval(start=event.start, end=new_end)

        if has_conflict(events, target, event_id):
            return EditOutcome(
                events=list(events),
                suggestion=EditSuggestion(
                    message="Cannot extend the event: it would overlap the next one.",
                    action_label="Keep original",
                ),
            )

        resized = event.with_interval(target)
        return EditOutcome(events=[resized if e.id == event_id else e for e in events])
