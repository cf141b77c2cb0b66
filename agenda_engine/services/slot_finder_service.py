"""
First-fit free slot search.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Iterable, Optional

from agenda_engine.core.config import get_settings
from agenda_engine.core.exceptions import InvalidIntervalError
from agenda_engine.core.logger import setup_logger
from agenda_engine.models.event import TimeInterval
from agenda_engine.services.conflict_service import has_conflict

logger = setup_logger(__name__)


class SlotFinder:
    """
    Walks forward from a desired start in fixed steps until a slot is free.

    The search never looks further than ``horizon`` past the desired start;
    when nothing is free it returns the requested interval unchanged and
    leaves the conflict for the caller to surface.
    """

    def __init__(
        self,
        step_minutes: Optional[int] = None,
        horizon_hours: Optional[int] = None,
    ):
        """
        Initialize slot finder.

        Args:
            step_minutes: Cursor increment (None = SEARCH_STEP_MINUTES setting)
            horizon_hours: Search bound (None = SEARCH_HORIZON_HOURS setting)
        """
        settings = get_settings()
        if step_minutes is None:
            step_minutes = settings.SEARCH_STEP_MINUTES
        if horizon_hours is None:
            horizon_hours = settings.SEARCH_HORIZON_HOURS
        if step_minutes <= 0:
            raise ValueError("step_minutes must be positive")
        self.step = timedelta(minutes=step_minutes)
        self.horizon = timedelta(hours=horizon_hours)

    def find_free_slot(
        self,
        existing: Iterable,
        desired_start: datetime,
        duration: timedelta,
        ignore_id: Optional[str] = None,
    ) -> TimeInterval:
        """
        Find the earliest conflict-free interval at or after ``desired_start``.

        Args:
            existing: Events to avoid
            desired_start: First candidate start
            duration: Length of the slot
            ignore_id: Event id excluded from the conflict check

        Returns:
            The first free interval, or ``[desired_start, desired_start + duration)``
            when the horizon is exhausted

        Raises:
            InvalidIntervalError: If duration is not positive
        """
        if duration <= timedelta(0):
            raise InvalidIntervalError(
                "Slot duration must be positive",
                details={"duration_seconds": duration.total_seconds()},
            )

        events = list(existing)
        limit = desired_start + self.horizon
        cursor = desired_start

        while cursor < limit:
            candidate = TimeInterval.starting_at(cursor, duration)
            if not has_conflict(events, candidate, ignore_id):
                return candidate
            cursor += self.step

        logger.warning(
            f"No free slot within {self.horizon} of {desired_start.isoformat()} "
            f"for {duration}; keeping requested time"
        )
        return TimeInterval.starting_at(desired_start, duration)


def find_free_slot(
    existing: Iterable,
    desired_start: datetime,
    duration: timedelta,
    ignore_id: Optional[str] = None,
) -> TimeInterval:
    """Find a free slot with the configured step and horizon."""
    return SlotFinder().find_free_slot(existing, desired_start, duration, ignore_id)
