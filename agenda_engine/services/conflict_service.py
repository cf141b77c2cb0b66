"""
Overlap and conflict predicates.

``overlaps`` is the single comparison used by every other service to
decide whether two time ranges collide.
"""

from __future__ import annotations

from datetime import datetime
from typing import Iterable, Optional, Protocol


class HasTimeRange(Protocol):
    start: datetime
    end: datetime


def overlaps(a: HasTimeRange, b: HasTimeRange) -> bool:
    """
    Check whether two half-open intervals share any instant.

    Intervals that only touch at a boundary do not overlap.
    """
    return a.start < b.end and a.end > b.start


def has_conflict(
    existing: Iterable,
    candidate: HasTimeRange,
    ignore_id: Optional[str] = None,
) -> bool:
    """
    Check a candidate interval against a collection of events.

    Args:
        existing: Events with ``id``, ``start`` and ``end``
        candidate: Interval being tested
        ignore_id: Id of the event being moved, so it does not collide with itself

    Returns:
        True if any event other than ``ignore_id`` overlaps the candidate
    """
    for event in existing:
        if ignore_id is not None and event.id == ignore_id:
            continue
        if overlaps(event, candidate):
            return True
    return False


def find_conflicts(
    existing: Iterable,
    candidate: HasTimeRange,
    ignore_id: Optional[str] = None,
) -> list:
    """Return every event that overlaps the candidate, in input order."""
    return [
        event
        for event in existing
        if (ignore_id is None or event.id != ignore_id) and overlaps(event, candidate)
    ]
