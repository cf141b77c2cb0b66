"""
Enum definitions for the scheduling engine.

These enums are used across models and provide type-safe category/priority values.
"""

from enum import Enum
from typing import Optional, Union


class EventCategory(str, Enum):
    """Calendar event category."""

    MEETING = "meeting"
    WORK = "work"
    ROUTINE = "routine"
    PERSONAL = "personal"
    HEALTH = "health"


class TaskPriority(str, Enum):
    """Task priority level."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


# Reorganization order: higher weight is placed first
PRIORITY_WEIGHTS: dict[str, int] = {
    EventCategory.MEETING.value: 4,
    EventCategory.WORK.value: 3,
    EventCategory.HEALTH.value: 3,
    EventCategory.ROUTINE.value: 2,
    EventCategory.PERSONAL.value: 1,
}

UNKNOWN_PRIORITY_WEIGHT = 0


def priority_weight(category: Optional[Union[EventCategory, str]]) -> int:
    """Return the reorganization weight of a category (0 when unknown)."""
    if category is None:
        return UNKNOWN_PRIORITY_WEIGHT
    key = category.value if isinstance(category, EventCategory) else str(category)
    return PRIORITY_WEIGHTS.get(key, UNKNOWN_PRIORITY_WEIGHT)
