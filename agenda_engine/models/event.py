"""
Calendar event and time interval models.

Both are immutable: rescheduling produces a new instance.
"""

from datetime import datetime, timedelta
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from agenda_engine.models.enums import EventCategory


class TimeInterval(BaseModel):
    """Half-open time range [start, end)."""

    model_config = ConfigDict(frozen=True)

    start: datetime
    end: datetime

    @model_validator(mode="after")
    def validate_order(self):
        """Reject empty or inverted ranges."""
        if self.start >= self.end:
            raise ValueError("start must be before end")
        return self

    @property
    def duration(self) -> timedelta:
        return self.end - self.start

    @classmethod
    def starting_at(cls, start: datetime, duration: timedelta) -> "TimeInterval":
        return cls(start=start, end=start + duration)


class ScheduledEvent(BaseModel):
    """A calendar entry owned by the user's calendar."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    title: str = ""
    start: datetime
    end: datetime
    category: Union[EventCategory, str] = Field(
        EventCategory.PERSONAL, union_mode="left_to_right"
    )
    completed: bool = False
    is_all_day: bool = False
    description: Optional[str] = None
    location: Optional[str] = None

    @model_validator(mode="after")
    def validate_order(self):
        """Reject empty or inverted ranges."""
        if self.start >= self.end:
            raise ValueError("start must be before end")
        return self

    @property
    def interval(self) -> TimeInterval:
        return TimeInterval(start=self.start, end=self.end)

    @property
    def duration(self) -> timedelta:
        return self.end - self.start

    def with_interval(self, interval: TimeInterval) -> "ScheduledEvent":
        """Return a copy of this event placed at ``interval``."""
        return self.model_copy(update={"start": interval.start, "end": interval.end})
