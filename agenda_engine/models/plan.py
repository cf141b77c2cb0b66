"""
Plan models produced by the reorganizer, the rebalancer and the edit use-cases.

A plan is a batch of proposed changes awaiting external confirmation.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from agenda_engine.models.event import ScheduledEvent, TimeInterval


class ReorgChange(BaseModel):
    """One event move proposed by the week reorganizer."""

    model_config = ConfigDict(frozen=True)

    event_id: str
    title: str
    old_start: datetime
    old_end: datetime
    new_start: datetime
    new_end: datetime
    reason: str


class WeekPlan(BaseModel):
    """Placement result of one reorganization run."""

    model_config = ConfigDict(frozen=True)

    placed: list[ScheduledEvent] = Field(default_factory=list)
    changes: list[ReorgChange] = Field(default_factory=list)


class TaskMoveChange(BaseModel):
    """One task due-date move proposed by the rebalancer."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    task_id: str
    task_title: str
    from_date: datetime = Field(..., alias="from")
    to_date: datetime = Field(..., alias="to")


class RebalancePlan(BaseModel):
    """Batch of task moves plus a human-readable summary."""

    model_config = ConfigDict(frozen=True)

    changes: list[TaskMoveChange] = Field(default_factory=list)
    reason: str
    overloaded_days: list[date] = Field(default_factory=list)


class DayLoad(BaseModel):
    """Estimated hours of work due on a calendar day."""

    day: date
    hours: float


class EditSuggestion(BaseModel):
    """Warning raised by an edit use-case, optionally with a fix."""

    kind: Literal["warning"] = "warning"
    message: str
    action_label: str
    proposed: Optional[TimeInterval] = None


class EditOutcome(BaseModel):
    """Result of an edit use-case: the new event list and an optional suggestion."""

    events: list[ScheduledEvent]
    suggestion: Optional[EditSuggestion] = None

    @property
    def applied(self) -> bool:
        return self.suggestion is None
