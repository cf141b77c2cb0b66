"""
Task model definitions.

Tasks are to-do items with an optional due date; they are rescheduled by
date only, never by time range.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from agenda_engine.models.enums import TaskPriority


class Task(BaseModel):
    """A to-do item owned by the task list."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1, max_length=500)
    due_date: Optional[datetime] = None
    completed: bool = False
    priority: TaskPriority = TaskPriority.MEDIUM
    estimated_hours: Optional[float] = Field(None, gt=0, description="Estimated effort in hours")
    description: Optional[str] = Field(None, max_length=2000)
