"""
Task load analysis: derived priority, deadline ordering and daily hour load.
"""

from __future__ import annotations

from collections import defaultdict
from datetime import date, datetime, timedelta
from typing import Optional

from agenda_engine.core.config import get_settings
from agenda_engine.models.enums import TaskPriority
from agenda_engine.models.plan import DayLoad
from agenda_engine.models.task import Task


class TaskLoadService:
    """Helpers that read task lists without changing them."""

    def __init__(
        self,
        daily_hours_limit: Optional[float] = None,
        default_task_hours: Optional[float] = None,
        high_within_hours: Optional[int] = None,
        medium_within_hours: Optional[int] = None,
    ):
        settings = get_settings()
        if daily_hours_limit is None:
            daily_hours_limit = settings.DAILY_HOURS_LIMIT
        if default_task_hours is None:
            default_task_hours = settings.DEFAULT_TASK_HOURS
        if high_within_hours is None:
            high_within_hours = settings.HIGH_PRIORITY_WITHIN_HOURS
        if medium_within_hours is None:
            medium_within_hours = settings.MEDIUM_PRIORITY_WITHIN_HOURS

        self.daily_hours_limit = daily_hours_limit
        self.default_task_hours = default_task_hours
        self.high_within = timedelta(hours=high_within_hours)
        self.medium_within = timedelta(hours=medium_within_hours)

    def calculate_priority(self, task: Task, now: datetime) -> TaskPriority:
        """
        Derive a task's priority from how close its deadline is.

        Undated tasks keep their stored priority. Overdue tasks are high.
        """
        if task.due_date is None:
            return task.priority

        remaining = task.due_date - now
        if remaining <= self.high_within:
            return TaskPriority.HIGH
        if remaining <= self.medium_within:
            return TaskPriority.MEDIUM
        return TaskPriority.LOW

    @staticmethod
    def sort_by_deadline(tasks: list[Task]) -> list[Task]:
        """Ascending due date; tasks without one go last in input order."""
        return sorted(
            tasks,
            key=lambda task: (task.due_date is None, task.due_date or datetime.min),
        )

    def detect_weekly_overload(self, tasks: list[Task]) -> list[DayLoad]:
        """Days whose open tasks add up to more than the daily hour limit."""
        per_day: dict[date, float] = defaultdict(float)
        for task in tasks:
            if task.completed or task.due_date is None:
                continue
            hours = self.default_task_hours if task.estimated_hours is None else task.estimated_hours
            per_day[task.due_date.date()] += hours

        return [
            DayLoad(day=day, hours=hours)
            for day, hours in sorted(per_day.items())
            if hours > self.daily_hours_limit
        ]
