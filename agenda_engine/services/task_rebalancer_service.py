"""
Task rebalancing service.

Detects days with more open tasks than the daily threshold and proposes
pushing the excess to the next business day.
"""

from __future__ import annotations

from collections import defaultdict
from datetime import date
from typing import Optional

from agenda_engine.core.config import get_settings
from agenda_engine.core.logger import setup_logger
from agenda_engine.models.plan import RebalancePlan, TaskMoveChange
from agenda_engine.models.task import Task
from agenda_engine.utils.datetime_utils import at_hour, next_business_day

logger = setup_logger(__name__)

BALANCED_REASON = "Your week is already balanced. No tasks need to move."


class TaskRebalancerService:
    """
    Single forward pass over days in ascending order.

    Moved tasks are not counted against their destination day, so a move
    can itself overload the next business day; re-running the rebalancer
    on the applied plan picks that up.
    """

    def __init__(
        self,
        daily_threshold: Optional[int] = None,
        target_hour: Optional[int] = None,
    ):
        """
        Initialize rebalancer.

        Args:
            daily_threshold: Max open tasks per day (None = DAILY_TASK_THRESHOLD setting)
            target_hour: Hour moved tasks are pinned to (None = REBALANCE_HOUR setting)
        """
        settings = get_settings()
        self.daily_threshold = (
            settings.DAILY_TASK_THRESHOLD if daily_threshold is None else daily_threshold
        )
        self.target_hour = settings.REBALANCE_HOUR if target_hour is None else target_hour

    def group_by_day(self, tasks: list[Task]) -> dict[date, list[Task]]:
        """Open dated tasks keyed by due day, each day in due-date order."""
        pending = sorted(
            (task for task in tasks if not task.completed and task.due_date is not None),
            key=lambda task: task.due_date,
        )
        by_day: dict[date, list[Task]] = defaultdict(list)
        for task in pending:
            by_day[task.due_date.date()].append(task)
        return dict(by_day)

    def rebalance(self, tasks: list[Task]) -> RebalancePlan:
        """
        Propose moves for every task beyond the daily threshold.

        Returns:
            RebalancePlan with one change per moved task, the overloaded
            days, and a human-readable reason
        """
        by_day = self.group_by_day(tasks)
        changes: list[TaskMoveChange] = []
        overloaded_days: list[date] = []

        for day in sorted(by_day):
            day_tasks = by_day[day]
            if len(day_tasks) <= self.daily_threshold:
                continue

            overloaded_days.append(day)
            target_day = next_business_day(day)
            for task in day_tasks[self.daily_threshold:]:
                changes.append(
                    TaskMoveChange(
                        task_id=task.id,
                        task_title=task.title,
                        from_date=task.due_date,
                        to_date=at_hour(target_day, self.target_hour, task.due_date.tzinfo),
                    )
                )

        if changes:
            noun = "task" if len(changes) == 1 else "tasks"
            reason = (
                f"Moved {len(changes)} {noun} from {len(overloaded_days)} overloaded "
                f"day(s) to the next business day to keep each day at or under "
                f"{self.daily_threshold} tasks."
            )
        else:
            reason = BALANCED_REASON

        logger.info(
            f"Task rebalance: {len(changes)} moves across {len(overloaded_days)} overloaded days"
        )
        return RebalancePlan(changes=changes, reason=reason, overloaded_days=overloaded_days)


def rebalance(tasks: list[Task]) -> RebalancePlan:
    """Rebalance with the configured constants."""
    return TaskRebalancerService().rebalance(tasks)
