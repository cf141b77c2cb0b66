"""
Apply confirmed plans to in-memory collections.

Every input entity appears exactly once in the output, in input order.
Changes naming an unknown id are ignored.
"""

from __future__ import annotations

from agenda_engine.models.event import ScheduledEvent, TimeInterval
from agenda_engine.models.plan import RebalancePlan, ReorgChange
from agenda_engine.models.task import Task


def apply_reorg_plan(
    events: list[ScheduledEvent],
    changes: list[ReorgChange],
) -> list[ScheduledEvent]:
    """Return ``events`` with each change's new interval applied."""
    by_id = {change.event_id: change for change in changes}
    result = []
    for event in events:
        change = by_id.get(event.id)
        if change is None:
            result.append(event)
            continue
        result.append(event.with_interval(TimeInterval(start=change.new_start, end=change.new_end)))
    return result


def apply_task_moves(tasks: list[Task], plan: RebalancePlan) -> list[Task]:
    """Return ``tasks`` with moved due dates from ``plan``."""
    new_dates = {change.task_id: change.to_date for change in plan.changes}
    return [
        task.model_copy(update={"due_date": new_dates[task.id]}) if task.id in new_dates else task
        for task in tasks
    ]
