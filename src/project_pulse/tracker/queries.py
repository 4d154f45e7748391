# src/project_pulse/tracker/queries.py

from __future__ import annotations

"""
Read-only queries over a single project.

None of these mutate the project. The time-based ones take the reference
time explicitly so results are reproducible.
"""

import math
from collections.abc import Callable
from datetime import datetime

from .models import Project, Task, TaskStatus

SECONDS_PER_DAY = 86_400.0
DEFAULT_CRITICAL_DAYS = 3.0

TaskPredicate = Callable[[Task], bool]


def generate_summary(project: Project) -> dict[TaskStatus, int]:
    summary = {status: 0 for status in TaskStatus}
    for task in project.tasks:
        summary[task.status] += 1
    return summary


def sort_tasks_by_due_date(project: Project) -> list[Task]:
    # sorted() is stable: equal due dates keep insertion order.
    return sorted(project.tasks, key=lambda t: t.due_date)


def filter_project_tasks(project: Project, predicate: TaskPredicate) -> list[Task]:
    return [task for task in project.tasks if predicate(task)]


def days_remaining(task: Task, *, now: datetime) -> float:
    """Fractional days from now until the task is due (negative when overdue)."""
    return (task.due_date - now).total_seconds() / SECONDS_PER_DAY


def calculate_remaining_time(project: Project, *, now: datetime) -> int:
    """
    Sum of whole days left across open tasks.

    Each open task contributes ceil(days_remaining), clamped at zero, so
    overdue tasks add nothing.
    """
    total = 0
    for task in project.tasks:
        if task.is_completed:
            continue
        total += max(0, math.ceil(days_remaining(task, now=now)))
    return total


def get_critical_tasks(
    project: Project,
    *,
    now: datetime,
    threshold_days: float = DEFAULT_CRITICAL_DAYS,
) -> list[Task]:
    """Open tasks due in less than threshold_days (overdue ones included)."""
    return [
        task
        for task in project.tasks
        if not task.is_completed and days_remaining(task, now=now) < threshold_days
    ]
