# src/project_pulse/cli/demo.py

"""
Demonstration flow.

Walks through the tracker step by step and prints each intermediate state
to stdout. Every awaited call finishes before the next step starts; the
first failure ends the run.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import UTC, datetime

from ..core.state import AppState
from ..tracker.api import complete_task
from ..tracker.errors import TrackerError
from ..tracker.models import Project, Task, TaskStatus
from ..tracker.queries import (
    calculate_remaining_time,
    filter_project_tasks,
    generate_summary,
    get_critical_tasks,
    sort_tasks_by_due_date,
)

logger = logging.getLogger(__name__)

NEW_TASK_ID = 4
COMPLETED_TASK_ID = 2


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}")


def format_task(task: Task) -> str:
    return f"#{task.id} [{task.status.value}] {task.description} (due {task.due_date.date().isoformat()})"


def format_tasks(tasks: Iterable[Task]) -> str:
    lines = [f"  {format_task(t)}" for t in tasks]
    return "\n".join(lines) if lines else "  (none)"


def format_project(project: Project) -> str:
    header = (
        f"Project #{project.id} {project.name} "
        f"(started {project.start_date.date().isoformat()}, {len(project.tasks)} tasks)"
    )
    return f"{header}\n{format_tasks(project.tasks)}"


def format_summary(summary: dict[TaskStatus, int]) -> str:
    return ", ".join(f"{status.value}={count}" for status, count in summary.items())


def _section(title: str) -> None:
    print()
    _print_ts(f"== {title}")


async def run_demo(state: AppState, *, now: datetime | None = None) -> int:
    """Run every demo step in order. Returns a process exit code."""
    settings = state.settings
    project_id = int(getattr(settings, "demo_project_id", 101))
    critical_days = float(getattr(settings, "critical_days", 3.0))

    try:
        project = state.store.get_project(project_id)
        if project is None:
            # Same failure the simulated loader reports.
            project = await state.service.load_project_detail(project_id)

        _section("Add a new task")
        _print_ts(f"Tasks before:\n{format_tasks(project.tasks)}")
        state.store.add_task(
            project,
            Task(
                id=NEW_TASK_ID,
                description="Write documentation",
                status=TaskStatus.PENDING,
                due_date=datetime(2024, 11, 1, tzinfo=UTC),
            ),
        )
        _print_ts(f"Tasks after:\n{format_tasks(project.tasks)}")

        _section("Project summary")
        _print_ts(format_summary(generate_summary(project)))

        _section("Tasks sorted by due date")
        _print_ts(f"\n{format_tasks(sort_tasks_by_due_date(project))}")

        _section("Pending tasks")
        pending = filter_project_tasks(project, lambda t: t.status == TaskStatus.PENDING)
        _print_ts(f"\n{format_tasks(pending)}")

        ref_now = now or state.clock.now()
        _section("Remaining time")
        days = calculate_remaining_time(project, now=ref_now)
        _print_ts(f"Remaining time for open tasks: {days} days (as of {ref_now.isoformat()})")

        _section(f"Critical tasks (less than {critical_days:g} days left)")
        critical = get_critical_tasks(project, now=ref_now, threshold_days=critical_days)
        _print_ts(f"\n{format_tasks(critical)}")

        _section("Load project details")
        loaded = await state.service.load_project_detail(project_id)
        _print_ts(f"Loaded:\n{format_project(loaded)}")

        _section("Update task status")
        await complete_task(state, loaded, COMPLETED_TASK_ID)
        _print_ts(f"Task {COMPLETED_TASK_ID} marked {TaskStatus.COMPLETED.value}.")

        _section("Reload project")
        reloaded = await state.service.load_project_detail(project_id)
        _print_ts(f"Updated:\n{format_project(reloaded)}")
        _print_ts(format_summary(generate_summary(reloaded)))

    except TrackerError as e:
        logger.error("Demo aborted: %s", e)
        _print_ts(f"Error: {e}")
        return 1
    except Exception:
        logger.exception("Demo crashed.")
        _print_ts("Error: unexpected failure (see log for details).")
        return 1

    return 0
