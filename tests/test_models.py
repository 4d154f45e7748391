# tests/test_models.py

from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone

import pytest

from project_pulse.tracker.errors import InvalidStatusError, TrackerError
from project_pulse.tracker.models import Project, Task, TaskStatus


@pytest.mark.parametrize(
    "raw, expected",
    [
        (TaskStatus.PENDING, TaskStatus.PENDING),
        ("Completed", TaskStatus.COMPLETED),
        ("completed", TaskStatus.COMPLETED),
        ("InProgress", TaskStatus.IN_PROGRESS),
        ("in_progress", TaskStatus.IN_PROGRESS),
        ("in-progress", TaskStatus.IN_PROGRESS),
        (" In Progress ", TaskStatus.IN_PROGRESS),
        ("Pendiente", TaskStatus.PENDING),
        ("En progreso", TaskStatus.IN_PROGRESS),
        ("Completada", TaskStatus.COMPLETED),
        ("completada", TaskStatus.COMPLETED),
    ],
)
def test_parse_accepts_values_and_names(raw, expected) -> None:
    assert TaskStatus.parse(raw) is expected


@pytest.mark.parametrize("raw", ["done", "", "   ", None, 2])
def test_parse_rejects_unknown_values(raw) -> None:
    with pytest.raises(InvalidStatusError) as exc:
        TaskStatus.parse(raw)
    assert isinstance(exc.value, TrackerError)
    assert isinstance(exc.value, ValueError)


def test_find_task_returns_first_match(project) -> None:
    assert project.find_task(2).description == "Design database schema"
    assert project.find_task(999) is None


def test_task_coerces_string_status_and_naive_due_date() -> None:
    task = Task(id=9, description="plain input", status="Pendiente", due_date=datetime(2024, 12, 1))

    assert task.status is TaskStatus.PENDING
    assert task.due_date == datetime(2024, 12, 1, tzinfo=UTC)


def test_task_keeps_aware_due_date() -> None:
    due = datetime(2024, 12, 1, 9, 30, tzinfo=timezone(timedelta(hours=2)))
    task = Task(id=9, description="aware", status=TaskStatus.PENDING, due_date=due)
    assert task.due_date is due


def test_task_rejects_unknown_status() -> None:
    with pytest.raises(InvalidStatusError):
        Task(id=9, description="bad", status="Finished", due_date=datetime(2024, 12, 1, tzinfo=UTC))


def test_project_start_date_is_made_aware() -> None:
    project = Project(id=5, name="Naive", start_date=datetime(2024, 11, 1))
    assert project.start_date.tzinfo is UTC
