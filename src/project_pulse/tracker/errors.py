# src/project_pulse/tracker/errors.py

from __future__ import annotations

from typing import Any


class TrackerError(Exception):
    """Base class for tracker failures surfaced to the caller."""


class ProjectNotFoundError(TrackerError, LookupError):
    def __init__(self, project_id: int) -> None:
        super().__init__(f"Project not found: id={project_id}")
        self.project_id = project_id


class TaskNotFoundError(TrackerError, LookupError):
    def __init__(self, task_id: int) -> None:
        super().__init__(f"Task not found: id={task_id}")
        self.task_id = task_id


class InvalidStatusError(TrackerError, ValueError):
    def __init__(self, value: Any) -> None:
        super().__init__(f"Invalid task status: {value!r}")
        self.value = value


class DuplicateTaskIdError(TrackerError, ValueError):
    def __init__(self, task_id: int) -> None:
        super().__init__(f"Task id already exists in project: id={task_id}")
        self.task_id = task_id
