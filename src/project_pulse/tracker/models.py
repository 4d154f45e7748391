# src/project_pulse/tracker/models.py

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import StrEnum
from typing import Any

from .errors import InvalidStatusError


class TaskStatus(StrEnum):
    """
    Task lifecycle status.

    Notes:
    - values double as display labels and summary keys
    - parse() is the boundary check for anything coming from outside
    """

    PENDING = "Pending"
    IN_PROGRESS = "InProgress"
    COMPLETED = "Completed"

    @classmethod
    def _aliases(cls) -> dict[str, TaskStatus]:
        # Spanish labels used by the first version of the tracker.
        return {
            "pendiente": cls.PENDING,
            "enprogreso": cls.IN_PROGRESS,
            "completada": cls.COMPLETED,
        }

    @classmethod
    def parse(cls, raw: Any) -> TaskStatus:
        if isinstance(raw, cls):
            return raw
        if not isinstance(raw, str):
            raise InvalidStatusError(raw)

        norm = raw.strip().lower().replace("-", "").replace("_", "").replace(" ", "")
        if not norm:
            raise InvalidStatusError(raw)

        for member in cls:
            if norm in (member.value.lower(), member.name.lower().replace("_", "")):
                return member

        alias = cls._aliases().get(norm)
        if alias is not None:
            return alias
        raise InvalidStatusError(raw)


def as_utc(value: datetime) -> datetime:
    """Naive datetimes are taken to be UTC; aware ones are kept as they are."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


@dataclass(slots=True)
class Task:
    id: int
    description: str
    status: TaskStatus
    due_date: datetime

    def __post_init__(self) -> None:
        self.status = TaskStatus.parse(self.status)
        self.due_date = as_utc(self.due_date)

    @property
    def is_completed(self) -> bool:
        return self.status == TaskStatus.COMPLETED


@dataclass(slots=True)
class Project:
    id: int
    name: str
    start_date: datetime
    tasks: list[Task] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.start_date = as_utc(self.start_date)

    def find_task(self, task_id: int) -> Task | None:
        """First task with the given id (ids are not guaranteed unique)."""
        for task in self.tasks:
            if task.id == task_id:
                return task
        return None
