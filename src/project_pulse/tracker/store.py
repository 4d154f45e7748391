# src/project_pulse/tracker/store.py

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import UTC, datetime

from .errors import DuplicateTaskIdError
from .models import Project, Task, TaskStatus

logger = logging.getLogger(__name__)


def _utc_date(year: int, month: int, day: int) -> datetime:
    return datetime(year, month, day, tzinfo=UTC)


def build_seed_projects() -> list[Project]:
    """Fresh copy of the startup data (one project, three tasks)."""
    return [
        Project(
            id=101,
            name="ProjectPulse",
            start_date=_utc_date(2024, 11, 1),
            tasks=[
                Task(
                    id=1,
                    description="Set up repository",
                    status=TaskStatus.COMPLETED,
                    due_date=_utc_date(2024, 11, 5),
                ),
                Task(
                    id=2,
                    description="Design database schema",
                    status=TaskStatus.IN_PROGRESS,
                    due_date=_utc_date(2024, 11, 20),
                ),
                Task(
                    id=3,
                    description="Implement authentication",
                    status=TaskStatus.PENDING,
                    due_date=_utc_date(2024, 11, 25),
                ),
            ],
        )
    ]


def add_task(project: Project, task: Task, *, unique_ids: bool = False) -> None:
    """
    Append a task to the project (new task goes last).

    Duplicate ids are accepted unless unique_ids is set, in which case a
    collision raises DuplicateTaskIdError and the project is left untouched.
    """
    if unique_ids and project.find_task(task.id) is not None:
        raise DuplicateTaskIdError(task.id)

    project.tasks.append(task)
    logger.debug(
        "Task added project_id=%s task_id=%s status=%s due=%s",
        project.id,
        task.id,
        task.status,
        task.due_date.isoformat(),
    )


class ProjectStore:
    """
    In-memory project store.

    Lifetime equals the owning AppState; nothing is persisted.
    Callers get live Project objects, so mutations through them are visible
    to every later lookup.
    """

    def __init__(self, projects: Iterable[Project] | None = None, *, unique_task_ids: bool = False) -> None:
        self._projects: list[Project] = list(projects or [])
        self.unique_task_ids = unique_task_ids
        logger.info("ProjectStore ready projects=%s unique_task_ids=%s", len(self._projects), unique_task_ids)

    @classmethod
    def seeded(cls, *, unique_task_ids: bool = False) -> ProjectStore:
        return cls(build_seed_projects(), unique_task_ids=unique_task_ids)

    # ---- public API ----

    def count_projects(self) -> int:
        return len(self._projects)

    def list_projects(self) -> list[Project]:
        return list(self._projects)

    def get_project(self, project_id: int) -> Project | None:
        for project in self._projects:
            if project.id == project_id:
                return project
        return None

    def add_project(self, project: Project) -> None:
        if self.get_project(project.id) is not None:
            raise ValueError(f"project id already exists: {project.id}")
        self._projects.append(project)
        logger.debug("Project added id=%s name=%s", project.id, project.name)

    def add_task(self, project: Project, task: Task) -> None:
        add_task(project, task, unique_ids=self.unique_task_ids)
