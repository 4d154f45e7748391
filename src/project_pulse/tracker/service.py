# src/project_pulse/tracker/service.py

from __future__ import annotations

"""
Simulated remote access to the project store.

Each call waits a fixed artificial delay through the injected Sleeper and
then reads or mutates the in-memory store:
- load_project_detail: delay, then return the live project
- update_task_status: validate, delay, then mutate the task in place

No cancellation, retry or timeout beyond the delay itself.
Notifications are NOT emitted here; see tracker.api.complete_task.
"""

import logging

from ..core.ports import ProjectRepo, Sleeper
from .errors import ProjectNotFoundError, TaskNotFoundError
from .models import Project, TaskStatus

logger = logging.getLogger(__name__)

DEFAULT_LOAD_DELAY_SECONDS = 2.0
DEFAULT_UPDATE_DELAY_SECONDS = 1.0


class TrackerService:
    def __init__(
        self,
        repo: ProjectRepo,
        *,
        sleeper: Sleeper,
        load_delay_seconds: float = DEFAULT_LOAD_DELAY_SECONDS,
        update_delay_seconds: float = DEFAULT_UPDATE_DELAY_SECONDS,
    ) -> None:
        self._repo = repo
        self._sleeper = sleeper
        self.load_delay_seconds = max(0.0, float(load_delay_seconds))
        self.update_delay_seconds = max(0.0, float(update_delay_seconds))

    async def load_project_detail(self, project_id: int) -> Project:
        logger.debug("Loading project id=%s (delay=%.2fs)", project_id, self.load_delay_seconds)
        await self._sleeper.sleep(self.load_delay_seconds)

        project = self._repo.get_project(project_id)
        if project is None:
            logger.warning("Project id=%s not found", project_id)
            raise ProjectNotFoundError(project_id)

        logger.info("Project loaded id=%s name=%s tasks=%s", project.id, project.name, len(project.tasks))
        return project

    async def update_task_status(self, project: Project, task_id: int, new_status: TaskStatus | str) -> None:
        # Reject bad input before paying for the delay.
        status = TaskStatus.parse(new_status)

        logger.debug(
            "Updating task project_id=%s task_id=%s -> %s (delay=%.2fs)",
            project.id,
            task_id,
            status,
            self.update_delay_seconds,
        )
        await self._sleeper.sleep(self.update_delay_seconds)

        task = project.find_task(task_id)
        if task is None:
            logger.warning("Task id=%s not found in project id=%s", task_id, project.id)
            raise TaskNotFoundError(task_id)

        previous = task.status
        task.status = status
        logger.info("Task %s: %s -> %s", task_id, previous, status)
