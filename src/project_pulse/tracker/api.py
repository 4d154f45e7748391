# src/project_pulse/tracker/api.py

from __future__ import annotations

import logging

from ..core.state import AppState
from ..events.notifier import TASK_COMPLETED
from .models import Project, TaskStatus

logger = logging.getLogger(__name__)


async def complete_task(state: AppState, project: Project, task_id: int) -> int:
    """
    Convenience helper: mark a task Completed, then announce it.

    update_task_status() never notifies by itself; this pairs the two so a
    caller cannot forget the emit. Failures propagate before anything is emitted.
    Returns the number of listeners that were called.
    """
    await state.service.update_task_status(project, task_id, TaskStatus.COMPLETED)
    delivered = state.notifier.emit(TASK_COMPLETED, task_id)
    logger.debug("Task %s completion delivered to %s listener(s)", task_id, delivered)
    return delivered
