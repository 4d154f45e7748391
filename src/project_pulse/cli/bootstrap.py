# src/project_pulse/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- builds the seeded in-memory store,
- wires the service (real or injected sleeper/clock) and the notifier into AppState,
- registers the startup "task completed" subscriber.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.clock import AsyncioSleeper, SystemClock
from ..core.ports import Clock, Sleeper
from ..core.state import AppState
from ..events.notifier import TASK_COMPLETED, TaskNotifier, log_task_completed
from ..tracker.service import TrackerService
from ..tracker.store import ProjectStore

logger = logging.getLogger(__name__)


def create_initial_state(
    *,
    settings=None,
    sleeper: Sleeper | None = None,
    clock: Clock | None = None,
) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings, sleeper and clock injectable makes the app easier to test
    and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    store = ProjectStore.seeded(unique_task_ids=bool(getattr(settings, "unique_task_ids", False)))

    service = TrackerService(
        store,
        sleeper=sleeper or AsyncioSleeper(),
        load_delay_seconds=getattr(settings, "load_delay_seconds", 2.0),
        update_delay_seconds=getattr(settings, "update_delay_seconds", 1.0),
    )

    notifier = TaskNotifier()
    notifier.on(TASK_COMPLETED, log_task_completed)

    logger.debug(
        "State created projects=%s listeners(%s)=%s",
        store.count_projects(),
        TASK_COMPLETED,
        notifier.listener_count(TASK_COMPLETED),
    )

    return AppState(
        settings=settings,
        store=store,
        service=service,
        notifier=notifier,
        clock=clock or SystemClock(),
    )
