# src/project_pulse/events/notifier.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)

TASK_COMPLETED = "task_completed"

EventHandler = Callable[..., Any]


class TaskNotifier:
    """
    Named publish/subscribe channels.

    emit() is synchronous fire-and-forget:
    - handlers run in registration order
    - handlers are plain callables; coroutine functions are refused by on()
    - a failing handler is logged and skipped, never raised to the emitter
    """

    def __init__(self) -> None:
        self._handlers: dict[str, list[EventHandler]] = {}

    def on(self, event: str, handler: EventHandler) -> None:
        if inspect.iscoroutinefunction(handler):
            raise TypeError(f"async handler not supported for event {event}: {handler!r}")
        self._handlers.setdefault(event, []).append(handler)

    def off(self, event: str, handler: EventHandler) -> bool:
        handlers = self._handlers.get(event)
        if not handlers or handler not in handlers:
            return False
        handlers.remove(handler)
        return True

    def listener_count(self, event: str) -> int:
        return len(self._handlers.get(event, ()))

    def emit(self, event: str, *args: Any) -> int:
        # Snapshot: handlers may (un)subscribe while we iterate.
        handlers = list(self._handlers.get(event, ()))
        if not handlers:
            logger.debug("Event %s emitted with no listeners", event)
            return 0

        for handler in handlers:
            try:
                result = handler(*args)
                if inspect.iscoroutine(result):
                    # emit() never awaits; close it so it is not left pending.
                    result.close()
                    logger.warning("Listener %r returned a coroutine for event %s; discarded", handler, event)
            except Exception:
                logger.exception("Listener %r failed for event %s", handler, event)
        return len(handlers)


def log_task_completed(task_id: int) -> None:
    logger.info("Notification: task with ID %s has been completed!", task_id)
