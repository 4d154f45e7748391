# tests/test_notifier.py

from __future__ import annotations

import inspect
import logging

import pytest

from project_pulse.events.notifier import TASK_COMPLETED, TaskNotifier, log_task_completed


def test_emit_calls_handlers_in_order() -> None:
    notifier = TaskNotifier()
    seen: list[tuple[str, int]] = []

    notifier.on(TASK_COMPLETED, lambda tid: seen.append(("a", tid)))
    notifier.on(TASK_COMPLETED, lambda tid: seen.append(("b", tid)))

    assert notifier.emit(TASK_COMPLETED, 2) == 2
    assert seen == [("a", 2), ("b", 2)]


def test_emit_without_listeners_is_noop() -> None:
    notifier = TaskNotifier()
    assert notifier.emit("nobody_listens", 1) == 0


def test_failing_handler_does_not_reach_caller(caplog: pytest.LogCaptureFixture) -> None:
    notifier = TaskNotifier()
    seen: list[int] = []

    def boom(task_id: int) -> None:
        raise RuntimeError("listener failure")

    notifier.on(TASK_COMPLETED, boom)
    notifier.on(TASK_COMPLETED, seen.append)

    with caplog.at_level(logging.ERROR, logger="project_pulse.events.notifier"):
        assert notifier.emit(TASK_COMPLETED, 7) == 2

    assert seen == [7]
    assert any("failed for event task_completed" in r.getMessage() for r in caplog.records)


def test_off_removes_handler() -> None:
    notifier = TaskNotifier()
    seen: list[int] = []
    notifier.on(TASK_COMPLETED, seen.append)
    assert notifier.listener_count(TASK_COMPLETED) == 1

    assert notifier.off(TASK_COMPLETED, seen.append) is True
    assert notifier.off(TASK_COMPLETED, seen.append) is False
    assert notifier.listener_count(TASK_COMPLETED) == 0

    notifier.emit(TASK_COMPLETED, 1)
    assert seen == []


def test_log_task_completed_message(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="project_pulse.events.notifier"):
        log_task_completed(2)

    assert "Notification: task with ID 2 has been completed!" in caplog.text


def test_async_handler_is_refused() -> None:
    notifier = TaskNotifier()

    async def handler(task_id: int) -> None:
        return None

    with pytest.raises(TypeError):
        notifier.on(TASK_COMPLETED, handler)
    assert notifier.listener_count(TASK_COMPLETED) == 0


def test_coroutine_returned_by_handler_is_closed(caplog: pytest.LogCaptureFixture) -> None:
    notifier = TaskNotifier()
    created = []

    async def later(task_id: int) -> None:
        return None

    def sync_wrapper(task_id: int):
        coro = later(task_id)
        created.append(coro)
        return coro

    notifier.on(TASK_COMPLETED, sync_wrapper)

    with caplog.at_level(logging.WARNING, logger="project_pulse.events.notifier"):
        assert notifier.emit(TASK_COMPLETED, 3) == 1

    assert inspect.getcoroutinestate(created[0]) == inspect.CORO_CLOSED
    assert "returned a coroutine" in caplog.text
