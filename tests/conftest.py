# tests/conftest.py

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path
from types import SimpleNamespace

import pytest

from project_pulse.cli.bootstrap import create_initial_state
from project_pulse.core.state import AppState
from project_pulse.tracker.models import Project
from project_pulse.tracker.store import ProjectStore

from .fakes import FakeClock, FakeSleeper


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the demo flow.

    We intentionally use a SimpleNamespace rather than reading the environment,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="pulse-test",
        log_level="DEBUG",
        data_dir=tmp_path,
        load_delay_seconds=2.0,
        update_delay_seconds=1.0,
        critical_days=3.0,
        unique_task_ids=False,
        demo_project_id=101,
    )


@pytest.fixture()
def fixed_now() -> datetime:
    return datetime(2024, 11, 18, 12, 0, tzinfo=UTC)


@pytest.fixture()
def sleeper() -> FakeSleeper:
    return FakeSleeper()


@pytest.fixture()
def store() -> ProjectStore:
    return ProjectStore.seeded()


@pytest.fixture()
def project(store: ProjectStore) -> Project:
    p = store.get_project(101)
    assert p is not None
    return p


@pytest.fixture()
def state(settings: SimpleNamespace, sleeper: FakeSleeper, fixed_now: datetime) -> AppState:
    """AppState wired with a non-waiting sleeper and a frozen clock."""
    return create_initial_state(settings=settings, sleeper=sleeper, clock=FakeClock(fixed_now))
