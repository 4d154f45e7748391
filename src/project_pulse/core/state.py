# src/project_pulse/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..events.notifier import TaskNotifier
from ..tracker.service import TrackerService
from ..tracker.store import ProjectStore
from .ports import Clock


@dataclass
class AppState:
    # Store Settings on the state for easy access in other modules later.
    settings: object

    store: ProjectStore
    service: TrackerService
    notifier: TaskNotifier
    clock: Clock
