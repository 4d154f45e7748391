# src/project_pulse/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the tracker services.

Services depend on Protocols instead of concrete implementations.
This keeps the store and the time source swappable and makes testing easier.
"""

from datetime import datetime
from typing import Any, Awaitable, Protocol


class Clock(Protocol):
    """Source of the reference time for time-dependent queries."""
    def now(self) -> datetime: ...


class Sleeper(Protocol):
    """
    How simulated I/O waits.

    Production code sleeps on the event loop; tests record the requested
    delay and return immediately.
    """

    def sleep(self, seconds: float) -> Awaitable[None]: ...


class ProjectRepo(Protocol):
    # Lookup API (simulated I/O)
    def get_project(self, project_id: int) -> Any | None: ...
    def list_projects(self) -> list[Any]: ...
    def count_projects(self) -> int: ...

    # Mutation API
    def add_project(self, project: Any) -> None: ...
    def add_task(self, project: Any, task: Any) -> None: ...
