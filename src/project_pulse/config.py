# src/project_pulse/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Defaults reproduce the classic demo (2s load, 1s update, 3-day critical window).
- Settings are injectable: create_initial_state(settings=...) never re-reads env.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

ENV_PREFIX = "PULSE"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    data_dir: Path

    # ---- Simulated I/O ----
    load_delay_seconds: float
    update_delay_seconds: float

    # ---- Tracker rules ----
    critical_days: float
    unique_task_ids: bool

    # ---- Demo ----
    demo_project_id: int

    @staticmethod
    def from_env(*, dotenv: bool = True) -> "Settings":
        if dotenv:
            load_dotenv(find_dotenv(usecwd=True), override=False)

        return Settings(
            app_name=_env(_k("APP_NAME"), "project-pulse"),
            log_level=_env(_k("LOG_LEVEL"), "INFO"),
            data_dir=_env_path(_k("DATA_DIR"), Path(".local/pulse")),
            load_delay_seconds=max(0.0, _env_float(_k("LOAD_DELAY_SECONDS"), 2.0)),
            update_delay_seconds=max(0.0, _env_float(_k("UPDATE_DELAY_SECONDS"), 1.0)),
            critical_days=_env_float(_k("CRITICAL_DAYS"), 3.0),
            unique_task_ids=_env_bool(_k("UNIQUE_TASK_IDS"), False),
            demo_project_id=_env_int(_k("DEMO_PROJECT_ID"), 101),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()
