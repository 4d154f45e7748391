# src/project_pulse/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs the demo flow on a fresh
event loop. Configuration comes from PULSE_* environment variables only.
"""

from __future__ import annotations

import asyncio
import logging

from ..cli.bootstrap import create_initial_state
from ..cli.demo import run_demo
from ..config import get_settings
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> int:
    settings = get_settings()

    # choose console log level from settings.log_level
    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)

    log_file = setup_logging(log_dir=settings.data_dir, console_level=console_level)
    logger.info("Starting %s (log file %s)...", settings.app_name, log_file)

    state = create_initial_state(settings=settings)

    try:
        code = asyncio.run(run_demo(state))
    except KeyboardInterrupt:
        logger.info("Interrupted.")
        code = 130

    logger.info("Bye.")
    return code


if __name__ == "__main__":
    raise SystemExit(main())
