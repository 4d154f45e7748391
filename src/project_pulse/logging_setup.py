# src/project_pulse/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FILE_NAME = "pulse.log"
LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

APP_LOGGER = "project_pulse"


class _TrackerOnlyFilter(logging.Filter):
    """Console sees tracker records at any level; everything else only at ERROR+."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name == APP_LOGGER or record.name.startswith(APP_LOGGER + "."):
            return True
        # py.warnings and third-party libraries alike
        return record.levelno >= logging.ERROR


def _reset_root(root: logging.Logger) -> None:
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()


def setup_logging(
    *,
    log_dir: str | Path = ".local/pulse",
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> Path:
    """
    Send tracker logs to stderr and to <log_dir>/pulse.log.

    stdout is left to the demo report. Step-by-step debug detail (delays,
    store inserts, status transitions) only lands in the file at the default
    levels. Calling it again replaces the previous handlers.
    Returns the log file path.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME

    root = logging.getLogger()
    root.setLevel(min(console_level, file_level))
    _reset_root(root)

    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(fmt)
    console.addFilter(_TrackerOnlyFilter())
    root.addHandler(console)

    to_file = logging.FileHandler(str(log_file), encoding="utf-8")
    to_file.setLevel(file_level)
    to_file.setFormatter(fmt)
    root.addHandler(to_file)

    logging.captureWarnings(True)
    return log_file
