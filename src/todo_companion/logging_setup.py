# src/todo_companion/logging_setup.py

"""
Logging for the todo console.

The console stays quiet enough to type commands into: our own records pass,
the HTTP stack and captured warnings only show up when something broke.
Everything, including the per-request httpx lines, still lands in todo.log.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FILE_NAME = "todo.log"

_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"

# Console floor per logger prefix; first match wins.
_CONSOLE_FLOORS: tuple[tuple[str, int], ...] = (
    ("todo_companion.", logging.NOTSET),
    ("httpx", logging.ERROR),
    ("httpcore", logging.ERROR),
    ("py.warnings", logging.ERROR),
)


class _ConsoleNoiseFilter(logging.Filter):
    """Drop records below the console floor of their logger (ERROR if unlisted)."""

    def filter(self, record: logging.LogRecord) -> bool:
        for prefix, floor in _CONSOLE_FLOORS:
            if record.name.startswith(prefix):
                return record.levelno >= floor
        return record.levelno >= logging.ERROR


def _reset_root(root: logging.Logger) -> None:
    # A second setup call (tests, re-entry from main) must not double every line.
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()


def setup_logging(
    *,
    log_dir: str | Path = ".local/todo",
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> Path:
    """
    Route logs to stderr (filtered) and to <log_dir>/todo.log (unfiltered).

    Should run before the first fetch so the request log is not lost.
    Returns the log file path.
    """
    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)
    log_file = log_path / LOG_FILE_NAME

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    _reset_root(root)

    formatter = logging.Formatter(fmt=_FORMAT, datefmt=_DATEFMT)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(formatter)
    console.addFilter(_ConsoleNoiseFilter())
    root.addHandler(console)

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(file_level)
    file_handler.setFormatter(formatter)
    root.addHandler(file_handler)

    logging.captureWarnings(True)

    return log_file
