# src/taskboard/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path


class _OwnLogsFilter(logging.Filter):
    """Console shows taskboard records at the handler level; everything else only from ERROR up."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.partition(".")[0] == "taskboard":
            return True
        return record.levelno >= logging.ERROR


_FORMAT = logging.Formatter(
    fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)


def _with_format(handler: logging.Handler, level: int) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(_FORMAT)
    return handler


def setup_logging(
    *,
    log_dir: str | Path = ".local/taskboard",
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    log_to_file: bool = True,
) -> Path | None:
    """
    Replace the root handlers with a stderr console handler (own logs only,
    plus third-party errors) and, if log_to_file, <log_dir>/taskboard.log.

    Returns the log file path, or None when file logging is off.
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for h in list(root.handlers):
        root.removeHandler(h)

    console = _with_format(logging.StreamHandler(sys.stderr), console_level)
    console.addFilter(_OwnLogsFilter())
    root.addHandler(console)

    log_file: Path | None = None
    if log_to_file:
        log_file = Path(log_dir) / "taskboard.log"
        log_file.parent.mkdir(parents=True, exist_ok=True)
        root.addHandler(_with_format(logging.FileHandler(log_file, encoding="utf-8"), file_level))

    # warnings.warn(...) -> 'py.warnings' logger
    logging.captureWarnings(True)
    return log_file
