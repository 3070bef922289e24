# src/taskboard/bootstrap.py

"""
Composition root.

- loads settings once (unless injected),
- ensures the local (gitignored) data directory exists,
- wires the JSON-file key-value store into a TaskStore,
- returns an AppState for the UI collaborator to hold on to.
"""

from __future__ import annotations

import logging

from .config import get_settings
from .core.ports import KeyValueStore
from .core.state import AppState
from .logging_setup import setup_logging
from .storage.kv import JsonFileKeyValueStore
from .tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.tasks_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None, kv: KeyValueStore | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    If settings is None, falls back to get_settings().
    If kv is None, tasks are kept in settings.tasks_path.
    """
    if settings is None:
        settings = get_settings()

    if kv is None:
        _ensure_local_dirs(settings)
        kv = JsonFileKeyValueStore(settings.tasks_path)

    storage_key = getattr(settings, "storage_key", None) or "tasks"
    state = AppState(
        settings=settings,
        task_store=TaskStore(kv, storage_key=storage_key),
    )
    logger.info("%s state ready (%d tasks)", getattr(settings, "app_name", "taskboard"), len(state.task_store))
    return state


def start(*, settings=None) -> AppState:
    """Configure logging from settings, then build the state. Call once per process."""
    if settings is None:
        settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)
    if not isinstance(console_level, int):
        console_level = logging.INFO

    setup_logging(
        log_dir=getattr(settings, "data_dir", ".local/taskboard"),
        console_level=console_level,
        log_to_file=bool(getattr(settings, "log_to_file", True)),
    )
    return create_initial_state(settings=settings)
