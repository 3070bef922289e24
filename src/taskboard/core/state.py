# src/taskboard/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_store import TaskStore


@dataclass
class AppState:
    """
    Everything the UI loop needs, passed explicitly instead of module globals.

    settings is typed loosely so tests can pass a SimpleNamespace.
    """

    settings: object
    task_store: TaskStore
