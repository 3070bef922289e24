# src/taskboard/tasks/task_stats.py

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .task_models import Task, TaskStatus


@dataclass(frozen=True, slots=True)
class TaskStats:
    total: int
    completed: int
    pending: int
    completion_percent: int


def compute_stats(tasks: Iterable[Task]) -> TaskStats:
    """Counters for the progress bar. Always computed over the whole collection, not a view."""
    total = 0
    completed = 0
    for t in tasks:
        total += 1
        if t.status is TaskStatus.COMPLETED:
            completed += 1

    # Integer percent, rounded half-up.
    percent = (completed * 200 + total) // (2 * total) if total else 0
    return TaskStats(
        total=total,
        completed=completed,
        pending=total - completed,
        completion_percent=percent,
    )
