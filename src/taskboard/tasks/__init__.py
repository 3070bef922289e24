# src/taskboard/tasks/__init__.py

from .task_models import Priority, Task, TaskStatus
from .task_query import SortKey, TaskFilter, TaskQuery, apply_query
from .task_stats import TaskStats, compute_stats
from .task_store import TaskStore

__all__ = [
    "Priority",
    "SortKey",
    "Task",
    "TaskFilter",
    "TaskQuery",
    "TaskStats",
    "TaskStatus",
    "TaskStore",
    "apply_query",
    "compute_stats",
]
