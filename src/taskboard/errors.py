# src/taskboard/errors.py

"""
Error taxonomy.

All errors are local and recoverable: a failed operation leaves the store
unchanged and the caller (UI side) decides how to tell the user.
"""

from __future__ import annotations


class TaskboardError(Exception):
    """Base class for every error raised by taskboard."""


class ValidationError(TaskboardError, ValueError):
    """A required field is empty or a field has an unrecognised value."""


class NotFoundError(TaskboardError, LookupError):
    """An operation referenced a task id that is not in the store."""

    def __init__(self, task_id: str) -> None:
        super().__init__(f"task not found: {task_id}")
        self.task_id = task_id


class PersistenceError(TaskboardError):
    """The persisted blob is malformed or the backing store could not be written."""
