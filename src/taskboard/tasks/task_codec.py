# src/taskboard/tasks/task_codec.py

"""
Blob format for the whole task collection.

The blob is a JSON array of objects using the camelCase keys the browser
version kept in localStorage:

    [{"id": "...", "title": "...", "description": "...", "priority": "High",
      "dueDate": "2024-05-01T09:30:00+00:00" | null, "status": "Pending",
      "createdAt": "2024-04-30T18:02:11.120000+00:00"}, ...]

Decoding is strict: any malformed record makes the whole blob invalid.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from datetime import datetime
from typing import Any

from ..errors import PersistenceError, ValidationError
from .task_models import Priority, Task, TaskStatus, as_utc


def _dt_to_str(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


def _str_to_dt(raw: Any, *, field: str) -> datetime:
    if raw is None or raw == "":
        raise PersistenceError(f"missing {field}")
    if not isinstance(raw, str):
        raise PersistenceError(f"{field} must be an ISO string, got {type(raw).__name__}")
    try:
        dt = datetime.fromisoformat(raw)
    except ValueError as e:
        raise PersistenceError(f"bad {field}: {raw!r}") from e
    return as_utc(dt)


def task_to_dict(task: Task) -> dict[str, Any]:
    return {
        "id": task.id,
        "title": task.title,
        "description": task.description,
        "priority": task.priority.value,
        "dueDate": _dt_to_str(task.due_date),
        "status": task.status.value,
        "createdAt": _dt_to_str(task.created_at),
    }


def task_from_dict(raw: Any) -> Task:
    if not isinstance(raw, dict):
        raise PersistenceError(f"task record must be an object, got {type(raw).__name__}")

    task_id = raw.get("id")
    if isinstance(task_id, int) and not isinstance(task_id, bool):
        # Timestamp ids written as numbers.
        task_id = str(task_id)
    if not isinstance(task_id, str) or not task_id:
        raise PersistenceError("task record has no id")

    title = raw.get("title")
    if not isinstance(title, str) or not title.strip():
        raise PersistenceError(f"task {task_id} has no title")

    description = raw.get("description") or ""
    if not isinstance(description, str):
        raise PersistenceError(f"task {task_id} has a non-text description")

    try:
        priority = Priority.parse(raw.get("priority"))
        status = TaskStatus.parse(raw.get("status") or TaskStatus.PENDING)
    except ValidationError as e:
        raise PersistenceError(f"task {task_id}: {e}") from e

    due_raw = raw.get("dueDate")

    return Task(
        id=task_id,
        title=title.strip(),
        description=description.strip(),
        priority=priority,
        due_date=_str_to_dt(due_raw, field="dueDate") if due_raw not in (None, "") else None,
        status=status,
        created_at=_str_to_dt(raw.get("createdAt"), field="createdAt"),
    )


def encode_tasks(tasks: Iterable[Task]) -> str:
    return json.dumps([task_to_dict(t) for t in tasks], ensure_ascii=False)


def decode_tasks(blob: str) -> list[Task]:
    """Parse a blob produced by encode_tasks(). Raises PersistenceError on any defect."""
    try:
        data = json.loads(blob)
    except (TypeError, ValueError) as e:
        raise PersistenceError(f"blob is not valid JSON: {e}") from e

    if not isinstance(data, list):
        raise PersistenceError(f"blob must be a JSON array, got {type(data).__name__}")

    tasks = [task_from_dict(item) for item in data]

    seen: set[str] = set()
    for t in tasks:
        if t.id in seen:
            raise PersistenceError(f"duplicate task id: {t.id}")
        seen.add(t.id)
    return tasks
