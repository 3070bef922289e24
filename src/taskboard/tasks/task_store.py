# src/taskboard/tasks/task_store.py

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Final

from ..core.ports import Clock, IdGenerator, KeyValueStore
from ..errors import NotFoundError, PersistenceError, ValidationError
from .ids import UuidGenerator
from .task_codec import decode_tasks, encode_tasks
from .task_models import Priority, Task, TaskStatus, as_utc

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "tasks"


class _Unset(Enum):
    UNSET = "UNSET"


UNSET: Final = _Unset.UNSET


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _clean_title(title: object) -> str:
    if not isinstance(title, str):
        raise ValidationError(f"title must be text, got {type(title).__name__}")
    text = title.strip()
    if not text:
        raise ValidationError("title is required")
    return text


def _clean_due_date(due_date: object) -> datetime | None:
    if due_date is None:
        return None
    if not isinstance(due_date, datetime):
        raise ValidationError(f"due_date must be a datetime or None, got {type(due_date).__name__}")
    return as_utc(due_date)


class TaskStore:
    """
    Owner of the task collection.

    - order is reverse-chronological insertion (create() prepends)
    - Task objects are frozen; mutations swap in a new instance
    - every successful mutation writes the whole collection under one key
    - a failed operation changes nothing and writes nothing

    Not thread-safe: a single event-handling thread is assumed.
    """

    def __init__(
        self,
        kv: KeyValueStore,
        *,
        storage_key: str = DEFAULT_STORAGE_KEY,
        id_generator: IdGenerator | None = None,
        clock: Clock | None = None,
    ) -> None:
        self._kv = kv
        self._key = storage_key
        self._ids = id_generator or UuidGenerator()
        self._clock = clock or _utc_now
        self._tasks: list[Task] = []
        self.load()
        logger.info("TaskStore ready key=%s total=%s", self._key, len(self._tasks))

    # ---- persistence ----

    def load(self) -> None:
        """(Re)load the collection. Absent or malformed data yields an empty collection."""
        raw = self._kv.get(self._key)
        if raw is None:
            self._tasks = []
            return
        try:
            self._tasks = decode_tasks(raw)
        except PersistenceError as e:
            logger.warning("Stored tasks under key=%s are malformed, starting empty: %s", self._key, e)
            self._tasks = []

    def _commit(self, tasks: list[Task]) -> None:
        # Write first: if the backing store fails, in-memory state stays as it was.
        self._kv.set(self._key, encode_tasks(tasks))
        self._tasks = tasks

    def _index_of(self, task_id: str) -> int:
        for i, t in enumerate(self._tasks):
            if t.id == task_id:
                return i
        raise NotFoundError(task_id)

    def _with_task_at(self, idx: int, task: Task) -> list[Task]:
        tasks = list(self._tasks)
        tasks[idx] = task
        return tasks

    def _new_id(self) -> str:
        existing = {t.id for t in self._tasks}
        task_id = self._ids.new_id()
        while task_id in existing:
            task_id = self._ids.new_id()
        return task_id

    # ---- public API ----

    def __len__(self) -> int:
        return len(self._tasks)

    def __contains__(self, task_id: object) -> bool:
        return any(t.id == task_id for t in self._tasks)

    def list(self) -> list[Task]:
        return list(self._tasks)

    def get(self, task_id: str) -> Task:
        return self._tasks[self._index_of(task_id)]

    def create(
        self,
        *,
        title: str,
        description: str | None = "",
        priority: Priority | str | None = None,
        due_date: datetime | None = None,
    ) -> Task:
        task = Task(
            id=self._new_id(),
            title=_clean_title(title),
            description=(description or "").strip(),
            priority=Priority.parse(priority),
            due_date=_clean_due_date(due_date),
            status=TaskStatus.PENDING,
            created_at=as_utc(self._clock()),
        )
        self._commit([task, *self._tasks])
        logger.debug("Task created id=%s priority=%s due=%s", task.id, task.priority, task.due_date)
        return task

    def update(
        self,
        task_id: str,
        *,
        title: str | _Unset = UNSET,
        description: str | None | _Unset = UNSET,
        priority: Priority | str | None | _Unset = UNSET,
        due_date: datetime | None | _Unset = UNSET,
    ) -> Task:
        """
        Merge the provided fields into the task.

        Fields left as UNSET are untouched; due_date=None clears the due date.
        id, created_at and status cannot be changed here.
        """
        idx = self._index_of(task_id)

        changes: dict[str, Any] = {}
        if title is not UNSET:
            changes["title"] = _clean_title(title)
        if description is not UNSET:
            changes["description"] = (description or "").strip()
        if priority is not UNSET:
            changes["priority"] = Priority.parse(priority)
        if due_date is not UNSET:
            changes["due_date"] = _clean_due_date(due_date)

        task = replace(self._tasks[idx], **changes)
        self._commit(self._with_task_at(idx, task))
        logger.debug("Task updated id=%s fields=%s", task_id, sorted(changes))
        return task

    def toggle_status(self, task_id: str) -> Task:
        idx = self._index_of(task_id)
        task = replace(self._tasks[idx], status=self._tasks[idx].status.toggled())
        self._commit(self._with_task_at(idx, task))
        logger.debug("Task status id=%s -> %s", task_id, task.status)
        return task

    def delete(self, task_id: str) -> None:
        """Remove the task. Deleting an unknown (or already deleted) id raises NotFoundError."""
        idx = self._index_of(task_id)
        self._commit(self._tasks[:idx] + self._tasks[idx + 1 :])
        logger.debug("Task deleted id=%s", task_id)
