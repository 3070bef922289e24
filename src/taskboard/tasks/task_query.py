# src/taskboard/tasks/task_query.py

"""
Derived, read-only views over a task collection.

apply_query() runs three steps in a fixed order:

1. search  - trimmed, case-insensitive substring of title OR description
2. filter  - by status or by exact priority
3. sort    - stable; ties keep their relative input order

The input is never mutated and a new list is returned on every call.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from .task_models import Priority, Task, TaskStatus


class TaskFilter(StrEnum):
    ALL = "All"
    COMPLETED = "Completed"
    PENDING = "Pending"
    PRIORITY_LOW = "Priority-Low"
    PRIORITY_MEDIUM = "Priority-Medium"
    PRIORITY_HIGH = "Priority-High"

    @classmethod
    def parse(cls, raw: str | TaskFilter | None) -> TaskFilter:
        """Unknown or empty values mean "no filtering"."""
        if not raw:
            return cls.ALL
        try:
            return cls(raw)
        except ValueError:
            return cls.ALL

    def matches(self, task: Task) -> bool:
        if self is TaskFilter.ALL:
            return True
        if self is TaskFilter.COMPLETED:
            return task.status is TaskStatus.COMPLETED
        if self is TaskFilter.PENDING:
            return task.status is TaskStatus.PENDING
        return task.priority is _FILTER_PRIORITY[self]


_FILTER_PRIORITY = {
    TaskFilter.PRIORITY_LOW: Priority.LOW,
    TaskFilter.PRIORITY_MEDIUM: Priority.MEDIUM,
    TaskFilter.PRIORITY_HIGH: Priority.HIGH,
}


class SortKey(StrEnum):
    DATE_DESC = "date-desc"
    DATE_ASC = "date-asc"
    PRIORITY_DESC = "priority-desc"
    PRIORITY_ASC = "priority-asc"
    STATUS_DESC = "status-desc"
    NONE = "none"

    @classmethod
    def parse(cls, raw: str | SortKey | None) -> SortKey:
        """Unknown or empty values keep the input order."""
        if not raw:
            return cls.NONE
        try:
            return cls(raw)
        except ValueError:
            return cls.NONE


# Pending first for status-desc.
_STATUS_RANK = {TaskStatus.PENDING: 1, TaskStatus.COMPLETED: 2}

# (key function, reverse). list.sort() stays stable with reverse=True,
# so equal keys keep input order in both directions.
_SORTS: dict[SortKey, tuple[Callable[[Task], Any], bool]] = {
    SortKey.DATE_DESC: (lambda t: t.created_at, True),
    SortKey.DATE_ASC: (lambda t: t.created_at, False),
    SortKey.PRIORITY_DESC: (lambda t: t.priority.weight, True),
    SortKey.PRIORITY_ASC: (lambda t: t.priority.weight, False),
    SortKey.STATUS_DESC: (lambda t: _STATUS_RANK[t.status], False),
}


@dataclass(frozen=True, slots=True)
class TaskQuery:
    search_text: str = ""
    filter: TaskFilter = TaskFilter.ALL
    sort_key: SortKey = SortKey.NONE

    @classmethod
    def from_controls(
        cls,
        *,
        search_text: str | None = "",
        filter: str | None = None,
        sort_key: str | None = None,
    ) -> TaskQuery:
        """Build a query from raw UI control values."""
        return cls(
            search_text=search_text or "",
            filter=TaskFilter.parse(filter),
            sort_key=SortKey.parse(sort_key),
        )


def search_tasks(tasks: Iterable[Task], search_text: str) -> list[Task]:
    needle = (search_text or "").strip().lower()
    if not needle:
        return list(tasks)
    return [t for t in tasks if needle in t.title.lower() or needle in t.description.lower()]


def filter_tasks(tasks: Iterable[Task], task_filter: TaskFilter) -> list[Task]:
    return [t for t in tasks if task_filter.matches(t)]


def sort_tasks(tasks: Iterable[Task], sort_key: SortKey) -> list[Task]:
    out = list(tasks)
    spec = _SORTS.get(sort_key)
    if spec is None:
        return out
    key, reverse = spec
    out.sort(key=key, reverse=reverse)
    return out


def apply_query(tasks: Iterable[Task], query: TaskQuery) -> list[Task]:
    view = search_tasks(tasks, query.search_text)
    view = filter_tasks(view, query.filter)
    return sort_tasks(view, query.sort_key)
