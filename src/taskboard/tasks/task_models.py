# src/taskboard/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import StrEnum

from ..errors import ValidationError


def as_utc(value: datetime) -> datetime:
    """Naive datetimes are taken to be UTC; aware ones are kept as given."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class TaskStatus(StrEnum):
    """
    Task lifecycle status.

    Values match the stored strings ("Pending"/"Completed") so old blobs load unchanged.
    """

    PENDING = "Pending"
    COMPLETED = "Completed"

    def toggled(self) -> TaskStatus:
        return TaskStatus.PENDING if self is TaskStatus.COMPLETED else TaskStatus.COMPLETED

    @classmethod
    def parse(cls, raw: str | TaskStatus) -> TaskStatus:
        try:
            return cls(raw)
        except ValueError:
            raise ValidationError(f"unknown status: {raw!r}") from None


class Priority(StrEnum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"

    @property
    def weight(self) -> int:
        # High > Medium > Low
        return _PRIORITY_WEIGHT[self]

    @classmethod
    def parse(cls, raw: str | Priority | None) -> Priority:
        """None or blank -> MEDIUM; otherwise the exact value (case-insensitive)."""
        if raw is None:
            return cls.MEDIUM
        if isinstance(raw, Priority):
            return raw
        text = str(raw).strip()
        if not text:
            return cls.MEDIUM
        for member in cls:
            if member.value.lower() == text.lower():
                return member
        raise ValidationError(f"unknown priority: {raw!r}")


_PRIORITY_WEIGHT = {Priority.LOW: 1, Priority.MEDIUM: 2, Priority.HIGH: 3}


@dataclass(frozen=True, slots=True)
class Task:
    id: str
    title: str
    description: str
    priority: Priority
    due_date: datetime | None
    status: TaskStatus
    created_at: datetime

    @property
    def is_completed(self) -> bool:
        return self.status is TaskStatus.COMPLETED
