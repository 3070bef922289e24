# src/taskboard/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The task store depends on Protocols instead of concrete implementations.
This keeps persistence and id/time sources swappable and makes testing easier.
"""

from datetime import datetime
from typing import Protocol


class KeyValueStore(Protocol):
    """
    Persistence collaborator: one string blob per key.

    get() returns None when the key was never written.
    set() replaces the whole value; there are no partial writes.
    """

    def get(self, key: str) -> str | None: ...
    def set(self, key: str, value: str) -> None: ...


class IdGenerator(Protocol):
    """Source of opaque task ids. Must never repeat within one store."""
    def new_id(self) -> str: ...


class Clock(Protocol):
    """Returns the current time as a timezone-aware datetime."""
    def __call__(self) -> datetime: ...
