# src/taskboard/tasks/ids.py

from __future__ import annotations

import uuid


class UuidGenerator:
    """Random uuid4 ids; uniqueness does not depend on clock resolution."""

    def new_id(self) -> str:
        return str(uuid.uuid4())
