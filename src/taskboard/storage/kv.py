# src/taskboard/storage/kv.py

"""
Key-value persistence collaborators for TaskStore.

Both implementations satisfy core.ports.KeyValueStore:
- InMemoryKeyValueStore: a dict, for tests and embedding
- JsonFileKeyValueStore: one JSON object file on disk, rewritten atomically
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from ..errors import PersistenceError

logger = logging.getLogger(__name__)


class InMemoryKeyValueStore:
    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class JsonFileKeyValueStore:
    """
    File-backed store: {"<key>": "<blob>", ...}.

    Reads are tolerant: a missing, unreadable or corrupt file reads as empty.
    Writes go to a temp file first and then os.replace() it into place,
    so the file on disk is always either the old or the new content.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _read_all(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text("utf-8"))
        except (OSError, ValueError):
            logger.warning("Ignoring unreadable key-value file %s", self._path, exc_info=True)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring key-value file %s: top level is not an object", self._path)
            return {}
        return {k: v for k, v in data.items() if isinstance(k, str) and isinstance(v, str)}

    def get(self, key: str) -> str | None:
        return self._read_all().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(json.dumps(data, ensure_ascii=False, indent=2), "utf-8")
            os.replace(tmp, self._path)
        except OSError as e:
            raise PersistenceError(f"failed to write {self._path}: {e}") from e
        logger.debug("Wrote key=%s (%d chars) to %s", key, len(value), self._path)
