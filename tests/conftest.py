# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from taskboard.core.state import AppState
from taskboard.tasks.task_store import TaskStore

from .fakes import ManualClock, RecordingKeyValueStore, SequentialIds


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap and AppState.

    A SimpleNamespace instead of the real Settings keeps tests isolated
    from the developer's environment and .env file.
    """
    return SimpleNamespace(
        app_name="taskboard-test",
        log_level="DEBUG",
        log_to_file=False,
        data_dir=tmp_path / "data",
        tasks_path=tmp_path / "data" / "tasks.json",
        storage_key="tasks",
    )


@pytest.fixture()
def kv() -> RecordingKeyValueStore:
    return RecordingKeyValueStore()


@pytest.fixture()
def clock() -> ManualClock:
    return ManualClock()


@pytest.fixture()
def store(kv: RecordingKeyValueStore, clock: ManualClock) -> TaskStore:
    """TaskStore with deterministic ids (t1, t2, ...) and a clock that ticks one minute per task."""
    return TaskStore(kv, id_generator=SequentialIds(), clock=clock)


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    return AppState(settings=settings, task_store=store)
