# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from taskdeck.core.state import AppState
from taskdeck.storage.kv_store import InMemoryKeyValueStore, SqliteKeyValueStore
from taskdeck.tasks.task_models import Priority, PriorityFilter, SortMode
from taskdeck.tasks.task_storage import TaskStorage
from taskdeck.tasks.task_store import TaskStore

from .fakes import FakeClock

STORAGE_KEY = "dynamicTaskManagerTasks"


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="taskdeck-test",
        log_level="DEBUG",
        data_dir=tmp_path,
        storage_backend="sqlite",
        storage_path=tmp_path / "tasks.sqlite3",
        storage_key=STORAGE_KEY,
        default_priority="Medium",
        default_filter="all",
        default_sort="latest",
        confirm_delete=True,
    )


@pytest.fixture()
def kv() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture()
def storage(kv: InMemoryKeyValueStore) -> TaskStorage:
    return TaskStorage(kv, key=STORAGE_KEY)


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def store(storage: TaskStorage, clock: FakeClock) -> TaskStore:
    return TaskStore(storage, clock=clock)


@pytest.fixture()
def sqlite_kv(tmp_path: Path) -> SqliteKeyValueStore:
    return SqliteKeyValueStore(tmp_path / "kv.sqlite3")


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    """AppState over an in-memory store; deletes are confirmed automatically."""
    return AppState(
        settings=settings,
        task_store=store,
        filter_priority=PriorityFilter.ALL,
        sort_mode=SortMode.LATEST,
        default_priority=Priority.MEDIUM,
    )
