# tests/test_bootstrap.py

from __future__ import annotations

import logging
from pathlib import Path

from taskdeck.cli.bootstrap import create_initial_state
from taskdeck.config import Settings
from taskdeck.logging_setup import setup_logging
from taskdeck.storage.kv_store import InMemoryKeyValueStore
from taskdeck.tasks.task_models import Priority, PriorityFilter, SortMode


def test_state_persists_across_restarts(settings) -> None:
    first = create_initial_state(settings=settings)
    first.task_store.create("Survive restart", "High")

    second = create_initial_state(settings=settings)
    assert [t.text for t in second.task_store.tasks] == ["Survive restart"]
    assert settings.storage_path.exists()


def test_view_defaults_from_settings(settings) -> None:
    settings.default_priority = "low"
    settings.default_filter = "bogus"
    settings.default_sort = "priority-asc"

    state = create_initial_state(settings=settings, kv_store=InMemoryKeyValueStore())

    assert state.default_priority is Priority.LOW
    assert state.filter_priority is PriorityFilter.ALL
    assert state.sort_mode is SortMode.PRIORITY_ASC


def test_confirm_installed_only_when_enabled(settings) -> None:
    def never(_q: str) -> bool:
        return False

    state = create_initial_state(settings=settings, kv_store=InMemoryKeyValueStore(), confirm=never)
    assert state.confirm is never

    settings.confirm_delete = False
    state = create_initial_state(settings=settings, kv_store=InMemoryKeyValueStore(), confirm=never)
    assert state.confirm("delete?") is True


def test_memory_backend(settings) -> None:
    settings.storage_backend = "memory"
    state = create_initial_state(settings=settings)
    state.task_store.create("ephemeral", "Low")

    assert create_initial_state(settings=settings).task_store.count() == 0


def test_settings_from_env(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TASKDECK_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("TASKDECK_STORAGE_BACKEND", "nonsense")
    monkeypatch.setenv("TASKDECK_STORAGE_KEY", "myTasks")
    monkeypatch.setenv("TASKDECK_CONFIRM_DELETE", "no")
    monkeypatch.delenv("TASKDECK_STORAGE_PATH", raising=False)

    s = Settings.from_env()

    assert s.data_dir == tmp_path
    assert s.storage_path == tmp_path / "tasks.sqlite3"
    assert s.storage_backend == "sqlite"
    assert s.storage_key == "myTasks"
    assert s.confirm_delete is False


def test_setup_logging_writes_file(tmp_path: Path) -> None:
    root = logging.getLogger()
    saved = list(root.handlers)
    try:
        log_file = setup_logging(log_dir=tmp_path / "logs")
        logging.getLogger("taskdeck.test").debug("hello file")
        for h in root.handlers:
            h.flush()
        assert "hello file" in log_file.read_text("utf-8")
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
            if h not in saved:
                h.close()
        for h in saved:
            root.addHandler(h)
        logging.captureWarnings(False)
