# src/taskdeck/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the key-value store, persistence adapter and task store into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import ConfirmFn, KeyValueStore
from ..core.state import AppState
from ..storage.kv_store import InMemoryKeyValueStore, SqliteKeyValueStore
from ..tasks.task_models import Priority, PriorityFilter, SortMode
from ..tasks.task_storage import TaskStorage
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.storage_path.parent.mkdir(parents=True, exist_ok=True)


def build_kv_store(settings) -> KeyValueStore:
    backend = str(getattr(settings, "storage_backend", "sqlite")).lower()
    if backend == "memory":
        logger.warning("Using in-memory storage: tasks will not survive a restart.")
        return InMemoryKeyValueStore()
    return SqliteKeyValueStore(settings.storage_path)


def _view_defaults(settings) -> tuple[Priority, PriorityFilter, SortMode]:
    try:
        priority = Priority.parse(getattr(settings, "default_priority", Priority.MEDIUM))
    except ValueError:
        logger.warning("Invalid default priority %r; using Medium.", settings.default_priority)
        priority = Priority.MEDIUM
    try:
        flt = PriorityFilter.parse(getattr(settings, "default_filter", PriorityFilter.ALL))
    except ValueError:
        logger.warning("Invalid default filter %r; using all.", settings.default_filter)
        flt = PriorityFilter.ALL
    sort_mode = SortMode.parse(getattr(settings, "default_sort", SortMode.LATEST))
    return priority, flt, sort_mode


def create_initial_state(
    *,
    settings=None,
    kv_store: KeyValueStore | None = None,
    confirm: ConfirmFn | None = None,
) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings (and the store) injectable makes the app easier to test.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    if kv_store is None:
        _ensure_local_dirs(settings)
        kv_store = build_kv_store(settings)

    storage = TaskStorage(kv_store, key=settings.storage_key)
    priority, flt, sort_mode = _view_defaults(settings)

    state = AppState(
        settings=settings,
        task_store=TaskStore(storage),
        filter_priority=flt,
        sort_mode=sort_mode,
        default_priority=priority,
    )
    if confirm is not None and getattr(settings, "confirm_delete", True):
        state.confirm = confirm
    return state
