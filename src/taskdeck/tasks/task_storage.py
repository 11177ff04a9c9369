# src/taskdeck/tasks/task_storage.py

from __future__ import annotations

import json
import logging
from collections.abc import Iterable

from ..core.ports import KeyValueStore
from .task_models import Task

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "dynamicTaskManagerTasks"


class TaskStorage:
    """
    Persistence adapter: the whole collection as one JSON array under a fixed key.

    Both operations are best-effort from the caller's point of view:
    - load() never raises; absent or malformed data yields an empty list
    - save() never raises; a rejected write is logged and dropped (no retry)
    """

    def __init__(self, store: KeyValueStore, key: str = DEFAULT_STORAGE_KEY) -> None:
        if not key or not key.strip():
            raise ValueError("storage key is required")
        self._store = store
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    @staticmethod
    def encode(tasks: Iterable[Task]) -> str:
        return json.dumps([t.to_record() for t in tasks], ensure_ascii=False)

    @staticmethod
    def decode(raw: str) -> list[Task]:
        """Parse a stored blob. Raises ValueError on anything but a list of task records."""
        data = json.loads(raw)
        if not isinstance(data, list):
            raise ValueError(f"stored tasks must be a JSON array, got {type(data).__name__}")
        return [Task.from_record(item) for item in data]

    def load(self) -> list[Task]:
        try:
            raw = self._store.get_item(self._key)
        except Exception:
            logger.exception("Failed to read tasks from storage key=%s", self._key)
            return []

        if raw is None:
            logger.debug("No stored tasks under key=%s", self._key)
            return []

        try:
            tasks = self.decode(raw)
        except Exception:
            logger.exception("Stored tasks are malformed; starting empty (key=%s)", self._key)
            return []

        logger.info("Loaded %d tasks from key=%s", len(tasks), self._key)
        return tasks

    def save(self, tasks: Iterable[Task]) -> bool:
        """Overwrite the stored blob. Returns False when the write was rejected."""
        items = list(tasks)
        try:
            self._store.set_item(self._key, self.encode(items))
        except Exception:
            logger.exception("Failed to save %d tasks to key=%s", len(items), self._key)
            return False
        logger.debug("Saved %d tasks to key=%s", len(items), self._key)
        return True
