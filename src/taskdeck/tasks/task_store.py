# src/taskdeck/tasks/task_store.py

from __future__ import annotations

import logging
import time
from dataclasses import replace

from ..core.ports import Clock
from .task_models import Priority, PriorityFilter, SortMode, Task
from .task_storage import TaskStorage
from .task_view import process_tasks

logger = logging.getLogger(__name__)


def now_ms() -> int:
    return time.time_ns() // 1_000_000


class TaskStore:
    """
    Owner of the in-memory task collection.

    - the collection is loaded once, at construction
    - every mutation is followed by a save of the full collection
    - a failed save only affects the stored copy; memory stays authoritative

    Ids come from the creation clock (ms) but never repeat: when two creations
    land on the same millisecond, the second id is bumped to last_id + 1.
    """

    def __init__(self, storage: TaskStorage, *, clock: Clock | None = None) -> None:
        self._storage = storage
        self._clock: Clock = clock or now_ms
        self._tasks: list[Task] = storage.load()
        self._last_id: int = max((t.id for t in self._tasks), default=0)
        logger.info("TaskStore ready key=%s total=%s", storage.key, len(self._tasks))

    def __len__(self) -> int:
        return len(self._tasks)

    # ---- helpers ----

    def _persist(self) -> None:
        self._storage.save(self._tasks)

    def _find_index(self, task_id: int) -> int:
        for i, task in enumerate(self._tasks):
            if task.id == task_id:
                return i
        return -1

    def _issue_id(self, now: int) -> int:
        task_id = max(now, self._last_id + 1)
        self._last_id = task_id
        return task_id

    # ---- read API ----

    @property
    def tasks(self) -> list[Task]:
        """Snapshot of the collection in canonical (insertion) order."""
        return [replace(t) for t in self._tasks]

    def count(self) -> int:
        return len(self._tasks)

    def get(self, task_id: int) -> Task | None:
        idx = self._find_index(task_id)
        return replace(self._tasks[idx]) if idx >= 0 else None

    def process(
        self,
        filter_priority: PriorityFilter | Priority | str = PriorityFilter.ALL,
        sort_mode: SortMode | str | None = SortMode.LATEST,
    ) -> list[Task]:
        return [replace(t) for t in process_tasks(self._tasks, filter_priority, sort_mode)]

    # ---- mutations ----

    def create(self, text: str, priority: Priority | str = Priority.MEDIUM) -> Task | None:
        """
        Append a new incomplete task and persist.

        Blank text is a no-op (returns None, nothing saved).
        An unknown priority raises ValueError before anything changes.
        """
        clean = (text or "").strip()
        if not clean:
            return None
        prio = Priority.parse(priority)

        now = int(self._clock())
        task = Task(
            id=self._issue_id(now),
            text=clean,
            priority=prio,
            completed=False,
            created_at=now,
        )
        self._tasks.append(task)
        self._persist()
        logger.debug("Task created id=%s priority=%s", task.id, prio.value)
        return replace(task)

    def toggle_completion(self, task_id: int) -> bool:
        """Flip `completed`; unknown ids are ignored (no save)."""
        idx = self._find_index(task_id)
        if idx < 0:
            return False
        task = self._tasks[idx]
        task.completed = not task.completed
        self._persist()
        logger.debug("Task toggled id=%s completed=%s", task_id, task.completed)
        return True

    def delete(self, task_id: int) -> bool:
        """Remove the task if present. Always saves, so deleting twice is harmless."""
        before = len(self._tasks)
        self._tasks = [t for t in self._tasks if t.id != task_id]
        removed = len(self._tasks) < before
        self._persist()
        logger.debug("Task delete id=%s removed=%s", task_id, removed)
        return removed
