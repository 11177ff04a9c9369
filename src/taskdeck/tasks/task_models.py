# src/taskdeck/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class Priority(StrEnum):
    """
    Task priority.

    Values are the exact strings stored in the persisted blob.
    Total order: HIGH > MEDIUM > LOW (see `rank`).
    """

    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"

    @property
    def rank(self) -> int:
        return _PRIORITY_RANK[self]

    @classmethod
    def parse(cls, raw: Priority | str) -> Priority:
        """Accept a member or a case-insensitive name ("high", "HIGH", "High")."""
        if isinstance(raw, cls):
            return raw
        key = str(raw).strip().lower()
        for member in cls:
            if member.value.lower() == key:
                return member
        raise ValueError(f"unknown priority: {raw!r}")


_PRIORITY_RANK: dict[Priority, int] = {
    Priority.HIGH: 3,
    Priority.MEDIUM: 2,
    Priority.LOW: 1,
}


class PriorityFilter(StrEnum):
    """View filter: either every task or one exact priority."""

    ALL = "all"
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"

    @classmethod
    def parse(cls, raw: PriorityFilter | Priority | str) -> PriorityFilter:
        if isinstance(raw, cls):
            return raw
        key = str(raw).strip().lower()
        for member in cls:
            if member.value.lower() == key:
                return member
        raise ValueError(f"unknown priority filter: {raw!r}")

    def matches(self, task: Task) -> bool:
        if self is PriorityFilter.ALL:
            return True
        return task.priority.value == self.value


class SortMode(StrEnum):
    """
    Tie-break ordering applied inside each completion group.

    INSERTION keeps collection order. It is also what any unrecognized
    raw mode string resolves to.
    """

    LATEST = "latest"
    PRIORITY_DESC = "priority-desc"
    PRIORITY_ASC = "priority-asc"
    INSERTION = "insertion"

    @classmethod
    def parse(cls, raw: SortMode | str | None) -> SortMode:
        if isinstance(raw, cls):
            return raw
        if not raw:
            return cls.INSERTION
        try:
            return cls(str(raw).strip().lower())
        except ValueError:
            return cls.INSERTION


@dataclass(slots=True)
class Task:
    id: int
    text: str
    priority: Priority
    completed: bool = False
    created_at: int = 0

    def to_record(self) -> dict[str, Any]:
        """Persisted shape (the blob uses `timestamp` for created_at)."""
        return {
            "id": self.id,
            "text": self.text,
            "priority": self.priority.value,
            "completed": self.completed,
            "timestamp": self.created_at,
        }

    @classmethod
    def from_record(cls, raw: Any) -> Task:
        """
        Build a Task from one persisted record.

        Raises ValueError when the record is not a well-formed task.
        """
        if not isinstance(raw, dict):
            raise ValueError(f"task record must be an object, got {type(raw).__name__}")

        task_id = raw.get("id")
        text = raw.get("text")
        priority = raw.get("priority")
        completed = raw.get("completed")
        timestamp = raw.get("timestamp")

        if not _is_int(task_id):
            raise ValueError(f"task id must be an integer: {task_id!r}")
        if not isinstance(text, str):
            raise ValueError(f"task text must be a string: {text!r}")
        if not isinstance(priority, str):
            raise ValueError(f"task priority must be a string: {priority!r}")
        if not isinstance(completed, bool):
            raise ValueError(f"task completed must be a boolean: {completed!r}")
        if not _is_int(timestamp):
            raise ValueError(f"task timestamp must be an integer: {timestamp!r}")

        return cls(
            id=task_id,
            text=text,
            priority=Priority(priority),
            completed=completed,
            created_at=timestamp,
        )


def _is_int(value: Any) -> bool:
    # bool is an int subclass; JSON true/false must not pass as ids.
    return isinstance(value, int) and not isinstance(value, bool)
