# src/taskdeck/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_models import Priority, PriorityFilter, SortMode
from ..tasks.task_store import TaskStore
from .ports import ConfirmFn


def _always_yes(_question: str) -> bool:
    return True


@dataclass
class AppState:
    # Settings object (config.Settings in the app, SimpleNamespace in tests).
    settings: object

    task_store: TaskStore

    # Current view parameters (changed by /filter and /sort, not persisted).
    filter_priority: PriorityFilter = PriorityFilter.ALL
    sort_mode: SortMode = SortMode.LATEST
    default_priority: Priority = Priority.MEDIUM

    # Asked before every delete; the console connector swaps in an input() prompt.
    confirm: ConfirmFn = _always_yes
