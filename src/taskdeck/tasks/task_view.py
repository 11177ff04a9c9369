# src/taskdeck/tasks/task_view.py

from __future__ import annotations

from collections.abc import Callable, Iterable

from .task_models import Priority, PriorityFilter, SortMode, Task

SortKey = Callable[[Task], int]


def _mode_key(mode: SortMode) -> SortKey:
    if mode is SortMode.LATEST:
        return lambda t: -t.created_at
    if mode is SortMode.PRIORITY_DESC:
        return lambda t: -t.priority.rank
    if mode is SortMode.PRIORITY_ASC:
        return lambda t: t.priority.rank
    if mode is SortMode.INSERTION:
        return lambda t: 0
    raise ValueError(f"unhandled sort mode: {mode!r}")


def process_tasks(
    tasks: Iterable[Task],
    filter_priority: PriorityFilter | Priority | str = PriorityFilter.ALL,
    sort_mode: SortMode | str | None = SortMode.LATEST,
) -> list[Task]:
    """
    Filter, then order tasks for display.

    Ordering:
    1) incomplete tasks always come before completed ones
    2) inside each group, the sort mode decides
    sorted() is stable, so equal keys keep their collection order.

    Pure: the input is never mutated and the returned list is new.
    """
    flt = PriorityFilter.parse(filter_priority)
    mode_key = _mode_key(SortMode.parse(sort_mode))

    kept = [t for t in tasks if flt.matches(t)]
    return sorted(kept, key=lambda t: (t.completed, mode_key(t)))
