# tests/test_task_store.py

from __future__ import annotations

import json

import pytest

from taskdeck.storage.kv_store import InMemoryKeyValueStore
from taskdeck.tasks.task_models import Priority, Task
from taskdeck.tasks.task_storage import TaskStorage
from taskdeck.tasks.task_store import TaskStore

from .conftest import STORAGE_KEY
from .fakes import FailingKeyValueStore, FakeClock


def _stored(kv: InMemoryKeyValueStore) -> list[dict]:
    raw = kv.get_item(STORAGE_KEY)
    return [] if raw is None else json.loads(raw)


def test_create_adds_incomplete_task_and_persists(store: TaskStore, kv: InMemoryKeyValueStore) -> None:
    task = store.create("  Buy milk  ", "High")

    assert task is not None
    assert task.text == "Buy milk"
    assert task.priority is Priority.HIGH
    assert task.completed is False

    visible = [t for t in store.process("all", "latest") if t.id == task.id]
    assert visible == [task]
    assert _stored(kv) == [task.to_record()]


@pytest.mark.parametrize("text", ["", "   ", "\n\t"])
def test_create_blank_is_noop(store: TaskStore, kv: InMemoryKeyValueStore, text: str) -> None:
    assert store.create(text, Priority.LOW) is None
    assert len(store) == 0
    assert kv.get_item(STORAGE_KEY) is None


def test_create_unknown_priority_raises_without_change(store: TaskStore, kv: InMemoryKeyValueStore) -> None:
    with pytest.raises(ValueError):
        store.create("Something", "Urgent")
    assert store.count() == 0
    assert kv.get_item(STORAGE_KEY) is None


def test_ids_are_unique_even_when_clock_stalls(storage: TaskStorage) -> None:
    store = TaskStore(storage, clock=FakeClock(start=5_000, step=0))

    ids = [store.create(f"t{i}", "Low").id for i in range(5)]  # type: ignore[union-attr]

    assert ids == [5_000, 5_001, 5_002, 5_003, 5_004]
    assert all(t.created_at == 5_000 for t in store.tasks)


def test_ids_continue_after_reload(kv: InMemoryKeyValueStore) -> None:
    first = TaskStore(TaskStorage(kv, key=STORAGE_KEY), clock=FakeClock(start=9_000, step=0))
    first.create("old", "Low")

    second = TaskStore(TaskStorage(kv, key=STORAGE_KEY), clock=FakeClock(start=100, step=0))
    task = second.create("new", "Low")

    assert task is not None
    assert task.id == 9_001


def test_toggle_is_self_inverse(store: TaskStore, kv: InMemoryKeyValueStore) -> None:
    task = store.create("Walk dog", "Medium")
    assert task is not None

    assert store.toggle_completion(task.id) is True
    assert store.get(task.id).completed is True  # type: ignore[union-attr]
    assert _stored(kv)[0]["completed"] is True

    assert store.toggle_completion(task.id) is True
    assert store.get(task.id).completed is False  # type: ignore[union-attr]
    assert store.count() == 1


def test_toggle_unknown_id_is_noop(store: TaskStore, kv: InMemoryKeyValueStore) -> None:
    assert store.toggle_completion(424242) is False
    assert kv.get_item(STORAGE_KEY) is None


def test_delete_removes_at_most_one_and_always_saves(store: TaskStore, kv: InMemoryKeyValueStore) -> None:
    a = store.create("a", "High")
    b = store.create("b", "Low")
    assert a is not None and b is not None

    assert store.delete(a.id) is True
    assert [t.id for t in store.tasks] == [b.id]

    kv.set_item(STORAGE_KEY, "stale")
    assert store.delete(a.id) is False
    assert store.count() == 1
    assert _stored(kv) == [b.to_record()]


def test_save_failure_keeps_memory_authoritative() -> None:
    kv = FailingKeyValueStore()
    store = TaskStore(TaskStorage(kv, key=STORAGE_KEY), clock=FakeClock())

    task = store.create("Still here", "High")
    assert task is not None
    assert store.toggle_completion(task.id) is True

    assert kv.write_attempts == 2
    assert store.get(task.id).completed is True  # type: ignore[union-attr]
    assert kv.get_item(STORAGE_KEY) is None


def test_loads_existing_collection_in_order(kv: InMemoryKeyValueStore) -> None:
    records = [
        Task(id=2, text="second", priority=Priority.LOW, created_at=2).to_record(),
        Task(id=1, text="first", priority=Priority.HIGH, created_at=1).to_record(),
    ]
    kv.set_item(STORAGE_KEY, json.dumps(records))

    store = TaskStore(TaskStorage(kv, key=STORAGE_KEY))

    assert [t.id for t in store.tasks] == [2, 1]


def test_snapshots_do_not_leak_mutation(store: TaskStore) -> None:
    task = store.create("x", "Low")
    assert task is not None

    for t in store.process("all", "latest"):
        t.completed = True
    store.tasks[0].completed = True

    assert store.get(task.id).completed is False  # type: ignore[union-attr]


def test_buy_milk_call_bob_scenario(store: TaskStore) -> None:
    milk = store.create("Buy milk", "High")
    bob = store.create("Call Bob", "Low")
    assert milk is not None and bob is not None

    store.toggle_completion(bob.id)
    out = store.process("all", "priority-desc")

    assert [(t.text, t.completed, t.priority) for t in out] == [
        ("Buy milk", False, Priority.HIGH),
        ("Call Bob", True, Priority.LOW),
    ]
