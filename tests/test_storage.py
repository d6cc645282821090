from datetime import datetime, timedelta

from taskflow.domain.entities import Priority, Task
from taskflow.domain.filters import is_due_today
from taskflow.infrastructure.storage import MemoryTaskStorage, seed_demo_tasks


def test_create_assigns_id_and_created_at(storage: MemoryTaskStorage):
    task = storage.create_task(Task(title="Buy milk", priority=Priority.LOW))

    assert task.id
    assert task.created_at is not None
    assert task.completed is False
    assert storage.list_tasks()[0].id == task.id


def test_created_ids_are_unique(storage: MemoryTaskStorage):
    ids = {storage.create_task(Task(title=f"T{i}")).id for i in range(50)}
    assert len(ids) == 50


def test_create_ignores_caller_id_and_created_at(storage: MemoryTaskStorage):
    stamp = datetime(2000, 1, 1)
    task = storage.create_task(Task(title="A", id="mine", created_at=stamp))

    assert task.id != "mine"
    assert task.created_at != stamp


def test_list_is_newest_first(storage: MemoryTaskStorage):
    first = storage.create_task(Task(title="first"))
    second = storage.create_task(Task(title="second"))
    third = storage.create_task(Task(title="third"))

    listed = storage.list_tasks()
    assert [t.id for t in listed] == [third.id, second.id, first.id]
    assert all(a.created_at >= b.created_at for a, b in zip(listed, listed[1:]))


def test_list_with_equal_timestamps_puts_latest_insert_first():
    stamp = datetime(2024, 1, 1)
    storage = MemoryTaskStorage(clock=lambda: stamp)
    a = storage.create_task(Task(title="a"))
    b = storage.create_task(Task(title="b"))

    assert [t.id for t in storage.list_tasks()] == [b.id, a.id]


def test_get_unknown_returns_none(storage: MemoryTaskStorage):
    assert storage.get_task("missing") is None


def test_partial_update_preserves_other_fields(storage: MemoryTaskStorage):
    task = storage.create_task(
        Task(title="Write report", description="Q4", priority=Priority.HIGH)
    )

    updated = storage.update_task(task.id, {"completed": True})

    assert updated.completed is True
    fetched = storage.get_task(task.id)
    assert fetched.id == task.id
    assert fetched.created_at == task.created_at
    assert fetched.title == "Write report"
    assert fetched.description == "Q4"
    assert fetched.priority is Priority.HIGH
    assert fetched.completed is True


def test_update_ignores_id_created_at_and_unknown_keys(storage: MemoryTaskStorage):
    task = storage.create_task(Task(title="A"))

    updated = storage.update_task(
        task.id, {"id": "other", "created_at": datetime(2000, 1, 1), "color": "red", "title": "B"}
    )

    assert updated.id == task.id
    assert updated.created_at == task.created_at
    assert updated.title == "B"
    assert not hasattr(updated, "color")
    assert storage.get_task("other") is None


def test_update_unknown_leaves_collection_unchanged(storage: MemoryTaskStorage):
    storage.create_task(Task(title="A"))
    before = storage.list_tasks()

    assert storage.update_task("missing", {"title": "B"}) is None
    assert storage.list_tasks() == before


def test_delete_known_then_unknown(storage: MemoryTaskStorage):
    keep = storage.create_task(Task(title="keep"))
    gone = storage.create_task(Task(title="gone"))

    assert storage.delete_task(gone.id) is True
    assert storage.delete_task(gone.id) is False
    assert [t.id for t in storage.list_tasks()] == [keep.id]
    assert storage.get_task(gone.id) is None


def test_delete_unknown_leaves_collection_unchanged(storage: MemoryTaskStorage):
    storage.create_task(Task(title="A"))
    before = storage.list_tasks()

    assert storage.delete_task("missing") is False
    assert storage.list_tasks() == before


def test_returned_records_are_copies(storage: MemoryTaskStorage):
    task = storage.create_task(Task(title="A"))
    task.title = "changed locally"
    storage.list_tasks()[0].completed = True

    stored = storage.get_task(task.id)
    assert stored.title == "A"
    assert stored.completed is False


def test_seed_demo_tasks(storage: MemoryTaskStorage, now: datetime):
    seeded = seed_demo_tasks(storage, now)

    assert storage.count_tasks() == 5
    assert {t.priority for t in seeded} == {Priority.HIGH, Priority.MEDIUM, Priority.LOW}
    assert {t.completed for t in seeded} == {True, False}
    assert sum(1 for t in seeded if is_due_today(t, now)) == 1
    assert len({t.id for t in seeded}) == 5


def test_seed_due_today_follows_now(storage: MemoryTaskStorage):
    later = datetime(2030, 6, 1, 9, 0)
    seeded = seed_demo_tasks(storage, later)

    due_today = [t for t in seeded if is_due_today(t, later)]
    assert len(due_today) == 1
    assert due_today[0].due_date - later < timedelta(days=1)
