# tests/test_task_store.py

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest

from task_service.exceptions import InvalidArgument, TaskNotFound
from task_service.store import TaskStore


def test_create_assigns_increasing_ids(store: TaskStore) -> None:
    first = store.create("Buy milk")
    second = store.create("Walk dog", description="around the block", completed=True)

    assert first.id == 1
    assert second.id > first.id
    assert first.description == ""
    assert first.completed is False
    assert second.description == "around the block"
    assert second.completed is True


def test_create_rejects_blank_title(store: TaskStore) -> None:
    with pytest.raises(InvalidArgument):
        store.create("   ")
    assert len(store) == 0


def test_deleted_id_is_never_reused(store: TaskStore) -> None:
    t1 = store.create("one")
    t2 = store.create("two")
    assert store.delete(t2.id) is True

    t3 = store.create("three")
    assert t3.id > t2.id
    assert {t.id for t in store.get_all()} == {t1.id, t3.id}


def test_get_by_id_and_not_found(store: TaskStore) -> None:
    created = store.create("read me")
    assert store.get_by_id(created.id) == created

    with pytest.raises(TaskNotFound) as exc_info:
        store.get_by_id(999)
    assert exc_info.value.task_id == 999


def test_returned_tasks_are_copies(store: TaskStore) -> None:
    created = store.create("original")
    created.title = "changed outside"

    snapshot = store.get_all()
    snapshot[0].completed = True

    stored = store.get_by_id(created.id)
    assert stored.title == "original"
    assert stored.completed is False


def test_update_applies_only_supplied_fields(store: TaskStore) -> None:
    created = store.create("title", description="desc")

    updated = store.update(created.id, completed=True)
    assert updated.title == "title"
    assert updated.description == "desc"
    assert updated.completed is True

    cleared = store.update(created.id, description="")
    assert cleared.description == ""
    assert cleared.completed is True


def test_update_without_fields_returns_task_unchanged(store: TaskStore) -> None:
    created = store.create("same", description="d")
    assert store.update(created.id) == created
    assert store.get_by_id(created.id) == created


def test_update_with_blank_title_rejects_whole_update(store: TaskStore) -> None:
    created = store.create("keep", description="keep too")

    with pytest.raises(InvalidArgument):
        store.update(created.id, title=" \t ", description="lost", completed=True)

    assert store.get_by_id(created.id) == created


def test_update_missing_task(store: TaskStore) -> None:
    with pytest.raises(TaskNotFound):
        store.update(42, title="anything")
    # Absence wins over an invalid title.
    with pytest.raises(TaskNotFound):
        store.update(42, title="")


def test_delete_reports_absence(store: TaskStore) -> None:
    created = store.create("gone soon")
    assert store.delete(created.id) is True
    assert store.delete(created.id) is False
    with pytest.raises(TaskNotFound):
        store.get_by_id(created.id)


def test_concurrent_creates_get_unique_contiguous_ids(store: TaskStore) -> None:
    total = 400

    with ThreadPoolExecutor(max_workers=16) as pool:
        tasks = list(pool.map(lambda i: store.create(f"task {i}"), range(total)))

    ids = sorted(t.id for t in tasks)
    assert ids == list(range(1, total + 1))
    assert len(store) == total


def test_concurrent_updates_and_reads_stay_consistent(store: TaskStore) -> None:
    created = store.create("flip")

    def flip(i: int) -> None:
        store.update(created.id, completed=bool(i % 2), description=str(i % 2))

    def read(_: int) -> None:
        task = store.get_by_id(created.id)
        # Both fields are written together, so a reader never sees them disagree.
        assert task.description in ("", str(int(task.completed)))

    with ThreadPoolExecutor(max_workers=8) as pool:
        futures = [pool.submit(flip, i) for i in range(200)]
        futures += [pool.submit(read, i) for i in range(200)]
        for f in futures:
            f.result()
