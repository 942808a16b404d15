"""Tests for the in-memory task store."""

import pytest
import threading
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from models import Task
from store import TaskStore, TaskNotFoundError


@pytest.fixture
def store():
    """Create an empty store."""
    return TaskStore()


class TestCreate:
    """Test task creation and ID assignment."""

    def test_first_id_is_zero(self, store):
        task = store.create("Seed", False)
        assert task == Task(id=0, name="Seed", done=False)

    def test_ids_strictly_increase(self, store):
        ids = [store.create(f"Task {i}", False).id for i in range(5)]
        assert ids == [0, 1, 2, 3, 4]

    def test_ids_never_reused_after_delete(self, store):
        """Deleting the newest task must not hand its ID out again."""
        first = store.create("A", False)
        second = store.create("B", False)
        store.delete(second.id)
        store.delete(first.id)

        third = store.create("C", True)
        assert third.id == 2

    def test_create_then_get(self, store):
        created = store.create("Buy milk", True)
        assert store.get(created.id) == created

    def test_empty_name_allowed(self, store):
        assert store.create("", False).name == ""

    def test_seed(self, store):
        seeded = store.seed("Выучить Go")
        assert seeded == Task(id=0, name="Выучить Go", done=False)
        assert store.create("Next", False).id == 1


class TestLookup:
    """Test get, list and count."""

    def test_get_missing(self, store):
        with pytest.raises(TaskNotFoundError) as exc_info:
            store.get(7)
        assert exc_info.value.task_id == 7

    def test_not_found_is_lookup_error(self, store):
        with pytest.raises(LookupError):
            store.get(0)

    def test_list_empty(self, store):
        assert store.list() == []

    def test_list_contains_all(self, store):
        a = store.create("A", False)
        b = store.create("B", True)
        tasks = store.list()
        assert len(tasks) == 2
        assert {t.id for t in tasks} == {a.id, b.id}

    def test_list_is_snapshot(self, store):
        store.create("A", False)
        tasks = store.list()
        store.create("B", False)
        assert len(tasks) == 1

    def test_returned_tasks_are_copies(self, store):
        created = store.create("A", False)
        created.name = "changed"
        store.list()[0].done = True
        assert store.get(created.id) == Task(id=created.id, name="A", done=False)

    def test_count(self, store):
        assert store.count() == 0
        store.create("A", False)
        assert store.count() == 1


class TestReplace:
    """Test full replacement of a task."""

    def test_replace_overwrites_fields(self, store):
        created = store.create("Buy milk", False)
        updated = store.replace(created.id, "Buy bread", True)

        assert updated == Task(id=created.id, name="Buy bread", done=True)
        assert store.get(created.id) == updated

    def test_replace_missing_leaves_store_unchanged(self, store):
        created = store.create("A", False)

        with pytest.raises(TaskNotFoundError):
            store.replace(99, "B", True)

        assert store.count() == 1
        assert store.get(created.id) == created

    def test_replace_keeps_counter(self, store):
        created = store.create("A", False)
        store.replace(created.id, "B", True)
        assert store.create("C", False).id == created.id + 1


class TestDelete:
    """Test task deletion."""

    def test_delete_then_get(self, store):
        created = store.create("A", False)
        store.delete(created.id)

        with pytest.raises(TaskNotFoundError):
            store.get(created.id)

    def test_delete_missing(self, store):
        with pytest.raises(TaskNotFoundError):
            store.delete(3)

    def test_list_empty_after_deleting_all(self, store):
        for name in ("A", "B", "C"):
            store.create(name, False)
        for task in store.list():
            store.delete(task.id)

        assert store.list() == []


class TestConcurrency:
    """Test the store under concurrent access."""

    def test_concurrent_creates_get_unique_ids(self, store):
        per_thread = 200
        results = []
        results_lock = threading.Lock()

        def worker():
            ids = [store.create("task", False).id for _ in range(per_thread)]
            with results_lock:
                results.extend(ids)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(results) == 8 * per_thread
        assert sorted(results) == list(range(8 * per_thread))
        assert store.count() == 8 * per_thread

    def test_concurrent_delete_succeeds_once(self, store):
        created = store.create("A", False)
        outcomes = []
        outcomes_lock = threading.Lock()

        def worker():
            try:
                store.delete(created.id)
                outcome = "deleted"
            except TaskNotFoundError:
                outcome = "missing"
            with outcomes_lock:
                outcomes.append(outcome)

        threads = [threading.Thread(target=worker) for _ in range(10)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert outcomes.count("deleted") == 1
        assert outcomes.count("missing") == 9
