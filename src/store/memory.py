"""In-memory task storage."""

import threading
from typing import Dict, List
import logging

from models import Task

logger = logging.getLogger(__name__)


class TaskNotFoundError(LookupError):
    """Raised when a task id is not present in the store."""

    def __init__(self, task_id: int):
        super().__init__(f"Task {task_id} not found")
        self.task_id = task_id


class TaskStore:
    """Tasks keyed by id plus the next-id counter.

    Every operation, reads included, holds the single store lock for its
    whole duration, so check-then-mutate in replace/delete is atomic.
    Ids are never reused: the counter only grows, deletes do not rewind it.
    Tasks handed out are copies and never alias stored records.
    """

    def __init__(self):
        self._tasks: Dict[int, Task] = {}
        self._next_id = 0
        self._lock = threading.Lock()

    def list(self) -> List[Task]:
        """Snapshot of all tasks, in no particular order."""
        with self._lock:
            return [task.model_copy() for task in self._tasks.values()]

    def create(self, name: str, done: bool) -> Task:
        with self._lock:
            task = Task(id=self._next_id, name=name, done=done)
            self._tasks[task.id] = task
            self._next_id += 1
            return task.model_copy()

    def get(self, task_id: int) -> Task:
        with self._lock:
            task = self._tasks.get(task_id)
            if task is None:
                raise TaskNotFoundError(task_id)
            return task.model_copy()

    def replace(self, task_id: int, name: str, done: bool) -> Task:
        """Overwrite name and done of an existing task; the id is kept."""
        with self._lock:
            if task_id not in self._tasks:
                raise TaskNotFoundError(task_id)
            task = Task(id=task_id, name=name, done=done)
            self._tasks[task_id] = task
            return task.model_copy()

    def delete(self, task_id: int) -> None:
        with self._lock:
            if task_id not in self._tasks:
                raise TaskNotFoundError(task_id)
            del self._tasks[task_id]

    def count(self) -> int:
        with self._lock:
            return len(self._tasks)

    def seed(self, name: str, done: bool = False) -> Task:
        """Store the initial task a fresh service starts with."""
        task = self.create(name, done)
        logger.info(f"Seeded task '{task.name}' (ID: {task.id})")
        return task
