"""In-memory task storage."""

from .memory import TaskStore, TaskNotFoundError

__all__ = ["TaskStore", "TaskNotFoundError"]
