"""Exceptions raised by the task storage layer."""

from __future__ import annotations


class TaskTrackerError(Exception):
    """Base class for task tracker errors."""


class StorageError(TaskTrackerError):
    """Raised when the task database cannot be read or written."""

    def __init__(self, message: str = "The task database is not available"):
        super().__init__(message)


class NotFoundError(TaskTrackerError):
    """Raised when an update references a task id that is not stored."""

    def __init__(self, task_id: int):
        self.task_id = task_id
        super().__init__(f"Task {task_id} not found")
