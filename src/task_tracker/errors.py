# src/task_tracker/errors.py

from __future__ import annotations


class TaskTrackerError(Exception):
    """Base class for task_tracker errors."""


class TaskNotFoundError(TaskTrackerError, LookupError):
    """Raised when an update targets a task id that is not in the store."""

    def __init__(self, task_id: int) -> None:
        super().__init__(f"Task not found: id={task_id}")
        self.task_id = task_id
