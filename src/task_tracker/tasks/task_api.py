# src/task_tracker/tasks/task_api.py

from __future__ import annotations

import logging
from datetime import datetime

from ..core.ports import TaskRepo
from .task_models import Task, TaskPriority, TaskStatus, TaskUpdate

logger = logging.getLogger(__name__)


def new_task_id(now: datetime | None = None) -> int:
    """Millisecond timestamp id, the usual caller-side id convention."""
    if now is None:
        now = datetime.now().astimezone()
    return int(now.timestamp() * 1000)


def create_task(
    store: TaskRepo,
    *,
    title: str,
    description: str | None = None,
    priority: TaskPriority = TaskPriority.MEDIUM,
    status: TaskStatus = TaskStatus.PENDING,
    task_id: int | None = None,
) -> Task:
    """
    Convenience helper: build a Task stamped with the store clock and add it.
    The store itself accepts any title; the non-empty check lives here.
    """
    title = (title or "").strip()
    if not title:
        raise ValueError("title is required")

    now = store.now()
    task = Task(
        id=new_task_id(now) if task_id is None else int(task_id),
        title=title,
        priority=priority,
        status=status,
        created_at=now,
        updated_at=now,
        description=(description or "").strip() or None,
    )
    task = store.add_task(task)
    logger.info("Created task id=%s title=%r", task.id, task.title)
    return task


def set_task_status(store: TaskRepo, task_id: int, status: TaskStatus) -> Task:
    task = store.update_task(task_id, TaskUpdate(status=status))
    logger.info("Task id=%s status -> %s", task_id, status.value)
    return task
