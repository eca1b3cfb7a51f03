# src/task_tracker/tasks/task_store.py

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Iterable
from dataclasses import replace
from datetime import datetime, timezone
from operator import attrgetter
from typing import Any, TypeVar

from ..core.ports import KeyValueSink
from ..errors import TaskNotFoundError
from .task_models import (
    Task,
    TaskStatus,
    TaskUpdate,
    as_utc,
    task_from_record,
    task_to_record,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_STORAGE_KEY = "tasks"

Clock = Callable[[], datetime]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def filter_by_field(items: Iterable[T], field: Callable[[T], Any] | str, value: Any) -> list[T]:
    """
    Return every item whose field equals `value`, in the original order.

    `field` is either an accessor (item -> value) or an attribute name.
    """
    get = attrgetter(field) if isinstance(field, str) else field
    return [item for item in items if get(item) == value]


class TaskStore:
    """
    In-memory ordered task list mirrored into a key-value sink.

    Every mutation rewrites the whole collection under one key; there are
    no partial writes. Task ids are assigned by callers and not checked for
    uniqueness: lookups return the first match, delete removes all matches.

    Not thread-safe: one owner, one instance.
    """

    def __init__(
        self,
        sink: KeyValueSink,
        *,
        key: str = DEFAULT_STORAGE_KEY,
        clock: Clock | None = None,
    ) -> None:
        self._sink = sink
        self._key = key
        self._clock: Clock = clock or _utc_now
        self._tasks: list[Task] = []

    @property
    def key(self) -> str:
        return self._key

    def now(self) -> datetime:
        return self._clock()

    def __len__(self) -> int:
        return len(self._tasks)

    # ---- low-level helpers ----

    def _index_of(self, task_id: int) -> int | None:
        for i, task in enumerate(self._tasks):
            if task.id == task_id:
                return i
        return None

    # ---- public API ----

    def count_tasks(self) -> int:
        return len(self._tasks)

    def list_tasks(self) -> list[Task]:
        return list(self._tasks)

    def add_task(self, task: Task) -> Task:
        # Stored timestamps are aware UTC, matching what restore() reads back.
        task = replace(task, created_at=as_utc(task.created_at), updated_at=as_utc(task.updated_at))
        self._commit([*self._tasks, task])
        logger.debug(
            "Task added id=%s priority=%s status=%s", task.id, task.priority, task.status
        )
        return task

    def update_task(self, task_id: int, changes: TaskUpdate) -> Task:
        idx = self._index_of(task_id)
        if idx is None:
            raise TaskNotFoundError(task_id)

        current = self._tasks[idx]
        fields = changes.fields()
        # updated_at never moves backwards, even if the clock does.
        updated_at = max(as_utc(self._clock()), current.updated_at)
        updated = replace(current, **fields, updated_at=updated_at)
        tasks = list(self._tasks)
        tasks[idx] = updated
        self._commit(tasks)
        logger.debug("Task updated id=%s fields=%s", task_id, sorted(fields))
        return updated

    def delete_task(self, task_id: int) -> int:
        kept = [t for t in self._tasks if t.id != task_id]
        removed = len(self._tasks) - len(kept)
        self._commit(kept)
        logger.debug("Task delete id=%s removed=%d", task_id, removed)
        return removed

    def get_task(self, task_id: int) -> Task | None:
        idx = self._index_of(task_id)
        return self._tasks[idx] if idx is not None else None

    def list_by_status(self, status: TaskStatus) -> list[Task]:
        return filter_by_field(self._tasks, attrgetter("status"), status)

    # ---- sink sync ----

    def _write(self, tasks: list[Task]) -> None:
        payload = json.dumps([task_to_record(t) for t in tasks], ensure_ascii=False)
        self._sink.set(self._key, payload)
        logger.debug("Persisted %d tasks key=%s", len(tasks), self._key)

    def _commit(self, tasks: list[Task]) -> None:
        # Memory only moves once the sink has accepted the new list.
        self._write(tasks)
        self._tasks = tasks

    def persist(self) -> None:
        self._write(self._tasks)

    def restore(self) -> bool:
        """
        Replace the in-memory list with whatever the sink holds under the key.

        Returns False (and keeps the current list) when nothing is stored
        or the stored value cannot be decoded.
        """
        raw = self._sink.get(self._key)
        if raw is None:
            logger.info("No stored tasks under key=%s", self._key)
            return False

        try:
            data = json.loads(raw)
        except json.JSONDecodeError:
            logger.exception("Stored tasks under key=%s are not valid JSON; ignoring.", self._key)
            return False
        if not isinstance(data, list):
            logger.warning(
                "Stored tasks under key=%s are not a list (%s); ignoring.",
                self._key,
                type(data).__name__,
            )
            return False

        tasks: list[Task] = []
        for record in data:
            try:
                tasks.append(task_from_record(record))
            except ValueError as e:
                logger.warning("Skipping malformed task record: %s", e)

        self._tasks = tasks
        logger.info("Restored %d tasks from key=%s", len(tasks), self._key)
        return True
