# src/task_tracker/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import StrEnum
from typing import Any


class _ChoiceEnum(StrEnum):
    @classmethod
    def _lookup(cls, raw: str) -> _ChoiceEnum | None:
        key = raw.strip().replace(" ", "").replace("_", "").lower()
        for member in cls:
            if key in (member.value.lower(), member.name.replace("_", "").lower()):
                return member
        return None

    @classmethod
    def parse(cls, raw: str) -> Any:
        """
        Strict decoding for user input.

        Accepts a value ("InProgress"), a member name ("in_progress"),
        or a 1-based index into the declared order ("2").
        """
        text = (raw or "").strip()
        if text.isdigit():
            members = list(cls)
            idx = int(text)
            if 1 <= idx <= len(members):
                return members[idx - 1]
        found = cls._lookup(text) if text else None
        if found is None:
            choices = ", ".join(m.value for m in cls)
            raise ValueError(f"Unknown {cls.__name__} {raw!r}; expected one of: {choices}")
        return found


class TaskPriority(_ChoiceEnum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"

    @classmethod
    def from_raw(cls, raw: str | None) -> TaskPriority:
        if not raw:
            return cls.MEDIUM
        found = cls._lookup(str(raw))
        return found if found is not None else cls.MEDIUM  # type: ignore[return-value]


class TaskStatus(_ChoiceEnum):
    PENDING = "Pending"
    IN_PROGRESS = "InProgress"
    COMPLETED = "Completed"

    @classmethod
    def from_raw(cls, raw: str | None) -> TaskStatus:
        if not raw:
            return cls.PENDING
        found = cls._lookup(str(raw))
        return found if found is not None else cls.PENDING  # type: ignore[return-value]


class _Unset:
    _instance: _Unset | None = None

    def __new__(cls) -> _Unset:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()


@dataclass(slots=True)
class Task:
    id: int
    title: str
    priority: TaskPriority
    status: TaskStatus
    created_at: datetime
    updated_at: datetime

    description: str | None = None


@dataclass(frozen=True, slots=True)
class TaskUpdate:
    """
    Partial update for a Task.

    Only fields that were actually supplied are merged. UNSET means "leave as is";
    description=None is a real value and clears the description.
    """

    title: Any = UNSET
    description: Any = UNSET
    priority: Any = UNSET
    status: Any = UNSET

    def fields(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        for name in ("title", "description", "priority", "status"):
            value = getattr(self, name)
            if value is not UNSET:
                out[name] = value
        return out

    def is_empty(self) -> bool:
        return not self.fields()


# ---- persisted record shape ----


def _ts_to_str(ts: datetime) -> str:
    return ts.isoformat()


def as_utc(ts: datetime) -> datetime:
    """Naive timestamps are taken to be UTC."""
    return ts.replace(tzinfo=timezone.utc) if ts.tzinfo is None else ts


def _str_to_ts(raw: Any) -> datetime:
    if not isinstance(raw, str) or not raw.strip():
        raise ValueError(f"bad timestamp: {raw!r}")
    return as_utc(datetime.fromisoformat(raw.strip()))


def task_to_record(task: Task) -> dict[str, Any]:
    record: dict[str, Any] = {
        "id": task.id,
        "title": task.title,
        "priority": str(task.priority),
        "status": str(task.status),
        "createdAt": _ts_to_str(task.created_at),
        "updatedAt": _ts_to_str(task.updated_at),
    }
    if task.description is not None:
        record["description"] = task.description
    return record


def task_from_record(record: dict[str, Any]) -> Task:
    if not isinstance(record, dict):
        raise ValueError(f"task record must be an object, got {type(record).__name__}")
    if "id" not in record or "title" not in record:
        raise ValueError("task record is missing id or title")

    raw_id = record["id"]
    if isinstance(raw_id, bool) or (isinstance(raw_id, float) and not raw_id.is_integer()):
        raise ValueError(f"bad task id: {raw_id!r}")
    try:
        task_id = int(raw_id)
    except (TypeError, ValueError, OverflowError) as e:
        raise ValueError(f"bad task id: {raw_id!r}") from e

    description = record.get("description")
    return Task(
        id=task_id,
        title=str(record["title"]),
        priority=TaskPriority.from_raw(record.get("priority")),
        status=TaskStatus.from_raw(record.get("status")),
        created_at=_str_to_ts(record.get("createdAt")),
        updated_at=_str_to_ts(record.get("updatedAt")),
        description=None if description is None else str(description),
    )
