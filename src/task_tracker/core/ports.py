# src/task_tracker/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The store depends on a KeyValueSink Protocol instead of a concrete medium,
and the interactive layer depends on TaskRepo instead of TaskStore.
This keeps storage swappable and makes testing easier.
"""

from typing import Any, Protocol


class KeyValueSink(Protocol):
    """Opaque get/set-by-key storage holding whole text values."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class TaskRepo(Protocol):
    # Mutations (each one persists the whole collection)
    def add_task(self, task: Any) -> Any: ...
    def update_task(self, task_id: int, changes: Any) -> Any: ...
    def delete_task(self, task_id: int) -> int: ...

    # Lookups
    def get_task(self, task_id: int) -> Any | None: ...
    def list_by_status(self, status: Any) -> list[Any]: ...
    def list_tasks(self) -> list[Any]: ...
    def count_tasks(self) -> int: ...

    # Store clock (aware datetime)
    def now(self) -> Any: ...

    # Sink sync
    def persist(self) -> None: ...
    def restore(self) -> bool: ...
