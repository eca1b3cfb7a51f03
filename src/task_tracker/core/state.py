# src/task_tracker/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_store import TaskStore
from .ports import KeyValueSink


@dataclass
class AppState:
    # Store Settings on the state for easy access in other modules later.
    settings: object

    sink: KeyValueSink
    task_store: TaskStore
