# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from task_tracker.core.state import AppState
from task_tracker.tasks.task_store import TaskStore

from .fakes import FakeClock, RecordingSink


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and any local .env.
    """
    return SimpleNamespace(
        app_name="task-tracker-test",
        log_level="DEBUG",
        log_to_file=False,
        data_dir=tmp_path / "data",
        sink="json",
        sink_path=tmp_path / "data" / "tasks.json",
        storage_key="tasks",
    )


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture()
def store(sink: RecordingSink, clock: FakeClock) -> TaskStore:
    return TaskStore(sink, clock=clock)


@pytest.fixture()
def state(settings: SimpleNamespace, sink: RecordingSink, store: TaskStore) -> AppState:
    """AppState over the recording sink (no files touched)."""
    return AppState(settings=settings, sink=sink, task_store=store)
