# src/task_tracker/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local (gitignored) data directory exists,
- opens the configured sink and wires a TaskStore over it,
- restores previously persisted tasks.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..storage.sinks import open_sink
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    if settings.sink_path is not None:
        settings.sink_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    sink = open_sink(settings.sink, settings.sink_path)
    store = TaskStore(sink, key=settings.storage_key)
    store.restore()

    logger.info(
        "TaskStore ready sink=%s path=%s key=%s total=%d",
        settings.sink,
        settings.sink_path,
        settings.storage_key,
        store.count_tasks(),
    )
    return AppState(settings=settings, sink=sink, task_store=store)
