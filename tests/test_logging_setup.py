# tests/test_logging_setup.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from task_tracker.logging_setup import LOG_FILENAME, setup_logging


@pytest.fixture()
def restore_root_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)
    logging.captureWarnings(False)


def test_file_handler_captures_debug(tmp_path: Path, restore_root_logging) -> None:
    log_file = setup_logging(log_dir=tmp_path, console_level=logging.WARNING)

    assert log_file == tmp_path / LOG_FILENAME
    logging.getLogger("task_tracker.tests").debug("hello from test")
    for h in logging.getLogger().handlers:
        h.flush()

    assert "hello from test" in log_file.read_text("utf-8")


def test_console_filter_drops_third_party_noise(tmp_path: Path, restore_root_logging) -> None:
    assert setup_logging(log_dir=tmp_path, log_to_file=False) is None

    (console,) = logging.getLogger().handlers
    (noise_filter,) = console.filters

    def record(name: str, level: int) -> logging.LogRecord:
        return logging.LogRecord(name, level, __file__, 1, "msg", None, None)

    assert noise_filter.filter(record("task_tracker.tasks.task_store", logging.INFO))
    assert not noise_filter.filter(record("urllib3", logging.WARNING))
    assert noise_filter.filter(record("urllib3", logging.ERROR))
    assert not noise_filter.filter(record("py.warnings", logging.WARNING))
