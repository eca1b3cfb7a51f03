# src/task_tracker/storage/sinks.py

"""
Key-value sinks for whole-collection persistence.

All sinks store opaque text values under string keys. TaskStore writes one
JSON document under one key, so none of these need partial updates.
"""

from __future__ import annotations

import contextlib
import json
import logging
import os
import sqlite3
from pathlib import Path

from ..core.ports import KeyValueSink

logger = logging.getLogger(__name__)

SINK_KINDS = ("memory", "json", "sqlite")


class MemorySink:
    """Dict-backed sink; lives as long as the process."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class JsonFileSink:
    """
    One JSON object file: {"<key>": "<value>", ...}.

    Writes go to a temp file first and are moved into place with os.replace,
    so a crash mid-write leaves the previous file intact.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        logger.info("JsonFileSink ready path=%s", self._path)

    @property
    def path(self) -> Path:
        return self._path

    def _read_all(self, *, quarantine: bool = False) -> dict[str, str]:
        """
        Read the whole file. A corrupt file reads as empty; with quarantine=True
        it is also moved to `<name>.corrupt` so the next write cannot destroy it.
        """
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text("utf-8"))
        except (OSError, ValueError):
            logger.exception("Failed to read sink file %s; treating as empty.", self._path)
            data = None
        if not isinstance(data, dict):
            if data is not None:
                logger.warning(
                    "Sink file %s does not hold an object; treating as empty.", self._path
                )
            if quarantine:
                self._move_aside()
            return {}
        return {k: v for k, v in data.items() if isinstance(k, str) and isinstance(v, str)}

    def _move_aside(self) -> None:
        backup = self._path.with_suffix(self._path.suffix + ".corrupt")
        os.replace(self._path, backup)
        logger.warning("Moved unreadable sink file %s to %s", self._path, backup)

    def get(self, key: str) -> str | None:
        return self._read_all().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read_all(quarantine=True)
        data[key] = value
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        tmp.write_text(json.dumps(data, ensure_ascii=False, indent=2), "utf-8")
        os.replace(tmp, self._path)
        with contextlib.suppress(OSError):
            # Task titles may be personal; keep the file private on disk.
            os.chmod(self._path, 0o600)


class SqliteSink:
    """
    SQLite key-value table.

    Thread-safety:
    - each method opens its own SQLite connection
    """

    def __init__(self, db_path: str | Path) -> None:
        self._db_path = Path(db_path)
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._ensure_schema()
        logger.info("SqliteSink ready db=%s", self._db_path)

    @property
    def path(self) -> Path:
        return self._db_path

    def _get_conn(self) -> sqlite3.Connection:
        return sqlite3.connect(str(self._db_path), timeout=30.0)

    def _ensure_schema(self) -> None:
        conn = self._get_conn()
        try:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS kv (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL
                )
                """
            )
            conn.commit()
        finally:
            conn.close()

    def get(self, key: str) -> str | None:
        conn = self._get_conn()
        try:
            row = conn.execute("SELECT value FROM kv WHERE key = ?", (key,)).fetchone()
            return str(row[0]) if row else None
        finally:
            conn.close()

    def set(self, key: str, value: str) -> None:
        conn = self._get_conn()
        try:
            conn.execute(
                """
                INSERT INTO kv(key, value) VALUES (?, ?)
                ON CONFLICT(key) DO UPDATE SET value = excluded.value
                """,
                (key, value),
            )
            conn.commit()
        finally:
            conn.close()


def open_sink(kind: str, path: str | Path | None = None) -> KeyValueSink:
    kind = (kind or "").strip().lower()
    if kind == "memory":
        return MemorySink()
    if kind in ("json", "sqlite"):
        if path is None:
            raise ValueError(f"sink {kind!r} needs a path")
        return JsonFileSink(path) if kind == "json" else SqliteSink(path)
    raise ValueError(f"Unknown sink kind {kind!r}; expected one of: {', '.join(SINK_KINDS)}")
