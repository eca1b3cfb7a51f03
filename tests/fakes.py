# tests/fakes.py

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone

from task_tracker.core.ports import KeyValueSink


class FakeClock:
    """
    Deterministic clock for unit tests.

    - Each call returns the current time, then moves forward by `step`
    - `rewind()` lets a test simulate the wall clock jumping backwards
    """

    def __init__(
        self,
        start: datetime = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc),
        step: timedelta = timedelta(seconds=1),
    ) -> None:
        self.current = start
        self.step = step

    def __call__(self) -> datetime:
        now = self.current
        self.current = self.current + self.step
        return now

    def rewind(self, delta: timedelta) -> None:
        self.current = self.current - delta


@dataclass(slots=True)
class RecordingSink(KeyValueSink):
    """
    In-memory KeyValueSink that remembers every write for assertions.
    """

    data: dict[str, str] = field(default_factory=dict)
    writes: list[tuple[str, str]] = field(default_factory=list)

    def get(self, key: str) -> str | None:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.writes.append((key, value))
        self.data[key] = value
