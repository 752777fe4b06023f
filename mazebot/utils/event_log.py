"""Thread-safe capped log of simulation events exposed via the API."""

from __future__ import annotations

import threading
from collections import deque
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SimEvent:
    """A single human-readable event for the log feed."""

    tick: int
    category: str
    message: str


class EventLog:
    """Capped event log, newest first.

    Once ``capacity`` entries are held, each append drops the oldest one.
    Thread-safe via a simple lock — the tick thread writes, the API reads.
    """

    __slots__ = ("_buffer", "_lock")

    def __init__(self, capacity: int = 20) -> None:
        self._buffer: deque[SimEvent] = deque(maxlen=capacity)
        self._lock = threading.Lock()

    @property
    def capacity(self) -> int:
        return self._buffer.maxlen or 0

    def append(self, event: SimEvent) -> None:
        with self._lock:
            self._buffer.appendleft(event)

    def append_many(self, events: list[SimEvent]) -> None:
        """Append in emission order, so the last event ends up newest."""
        with self._lock:
            for event in events:
                self._buffer.appendleft(event)

    def since_tick(self, tick: int) -> list[SimEvent]:
        """Return held events with tick >= *tick*, newest first."""
        with self._lock:
            return [e for e in self._buffer if e.tick >= tick]

    def latest(self, count: int | None = None) -> list[SimEvent]:
        """Return the *count* most recent events, newest first."""
        with self._lock:
            items = list(self._buffer)
        return items if count is None else items[:count]

    def clear(self) -> None:
        with self._lock:
            self._buffer.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._buffer)
