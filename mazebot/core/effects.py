"""Transient visual effects (pickup sparkle, laser path).

Effects are pure output for the presentation layer. Each record carries
a wall-clock expiry and is pruned lazily whenever the tracker is read,
so nothing in the tick loop ever waits on them.
"""

from __future__ import annotations

import itertools
import threading
import time
from dataclasses import dataclass
from typing import Callable

from mazebot.core.enums import EffectKind


@dataclass(frozen=True, slots=True)
class EffectRecord:
    row: int
    col: int
    id: int
    kind: EffectKind
    expires_at: float


class EffectTracker:
    """Fire-and-forget store of auto-expiring effect records."""

    __slots__ = ("_records", "_ids", "_lock", "_clock")

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._records: list[EffectRecord] = []
        self._ids = itertools.count(1)
        self._lock = threading.Lock()
        self._clock = clock

    def emit(self, kind: EffectKind, cells: list[tuple[int, int]], duration: float) -> list[EffectRecord]:
        """Add one record per cell, all expiring *duration* seconds from now."""
        expires_at = self._clock() + duration
        with self._lock:
            new = [
                EffectRecord(row=r, col=c, id=next(self._ids), kind=kind, expires_at=expires_at)
                for r, c in cells
            ]
            self._records.extend(new)
        return new

    def active(self) -> list[EffectRecord]:
        now = self._clock()
        with self._lock:
            self._records = [rec for rec in self._records if rec.expires_at > now]
            return list(self._records)

    def clear(self) -> None:
        with self._lock:
            self._records.clear()
