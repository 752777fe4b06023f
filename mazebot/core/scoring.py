"""Efficiency scoring against the planner's optimal action count."""

from __future__ import annotations

import math
from dataclasses import dataclass


def efficiency(optimal: int, actual: int) -> int:
    """Percent efficiency, capped at 100. Zero when no action was taken yet."""
    if actual <= 0:
        return 0
    # half-up, not banker's rounding
    return min(100, math.floor(optimal * 100 / actual + 0.5))


@dataclass(frozen=True, slots=True)
class Score:
    optimal: int
    actual: int
    goal_reachable: bool

    @property
    def efficiency(self) -> int:
        return efficiency(self.optimal, self.actual)
