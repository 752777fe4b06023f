"""Immutable snapshot of the world state for readers outside the tick loop."""

from __future__ import annotations

from dataclasses import dataclass

from mazebot.core.enums import RunStatus
from mazebot.core.grid import Grid
from mazebot.core.models import Agent, Monster
from mazebot.core.world_state import WorldState


@dataclass(frozen=True, slots=True)
class Snapshot:
    """Read-only copy of the world, safe to hand to the API thread."""

    tick: int
    level_id: int
    grid: Grid
    agent: Agent
    monster: Monster
    visited: frozenset[tuple[int, int]]
    explored: frozenset[tuple[int, int]]
    status: RunStatus
    reason: str | None
    actions_taken: int

    @classmethod
    def from_world(cls, world: WorldState) -> Snapshot:
        return cls(
            tick=world.tick,
            level_id=world.level_id,
            grid=world.grid.copy(),
            agent=world.agent.copy(),
            monster=world.monster.copy(),
            visited=frozenset(world.visited),
            explored=frozenset(world.explored),
            status=world.status,
            reason=world.reason,
            actions_taken=world.actions_taken,
        )
