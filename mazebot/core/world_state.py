"""Mutable authoritative world state — only mutated inside a tick."""

from __future__ import annotations

from typing import TYPE_CHECKING

from mazebot.core.enums import CellKind, Orientation, RunStatus
from mazebot.core.grid import Grid
from mazebot.core.models import Agent, Monster, Position

if TYPE_CHECKING:
    from mazebot.config import SimulationConfig
    from mazebot.core.levels import Level


class WorldState:
    """The single source of truth for one run of one level."""

    __slots__ = (
        "tick", "level_id", "grid", "agent", "monster",
        "visited", "explored", "status", "reason", "actions_taken",
    )

    def __init__(
        self,
        grid: Grid,
        agent: Agent,
        monster: Monster | None = None,
        level_id: int = 0,
    ) -> None:
        self.tick: int = 0
        self.level_id: int = level_id
        self.grid: Grid = grid
        self.agent: Agent = agent
        self.monster: Monster = monster if monster is not None else Monster()
        self.visited: set[tuple[int, int]] = set()
        self.explored: set[tuple[int, int]] = set()
        self.status: RunStatus = RunStatus.RUNNING
        self.reason: str | None = None
        self.actions_taken: int = 0

    @classmethod
    def from_level(cls, level: Level, config: SimulationConfig) -> WorldState:
        """Build a fresh world: grid copied from the template, agent at start.

        Smaller templates are padded with walls. Raises ``ValueError`` if the
        template is larger than ``config.grid_size`` or a start cell would be
        off the grid or inside a wall.
        """
        if level.size > config.grid_size:
            raise ValueError(
                f"level {level.id} is {level.size}x{level.size}, "
                f"larger than the {config.grid_size}x{config.grid_size} grid"
            )
        grid = Grid.from_template(level.template, config.grid_size)
        starts = [("agent", level.agent_start_pos)]
        if level.monster_start_pos is not None:
            starts.append(("monster", level.monster_start_pos))
        for who, pos in starts:
            if not grid.in_bounds(pos.row, pos.col) or grid.get(pos) == CellKind.WALL:
                raise ValueError(f"level {level.id}: {who} start {pos} is not an open grid cell")

        agent = Agent(
            pos=level.agent_start_pos,
            orientation=Orientation(level.agent_start.orientation),
            fuel=config.max_fuel,
        )
        monster = Monster(static=level.static_monster)
        monster_pos = level.monster_start_pos
        if monster_pos is not None:
            monster.pos = monster_pos
        world = cls(grid=grid, agent=agent, monster=monster, level_id=level.id)
        world.mark_visited(agent.pos)
        world.explore(agent.pos, config.vision_radius)
        return world

    # -- status --

    @property
    def running(self) -> bool:
        return self.status == RunStatus.RUNNING

    def finish(self, status: RunStatus, reason: str) -> None:
        self.status = status
        self.reason = reason
        if status == RunStatus.DEAD:
            self.agent.alive = False
        elif status == RunStatus.WON:
            self.agent.won = True

    # -- exploration tracking --

    def mark_visited(self, pos: Position) -> None:
        self.visited.add(pos.as_tuple())

    def explore(self, pos: Position, radius: int = 1) -> None:
        """Union the in-bounds (2r+1)x(2r+1) window around *pos* into the explored set."""
        for r in range(pos.row - radius, pos.row + radius + 1):
            for c in range(pos.col - radius, pos.col + radius + 1):
                if self.grid.in_bounds(r, c):
                    self.explored.add((r, c))

    def is_visited(self, row: int, col: int) -> bool:
        return (row, col) in self.visited
