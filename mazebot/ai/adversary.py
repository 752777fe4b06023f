"""Monster pursuit policy — greedy single-axis chase."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from mazebot.core.enums import CellKind
from mazebot.core.models import Position

if TYPE_CHECKING:
    from mazebot.config import SimulationConfig
    from mazebot.core.world_state import WorldState

logger = logging.getLogger(__name__)


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def chase_step(monster: Position, target: Position) -> Position:
    """One greedy step toward *target* along the axis with the larger gap.

    Ties (including equal non-zero gaps) go to the column axis.
    """
    d_row = target.row - monster.row
    d_col = target.col - monster.col
    if abs(d_row) > abs(d_col):
        return Position(monster.row + _sign(d_row), monster.col)
    return Position(monster.row, monster.col + _sign(d_col))


class MonsterPolicy:
    """Decides whether the monster acts this tick and applies its step."""

    __slots__ = ("_config",)

    def __init__(self, config: SimulationConfig) -> None:
        self._config = config

    def should_move(self, world: WorldState) -> bool:
        monster = world.monster
        return (
            monster.active
            and not monster.static
            and world.running
            and monster.stun == 0
            and (world.tick + 1) % self._config.monster_move_interval == 0
        )

    def step(self, world: WorldState) -> bool:
        """Run the adversary phase. Returns True if the monster moved."""
        monster = world.monster
        if self.should_move(world):
            dest = chase_step(monster.pos, world.agent.pos)
            if world.grid.get(dest) in (CellKind.WALL, CellKind.HOLE):
                logger.debug("Monster blocked at %s", dest)
                return False
            monster.pos = dest
            return True
        if monster.stun > 0:
            monster.stun -= 1
        return False
