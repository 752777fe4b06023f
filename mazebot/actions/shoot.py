"""ShootAction — fire a short laser along the agent's front.

The beam covers up to ``shoot_range`` cells. Off-grid cells are skipped.
A monster on the beam is hit before the wall check; the beam stops on the
hit or on the first wall (the wall cell is still drawn).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from mazebot.actions.base import ActionOutcome, spend_fuel
from mazebot.core.enums import ActionType, CellKind, EffectKind, HitMode
from mazebot.core.orientation import relative_position

if TYPE_CHECKING:
    from mazebot.config import SimulationConfig
    from mazebot.core.world_state import WorldState

logger = logging.getLogger(__name__)


class ShootAction:
    """Stateless handler for SHOOT."""

    @staticmethod
    def apply(world: WorldState, config: SimulationConfig) -> ActionOutcome:
        outcome = ActionOutcome(ActionType.SHOOT)
        agent = world.agent
        monster = world.monster
        spend_fuel(agent, config.shoot_cost)
        outcome.log("shot", "Shot fired.")

        path: list[tuple[int, int]] = []
        for i in range(1, config.shoot_range + 1):
            target = relative_position(agent.pos, agent.orientation, i, 0)
            if not world.grid.in_bounds(target.row, target.col):
                continue
            path.append(target.as_tuple())
            if monster.active and target == monster.pos:
                if config.on_hit == HitMode.STUN:
                    monster.stun = config.stun_duration
                    outcome.log("monster", f"Monster stunned for {config.stun_duration} ticks!")
                else:
                    monster.remove()
                    outcome.log("monster", "Monster removed!")
                logger.debug("Laser hit monster at %s", target)
                break
            if world.grid.get(target) == CellKind.WALL:
                break

        outcome.effect(EffectKind.LASER, path)
        return outcome
