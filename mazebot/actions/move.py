"""MoveAction — advance one cell toward the agent's front.

Walls (and the off-grid border, which reads as wall) block the move and
cost a collision penalty. Otherwise the agent moves and the destination
cell's trigger fires: holes kill, gas refuels and is consumed, the goal
wins the run.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from mazebot.actions.base import ActionOutcome, spend_fuel
from mazebot.core.enums import ActionType, CellKind, EffectKind, RunStatus
from mazebot.core.orientation import relative_position

if TYPE_CHECKING:
    from mazebot.config import SimulationConfig
    from mazebot.core.world_state import WorldState

logger = logging.getLogger(__name__)

REASON_HOLE = "fell into a hole"
REASON_GOAL = "objective reached"


class MoveAction:
    """Stateless handler for MOVE_FRONT."""

    @staticmethod
    def apply(world: WorldState, config: SimulationConfig) -> ActionOutcome:
        outcome = ActionOutcome(ActionType.MOVE_FRONT)
        agent = world.agent
        dest = relative_position(agent.pos, agent.orientation, 1, 0)
        kind = world.grid.get(dest)

        if kind == CellKind.WALL:
            spend_fuel(agent, config.collision_cost)
            outcome.log("collision", f"Bumped into a wall at {dest} (-{config.collision_cost} fuel).")
            logger.debug("Agent blocked by wall at %s", dest)
            return outcome

        agent.pos = dest
        spend_fuel(agent, config.move_cost)
        outcome.counted = True

        match kind:
            case CellKind.HOLE:
                world.finish(RunStatus.DEAD, REASON_HOLE)
                outcome.log("death", f"Fell into a hole at {dest}.")
            case CellKind.GAS:
                world.grid.consume_gas(dest.row, dest.col)
                agent.fuel = min(config.max_fuel, agent.fuel + config.gas_refuel)
                outcome.log("pickup", f"Gas collected (+{config.gas_refuel}).")
                outcome.effect(EffectKind.PICKUP, [dest.as_tuple()])
            case CellKind.GOAL:
                world.finish(RunStatus.WON, REASON_GOAL)
                outcome.log("win", "Objective reached!")

        return outcome
