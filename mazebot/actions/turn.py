"""TurnAction — rotate in place."""

from __future__ import annotations

from typing import TYPE_CHECKING

from mazebot.actions.base import ActionOutcome, spend_fuel
from mazebot.core.enums import ActionType
from mazebot.core.orientation import turn_back, turn_left, turn_right

if TYPE_CHECKING:
    from mazebot.config import SimulationConfig
    from mazebot.core.world_state import WorldState

_ROTATIONS = {
    ActionType.TURN_LEFT: turn_left,
    ActionType.TURN_RIGHT: turn_right,
    ActionType.TURN_BACK: turn_back,
}


class TurnAction:
    """Stateless handler for TURN_LEFT / TURN_RIGHT / TURN_BACK."""

    @staticmethod
    def apply(world: WorldState, config: SimulationConfig, action: ActionType) -> ActionOutcome:
        agent = world.agent
        agent.orientation = _ROTATIONS[action](agent.orientation)
        spend_fuel(agent, config.turn_cost)
        return ActionOutcome(action, counted=True)
