"""WaitAction — the turn logic requested nothing."""

from __future__ import annotations

from typing import TYPE_CHECKING

from mazebot.actions.base import ActionOutcome, spend_fuel
from mazebot.core.enums import ActionType

if TYPE_CHECKING:
    from mazebot.config import SimulationConfig
    from mazebot.core.world_state import WorldState


class WaitAction:
    """Stateless handler for WAIT: idle fuel burn only."""

    @staticmethod
    def apply(world: WorldState, config: SimulationConfig) -> ActionOutcome:
        spend_fuel(world.agent, config.wait_cost)
        return ActionOutcome(ActionType.WAIT)
