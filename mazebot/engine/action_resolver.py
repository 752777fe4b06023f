"""Deterministic action resolution — the per-tick state machine.

Order inside one tick:
  1. Apply the requested action (move / turn / shoot / wait)
  2. Exploration update — visited cell + vision window
  3. Adversary step (parity, stun and static gated)
  4. Terminal evaluation — a win this tick short-circuits the death checks
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from mazebot.actions.base import ActionOutcome
from mazebot.actions.move import MoveAction
from mazebot.actions.shoot import ShootAction
from mazebot.actions.turn import TurnAction
from mazebot.actions.wait import WaitAction
from mazebot.ai.adversary import MonsterPolicy
from mazebot.core.enums import ActionType, RunStatus

if TYPE_CHECKING:
    from mazebot.config import SimulationConfig
    from mazebot.core.world_state import WorldState

logger = logging.getLogger(__name__)

REASON_MONSTER = "caught by the monster"
REASON_FUEL = "out of fuel"


class ActionResolver:
    """Applies one action per tick and evaluates the run's terminal state."""

    __slots__ = ("_config", "_monster_policy")

    def __init__(self, config: SimulationConfig) -> None:
        self._config = config
        self._monster_policy = MonsterPolicy(config)

    def resolve(self, world: WorldState, action: ActionType) -> ActionOutcome:
        if not world.running:
            logger.debug("Ignoring %s: run already over (%s)", action.name, world.status.name)
            return ActionOutcome(action)

        outcome = self._apply(world, action)
        if outcome.counted:
            world.actions_taken += 1

        world.mark_visited(world.agent.pos)
        world.explore(world.agent.pos, self._config.vision_radius)

        if self._monster_policy.step(world):
            logger.debug("Monster moved to %s", world.monster.pos)

        self._evaluate_terminal(world, outcome)
        return outcome

    # -- internals --

    def _apply(self, world: WorldState, action: ActionType) -> ActionOutcome:
        cfg = self._config
        match action:
            case ActionType.MOVE_FRONT:
                return MoveAction.apply(world, cfg)
            case ActionType.TURN_LEFT | ActionType.TURN_RIGHT | ActionType.TURN_BACK:
                return TurnAction.apply(world, cfg, action)
            case ActionType.SHOOT:
                return ShootAction.apply(world, cfg)
            case _:
                return WaitAction.apply(world, cfg)

    @staticmethod
    def _evaluate_terminal(world: WorldState, outcome: ActionOutcome) -> None:
        if world.status == RunStatus.WON:
            return
        if world.status == RunStatus.DEAD:
            # already dead from the move trigger (hole)
            return
        agent = world.agent
        if world.monster.active and agent.pos == world.monster.pos:
            world.finish(RunStatus.DEAD, REASON_MONSTER)
            outcome.log("death", "The monster caught you.")
        elif agent.fuel <= 0:
            world.finish(RunStatus.DEAD, REASON_FUEL)
            outcome.log("death", "Out of fuel.")
