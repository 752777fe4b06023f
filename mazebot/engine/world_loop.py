"""WorldLoop — the authoritative tick engine for one level run.

Phase cycle:
  1. Sense — build the percept from the current world
  2. Decide — invoke the turn logic once, get exactly one action
  3. Resolve — apply the action, adversary step, terminal evaluation
  4. Publish — tick events, transient effects, replay frame; advance tick

A script fault in phase 2 propagates as ``ScriptError`` before anything
is mutated, so the world stays at the last completed tick.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from mazebot.ai.perception import Percept, Perception
from mazebot.ai.script import ScriptExecutor
from mazebot.core.enums import EffectKind, RunStatus
from mazebot.core.snapshot import Snapshot
from mazebot.engine.action_resolver import ActionResolver
from mazebot.utils.event_log import SimEvent

if TYPE_CHECKING:
    from mazebot.actions.base import ActionOutcome
    from mazebot.ai.script import ActionLike, TurnLogic
    from mazebot.config import SimulationConfig
    from mazebot.core.effects import EffectTracker
    from mazebot.core.world_state import WorldState
    from mazebot.utils.replay import ReplayRecorder

logger = logging.getLogger(__name__)


class WorldLoop:
    """Single-threaded, one-tick-at-a-time driver of a WorldState."""

    __slots__ = (
        "_config",
        "_world",
        "_resolver",
        "_effects",
        "_recorder",
        "_last_outcome",
        "_last_percept",
        "_tick_events",
        "logic",
    )

    def __init__(
        self,
        config: SimulationConfig,
        world: WorldState,
        logic: TurnLogic | Callable[[Percept], ActionLike] | None = None,
        effects: EffectTracker | None = None,
        recorder: ReplayRecorder | None = None,
    ) -> None:
        self._config = config
        self._world = world
        self._resolver = ActionResolver(config)
        self._effects = effects
        self._recorder = recorder
        self._last_outcome: ActionOutcome | None = None
        self._last_percept: Percept | None = None
        self._tick_events: list[SimEvent] = []
        self.logic = logic

    @property
    def world(self) -> WorldState:
        return self._world

    @property
    def last_outcome(self) -> ActionOutcome | None:
        """Outcome of the most recent completed tick."""
        return self._last_outcome

    @property
    def last_percept(self) -> Percept | None:
        return self._last_percept

    @property
    def tick_events(self) -> list[SimEvent]:
        """Events emitted during the most recent tick."""
        return self._tick_events

    def can_continue(self) -> bool:
        world = self._world
        return (
            world.status == RunStatus.RUNNING
            and world.agent.fuel > 0
            and world.tick < self._config.max_ticks
        )

    def tick_once(self) -> bool:
        """Execute a single tick. Returns False if the run should stop.

        Raises ``ScriptError`` if the turn logic fails; the world is left
        untouched in that case.
        """
        if not self.can_continue():
            return False
        if self.logic is None:
            raise RuntimeError("No turn logic loaded.")

        self._tick_events = []
        world = self._world
        tick = world.tick

        percept = Perception.sense(world, self._config.extended_sensors)
        action = ScriptExecutor.invoke(self.logic, percept)
        self._last_percept = percept

        outcome = self._resolver.resolve(world, action)
        self._last_outcome = outcome

        for category, message in outcome.events:
            self._emit(tick, category, message)
        self._publish_effects(outcome)

        logger.debug(
            "Tick %d: %s -> pos=%s dir=%s fuel=%d status=%s",
            tick, action.name, world.agent.pos, world.agent.orientation.name,
            world.agent.fuel, world.status.name,
        )
        if self._recorder:
            self._recorder.record_tick(tick, action, world)

        world.tick += 1
        return self.can_continue()

    def create_snapshot(self) -> Snapshot:
        """Create an immutable snapshot of the current world state."""
        return Snapshot.from_world(self._world)

    def run(self) -> None:
        """Execute ticks until the run ends or max_ticks is reached."""
        logger.info("=== Run started (level=%d) ===", self._world.level_id)
        try:
            while self.tick_once():
                pass
        finally:
            if self._recorder:
                self._recorder.flush()
        logger.info(
            "=== Run finished at tick %d: %s (%s) ===",
            self._world.tick, self._world.status.name, self._world.reason or "no terminal state",
        )

    # -- internals --

    def _emit(self, tick: int, category: str, message: str) -> None:
        self._tick_events.append(SimEvent(tick=tick, category=category, message=message))

    def _publish_effects(self, outcome: ActionOutcome) -> None:
        if self._effects is None:
            return
        for kind, cells in outcome.effects:
            if kind == EffectKind.LASER:
                duration = self._config.laser_effect_seconds
            else:
                duration = self._config.pickup_effect_seconds
            self._effects.emit(kind, cells, duration)
