"""EngineManager — the turn scheduler, running the WorldLoop on a background thread.

The API reads from an atomically-swapped immutable Snapshot; the WorldLoop
mutates WorldState only inside a tick, and ticks are serialized by a lock
so a manual step never overlaps a scheduled one (Single-Writer preserved).
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Callable

from mazebot.ai.pathfinding import Planner
from mazebot.ai.script import ScriptError, compile_script
from mazebot.core.effects import EffectTracker
from mazebot.core.levels import LEVELS, Level
from mazebot.core.scoring import Score
from mazebot.core.snapshot import Snapshot
from mazebot.core.world_state import WorldState
from mazebot.engine.world_loop import WorldLoop
from mazebot.utils.event_log import EventLog, SimEvent

if TYPE_CHECKING:
    from mazebot.ai.perception import Percept
    from mazebot.ai.script import ActionLike, TurnLogic
    from mazebot.config import SimulationConfig

logger = logging.getLogger(__name__)


class EngineManager:
    """Manages one level session and its tick schedule.

    Provides thread-safe access to:
      - latest snapshot (atomic reference swap)
      - event log (lock-guarded, capped, newest first)
      - control commands (start / stop / step / reset / load level / speed)
    """

    def __init__(
        self,
        config: SimulationConfig,
        levels: dict[int, Level] | None = None,
        level_id: int | None = None,
    ) -> None:
        self._config = config
        self.config = config
        self._levels: dict[int, Level] = dict(levels or LEVELS)
        self._tick_rate: float = config.tick_interval_normal

        # Session (built in load_level)
        self._level: Level | None = None
        self._loop: WorldLoop | None = None
        self._optimal: int | None = None
        self._logic: TurnLogic | Callable[[Percept], ActionLike] | None = None
        self._script_source: str | None = None
        self._last_error: str | None = None

        # Thread-safe shared state
        self._snapshot_lock = threading.Lock()
        self._tick_lock = threading.Lock()
        self._latest_snapshot: Snapshot | None = None
        self._event_log = EventLog(config.log_capacity)
        self._effects = EffectTracker()

        # Control
        self._thread: threading.Thread | None = None
        self._running = threading.Event()
        self._stop_requested = threading.Event()

        self.load_level(level_id if level_id is not None else min(self._levels))

    # -- public properties --

    @property
    def running(self) -> bool:
        return self._running.is_set()

    @property
    def tick_rate(self) -> float:
        return self._tick_rate

    @property
    def fast(self) -> bool:
        return self._tick_rate == self._config.tick_interval_fast

    @property
    def event_log(self) -> EventLog:
        return self._event_log

    @property
    def effects(self) -> EffectTracker:
        return self._effects

    @property
    def levels(self) -> dict[int, Level]:
        return self._levels

    @property
    def level(self) -> Level:
        assert self._level is not None
        return self._level

    @property
    def script_source(self) -> str | None:
        return self._script_source

    @property
    def last_error(self) -> str | None:
        return self._last_error

    @property
    def loop(self) -> WorldLoop:
        assert self._loop is not None
        return self._loop

    # -- snapshot / score access --

    def get_snapshot(self) -> Snapshot | None:
        with self._snapshot_lock:
            return self._latest_snapshot

    def score(self) -> Score:
        snap = self.get_snapshot()
        actual = snap.actions_taken if snap else 0
        return Score(
            optimal=0 if self._optimal is None else self._optimal,
            actual=actual,
            goal_reachable=self._optimal is not None,
        )

    # -- session setup --

    def load_level(self, level_id: int) -> None:
        """Stop any run and rebuild the world fresh from the level template.

        Raises ``KeyError`` for an unknown id and ``ValueError`` if the level
        does not fit the configured grid; the current session is kept then.
        """
        level = self._levels.get(level_id)
        if level is None:
            raise KeyError(f"Unknown level {level_id}")
        world = WorldState.from_level(level, self._config)
        optimal = Planner(world.grid).find_optimal_actions(world.agent.pos, world.agent.orientation)

        self.stop()
        # a manual step must not straddle the swap
        with self._tick_lock:
            self._level = level
            self._optimal = optimal
            self._loop = WorldLoop(self._config, world, logic=self._logic, effects=self._effects)
            self._tick_rate = self._config.tick_interval_normal
            self._last_error = None
            self._effects.clear()
            self._event_log.clear()

            if optimal is None:
                self._log(0, "level", f"{level.title} loaded. Goal is unreachable from the start.")
            else:
                self._log(0, "level", f"{level.title} loaded. Estimated optimum: {optimal} actions.")
            self._publish_snapshot()
        logger.info("Loaded level %d (%s), optimal=%s", level.id, level.title, optimal)

    def reset(self) -> None:
        """Reload the current level; the loaded script is kept."""
        self.load_level(self.level.id)
        self._log(0, "control", "Simulation reset.")

    def set_script(self, source: str) -> None:
        """Compile and install user source. Raises ``ScriptError`` on syntax errors."""
        logic = compile_script(source)
        self._script_source = source
        self.set_logic(logic)

    def set_logic(self, logic: TurnLogic | Callable[[Percept], ActionLike]) -> None:
        """Install turn logic; takes effect from the next tick."""
        with self._tick_lock:
            self._logic = logic
            if self._loop is not None:
                self._loop.logic = logic
        self._last_error = None
        self._log(self._current_tick(), "script", "Script loaded.")

    def set_speed(self, fast: bool) -> None:
        self._tick_rate = self._config.tick_interval_fast if fast else self._config.tick_interval_normal
        logger.info("Tick interval set to %.2fs", self._tick_rate)

    # -- lifecycle --

    def start(self) -> bool:
        """Begin scheduled ticks. Returns False if the run cannot proceed."""
        if self._running.is_set():
            return True
        if self._logic is None or not self.loop.can_continue():
            return False
        self._stop_requested.clear()
        self._running.set()
        self._thread = threading.Thread(target=self._run_loop, name="engine-loop", daemon=True)
        self._thread.start()
        logger.info("EngineManager started (tick_rate=%.3fs)", self._tick_rate)
        return True

    def stop(self) -> None:
        self._stop_requested.set()
        thread = self._thread
        if thread and thread.is_alive() and thread is not threading.current_thread():
            thread.join(timeout=5.0)
        self._running.clear()
        self._thread = None

    def step(self) -> bool:
        """Execute exactly one tick synchronously (only while not running)."""
        if self._running.is_set() or self._logic is None:
            return False
        before = self._current_tick()
        self._tick()
        return self._current_tick() > before

    # -- internals --

    def _run_loop(self) -> None:
        """Background thread main loop."""
        logger.info("Engine thread started.")
        while not self._stop_requested.is_set():
            if not self._tick():
                break
            # Rate limiting; wakes early on stop()
            self._stop_requested.wait(self._tick_rate)

        self._running.clear()
        logger.info("Engine thread exited at tick %d.", self._current_tick())

    def _tick(self) -> bool:
        """Run one tick under the tick lock. Returns True if more ticks may follow."""
        with self._tick_lock:
            loop = self.loop
            if not loop.can_continue():
                return False
            try:
                can_continue = loop.tick_once()
            except ScriptError as exc:
                self._last_error = str(exc)
                logger.warning("Script fault at tick %d: %s", loop.world.tick, exc)
                self._log(loop.world.tick, "script", f"Runtime error: {exc}")
                return False
            self._event_log.append_many(loop.tick_events)
            self._publish_snapshot()
        if not can_continue:
            world = loop.world
            logger.info("Run ended at tick %d: %s (%s)", world.tick, world.status.name, world.reason)
        return can_continue

    def _publish_snapshot(self) -> None:
        snap = self.loop.create_snapshot()
        with self._snapshot_lock:
            self._latest_snapshot = snap

    def _log(self, tick: int, category: str, message: str) -> None:
        self._event_log.append(SimEvent(tick=tick, category=category, message=message))

    def _current_tick(self) -> int:
        if self._loop:
            return self._loop.world.tick
        return 0
