"""End-to-end tests for the tick loop: scripts, terminal states, replay."""

import sys
import os
import json

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from mazebot.ai.script import ScriptError, compile_script
from mazebot.config import SimulationConfig
from mazebot.core.enums import ActionType, Orientation, RunStatus
from mazebot.core.levels import LEVELS
from mazebot.core.models import Position
from mazebot.core.scoring import efficiency
from mazebot.core.world_state import WorldState
from mazebot.engine.world_loop import WorldLoop
from mazebot.utils.replay import ReplayRecorder

WALL_FOLLOWER = """
if sensor.front == "wall":
    turn_right()
else:
    move_front()
"""


def _level_one(logic=None, **overrides) -> WorldLoop:
    config = SimulationConfig(**overrides)
    world = WorldState.from_level(LEVELS[1], config)
    return WorldLoop(config, world, logic=logic)


# ---------------------------------------------------------------------------
# Level 1 walkthrough
# ---------------------------------------------------------------------------

class TestLevelOne:
    def test_straight_run_wins(self):
        loop = _level_one(lambda percept: ActionType.MOVE_FRONT)
        loop.run()
        world = loop.world
        assert world.status == RunStatus.WON
        assert world.tick == 10
        assert world.actions_taken == 10
        assert world.agent.fuel == 90
        assert world.agent.pos == Position(7, 12)
        assert efficiency(10, world.actions_taken) == 100

    def test_compiled_script_wins(self):
        loop = _level_one(compile_script(WALL_FOLLOWER))
        loop.run()
        assert loop.world.status == RunStatus.WON
        assert loop.world.actions_taken == 10

    def test_win_event_on_last_tick(self):
        loop = _level_one(lambda percept: "move")
        while loop.tick_once():
            pass
        assert [e.category for e in loop.tick_events] == ["win"]
        assert loop.tick_events[0].tick == 9

    def test_no_ticks_after_terminal(self):
        loop = _level_one(lambda percept: "move")
        loop.run()
        assert loop.tick_once() is False
        assert loop.world.tick == 10

    def test_last_percept_is_recorded(self):
        loop = _level_one(lambda percept: None)
        assert loop.last_percept is None
        loop.tick_once()
        assert loop.last_percept["front"] == "empty"
        assert loop.last_outcome.action == ActionType.WAIT


# ---------------------------------------------------------------------------
# Script faults and limits
# ---------------------------------------------------------------------------

class TestLoopGuards:
    def test_script_fault_leaves_world_untouched(self):
        loop = _level_one(compile_script("move_front()\nraise ValueError('boom')"))
        with pytest.raises(ScriptError, match="boom"):
            loop.tick_once()
        world = loop.world
        assert world.tick == 0
        assert world.agent.fuel == 100
        assert world.agent.pos == Position(7, 2)
        assert world.status == RunStatus.RUNNING

    def test_loop_resumes_after_script_replaced(self):
        loop = _level_one(compile_script("1 / 0"))
        with pytest.raises(ScriptError):
            loop.tick_once()
        loop.logic = compile_script("turn_left()")
        assert loop.tick_once()
        assert loop.world.agent.orientation == Orientation.NORTH

    def test_missing_logic(self):
        loop = _level_one()
        with pytest.raises(RuntimeError):
            loop.tick_once()

    def test_max_ticks(self):
        loop = _level_one(lambda percept: None, max_ticks=5)
        loop.run()
        assert loop.world.tick == 5
        assert loop.world.status == RunStatus.RUNNING
        assert loop.world.agent.fuel == 95


# ---------------------------------------------------------------------------
# Replay
# ---------------------------------------------------------------------------

class TestReplay:
    def test_replay_written_on_run(self, tmp_path):
        path = tmp_path / "replays" / "run.json"
        config = SimulationConfig()
        world = WorldState.from_level(LEVELS[1], config)
        recorder = ReplayRecorder(path, level_id=1)
        loop = WorldLoop(config, world, logic=lambda p: "move", recorder=recorder)
        loop.run()

        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["level"] == 1
        assert data["total_ticks"] == 10
        assert data["ticks"][0]["action"] == "MOVE_FRONT"
        assert data["ticks"][0]["agent"]["pos"] == [7, 3]
        assert data["ticks"][-1]["status"] == "WON"
        assert data["ticks"][0]["monster"] is None

    def test_replay_flushed_on_script_fault(self, tmp_path):
        path = tmp_path / "fault.json"
        config = SimulationConfig()
        world = WorldState.from_level(LEVELS[1], config)
        recorder = ReplayRecorder(path, level_id=1)
        calls = []

        def logic(percept):
            calls.append(percept)
            if len(calls) > 2:
                raise RuntimeError("stop")
            return "move"

        loop = WorldLoop(config, world, logic=logic, recorder=recorder)
        with pytest.raises(ScriptError):
            loop.run()
        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["total_ticks"] == 2
