"""AI layer: sensors, turn-logic contract, monster policy and planner."""

from mazebot.ai.adversary import MonsterPolicy
from mazebot.ai.pathfinding import Planner
from mazebot.ai.perception import Percept, Perception
from mazebot.ai.script import (
    ActionAlreadyChosenError,
    Actions,
    CapabilityLogic,
    ScriptError,
    ScriptExecutor,
    compile_script,
)

__all__ = [
    "ActionAlreadyChosenError",
    "Actions",
    "CapabilityLogic",
    "MonsterPolicy",
    "Percept",
    "Perception",
    "Planner",
    "ScriptError",
    "ScriptExecutor",
    "compile_script",
]
