"""Core data models and world representation."""

from mazebot.core.enums import ActionType, CellKind, HitMode, Orientation, RunStatus, SensorReading
from mazebot.core.models import Agent, Monster, Position
from mazebot.core.grid import Grid
from mazebot.core.levels import LEVELS, Level
from mazebot.core.world_state import WorldState
from mazebot.core.snapshot import Snapshot

__all__ = [
    "ActionType",
    "Agent",
    "CellKind",
    "Grid",
    "HitMode",
    "LEVELS",
    "Level",
    "Monster",
    "Orientation",
    "Position",
    "RunStatus",
    "SensorReading",
    "Snapshot",
    "WorldState",
]
