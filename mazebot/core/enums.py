"""Enumerations used throughout the engine."""

from __future__ import annotations

from enum import Enum, IntEnum, unique


@unique
class CellKind(IntEnum):
    """Cell contents on the maze grid (matches the level template integers)."""

    EMPTY = 0
    WALL = 1
    HOLE = 2
    GAS = 3
    START = 4
    GOAL = 5


@unique
class Orientation(IntEnum):
    """Agent heading. Turning is arithmetic modulo 4."""

    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3


@unique
class ActionType(IntEnum):
    """Actions a turn script can request."""

    WAIT = 0
    MOVE_FRONT = 1
    TURN_LEFT = 2
    TURN_RIGHT = 3
    TURN_BACK = 4
    SHOOT = 5


@unique
class RunStatus(IntEnum):
    """Action-resolver state machine."""

    RUNNING = 0
    DEAD = 1
    WON = 2


@unique
class HitMode(str, Enum):
    """What a laser hit does to the monster."""

    REMOVE = "remove"
    STUN = "stun"


@unique
class SensorReading(str, Enum):
    """Label a sensor reports for one relative cell."""

    EMPTY = "empty"
    WALL = "wall"
    HOLE = "hole"
    GAS = "gas"
    MONSTER = "monster"
    GOAL = "goal"
    VISITED = "visited"


@unique
class EffectKind(str, Enum):
    """Transient visual effect categories."""

    PICKUP = "pickup"
    LASER = "laser"
