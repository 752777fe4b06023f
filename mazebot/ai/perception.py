"""Sensor model — what the agent perceives at the start of a tick.

Readings are computed fresh every tick from the current grid, monster
position and visited set. Nothing here mutates the world.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Mapping

from mazebot.core.enums import CellKind, SensorReading
from mazebot.core.orientation import relative_position

if TYPE_CHECKING:
    from mazebot.core.world_state import WorldState

# (front, right) offsets relative to the agent's heading
CARDINAL_OFFSETS: dict[str, tuple[int, int]] = {
    "front": (1, 0),
    "back": (-1, 0),
    "left": (0, -1),
    "right": (0, 1),
}

DIAGONAL_OFFSETS: dict[str, tuple[int, int]] = {
    "front_left": (1, -1),
    "front_right": (1, 1),
    "back_left": (-1, -1),
    "back_right": (-1, 1),
}

_KIND_READINGS: dict[CellKind, SensorReading] = {
    CellKind.WALL: SensorReading.WALL,
    CellKind.HOLE: SensorReading.HOLE,
    CellKind.GAS: SensorReading.GAS,
    CellKind.GOAL: SensorReading.GOAL,
}


@dataclass(frozen=True, slots=True)
class Percept:
    """Everything the turn logic may observe for one tick."""

    readings: Mapping[str, SensorReading]
    smell_gas: bool
    feel_breeze: bool

    def __getitem__(self, key: str) -> SensorReading:
        return self.readings[key]

    def __getattr__(self, name: str) -> SensorReading:
        # percept.front, percept.left, ... as shorthand for readings
        if name == "readings" or name.startswith("__"):
            raise AttributeError(name)
        try:
            return self.readings[name]
        except KeyError:
            raise AttributeError(name) from None


class Perception:
    """Stateless sensor utilities operating on the world."""

    __slots__ = ()

    @staticmethod
    def classify(world: WorldState, row: int, col: int) -> SensorReading:
        """Label one absolute cell by priority: bounds, monster, kind, visited."""
        if not world.grid.in_bounds(row, col):
            return SensorReading.WALL
        monster = world.monster
        if monster.active and monster.pos.row == row and monster.pos.col == col:
            return SensorReading.MONSTER
        reading = _KIND_READINGS.get(world.grid.kind_at(row, col))
        if reading is not None:
            return reading
        if world.is_visited(row, col):
            return SensorReading.VISITED
        return SensorReading.EMPTY

    @staticmethod
    def offsets(extended: bool = False) -> dict[str, tuple[int, int]]:
        if extended:
            return {**CARDINAL_OFFSETS, **DIAGONAL_OFFSETS}
        return dict(CARDINAL_OFFSETS)

    @classmethod
    def sense(cls, world: WorldState, extended: bool = False) -> Percept:
        agent = world.agent
        readings: dict[str, SensorReading] = {}
        smell_gas = False
        feel_breeze = False
        for name, (front, right) in cls.offsets(extended).items():
            pos = relative_position(agent.pos, agent.orientation, front, right)
            readings[name] = cls.classify(world, pos.row, pos.col)
            kind = world.grid.kind_at(pos.row, pos.col)
            if kind == CellKind.HOLE:
                feel_breeze = True
            elif kind == CellKind.GAS:
                smell_gas = True
        return Percept(
            readings=MappingProxyType(readings),
            smell_gas=smell_gas,
            feel_breeze=feel_breeze,
        )
