"""Core data models: Position, Agent, Monster."""

from __future__ import annotations

from dataclasses import dataclass

from mazebot.core.enums import Orientation


@dataclass(frozen=True, slots=True)
class Position:
    """Immutable (row, col) grid coordinate."""

    row: int = 0
    col: int = 0

    def as_tuple(self) -> tuple[int, int]:
        return (self.row, self.col)

    def __repr__(self) -> str:
        return f"({self.row}, {self.col})"


# Off-grid marker for a removed / absent monster
REMOVED = Position(-1, -1)


@dataclass(slots=True)
class Agent:
    """The scripted agent. Exactly one per run."""

    pos: Position
    orientation: Orientation = Orientation.EAST
    fuel: int = 100
    alive: bool = True
    won: bool = False

    def copy(self) -> Agent:
        return Agent(
            pos=self.pos,
            orientation=self.orientation,
            fuel=self.fuel,
            alive=self.alive,
            won=self.won,
        )


@dataclass(slots=True)
class Monster:
    """The adversary. ``pos == REMOVED`` means inactive."""

    pos: Position = REMOVED
    stun: int = 0
    static: bool = False

    @property
    def active(self) -> bool:
        return self.pos != REMOVED

    def remove(self) -> None:
        self.pos = REMOVED
        self.stun = 0

    def copy(self) -> Monster:
        return Monster(pos=self.pos, stun=self.stun, static=self.static)
