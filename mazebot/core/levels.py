"""Level definitions and the built-in level catalog.

A level is immutable input: a square template of cell integers, the
agent start pose, an optional monster start and a static-monster flag.
Loading a level never shares the template with the running grid; the
engine builds a fresh ``Grid`` from it on every load/reset.

Key types:
  StartPose     — agent start (row, col, orientation)
  Level         — validated level blueprint (pydantic dataclass)
  LEVELS        — built-in catalog keyed by level id
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter, field_validator, model_validator
from pydantic.dataclasses import dataclass as pydantic_dataclass

from mazebot.core.enums import CellKind, Orientation
from mazebot.core.models import Position

_CELL_VALUES = frozenset(int(k) for k in CellKind)


@pydantic_dataclass(frozen=True)
class StartPose:
    row: int
    col: int
    orientation: int = Orientation.EAST

    @field_validator("orientation")
    @classmethod
    def _check_orientation(cls, value: int) -> int:
        if value not in (0, 1, 2, 3):
            raise ValueError("orientation must be 0 (N), 1 (E), 2 (S) or 3 (W)")
        return value


@pydantic_dataclass(frozen=True)
class Level:
    """Immutable level blueprint."""

    id: int
    title: str
    template: tuple[tuple[int, ...], ...]
    agent_start: StartPose
    description: str = ""
    monster_start: tuple[int, int] | None = None
    static_monster: bool = False

    @field_validator("template")
    @classmethod
    def _check_template(cls, value: tuple[tuple[int, ...], ...]) -> tuple[tuple[int, ...], ...]:
        if not value:
            raise ValueError("template must have at least one row")
        size = len(value)
        for r, row in enumerate(value):
            if len(row) != size:
                raise ValueError(f"template row {r} has {len(row)} cells, expected {size}")
            for c, cell in enumerate(row):
                if cell not in _CELL_VALUES:
                    raise ValueError(f"unknown cell value {cell} at ({r}, {c})")
        return value

    @model_validator(mode="after")
    def _check_start(self) -> Level:
        size = len(self.template)
        pose = self.agent_start
        if not (0 <= pose.row < size and 0 <= pose.col < size):
            raise ValueError(f"agent start ({pose.row}, {pose.col}) is outside the {size}x{size} grid")
        if self.template[pose.row][pose.col] == CellKind.WALL:
            raise ValueError(f"agent start ({pose.row}, {pose.col}) is inside a wall")
        if self.monster_start is not None:
            row, col = self.monster_start
            # negative coordinates mean "no monster"
            if row >= 0 and col >= 0:
                if not (row < size and col < size):
                    raise ValueError(f"monster start ({row}, {col}) is outside the {size}x{size} grid")
                if self.template[row][col] == CellKind.WALL:
                    raise ValueError(f"monster start ({row}, {col}) is inside a wall")
        return self

    @property
    def size(self) -> int:
        return len(self.template)

    @property
    def agent_start_pos(self) -> Position:
        return Position(self.agent_start.row, self.agent_start.col)

    @property
    def monster_start_pos(self) -> Position | None:
        if self.monster_start is None:
            return None
        row, col = self.monster_start
        if row < 0 or col < 0:
            return None
        return Position(row, col)


_level_ta = TypeAdapter(Level)
_level_list_ta = TypeAdapter(list[Level])


def parse_level(data: dict[str, Any]) -> Level:
    """Validate a level from plain data (raises pydantic ``ValidationError``)."""
    return _level_ta.validate_python(data)


def load_levels(path: str | Path) -> dict[int, Level]:
    """Load levels from a JSON file.

    Accepts either ``{"levels": [...]}`` or a single level object.
    """
    raw = json.loads(Path(path).read_text(encoding="utf-8"))
    if isinstance(raw, dict) and "levels" in raw:
        levels = _level_list_ta.validate_python(raw["levels"])
    else:
        levels = [parse_level(raw)]
    return {lvl.id: lvl for lvl in levels}


def dump_level(level: Level) -> dict[str, Any]:
    return _level_ta.dump_python(level, mode="json")


def _rows(*rows: str) -> tuple[tuple[int, ...], ...]:
    return tuple(tuple(int(ch) for ch in row) for row in rows)


# ---------------------------------------------------------------------------
# Built-in catalog
# ---------------------------------------------------------------------------

_CENTRE_MAZE_BORDER = "111111111111111"

LEVELS: dict[int, Level] = {
    1: Level(
        id=1,
        title="Level 1: The Final Stretch",
        description="Learn to move. Reach the green goal.",
        agent_start=StartPose(7, 2, Orientation.EAST),
        template=_rows(
            "111111111111111",
            "100000000000001",
            "101111111111101",
            "101111111111101",
            "101111111111101",
            "101111111111101",
            "101111111111101",
            "104000000000501",
            "101111111111101",
            "101111111111101",
            "101111111111101",
            "101111111111101",
            "101111111111101",
            "100000000000001",
            "111111111111111",
        ),
    ),
    2: Level(
        id=2,
        title="Level 2: The Zig Zag",
        description="A single winding path. Sense the walls and turn.",
        agent_start=StartPose(2, 2, Orientation.EAST),
        template=_rows(
            "111111111111111",
            "111111111111111",
            "114000000000111",
            "111111111110111",
            "110000000000111",
            "110111111111111",
            "110000000000111",
            "111111111110111",
            "110000000000111",
            "110111111111111",
            "110000000000511",
            "111111111111111",
            "111111111111111",
            "111111111111111",
            "111111111111111",
        ),
    ),
    3: Level(
        id=3,
        title="Level 3: Memory Maze",
        description="The goal is in the centre. Use 'visited' to avoid endless loops.",
        agent_start=StartPose(1, 1, Orientation.EAST),
        template=_rows(
            _CENTRE_MAZE_BORDER,
            "140000010000001",
            "101111010111101",
            "101000000000101",
            "101011101110101",
            "100010000010001",
            "111010101010111",
            "100000050000001",
            "111010101010111",
            "100010000010001",
            "101011101110101",
            "101000000000101",
            "101111010111101",
            "100000010000001",
            _CENTRE_MAZE_BORDER,
        ),
    ),
    4: Level(
        id=4,
        title="Level 4: Danger in the Centre",
        description="A central maze with holes and gas. Watch your step!",
        agent_start=StartPose(1, 1, Orientation.EAST),
        template=_rows(
            _CENTRE_MAZE_BORDER,
            "140200010002301",
            "101111010111101",
            "101302000200101",
            "101011101110101",
            "100012000210001",
            "111010101010111",
            "130000050000031",
            "111010101010111",
            "100012000210001",
            "101011101110101",
            "101000200020101",
            "101111010111101",
            "100300010003001",
            _CENTRE_MAZE_BORDER,
        ),
    ),
    5: Level(
        id=5,
        title="Level 5: The Static Guardian",
        description="A motionless monster blocks the way. Shoot to get through!",
        agent_start=StartPose(1, 1, Orientation.EAST),
        monster_start=(7, 7),
        static_monster=True,
        template=_rows(
            _CENTRE_MAZE_BORDER,
            "140002030200031",
            "101111010111101",
            "101300000000101",
            "101011101110101",
            "100012000210001",
            "111010101010111",
            "130000050000031",
            "111010101010111",
            "100012000210001",
            "101011101110101",
            "101000000000101",
            "101111010111101",
            "103000030000001",
            _CENTRE_MAZE_BORDER,
        ),
    ),
}
