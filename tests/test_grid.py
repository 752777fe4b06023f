"""Tests for the maze grid and orientation math."""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from mazebot.core.enums import CellKind, Orientation
from mazebot.core.grid import Grid
from mazebot.core.models import Position
from mazebot.core.orientation import (
    normalize,
    relative_offset,
    relative_position,
    to_relative,
    turn_back,
    turn_left,
    turn_right,
)


def _grid() -> Grid:
    return Grid.from_template(
        [
            [1, 1, 1, 1, 1],
            [1, 4, 0, 3, 1],
            [1, 0, 2, 5, 1],
            [1, 1, 1, 1, 1],
        ],
        size=5,
    )


# ---------------------------------------------------------------------------
# Grid
# ---------------------------------------------------------------------------

class TestGrid:
    def test_out_of_bounds_reads_as_wall(self):
        g = _grid()
        assert g.kind_at(-1, 0) == CellKind.WALL
        assert g.kind_at(0, 5) == CellKind.WALL
        assert g.kind_at(99, 99) == CellKind.WALL
        assert not g.in_bounds(5, 0)

    def test_template_is_padded_with_walls(self):
        g = _grid()
        # template has 4 rows; row 4 is not covered
        assert g.kind_at(4, 2) == CellKind.WALL
        assert g.kind_at(1, 2) == CellKind.EMPTY
        assert g.get(Position(2, 3)) == CellKind.GOAL

    def test_consume_gas_once(self):
        g = _grid()
        assert g.consume_gas(1, 3) is True
        assert g.kind_at(1, 3) == CellKind.EMPTY
        assert g.consume_gas(1, 3) is False

    def test_consume_gas_ignores_other_cells(self):
        g = _grid()
        assert g.consume_gas(2, 3) is False
        assert g.kind_at(2, 3) == CellKind.GOAL

    def test_passable(self):
        g = _grid()
        assert g.is_passable(1, 3)      # gas
        assert g.is_passable(2, 3)      # goal
        assert g.is_passable(1, 1)      # start
        assert not g.is_passable(2, 2)  # hole
        assert not g.is_passable(0, 0)  # wall
        assert not g.is_passable(-1, 1)

    def test_goal_cells(self):
        assert _grid().goal_cells() == [Position(2, 3)]

    def test_copy_is_independent(self):
        g = _grid()
        clone = g.copy()
        g.consume_gas(1, 3)
        assert clone.kind_at(1, 3) == CellKind.GAS

    def test_to_rows(self):
        rows = _grid().to_rows()
        assert len(rows) == 5
        assert rows[1] == [1, 4, 0, 3, 1]
        assert rows[4] == [1, 1, 1, 1, 1]


# ---------------------------------------------------------------------------
# Orientation
# ---------------------------------------------------------------------------

class TestOrientation:
    @pytest.mark.parametrize(
        "heading, expected",
        [
            (Orientation.NORTH, (-1, 0)),
            (Orientation.EAST, (0, 1)),
            (Orientation.SOUTH, (1, 0)),
            (Orientation.WEST, (0, -1)),
        ],
    )
    def test_front_offset(self, heading, expected):
        assert relative_offset(heading, 1, 0) == expected

    @pytest.mark.parametrize(
        "heading, expected",
        [
            (Orientation.NORTH, (0, 1)),
            (Orientation.EAST, (1, 0)),
            (Orientation.SOUTH, (0, -1)),
            (Orientation.WEST, (-1, 0)),
        ],
    )
    def test_right_offset(self, heading, expected):
        assert relative_offset(heading, 0, 1) == expected

    def test_to_relative_inverts_relative_offset(self):
        for heading in Orientation:
            for front in range(-2, 3):
                for right in range(-2, 3):
                    d_row, d_col = relative_offset(heading, front, right)
                    assert to_relative(heading, d_row, d_col) == (front, right)

    def test_relative_position(self):
        pos = relative_position(Position(3, 3), Orientation.WEST, 2, 1)
        assert pos == Position(2, 1)

    def test_turns(self):
        assert turn_left(Orientation.NORTH) == Orientation.WEST
        assert turn_right(Orientation.WEST) == Orientation.NORTH
        assert turn_back(Orientation.EAST) == Orientation.WEST
        assert turn_back(turn_back(Orientation.SOUTH)) == Orientation.SOUTH

    def test_normalize_wraps(self):
        assert normalize(-1) == Orientation.WEST
        assert normalize(6) == Orientation.SOUTH
