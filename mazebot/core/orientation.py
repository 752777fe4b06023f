"""Orientation and agent-relative coordinate math.

The rotation table below is the single source of truth for every
directional computation: sensors, movement, shooting and the planner.

    heading | d_row   | d_col
    --------+---------+--------
    NORTH   | -front  | +right
    EAST    | +right  | +front
    SOUTH   | +front  | -right
    WEST    | -right  | -front
"""

from __future__ import annotations

from mazebot.core.enums import Orientation
from mazebot.core.models import Position


def normalize(orientation: int) -> Orientation:
    return Orientation(orientation % 4)


def relative_offset(orientation: int, front: int, right: int) -> tuple[int, int]:
    """Return the absolute (d_row, d_col) for a (front, right) offset."""
    match normalize(orientation):
        case Orientation.NORTH:
            return (-front, right)
        case Orientation.EAST:
            return (right, front)
        case Orientation.SOUTH:
            return (front, -right)
        case Orientation.WEST:
            return (-right, -front)


def to_relative(orientation: int, d_row: int, d_col: int) -> tuple[int, int]:
    """Inverse of :func:`relative_offset`: absolute delta -> (front, right)."""
    match normalize(orientation):
        case Orientation.NORTH:
            return (-d_row, d_col)
        case Orientation.EAST:
            return (d_col, d_row)
        case Orientation.SOUTH:
            return (d_row, -d_col)
        case Orientation.WEST:
            return (-d_col, -d_row)


def relative_position(pos: Position, orientation: int, front: int, right: int) -> Position:
    d_row, d_col = relative_offset(orientation, front, right)
    return Position(pos.row + d_row, pos.col + d_col)


def turn_left(orientation: int) -> Orientation:
    return normalize(orientation - 1)


def turn_right(orientation: int) -> Orientation:
    return normalize(orientation + 1)


def turn_back(orientation: int) -> Orientation:
    return normalize(orientation + 2)
