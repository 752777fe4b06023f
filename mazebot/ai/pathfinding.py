"""Breadth-first optimal-action planner over (row, col, orientation).

Used once per level load to score the player's run. Every action costs
one, so the first time BFS dequeues a GOAL cell it has the minimum
number of actions. A turn-back counts as a single action, matching the
capability set scripts can call.

Usage:
    planner = Planner(grid)
    planner.find_optimal_actions(start, orientation)   # int or None
    planner.optimal_action_count(start, orientation)   # int, 0 if unreachable
"""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING

from mazebot.core.enums import CellKind
from mazebot.core.orientation import relative_offset, turn_back, turn_left, turn_right

if TYPE_CHECKING:
    from mazebot.core.grid import Grid
    from mazebot.core.models import Position

_TURNS = (turn_left, turn_right, turn_back)


class Planner:
    """BFS planner operating on a level's freshly loaded grid.

    Advancing is rejected into WALL, HOLE or off-grid cells. GAS cells are
    treated as ordinary floor.
    """

    __slots__ = ("_grid",)

    def __init__(self, grid: Grid) -> None:
        self._grid = grid

    def find_optimal_actions(self, start: Position, orientation: int) -> int | None:
        """Minimum action count from the start pose to any GOAL, or None."""
        grid = self._grid
        start_state = (start.row, start.col, orientation % 4)
        seen: set[tuple[int, int, int]] = {start_state}
        queue: deque[tuple[int, int, int, int]] = deque([(*start_state, 0)])

        while queue:
            r, c, d, cost = queue.popleft()
            if grid.kind_at(r, c) == CellKind.GOAL:
                return cost

            d_row, d_col = relative_offset(d, 1, 0)
            successors = [(r + d_row, c + d_col, d)]
            successors.extend((r, c, int(turn(d))) for turn in _TURNS)

            for state in successors:
                nr, nc, _ = state
                if state in seen or not grid.is_passable(nr, nc):
                    continue
                seen.add(state)
                queue.append((*state, cost + 1))

        return None

    def optimal_action_count(self, start: Position, orientation: int) -> int:
        """Scoring-facing value: unreachable goals report 0."""
        result = self.find_optimal_actions(start, orientation)
        return 0 if result is None else result
