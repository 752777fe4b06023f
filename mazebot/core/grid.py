"""Grid / maze model."""

from __future__ import annotations

from typing import Iterator, Sequence

from mazebot.core.enums import CellKind
from mazebot.core.models import Position


class Grid:
    """Square cell grid backed by a flat list.

    Reads outside the grid report WALL. The only mutation after
    construction is gas pickup via :meth:`consume_gas`.
    """

    __slots__ = ("size", "_cells")

    def __init__(self, size: int, default: CellKind = CellKind.EMPTY) -> None:
        self.size = size
        self._cells: list[CellKind] = [default] * (size * size)

    @classmethod
    def from_template(cls, template: Sequence[Sequence[int]], size: int) -> Grid:
        """Build a fresh grid from a level template.

        Cells the template does not cover are WALL; anything beyond
        *size* is ignored.
        """
        grid = cls(size, default=CellKind.WALL)
        for r, row in enumerate(template[:size]):
            for c, value in enumerate(row[:size]):
                grid._cells[r * size + c] = CellKind(value)
        return grid

    # -- access --

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def kind_at(self, row: int, col: int) -> CellKind:
        if 0 <= row < self.size and 0 <= col < self.size:
            return self._cells[row * self.size + col]
        return CellKind.WALL

    def get(self, pos: Position) -> CellKind:
        return self.kind_at(pos.row, pos.col)

    def consume_gas(self, row: int, col: int) -> bool:
        """Turn a GAS cell into EMPTY. Returns True if something was consumed."""
        if self.kind_at(row, col) != CellKind.GAS:
            return False
        self._cells[row * self.size + col] = CellKind.EMPTY
        return True

    def is_passable(self, row: int, col: int) -> bool:
        """True for cells a planner may step onto (not WALL, not HOLE)."""
        return self.kind_at(row, col) not in (CellKind.WALL, CellKind.HOLE)

    def cells_of(self, kind: CellKind) -> Iterator[Position]:
        size = self.size
        for idx, cell in enumerate(self._cells):
            if cell == kind:
                yield Position(idx // size, idx % size)

    def goal_cells(self) -> list[Position]:
        return list(self.cells_of(CellKind.GOAL))

    # -- export --

    def to_rows(self) -> list[list[int]]:
        size = self.size
        return [
            [int(c) for c in self._cells[r * size:(r + 1) * size]]
            for r in range(size)
        ]

    # -- copy --

    def copy(self) -> Grid:
        new = Grid.__new__(Grid)
        new.size = self.size
        new._cells = list(self._cells)
        return new
