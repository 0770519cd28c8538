"""
Shared type definitions for the maze grid: directions, cells and the grid itself.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Direction(Enum):
    """Cardinal direction between orthogonally adjacent cells."""

    N = "N"  # Up (decreasing row)
    E = "E"  # Right (increasing col)
    S = "S"  # Down (increasing row)
    W = "W"  # Left (decreasing col)

    @property
    def delta(self) -> tuple[int, int]:
        """(row_delta, col_delta) for one step in this direction."""
        return _DELTAS[self]

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]


_DELTAS = {
    Direction.N: (-1, 0),
    Direction.E: (0, 1),
    Direction.S: (1, 0),
    Direction.W: (0, -1),
}

_OPPOSITES = {
    Direction.N: Direction.S,
    Direction.E: Direction.W,
    Direction.S: Direction.N,
    Direction.W: Direction.E,
}

# Order used whenever "all four directions" are walked.
DIRECTIONS: tuple[Direction, ...] = (Direction.N, Direction.E, Direction.S, Direction.W)


# =============================================================================
# Grid Definition Types
# =============================================================================


@dataclass(frozen=True, order=True)
class Cell:
    """A (row, col) coordinate. Zero-based."""

    row: int
    col: int

    def __repr__(self) -> str:
        return f"Cell({self.row}, {self.col})"


@dataclass(frozen=True)
class Grid:
    """A fixed-size rectangle of cells."""

    rows: int
    cols: int

    def __post_init__(self) -> None:
        bad = [(name, value) for name, value in (("rows", self.rows), ("cols", self.cols)) if value <= 0]
        if bad:
            error_msg = "Invalid grid dimensions\n"
            for name, value in bad:
                error_msg += f"  {name}: {value}\n"
            error_msg += "  Both rows and cols must be positive integers"
            raise ValueError(error_msg)

    @property
    def columns(self) -> int:
        return self.cols

    @property
    def size(self) -> int:
        return self.rows * self.cols

    def contains(self, cell: Cell) -> bool:
        return 0 <= cell.row < self.rows and 0 <= cell.col < self.cols

    def neighbor(self, cell: Cell, direction: Direction) -> Cell | None:
        """
        Return the cell one step from `cell` in `direction`.

        Returns None when the step would leave the grid. Never raises.
        """
        dr, dc = direction.delta
        candidate = Cell(cell.row + dr, cell.col + dc)
        if not self.contains(candidate):
            return None
        return candidate

    def row_cells(self, row: int) -> list[Cell]:
        """Cells of one row, west to east."""
        return [Cell(row, col) for col in range(self.cols)]

    def all_cells(self) -> list[Cell]:
        """Every cell in row-major order (row ascending, then column)."""
        return [Cell(row, col) for row in range(self.rows) for col in range(self.cols)]
