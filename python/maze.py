"""
Link graph over a rectangular grid.

Every cell knows its in-bounds orthogonal neighbours, fixed when the maze is
built. A neighbour pair is either linked (passable) or not. Linking is always
symmetric: both sides of a pair are set together.
"""

from __future__ import annotations

import logging
import random
from typing import Sequence

from grid_types import DIRECTIONS, Cell, Direction, Grid

logger = logging.getLogger(__name__)


class InvalidLink(ValueError):
    """Raised when linking two cells that are not neighbours."""

    def __init__(self, a: Cell, b: Cell) -> None:
        self.a = a
        self.b = b
        super().__init__(f"Cannot link {a!r} to {b!r}: cells are not neighbours")


class Maze:
    """
    A grid plus a symmetric "linked" flag for every neighbour pair.

    Usage:
        maze = Maze.build(3, 3)
        maze.link(Cell(0, 0), Cell(0, 1))
        maze.is_linked(Cell(0, 1), Cell(0, 0))  # True
    """

    def __init__(self, grid: Grid) -> None:
        self.grid = grid
        # cell -> {neighbour -> linked}
        self._links: dict[Cell, dict[Cell, bool]] = {}
        for cell in grid.all_cells():
            self._links[cell] = {
                neighbor: False
                for neighbor in (grid.neighbor(cell, direction) for direction in DIRECTIONS)
                if neighbor is not None
            }

    @classmethod
    def build(cls, rows: int, cols: int) -> Maze:
        """Create an unlinked maze of the given size."""
        return cls(Grid(rows, cols))

    @property
    def rows(self) -> int:
        return self.grid.rows

    @property
    def cols(self) -> int:
        return self.grid.cols

    @property
    def columns(self) -> int:
        return self.grid.cols

    @property
    def size(self) -> int:
        return len(self._links)

    def all_cells(self) -> list[Cell]:
        return self.grid.all_cells()

    def neighbors(self, cell: Cell) -> list[Cell]:
        """All registered neighbours of `cell` (N, E, S, W order)."""
        return self.neighbors_of(cell, DIRECTIONS)

    def neighbors_of(self, cell: Cell, directions: Sequence[Direction]) -> list[Cell]:
        """In-bounds neighbours along `directions`, in the order given."""
        result = []
        for direction in directions:
            neighbor = self.grid.neighbor(cell, direction)
            if neighbor is not None:
                result.append(neighbor)
        return result

    def is_linked(self, a: Cell, b: Cell) -> bool:
        """True if a and b are neighbours joined by a link. Never raises."""
        return self._links.get(a, {}).get(b, False)

    def linked_neighbors(self, cell: Cell) -> list[Cell]:
        """Neighbours reachable from `cell` in one step (N, E, S, W order)."""
        return [neighbor for neighbor in self.neighbors(cell) if self.is_linked(cell, neighbor)]

    def link(self, a: Cell, b: Cell) -> Maze:
        """
        Join two neighbouring cells.

        Both directions are set before returning. Returns self so calls can
        be chained.

        Raises:
            InvalidLink: if b is not a registered neighbour of a
        """
        if b not in self._links.get(a, {}):
            raise InvalidLink(a, b)
        self._links[a][b] = True
        self._links[b][a] = True
        logger.debug("link %r <-> %r", a, b)
        return self

    def links(self) -> list[tuple[Cell, Cell]]:
        """Each undirected link once, ordered by its first cell in row-major order."""
        pairs = []
        for cell, neighbors in self._links.items():
            for neighbor, linked in neighbors.items():
                if linked and cell < neighbor:
                    pairs.append((cell, neighbor))
        return pairs

    def link_count(self) -> int:
        return len(self.links())

    # =========================================================================
    # Renderer-facing queries
    # =========================================================================

    def has_wall(self, cell: Cell, direction: Direction) -> bool:
        """True on the outer boundary or where the neighbour is not linked."""
        neighbor = self.grid.neighbor(cell, direction)
        if neighbor is None:
            return True
        return not self.is_linked(cell, neighbor)

    def walls(self, cell: Cell) -> dict[Direction, bool]:
        return {direction: self.has_wall(cell, direction) for direction in DIRECTIONS}

    def dead_ends(self) -> list[Cell]:
        """Cells with exactly one link."""
        return [cell for cell in self.all_cells() if len(self.linked_neighbors(cell)) == 1]

    def random_cell(self, rng: random.Random) -> Cell:
        return Cell(rng.randrange(self.rows), rng.randrange(self.cols))

    def __repr__(self) -> str:
        return f"Maze({self.rows}x{self.cols}, links={self.link_count()})"
