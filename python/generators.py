"""
Maze carving algorithms.

Each algorithm takes an unlinked Maze and a random source, links it into a
spanning tree in place and returns it. The random source is consumed in
row-major order, so a fixed seed always carves the same maze.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Callable

from grid_types import Direction
from maze import Maze

logger = logging.getLogger(__name__)


def binary_tree(maze: Maze, rng: random.Random) -> Maze:
    """
    Link every cell to its north or east neighbour, chosen at random.

    The top-right corner has neither and is skipped.
    """
    for cell in maze.all_cells():
        candidates = maze.neighbors_of(cell, [Direction.N, Direction.E])
        if candidates:
            maze.link(cell, rng.choice(candidates))

    logger.info("binary_tree: carved %dx%d maze, %d links", maze.rows, maze.cols, maze.link_count())
    return maze


def sidewinder(maze: Maze, rng: random.Random) -> Maze:
    """
    Carve row by row, grouping cells into east-linked runs.

    The top row becomes a single corridor. In every other row, each cell
    either extends the current run eastward or closes it; a closed run gets
    exactly one north link from a randomly chosen member.
    """
    grid = maze.grid
    for row in range(grid.rows):
        cells = grid.row_cells(row)

        if row == 0:
            for west, east in zip(cells, cells[1:]):
                maze.link(west, east)
            continue

        run = []
        for cell in cells:
            run.append(cell)
            east = grid.neighbor(cell, Direction.E)
            # Coin toss only where there is a choice; the last cell always closes.
            close_run = east is None or rng.randrange(2) == 0

            if close_run:
                member = rng.choice(run)
                north = grid.neighbor(member, Direction.N)
                maze.link(member, north)
                logger.debug("sidewinder: row %d closed run of %d, north from %r", row, len(run), member)
                run = []
            else:
                maze.link(cell, east)

    logger.info("sidewinder: carved %dx%d maze, %d links", maze.rows, maze.cols, maze.link_count())
    return maze


# Type alias for a carving algorithm
Algorithm = Callable[[Maze, random.Random], Maze]

ALGORITHMS: dict[str, Algorithm] = {
    "binary_tree": binary_tree,
    "sidewinder": sidewinder,
}


# =============================================================================
# Configuration
# =============================================================================


@dataclass(frozen=True)
class GenerationSettings:
    """Settings for building and carving one maze."""

    rows: int
    columns: int
    algorithm: str = "sidewinder"
    seed: int | None = None

    def make_rng(self) -> random.Random:
        return random.Random(self.seed)


def generate(settings: GenerationSettings, rng: random.Random | None = None) -> Maze:
    """
    Build an unlinked maze from `settings` and carve it.

    Args:
        settings: Dimensions, algorithm name and optional seed
        rng: Random source to use instead of one seeded from settings

    Returns:
        The carved Maze

    Raises:
        ValueError: if the algorithm name is unknown or the size is invalid
    """
    try:
        algorithm = ALGORITHMS[settings.algorithm]
    except KeyError:
        raise ValueError(
            f"Unknown algorithm: '{settings.algorithm}'\n"
            f"  Valid algorithms: {', '.join(sorted(ALGORITHMS))}"
        ) from None

    maze = Maze.build(settings.rows, settings.columns)
    return algorithm(maze, rng if rng is not None else settings.make_rng())
