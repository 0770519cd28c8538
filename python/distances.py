"""
Breadth-first distances and shortest paths over a Maze.

Distances count links. A DistanceMap only holds cells reachable from its
source; a PathMap holds just the cells on one shortest path, keyed in walk
order from the source.
"""

from __future__ import annotations

import logging

from grid_types import Cell
from maze import Maze

logger = logging.getLogger(__name__)

DistanceMap = dict[Cell, int]
PathMap = dict[Cell, int]


class Unreachable(LookupError):
    """Raised when no chain of links joins two cells."""

    def __init__(self, source: Cell, target: Cell) -> None:
        self.source = source
        self.target = target
        super().__init__(f"No path from {source!r} to {target!r}")


def distances(maze: Maze, source: Cell) -> DistanceMap:
    """
    Label every cell reachable from `source` with its distance in links.

    Expands one frontier layer at a time. A cell keeps the first distance
    assigned to it. Unreachable cells are left out rather than reported.
    """
    result: DistanceMap = {source: 0}
    frontier = [source]
    distance = 0

    while frontier:
        distance += 1
        next_frontier = []
        for cell in frontier:
            for neighbor in maze.linked_neighbors(cell):
                if neighbor in result:
                    continue
                result[neighbor] = distance
                next_frontier.append(neighbor)
        frontier = next_frontier

    return result


def shortest_path(maze: Maze, start: Cell, goal: Cell) -> PathMap:
    """
    Find a shortest path from `start` to `goal`.

    Walks back from the goal, always stepping to a linked neighbour that is
    strictly closer to the start.

    Returns:
        PathMap of the cells on the path with their distance from `start`,
        ordered from start to goal

    Raises:
        Unreachable: if goal cannot be reached from start
    """
    dist = distances(maze, start)
    if goal not in dist:
        raise Unreachable(start, goal)

    walk = [goal]
    current = goal
    while current != start:
        # Ties only occur when the maze has cycles; take W, S, E, N in that order.
        current = next(
            neighbor
            for neighbor in reversed(maze.linked_neighbors(current))
            if dist.get(neighbor, dist[current]) < dist[current]
        )
        walk.append(current)

    return {cell: dist[cell] for cell in reversed(walk)}


def path_cells(path: PathMap) -> list[Cell]:
    """Cells of a path, nearest the source first."""
    return sorted(path, key=path.__getitem__)


def farthest(dist: DistanceMap) -> tuple[Cell, int]:
    """The cell with the greatest distance; the earliest one wins ties."""
    best = max(dist, key=dist.__getitem__)
    return best, dist[best]


def longest_path(maze: Maze, start: Cell | None = None) -> PathMap:
    """
    Approximate the longest path in the maze with two BFS passes.

    For a spanning tree this is exact: the cell farthest from any start is one
    end of the longest path, and the cell farthest from that is the other.
    """
    if start is None:
        start = Cell(0, 0)
    first, _ = farthest(distances(maze, start))
    second, length = farthest(distances(maze, first))
    logger.info("longest_path: %r -> %r, length %d", first, second, length)
    return shortest_path(maze, first, second)
