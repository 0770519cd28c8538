"""
Demonstration of the maze pipeline: carve, measure distances, find paths.

Usage:
    python demo.py [rows cols [algorithm [seed]]]
"""

import logging
import sys

import simple_chalk as chalk  # type: ignore[import-untyped]

from distances import distances, farthest, longest_path, path_cells, shortest_path
from generators import GenerationSettings, generate
from grid_types import Cell
from maze import Maze


def settings_from_args(argv: list[str]) -> GenerationSettings:
    """Read rows, cols, algorithm and seed from positional arguments."""
    rows = int(argv[0]) if len(argv) > 0 else 6
    cols = int(argv[1]) if len(argv) > 1 else 8
    algorithm = argv[2] if len(argv) > 2 else "sidewinder"
    seed = int(argv[3]) if len(argv) > 3 else 2024
    return GenerationSettings(rows, cols, algorithm, seed)


def distance_table(maze: Maze, settings: GenerationSettings) -> None:
    """Print the distance of every cell from the top-left corner."""
    source = Cell(0, 0)
    dist = distances(maze, source)
    _, max_distance = farthest(dist)

    print("=" * 40)
    print(f"{settings.algorithm} {maze.rows}x{maze.cols} (seed {settings.seed})")
    print("=" * 40)
    print(f"Links: {maze.link_count()}  Dead ends: {len(maze.dead_ends())}")
    print()

    width = len(str(max_distance)) + 1
    for row in range(maze.rows):
        labels = []
        for cell in maze.grid.row_cells(row):
            label = str(dist[cell]).rjust(width)
            labels.append(chalk.green(label) if cell == source else label)
        print("".join(labels))
    print()


def path_demo(maze: Maze) -> None:
    """Print the corner-to-corner path and the longest path."""
    start = Cell(0, 0)
    goal = Cell(maze.rows - 1, maze.cols - 1)

    path = shortest_path(maze, start, goal)
    print(f"Shortest path {start} -> {goal}: {len(path) - 1} steps")
    print("  " + " ".join(chalk.yellow(f"{c.row},{c.col}") for c in path_cells(path)))
    print()

    longest = longest_path(maze)
    ends = path_cells(longest)
    print(f"Longest path {ends[0]} -> {ends[-1]}: {len(longest) - 1} steps")
    print("  " + " ".join(chalk.cyan(f"{c.row},{c.col}") for c in ends))


def main(argv: list[str]) -> int:
    """Carve one maze from the arguments and print its summaries."""
    try:
        settings = settings_from_args(argv)
        maze = generate(settings)
    except ValueError as e:
        print(chalk.red(str(e)))
        return 2

    distance_table(maze, settings)
    path_demo(maze)
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format='%(levelname)s: %(message)s')
    sys.exit(main(sys.argv[1:]))
