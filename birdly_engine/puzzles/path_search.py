"""
Path Search Engine.

Finds self-avoiding walks on an N x N grid with 8-connectivity using
randomized depth-first search with backtracking. Direction order is
shuffled at every step, so repeated calls return different paths.
"""
from __future__ import annotations

import random
from collections.abc import Sequence
from typing import NamedTuple, Optional

# up, down, left, right, then the four diagonals
DIRECTIONS: tuple[tuple[int, int], ...] = (
    (-1, 0),
    (1, 0),
    (0, -1),
    (0, 1),
    (-1, -1),
    (-1, 1),
    (1, -1),
    (1, 1),
)


class GridPosition(NamedTuple):
    """A cell in the grid."""
    row: int
    col: int


def _open_neighbours(
    cell: GridPosition,
    visited: list[list[bool]],
    grid_size: int,
) -> list[GridPosition]:
    neighbours = []
    for dr, dc in DIRECTIONS:
        row, col = cell.row + dr, cell.col + dc
        if 0 <= row < grid_size and 0 <= col < grid_size and not visited[row][col]:
            neighbours.append(GridPosition(row, col))
    return neighbours


def _search_from(
    start: GridPosition,
    length: int,
    grid_size: int,
    rng: random.Random,
    max_expansions: Optional[int],
) -> Optional[list[GridPosition]]:
    """
    Randomized DFS from one start cell.

    Uses an explicit stack of pending neighbour lists instead of recursion;
    depth never exceeds ``length``.
    """
    visited = [[False] * grid_size for _ in range(grid_size)]
    path = [start]
    visited[start.row][start.col] = True
    if length == 1:
        return path

    pending = _open_neighbours(start, visited, grid_size)
    rng.shuffle(pending)
    stack = [pending]
    expansions = 1

    while stack:
        options = stack[-1]
        if not options:
            # Dead end: backtrack
            stack.pop()
            last = path.pop()
            visited[last.row][last.col] = False
            continue

        cell = options.pop()
        if visited[cell.row][cell.col]:
            continue

        visited[cell.row][cell.col] = True
        path.append(cell)
        if len(path) == length:
            return path

        expansions += 1
        if max_expansions is not None and expansions >= max_expansions:
            return None

        pending = _open_neighbours(cell, visited, grid_size)
        rng.shuffle(pending)
        stack.append(pending)

    return None


def find_path(
    length: int,
    grid_size: int,
    max_attempts: int = 100,
    rng: Optional[random.Random] = None,
    max_expansions: Optional[int] = None,
) -> Optional[list[GridPosition]]:
    """
    Find a self-avoiding 8-connected walk of ``length`` cells.

    Each attempt starts from a uniformly random cell and searches until it
    succeeds or its search space is exhausted.

    Args:
        length: Number of cells in the walk
        grid_size: Edge of the square grid
        max_attempts: Random restarts before giving up
        rng: Random source
        max_expansions: Optional cap on cell placements per attempt

    Returns:
        List of positions, or None when every attempt failed
    """
    if length <= 0 or grid_size <= 0 or length > grid_size * grid_size:
        return None

    rng = rng or random.Random()
    for _ in range(max_attempts):
        start = GridPosition(rng.randrange(grid_size), rng.randrange(grid_size))
        path = _search_from(start, length, grid_size, rng, max_expansions)
        if path is not None:
            return path
    return None


def snake_path(length: int, grid_size: int) -> Optional[list[GridPosition]]:
    """
    Deterministic boustrophedon walk: left to right, then right to left.

    Returns:
        First ``length`` cells of the snake, or None when they do not fit
    """
    if length <= 0 or grid_size <= 0 or length > grid_size * grid_size:
        return None

    path = []
    for row in range(grid_size):
        cols = range(grid_size) if row % 2 == 0 else range(grid_size - 1, -1, -1)
        for col in cols:
            path.append(GridPosition(row, col))
            if len(path) == length:
                return path
    return path


def is_adjacent(a: GridPosition, b: GridPosition) -> bool:
    """True when two cells touch horizontally, vertically or diagonally."""
    return max(abs(a.row - b.row), abs(a.col - b.col)) == 1


def is_contiguous(path: Sequence[GridPosition]) -> bool:
    """True when consecutive cells touch and no cell repeats."""
    if len(set(path)) != len(path):
        return False
    return all(is_adjacent(a, b) for a, b in zip(path, path[1:]))


def is_valid_path(path: Sequence[GridPosition], grid_size: int) -> bool:
    """Check bounds, then uniqueness and 8-adjacency of consecutive cells."""
    for row, col in path:
        if not (0 <= row < grid_size and 0 <= col < grid_size):
            return False
    return is_contiguous(path)
