"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

from typing import Callable, Dict, List, Optional

import numpy as np
import pytest

from maze_search.core.maze_gen import random_maze
from maze_search.core.types import BLOCK, Cell, Grid, directions


@pytest.fixture
def open_3x3() -> Grid:
    """A 3x3 grid with no walls."""
    return Grid([[0, 0, 0], [0, 0, 0], [0, 0, 0]])


@pytest.fixture
def walled_5x5() -> Grid:
    """A 5x5 grid split in two by a full row of walls at y == 2."""
    cells = [[0] * 5 for _ in range(5)]
    cells[2] = [BLOCK] * 5
    return Grid(cells)


@pytest.fixture
def small_mazes() -> List[Grid]:
    """Twenty seeded 5x5 random mazes with open corners."""
    rng = np.random.default_rng(1234)
    return [random_maze(5, 5, 0.3, rng, keep_open=((0, 0), (4, 4))) for _ in range(20)]


def _min_steps(grid: Grid, start: Cell, goal: Cell, diagonal: bool) -> Optional[int]:
    """Brute-force unit-cost distance by relaxing every edge until nothing changes."""
    dist: Dict[Cell, int] = {start: 0}
    changed = True
    while changed:
        changed = False
        for y in range(grid.height):
            for x in range(grid.width):
                if (x, y) not in dist:
                    continue
                for dx, dy in directions(diagonal):
                    n = (x + dx, y + dy)
                    if grid.passable(n) and dist.get(n, 1 << 30) > dist[(x, y)] + 1:
                        dist[n] = dist[(x, y)] + 1
                        changed = True
    return dist.get(goal)


@pytest.fixture
def min_steps() -> Callable[[Grid, Cell, Cell, bool], Optional[int]]:
    """Return the brute-force shortest distance function."""
    return _min_steps


def _assert_valid_path(grid: Grid, path: List[Cell], diagonal: bool) -> None:
    allowed = set(directions(diagonal))
    for cell in path:
        assert grid.passable(cell), f"{cell} is not passable"
    for (ax, ay), (bx, by) in zip(path, path[1:]):
        assert (bx - ax, by - ay) in allowed, f"illegal move {(ax, ay)} -> {(bx, by)}"


@pytest.fixture
def assert_valid_path() -> Callable[[Grid, List[Cell], bool], None]:
    """Return a checker for legal, passable paths."""
    return _assert_valid_path
