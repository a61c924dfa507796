#!/usr/bin/env python3
"""
Maze generators producing Grid instances.

- perlin_maze: smooth cave-like walls from 2-D Perlin noise.
- random_maze: every cell is a wall with a fixed probability.

Cells listed in `keep_open` (typically start and goal) are always passable.
"""

import logging
from typing import Iterable, Optional

import numpy as np
from noise import pnoise2

from maze_search import config
from maze_search.core.types import BLOCK, OPEN, Cell, Grid

logger = logging.getLogger(__name__)


def _to_grid(terrain: np.ndarray, keep_open: Iterable[Cell]) -> Grid:
    h, w = terrain.shape
    for x, y in keep_open:
        if 0 <= x < w and 0 <= y < h:
            terrain[y, x] = OPEN
    return Grid(terrain.tolist())


def perlin_maze(
    width: int,
    height: int,
    seed: Optional[int] = None,
    *,
    scale: float = config.PERLIN_SCALE,
    octaves: int = config.PERLIN_OCTAVES,
    threshold: float = config.OBSTACLE_THRESHOLD,
    keep_open: Iterable[Cell] = (),
) -> Grid:
    """
    Sample Perlin noise on the grid, normalize it to [0, 1], and block every
    cell whose value is below `threshold`.
    """
    rng = np.random.default_rng(seed)
    base = int(rng.integers(256))  # permutation table offset
    ox, oy = rng.uniform(0.0, 1024.0, size=2)

    world = np.zeros((height, width))
    for y in range(height):
        for x in range(width):
            world[y, x] = pnoise2(
                ox + x * scale, oy + y * scale,
                octaves=octaves,
                persistence=config.PERLIN_PERSISTENCE,
                lacunarity=config.PERLIN_LACUNARITY,
                base=base,
            )
    span = world.max() - world.min() if world.size else 0.0
    if span > 0:
        world = (world - world.min()) / span
    else:
        world = np.ones_like(world)

    terrain = np.where(world < threshold, BLOCK, OPEN).astype(np.int8)
    grid = _to_grid(terrain, keep_open)
    logger.debug("perlin maze %dx%d seed=%s walls=%d", width, height, seed, int((terrain == BLOCK).sum()))
    return grid


def random_maze(
    width: int,
    height: int,
    density: float = config.RANDOM_BLOCK_DENSITY,
    rng: Optional[np.random.Generator] = None,
    *,
    keep_open: Iterable[Cell] = (),
) -> Grid:
    """Block each cell independently with probability `density`."""
    rng = rng if rng is not None else np.random.default_rng()
    terrain = (rng.random((height, width)) < density).astype(np.int8)
    return _to_grid(terrain, keep_open)
