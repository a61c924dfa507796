"""
Configuration constants for maze_search.

Tunable parameters for maze generation, benchmarking and the viewer live
here. A few can be overridden through environment variables.
"""

import os
from pathlib import Path
from typing import Optional

# =============================================================================
# Path Configuration
# =============================================================================

PACKAGE_DIR = Path(__file__).resolve().parent

# Bundled JSON maps (shipped as package data)
MAPS_DIR = PACKAGE_DIR / "maps"

# =============================================================================
# Maze Configuration
# =============================================================================

MAZE_WIDTH = int(os.environ.get("MAZE_WIDTH", "64"))
MAZE_HEIGHT = int(os.environ.get("MAZE_HEIGHT", "40"))


def _optional_int(name: str) -> Optional[int]:
    raw = os.environ.get(name)
    return int(raw) if raw not in (None, "") else None


# Seed for generated mazes (None -> fresh randomness every time)
MAZE_SEED = _optional_int("MAZE_SEED")

# Perlin-noise generator: noise is sampled at (x * scale, y * scale),
# normalized to [0, 1], and cells below the threshold become walls
PERLIN_SCALE = 0.1
PERLIN_OCTAVES = 4
PERLIN_PERSISTENCE = 0.5
PERLIN_LACUNARITY = 2.0
OBSTACLE_THRESHOLD = 0.45

# Uniform random generator: probability that a cell is a wall
RANDOM_BLOCK_DENSITY = 0.25

# =============================================================================
# Benchmark Configuration
# =============================================================================

BENCH_SIZE = 20
BENCH_ROUNDS = 1000

# Seconds between progress log lines
BENCH_REPORT_INTERVAL = 0.5

# =============================================================================
# Viewer Configuration
# =============================================================================

# Expansion rounds per batch; grown/shrunk multiplicatively from the keyboard
STEPS_PER_BATCH = 5.0
BATCH_GROW = 4.0 / 3.0
BATCH_SHRINK = 0.75
MAX_STEPS_PER_BATCH = 100_000.0

# Batches per second while running
TICKS_PER_SEC = 30

# Cell size (px) while the view is locked on the path head
FOLLOW_CELL_SIZE = 20

# Default algorithm: "bfs" or "astar"
DEFAULT_ALGO = os.environ.get("MAZE_ALGO", "bfs").lower()

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
