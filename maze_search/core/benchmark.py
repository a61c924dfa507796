#!/usr/bin/env python3
"""
BFS vs A* on random mazes.

Each round draws a fresh random maze, runs both engines to completion from
the top-left to the bottom-right corner, and accumulates their run times.
Rounds where the two engines return different paths are counted; A* with
the squared-distance heuristic is not optimal, so mismatches are expected.

Usage:
    python -m maze_search.core.benchmark --rounds 500 --size 20 --density 0.25
"""

import argparse
import logging
import time
from dataclasses import dataclass
from typing import Optional

import numpy as np

from maze_search import config
from maze_search.core.astar import AStarAlgo
from maze_search.core.bfs import BfsAlgo
from maze_search.core.maze_gen import random_maze
from maze_search.core.solve import solve

logger = logging.getLogger(__name__)


@dataclass
class BenchmarkReport:
    rounds: int = 0
    solved: int = 0              # mazes where BFS reached the goal
    mismatches: int = 0          # rounds where the two paths differ
    longer_astar: int = 0        # solved rounds where A* returned more cells than BFS
    bfs_seconds: float = 0.0
    astar_seconds: float = 0.0

    @property
    def rounds_per_sec(self) -> float:
        total = self.bfs_seconds + self.astar_seconds
        return self.rounds / total if total > 0 else 0.0

    def summary(self) -> str:
        return (
            f"{self.rounds} rounds, {self.solved} solvable, "
            f"{self.mismatches} path mismatches ({self.longer_astar} longer A* paths) | "
            f"bfs {self.bfs_seconds:.3f}s  a* {self.astar_seconds:.3f}s  "
            f"({self.rounds_per_sec:,.0f} rounds/sec)"
        )


def run_benchmark(
    rounds: int = config.BENCH_ROUNDS,
    size: int = config.BENCH_SIZE,
    density: float = config.RANDOM_BLOCK_DENSITY,
    diagonal: bool = True,
    seed: Optional[int] = None,
) -> BenchmarkReport:
    rng = np.random.default_rng(seed)
    start, goal = (0, 0), (size - 1, size - 1)
    bfs, astar = BfsAlgo(diagonal=diagonal), AStarAlgo(diagonal=diagonal)
    report = BenchmarkReport()
    last_log = time.perf_counter()

    for _ in range(rounds):
        grid = random_maze(size, size, density, rng, keep_open=(start, goal))

        b = solve(bfs, grid, start, goal)
        a = solve(astar, grid, start, goal)

        report.rounds += 1
        report.bfs_seconds += b.seconds
        report.astar_seconds += a.seconds
        if b.found:
            report.solved += 1
            if len(a.path) > len(b.path):
                report.longer_astar += 1
        if (b.path if b.found else []) != (a.path if a.found else []):
            report.mismatches += 1
            logger.debug("paths differ: bfs=%s a*=%s", b.path, a.path)

        now = time.perf_counter()
        if now - last_log >= config.BENCH_REPORT_INTERVAL:
            last_log = now
            logger.info(report.summary())

    return report


def main() -> int:
    parser = argparse.ArgumentParser(description="Compare BFS and A* on random mazes")
    parser.add_argument("--rounds", type=int, default=config.BENCH_ROUNDS, help="Number of mazes")
    parser.add_argument("--size", type=int, default=config.BENCH_SIZE, help="Maze side length")
    parser.add_argument("--density", type=float, default=config.RANDOM_BLOCK_DENSITY, help="Wall probability")
    parser.add_argument("--four", action="store_true", help="Use 4-connected moves (default 8)")
    parser.add_argument("--seed", type=int, default=config.MAZE_SEED, help="RNG seed")
    args = parser.parse_args()

    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT, datefmt="%H:%M:%S")

    report = run_benchmark(args.rounds, args.size, args.density, diagonal=not args.four, seed=args.seed)
    print(report.summary())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
