#!/usr/bin/env python3
"""
Run-to-completion helpers on top of the resumable engines.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import List, Optional, Protocol

from maze_search.core.astar import AStarAlgo
from maze_search.core.bfs import BfsAlgo
from maze_search.core.types import Cell, Grid, Outcome, StepResult

logger = logging.getLogger(__name__)


class SearchEngine(Protocol):
    """Capabilities shared by BfsAlgo and AStarAlgo."""
    name: str
    popped_count: int

    @property
    def outcome(self) -> Outcome: ...

    def prepare(self, grid: Grid, start: Cell, goal: Cell) -> None: ...

    def step(self, grid: Grid, start: Cell, goal: Cell) -> StepResult: ...

    def get_path(self) -> List[Cell]: ...

    def reset(self) -> None: ...

    def is_finished(self) -> bool: ...


@dataclass
class SearchReport:
    algo: str
    outcome: Outcome
    path: List[Cell] = field(default_factory=list)
    rounds: int = 0
    seconds: float = 0.0

    @property
    def found(self) -> bool:
        return self.outcome is Outcome.FOUND


def solve(
    engine: SearchEngine,
    grid: Grid,
    start: Cell,
    goal: Cell,
    max_rounds: Optional[int] = None,
) -> SearchReport:
    """
    Prepare `engine` and step it until it leaves IN_PROGRESS or `max_rounds`
    expansions have run. The report's path is the engine's current path,
    which only ends at the goal when the outcome is FOUND.
    """
    t0 = time.perf_counter()
    engine.prepare(grid, start, goal)
    while engine.outcome is Outcome.IN_PROGRESS:
        if max_rounds is not None and engine.popped_count >= max_rounds:
            break
        engine.step(grid, start, goal)
    elapsed = time.perf_counter() - t0

    report = SearchReport(
        algo=engine.name,
        outcome=engine.outcome,
        path=engine.get_path(),
        rounds=engine.popped_count,
        seconds=elapsed,
    )
    logger.debug("%s: %s in %d rounds (%.6fs)", report.algo, report.outcome.value, report.rounds, elapsed)
    return report


def breadth_first_search(grid: Grid, start: Cell, goal: Cell, diagonal: bool = True) -> List[Cell]:
    """Shortest start -> goal path in unit steps, or [] if there is none."""
    report = solve(BfsAlgo(diagonal=diagonal), grid, start, goal)
    return report.path if report.found else []


def astar(grid: Grid, start: Cell, goal: Cell, diagonal: bool = True) -> List[Cell]:
    """A* start -> goal path (not necessarily shortest), or [] if there is none."""
    report = solve(AStarAlgo(diagonal=diagonal), grid, start, goal)
    return report.path if report.found else []
