#!/usr/bin/env python3
"""
Breadth-first search as a resumable state machine.

API used by the viewer and the solver:
- prepare(grid, start, goal) - step(grid, start, goal, repeat) -> StepResult
- get_path() - reset() - is_finished() - outcome

A cell is marked visited when it is enqueued, so every cell enters the
frontier at most once. Steps are unit cost in both connectivity modes,
diagonal moves included.
"""

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, List, Optional, Set

from maze_search.core.nodes import NodeArena
from maze_search.core.types import Cell, Grid, Outcome, StepResult, directions

logger = logging.getLogger(__name__)


@dataclass
class BfsAlgo:
    name: str = "BFS"
    diagonal: bool = False

    # Internal state
    nodes: NodeArena = field(default_factory=NodeArena)
    frontier: Deque[int] = field(default_factory=deque)   # node handles, FIFO
    visited: Set[Cell] = field(default_factory=set)       # enqueued cells
    current: Optional[int] = None
    finished: bool = False
    prepared: bool = False
    popped_count: int = 0

    # -------------------- lifecycle --------------------

    def reset(self) -> None:
        """Drop every node and return to the unprepared state."""
        self.nodes.clear()
        self.frontier.clear()
        self.visited.clear()
        self.current = None
        self.finished = False
        self.prepared = False
        self.popped_count = 0

    def prepare(self, grid: Grid, start: Cell, goal: Cell) -> None:
        """Clear all state and seed the frontier with the start node."""
        self.reset()
        if grid.is_empty():
            self.prepared = True
            return
        grid.check_bounds("start", start)
        grid.check_bounds("goal", goal)
        self.frontier.append(self.nodes.add(start))
        self.visited.add(start)
        self.prepared = True

    # -------------------- queries --------------------

    @property
    def outcome(self) -> Outcome:
        if self.finished:
            return Outcome.FOUND
        if not self.prepared:
            return Outcome.IDLE
        return Outcome.IN_PROGRESS if self.frontier else Outcome.EXHAUSTED

    def is_finished(self) -> bool:
        return self.finished

    def get_path(self) -> List[Cell]:
        """Start -> current node. Only ends at the goal once finished."""
        if self.current is None:
            return []
        return self.nodes.path_to(self.current)

    def frontier_cells(self) -> List[Cell]:
        return [self.nodes.cells[n] for n in self.frontier]

    # -------------------- main stepping logic --------------------

    def step(self, grid: Grid, start: Cell, goal: Cell, repeat: int = 1) -> StepResult:
        """
        Run up to `repeat` expansion rounds. Stops early once the goal is
        dequeued or the frontier runs dry; further calls are no-ops.
        """
        opened: List[Cell] = []
        closed: List[Cell] = []
        for _ in range(repeat):
            if not self._expand_once(grid, goal, opened, closed):
                break

        outcome = self.outcome
        if closed and outcome is Outcome.FOUND:
            logger.debug("%s reached %s after %d expansions", self.name, goal, self.popped_count)
        elif closed and outcome is Outcome.EXHAUSTED:
            logger.debug("%s exhausted the frontier after %d expansions", self.name, self.popped_count)

        path = self.get_path() if self.finished else None
        return StepResult(
            status=outcome.value,
            opened=opened,
            closed=closed,
            current=self.nodes.cells[self.current] if self.current is not None else None,
            path=path,
            metrics=self._metrics(path_len=len(path) if path else 0),
        )

    def _expand_once(self, grid: Grid, goal: Cell, opened: List[Cell], closed: List[Cell]) -> bool:
        if self.finished or not self.frontier:
            return False

        u = self.frontier.popleft()
        self.current = u
        self.popped_count += 1
        cell = self.nodes.cells[u]
        closed.append(cell)

        if cell == goal:
            self.finished = True
            return False

        x, y = cell
        for dx, dy in directions(self.diagonal):
            n = (x + dx, y + dy)
            if not grid.in_bounds(n) or grid.is_block(n) or n in self.visited:
                continue
            self.frontier.append(self.nodes.add(n, u))
            self.visited.add(n)
            opened.append(n)
        return True

    # -------------------- metrics --------------------

    def _metrics(self, path_len: int = 0) -> dict:
        return {
            "algo": self.name,
            "popped": self.popped_count,
            "open_size": len(self.frontier),
            "closed_count": len(self.visited),
            "nodes": len(self.nodes),
            "path_len": path_len,
        }
