#!/usr/bin/env python3
"""
A* as a resumable state machine — one expansion per step().

API matches BfsAlgo except that step() takes no batch count:
- prepare(grid, start, goal) - step(grid, start, goal) -> StepResult
- get_path() - reset() - is_finished() - outcome

Heuristic:
- Squared Euclidean distance to the goal. It overestimates once the true
  distance exceeds 1, so the search behaves like a greedy weighted A* and
  the returned path is not guaranteed to be the shortest.

Open list:
- Unordered list of node handles, scanned linearly for the lowest f.
  The first strict minimum wins, so ties go to the earliest-opened node.
- A cell that is already open is never re-opened, even through a cheaper
  parent; its first g/h/f stay in place.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Set

from maze_search.core.nodes import ROOT, ScoredNodeArena
from maze_search.core.types import Cell, Grid, Outcome, StepResult, directions

logger = logging.getLogger(__name__)


def squared_distance(a: Cell, b: Cell) -> int:
    dx = a[0] - b[0]
    dy = a[1] - b[1]
    return dx * dx + dy * dy


@dataclass
class AStarAlgo:
    name: str = "A*"
    diagonal: bool = False

    # Internal state
    nodes: ScoredNodeArena = field(default_factory=ScoredNodeArena)
    open_list: List[int] = field(default_factory=list)    # node handles, insertion order
    open_cells: Set[Cell] = field(default_factory=set)    # mirrors open_list for membership tests
    closed_set: Set[Cell] = field(default_factory=set)
    current: Optional[int] = None
    finished: bool = False
    prepared: bool = False
    popped_count: int = 0

    # -------------------- lifecycle --------------------

    def reset(self) -> None:
        self.nodes.clear()
        self.open_list.clear()
        self.open_cells.clear()
        self.closed_set.clear()
        self.current = None
        self.finished = False
        self.prepared = False
        self.popped_count = 0

    def prepare(self, grid: Grid, start: Cell, goal: Cell) -> None:
        """Clear all state, open the start node and close its cell."""
        self.reset()
        if grid.is_empty():
            self.prepared = True
            return
        grid.check_bounds("start", start)
        grid.check_bounds("goal", goal)
        root = self.nodes.add_scored(start, ROOT, 0, squared_distance(start, goal))
        self.open_list.append(root)
        self.open_cells.add(start)
        self.closed_set.add(start)
        self.prepared = True

    # -------------------- queries --------------------

    @property
    def outcome(self) -> Outcome:
        if self.finished:
            return Outcome.FOUND
        if not self.prepared:
            return Outcome.IDLE
        return Outcome.IN_PROGRESS if self.open_list else Outcome.EXHAUSTED

    def is_finished(self) -> bool:
        return self.finished

    def get_path(self) -> List[Cell]:
        if self.current is None:
            return []
        return self.nodes.path_to(self.current)

    def frontier_cells(self) -> List[Cell]:
        return [self.nodes.cells[n] for n in self.open_list]

    # -------------------- helpers --------------------

    def _pop_lowest_f(self) -> int:
        f = self.nodes.f
        best_i = 0
        best_f = f[self.open_list[0]]
        for i, n in enumerate(self.open_list):
            if f[n] < best_f:
                best_i, best_f = i, f[n]
        u = self.open_list.pop(best_i)
        self.open_cells.discard(self.nodes.cells[u])
        return u

    # -------------------- main stepping logic --------------------

    def step(self, grid: Grid, start: Cell, goal: Cell) -> StepResult:
        """
        Run ONE A* expansion:
          - Remove the lowest-f open node and close its cell.
          - If it is the goal, finish.
          - Else open every in-bounds, passable neighbour that is neither
            closed nor already open, with g + 1 and squared distance h.
        """
        if self.finished or not self.open_list:
            return self._result()

        u = self._pop_lowest_f()
        self.popped_count += 1
        cell = self.nodes.cells[u]
        self.closed_set.add(cell)
        self.current = u

        if cell == goal:
            self.finished = True
            logger.debug("%s reached %s after %d expansions", self.name, goal, self.popped_count)
            return self._result(closed=[cell])

        x, y = cell
        g_child = self.nodes.g[u] + 1
        opened_now: List[Cell] = []
        for dx, dy in directions(self.diagonal):
            v = (x + dx, y + dy)
            if not grid.in_bounds(v) or grid.is_block(v):
                continue
            if v in self.closed_set or v in self.open_cells:
                continue
            self.open_list.append(self.nodes.add_scored(v, u, g_child, squared_distance(v, goal)))
            self.open_cells.add(v)
            opened_now.append(v)

        if not self.open_list:
            logger.debug("%s exhausted the open list after %d expansions", self.name, self.popped_count)
        return self._result(opened=opened_now, closed=[cell])

    def _result(self, opened: Optional[List[Cell]] = None, closed: Optional[List[Cell]] = None) -> StepResult:
        path = self.get_path() if self.finished else None
        return StepResult(
            status=self.outcome.value,
            opened=opened or [],
            closed=closed or [],
            current=self.nodes.cells[self.current] if self.current is not None else None,
            path=path,
            metrics=self._metrics(path_len=len(path) if path else 0),
        )

    # -------------------- metrics --------------------

    def _metrics(self, path_len: int = 0) -> dict:
        return {
            "algo": self.name,
            "popped": self.popped_count,
            "open_size": len(self.open_list),
            "closed_count": len(self.closed_set),
            "nodes": len(self.nodes),
            "path_len": path_len,
        }
