"""
Search core.

- BfsAlgo / AStarAlgo: resumable engines (prepare, step, get_path, reset)
- Grid, Cell, Outcome, StepResult: shared types
- solve / breadth_first_search / astar: run-to-completion helpers
"""

from maze_search.core.astar import AStarAlgo
from maze_search.core.bfs import BfsAlgo
from maze_search.core.solve import SearchReport, astar, breadth_first_search, solve
from maze_search.core.types import BLOCK, OPEN, Cell, Grid, OutOfBounds, Outcome, Scenario, StepResult

__all__ = [
    "AStarAlgo",
    "BfsAlgo",
    "BLOCK",
    "Cell",
    "Grid",
    "OPEN",
    "OutOfBounds",
    "Outcome",
    "Scenario",
    "SearchReport",
    "StepResult",
    "astar",
    "breadth_first_search",
    "solve",
]
