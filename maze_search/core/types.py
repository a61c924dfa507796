#!/usr/bin/env python3
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple, Optional, Dict, Any

Cell = Tuple[int, int]  # (x, y) == (col, row)

OPEN = 0
BLOCK = 1

# right, down, left, up, then down-right, down-left, up-right, up-left
_ORTHOGONAL: Tuple[Cell, ...] = ((1, 0), (0, 1), (-1, 0), (0, -1))
_DIAGONAL: Tuple[Cell, ...] = ((1, 1), (-1, 1), (1, -1), (-1, -1))


def directions(diagonal: bool) -> Tuple[Cell, ...]:
    """Neighbour offsets in expansion order (4- or 8-connected)."""
    return _ORTHOGONAL + _DIAGONAL if diagonal else _ORTHOGONAL


class OutOfBounds(ValueError):
    """Start or goal lies outside the grid."""

    def __init__(self, what: str, cell: Cell, width: int, height: int):
        super().__init__(f"{what} {cell} is outside the {width}x{height} grid")
        self.what = what
        self.cell = cell


class Outcome(str, Enum):
    IDLE = "idle"
    IN_PROGRESS = "running"
    FOUND = "done"
    EXHAUSTED = "no_path"


@dataclass
class Grid:
    cells: List[List[int]]             # [row][col]

    def __post_init__(self) -> None:
        if self.cells and any(len(r) != len(self.cells[0]) for r in self.cells):
            raise ValueError("cells size mismatch: rows must have equal length")
        for row in self.cells:
            for v in row:
                if v not in (OPEN, BLOCK):
                    raise ValueError(f"unknown cell value {v!r} (expected {OPEN} or {BLOCK})")

    @property
    def width(self) -> int:
        return len(self.cells[0]) if self.cells else 0

    @property
    def height(self) -> int:
        return len(self.cells)

    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0

    def in_bounds(self, c: Cell) -> bool:
        x, y = c
        return 0 <= x < self.width and 0 <= y < self.height

    def is_block(self, c: Cell) -> bool:
        x, y = c
        return self.cells[y][x] == BLOCK

    def passable(self, c: Cell) -> bool:
        return self.in_bounds(c) and not self.is_block(c)

    def check_bounds(self, what: str, c: Cell) -> None:
        if not self.in_bounds(c):
            raise OutOfBounds(what, c, self.width, self.height)


@dataclass
class Scenario:
    """A grid together with the query to run on it."""
    grid: Grid
    start: Cell
    goal: Cell
    diagonal: bool = False
    name: str = "custom"


@dataclass
class StepResult:
    status: str                   # Outcome value: "idle" | "running" | "done" | "no_path"
    opened: List[Cell] = field(default_factory=list)
    closed: List[Cell] = field(default_factory=list)
    current: Optional[Cell] = None
    path: Optional[List[Cell]] = None
    metrics: Dict[str, Any] = field(default_factory=dict)
