#!/usr/bin/env python3
"""
Node storage shared by the search engines.

Nodes are slots in an arena addressed by integer handles. Each slot keeps
its cell and the handle of the node whose expansion produced it; the start
node uses ROOT. Parents are always allocated before their children, so a
parent handle is strictly smaller than the child's handle and walking the
links always terminates at the root.
"""

from dataclasses import dataclass, field
from typing import List

from maze_search.core.types import Cell

ROOT = -1


@dataclass
class NodeArena:
    cells: List[Cell] = field(default_factory=list)
    parents: List[int] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.cells)

    def add(self, cell: Cell, parent: int = ROOT) -> int:
        handle = len(self.cells)
        assert parent == ROOT or 0 <= parent < handle, f"dangling parent {parent} for node {handle}"
        self.cells.append(cell)
        self.parents.append(parent)
        return handle

    def clear(self) -> None:
        self.cells.clear()
        self.parents.clear()

    def path_to(self, handle: int) -> List[Cell]:
        """Cells from the root to `handle`, inclusive."""
        path: List[Cell] = []
        cur = handle
        while cur != ROOT:
            path.append(self.cells[cur])
            parent = self.parents[cur]
            assert parent < cur, f"corrupt parent link {cur} -> {parent}"
            cur = parent
        path.reverse()
        return path


@dataclass
class ScoredNodeArena(NodeArena):
    """Arena whose nodes also carry g (steps from start), h and f = g + h."""
    g: List[int] = field(default_factory=list)
    h: List[int] = field(default_factory=list)
    f: List[int] = field(default_factory=list)

    def add_scored(self, cell: Cell, parent: int, g: int, h: int) -> int:
        handle = self.add(cell, parent)
        self.g.append(g)
        self.h.append(h)
        self.f.append(g + h)
        return handle

    def clear(self) -> None:
        super().clear()
        self.g.clear()
        self.h.clear()
        self.f.clear()
