#!/usr/bin/env python3
"""
JSON map files.

Format:
    {
      "cells": [[0, 0, 1], ...],   # [row][col], 0 = open, 1 = wall
      "start": [x, y],
      "goal":  [x, y],
      "move":  4 | 8               # optional, default 4
    }
"""

import json
from pathlib import Path
from typing import Dict

from maze_search import config
from maze_search.core.types import Cell, Grid, Scenario

MAP_FILES: Dict[str, Path] = {
    "01_open_field":   config.MAPS_DIR / "01_open_field.json",
    "02_corridors":    config.MAPS_DIR / "02_corridors.json",
    "03_sealed_goal":  config.MAPS_DIR / "03_sealed_goal.json",
}


def _cell(what: str, raw) -> Cell:
    if (not isinstance(raw, list) or len(raw) != 2
            or any(isinstance(v, bool) or not isinstance(v, int) for v in raw)):
        raise ValueError(f"{what} must be a pair of integers [x, y], got {raw!r}")
    return (raw[0], raw[1])


def load_map(path: Path) -> Scenario:
    with open(path, "r") as f:
        data = json.load(f)
    grid = Grid(data["cells"])
    start = _cell("start", data["start"])
    goal = _cell("goal", data["goal"])
    move = int(data.get("move", 4))
    if move not in (4, 8):
        raise ValueError(f"move must be 4 or 8, got {move}")
    grid.check_bounds("start", start)
    grid.check_bounds("goal", goal)
    return Scenario(grid, start, goal, diagonal=(move == 8), name=Path(path).stem)
