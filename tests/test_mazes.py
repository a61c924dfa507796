"""
Tests for maze generators and JSON map loading.
"""

import json

import numpy as np
import pytest

from maze_search.core.maps import MAP_FILES, load_map
from maze_search.core.maze_gen import perlin_maze, random_maze
from maze_search.core.solve import solve
from maze_search.core.astar import AStarAlgo
from maze_search.core.bfs import BfsAlgo
from maze_search.core.types import BLOCK, OPEN, OutOfBounds, Outcome


class TestRandomMaze:
    def test_shape_and_kept_cells(self):
        grid = random_maze(7, 4, 0.9, np.random.default_rng(0), keep_open=((0, 0), (6, 3)))
        assert (grid.width, grid.height) == (7, 4)
        assert grid.cells[0][0] == OPEN
        assert grid.cells[3][6] == OPEN

    def test_density_extremes(self):
        assert all(v == OPEN for row in random_maze(5, 5, 0.0).cells for v in row)
        assert all(v == BLOCK for row in random_maze(5, 5, 1.0).cells for v in row)

    def test_seeded(self):
        a = random_maze(6, 6, 0.3, np.random.default_rng(42))
        b = random_maze(6, 6, 0.3, np.random.default_rng(42))
        assert a == b


class TestPerlinMaze:
    def test_shape_and_kept_cells(self):
        grid = perlin_maze(16, 9, seed=5, keep_open=((0, 0), (15, 8)))
        assert (grid.width, grid.height) == (16, 9)
        assert not grid.is_block((0, 0))
        assert not grid.is_block((15, 8))

    def test_same_seed_same_maze(self):
        assert perlin_maze(12, 12, seed=11) == perlin_maze(12, 12, seed=11)

    @pytest.mark.parametrize("a,b", [(3, 259), (0, 256), (7, 7 + 1024)])
    def test_seeds_equal_mod_256_differ(self, a, b):
        assert perlin_maze(20, 20, seed=a) != perlin_maze(20, 20, seed=b)

    def test_threshold_bounds(self):
        assert all(v == OPEN for row in perlin_maze(8, 8, seed=1, threshold=0.0).cells for v in row)
        assert all(v == BLOCK for row in perlin_maze(8, 8, seed=1, threshold=1.01).cells for v in row)


class TestMaps:
    def test_bundled_maps_load(self):
        for key, path in MAP_FILES.items():
            scenario = load_map(path)
            assert scenario.name == key
            assert scenario.grid.passable(scenario.start)

    def test_bundled_outcomes(self):
        expected = {
            "01_open_field": Outcome.FOUND,
            "02_corridors": Outcome.FOUND,
            "03_sealed_goal": Outcome.EXHAUSTED,
        }
        for key, outcome in expected.items():
            s = load_map(MAP_FILES[key])
            for engine in (BfsAlgo(diagonal=s.diagonal), AStarAlgo(diagonal=s.diagonal)):
                assert solve(engine, s.grid, s.start, s.goal).outcome is outcome

    def test_move_field(self, tmp_path):
        path = tmp_path / "m.json"
        path.write_text(json.dumps({"cells": [[0, 0]], "start": [0, 0], "goal": [1, 0], "move": 8}))
        assert load_map(path).diagonal
        path.write_text(json.dumps({"cells": [[0, 0]], "start": [0, 0], "goal": [1, 0]}))
        assert not load_map(path).diagonal

    def test_bad_move_rejected(self, tmp_path):
        path = tmp_path / "m.json"
        path.write_text(json.dumps({"cells": [[0, 0]], "start": [0, 0], "goal": [1, 0], "move": 6}))
        with pytest.raises(ValueError):
            load_map(path)

    def test_goal_out_of_bounds(self, tmp_path):
        path = tmp_path / "m.json"
        path.write_text(json.dumps({"cells": [[0, 0]], "start": [0, 0], "goal": [2, 0]}))
        with pytest.raises(OutOfBounds):
            load_map(path)

    @pytest.mark.parametrize("start", [[0.5, 0], 5, [True, 0], [0, 0, 0], "00", [0, None]])
    def test_malformed_start_rejected(self, tmp_path, start):
        path = tmp_path / "m.json"
        path.write_text(json.dumps({"cells": [[0, 0]], "start": start, "goal": [1, 0]}))
        with pytest.raises(ValueError, match="start"):
            load_map(path)

    def test_malformed_goal_rejected(self, tmp_path):
        path = tmp_path / "m.json"
        path.write_text(json.dumps({"cells": [[0, 0]], "start": [0, 0], "goal": [1.0, 0]}))
        with pytest.raises(ValueError, match="goal"):
            load_map(path)
