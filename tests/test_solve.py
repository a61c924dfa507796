"""
Tests for run-to-completion helpers and the benchmark harness.
"""

from maze_search.core.astar import AStarAlgo
from maze_search.core.benchmark import BenchmarkReport, run_benchmark
from maze_search.core.bfs import BfsAlgo
from maze_search.core.solve import astar, breadth_first_search, solve
from maze_search.core.types import Grid, Outcome


class TestSolve:
    def test_report_for_found_path(self, open_3x3):
        report = solve(BfsAlgo(diagonal=True), open_3x3, (0, 0), (2, 2))
        assert report.found
        assert report.algo == "BFS"
        assert report.path == [(0, 0), (1, 1), (2, 2)]
        assert report.rounds >= 3
        assert report.seconds >= 0.0

    def test_report_for_exhausted_search(self, walled_5x5):
        report = solve(AStarAlgo(), walled_5x5, (0, 0), (4, 4))
        assert report.outcome is Outcome.EXHAUSTED
        assert not report.found

    def test_round_limit_stops_early(self, open_3x3):
        report = solve(BfsAlgo(), open_3x3, (0, 0), (2, 2), max_rounds=2)
        assert report.outcome is Outcome.IN_PROGRESS
        assert report.rounds == 2
        assert report.path[0] == (0, 0)

    def test_engine_reusable_across_solves(self, open_3x3, walled_5x5):
        engine = AStarAlgo(diagonal=True)
        assert not solve(engine, walled_5x5, (0, 0), (4, 4)).found
        assert solve(engine, open_3x3, (0, 0), (2, 2)).path == [(0, 0), (1, 1), (2, 2)]


class TestOneShot:
    def test_bfs_diagonal_by_default(self, open_3x3):
        assert breadth_first_search(open_3x3, (0, 0), (2, 2)) == [(0, 0), (1, 1), (2, 2)]

    def test_astar_orthogonal(self, open_3x3):
        path = astar(open_3x3, (0, 0), (2, 2), diagonal=False)
        assert len(path) == 5
        assert path[0] == (0, 0) and path[-1] == (2, 2)

    def test_no_path_is_empty(self, walled_5x5):
        assert breadth_first_search(walled_5x5, (0, 0), (4, 4)) == []
        assert astar(walled_5x5, (0, 0), (4, 4)) == []

    def test_empty_grid(self):
        assert breadth_first_search(Grid([]), (0, 0), (0, 0)) == []
        assert astar(Grid([]), (0, 0), (0, 0)) == []


class TestBenchmark:
    def test_counts_are_consistent(self):
        report = run_benchmark(rounds=6, size=8, density=0.25, seed=7)
        assert report.rounds == 6
        assert 0 <= report.solved <= 6
        assert report.longer_astar <= report.solved
        assert report.longer_astar <= report.mismatches <= 6
        assert report.bfs_seconds + report.astar_seconds > 0

    def test_same_seed_same_counts(self):
        a = run_benchmark(rounds=4, size=6, seed=3, diagonal=False)
        b = run_benchmark(rounds=4, size=6, seed=3, diagonal=False)
        assert (a.solved, a.mismatches) == (b.solved, b.mismatches)

    def test_summary_mentions_rounds(self):
        assert BenchmarkReport(rounds=3).summary().startswith("3 rounds")
        assert BenchmarkReport().rounds_per_sec == 0.0
