"""
Resumable grid-maze search.

Provides step-driven BFS and A* engines over a two-class grid, plus maze
generators, a benchmark harness and an interactive pygame viewer.
"""

__version__ = "0.1.0"
