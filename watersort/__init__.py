"""Water sort puzzle: bottles, positions, a search tree and BFS/DFS solvers."""

__version__ = "0.1.0"