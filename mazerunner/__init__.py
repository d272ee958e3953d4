"""Maze Runner - right-hand rule maze solver with path factorization."""

__version__ = "1.0.0"
