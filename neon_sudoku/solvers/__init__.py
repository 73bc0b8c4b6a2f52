"""Solvers module for Sudoku puzzles."""

from .base_solver import BaseSolver, SolverStats
from .backtracking_solver import BacktrackingSolver, solve

__all__ = [
    "BaseSolver",
    "SolverStats",
    "BacktrackingSolver",
    "solve",
]
