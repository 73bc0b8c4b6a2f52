"""Sudoku game: backtracking solver, puzzle generator and game session."""

from .core import SudokuBoard
from .solvers import solve
from .generator import Difficulty, SudokuGenerator, generate

__all__ = ["SudokuBoard", "solve", "generate", "Difficulty", "SudokuGenerator"]
