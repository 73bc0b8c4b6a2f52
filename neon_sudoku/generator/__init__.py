"""Generator module for creating Sudoku puzzles."""

from .generator import SudokuGenerator, Difficulty, generate

__all__ = ["SudokuGenerator", "Difficulty", "generate"]
