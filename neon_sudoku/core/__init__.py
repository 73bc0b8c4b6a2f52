"""Core module for Sudoku board representation and validation."""

from .board import SudokuBoard, GRID_SIZE, BOX_SIZE
from .validator import (
    is_valid_placement,
    is_valid_board,
    count_solutions,
    has_unique_solution,
    validate_solution,
)

__all__ = [
    "SudokuBoard",
    "GRID_SIZE",
    "BOX_SIZE",
    "is_valid_placement",
    "is_valid_board",
    "count_solutions",
    "has_unique_solution",
    "validate_solution",
]
