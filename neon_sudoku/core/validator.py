"""Validation utilities for Sudoku puzzles."""

from __future__ import annotations
import numpy as np
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .board import SudokuBoard


def is_valid_placement(board: SudokuBoard, row: int, col: int, value: int) -> bool:
    """
    Check if placing a value at (row, col) is valid.

    The cell's own content is ignored: the placement is legal when no other
    cell in the same row, column or box already holds ``value``.

    Args:
        board: The Sudoku board.
        row: Row index.
        col: Column index.
        value: Value to check (1 to 9).

    Returns:
        True if the placement is valid.
    """
    if value < 1 or value > board.size:
        return False

    own = 1 if board.get(row, col) == value else 0

    for unit in (board.get_row(row), board.get_col(col), board.get_box(row, col)):
        if np.count_nonzero(unit == value) > own:
            return False

    return True


def is_valid_board(board: SudokuBoard) -> bool:
    """
    Check if the entire board state is valid (no conflicts).

    Args:
        board: The Sudoku board to validate.

    Returns:
        True if no constraints are violated.
    """
    return board.is_valid()


def count_solutions(board: SudokuBoard, limit: int = 2) -> int:
    """
    Count the number of solutions for a puzzle (up to limit).

    Stops early once limit is reached. The board itself is not modified.

    Args:
        board: The puzzle board.
        limit: Maximum solutions to count before stopping.

    Returns:
        Number of solutions found (up to limit).
    """
    if not is_valid_board(board):
        return 0

    work_board = board.copy()
    count = 0

    def backtrack() -> bool:
        """Returns True if limit reached."""
        nonlocal count

        empty_cells = work_board.get_empty_cells()
        if not empty_cells:
            count += 1
            return count >= limit

        # Most constrained cell first, this is only a diagnostic
        best_cell = min(
            empty_cells,
            key=lambda cell: len(work_board.get_candidates(cell[0], cell[1]))
        )

        row, col = best_cell
        for val in sorted(work_board.get_candidates(row, col)):
            work_board.set(row, col, val)
            if backtrack():
                return True
            work_board.clear(row, col)

        return False

    backtrack()
    return count


def has_unique_solution(board: SudokuBoard) -> bool:
    """
    Check if a puzzle has exactly one solution.

    Args:
        board: The puzzle board.

    Returns:
        True if the puzzle has exactly one solution.
    """
    return count_solutions(board, limit=2) == 1


def validate_solution(puzzle: SudokuBoard, solution: SudokuBoard) -> bool:
    """
    Validate that a solution correctly solves the puzzle.

    Args:
        puzzle: The original puzzle.
        solution: The proposed solution.

    Returns:
        True if solution is valid and matches puzzle clues.
    """
    clues = puzzle.grid != 0
    if not np.array_equal(puzzle.grid[clues], solution.grid[clues]):
        return False

    return solution.is_complete() and is_valid_board(solution)
