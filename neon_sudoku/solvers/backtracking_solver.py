"""Plain depth-first backtracking solver."""

from __future__ import annotations

from .base_solver import BaseSolver
from ..core.board import SudokuBoard, GRID_SIZE
from ..core.validator import is_valid_placement


class BacktrackingSolver(BaseSolver):
    """
    Depth-first search over the empty cells of a board.

    Cells are visited in row-major order and digits are tried in ascending
    order, with legality re-checked from scratch on every trial. There is no
    constraint propagation and no cell-ordering heuristic, so the result is
    fully deterministic: an empty board always yields the same solved grid.
    """

    name = "Backtracking"

    def _solve(self, board: SudokuBoard) -> bool:
        return self._backtrack(board)

    def _backtrack(self, board: SudokuBoard) -> bool:
        """
        Recursive backtracking step.

        Every digit placed here is cleared again before returning False, so a
        failed call leaves the board as it found it.
        """
        self.stats.iterations += 1

        cell = board.find_empty()
        if cell is None:
            return True

        row, col = cell
        self.stats.nodes_explored += 1

        for value in range(1, GRID_SIZE + 1):
            if not is_valid_placement(board, row, col, value):
                continue

            board.set(row, col, value)
            if self._backtrack(board):
                return True

            board.clear(row, col)
            self.stats.backtracks += 1

        return False


def solve(board: SudokuBoard) -> bool:
    """
    Complete ``board`` in place.

    Returns:
        True if a completion was found. On False the board is unchanged.
    """
    return BacktrackingSolver().solve(board)
