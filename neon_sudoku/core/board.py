"""Sudoku board representation for the standard 9x9 game."""

from __future__ import annotations
import numpy as np
from typing import List, Tuple, Optional, Set

GRID_SIZE = 9
BOX_SIZE = 3


class SudokuBoard:
    """
    Represents a 9x9 Sudoku board.

    Cells hold 0 for empty or a digit 1-9. Rows and columns are zero-indexed
    and the nine 3x3 boxes are the usual non-overlapping regions.
    """

    size = GRID_SIZE
    box_size = BOX_SIZE

    def __init__(self, grid: Optional[np.ndarray] = None):
        """
        Initialize a Sudoku board.

        Args:
            grid: Optional initial 9x9 grid. If None, creates empty board.
        """
        if grid is not None:
            grid = np.asarray(grid)
            if grid.shape != (GRID_SIZE, GRID_SIZE):
                raise ValueError(f"Grid shape must be ({GRID_SIZE}, {GRID_SIZE}), got {grid.shape}")
            if grid.min() < 0 or grid.max() > GRID_SIZE:
                raise ValueError(f"Grid values must be 0-{GRID_SIZE}")
            self.grid = grid.copy().astype(np.int32)
        else:
            self.grid = np.zeros((GRID_SIZE, GRID_SIZE), dtype=np.int32)

    def copy(self) -> SudokuBoard:
        """Create a deep copy of the board."""
        new_board = SudokuBoard()
        new_board.grid = self.grid.copy()
        return new_board

    def get(self, row: int, col: int) -> int:
        """Get value at position (row, col). 0 means empty."""
        return int(self.grid[row, col])

    def set(self, row: int, col: int, value: int) -> None:
        """Set value at position (row, col). Use 0 to clear."""
        if value < 0 or value > GRID_SIZE:
            raise ValueError(f"Value must be 0-{GRID_SIZE}, got {value}")
        self.grid[row, col] = value

    def clear(self, row: int, col: int) -> None:
        """Clear the cell at position (row, col)."""
        self.grid[row, col] = 0

    def is_empty(self, row: int, col: int) -> bool:
        """Check if cell is empty (value is 0)."""
        return self.grid[row, col] == 0

    def get_row(self, row: int) -> np.ndarray:
        """Get all values in a row."""
        return self.grid[row, :]

    def get_col(self, col: int) -> np.ndarray:
        """Get all values in a column."""
        return self.grid[:, col]

    def get_box(self, row: int, col: int) -> np.ndarray:
        """Get all values in the box containing (row, col)."""
        box_row = row - row % BOX_SIZE
        box_col = col - col % BOX_SIZE
        return self.grid[box_row:box_row + BOX_SIZE,
                         box_col:box_col + BOX_SIZE].flatten()

    def get_candidates(self, row: int, col: int) -> Set[int]:
        """
        Get all valid candidate values for an empty cell.

        Returns:
            Set of values 1-9 that can be placed at (row, col).
            Returns empty set if cell is not empty.
        """
        if not self.is_empty(row, col):
            return set()

        used = set(self.get_row(row).tolist())
        used |= set(self.get_col(col).tolist())
        used |= set(self.get_box(row, col).tolist())

        return set(range(1, GRID_SIZE + 1)) - used

    def find_empty(self) -> Optional[Tuple[int, int]]:
        """First empty cell scanning left-to-right, top-to-bottom, or None."""
        for i in range(GRID_SIZE):
            for j in range(GRID_SIZE):
                if self.grid[i, j] == 0:
                    return i, j
        return None

    def get_empty_cells(self) -> List[Tuple[int, int]]:
        """Get list of all empty cell positions in row-major order."""
        return [(int(i), int(j)) for i, j in np.argwhere(self.grid == 0)]

    def count_empty(self) -> int:
        """Count the number of empty cells."""
        return int(np.sum(self.grid == 0))

    def count_filled(self) -> int:
        """Count the number of filled cells."""
        return int(np.sum(self.grid != 0))

    def is_complete(self) -> bool:
        """Check if all cells are filled."""
        return self.count_empty() == 0

    def is_valid(self) -> bool:
        """
        Check if the current board state is valid.
        Does not check if solution is complete, only if no conflicts exist.
        """
        units = [self.get_row(i) for i in range(GRID_SIZE)]
        units += [self.get_col(j) for j in range(GRID_SIZE)]
        units += [
            self.get_box(box_row, box_col)
            for box_row in range(0, GRID_SIZE, BOX_SIZE)
            for box_col in range(0, GRID_SIZE, BOX_SIZE)
        ]

        for unit in units:
            non_zero = unit[unit != 0]
            if len(non_zero) != len(set(non_zero.tolist())):
                return False

        return True

    def is_solved(self) -> bool:
        """Check if the puzzle is completely and correctly solved."""
        return self.is_complete() and self.is_valid()

    def to_string(self) -> str:
        """Convert board to an 81-character string, 0 for empty cells."""
        return ''.join(str(v) for v in self.grid.flatten().tolist())

    def to_list(self) -> List[List[int]]:
        """Convert board to a nested list of ints."""
        return self.grid.tolist()

    @classmethod
    def from_string(cls, s: str) -> SudokuBoard:
        """
        Create a board from a string representation.

        Args:
            s: String of 81 characters. 0 or . for empty, 1-9 for values.
        """
        s = s.strip()
        if len(s) != GRID_SIZE * GRID_SIZE:
            raise ValueError(f"String length must be {GRID_SIZE * GRID_SIZE}, got {len(s)}")

        values = []
        for c in s:
            if c in '0.':
                values.append(0)
            elif c.isdigit():
                values.append(int(c))
            else:
                raise ValueError(f"Invalid character in puzzle string: {c!r}")

        return cls(np.array(values, dtype=np.int32).reshape(GRID_SIZE, GRID_SIZE))

    @classmethod
    def from_2d_list(cls, data: List[List[int]]) -> SudokuBoard:
        """Create a board from a 2D list."""
        return cls(np.array(data, dtype=np.int32))

    def __str__(self) -> str:
        """Pretty-print the board."""
        lines = []
        horizontal_sep = '+' + (('-' * (BOX_SIZE * 2 + 1)) + '+') * BOX_SIZE

        for i in range(GRID_SIZE):
            if i % BOX_SIZE == 0:
                lines.append(horizontal_sep)

            row_str = '|'
            for j in range(GRID_SIZE):
                val = self.grid[i, j]
                row_str += ' .' if val == 0 else f' {val}'
                if (j + 1) % BOX_SIZE == 0:
                    row_str += ' |'

            lines.append(row_str)

        lines.append(horizontal_sep)
        return '\n'.join(lines)

    def __repr__(self) -> str:
        return f"SudokuBoard(filled={self.count_filled()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SudokuBoard):
            return False
        return np.array_equal(self.grid, other.grid)

    def __hash__(self) -> int:
        return hash(self.to_string())
