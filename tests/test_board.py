"""Unit tests for Sudoku board and validation."""

import pytest
import numpy as np
from neon_sudoku.core.board import SudokuBoard
from neon_sudoku.core.validator import (
    is_valid_placement,
    is_valid_board,
    count_solutions,
    has_unique_solution,
    validate_solution,
)

TEST_PUZZLE = (
    "530070000"
    "600195000"
    "098000060"
    "800060003"
    "400803001"
    "700020006"
    "060000280"
    "000419005"
    "000080079"
)

TEST_SOLUTION = (
    "534678912"
    "672195348"
    "198342567"
    "859761423"
    "426853791"
    "713924856"
    "961537284"
    "287419635"
    "345286179"
)


class TestSudokuBoard:
    """Tests for SudokuBoard class."""

    def test_create_empty_board(self):
        """Test creating an empty 9x9 board."""
        board = SudokuBoard()
        assert board.size == 9
        assert board.box_size == 3
        assert board.count_empty() == 81
        assert board.count_filled() == 0

    def test_rejects_other_sizes(self):
        with pytest.raises(ValueError):
            SudokuBoard(np.zeros((16, 16), dtype=np.int32))

    def test_rejects_out_of_range_values(self):
        grid = np.zeros((9, 9), dtype=np.int32)
        grid[0, 0] = 10
        with pytest.raises(ValueError):
            SudokuBoard(grid)

        board = SudokuBoard()
        with pytest.raises(ValueError):
            board.set(0, 0, -1)

    def test_set_and_get(self):
        """Test setting and getting values."""
        board = SudokuBoard()
        board.set(0, 0, 5)
        assert board.get(0, 0) == 5
        assert not board.is_empty(0, 0)

        board.clear(0, 0)
        assert board.is_empty(0, 0)

    def test_get_candidates(self):
        """Test getting valid candidates for a cell."""
        board = SudokuBoard()
        board.set(0, 0, 5)
        board.set(0, 1, 3)

        candidates = board.get_candidates(0, 2)
        assert 5 not in candidates
        assert 3 not in candidates
        assert len(candidates) == 7

    def test_find_empty_is_row_major(self):
        board = SudokuBoard.from_string(TEST_SOLUTION)
        assert board.find_empty() is None

        board.clear(5, 2)
        board.clear(3, 7)
        assert board.find_empty() == (3, 7)
        assert board.get_empty_cells() == [(3, 7), (5, 2)]

    def test_is_valid(self):
        """Test board validation."""
        board = SudokuBoard()
        assert board.is_valid()

        board.set(0, 0, 5)
        board.set(0, 1, 5)
        assert not board.is_valid()

    def test_box_conflict_is_invalid(self):
        board = SudokuBoard()
        board.set(0, 0, 7)
        board.set(2, 2, 7)
        assert not board.is_valid()

    def test_is_solved(self):
        assert SudokuBoard.from_string(TEST_SOLUTION).is_solved()
        assert not SudokuBoard.from_string(TEST_PUZZLE).is_solved()

    def test_from_string(self):
        """Test creating board from string."""
        board = SudokuBoard.from_string("." * 80 + "9")
        assert board.get(8, 8) == 9
        assert board.get(0, 0) == 0

    def test_from_string_rejects_bad_input(self):
        with pytest.raises(ValueError):
            SudokuBoard.from_string("123")
        with pytest.raises(ValueError):
            SudokuBoard.from_string("x" * 81)

    def test_string_and_list_conversion(self):
        board = SudokuBoard.from_string(TEST_PUZZLE)
        assert board.to_string() == TEST_PUZZLE
        assert board.to_list()[0] == [5, 3, 0, 0, 7, 0, 0, 0, 0]
        assert SudokuBoard.from_2d_list(board.to_list()) == board

    def test_pretty_print(self):
        text = str(SudokuBoard.from_string(TEST_PUZZLE))
        lines = text.splitlines()
        assert lines[0] == "+-------+-------+-------+"
        assert lines[1] == "| 5 3 . | . 7 . | . . . |"
        assert len(lines) == 13

    def test_copy(self):
        """Test board copy."""
        board = SudokuBoard()
        board.set(4, 4, 7)
        copy = board.copy()

        assert copy.get(4, 4) == 7

        copy.set(4, 4, 8)
        assert board.get(4, 4) == 7


class TestValidator:
    """Tests for validation utilities."""

    def test_is_valid_placement(self):
        """Test placement validation."""
        board = SudokuBoard()
        board.set(0, 0, 5)

        assert not is_valid_placement(board, 0, 5, 5)
        assert not is_valid_placement(board, 5, 0, 5)
        assert not is_valid_placement(board, 1, 1, 5)
        assert is_valid_placement(board, 0, 5, 7)

    def test_placement_ignores_own_cell(self):
        board = SudokuBoard.from_string(TEST_SOLUTION)
        assert is_valid_placement(board, 0, 0, 5)
        assert not is_valid_placement(board, 0, 0, 3)

    def test_placement_out_of_range(self):
        board = SudokuBoard()
        assert not is_valid_placement(board, 0, 0, 0)
        assert not is_valid_placement(board, 0, 0, 10)

    def test_validate_solution(self):
        puzzle = SudokuBoard.from_string(TEST_PUZZLE)
        solution = SudokuBoard.from_string(TEST_SOLUTION)
        assert validate_solution(puzzle, solution)

        other = SudokuBoard.from_string(TEST_PUZZLE)
        other.set(0, 2, 4)
        assert not validate_solution(puzzle, other)

    def test_is_valid_board(self):
        assert is_valid_board(SudokuBoard())
        assert is_valid_board(SudokuBoard.from_string(TEST_PUZZLE))

        board = SudokuBoard.from_string(TEST_PUZZLE)
        board.set(0, 2, 5)
        assert not is_valid_board(board)

    def test_count_solutions_on_conflicting_board(self):
        board = SudokuBoard.from_string(TEST_PUZZLE)
        board.set(0, 2, 3)
        assert count_solutions(board) == 0

    def test_unique_solution(self):
        assert has_unique_solution(SudokuBoard.from_string(TEST_PUZZLE))

    def test_multiple_solutions(self):
        assert count_solutions(SudokuBoard(), limit=2) == 2
        assert not has_unique_solution(SudokuBoard())


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
