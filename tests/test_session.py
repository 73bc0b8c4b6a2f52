"""Unit tests for game session bookkeeping."""

import pytest
from neon_sudoku.core.board import SudokuBoard
from neon_sudoku.generator import SudokuGenerator, Difficulty
from neon_sudoku.game import GameSession, GameState, HINTS_PER_GAME, format_time


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

# (0, 2) -> 4, (0, 3) -> 6, (4, 4) -> 5
EMPTY_CELLS = [(0, 2), (0, 3), (4, 4)]


@pytest.fixture
def session():
    solution = SudokuBoard.from_string(TEST_SOLUTION)
    puzzle = solution.copy()
    for row, col in EMPTY_CELLS:
        puzzle.clear(row, col)
    return GameSession(puzzle, solution, Difficulty.EASY)


class TestGameSession:
    """Tests for GameSession construction and selection."""

    def test_new_game(self):
        game = GameSession.new("medium", SudokuGenerator(seed=4))

        assert game.difficulty is Difficulty.MEDIUM
        assert game.state is GameState.SOLVING
        assert game.hints_left == HINTS_PER_GAME
        assert game.elapsed == 0
        assert game.selected is None
        assert game.solution.is_solved()

    def test_copies_boards(self):
        puzzle = SudokuBoard.from_string(TEST_SOLUTION)
        game = GameSession(puzzle, puzzle)
        puzzle.clear(0, 0)

        assert game.board.get(0, 0) == 5
        assert game.state is GameState.COMPLETED

    def test_select(self, session):
        session.select(2, 3)
        assert session.selected == (2, 3)

        session.select(9, 0)
        assert session.selected is None

    def test_move_selection_clamps(self, session):
        session.move_selection("up")
        assert session.selected == (0, 0)

        session.move_selection("d")
        session.move_selection("s")
        assert session.selected == (1, 1)

        session.select(8, 8)
        session.move_selection("right")
        session.move_selection("Down")
        assert session.selected == (8, 8)

    @pytest.mark.parametrize("direction", ["up", "down", "left", "right", "w", "a", "s", "d"])
    def test_first_move_selects_top_left(self, session, direction):
        session.move_selection(direction)
        assert session.selected == (0, 0)

    def test_move_selection_unknown(self, session):
        with pytest.raises(ValueError):
            session.move_selection("north")


class TestMoves:
    """Tests for placing digits, hints and undo."""

    def test_place_correct_number(self, session):
        session.select(0, 2)
        assert session.place_number(4)

        assert session.board.get(0, 2) == 4
        assert session.state is GameState.SOLVING
        assert len(session.moves) == 1

    def test_place_wrong_number_then_undo(self, session):
        session.select(0, 2)
        session.place_number(9)

        assert session.state is GameState.ERROR
        assert session.conflicting_cells() == [(0, 2)]
        assert not session.is_correct(0, 2, 9)

        # Still playable while in error
        assert session.undo()
        assert session.board.is_empty(0, 2)
        assert session.state is GameState.SOLVING

    def test_overwrite_wrong_number(self, session):
        session.select(0, 3)
        session.place_number(1)
        session.place_number(6)

        assert session.state is GameState.SOLVING
        assert [m.previous for m in session.moves] == [0, 1]

    def test_correct_cells_are_locked(self, session):
        session.select(0, 0)
        assert not session.place_number(1)
        assert session.board.get(0, 0) == 5
        assert not session.moves

    def test_place_requires_selection(self, session):
        assert not session.place_number(4)

    def test_place_rejects_bad_value(self, session):
        session.select(0, 2)
        with pytest.raises(ValueError):
            session.place_number(0)

    def test_hint(self, session):
        session.select(4, 4)
        assert session.use_hint()

        assert session.board.get(4, 4) == 5
        assert session.hints_left == HINTS_PER_GAME - 1
        assert not session.use_hint()

    def test_hints_run_out(self, session):
        session.hints_left = 0
        session.select(4, 4)

        assert not session.use_hint()
        assert session.board.is_empty(4, 4)

    def test_undo_without_moves(self, session):
        assert not session.undo()

    def test_highlighted_cells(self, session):
        session.select(0, 0)
        highlighted = session.highlighted_cells()

        assert len(highlighted) == 7
        assert (0, 0) not in highlighted
        assert all(session.board.get(r, c) == 5 for r, c in highlighted)

        session.select(0, 2)
        assert session.highlighted_cells() == set()


class TestCompletion:
    """Tests for finishing a game and the clock."""

    def test_complete_game(self, session):
        session.tick(65)
        for (row, col), value in zip(EMPTY_CELLS, [4, 6, 5]):
            session.select(row, col)
            session.place_number(value)

        assert session.state is GameState.COMPLETED
        assert session.time_display == "01:05"

        session.tick()
        assert session.elapsed == 65
        assert not session.undo()
        session.select(0, 2)
        assert not session.use_hint()

    def test_tick(self, session):
        session.tick()
        session.tick(2)
        assert session.elapsed == 3

    def test_format_time(self):
        assert format_time(0) == "00:00"
        assert format_time(59) == "00:59"
        assert format_time(754) == "12:34"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
