"""Game-state bookkeeping for a single Sudoku game."""

from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Set, Tuple, Union

import numpy as np

from ..core.board import SudokuBoard, GRID_SIZE
from ..generator import SudokuGenerator, Difficulty

log = logging.getLogger(__name__)

HINTS_PER_GAME = 3

DIRECTIONS = {
    "up": (-1, 0),
    "down": (1, 0),
    "left": (0, -1),
    "right": (0, 1),
    "w": (-1, 0),
    "s": (1, 0),
    "a": (0, -1),
    "d": (0, 1),
}


class GameState(Enum):
    """Where the player stands relative to the solution."""
    SOLVING = "solving"
    ERROR = "error"
    COMPLETED = "completed"


@dataclass(frozen=True)
class Move:
    """One player edit, enough to undo it."""
    row: int
    col: int
    previous: int


def format_time(seconds: int) -> str:
    """Format elapsed seconds as MM:SS."""
    mins, secs = divmod(int(seconds), 60)
    return f"{mins:02d}:{secs:02d}"


class GameSession:
    """
    A game in progress: the player's board checked against a fixed solution.

    Correctness is a direct comparison with the stored solution; the solver
    is never re-run during play.
    """

    def __init__(
        self,
        puzzle: SudokuBoard,
        solution: SudokuBoard,
        difficulty: Union[Difficulty, str] = Difficulty.EASY,
        hints: int = HINTS_PER_GAME,
    ):
        self.board = puzzle.copy()
        self.solution = solution.copy()
        self.difficulty = Difficulty.parse(difficulty)
        self.hints_left = hints
        self.moves: List[Move] = []
        self.selected: Optional[Tuple[int, int]] = None
        self.elapsed = 0
        self.state = GameState.SOLVING
        self._check_state()

    @classmethod
    def new(
        cls,
        difficulty: Union[Difficulty, str] = Difficulty.EASY,
        generator: Optional[SudokuGenerator] = None,
    ) -> GameSession:
        """Start a fresh game from a newly generated puzzle."""
        generator = generator or SudokuGenerator()
        puzzle, solution = generator.generate(difficulty)
        log.info("New %s game with %d empty cells", Difficulty.parse(difficulty).value,
                 puzzle.count_empty())
        return cls(puzzle, solution, difficulty)

    # Selection

    def select(self, row: int, col: int) -> None:
        """Select a cell; coordinates outside the grid clear the selection."""
        if 0 <= row < GRID_SIZE and 0 <= col < GRID_SIZE:
            self.selected = (row, col)
        else:
            self.selected = None

    def move_selection(self, direction: str) -> None:
        """Move the selection one cell, clamped to the grid edges."""
        try:
            d_row, d_col = DIRECTIONS[direction.lower()]
        except KeyError:
            raise ValueError(f"Unknown direction {direction!r}") from None

        row, col = self.selected if self.selected is not None else (-1, -1)
        self.selected = (
            max(0, min(GRID_SIZE - 1, row + d_row)),
            max(0, min(GRID_SIZE - 1, col + d_col)),
        )

    # Checks

    def is_correct(self, row: int, col: int, value: int) -> bool:
        """Whether ``value`` is the solution digit at (row, col)."""
        return self.solution.get(row, col) == value

    def conflicting_cells(self) -> List[Tuple[int, int]]:
        """Filled cells whose digit disagrees with the solution."""
        wrong = (self.board.grid != 0) & (self.board.grid != self.solution.grid)
        return [(int(r), int(c)) for r, c in np.argwhere(wrong)]

    def highlighted_cells(self) -> Set[Tuple[int, int]]:
        """Other cells holding the same digit as the selected cell."""
        if self.selected is None:
            return set()
        row, col = self.selected
        value = self.board.get(row, col)
        if value == 0:
            return set()
        cells = {(int(r), int(c)) for r, c in np.argwhere(self.board.grid == value)}
        cells.discard(self.selected)
        return cells

    # Edits

    def place_number(self, value: int) -> bool:
        """
        Write ``value`` into the selected cell.

        Returns:
            True if the board changed.
        """
        if value < 1 or value > GRID_SIZE:
            raise ValueError(f"Value must be 1-{GRID_SIZE}, got {value}")
        if not self._editable():
            return False

        row, col = self.selected
        self._write(row, col, value)
        return True

    def use_hint(self) -> bool:
        """
        Reveal the solution digit of the selected cell.

        Returns:
            True if a hint was spent.
        """
        if self.hints_left <= 0 or not self._editable():
            return False

        row, col = self.selected
        self._write(row, col, self.solution.get(row, col))
        self.hints_left -= 1
        log.debug("Hint used at (%d, %d), %d left", row, col, self.hints_left)
        return True

    def undo(self) -> bool:
        """
        Revert the most recent move.

        Returns:
            True if a move was undone.
        """
        if not self.moves or self.state is GameState.COMPLETED:
            return False

        move = self.moves.pop()
        self.board.set(move.row, move.col, move.previous)
        self._check_state()
        return True

    def tick(self, seconds: int = 1) -> None:
        """Advance the game clock unless the game is over."""
        if self.state is not GameState.COMPLETED:
            self.elapsed += seconds

    @property
    def time_display(self) -> str:
        return format_time(self.elapsed)

    def _editable(self) -> bool:
        if self.state is GameState.COMPLETED or self.selected is None:
            return False
        row, col = self.selected
        return self.board.get(row, col) != self.solution.get(row, col)

    def _write(self, row: int, col: int, value: int) -> None:
        self.moves.append(Move(row, col, self.board.get(row, col)))
        self.board.set(row, col, value)
        self._check_state()

    def _check_state(self) -> None:
        if self.conflicting_cells():
            self.state = GameState.ERROR
        elif self.board == self.solution:
            self.state = GameState.COMPLETED
            log.info("Puzzle completed in %s", self.time_display)
        else:
            self.state = GameState.SOLVING
