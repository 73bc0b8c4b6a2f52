"""Sudoku puzzle generator with fixed removal counts per difficulty."""

from __future__ import annotations
import logging
import random
from enum import Enum
from typing import List, Tuple, Optional, Union

from tqdm import tqdm

from ..core.board import SudokuBoard, GRID_SIZE
from ..solvers import solve

log = logging.getLogger(__name__)


class Difficulty(Enum):
    """Difficulty levels for Sudoku puzzles."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @property
    def cells_to_remove(self) -> int:
        """Number of random clear operations applied to the solved grid."""
        counts = {
            Difficulty.EASY: 40,
            Difficulty.MEDIUM: 50,
            Difficulty.HARD: 60,
        }
        return counts[self]

    @classmethod
    def parse(cls, value: Union[Difficulty, str]) -> Difficulty:
        """Accept a Difficulty or its name ("easy", "medium", "hard")."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            choices = ", ".join(d.value for d in cls)
            raise ValueError(f"Unknown difficulty {value!r}, expected one of: {choices}") from None


class SudokuGenerator:
    """
    Generator for Sudoku puzzles.

    Algorithm:
    1. Solve an empty board with the backtracking solver
    2. Keep a copy of it as the solution
    3. Clear ``difficulty.cells_to_remove`` randomly drawn cells of another copy

    Cells are drawn with replacement, so a puzzle may have fewer empty cells
    than the removal count. Uniqueness of the puzzle's solution is not
    checked.
    """

    def __init__(self, rng: Optional[random.Random] = None, seed: Optional[int] = None):
        """
        Initialize the generator.

        Args:
            rng: Random source used for cell removal.
            seed: Seed for a new random source when ``rng`` is not given.
        """
        if rng is None:
            rng = random.Random(seed)
        self.rng = rng

    def generate(
        self, difficulty: Union[Difficulty, str] = Difficulty.EASY
    ) -> Tuple[SudokuBoard, SudokuBoard]:
        """
        Generate a puzzle along with its solution.

        Args:
            difficulty: Desired difficulty level.

        Returns:
            Tuple of (puzzle, solution) SudokuBoards, both freshly created.
        """
        difficulty = Difficulty.parse(difficulty)

        solution = self._generate_complete_board()
        puzzle = self._remove_cells(solution, difficulty)

        log.debug(
            "Generated %s puzzle: %d clues, %d empty",
            difficulty.value, puzzle.count_filled(), puzzle.count_empty()
        )
        return puzzle, solution

    def generate_batch(
        self,
        count: int,
        difficulty: Union[Difficulty, str] = Difficulty.EASY,
        show_progress: bool = False,
    ) -> List[Tuple[SudokuBoard, SudokuBoard]]:
        """
        Generate multiple puzzles of the same difficulty.

        Args:
            count: Number of puzzles to generate.
            difficulty: Desired difficulty level.
            show_progress: Show a tqdm progress bar.

        Returns:
            List of (puzzle, solution) pairs.
        """
        difficulty = Difficulty.parse(difficulty)
        return [
            self.generate(difficulty)
            for _ in tqdm(range(count), desc=f"Generating {difficulty.value}",
                          disable=not show_progress)
        ]

    def _generate_complete_board(self) -> SudokuBoard:
        """Solve an empty board; always succeeds."""
        board = SudokuBoard()
        solve(board)
        return board

    def _remove_cells(self, solution: SudokuBoard, difficulty: Difficulty) -> SudokuBoard:
        """Clear random cells of a copy of the solution."""
        puzzle = solution.copy()

        for _ in range(difficulty.cells_to_remove):
            row = self.rng.randrange(GRID_SIZE)
            col = self.rng.randrange(GRID_SIZE)
            puzzle.clear(row, col)

        return puzzle


def generate(
    difficulty: Union[Difficulty, str] = Difficulty.EASY,
    rng: Optional[random.Random] = None,
) -> Tuple[SudokuBoard, SudokuBoard]:
    """Generate a (puzzle, solution) pair with a one-off generator."""
    return SudokuGenerator(rng=rng).generate(difficulty)
