"""Base solver interface and common utilities."""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, Any
import logging
import time

from ..core.board import SudokuBoard

log = logging.getLogger(__name__)


@dataclass
class SolverStats:
    """Statistics from a solver run."""
    solved: bool = False
    time_seconds: float = 0.0
    iterations: int = 0

    backtracks: int = 0
    nodes_explored: int = 0

    algorithm: str = ""
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert stats to dictionary."""
        return {
            "solved": self.solved,
            "time_seconds": self.time_seconds,
            "iterations": self.iterations,
            "backtracks": self.backtracks,
            "nodes_explored": self.nodes_explored,
            "algorithm": self.algorithm,
            **self.extra
        }


class BaseSolver(ABC):
    """
    Abstract base class for in-place Sudoku solvers.

    ``solve`` mutates the board it is given. On success the board holds a
    complete valid assignment; on failure it is left exactly as it was.
    """

    name: str = "BaseSolver"

    def __init__(self):
        self.stats = SolverStats(algorithm=self.name)

    def solve(self, board: SudokuBoard) -> bool:
        """
        Solve a Sudoku puzzle in place, with timing.

        Args:
            board: The puzzle to solve. Mutated in place.

        Returns:
            True if a completion was found.
        """
        self.stats = SolverStats(algorithm=self.name)

        start_time = time.perf_counter()
        solved = self._solve(board)
        self.stats.time_seconds = time.perf_counter() - start_time
        self.stats.solved = solved

        log.debug(
            "%s finished: solved=%s iterations=%d backtracks=%d in %.4fs",
            self.name, solved, self.stats.iterations,
            self.stats.backtracks, self.stats.time_seconds
        )
        return solved

    @abstractmethod
    def _solve(self, board: SudokuBoard) -> bool:
        """
        Internal solve method to be implemented by subclasses.

        Args:
            board: The puzzle to solve, mutated in place.

        Returns:
            True if a completion was found.
        """

    def reset_stats(self) -> None:
        """Reset solver statistics."""
        self.stats = SolverStats(algorithm=self.name)
