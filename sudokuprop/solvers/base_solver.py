"""Base solver interface, results and common utilities."""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Dict, Any, List
import time
import tracemalloc

from ..core.board import SudokuBoard
from .candidates import CandidateGrid

STALLED_REASON = "stalled before all cells were filled"


class SolveStatus(Enum):
    """Terminal state of a solve attempt."""
    SOLVED = "solved"
    STALLED = "stalled"
    CONTRADICTION = "contradiction"


@dataclass
class SolveResult:
    """
    Outcome of a solve attempt.

    `board` is the final (possibly partial) grid. For failures, `reason`
    says why solving stopped and `remaining` how many cells are still empty.
    """
    status: SolveStatus
    board: SudokuBoard
    candidates: CandidateGrid = field(default_factory=CandidateGrid)
    remaining: int = 0
    iterations: int = 0
    reason: str = ""
    history: List[int] = field(default_factory=list)

    @property
    def solved(self) -> bool:
        return self.status is SolveStatus.SOLVED

    @classmethod
    def solved_with(cls, board: SudokuBoard, **kwargs) -> SolveResult:
        return cls(SolveStatus.SOLVED, board, remaining=0, **kwargs)

    @classmethod
    def stalled(cls, board: SudokuBoard, **kwargs) -> SolveResult:
        return cls(SolveStatus.STALLED, board, remaining=board.count_empty(),
                   reason=STALLED_REASON, **kwargs)

    @classmethod
    def contradiction(cls, board: SudokuBoard, reason: str, **kwargs) -> SolveResult:
        return cls(SolveStatus.CONTRADICTION, board, remaining=board.count_empty(),
                   reason=reason, **kwargs)


@dataclass
class SolverStats:
    """Statistics from a solver run."""
    # Core metrics
    solved: bool = False
    status: str = ""
    time_seconds: float = 0.0
    memory_bytes: int = 0
    iterations: int = 0

    # Propagation metrics
    cells_committed: int = 0
    hidden_singles: int = 0
    remaining: int = 0

    algorithm: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Convert stats to dictionary."""
        return {
            "solved": self.solved,
            "status": self.status,
            "time_seconds": self.time_seconds,
            "memory_bytes": self.memory_bytes,
            "iterations": self.iterations,
            "cells_committed": self.cells_committed,
            "hidden_singles": self.hidden_singles,
            "remaining": self.remaining,
            "algorithm": self.algorithm,
        }


class BaseSolver(ABC):
    """Abstract base class for Sudoku solvers."""

    name: str = "BaseSolver"

    def __init__(self):
        self.stats = SolverStats(algorithm=self.name)

    def solve(self, board: SudokuBoard) -> tuple[SolveResult, SolverStats]:
        """
        Solve a Sudoku puzzle with timing and memory tracking.

        The caller's board is never modified.

        Args:
            board: The puzzle to solve.

        Returns:
            Tuple of (result, stats).
        """
        self.stats = SolverStats(algorithm=self.name)

        # Leave tracing on if the caller started it
        owns_tracing = not tracemalloc.is_tracing()
        if owns_tracing:
            tracemalloc.start()
        start_time = time.perf_counter()

        try:
            result = self._solve(board.copy())
        finally:
            self.stats.time_seconds = time.perf_counter() - start_time
            _, peak = tracemalloc.get_traced_memory()
            if owns_tracing:
                tracemalloc.stop()
            self.stats.memory_bytes = peak

        self.stats.solved = result.solved
        self.stats.status = result.status.value
        self.stats.iterations = result.iterations
        self.stats.remaining = result.remaining

        return result, self.stats

    @abstractmethod
    def _solve(self, board: SudokuBoard) -> SolveResult:
        """
        Internal solve method to be implemented by subclasses.

        Args:
            board: A copy of the puzzle to solve (can be modified).

        Returns:
            The terminal result.
        """
        pass
