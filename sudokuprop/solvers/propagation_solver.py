"""Propagation-only solver: naked singles plus hidden singles, no guessing."""

from __future__ import annotations
import logging
from typing import Callable, Optional

from .base_solver import BaseSolver, SolveResult
from .candidates import CandidateGrid, compute_candidates
from .reduction import commit_singles, reduce_unique_positions
from ..core.board import SudokuBoard
from ..core.errors import InvariantViolation
from ..core.validator import find_conflict

log = logging.getLogger(__name__)

IterationObserver = Callable[[int, SudokuBoard, CandidateGrid], None]


class PropagationSolver(BaseSolver):
    """
    Sudoku solver using iterative constraint propagation.

    Each iteration:
    - Unique-position reduction: a value that fits only one cell of a
      box, row or column forces that cell (hidden singles).
    - Commit: every cell left with one candidate gets that value
      (naked singles).
    - Candidates are recomputed from the updated board.

    Solving stops when the board is full, when an iteration fills no cell
    (stalled), or when the state becomes contradictory. There is no
    backtracking fallback.
    """

    name = "Propagation"

    def __init__(
        self,
        use_unique_positions: bool = True,
        max_iterations: int = 81,
        on_iteration: Optional[IterationObserver] = None,
    ):
        """
        Initialize the propagation solver.

        Args:
            use_unique_positions: If False, only naked singles are committed.
            max_iterations: Hard limit on the number of iterations.
            on_iteration: Called as (iteration, board, candidates) after
                          each iteration. Must not modify its arguments.
        """
        if max_iterations < 1:
            raise ValueError(f"max_iterations must be positive, got {max_iterations}")
        self.use_unique_positions = use_unique_positions
        self.max_iterations = max_iterations
        self.on_iteration = on_iteration
        if not use_unique_positions:
            self.name = "Naked Singles"
        super().__init__()

    def _solve(self, board: SudokuBoard) -> SolveResult:
        remains = board.count_empty()
        history = [remains]

        if remains == 0:
            log.info("Puzzle has no empty cells")
            return SolveResult.solved_with(board, history=history)

        candidates = compute_candidates(board)
        try:
            self._check_consistency(board, candidates)
        except InvariantViolation as e:
            log.info("Contradiction before first iteration: %s", e)
            return SolveResult.contradiction(board, str(e), candidates=candidates,
                                             history=history)

        iteration = 0
        while iteration < self.max_iterations:
            iteration += 1

            if self.use_unique_positions:
                try:
                    deductions = reduce_unique_positions(candidates)
                except InvariantViolation as e:
                    log.info("Contradiction in iteration %d: %s", iteration, e)
                    return SolveResult.contradiction(board, str(e), candidates=candidates,
                                                     iterations=iteration, history=history)
                self.stats.hidden_singles += len(deductions)

            committed = commit_singles(board, candidates)
            self.stats.cells_committed += len(committed)

            candidates = compute_candidates(board)
            now = board.count_empty()
            history.append(now)
            log.debug("Iteration %d: committed %d cells, %d empty",
                      iteration, len(committed), now)

            if self.on_iteration is not None:
                self.on_iteration(iteration, board, candidates)

            try:
                self._check_consistency(board, candidates)
            except InvariantViolation as e:
                log.info("Contradiction after iteration %d: %s", iteration, e)
                return SolveResult.contradiction(board, str(e), candidates=candidates,
                                                 iterations=iteration, history=history)

            if now == 0:
                log.info("Solved in %d iterations", iteration)
                return SolveResult.solved_with(board, candidates=candidates,
                                               iterations=iteration, history=history)

            if now == remains:
                log.info("Stalled after %d iterations with %d empty cells",
                         iteration, now)
                return SolveResult.stalled(board, candidates=candidates,
                                           iterations=iteration, history=history)

            remains = now

        log.info("Stopped at iteration limit %d with %d empty cells",
                 self.max_iterations, board.count_empty())
        return SolveResult.stalled(board, candidates=candidates,
                                   iterations=iteration, history=history)

    @staticmethod
    def _check_consistency(board: SudokuBoard, candidates: CandidateGrid) -> None:
        """
        Raise InvariantViolation if the state cannot lead to a solution.

        Checks for duplicated digits in a zone and for empty cells without
        candidates.
        """
        conflict = find_conflict(board)
        if conflict is not None:
            zone, value = conflict
            raise InvariantViolation(f"value {value} appears twice in {zone.label}")

        dead = candidates.dead_cells(board)
        if dead:
            row, col = dead[0]
            raise InvariantViolation(
                f"cell r{row + 1},c{col + 1} has no remaining candidates",
                cell=(row, col),
            )
