"""Solvers module for Sudoku puzzles."""

from .base_solver import BaseSolver, SolverStats, SolveResult, SolveStatus
from .candidates import CandidateGrid, compute_candidates
from .reduction import Deduction, reduce_zone, reduce_unique_positions, commit_singles
from .propagation_solver import PropagationSolver

__all__ = [
    "BaseSolver",
    "SolverStats",
    "SolveResult",
    "SolveStatus",
    "CandidateGrid",
    "compute_candidates",
    "Deduction",
    "reduce_zone",
    "reduce_unique_positions",
    "commit_singles",
    "PropagationSolver",
]
