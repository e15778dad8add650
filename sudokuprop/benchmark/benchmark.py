"""Benchmarking framework for comparing propagation strategies."""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import List, Dict, Any, Optional
import json
import os

from tqdm import tqdm

from ..core.board import SudokuBoard
from ..solvers import BaseSolver, PropagationSolver
from .puzzles import PUZZLES

log = logging.getLogger(__name__)


@dataclass
class BenchmarkResult:
    """Results from a single benchmark run."""
    puzzle_id: int
    level: str
    algorithm: str
    status: str
    solved: bool
    time_seconds: float
    memory_bytes: int
    iterations: int
    cells_committed: int
    hidden_singles: int
    remaining: int
    history: List[int] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "puzzle_id": self.puzzle_id,
            "level": self.level,
            "algorithm": self.algorithm,
            "status": self.status,
            "solved": self.solved,
            "time_seconds": self.time_seconds,
            "memory_bytes": self.memory_bytes,
            "memory_mb": self.memory_bytes / (1024 * 1024),
            "iterations": self.iterations,
            "cells_committed": self.cells_committed,
            "hidden_singles": self.hidden_singles,
            "remaining": self.remaining,
            "history": self.history,
        }


class Benchmark:
    """
    Benchmark framework for comparing propagation strategies.

    Runs every solver on every puzzle of the selected levels and collects
    the terminal status and performance metrics.
    """

    def __init__(
        self,
        puzzles: Optional[Dict[str, List[str]]] = None,
        solvers: Optional[Dict[str, BaseSolver]] = None,
    ):
        """
        Initialize the benchmark.

        Args:
            puzzles: Dict of level -> puzzle strings (default: built-in set).
            solvers: Dict of solver_name -> solver_instance (default: both
                     propagation strategies).

        Raises:
            InvalidPuzzleError: a puzzle string is malformed.
        """
        puzzles = puzzles if puzzles is not None else PUZZLES
        self.puzzles: Dict[str, List[SudokuBoard]] = {
            level: [SudokuBoard.from_string(p) for p in strings]
            for level, strings in puzzles.items()
        }

        if solvers is None:
            self.solvers = {
                "Naked Singles": PropagationSolver(use_unique_positions=False),
                "Propagation": PropagationSolver(),
            }
        else:
            self.solvers = solvers

        self.results: List[BenchmarkResult] = []

    @property
    def levels(self) -> List[str]:
        return list(self.puzzles)

    def run(self, show_progress: bool = True) -> List[BenchmarkResult]:
        """
        Run the full benchmark suite.

        Returns:
            List of BenchmarkResult objects.
        """
        self.results = []

        total_tests = sum(len(p) for p in self.puzzles.values()) * len(self.solvers)
        pbar = tqdm(total=total_tests, desc="Benchmarking", disable=not show_progress)

        for level, puzzles in self.puzzles.items():
            for puzzle_id, puzzle in enumerate(puzzles):
                for solver_name, solver in self.solvers.items():
                    self.results.append(
                        self._run_single(puzzle, puzzle_id, level, solver_name, solver)
                    )
                    pbar.update(1)

        pbar.close()
        return self.results

    def _run_single(
        self,
        puzzle: SudokuBoard,
        puzzle_id: int,
        level: str,
        solver_name: str,
        solver: BaseSolver
    ) -> BenchmarkResult:
        """Run a single solver on a single puzzle."""
        result, stats = solver.solve(puzzle)
        log.debug("%s on %s #%d: %s", solver_name, level, puzzle_id, stats.status)

        metrics = stats.to_dict()
        metrics["algorithm"] = solver_name
        return BenchmarkResult(
            puzzle_id=puzzle_id,
            level=level,
            history=list(result.history),
            **metrics,
        )

    def get_summary(self) -> Dict[str, Any]:
        """Get summary statistics from benchmark results."""
        summary = {
            "total_puzzles": sum(len(p) for p in self.puzzles.values()),
            "solvers_tested": list(self.solvers.keys()),
            "levels": self.levels,
            "results_by_algorithm": {},
            "results_by_level": {}
        }

        for solver_name in self.solvers:
            solver_results = [r for r in self.results if r.algorithm == solver_name]
            if solver_results:
                solved = [r for r in solver_results if r.solved]
                times = [r.time_seconds for r in solver_results]

                summary["results_by_algorithm"][solver_name] = {
                    "accuracy": len(solved) / len(solver_results) * 100,
                    "avg_time_seconds": sum(times) / len(times),
                    "max_time_seconds": max(times),
                    "avg_remaining": sum(r.remaining for r in solver_results) / len(solver_results),
                    "stalled": sum(1 for r in solver_results if r.status == "stalled"),
                    "contradictions": sum(1 for r in solver_results if r.status == "contradiction"),
                    "total_solved": len(solved),
                    "total_tested": len(solver_results)
                }

        for level in self.levels:
            level_results = [r for r in self.results if r.level == level]
            if level_results:
                summary["results_by_level"][level] = {}

                for solver_name in self.solvers:
                    solver_level_results = [
                        r for r in level_results if r.algorithm == solver_name
                    ]
                    if solver_level_results:
                        solved = [r for r in solver_level_results if r.solved]
                        summary["results_by_level"][level][solver_name] = {
                            "accuracy": len(solved) / len(solver_level_results) * 100,
                            "solved": len(solved),
                            "tested": len(solver_level_results)
                        }

        return summary

    def save_results(self, output_dir: str) -> List[str]:
        """Save benchmark results and summary as JSON files."""
        os.makedirs(output_dir, exist_ok=True)

        results_file = os.path.join(output_dir, "benchmark_results.json")
        with open(results_file, "w") as f:
            json.dump([r.to_dict() for r in self.results], f, indent=2)

        summary_file = os.path.join(output_dir, "benchmark_summary.json")
        with open(summary_file, "w") as f:
            json.dump(self.get_summary(), f, indent=2)

        log.info("Results saved to %s", output_dir)
        return [results_file, summary_file]
