"""Benchmark module for comparing propagation strategies."""

from .benchmark import Benchmark, BenchmarkResult
from .puzzles import PUZZLES, LEVELS
from .visualizer import Visualizer

__all__ = ["Benchmark", "BenchmarkResult", "PUZZLES", "LEVELS", "Visualizer"]
