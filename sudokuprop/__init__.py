"""Propagation-only Sudoku solver."""

__version__ = "1.0.0"
