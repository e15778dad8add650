"""Core module for Sudoku board representation, parsing and rendering."""

from .board import SudokuBoard, Zone, zones
from .errors import (
    SudokuError,
    InvalidPuzzleError,
    InputShapeError,
    InputCharacterError,
    CellOccupiedError,
    InvariantViolation,
)
from .validator import parse_puzzle, is_valid_placement, is_valid_board, validate_solution
from .render import render, render_candidates

__all__ = [
    "SudokuBoard",
    "Zone",
    "zones",
    "SudokuError",
    "InvalidPuzzleError",
    "InputShapeError",
    "InputCharacterError",
    "CellOccupiedError",
    "InvariantViolation",
    "parse_puzzle",
    "is_valid_placement",
    "is_valid_board",
    "validate_solution",
    "render",
    "render_candidates",
]
