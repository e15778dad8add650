"""Exception types raised by the board, parser and solver."""

from __future__ import annotations
from typing import Optional


class SudokuError(Exception):
    """Base class for all sudokuprop errors."""


class InvalidPuzzleError(SudokuError, ValueError):
    """The puzzle string cannot be turned into a board."""


class InputShapeError(InvalidPuzzleError):
    """Puzzle string does not hold exactly 81 values."""

    def __init__(self, length: int, expected: int = 81):
        self.length = length
        self.expected = expected
        super().__init__(
            f"Not a valid grid: expected {expected} values, got {length}"
        )


class InputCharacterError(InvalidPuzzleError):
    """Puzzle string contains something other than the digits 0-9."""

    def __init__(self, position: int, char: str):
        self.position = position
        self.char = char
        super().__init__(
            f"Not a valid grid: values must be digits 0-9, "
            f"got {char!r} at position {position}"
        )


class CellOccupiedError(SudokuError, ValueError):
    """Attempt to write into a cell that already holds a value."""

    def __init__(self, row: int, col: int, value: int):
        self.row = row
        self.col = col
        self.value = value
        super().__init__(
            f"Cell r{row + 1},c{col + 1} already holds {value}"
        )


class InvariantViolation(SudokuError):
    """
    The puzzle state became contradictory during propagation.

    An empty cell ran out of candidates, a commit placed the same value
    twice in one zone, or one cell is the only place in a zone for two
    values. Each means the puzzle has no solution.
    """

    def __init__(self, message: str, cell: Optional[tuple] = None):
        self.cell = cell
        super().__init__(message)
