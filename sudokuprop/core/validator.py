"""Parsing and validation utilities for Sudoku puzzles."""

from __future__ import annotations
import numpy as np
from typing import TYPE_CHECKING, Optional, Tuple

from .board import SIZE, zones
from .errors import InputCharacterError, InputShapeError

if TYPE_CHECKING:
    from .board import SudokuBoard, Zone


def parse_puzzle(s: str) -> np.ndarray:
    """
    Convert an 81-character puzzle string into a 9x9 grid.

    The string fills the grid row by row, '0' marking an empty cell. For
    example "120000050800400030..." starts with

        | 1 | 2 |   |   |   |   |   | 5 |   |
        | 8 |   |   | 4 |   |   |   | 3 |   |

    Args:
        s: Puzzle string.

    Returns:
        A 9x9 int32 array.

    Raises:
        InputShapeError: length is not 81.
        InputCharacterError: a character is not one of '0'-'9'.
    """
    expected = SIZE * SIZE
    if len(s) != expected:
        raise InputShapeError(len(s), expected)

    for position, char in enumerate(s):
        if char not in "0123456789":
            raise InputCharacterError(position, char)

    return np.array([int(c) for c in s], dtype=np.int32).reshape(SIZE, SIZE)


def is_valid_placement(board: SudokuBoard, row: int, col: int, value: int) -> bool:
    """
    Check if placing a value at (row, col) is valid.

    Args:
        board: The Sudoku board.
        row: Row index.
        col: Column index.
        value: Value to check (1 to 9).

    Returns:
        True if the placement is valid.
    """
    if value < 1 or value > SIZE:
        return False

    return not (
        board.row_contains(row, value)
        or board.col_contains(col, value)
        or board.box_contains(board.box_of(row, col), value)
    )


def find_conflict(board: SudokuBoard) -> Optional[Tuple[Zone, int]]:
    """
    Find the first zone holding a duplicated digit.

    Returns:
        (zone, value) for the first duplicate found, or None.
    """
    for zone in zones():
        seen = set()
        for r, c in zone.cells:
            value = board.get(r, c)
            if value == 0:
                continue
            if value in seen:
                return zone, value
            seen.add(value)
    return None


def is_valid_board(board: SudokuBoard) -> bool:
    """
    Check if the entire board state is valid (no conflicts).

    Args:
        board: The Sudoku board to validate.

    Returns:
        True if no constraints are violated.
    """
    return find_conflict(board) is None


def validate_solution(puzzle: SudokuBoard, solution: SudokuBoard) -> bool:
    """
    Validate that a solution correctly solves the puzzle.

    Args:
        puzzle: The original puzzle.
        solution: The proposed solution.

    Returns:
        True if solution is valid and matches puzzle clues.
    """
    clues = puzzle.grid != 0
    if not np.array_equal(puzzle.grid[clues], solution.grid[clues]):
        return False

    return solution.is_solved()
