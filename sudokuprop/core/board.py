"""Sudoku board representation and zone helpers for the standard 9x9 grid."""

from __future__ import annotations
import numpy as np
from typing import List, NamedTuple, Optional, Tuple

from .errors import CellOccupiedError

SIZE = 9
BOX_SIZE = 3

Cell = Tuple[int, int]


class Zone(NamedTuple):
    """A group of nine cells that must hold each digit exactly once."""
    kind: str
    index: int
    cells: Tuple[Cell, ...]

    @property
    def label(self) -> str:
        return f"{self.kind} {self.index}"


class SudokuBoard:
    """
    Represents a 9x9 Sudoku board.

    Cells hold 0 (empty) or a digit 1-9. Rows and columns are 0-indexed,
    boxes are numbered 1-9 left to right, top to bottom:

        +---+---+---+
        | 1 | 2 | 3 |
        +---+---+---+
        | 4 | 5 | 6 |
        +---+---+---+
        | 7 | 8 | 9 |
        +---+---+---+
    """

    def __init__(self, grid: Optional[np.ndarray] = None):
        """
        Initialize a Sudoku board.

        Args:
            grid: Optional initial 9x9 grid. If None, creates empty board.
        """
        self.size = SIZE
        self.box_size = BOX_SIZE

        if grid is not None:
            if grid.shape != (SIZE, SIZE):
                raise ValueError(f"Grid shape must be ({SIZE}, {SIZE})")
            if grid.min() < 0 or grid.max() > SIZE:
                raise ValueError(f"Grid values must be 0-{SIZE}")
            self.grid = grid.copy().astype(np.int32)
        else:
            self.grid = np.zeros((SIZE, SIZE), dtype=np.int32)

    def copy(self) -> SudokuBoard:
        """Create a deep copy of the board."""
        new_board = SudokuBoard()
        new_board.grid = self.grid.copy()
        return new_board

    def get(self, row: int, col: int) -> int:
        """Get value at position (row, col). 0 means empty."""
        return int(self.grid[row, col])

    def set(self, row: int, col: int, value: int) -> None:
        """
        Place a digit in an empty cell.

        Raises:
            ValueError: value is not a digit 1-9.
            CellOccupiedError: the cell already holds a value.
        """
        if value < 1 or value > SIZE:
            raise ValueError(f"Value must be 1-{SIZE}, got {value}")
        if self.grid[row, col] != 0:
            raise CellOccupiedError(row, col, int(self.grid[row, col]))
        self.grid[row, col] = value

    def is_empty(self, row: int, col: int) -> bool:
        """Check if cell is empty (value is 0)."""
        return self.grid[row, col] == 0

    def get_row(self, row: int) -> np.ndarray:
        """Get all values in a row."""
        return self.grid[row, :]

    def get_col(self, col: int) -> np.ndarray:
        """Get all values in a column."""
        return self.grid[:, col]

    def get_box(self, box: int) -> np.ndarray:
        """Get all values in a box (numbered 1-9)."""
        row_offset, col_offset = _box_offsets(box)
        return self.grid[row_offset:row_offset + BOX_SIZE,
                         col_offset:col_offset + BOX_SIZE].flatten()

    def row_contains(self, row: int, value: int) -> bool:
        """True if value is already placed in the row."""
        return bool(np.any(self.get_row(row) == value))

    def col_contains(self, col: int, value: int) -> bool:
        """True if value is already placed in the column."""
        return bool(np.any(self.get_col(col) == value))

    def box_contains(self, box: int, value: int) -> bool:
        """True if value is already placed in the box (numbered 1-9)."""
        return bool(np.any(self.get_box(box) == value))

    @staticmethod
    def box_of(row: int, col: int) -> int:
        """Get the box number (1-9) for a cell."""
        return (col // BOX_SIZE) + 1 + (row // BOX_SIZE) * BOX_SIZE

    @staticmethod
    def cells_of_box(box: int) -> List[Cell]:
        """Get the nine (row, col) positions of a box, row-major."""
        row_offset, col_offset = _box_offsets(box)
        return [
            (row_offset + i, col_offset + j)
            for i in range(BOX_SIZE)
            for j in range(BOX_SIZE)
        ]

    def get_empty_cells(self) -> List[Cell]:
        """Get list of all empty cell positions."""
        return [(int(r), int(c)) for r, c in np.argwhere(self.grid == 0)]

    def count_empty(self) -> int:
        """Count the number of empty cells."""
        return int(np.sum(self.grid == 0))

    def count_filled(self) -> int:
        """Count the number of filled cells."""
        return int(np.sum(self.grid != 0))

    def is_complete(self) -> bool:
        """Check if all cells are filled."""
        return self.count_empty() == 0

    def is_valid(self) -> bool:
        """
        Check if the current board state is valid.
        Does not check if solution is complete, only if no conflicts exist.
        """
        for zone in zones():
            values = [self.grid[r, c] for r, c in zone.cells]
            non_zero = [v for v in values if v != 0]
            if len(non_zero) != len(set(non_zero)):
                return False
        return True

    def is_solved(self) -> bool:
        """Check if the puzzle is completely and correctly solved."""
        return self.is_complete() and self.is_valid()

    def to_string(self) -> str:
        """Convert board to its 81-character representation (0 for empty)."""
        return ''.join(str(v) for v in self.grid.flatten())

    @classmethod
    def from_string(cls, s: str) -> SudokuBoard:
        """
        Create a board from an 81-character digit string.

        Raises:
            InputShapeError: string length is not 81.
            InputCharacterError: string holds a non-digit character.
        """
        from .validator import parse_puzzle
        return cls(parse_puzzle(s))

    def __str__(self) -> str:
        """Pretty-print the board."""
        lines = []
        horizontal_sep = '+' + (('-' * (BOX_SIZE * 2 + 1)) + '+') * BOX_SIZE

        for i in range(SIZE):
            if i % BOX_SIZE == 0:
                lines.append(horizontal_sep)

            row_str = '|'
            for j in range(SIZE):
                val = self.grid[i, j]
                row_str += ' .' if val == 0 else f' {val}'
                if (j + 1) % BOX_SIZE == 0:
                    row_str += ' |'

            lines.append(row_str)

        lines.append(horizontal_sep)
        return '\n'.join(lines)

    def __repr__(self) -> str:
        return f"SudokuBoard(filled={self.count_filled()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SudokuBoard):
            return False
        return np.array_equal(self.grid, other.grid)

    def __hash__(self) -> int:
        return hash(self.to_string())


def _box_offsets(box: int) -> Tuple[int, int]:
    if box < 1 or box > SIZE:
        raise ValueError(f"Box must be 1-{SIZE}, got {box}")
    return ((box - 1) // BOX_SIZE) * BOX_SIZE, ((box - 1) % BOX_SIZE) * BOX_SIZE


def _build_zones() -> Tuple[Zone, ...]:
    boxes = [
        Zone("box", box, tuple(SudokuBoard.cells_of_box(box)))
        for box in range(1, SIZE + 1)
    ]
    rows = [
        Zone("row", row + 1, tuple((row, col) for col in range(SIZE)))
        for row in range(SIZE)
    ]
    cols = [
        Zone("col", col + 1, tuple((row, col) for row in range(SIZE)))
        for col in range(SIZE)
    ]
    return tuple(boxes + rows + cols)


_ZONES = _build_zones()


def zones() -> Tuple[Zone, ...]:
    """All 27 zones in processing order: boxes 1-9, rows 1-9, columns 1-9."""
    return _ZONES
