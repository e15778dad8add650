"""Candidate tracking for empty cells."""

from __future__ import annotations
from typing import Iterable, List, Tuple

from ..core.board import SIZE, SudokuBoard


class CandidateGrid:
    """
    Candidate values for each of the 81 cells.

    Each cell holds an ascending list of distinct digits 1-9. Filled cells
    hold an empty list.
    """

    def __init__(self):
        self._cells: List[List[List[int]]] = [
            [[] for _ in range(SIZE)] for _ in range(SIZE)
        ]

    def get(self, row: int, col: int) -> List[int]:
        """Candidates of a cell, ascending. The returned list is a copy."""
        return list(self._cells[row][col])

    def set(self, row: int, col: int, values: Iterable[int]) -> None:
        """Replace the candidates of a cell."""
        cleaned = sorted(set(values))
        if cleaned and (cleaned[0] < 1 or cleaned[-1] > SIZE):
            raise ValueError(f"Candidates must be 1-{SIZE}, got {cleaned}")
        self._cells[row][col] = cleaned

    def clear(self, row: int, col: int) -> None:
        self._cells[row][col] = []

    def count(self, row: int, col: int) -> int:
        return len(self._cells[row][col])

    def is_singleton(self, row: int, col: int) -> bool:
        """True if the cell is forced to a single value."""
        return len(self._cells[row][col]) == 1

    def singletons(self) -> List[Tuple[int, int, int]]:
        """All (row, col, value) triples of forced cells, row-major."""
        return [
            (row, col, self._cells[row][col][0])
            for row in range(SIZE)
            for col in range(SIZE)
            if len(self._cells[row][col]) == 1
        ]

    def dead_cells(self, board: SudokuBoard) -> List[Tuple[int, int]]:
        """Empty cells of the board that have no candidate left."""
        return [
            (row, col)
            for row, col in board.get_empty_cells()
            if not self._cells[row][col]
        ]

    def copy(self) -> CandidateGrid:
        new_grid = CandidateGrid()
        new_grid._cells = [[list(cell) for cell in row] for row in self._cells]
        return new_grid

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CandidateGrid):
            return False
        return self._cells == other._cells

    def __repr__(self) -> str:
        open_cells = sum(1 for row in self._cells for cell in row if cell)
        return f"CandidateGrid(open_cells={open_cells})"


def compute_candidates(board: SudokuBoard) -> CandidateGrid:
    """
    Compute the candidates of every empty cell from scratch.

    A value is a candidate when it is not already placed in the cell's row,
    column or box. Filled cells get no candidates.
    """
    candidates = CandidateGrid()
    for row in range(SIZE):
        for col in range(SIZE):
            if not board.is_empty(row, col):
                continue

            box = board.box_of(row, col)
            candidates.set(row, col, [
                value for value in range(1, SIZE + 1)
                if not board.row_contains(row, value)
                and not board.col_contains(col, value)
                and not board.box_contains(box, value)
            ])
    return candidates
