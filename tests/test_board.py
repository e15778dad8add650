"""Unit tests for Sudoku board, parsing and validation."""

import pytest
import numpy as np
from sudokuprop.core.board import SudokuBoard, zones
from sudokuprop.core.errors import (
    CellOccupiedError,
    InputCharacterError,
    InputShapeError,
    InvalidPuzzleError,
)
from sudokuprop.core.validator import (
    find_conflict,
    is_valid_board,
    is_valid_placement,
    parse_puzzle,
    validate_solution,
)

TEST_PUZZLE = "530070000600195000098000060800060003400803001700020006060000280000419005000080079"
TEST_SOLUTION = "534678912672195348198342567859761423426853791713924856961537284287419635345286179"


class TestSudokuBoard:
    """Tests for SudokuBoard class."""

    def test_create_empty_board(self):
        """Test creating an empty 9x9 board."""
        board = SudokuBoard()
        assert board.size == 9
        assert board.box_size == 3
        assert board.count_empty() == 81
        assert board.count_filled() == 0

    def test_rejects_wrong_shape(self):
        with pytest.raises(ValueError):
            SudokuBoard(np.zeros((4, 4), dtype=np.int32))

    def test_set_and_get(self):
        """Test setting and getting values."""
        board = SudokuBoard()
        board.set(0, 0, 5)
        assert board.get(0, 0) == 5
        assert not board.is_empty(0, 0)
        assert board.is_empty(0, 1)

    def test_set_occupied_cell_fails_fast(self):
        board = SudokuBoard()
        board.set(2, 3, 4)
        with pytest.raises(CellOccupiedError) as excinfo:
            board.set(2, 3, 7)
        assert excinfo.value.value == 4
        assert board.get(2, 3) == 4

    @pytest.mark.parametrize("value", [0, 10, -1])
    def test_set_rejects_out_of_range(self, value):
        board = SudokuBoard()
        with pytest.raises(ValueError):
            board.set(0, 0, value)

    @pytest.mark.parametrize("row, col, box", [
        (0, 0, 1), (0, 8, 3), (2, 5, 2), (4, 4, 5),
        (3, 7, 6), (8, 0, 7), (6, 4, 8), (8, 8, 9),
    ])
    def test_box_of(self, row, col, box):
        assert SudokuBoard.box_of(row, col) == box

    def test_cells_of_box(self):
        assert SudokuBoard.cells_of_box(5) == [
            (3, 3), (3, 4), (3, 5),
            (4, 3), (4, 4), (4, 5),
            (5, 3), (5, 4), (5, 5),
        ]

    def test_box_numbering_is_consistent(self):
        """Every cell of a box maps back to that box."""
        for box in range(1, 10):
            for row, col in SudokuBoard.cells_of_box(box):
                assert SudokuBoard.box_of(row, col) == box

    def test_invalid_box_number(self):
        with pytest.raises(ValueError):
            SudokuBoard.cells_of_box(0)

    def test_row_col_box_values(self):
        board = SudokuBoard.from_string(TEST_PUZZLE)
        assert list(board.get_row(0)) == [5, 3, 0, 0, 7, 0, 0, 0, 0]
        assert list(board.get_col(0)) == [5, 6, 0, 8, 4, 7, 0, 0, 0]
        assert list(board.get_box(1)) == [5, 3, 0, 6, 0, 0, 0, 9, 8]

    def test_contains_predicates(self):
        board = SudokuBoard.from_string(TEST_PUZZLE)
        assert board.row_contains(0, 7)
        assert not board.row_contains(0, 1)
        assert board.col_contains(0, 8)
        assert not board.col_contains(0, 1)
        assert board.box_contains(1, 9)
        assert not board.box_contains(1, 1)

    def test_is_valid(self):
        """Test board validation."""
        board = SudokuBoard()
        assert board.is_valid()  # Empty board is valid

        board.set(0, 0, 5)
        board.set(0, 1, 5)  # Duplicate in row
        assert not board.is_valid()

    def test_is_solved(self):
        assert SudokuBoard.from_string(TEST_SOLUTION).is_solved()
        assert not SudokuBoard.from_string(TEST_PUZZLE).is_solved()

    def test_from_string(self):
        """Test creating board from string."""
        puzzle_str = "0" * 80 + "9"  # 80 zeros and a 9 at the end
        board = SudokuBoard.from_string(puzzle_str)
        assert board.get(8, 8) == 9
        assert board.count_filled() == 1

    def test_to_string(self):
        """Test converting board to string."""
        board = SudokuBoard.from_string(TEST_PUZZLE)
        assert board.to_string() == TEST_PUZZLE

    def test_copy(self):
        """Test board copy."""
        board = SudokuBoard()
        board.set(4, 4, 7)
        copy = board.copy()

        assert copy == board

        # Modify copy, original should be unchanged
        copy.set(4, 5, 8)
        assert board.is_empty(4, 5)
        assert copy != board

    def test_get_empty_cells(self):
        board = SudokuBoard.from_string(TEST_SOLUTION[:-1] + "0")
        assert board.get_empty_cells() == [(8, 8)]

    def test_str(self):
        lines = str(SudokuBoard.from_string(TEST_PUZZLE)).splitlines()
        assert lines[0] == "+-------+-------+-------+"
        assert lines[1] == "| 5 3 . | . 7 . | . . . |"


class TestZones:
    """Tests for zone enumeration."""

    def test_zone_order(self):
        labels = [zone.label for zone in zones()]
        assert len(labels) == 27
        assert labels[0] == "box 1"
        assert labels[8] == "box 9"
        assert labels[9] == "row 1"
        assert labels[18] == "col 1"
        assert labels[26] == "col 9"

    def test_each_zone_has_nine_cells(self):
        for zone in zones():
            assert len(set(zone.cells)) == 9

    def test_each_cell_in_three_zones(self):
        counts = {}
        for zone in zones():
            for cell in zone.cells:
                counts[cell] = counts.get(cell, 0) + 1
        assert len(counts) == 81
        assert set(counts.values()) == {3}


class TestParsing:
    """Tests for puzzle string parsing."""

    def test_parse_puzzle(self):
        grid = parse_puzzle(TEST_PUZZLE)
        assert grid.shape == (9, 9)
        assert grid[0, 0] == 5
        assert grid[8, 8] == 9

    def test_too_short(self):
        with pytest.raises(InputShapeError) as excinfo:
            SudokuBoard.from_string(TEST_PUZZLE[:80])
        assert excinfo.value.length == 80

    def test_too_long(self):
        with pytest.raises(InputShapeError):
            parse_puzzle(TEST_PUZZLE + "0")

    def test_letter(self):
        puzzle = TEST_PUZZLE[:10] + "a" + TEST_PUZZLE[11:]
        with pytest.raises(InputCharacterError) as excinfo:
            SudokuBoard.from_string(puzzle)
        assert excinfo.value.position == 10
        assert excinfo.value.char == "a"

    def test_dot_is_not_a_digit(self):
        with pytest.raises(InputCharacterError):
            parse_puzzle("." * 81)

    def test_input_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            parse_puzzle("1")
        assert issubclass(InputCharacterError, InvalidPuzzleError)


class TestValidator:
    """Tests for validation utilities."""

    def test_is_valid_placement(self):
        """Test placement validation."""
        board = SudokuBoard()
        board.set(0, 0, 5)

        # Can't place 5 in same row
        assert not is_valid_placement(board, 0, 5, 5)

        # Can't place 5 in same column
        assert not is_valid_placement(board, 5, 0, 5)

        # Can't place 5 in same box
        assert not is_valid_placement(board, 1, 1, 5)

        # Can place different value
        assert is_valid_placement(board, 0, 5, 7)

    def test_find_conflict(self):
        board = SudokuBoard()
        board.set(0, 0, 3)
        board.set(5, 0, 3)
        zone, value = find_conflict(board)
        assert zone.label == "col 1"
        assert value == 3
        assert not is_valid_board(board)

    def test_no_conflict(self):
        assert find_conflict(SudokuBoard.from_string(TEST_PUZZLE)) is None

    def test_validate_solution(self):
        puzzle = SudokuBoard.from_string(TEST_PUZZLE)
        solution = SudokuBoard.from_string(TEST_SOLUTION)
        assert validate_solution(puzzle, solution)

        other = SudokuBoard.from_string("0" * 81)
        assert not validate_solution(puzzle, other)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
