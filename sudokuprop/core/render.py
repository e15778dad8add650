"""Console rendering of boards and candidate sets."""

from __future__ import annotations
from typing import TYPE_CHECKING, Optional

from .board import SIZE

if TYPE_CHECKING:
    from .board import SudokuBoard
    from ..solvers.candidates import CandidateGrid

RED = "\033[31m"
RESET = "\033[0m"

HINT_MARK = "◆"

CELL_SEP = "+---" * SIZE + "+"
CANDIDATE_WIDTH = 13
CANDIDATE_SEP = ("+" + "-" * (CANDIDATE_WIDTH + 2)) * SIZE + "+"


def _paint(text: str, color: bool) -> str:
    return f"{RED}{text}{RESET}" if color else text


def render(
    board: SudokuBoard,
    candidates: Optional[CandidateGrid] = None,
    show_hints: bool = False,
    color: bool = True,
) -> str:
    """
    Draw the board as a boxed ASCII grid.

    Args:
        board: Board to draw.
        candidates: Current candidate sets, needed for hints.
        show_hints: Mark empty cells that have exactly one candidate.
        color: Wrap hint markers in ANSI red.

    Returns:
        The grid as a multi-line string.
    """
    lines = [CELL_SEP]
    for row in range(SIZE):
        row_str = ""
        for col in range(SIZE):
            value = board.get(row, col)
            if value != 0:
                mark = str(value)
            elif show_hints and candidates is not None and candidates.is_singleton(row, col):
                mark = _paint(HINT_MARK, color)
            else:
                mark = " "
            row_str += f"| {mark} "
        lines.append(row_str + "|")
        lines.append(CELL_SEP)
    return "\n".join(lines)


def render_candidates(
    board: SudokuBoard,
    candidates: CandidateGrid,
    color: bool = True,
) -> str:
    """Draw every cell's candidates; filled cells show their value instead."""
    lines = [CANDIDATE_SEP]
    for row in range(SIZE):
        row_str = ""
        for col in range(SIZE):
            value = board.get(row, col)
            if value != 0:
                text = _paint(f"{value:<{CANDIDATE_WIDTH}d}", color)
            else:
                options = " ".join(str(v) for v in candidates.get(row, col))
                text = f"{options:<{CANDIDATE_WIDTH}s}"
            row_str += f"| {text} "
        lines.append(row_str + "|")
        lines.append(CANDIDATE_SEP)
    return "\n".join(lines)
