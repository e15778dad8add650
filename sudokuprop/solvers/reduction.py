"""Unique-position (hidden single) reduction and the commit step."""

from __future__ import annotations
import collections
import logging
from typing import Dict, List, NamedTuple, Tuple

from ..core.board import SudokuBoard, Zone, zones
from ..core.errors import InvariantViolation
from .candidates import CandidateGrid

log = logging.getLogger(__name__)


class Deduction(NamedTuple):
    """A hidden single: value can only go in (row, col) within zone."""
    zone: str
    row: int
    col: int
    value: int


def reduce_zone(candidates: CandidateGrid, zone: Zone) -> List[Deduction]:
    """
    Collapse cells holding a value that no other cell of the zone can take.

    Every value with exactly one position in the zone is applied, in
    ascending value order. A cell that already holds only that value is
    a naked single and is not reported as a deduction.

    Raises:
        InvariantViolation: If one cell is the only position for two
            different values of the zone.
    """
    positions: Dict[int, List[Tuple[int, int]]] = collections.defaultdict(list)
    for row, col in zone.cells:
        for value in candidates.get(row, col):
            positions[value].append((row, col))

    forced: Dict[Tuple[int, int], int] = {}
    deductions = []
    for value in sorted(positions):
        cells = positions[value]
        if len(cells) != 1:
            continue

        row, col = cells[0]
        if (row, col) in forced:
            raise InvariantViolation(
                f"cell r{row + 1},c{col + 1} is the only place in {zone.label} "
                f"for both {forced[row, col]} and {value}",
                cell=(row, col),
            )
        forced[row, col] = value

        if candidates.get(row, col) == [value]:
            continue

        log.debug("In %s, value %d can only be in one place", zone.label, value)
        candidates.set(row, col, [value])
        deductions.append(Deduction(zone.label, row, col, value))
    return deductions


def reduce_unique_positions(candidates: CandidateGrid) -> List[Deduction]:
    """
    Run hidden-single reduction over all 27 zones.

    Zones are visited boxes first, then rows, then columns. They share the
    candidate grid, so a later zone sees the collapses made by an earlier
    one.
    """
    deductions = []
    for zone in zones():
        deductions.extend(reduce_zone(candidates, zone))
    return deductions


def commit_singles(board: SudokuBoard, candidates: CandidateGrid) -> List[Tuple[int, int, int]]:
    """
    Write every forced cell into the board and clear its candidates.

    Returns:
        The committed (row, col, value) triples, row-major.
    """
    committed = candidates.singletons()
    for row, col, value in committed:
        log.debug("r%d,c%d: %d", row + 1, col + 1, value)
        board.set(row, col, value)
        candidates.clear(row, col)
    return committed
