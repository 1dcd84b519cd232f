"""Utility helpers for the 8-Queens project.

Validation and conversion primitives shared by the tests, the analysis
pipeline and the command line.

Representation
--------------
Besides bitboards, a complete board can be written as a list where
``positions[row] = col``.
"""

from __future__ import annotations

from collections import Counter
from typing import List, Sequence

from .bitboard import BOARD_SIZE, Grid, cell_bit, popcount, queen_cells


def grid_to_positions(grid: Grid) -> List[int]:
    """Return ``positions`` with ``positions[row] = col`` for a full board.

    Raises
    ------
    ValueError
        If some row does not hold exactly one queen.
    """
    positions: List[int] = []
    for row in range(BOARD_SIZE):
        line = (grid >> (row * BOARD_SIZE)) & 0xFF
        if line == 0 or line & (line - 1):
            raise ValueError(f"Row {row} does not hold exactly one queen: {line:#010b}")
        positions.append(line.bit_length() - 1)
    return positions


def positions_to_grid(positions: Sequence[int]) -> Grid:
    """Build a bitboard from ``positions[row] = col``."""
    grid = 0
    for row, col in enumerate(positions):
        grid |= cell_bit(row, col)
    return grid


def conflicts(grid: Grid) -> int:
    """Count the pairs of queens on ``grid`` that attack each other.

    Queens sharing a row, a column or a diagonal each count once per pair.
    Uses counters per line so the cost is linear in the number of queens.
    """
    row_count: Counter[int] = Counter()
    col_count: Counter[int] = Counter()
    diag1: Counter[int] = Counter()
    diag2: Counter[int] = Counter()

    for row, col in queen_cells(grid):
        row_count[row] += 1
        col_count[col] += 1
        diag1[row - col] += 1
        diag2[row + col] += 1

    def _pairs(counter: Counter[int]) -> int:
        total = 0
        for count in counter.values():
            if count > 1:
                total += count * (count - 1) // 2
        return total

    return _pairs(row_count) + _pairs(col_count) + _pairs(diag1) + _pairs(diag2)


def is_valid_solution(grid: Grid) -> bool:
    """Return True if ``grid`` holds eight mutually non-attacking queens.

    Eight queens with no conflict necessarily fill every row and column once.
    """
    if grid < 0 or grid >> (BOARD_SIZE * BOARD_SIZE):
        return False
    if popcount(grid) != BOARD_SIZE:
        return False
    return conflicts(grid) == 0
