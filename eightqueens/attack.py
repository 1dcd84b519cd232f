"""Precomputed queen attack masks.

``ATTACK_TABLE[row * 8 + col]`` holds every cell a queen on ``(row, col)``
attacks along its row, column and both diagonals, without the cell itself.
The table is built once when the module is first imported and is a tuple, so
it is read-only and can be shared by any number of searches.
"""

from __future__ import annotations

from typing import Tuple

from .bitboard import BOARD_SIZE, Grid, cell_bit, cell_index, col_mask, diagonal_mask, row_mask


def generate_attack_table() -> Tuple[Grid, ...]:
    """Compute the attack mask of every cell.

    Returns
    -------
    tuple[int, ...]
        64 masks indexed by ``row * 8 + col``.
    """
    table = [0] * (BOARD_SIZE * BOARD_SIZE)
    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            covered = row_mask(row) | col_mask(col) | diagonal_mask(row, col)
            table[cell_index(row, col)] = covered & ~cell_bit(row, col)
    return tuple(table)


ATTACK_TABLE: Tuple[Grid, ...] = generate_attack_table()


def attack_mask(row: int, col: int) -> Grid:
    """Return the cells attacked by a queen on ``(row, col)``."""
    return ATTACK_TABLE[cell_index(row, col)]
