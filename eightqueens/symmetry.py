"""Symmetries of the 8x8 board and canonical forms.

The eight transforms below form the dihedral group of the square. Every
transform is a bijection on 64-bit boards and works on any bit pattern, not
only on queen placements.

Orientation
-----------
Boards are read as rendered by ``bitboard.render``: row 0 on top, column 0 on
the left. With that reading:

- ``flip_horizontal`` mirrors left/right (column ``c`` -> ``7 - c``),
- ``flip_vertical`` mirrors top/bottom (row ``r`` -> ``7 - r``),
- ``flip_main_diagonal`` transposes (``(r, c)`` -> ``(c, r)``),
- ``rotate90`` turns a quarter counter-clockwise, ``rotate270`` a quarter
  clockwise.

Canonical form
--------------
``canonical(g)`` is the numerically smallest of the eight images of ``g``.
The order is plain integer order over 64-bit values.
"""

from __future__ import annotations

from typing import Callable, List, Tuple

from .bitboard import BOARD_SIZE, Grid, cell_index


def reverse_byte(value: int) -> int:
    """Reverse the order of the low 8 bits of ``value``."""
    value &= 0xFF
    value = (value & 0xF0) >> 4 | (value & 0x0F) << 4
    value = (value & 0xCC) >> 2 | (value & 0x33) << 2
    value = (value & 0xAA) >> 1 | (value & 0x55) << 1
    return value


def flip_horizontal(grid: Grid) -> Grid:
    """Mirror the board across its vertical axis."""
    result = 0
    for row in range(BOARD_SIZE):
        line = (grid >> (row * BOARD_SIZE)) & 0xFF
        result |= reverse_byte(line) << (row * BOARD_SIZE)
    return result


def flip_vertical(grid: Grid) -> Grid:
    """Mirror the board across its horizontal axis."""
    result = 0
    for row in range(BOARD_SIZE):
        line = (grid >> (row * BOARD_SIZE)) & 0xFF
        result |= line << ((BOARD_SIZE - 1 - row) * BOARD_SIZE)
    return result


def flip_main_diagonal(grid: Grid) -> Grid:
    """Transpose the board (top-left to bottom-right axis)."""
    result = 0
    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            if (grid >> cell_index(row, col)) & 1:
                result |= 1 << cell_index(col, row)
    return result


def rotate90(grid: Grid) -> Grid:
    return flip_vertical(flip_main_diagonal(grid))


def rotate180(grid: Grid) -> Grid:
    return flip_vertical(flip_horizontal(grid))


def rotate270(grid: Grid) -> Grid:
    return flip_horizontal(flip_main_diagonal(grid))


def identity(grid: Grid) -> Grid:
    return grid


# The four rotations, then the same four applied to the mirrored board.
SYMMETRIES: List[Tuple[str, Callable[[Grid], Grid]]] = [
    ("identity", identity),
    ("rotate90", rotate90),
    ("rotate180", rotate180),
    ("rotate270", rotate270),
    ("flip_horizontal", flip_horizontal),
    ("rotate90_flip_horizontal", lambda grid: rotate90(flip_horizontal(grid))),
    ("rotate180_flip_horizontal", lambda grid: rotate180(flip_horizontal(grid))),
    ("rotate270_flip_horizontal", lambda grid: rotate270(flip_horizontal(grid))),
]


def symmetry_images(grid: Grid) -> List[Grid]:
    """Return the eight images of ``grid`` in ``SYMMETRIES`` order."""
    return [transform(grid) for _, transform in SYMMETRIES]


def canonical(grid: Grid) -> Grid:
    """Return the smallest image of ``grid`` under the eight symmetries."""
    return min(symmetry_images(grid))


def orbit_size(grid: Grid) -> int:
    """Return how many distinct boards the symmetries map ``grid`` onto.

    The result divides 8. A board with no symmetry of its own has 8 images;
    a board invariant under the half turn has 4.
    """
    return len(set(symmetry_images(grid)))
