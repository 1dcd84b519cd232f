"""Bitboard primitives for the 8x8 board.

A board is a plain Python ``int`` holding 64 bits. Bit ``row * 8 + col`` is
cell ``(row, col)``; row 0 is printed first and column 0 leftmost.

The meaning of a set bit depends on who produced the value:

- inside the search it marks a cell that is still available (not attacked);
- in a finished solution it marks a queen.

Both readings coincide at the end of the search, see ``backtracking``.

Python integers are unbounded, so every operation that can push bits past
position 63 masks its result with ``FULL_MASK``.
"""

from __future__ import annotations

from typing import Iterable, List, Tuple

Grid = int

BOARD_SIZE = 8
FULL_MASK: Grid = (1 << 64) - 1

# Every cell available.
INIT_GRID: Grid = FULL_MASK
EMPTY_GRID: Grid = 0

ROW_PATTERN: Grid = 0xFF
COL_PATTERN: Grid = 0x0101010101010101
# Cells with row + col == 7 and cells with row == col.
ANTI_DIAGONAL: Grid = 0x0102040810204080
MAIN_DIAGONAL: Grid = 0x8040201008040201

QUEEN_GLYPH = "Q"
EMPTY_GLYPH = "."


def _shift_rows(pattern: Grid, offset: int) -> Grid:
    """Move ``pattern`` by ``offset`` rows (down when positive, up when negative)."""
    if offset >= 0:
        return (pattern << (offset * BOARD_SIZE)) & FULL_MASK
    return pattern >> (-offset * BOARD_SIZE)


def row_mask(row: int) -> Grid:
    """Return the mask with every cell of ``row`` set."""
    return ROW_PATTERN << (row * BOARD_SIZE)


def col_mask(col: int) -> Grid:
    """Return the mask with every cell of ``col`` set."""
    return COL_PATTERN << col


def diagonal_mask(row: int, col: int) -> Grid:
    """Return both diagonals passing through ``(row, col)``.

    The "/" diagonal is the constant anti-diagonal moved by ``row + col - 7``
    rows, the "\\" diagonal is the main diagonal moved by ``row - col`` rows.
    The cell itself is included.
    """
    anti = _shift_rows(ANTI_DIAGONAL, row + col - (BOARD_SIZE - 1))
    main = _shift_rows(MAIN_DIAGONAL, row - col)
    return anti | main


def cell_index(row: int, col: int) -> int:
    return row * BOARD_SIZE + col


def cell_bit(row: int, col: int) -> Grid:
    return 1 << cell_index(row, col)


def popcount(grid: Grid) -> int:
    """Return the number of set bits in ``grid``."""
    return bin(grid).count("1")


def queen_cells(grid: Grid) -> List[Tuple[int, int]]:
    """Return the ``(row, col)`` pairs of all set bits, in row-major order."""
    cells: List[Tuple[int, int]] = []
    for index in range(BOARD_SIZE * BOARD_SIZE):
        if (grid >> index) & 1:
            cells.append(divmod(index, BOARD_SIZE))
    return cells


def grid_from_cells(cells: Iterable[Tuple[int, int]]) -> Grid:
    """Build a board with a bit set for each ``(row, col)`` pair."""
    grid = EMPTY_GRID
    for row, col in cells:
        grid |= cell_bit(row, col)
    return grid


def render(grid: Grid) -> str:
    """Render ``grid`` as eight lines of space separated glyphs.

    Each cell is written as its glyph followed by one space, ``Q`` for a set
    bit and ``.`` otherwise, and each row ends with a newline::

        Q . . . . . . .
        . . . . Q . . .
        ...
    """
    lines = []
    for row in range(BOARD_SIZE):
        line = ""
        for col in range(BOARD_SIZE):
            glyph = QUEEN_GLYPH if (grid >> cell_index(row, col)) & 1 else EMPTY_GLYPH
            line += glyph + " "
        lines.append(line + "\n")
    return "".join(lines)


def parse_board(text: str) -> Grid:
    """Parse the output of :func:`render` back into a board.

    Trailing spaces and blank lines around the board are ignored.

    Raises
    ------
    ValueError
        If the text does not hold exactly 8 rows of 8 known glyphs.
    """
    rows = [line.split() for line in text.strip("\n").splitlines()]
    if len(rows) != BOARD_SIZE:
        raise ValueError(f"Expected {BOARD_SIZE} rows, got {len(rows)}")

    queens: List[Tuple[int, int]] = []
    for row, glyphs in enumerate(rows):
        if len(glyphs) != BOARD_SIZE:
            raise ValueError(f"Row {row} has {len(glyphs)} cells, expected {BOARD_SIZE}")
        for col, glyph in enumerate(glyphs):
            if glyph == QUEEN_GLYPH:
                queens.append((row, col))
            elif glyph != EMPTY_GLYPH:
                raise ValueError(f"Unknown glyph {glyph!r} at ({row}, {col})")
    return grid_from_cells(queens)
