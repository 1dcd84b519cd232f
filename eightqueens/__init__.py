"""Bitboard enumeration of the 8-Queens problem and its symmetry classes."""

from .attack import ATTACK_TABLE, attack_mask, generate_attack_table
from .backtracking import (
    bt_queens_iterative,
    bt_queens_recursive,
    canonicalize,
    solve_all,
    solve_unique,
)
from .bitboard import (
    EMPTY_GRID,
    INIT_GRID,
    Grid,
    col_mask,
    diagonal_mask,
    parse_board,
    render,
    row_mask,
)
from .symmetry import SYMMETRIES, canonical, orbit_size, symmetry_images
from .utils import conflicts, grid_to_positions, is_valid_solution, positions_to_grid

__all__ = [
    "Grid",
    "INIT_GRID",
    "EMPTY_GRID",
    "row_mask",
    "col_mask",
    "diagonal_mask",
    "render",
    "parse_board",
    "ATTACK_TABLE",
    "attack_mask",
    "generate_attack_table",
    "SYMMETRIES",
    "canonical",
    "orbit_size",
    "symmetry_images",
    "bt_queens_iterative",
    "bt_queens_recursive",
    "canonicalize",
    "solve_all",
    "solve_unique",
    "conflicts",
    "is_valid_solution",
    "grid_to_positions",
    "positions_to_grid",
]
