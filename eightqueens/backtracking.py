"""Backtracking enumeration of all 8-Queens solutions.

This module implements an exhaustive depth-first search over bitboards and
provides the following entry points:

- solve_all(): every complete placement (92 boards).
- solve_unique(): one canonical board per symmetry class (12 boards).
- bt_queens_iterative(): the explicit-stack search, instrumented.
- bt_queens_recursive(): the same search written with true recursion,
    instrumented. Used as a cross-check and as a benchmark variant.
- canonicalize(solutions): reduce raw boards to canonical representatives.

The instrumented functions return a tuple:
        (solutions: List[Grid], nodes_explored: int, elapsed_seconds: float)

Implementation overview
-----------------------
- State representation: a frame is ``(queen_grid, row)``. ``queen_grid`` has
    a bit set for every cell that is still available; ``row`` is the next row
    to fill. Queens are placed one per row, top to bottom.
- Pruning: placing a queen on ``(row, col)`` clears
    ``ATTACK_TABLE[row * 8 + col]`` from the board. The candidates for the next
    row are simply the bits still set in that row.
- Search strategy: a LIFO stack of frames. Columns are pushed in increasing
    order, so the highest column of a row is explored first. At most eight
    frames are pushed per level and the depth is bounded by 8.
- Terminal state: a popped frame with ``row == 8`` is a solution.

Final board
-----------
The search never clears the bit of the cell it places a queen on, only the
cells that queen attacks. Placing on ``(row, col)`` clears the rest of
``row``, so each filled row keeps exactly one bit. A later placement cannot
clear that bit either: the later cell was available, so it is not attacked by
the earlier queen, and attack is symmetric. When all eight rows are filled the
surviving bits are exactly the queens. Tests check this for every solution.

Nodes explored semantics
------------------------
Incremented for every frame pushed on the stack (or every recursive call past
the root), i.e. every queen placement that survived pruning. Both variants
report the same count.
"""

from __future__ import annotations

from time import perf_counter
from typing import Iterable, List, NamedTuple, Set, Tuple

from .attack import ATTACK_TABLE
from .bitboard import BOARD_SIZE, INIT_GRID, Grid
from .symmetry import canonical


class _Frame(NamedTuple):
    """One pending node of the search: board availability and next row."""

    queen_grid: Grid
    row: int


def bt_queens_iterative() -> Tuple[List[Grid], int, float]:
    """Enumerate all solutions with an explicit stack.

    Returns
    -------
    (solutions, nodes_explored, elapsed_seconds)
        - solutions: list of 92 boards, in stack exploration order.
        - nodes_explored: int, number of frames pushed after the root.
        - elapsed_seconds: float, wall time measured with ``perf_counter``.

    Determinism and ordering
    ------------------------
    The order is fully determined by the LIFO discipline: within a row the
    last pushed (highest) column is expanded first. Callers must not rely on
    any particular order beyond that.
    """
    solutions: List[Grid] = []
    stack: List[_Frame] = [_Frame(INIT_GRID, 0)]
    explored = 0
    start = perf_counter()

    while stack:
        queen_grid, row = stack.pop()
        if row == BOARD_SIZE:
            solutions.append(queen_grid)
            continue

        candidates = (queen_grid >> (row * BOARD_SIZE)) & 0xFF
        base = row * BOARD_SIZE
        for col in range(BOARD_SIZE):
            if candidates & (1 << col):
                # Clear everything the new queen attacks; its own bit stays.
                stack.append(_Frame(queen_grid & ~ATTACK_TABLE[base + col], row + 1))
                explored += 1

    return solutions, explored, perf_counter() - start


def bt_queens_recursive() -> Tuple[List[Grid], int, float]:
    """Enumerate all solutions with plain recursion.

    The recursion depth never exceeds 9 calls, far below the interpreter
    limit. Children are visited from the highest column down so that the
    solutions come out in the same order as :func:`bt_queens_iterative`.

    Returns
    -------
    (solutions, nodes_explored, elapsed_seconds)
        Same contract as :func:`bt_queens_iterative`.
    """
    solutions: List[Grid] = []
    explored = 0
    start = perf_counter()

    def place(queen_grid: Grid, row: int) -> None:
        nonlocal explored
        if row == BOARD_SIZE:
            solutions.append(queen_grid)
            return
        candidates = (queen_grid >> (row * BOARD_SIZE)) & 0xFF
        base = row * BOARD_SIZE
        children = []
        for col in range(BOARD_SIZE):
            if candidates & (1 << col):
                children.append(queen_grid & ~ATTACK_TABLE[base + col])
                explored += 1
        for child in reversed(children):
            place(child, row + 1)

    place(INIT_GRID, 0)
    return solutions, explored, perf_counter() - start


def canonicalize(solutions: Iterable[Grid]) -> Set[Grid]:
    """Map every board to its canonical form and drop duplicates."""
    unique: Set[Grid] = set()
    for grid in solutions:
        unique.add(canonical(grid))
    return unique


def solve_all() -> List[Grid]:
    """Return all 92 solutions of the 8-Queens problem.

    Each board has a bit set for every queen. The list order follows the
    search and carries no meaning.
    """
    solutions, _, _ = bt_queens_iterative()
    return solutions


def solve_unique() -> Set[Grid]:
    """Return the 12 canonical solutions, one per symmetry class."""
    return canonicalize(solve_all())
