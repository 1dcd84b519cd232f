"""Tests for the validation and conversion helpers."""

from pathlib import Path
import sys
import unittest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from eightqueens.backtracking import solve_all
from eightqueens.bitboard import INIT_GRID, grid_from_cells
from eightqueens.utils import conflicts, grid_to_positions, is_valid_solution, positions_to_grid

KNOWN_POSITIONS = [0, 4, 7, 5, 2, 6, 1, 3]


class ConversionTests(unittest.TestCase):

    def test_positions_round_trip(self):
        grid = positions_to_grid(KNOWN_POSITIONS)
        self.assertEqual(grid_to_positions(grid), KNOWN_POSITIONS)
        for grid in solve_all():
            self.assertEqual(positions_to_grid(grid_to_positions(grid)), grid)

    def test_grid_to_positions_rejects_partial_rows(self):
        with self.assertRaises(ValueError):
            grid_to_positions(0)
        with self.assertRaises(ValueError):
            grid_to_positions(INIT_GRID)


class ConflictTests(unittest.TestCase):

    def test_pairs_are_counted_once(self):
        self.assertEqual(conflicts(0), 0)
        self.assertEqual(conflicts(grid_from_cells([(0, 0), (0, 5)])), 1)
        self.assertEqual(conflicts(grid_from_cells([(0, 3), (6, 3)])), 1)
        self.assertEqual(conflicts(grid_from_cells([(1, 1), (4, 4)])), 1)
        self.assertEqual(conflicts(grid_from_cells([(0, 7), (7, 0)])), 1)
        self.assertEqual(conflicts(grid_from_cells([(0, 0), (1, 1), (2, 2)])), 3)

    def test_is_valid_solution(self):
        self.assertTrue(is_valid_solution(positions_to_grid(KNOWN_POSITIONS)))
        self.assertFalse(is_valid_solution(positions_to_grid(list(range(8)))))
        self.assertFalse(is_valid_solution(0))
        self.assertFalse(is_valid_solution(INIT_GRID))
        self.assertFalse(is_valid_solution(grid_from_cells([(0, 0), (1, 4)])))
        self.assertFalse(is_valid_solution(-1))
        self.assertFalse(is_valid_solution(1 << 64))
        self.assertTrue(all(is_valid_solution(grid) for grid in solve_all()))

    def test_is_valid_solution_needs_eight_queens(self):
        grid = positions_to_grid(KNOWN_POSITIONS)
        seven = grid & ~grid_from_cells([(7, KNOWN_POSITIONS[7])])
        self.assertEqual(conflicts(seven), 0)
        self.assertFalse(is_valid_solution(seven))


if __name__ == "__main__":
    unittest.main()
