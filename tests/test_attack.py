"""Tests for the precomputed attack table."""

from pathlib import Path
import sys
import unittest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from eightqueens.attack import ATTACK_TABLE, attack_mask, generate_attack_table
from eightqueens.bitboard import cell_bit, col_mask, diagonal_mask, grid_from_cells, popcount, row_mask


class AttackTableTests(unittest.TestCase):

    def test_table_shape_and_immutability(self):
        self.assertEqual(len(ATTACK_TABLE), 64)
        self.assertIsInstance(ATTACK_TABLE, tuple)
        self.assertEqual(generate_attack_table(), ATTACK_TABLE)

    def test_corner_entry(self):
        expected = (row_mask(0) | col_mask(0) | diagonal_mask(0, 0)) & ~1
        self.assertEqual(ATTACK_TABLE[0], expected)
        self.assertEqual(attack_mask(0, 0), expected)
        self.assertEqual(popcount(expected), 21)

    def test_center_entry(self):
        self.assertEqual(popcount(attack_mask(3, 3)), 27)
        self.assertEqual(popcount(attack_mask(4, 4)), 27)

    def test_entries_exclude_own_cell(self):
        for row in range(8):
            for col in range(8):
                self.assertFalse(attack_mask(row, col) & cell_bit(row, col))

    def test_entries_match_queen_moves(self):
        for row in range(8):
            for col in range(8):
                expected = grid_from_cells(
                    (r, c)
                    for r in range(8)
                    for c in range(8)
                    if (r, c) != (row, col)
                    and (r == row or c == col or abs(r - row) == abs(c - col))
                )
                self.assertEqual(attack_mask(row, col), expected, (row, col))

    def test_attack_is_symmetric(self):
        for a in range(64):
            for b in range(64):
                self.assertEqual(bool(ATTACK_TABLE[a] >> b & 1), bool(ATTACK_TABLE[b] >> a & 1))


if __name__ == "__main__":
    unittest.main()
