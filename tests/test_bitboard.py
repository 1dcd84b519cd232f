"""Tests for the bitboard mask primitives and the board renderer."""

from pathlib import Path
import sys
import unittest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from eightqueens.bitboard import (
    ANTI_DIAGONAL,
    EMPTY_GRID,
    FULL_MASK,
    INIT_GRID,
    MAIN_DIAGONAL,
    cell_bit,
    col_mask,
    diagonal_mask,
    grid_from_cells,
    parse_board,
    popcount,
    queen_cells,
    render,
    row_mask,
)

KNOWN_SOLUTION = [(0, 0), (1, 4), (2, 7), (3, 5), (4, 2), (5, 6), (6, 1), (7, 3)]


class MaskTests(unittest.TestCase):

    def test_row_and_column_masks(self):
        self.assertEqual(row_mask(0), 0xFF)
        self.assertEqual(row_mask(7), 0xFF00000000000000)
        self.assertEqual(col_mask(0), 0x0101010101010101)
        self.assertEqual(col_mask(7), 0x8080808080808080)
        for index in range(8):
            self.assertEqual(popcount(row_mask(index)), 8)
            self.assertEqual(popcount(col_mask(index)), 8)
            self.assertEqual(queen_cells(row_mask(index)), [(index, c) for c in range(8)])
            self.assertEqual(queen_cells(col_mask(index)), [(r, index) for r in range(8)])

    def test_diagonal_mask_corners(self):
        self.assertEqual(diagonal_mask(0, 0), MAIN_DIAGONAL)
        self.assertEqual(diagonal_mask(7, 7), MAIN_DIAGONAL)
        self.assertEqual(diagonal_mask(0, 7), ANTI_DIAGONAL)
        self.assertEqual(diagonal_mask(7, 0), ANTI_DIAGONAL)

    def test_diagonal_mask_matches_geometry(self):
        for row in range(8):
            for col in range(8):
                expected = grid_from_cells(
                    (r, c)
                    for r in range(8)
                    for c in range(8)
                    if r - c == row - col or r + c == row + col
                )
                self.assertEqual(diagonal_mask(row, col), expected, (row, col))
                self.assertLessEqual(diagonal_mask(row, col), FULL_MASK)

    def test_cell_helpers(self):
        self.assertEqual(cell_bit(0, 0), 1)
        self.assertEqual(cell_bit(7, 7), 1 << 63)
        grid = grid_from_cells(KNOWN_SOLUTION)
        self.assertEqual(popcount(grid), 8)
        self.assertEqual(queen_cells(grid), KNOWN_SOLUTION)
        self.assertEqual(popcount(INIT_GRID), 64)
        self.assertEqual(queen_cells(EMPTY_GRID), [])


class RenderTests(unittest.TestCase):

    def test_render_empty_board(self):
        text = render(EMPTY_GRID)
        lines = text.split("\n")
        self.assertEqual(lines[-1], "")
        self.assertEqual(len(lines[:-1]), 8)
        for line in lines[:-1]:
            self.assertEqual(line.rstrip(), ". . . . . . . .")

    def test_render_known_solution(self):
        text = render(grid_from_cells(KNOWN_SOLUTION))
        lines = text.splitlines()
        self.assertEqual(lines[0], "Q . . . . . . . ")
        self.assertEqual(lines[1], ". . . . Q . . . ")
        self.assertEqual(lines[7], ". . . Q . . . . ")
        self.assertTrue(text.endswith("\n"))

    def test_render_full_board(self):
        for line in render(INIT_GRID).splitlines():
            self.assertEqual(line, "Q " * 8)

    def test_parse_inverts_render(self):
        for grid in (EMPTY_GRID, INIT_GRID, grid_from_cells(KNOWN_SOLUTION), MAIN_DIAGONAL | ANTI_DIAGONAL):
            self.assertEqual(parse_board(render(grid)), grid)

    def test_parse_accepts_lines_without_trailing_space(self):
        text = "".join(line.rstrip() + "\n" for line in render(MAIN_DIAGONAL).splitlines())
        self.assertEqual(parse_board(text), MAIN_DIAGONAL)

    def test_parse_marks_queen_cells(self):
        text = (". " * 8 + "\n") * 8
        lines = text.splitlines(keepends=True)
        lines[2] = ". . . . . Q . . \n"
        lines[6] = "Q . . . . . . Q \n"
        self.assertEqual(parse_board("".join(lines)), grid_from_cells([(2, 5), (6, 0), (6, 7)]))

    def test_parse_rejects_malformed_boards(self):
        with self.assertRaises(ValueError):
            parse_board(". . . . . . . .\n" * 7)
        with self.assertRaises(ValueError):
            parse_board(". . . . . . .\n" * 8)
        with self.assertRaises(ValueError):
            parse_board(". . . . . . . X\n" * 8)


if __name__ == "__main__":
    unittest.main()
