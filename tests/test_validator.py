import unittest

import numpy as np

from sudoku.puzzle_io import parse_puzzle
from sudoku.validator import (
    find_conflict,
    has_valid_shape,
    is_fully_solved,
    is_legal_unit,
    is_partially_valid,
)

from .puzzles import CLASSIC, CLASSIC_SOLUTION, SAMPLE, copy_grid


class LegalUnitTests(unittest.TestCase):
    def test_placeholders_may_repeat(self) -> None:
        self.assertTrue(is_legal_unit([0, 0, 0, 1, 2, 0, 0, 0, 9], allow_placeholder=True))

    def test_placeholders_rejected_when_not_allowed(self) -> None:
        self.assertFalse(is_legal_unit([0, 2, 3, 4, 5, 6, 7, 8, 9], allow_placeholder=False))
        self.assertTrue(is_legal_unit([9, 2, 3, 4, 5, 6, 7, 8, 1], allow_placeholder=False))

    def test_duplicates_rejected(self) -> None:
        self.assertFalse(is_legal_unit([5, 0, 0, 0, 5, 0, 0, 0, 0], allow_placeholder=True))

    def test_out_of_range_rejected(self) -> None:
        self.assertFalse(is_legal_unit([10, 0, 0, 0, 0, 0, 0, 0, 0], allow_placeholder=True))
        self.assertFalse(is_legal_unit([-1, 0, 0, 0, 0, 0, 0, 0, 0], allow_placeholder=True))

    def test_non_integers_rejected(self) -> None:
        self.assertFalse(is_legal_unit([1.5, 0, 0, 0, 0, 0, 0, 0, 0]))
        self.assertFalse(is_legal_unit(["1", 0, 0, 0, 0, 0, 0, 0, 0]))
        self.assertFalse(is_legal_unit([True, 0, 0, 0, 0, 0, 0, 0, 0]))

    def test_numpy_integers_accepted(self) -> None:
        self.assertTrue(is_legal_unit(list(np.arange(1, 10))))


class GridValidityTests(unittest.TestCase):
    def test_sample_is_partially_valid(self) -> None:
        self.assertTrue(is_partially_valid(SAMPLE))
        self.assertIsNone(find_conflict(SAMPLE))

    def test_duplicate_in_row(self) -> None:
        grid = [[0] * 9 for _ in range(9)]
        grid[0][0] = 5
        grid[0][7] = 5
        self.assertFalse(is_partially_valid(grid))
        self.assertEqual(find_conflict(grid), "row 0")

    def test_duplicate_in_column(self) -> None:
        grid = [[0] * 9 for _ in range(9)]
        grid[1][4] = 3
        grid[8][4] = 3
        self.assertEqual(find_conflict(grid), "column 4")

    def test_duplicate_in_box_only(self) -> None:
        grid = [[0] * 9 for _ in range(9)]
        grid[6][6] = 7
        grid[8][8] = 7
        self.assertEqual(find_conflict(grid), "box 8")

    def test_out_of_range_value(self) -> None:
        grid = copy_grid(SAMPLE)
        grid[4][4] = 12
        self.assertFalse(is_partially_valid(grid))

    def test_wrong_shape(self) -> None:
        self.assertFalse(has_valid_shape([[0] * 9 for _ in range(8)]))
        self.assertFalse(has_valid_shape([[0] * 8 for _ in range(9)]))
        self.assertFalse(has_valid_shape(None))
        self.assertFalse(is_partially_valid([[0] * 9 for _ in range(8)]))
        self.assertEqual(find_conflict([[0] * 9]), "grid is not 9x9")


class FullySolvedTests(unittest.TestCase):
    def test_known_solution(self) -> None:
        self.assertTrue(is_fully_solved(parse_puzzle(CLASSIC_SOLUTION)))
        self.assertTrue(is_fully_solved(np.array(parse_puzzle(CLASSIC_SOLUTION))))

    def test_partial_grid_is_not_solved(self) -> None:
        self.assertFalse(is_fully_solved(parse_puzzle(CLASSIC)))

    def test_swapped_cells_break_solution(self) -> None:
        grid = parse_puzzle(CLASSIC_SOLUTION)
        grid[0][0], grid[1][0] = grid[1][0], grid[0][0]
        self.assertFalse(is_fully_solved(grid))

    def test_rows_valid_but_boxes_not(self) -> None:
        # 每行都是 1..9 的同一排列：行合法，列与宫不合法
        grid = [list(range(1, 10)) for _ in range(9)]
        self.assertFalse(is_fully_solved(grid))


if __name__ == "__main__":
    unittest.main()
