"""数独棋盘校验与回溯求解。"""

from __future__ import annotations

from .grid import box_of_cell, box_values, candidates, column_values, row_values
from .puzzle_io import format_grid, load_grid, load_puzzles, parse_puzzle
from .solver import (
    InvalidBoardError,
    SearchAbortedError,
    SolverConfig,
    SudokuSolver,
    construct,
    solve,
    solve_sudoku,
)
from .validator import is_fully_solved, is_legal_unit, is_partially_valid

__all__ = [
    "InvalidBoardError",
    "SearchAbortedError",
    "SolverConfig",
    "SudokuSolver",
    "box_of_cell",
    "box_values",
    "candidates",
    "column_values",
    "construct",
    "format_grid",
    "is_fully_solved",
    "is_legal_unit",
    "is_partially_valid",
    "load_grid",
    "load_puzzles",
    "parse_puzzle",
    "row_values",
    "solve",
    "solve_sudoku",
]
