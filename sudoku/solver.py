from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from .grid import PLACEHOLDER, Cell, candidates, count_empty_cells, find_empty_cell, iter_cells
from .validator import find_conflict, is_fully_solved

logger = logging.getLogger(__name__)


class InvalidBoardError(ValueError):
    """输入棋盘在某一行、列或宫内存在重复数字或非法取值。"""


class SearchAbortedError(RuntimeError):
    """搜索步数超过配置上限。抛出前棋盘已恢复为调用前的状态。"""


@dataclass
class SolverConfig:
    max_steps: int | None = None

    def __post_init__(self) -> None:
        if self.max_steps is not None and self.max_steps <= 0:
            raise ValueError("max_steps 必须为正整数")


def _check_board(grid: Sequence) -> None:
    conflict = find_conflict(grid)
    if conflict is not None:
        logger.warning("拒绝非法棋盘: %s", conflict)
        raise InvalidBoardError(f"非法数独棋盘: {conflict}")


class SudokuSolver:
    """绑定到调用方棋盘的回溯求解器，求解过程直接修改该棋盘。"""

    def __init__(self, grid: Sequence, config: SolverConfig | None = None) -> None:
        _check_board(grid)

        self.grid = grid
        self.config = config or SolverConfig()
        self.empty_cells = count_empty_cells(grid)
        self.steps = 0
        self.backtracks = 0
        logger.debug("求解器已创建: 空格数=%s, max_steps=%s", self.empty_cells, self.config.max_steps)

    def solve(self) -> bool:
        """求解成功返回 True 且棋盘被填满；失败返回 False 且棋盘保持原样。"""

        # 棋盘归调用方所有，两次求解之间可能被修改
        _check_board(self.grid)
        self.steps = 0
        self.backtracks = 0
        blanks: List[Cell] = [cell for cell in iter_cells() if self.grid[cell[0]][cell[1]] == PLACEHOLDER]
        self.empty_cells = len(blanks)
        try:
            solved = self._search()
        except SearchAbortedError:
            for row, col in blanks:
                self.grid[row][col] = PLACEHOLDER
            self.empty_cells = len(blanks)
            logger.warning("搜索在 %s 步后中止，棋盘已恢复", self.steps)
            raise

        logger.debug(
            "搜索结束: solved=%s, steps=%s, backtracks=%s",
            solved,
            self.steps,
            self.backtracks,
        )
        return solved

    def _search(self) -> bool:
        if self.empty_cells == 0:
            # 计数器归零后仍需完整校验一次
            return is_fully_solved(self.grid)

        cell = find_empty_cell(self.grid)
        if cell is None:
            return is_fully_solved(self.grid)

        self.steps += 1
        max_steps = self.config.max_steps
        if max_steps is not None and self.steps > max_steps:
            raise SearchAbortedError(f"超过最大搜索步数: {max_steps}")

        row, col = cell
        for num in candidates(self.grid, row, col):
            self.grid[row][col] = num
            self.empty_cells -= 1

            if self._search():
                return True

            # Backtrack
            self.grid[row][col] = PLACEHOLDER
            self.empty_cells += 1
            self.backtracks += 1

        return False


def construct(grid: Sequence, config: SolverConfig | None = None) -> SudokuSolver:
    return SudokuSolver(grid, config)


def solve(solver: SudokuSolver) -> bool:
    return solver.solve()


def solve_sudoku(puzzle: Sequence, config: Optional[SolverConfig] = None) -> bool:
    """校验并原地求解 ``puzzle``，非法棋盘抛出 :class:`InvalidBoardError`。"""

    return construct(puzzle, config).solve()
