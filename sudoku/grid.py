"""9×9 数独棋盘的只读访问工具。

棋盘可以是 9 个长度为 9 的列表，也可以是 9×9 的 ``numpy.ndarray``，
只要求支持 ``grid[row][col]`` 形式的读写。
"""

from __future__ import annotations

from typing import Iterator, List, Optional, Sequence, Tuple

SIZE = 9
BOX_SIZE = 3
PLACEHOLDER = 0
DIGITS = range(1, SIZE + 1)

Cell = Tuple[int, int]


def box_index(row: int, col: int) -> int:
    return (row // BOX_SIZE) * BOX_SIZE + col // BOX_SIZE


def iter_cells() -> Iterator[Cell]:
    """按行优先顺序遍历全部 81 个格子。"""

    for row in range(SIZE):
        for col in range(SIZE):
            yield row, col


def row_values(grid: Sequence, row: int) -> List[int]:
    return [grid[row][col] for col in range(SIZE)]


def column_values(grid: Sequence, col: int) -> List[int]:
    return [grid[row][col] for row in range(SIZE)]


def box_values(grid: Sequence, index: int) -> List[int]:
    """返回第 ``index`` 个宫的 9 个值，宫内按行优先排列。"""

    start_row = (index // BOX_SIZE) * BOX_SIZE
    start_col = (index % BOX_SIZE) * BOX_SIZE
    return [
        grid[start_row + i][start_col + j]
        for i in range(BOX_SIZE)
        for j in range(BOX_SIZE)
    ]


def box_of_cell(grid: Sequence, row: int, col: int) -> List[int]:
    return box_values(grid, box_index(row, col))


def find_empty_cell(grid: Sequence) -> Optional[Cell]:
    for row, col in iter_cells():
        if grid[row][col] == PLACEHOLDER:
            return row, col
    return None


def count_empty_cells(grid: Sequence) -> int:
    return sum(1 for row, col in iter_cells() if grid[row][col] == PLACEHOLDER)


def candidates(grid: Sequence, row: int, col: int) -> List[int]:
    """计算空格可填入的数字，按升序返回以保证求解结果可复现。"""

    used = set(row_values(grid, row))
    used.update(column_values(grid, col))
    used.update(box_of_cell(grid, row, col))
    return [num for num in DIGITS if num not in used]
