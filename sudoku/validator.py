from __future__ import annotations

from numbers import Integral
from typing import Iterable, Optional, Sequence

from .grid import DIGITS, PLACEHOLDER, SIZE, box_values, column_values, row_values

_FULL_UNIT = frozenset(DIGITS)


def _is_digit(value: object) -> bool:
    return isinstance(value, Integral) and not isinstance(value, bool)


def has_valid_shape(grid: object) -> bool:
    try:
        if len(grid) != SIZE:  # type: ignore[arg-type]
            return False
        return all(len(row) == SIZE for row in grid)  # type: ignore[union-attr]
    except TypeError:
        return False


def is_legal_unit(values: Iterable[object], allow_placeholder: bool = True) -> bool:
    """检查单个行/列/宫是否合法：非占位数字不得重复且必须在取值范围内。"""

    low = PLACEHOLDER if allow_placeholder else 1
    seen = set()
    for value in values:
        if not _is_digit(value) or not (low <= value <= SIZE):
            return False
        if value == PLACEHOLDER:
            continue
        if value in seen:
            return False
        seen.add(value)
    return True


def _iter_units(grid: Sequence):
    for i in range(SIZE):
        yield f"row {i}", row_values(grid, i)
        yield f"column {i}", column_values(grid, i)
        yield f"box {i}", box_values(grid, i)


def find_conflict(grid: Sequence) -> Optional[str]:
    """返回第一个不合法单元的描述，棋盘合法时返回 ``None``。"""

    if not has_valid_shape(grid):
        return "grid is not 9x9"
    for name, values in _iter_units(grid):
        if not is_legal_unit(values, allow_placeholder=True):
            return name
    return None


def is_partially_valid(grid: Sequence) -> bool:
    return find_conflict(grid) is None


def is_fully_solved(grid: Sequence) -> bool:
    if not has_valid_shape(grid):
        return False
    for _, values in _iter_units(grid):
        if len(values) != SIZE or set(values) != _FULL_UNIT:
            return False
    return True
