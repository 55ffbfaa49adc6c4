from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Sequence

import numpy as np

from .grid import PLACEHOLDER, SIZE

logger = logging.getLogger(__name__)

_EMPTY_CHARS = {"0", "."}


def parse_puzzle(text: str) -> List[List[int]]:
    """将 81 个字符的数独串解析为 9×9 列表，``0`` 或 ``.`` 表示空格，空白字符被忽略。"""

    chars = [ch for ch in text if not ch.isspace()]
    if len(chars) != SIZE * SIZE:
        raise ValueError(f"数独串长度应为 81，实际为: {len(chars)}")

    values: List[int] = []
    for ch in chars:
        if ch in _EMPTY_CHARS:
            values.append(PLACEHOLDER)
        elif ch.isdigit():
            values.append(int(ch))
        else:
            raise ValueError(f"数独串包含非法字符: {ch!r}")

    return [values[row * SIZE : (row + 1) * SIZE] for row in range(SIZE)]


def load_grid(path: str | Path) -> np.ndarray:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"未找到棋盘文件: {path}")

    grid = np.loadtxt(path, dtype=int, ndmin=2)
    if grid.shape != (SIZE, SIZE):
        raise ValueError(f"棋盘尺寸应为 9x9，实际为: {grid.shape[0]}x{grid.shape[1]}")
    logger.debug("已从 %s 读取棋盘", path)
    return grid


def load_puzzles(path: str | Path) -> List[List[List[int]]]:
    """逐行读取数独串，空行与 ``#`` 开头的注释行会被跳过。"""

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"未找到数独列表文件: {path}")

    puzzles: List[List[List[int]]] = []
    with path.open("r", encoding="utf-8") as handle:
        for lineno, line in enumerate(handle, start=1):
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            try:
                puzzles.append(parse_puzzle(line))
            except ValueError as exc:
                raise ValueError(f"{path}:{lineno}: {exc}") from exc
    logger.debug("已从 %s 读取 %s 道数独", path, len(puzzles))
    return puzzles


def format_grid(grid: Sequence, separators: bool = False) -> str:
    lines = []
    for row_idx in range(SIZE):
        cells = [str(int(grid[row_idx][col])) if grid[row_idx][col] != PLACEHOLDER else "." for col in range(SIZE)]
        if separators:
            line = " | ".join(" ".join(cells[i : i + 3]) for i in range(0, SIZE, 3))
            if row_idx in (3, 6):
                lines.append("------+-------+------")
        else:
            line = " ".join(cells)
        lines.append(line)
    return "\n".join(lines)
