from __future__ import annotations

import argparse
import logging
import os
from dataclasses import asdict
from pathlib import Path
from typing import List, Sequence

from tqdm.auto import tqdm

from .puzzle_io import format_grid, load_grid, load_puzzles, parse_puzzle
from .solver import InvalidBoardError, SearchAbortedError, SolverConfig, solve_sudoku

logger = logging.getLogger(__name__)

SAMPLE_PUZZLE = [
    [8, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 3, 6, 0, 0, 0, 0, 0],
    [0, 7, 0, 0, 9, 0, 2, 0, 0],
    [0, 5, 0, 0, 0, 7, 0, 0, 0],
    [0, 0, 0, 0, 4, 5, 7, 0, 0],
    [0, 0, 0, 1, 0, 0, 0, 3, 0],
    [0, 0, 1, 0, 0, 0, 0, 6, 8],
    [0, 0, 8, 5, 0, 0, 0, 1, 0],
    [0, 9, 0, 0, 0, 0, 4, 0, 0],
]

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_BAD_INPUT = 2


def _default_max_steps() -> int | None:
    value = os.environ.get("SUDOKU_MAX_STEPS")
    if not value:
        return None
    try:
        return int(value)
    except ValueError as exc:
        raise ValueError(f"环境变量 SUDOKU_MAX_STEPS 不是整数: {value!r}") from exc


def _format_config(config: SolverConfig) -> str:
    return ", ".join(f"{key}={value}" for key, value in sorted(asdict(config).items()))


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="校验并求解 9x9 数独")
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--puzzle",
        type=str,
        default=None,
        help="81 个字符的数独串，0 或 . 表示空格",
    )
    source.add_argument(
        "--grid-file",
        type=Path,
        default=None,
        help="9 行、每行 9 个以空白分隔整数的棋盘文件",
    )
    source.add_argument(
        "--batch-file",
        type=Path,
        default=None,
        help="每行一道 81 字符数独串的批量文件",
    )
    parser.add_argument(
        "--max-steps",
        type=int,
        default=None,
        help="单道数独的最大搜索步数，默认读取环境变量 SUDOKU_MAX_STEPS，未设置则不限制",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="日志级别",
    )
    return parser.parse_args(argv)


def _solve_one(grid, config: SolverConfig) -> bool:
    try:
        solved = solve_sudoku(grid, config)
    except InvalidBoardError as exc:
        logger.error("%s", exc)
        return False
    except SearchAbortedError as exc:
        logger.error("%s", exc)
        return False
    return solved


def _run_batch(puzzles: List[List[List[int]]], config: SolverConfig) -> int:
    solved_count = 0
    for idx, grid in enumerate(tqdm(puzzles, desc="求解", dynamic_ncols=True), start=1):
        if _solve_one(grid, config):
            solved_count += 1
            logger.debug("第 %s 道已求解：\n%s", idx, format_grid(grid))
        else:
            logger.warning("第 %s 道未能求解", idx)

    logger.info("批量求解完成: 总数=%s, 成功=%s, 失败=%s", len(puzzles), solved_count, len(puzzles) - solved_count)
    return EXIT_OK if solved_count == len(puzzles) else EXIT_FAILED


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        max_steps = args.max_steps if args.max_steps is not None else _default_max_steps()
        config = SolverConfig(max_steps=max_steps)
    except ValueError as exc:
        logger.error("%s", exc)
        return EXIT_BAD_INPUT
    logger.info("求解配置: %s", _format_config(config))

    try:
        if args.batch_file is not None:
            return _run_batch(load_puzzles(args.batch_file), config)
        if args.grid_file is not None:
            grid = load_grid(args.grid_file)
        elif args.puzzle is not None:
            grid = parse_puzzle(args.puzzle)
        else:
            grid = [row[:] for row in SAMPLE_PUZZLE]
    except (OSError, ValueError) as exc:
        logger.error("无法读取数独输入: %s", exc)
        return EXIT_BAD_INPUT

    logger.info("待求解的数独棋盘：\n%s", format_grid(grid, separators=True))
    solved = _solve_one(grid, config)
    logger.info("Solved: %s", solved)
    logger.info("求解后的数独棋盘：\n%s", format_grid(grid, separators=True))
    return EXIT_OK if solved else EXIT_FAILED


if __name__ == "__main__":
    raise SystemExit(main())
