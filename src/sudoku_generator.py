# sudoku_generator.py
# Seed one row with a shuffled permutation, complete the board with the
# backtracking solver, then clear a share of the cells according to the level.

from __future__ import annotations

import enum
import logging
import math
import random
from typing import Any, List, Optional

from project_config import get_config
from sudoku_errors import GeneratorInvariantError
from sudoku_grid import CELLS, EMPTY, N, Grid, get_empty_spots, new_grid
from sudoku_solver import SolveStats, solve

_LOGGER = logging.getLogger(__name__)

DEFAULT_EMPTY_RATIO = {
    "easy": 0.25,
    "medium": 0.5,
    "hard": 0.75,
}


class Difficulty(enum.Enum):
    EASY = 1
    MEDIUM = 2
    HARD = 3

    @classmethod
    def from_level(cls, value: Any) -> "Difficulty":
        """Map a menu choice to a level; anything unrecognised means EASY."""

        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                value = int(value.strip())
            except ValueError:
                return cls.EASY
        if isinstance(value, int) and not isinstance(value, bool):
            for level in cls:
                if level.value == value:
                    return level
        return cls.EASY

    @property
    def key(self) -> str:
        return self.name.lower()


def empty_fraction(level: Difficulty) -> float:
    """Share of the board cleared for ``level``; ``[generator.empty_ratio]`` wins."""

    ratios = get_config().get("generator", {}).get("empty_ratio", {})
    return float(ratios.get(level.key, DEFAULT_EMPTY_RATIO[level.key]))


def cells_to_remove(level: Difficulty) -> int:
    return math.floor(CELLS * empty_fraction(level))


def default_level() -> Difficulty:
    return Difficulty.from_level(get_config().get("generator", {}).get("default_level", 1))


def shuffled_digits(rng: random.Random) -> List[int]:
    """Uniform permutation of ``1..N`` built by swapping forward."""

    nums = list(range(1, N + 1))
    for i in range(1, N):
        pos = rng.randrange(i + 1)
        nums[pos], nums[i] = nums[i], nums[pos]
    return nums


def generate_full_solution(rng: random.Random) -> Grid:
    """Return a completely filled valid board."""

    grid = new_grid()
    grid[0] = shuffled_digits(rng)

    start_row, start_col = rng.randrange(N), rng.randrange(N)
    worklist = get_empty_spots(grid, start_row, start_col)
    stats = SolveStats()
    if not solve(grid, worklist, stats):
        raise GeneratorInvariantError(
            f"seeded row {grid[0]} could not be completed from offset ({start_row}, {start_col})"
        )
    _LOGGER.debug(
        "full solution from offset (%d, %d): %s", start_row, start_col, stats.to_dict()
    )
    return grid


def remove_cells(grid: Grid, count: int, rng: random.Random) -> Grid:
    """Clear ``count`` distinct cells picked uniformly at random, in place."""

    used = [False] * CELLS
    for _ in range(count):
        position = rng.randrange(CELLS)
        while used[position]:
            position = rng.randrange(CELLS)
        used[position] = True
        grid[position // N][position % N] = EMPTY
    return grid


def create_random_sudoku(
    level: Any = Difficulty.EASY,
    *,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
) -> Grid:
    """Generate a puzzle for ``level``.

    Pass ``rng`` or ``seed`` for reproducible output; otherwise a fresh
    random source is used. The intermediate solution is not kept.
    """
    level = Difficulty.from_level(level)
    if rng is None:
        rng = random.Random(seed)

    grid = generate_full_solution(rng)
    remove = cells_to_remove(level)
    remove_cells(grid, remove, rng)
    _LOGGER.debug("created %s puzzle with %d empty cells", level.key, remove)
    return grid


__all__ = [
    "DEFAULT_EMPTY_RATIO",
    "Difficulty",
    "cells_to_remove",
    "create_random_sudoku",
    "default_level",
    "empty_fraction",
    "generate_full_solution",
    "remove_cells",
    "shuffled_digits",
]
