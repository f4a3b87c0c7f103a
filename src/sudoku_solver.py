"""Exhaustive backtracking solver for the classic 9x9 Sudoku.

The solver walks a worklist of empty cells, tries digits in ascending order
and undoes every trial placement that leads to a dead end. It performs no
constraint propagation and no look-ahead beyond :func:`sudoku_grid.is_safe`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from sudoku_grid import EMPTY, N, Grid, get_empty_spots, is_safe

_LOGGER = logging.getLogger(__name__)


@dataclass
class SolveStats:
    """Counters collected while searching."""

    placements: int = 0
    undos: int = 0
    max_depth: int = 0

    def to_dict(self) -> dict[str, int]:
        return {
            "placements": self.placements,
            "undos": self.undos,
            "max_depth": self.max_depth,
        }


def solve(grid: Grid, worklist: List[int], stats: Optional[SolveStats] = None) -> bool:
    """Fill every cell named in ``worklist`` so that no constraint is violated.

    ``worklist`` holds linear indices ``row * N + col`` and is consumed from
    its end. On success the grid holds the assignment and the worklist is
    empty. On failure both are restored to their state at entry.
    """
    if not worklist:
        return True
    if stats is not None:
        stats.max_depth = max(stats.max_depth, len(worklist))

    spot = worklist[-1]
    row, col = divmod(spot, N)
    for k in range(1, N + 1):
        if not is_safe(grid, row, col, k):
            continue
        grid[row][col] = k
        worklist.pop()
        if stats is not None:
            stats.placements += 1
        if solve(grid, worklist, stats):
            return True
        grid[row][col] = EMPTY
        worklist.append(spot)
        if stats is not None:
            stats.undos += 1
    return False


def solve_sudoku(grid: Grid, stats: Optional[SolveStats] = None) -> bool:
    """Solve a whole board in place, scanning empty cells from the top-left."""

    stats = stats if stats is not None else SolveStats()
    worklist = get_empty_spots(grid, 0, 0)
    _LOGGER.debug("solving board with %d empty cells", len(worklist))
    solved = solve(grid, worklist, stats)
    if solved:
        _LOGGER.debug("solved: %s", stats.to_dict())
    else:
        _LOGGER.info("no solution after %d placements", stats.placements)
    return solved


__all__ = ["SolveStats", "solve", "solve_sudoku"]
