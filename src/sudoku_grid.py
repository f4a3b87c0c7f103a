"""Board geometry, placement checks and text conversions for the 9x9 grid."""

from __future__ import annotations

from typing import Iterable, List, Sequence

N = 9
BOX = 3
CELLS = N * N
EMPTY = 0

Grid = List[List[int]]


def new_grid() -> Grid:
    return [[EMPTY] * N for _ in range(N)]


def grid_copy(g: Grid) -> Grid:
    return [row[:] for row in g]


def box_origin(row: int, col: int) -> tuple[int, int]:
    """Return the top-left cell of the box containing ``(row, col)``."""

    return BOX * (row // BOX), BOX * (col // BOX)


def is_safe(grid: Grid, row: int, col: int, value: int) -> bool:
    """Return ``True`` when ``value`` may be placed at ``(row, col)``.

    Only the cells currently filled in ``grid`` are taken into account. The
    target cell itself is expected to be empty.
    """
    if any(grid[row][k] == value for k in range(N)):
        return False
    if any(grid[k][col] == value for k in range(N)):
        return False
    br, bc = box_origin(row, col)
    for r in range(br, br + BOX):
        for c in range(bc, bc + BOX):
            if grid[r][c] == value:
                return False
    return True


def get_empty_spots(grid: Grid, start_row: int = 0, start_col: int = 0) -> List[int]:
    """Collect linear indices of empty cells, scanning from an offset.

    Rows and columns wrap around modulo ``N`` so every cell is visited once.
    The result is used as a stack: the last visited cell is attacked first.
    """
    spots: List[int] = []
    for i in range(start_row, start_row + N):
        for j in range(start_col, start_col + N):
            r, c = i % N, j % N
            if grid[r][c] == EMPTY:
                spots.append(r * N + c)
    return spots


def count_empty(grid: Grid) -> int:
    return sum(1 for row in grid for v in row if v == EMPTY)


def _units(grid: Grid) -> Iterable[List[int]]:
    for r in range(N):
        yield grid[r]
    for c in range(N):
        yield [grid[r][c] for r in range(N)]
    for br in range(0, N, BOX):
        for bc in range(0, N, BOX):
            yield [grid[r][c] for r in range(br, br + BOX) for c in range(bc, bc + BOX)]


def is_consistent(grid: Grid) -> bool:
    """Check that no row, column or box repeats a non-empty value."""

    for unit in _units(grid):
        filled = [v for v in unit if v != EMPTY]
        if len(filled) != len(set(filled)):
            return False
    return True


def is_complete(grid: Grid) -> bool:
    return count_empty(grid) == 0 and is_consistent(grid)


# ---------- Text conversions ----------

def from_rows(rows: Sequence[str], delimiter: str = ",") -> Grid:
    """Build a grid from ``N`` delimited rows such as ``"0,0,9,7,4,8,0,0,0"``.

    Each token contributes its first character; ``0`` marks an empty cell.
    """
    if len(rows) != N:
        raise ValueError(f"expected {N} rows, got {len(rows)}")
    grid: Grid = []
    for i, line in enumerate(rows):
        tokens = [t.strip() for t in line.split(delimiter)]
        if len(tokens) != N:
            raise ValueError(f"row {i} has {len(tokens)} cells, expected {N}")
        grid.append([int(t[0]) if t[0] != "0" else EMPTY for t in tokens])
    return grid


def from_string(s: str) -> Grid:
    s = "".join(s.split())
    if len(s) != CELLS:
        raise ValueError(f"expected {CELLS} cells, got {len(s)}")
    grid: Grid = []
    for r in range(N):
        chunk = s[r * N:(r + 1) * N]
        grid.append([int(ch) if ch.isdigit() and ch != "0" else EMPTY for ch in chunk])
    return grid


def to_string(g: Grid) -> str:
    return "".join(str(g[r][c] or 0) for r in range(N) for c in range(N))


__all__ = [
    "BOX",
    "CELLS",
    "EMPTY",
    "Grid",
    "N",
    "box_origin",
    "count_empty",
    "from_rows",
    "from_string",
    "get_empty_spots",
    "grid_copy",
    "is_complete",
    "is_consistent",
    "is_safe",
    "new_grid",
    "to_string",
]
