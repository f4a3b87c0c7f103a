from __future__ import annotations

import pytest

from sudoku_grid import (
    CELLS,
    EMPTY,
    N,
    count_empty,
    from_rows,
    from_string,
    get_empty_spots,
    grid_copy,
    is_complete,
    is_consistent,
    is_safe,
    new_grid,
    to_string,
)

SOLVED = (
    "123456789"
    "456789123"
    "789123456"
    "214365897"
    "365897214"
    "897214365"
    "531642978"
    "642978531"
    "978531642"
)


def _solved() -> list[list[int]]:
    return from_string(SOLVED)


def test_solved_fixture_is_complete():
    grid = _solved()
    assert is_complete(grid)
    assert count_empty(grid) == 0


def test_is_safe_accepts_only_the_missing_digit():
    grid = _solved()
    for r, c in [(0, 0), (4, 4), (8, 8), (2, 7)]:
        expected = grid[r][c]
        grid[r][c] = EMPTY
        safe = [v for v in range(1, N + 1) if is_safe(grid, r, c, v)]
        assert safe == [expected]
        grid[r][c] = expected


def test_is_safe_checks_row_column_and_box_independently():
    grid = new_grid()
    grid[0][5] = 4  # same row as (0, 0)
    grid[6][0] = 7  # same column
    grid[2][2] = 9  # same box
    assert not is_safe(grid, 0, 0, 4)
    assert not is_safe(grid, 0, 0, 7)
    assert not is_safe(grid, 0, 0, 9)
    assert is_safe(grid, 0, 0, 1)
    # (3, 3) shares none of those units
    assert is_safe(grid, 3, 3, 9)


def test_is_safe_does_not_mutate():
    grid = _solved()
    grid[1][1] = EMPTY
    before = grid_copy(grid)
    is_safe(grid, 1, 1, 5)
    assert grid == before


def test_empty_spots_from_origin_is_row_major():
    assert get_empty_spots(new_grid()) == list(range(CELLS))


def test_empty_spots_wraps_from_offset():
    spots = get_empty_spots(new_grid(), 2, 3)
    assert len(spots) == CELLS
    assert sorted(spots) == list(range(CELLS))
    assert spots[0] == 2 * N + 3
    assert spots[1] == 2 * N + 4
    assert spots[6] == 2 * N + 0
    # last visited: row (2 + 8) % 9 = 1, col (3 + 8) % 9 = 2
    assert spots[-1] == 1 * N + 2


def test_empty_spots_skip_filled_cells():
    grid = _solved()
    grid[0][4] = EMPTY
    grid[7][1] = EMPTY
    assert get_empty_spots(grid) == [4, 7 * N + 1]
    assert get_empty_spots(grid, 5, 0) == [7 * N + 1, 4]


def test_is_consistent_flags_duplicates():
    grid = new_grid()
    grid[0][0] = 5
    grid[1][1] = 5
    assert not is_consistent(grid)
    grid[1][1] = EMPTY
    grid[8][0] = 5
    assert not is_consistent(grid)
    grid[8][0] = EMPTY
    assert is_consistent(grid)


def test_from_rows_reads_first_character_and_zero_as_empty():
    rows = [
        "0,0,9,7,4,8,0,0,0",
        "7,0,0,0,0,0,0,0,0",
        "0,2,0,1,0,9,0,0,0",
        "0,0,7,0,0,0,2,4,0",
        "0,6,4,0,1,0,5,9,0",
        "0,9,8,0,0,0,3,0,0",
        "0,0,0,8,0,3,0,2,0",
        "0,0,0,0,0,0,0,0,6",
        "0,0,0,2,7,5,9,0,0",
    ]
    grid = from_rows(rows)
    assert grid[0] == [0, 0, 9, 7, 4, 8, 0, 0, 0]
    assert grid[8][6] == 9
    assert to_string(grid).startswith("009748000700000000")


def test_from_rows_rejects_wrong_row_count():
    with pytest.raises(ValueError):
        from_rows(["1,2,3,4,5,6,7,8,9"] * 8)


def test_from_string_accepts_dots_and_whitespace():
    text = "\n".join(SOLVED[i:i + 9] for i in range(0, CELLS, 9))
    text = "." + text[1:]
    grid = from_string(text)
    assert grid[0][0] == EMPTY
    assert to_string(grid) == "0" + SOLVED[1:]


def test_from_string_rejects_short_input():
    with pytest.raises(ValueError):
        from_string("123")
