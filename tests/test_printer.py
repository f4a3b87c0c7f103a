from __future__ import annotations

import pytest

from sudoku_grid import EMPTY, from_string, new_grid
from sudoku_printer import export_pdf, render

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


def test_render_layout():
    lines = render(from_string(SOLVED)).splitlines()
    assert len(lines) == 19
    assert lines[0] == "╔═══╦═══╦═══╦═══╦═══╦═══╦═══╦═══╦═══╗"
    assert lines[1] == "║ 1 │ 2 │ 3 ║ 4 │ 5 │ 6 ║ 7 │ 8 │ 9 ║"
    assert lines[2] == "╠───┼───┼───╬───┼───┼───╬───┼───┼───╣"
    assert lines[6] == "╠═══╬═══╬═══╬═══╬═══╬═══╬═══╬═══╬═══╣"
    assert lines[-1] == "╚═══╩═══╩═══╩═══╩═══╩═══╩═══╩═══╩═══╝"


def test_render_blank_cells_as_spaces():
    grid = new_grid()
    grid[4][4] = 7
    lines = render(grid).splitlines()
    assert lines[1] == "║   │   │   ║   │   │   ║   │   │   ║"
    assert lines[9] == "║   │   │   ║   │ 7 │   ║   │   │   ║"


def test_render_is_idempotent():
    grid = from_string(SOLVED)
    grid[0][0] = EMPTY
    assert render(grid) == render(grid)


def test_export_pdf_writes_file(tmp_path):
    grid = from_string(SOLVED)
    out = export_pdf([grid, grid, grid], tmp_path / "out" / "boards.pdf", titles=["a", "b", "c"])
    assert out.exists()
    assert out.read_bytes().startswith(b"%PDF")


def test_export_pdf_rejects_mismatched_titles(tmp_path):
    with pytest.raises(ValueError):
        export_pdf([new_grid()], tmp_path / "x.pdf", titles=["a", "b"])
