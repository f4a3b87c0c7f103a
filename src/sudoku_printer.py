"""Text and PDF rendering of Sudoku boards."""

from __future__ import annotations

import math
from pathlib import Path
from typing import Optional, Sequence

from project_config import get_config
from sudoku_grid import BOX, EMPTY, N, Grid

INCH_PER_CM = 0.3937007874

_TOP = "╔" + "╦".join(["═══"] * N) + "╗"
_BAND = "╠" + "╬".join(["═══"] * N) + "╣"
_INNER = "╠" + "╬".join("┼".join(["───"] * BOX) for _ in range(N // BOX)) + "╣"
_BOTTOM = "╚" + "╩".join(["═══"] * N) + "╝"


def render(grid: Grid) -> str:
    """Return a bordered block with heavy lines on box boundaries."""

    lines = []
    for r in range(N):
        if r == 0:
            lines.append(_TOP)
        elif r % BOX == 0:
            lines.append(_BAND)
        else:
            lines.append(_INNER)
        cells = []
        for c in range(N):
            sep = "║" if c % BOX == 0 else "│"
            v = grid[r][c]
            cells.append(f"{sep} {v if v != EMPTY else ' '} ")
        lines.append("".join(cells) + "║")
    lines.append(_BOTTOM)
    return "\n".join(lines)


def _pdf_settings() -> dict:
    cfg = get_config().get("pdf", {})
    return {
        "page_w_in": float(cfg.get("page_width_cm", 21.0)) * INCH_PER_CM,
        "page_h_in": float(cfg.get("page_height_cm", 29.7)) * INCH_PER_CM,
        "margin_in": float(cfg.get("margin_cm", 2.0)) * INCH_PER_CM,
        "font_scale": float(cfg.get("font_scale", 0.65)),
    }


def _draw_grid(ax, grid: Grid, size_in: float, font_scale: float) -> None:
    for idx in range(N + 1):
        linewidth = 1.0 if idx % BOX else 2.5
        ax.axvline(idx / N, color="k", linewidth=linewidth)
        ax.axhline(idx / N, color="k", linewidth=linewidth)
    ax.set_xlim(0, 1)
    ax.set_ylim(0, 1)
    ax.axis("off")
    font_size = max(1, int(font_scale * size_in * 72 / N))
    for r in range(N):
        for c in range(N):
            value = grid[r][c]
            if value:
                x = (c + 0.5) / N
                y = 1 - (r + 0.5) / N
                ax.text(x, y, str(value), ha="center", va="center", fontsize=font_size)


def export_pdf(
    grids: Sequence[Grid],
    out_path: str | Path,
    *,
    titles: Optional[Sequence[str]] = None,
    per_page: int = 2,
) -> Path:
    """Write ``grids`` to a portrait PDF, ``per_page`` boards stacked per page."""

    from matplotlib.backends.backend_pdf import PdfPages
    import matplotlib.pyplot as plt

    if titles is not None and len(titles) != len(grids):
        raise ValueError("titles must match grids one-to-one")
    per_page = max(1, per_page)
    s = _pdf_settings()
    page_w_in, page_h_in, margin_in = s["page_w_in"], s["page_h_in"], s["margin_in"]
    title_in = 0.4

    slot_h = (page_h_in - 2 * margin_in) / per_page
    size_in = min(page_w_in - 2 * margin_in, slot_h - title_in)
    if size_in <= 0:
        raise ValueError("page is too small for the configured margins")

    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    pages = max(1, math.ceil(len(grids) / per_page))

    with PdfPages(out_path) as pdf:
        for page_num in range(pages):
            fig = plt.figure(figsize=(page_w_in, page_h_in))
            start = page_num * per_page
            for slot, grid in enumerate(grids[start:start + per_page]):
                left = (page_w_in - size_in) / 2
                bottom = page_h_in - margin_in - (slot + 1) * slot_h
                rect = [
                    left / page_w_in,
                    bottom / page_h_in,
                    size_in / page_w_in,
                    size_in / page_h_in,
                ]
                ax = fig.add_axes(rect, frameon=False)
                _draw_grid(ax, grid, size_in, s["font_scale"])
                if titles is not None:
                    fig.text(
                        0.5,
                        (bottom + size_in + title_in / 3) / page_h_in,
                        titles[start + slot],
                        ha="center",
                        va="bottom",
                        fontsize=12,
                    )
            pdf.savefig(fig)
            plt.close(fig)
    return out_path


__all__ = ["export_pdf", "render"]
