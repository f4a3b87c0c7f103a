"""Light-weight JSONL event log for generated and solved boards, with rotation."""

from __future__ import annotations

import json
import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict

from sudoku_grid import Grid, count_empty, to_string

if TYPE_CHECKING:
    from sudoku_generator import Difficulty
    from sudoku_solver import SolveStats

__all__ = [
    "append_event",
    "configure",
    "current_log_path",
    "disable",
    "is_enabled",
    "record_generate",
    "record_solve",
]

_DEFAULT_MAX_BYTES = 100 * 1024 * 1024
_LOCK = threading.Lock()
_LOG_DIR: Path | None = None
_MAX_BYTES = _DEFAULT_MAX_BYTES
_CURRENT_PATH: Path | None = None


def configure(base_dir: str | Path, *, max_bytes: int | None = None) -> None:
    """Enable the log and write all files below ``base_dir``."""

    global _LOG_DIR, _MAX_BYTES, _CURRENT_PATH
    _LOG_DIR = Path(base_dir)
    _MAX_BYTES = max_bytes or _DEFAULT_MAX_BYTES
    _CURRENT_PATH = None


def disable() -> None:
    global _LOG_DIR, _CURRENT_PATH
    _LOG_DIR = None
    _CURRENT_PATH = None


def is_enabled() -> bool:
    return _LOG_DIR is not None


def _date_prefix() -> str:
    return datetime.now(timezone.utc).strftime("%Y%m%d")


def _resolve_log_path(base: Path) -> Path:
    global _CURRENT_PATH
    date_dir = base / _date_prefix()
    date_dir.mkdir(parents=True, exist_ok=True)

    if _CURRENT_PATH is not None and _CURRENT_PATH.parent == date_dir and _CURRENT_PATH.exists():
        if _CURRENT_PATH.stat().st_size < _MAX_BYTES:
            return _CURRENT_PATH

    counter = 0
    while True:
        candidate = date_dir / f"events_{counter:02d}.jsonl"
        if not candidate.exists() or candidate.stat().st_size < _MAX_BYTES:
            _CURRENT_PATH = candidate
            return candidate
        counter += 1


def append_event(event: Dict[str, Any]) -> Path | None:
    """Append ``event`` to the active JSONL file and return the file path.

    Returns ``None`` while the log is not configured.
    """
    base = _LOG_DIR
    if base is None:
        return None

    payload = dict(event)
    payload.setdefault("ts", datetime.now(timezone.utc).isoformat(timespec="milliseconds"))

    line = json.dumps(payload, sort_keys=True, ensure_ascii=False)
    with _LOCK:
        path = _resolve_log_path(base)
        with path.open("a", encoding="utf-8") as handle:
            handle.write(line + "\n")
    return path


def current_log_path() -> Path | None:
    return _CURRENT_PATH


def record_generate(puzzle: Grid, level: Difficulty, seed: int) -> Path | None:
    """Log a freshly generated puzzle together with what reproduces it."""

    return append_event(
        {
            "event": "generate",
            "level": level.key,
            "seed": seed,
            "empty": count_empty(puzzle),
            "puzzle": to_string(puzzle),
        }
    )


def record_solve(grid: Grid, solved: bool, stats: SolveStats) -> Path | None:
    # grid is the board after the attempt; unchanged from input when unsolved
    return append_event(
        {
            "event": "solve",
            "solved": solved,
            "grid": to_string(grid),
            "stats": stats.to_dict(),
        }
    )
