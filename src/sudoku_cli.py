"""Command line front-end: interactive play, batch generation and solving."""

from __future__ import annotations

import argparse
import json
import logging
import random
from pathlib import Path
from typing import Dict, List, Optional

import project_config
import sudoku_events
from sudoku_generator import Difficulty, create_random_sudoku, default_level
from sudoku_grid import Grid, count_empty, from_rows, from_string, grid_copy, to_string
from sudoku_printer import export_pdf, render
from sudoku_solver import SolveStats, solve_sudoku

_LOGGER = logging.getLogger(__name__)

MENU = "1 - easy\n2 - medium\n3 - hard"


def _show(title: str, grid: Grid) -> None:
    print(title)
    print(render(grid))
    print()


def _solve_and_report(grid: Grid) -> bool:
    stats = SolveStats()
    solved = solve_sudoku(grid, stats)
    if solved:
        _show("Solution:", grid)
    else:
        print("No solution!")
    sudoku_events.record_solve(grid, solved, stats)
    return solved


def _new_seed() -> int:
    return random.randrange(1 << 30)


def cmd_play(args: argparse.Namespace) -> int:
    print(MENU)
    try:
        answer = input("Select level: ")
    except EOFError:
        answer = ""
    level = Difficulty.from_level(answer)
    seed = args.seed if args.seed is not None else _new_seed()
    puzzle = create_random_sudoku(level, seed=seed)
    sudoku_events.record_generate(puzzle, level, seed)
    _show("Original board:", puzzle)

    try:
        input("Type anything and enter to get the solution: ")
    except EOFError:
        return 0
    _solve_and_report(puzzle)
    return 0


def _bundle(puzzle: Grid, level: Difficulty, seed: int, solution: Optional[Grid]) -> Dict[str, object]:
    entry: Dict[str, object] = {
        "puzzle": to_string(puzzle),
        "level": level.key,
        "empty": count_empty(puzzle),
        "seed": seed,
    }
    if solution is not None:
        entry["solution"] = to_string(solution)
    return entry


def cmd_generate(args: argparse.Namespace) -> int:
    level = Difficulty.from_level(args.level) if args.level is not None else default_level()
    base_seed = args.seed if args.seed is not None else _new_seed()

    bundles: List[Dict[str, object]] = []
    grids: List[Grid] = []
    titles: List[str] = []
    for i in range(args.count):
        seed = base_seed + i
        puzzle = create_random_sudoku(level, seed=seed)
        solution = None
        if args.with_solution:
            solution = grid_copy(puzzle)
            if not solve_sudoku(solution):
                raise RuntimeError(f"generated puzzle for seed {seed} has no solution")
        sudoku_events.record_generate(puzzle, level, seed)
        bundles.append(_bundle(puzzle, level, seed, solution))
        grids.append(puzzle)
        titles.append(f"#{i + 1} {level.key} (seed {seed})")
        if solution is not None:
            grids.append(solution)
            titles.append(f"#{i + 1} solution")

        if not args.json:
            _show(f"Puzzle {i + 1} ({level.key}, seed {seed}):", puzzle)
            if solution is not None:
                _show("Solution:", solution)

    if args.json:
        print(json.dumps(bundles, indent=2, sort_keys=True))
    if args.pdf:
        out = export_pdf(grids, args.pdf, titles=titles)
        _LOGGER.info("wrote %d boards to %s", len(grids), out)
    return 0


def _read_board_file(path: Path) -> Grid:
    lines = []
    for line in path.read_text(encoding="utf-8").splitlines():
        value = line.strip()
        if not value or value.startswith("#"):
            continue
        lines.append(value)
    if len(lines) == 1:
        return from_string(lines[0])
    return from_rows(lines)


def cmd_solve(args: argparse.Namespace) -> int:
    if args.board:
        grid = from_rows(args.board)
    elif args.string:
        grid = from_string(args.string)
    else:
        grid = _read_board_file(Path(args.file))
    _show("Original board:", grid)
    return 0 if _solve_and_report(grid) else 1


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate and solve 9x9 Sudoku puzzles")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=project_config.LOG_LEVELS,
        default=None,
        help="Logging level (default from config)",
    )
    parser.add_argument("--events-dir", default=None, help="Directory for JSONL event logs")
    parser.add_argument("--config", default=None, help="Path to an alternative config.toml")
    sub = parser.add_subparsers(dest="command", required=True)

    play = sub.add_parser("play", help="Pick a level, show a puzzle, then its solution")
    play.add_argument("--seed", type=int, default=None)
    play.set_defaults(func=cmd_play)

    gen = sub.add_parser("generate", help="Generate one or more puzzles")
    gen.add_argument("--level", type=int, choices=[1, 2, 3], default=None)
    gen.add_argument("--seed", type=int, default=None, help="Base seed; puzzle i uses seed + i")
    gen.add_argument("--count", type=int, default=1)
    gen.add_argument("--json", action="store_true", help="Print a JSON bundle instead of boards")
    gen.add_argument("--pdf", default=None, help="Also write the boards to this PDF file")
    gen.add_argument(
        "--with-solution",
        action="store_true",
        help="Solve each puzzle and include the solution",
    )
    gen.set_defaults(func=cmd_generate)

    solve = sub.add_parser("solve", help="Solve a supplied board")
    source = solve.add_mutually_exclusive_group(required=True)
    source.add_argument("--board", nargs=9, metavar="ROW", help="Nine comma-separated rows, 0 = empty")
    source.add_argument("--string", help="81 characters in row-major order, 0 or . = empty")
    source.add_argument("--file", help="File with nine comma-separated rows or one 81-char line")
    solve.set_defaults(func=cmd_solve)

    return parser


def _configure_logging(args: argparse.Namespace) -> None:
    log_cfg = project_config.get_config().get("logging", {})
    level = (args.log_level or log_cfg.get("level", "WARNING")).upper()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    events_dir = args.events_dir or log_cfg.get("events_dir")
    if events_dir:
        sudoku_events.configure(events_dir, max_bytes=log_cfg.get("max_bytes"))


def main(argv: List[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.config:
        project_config.use_config(args.config)
    _configure_logging(args)
    if args.command == "generate" and args.count < 1:
        parser.error("--count must be at least 1")
    return args.func(args)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
