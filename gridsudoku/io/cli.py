"""Command-line interface."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from ..core.errors import ParseError
from ..solvers import SOLVER_REGISTRY, get_solver
from . import config, parser

log = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Solve sudoku-like puzzles with rectangular subgrids")
    ap.add_argument("puzzle", type=Path, help="Path to puzzle (text format, or YAML by extension)")
    ap.add_argument("--config", type=Path, default=None, help="YAML file with solver options")
    ap.add_argument("--strategy", choices=sorted(SOLVER_REGISTRY), default=None, help="Search strategy")
    limit = ap.add_mutually_exclusive_group()
    limit.add_argument("--max-solutions", type=int, default=None, help="Stop after N solutions (0 = all)")
    limit.add_argument("--all", action="store_true", help="Enumerate every solution")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = ap.parse_args(argv)

    try:
        cfg = config.load_config(args.config).override(
            strategy=args.strategy,
            max_solutions=0 if args.all else args.max_solutions,
            log_level="DEBUG" if args.verbose else None,
        )
        solver = get_solver(cfg.strategy)
        puzzle = parser.load_grid(args.puzzle)
    except (OSError, ParseError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except KeyError as exc:
        print(f"error: {exc.args[0]}", file=sys.stderr)
        return 2

    logging.basicConfig(level=cfg.logging_level, format="%(levelname)s %(name)s: %(message)s")
    log.info("solving %s with %s strategy", args.puzzle, cfg.strategy)

    print(puzzle.serialize())
    solver.reset(puzzle)
    count = 0
    for solution in solver.solutions(cfg.max_solutions):
        count += 1
        print(solution)
    print(f"{count} solution(s) found")
    return 0 if count else 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
