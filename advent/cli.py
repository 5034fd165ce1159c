"""
Command-line runner for the puzzle solvers.

    advent 2023 5 input.txt --part 2 --range-strategy vectorized
"""

import argparse
import inspect
import logging
import sys
from types import ModuleType

from . import aoc2015, aoc2023
from .config import RANGE_STRATEGIES, SolverConfig
from .errors import PuzzleError, UnknownPuzzle

log = logging.getLogger(__name__)

YEARS = {
    2015: aoc2015.DAYS,
    2023: aoc2023.DAYS,
}

PARTS = {1: "part_one", 2: "part_two"}


def get_solver(year: int, day: int) -> ModuleType:
    """
    Look up the module solving a puzzle.

    Raises:
        UnknownPuzzle: If no module is registered for year and day
    """
    try:
        return YEARS[year][day]
    except KeyError:
        raise UnknownPuzzle(year, day) from None


def solve(year: int, day: int, part: int, text: str, config: SolverConfig = None) -> int:
    """Run one part of one puzzle on input text."""
    function = getattr(get_solver(year, day), PARTS[part])
    if "config" in inspect.signature(function).parameters:
        return function(text, config=config or SolverConfig())
    return function(text)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Solve a daily puzzle from its input file")
    parser.add_argument("year", type=int, help="Puzzle year")
    parser.add_argument("day", type=int, help="Puzzle day")
    parser.add_argument("input", help="Path to the puzzle input, or '-' for stdin")
    parser.add_argument("--part", type=int, choices=sorted(PARTS), help="Run only this part")
    parser.add_argument(
        "--range-strategy", choices=RANGE_STRATEGIES, default=None, help="Range-mode evaluation for 2023 day 5"
    )
    parser.add_argument("--chunk-size", type=int, default=None, help="Seeds per vectorised batch")
    parser.add_argument("--log-level", default=None, help="Logging level, e.g. DEBUG")
    return parser.parse_args(argv)


def read_input(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, encoding="utf-8") as f:
        return f.read()


def main(argv=None) -> int:
    args = parse_args(argv)
    config = SolverConfig.from_env(
        range_strategy=args.range_strategy,
        chunk_size=args.chunk_size,
        log_level=args.log_level,
    )
    logging.basicConfig(level=config.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")
    log.debug("Config: %s", config)

    parts = [args.part] if args.part else sorted(PARTS)
    try:
        text = read_input(args.input)
        for part in parts:
            print(f"Part {part}: {solve(args.year, args.day, part, text, config)}")
    except (PuzzleError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
