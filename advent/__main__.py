"""
Command line entry point: ``python -m advent DAY [DAY ...]``.
"""

import argparse
import logging
import sys

from advent.logging_config import setup_logging
from advent.solver_runner import AVAILABLE_DAYS, print_result, solve_day


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="advent", description="Solve Advent of Code 2022 puzzles")
    parser.add_argument("days", type=int, nargs="*", help="Days to solve")
    parser.add_argument("--all", action="store_true", help="Solve every available day")
    parser.add_argument("--input-dir", type=str, default=None,
                        help="Directory holding dayN.txt (default: $ADVENT_INPUT_DIR or inputs/)")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--log-file", type=str, default=None, help="Also write logs to this file")
    parser.add_argument("--timings", action="store_true", help="Print the time taken by each part")
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    days = list(AVAILABLE_DAYS) if args.all else args.days
    if not days:
        parser.error("give at least one day, or --all")

    logger = setup_logging(logging.DEBUG if args.verbose else logging.WARNING, args.log_file)

    for day in days:
        try:
            result = solve_day(day, input_dir=args.input_dir)
        except (OSError, RuntimeError, ValueError) as e:
            logger.debug("Day %d failed", day, exc_info=True)
            print(repr(e), file=sys.stderr)
            return 1

        if len(days) > 1:
            print(f"Day {day}")
        print_result(result, timings=args.timings)
    return 0


if __name__ == "__main__":
    sys.exit(main())
