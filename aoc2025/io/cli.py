"""Command-line interface."""

from __future__ import annotations

import argparse
import logging
import re
import sys
import time
from typing import Callable, Tuple

import yaml

from . import parser
from ..locations import Location, calendar

log = logging.getLogger(__name__)


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str):
        self.print_usage(sys.stderr)
        self.exit(1, f"error: {message}\n")


def _day(value: str) -> int:
    if not re.fullmatch(r"\+?[0-9]+", value):
        raise argparse.ArgumentTypeError(f"invalid day: {value!r}")
    return int(value)


def configure_logging(level: int = logging.WARNING) -> None:
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def measure(solve: Callable[[str], int], document: str) -> Tuple[int, int]:
    """Run ``solve`` and return its answer with elapsed microseconds."""
    start = time.perf_counter_ns()
    result = solve(document)
    elapsed = time.perf_counter_ns() - start
    return result, elapsed // 1000


def run(location: Location, day: int, document: str) -> None:
    print(f"# Day {day}\n")

    result, elapsed = measure(location.solve_easy, document)
    print(f"**Easy**\n  {result}\n  {elapsed} μs\n")

    result, elapsed = measure(location.solve_hard, document)
    print(f"**Hard**\n  {result}\n  {elapsed} μs\n")


def main(argv: list[str] | None = None) -> int:
    ap = _ArgumentParser(prog="aoc2025", description="Secret Entrance and Gift Shop solvers")
    ap.add_argument("day", type=_day, help="1-based day number (clamped to the calendar)")
    ap.add_argument("document", help="Path to the puzzle input")
    ap.add_argument("--config", help="Path to a YAML run configuration")
    ap.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    args = ap.parse_args(argv)
    configure_logging(getattr(logging, args.log_level))

    try:
        config = parser.load_config(args.config) if args.config else parser.Config()
        locations = calendar(config.calendar)
        document = parser.read_document(args.document)
    except (OSError, UnicodeDecodeError, ValueError, KeyError, yaml.YAMLError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    day = max(1, min(args.day, len(locations)))
    location = locations[day - 1]()
    log.info("day %d: %s (%d bytes)", day, location.name, len(document))

    run(location, day, document)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
