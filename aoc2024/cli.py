"""Command line entry point that runs the puzzle for one day or all of them."""

from __future__ import annotations

import argparse
from pathlib import Path
from types import ModuleType

from aoc2024 import (
    day01,
    day02,
    day03,
    day04,
    day05,
    day06,
    day07,
    day08,
    day09,
    day10,
    day11,
    day12,
    day13,
    day14,
    day15,
    day16,
    day17,
    day18,
    day19,
    day20,
)

_DAYS: dict[int, ModuleType] = {
    1: day01,
    2: day02,
    3: day03,
    4: day04,
    5: day05,
    6: day06,
    7: day07,
    8: day08,
    9: day09,
    10: day10,
    11: day11,
    12: day12,
    13: day13,
    14: day14,
    15: day15,
    16: day16,
    17: day17,
    18: day18,
    19: day19,
    20: day20,
}
MAX_DAY = max(_DAYS)


def run_day(day: int | None, input_dir: str | Path = "input") -> None:
    """Print both answers for ``day``, or for every day when ``day`` is None."""
    if day is None:
        for number in range(1, MAX_DAY + 1):
            run_day(number, input_dir)
        return
    module = _DAYS.get(day)
    if module is None:
        print(f"Can't run day number {day}")
        return
    text = (Path(input_dir) / f"day{day:02d}.txt").read_text()
    print(f"Day {day}a: {module.run_a(text)}")
    print(f"Day {day}b: {module.run_b(text)}")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run the daily puzzle solutions.")
    parser.add_argument("day", nargs="?", help="day number; all days when omitted")
    parser.add_argument(
        "--input-dir", default="input", help="directory holding dayNN.txt files"
    )
    args = parser.parse_args(argv)
    day: int | None = None
    if args.day is not None:
        try:
            day = int(args.day)
        except ValueError:
            print(f"Invalid day number {args.day}")
            return 0
    run_day(day, args.input_dir)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())