"""Linen Layout: building towel patterns from available stripes."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from functools import lru_cache


def _parse_towels(line: str) -> list[str]:
    return sorted(line.replace(",", "").split())


def _read(text: str) -> tuple[list[str], Iterator[str]]:
    lines = iter(text.splitlines())
    first = next(lines, None)
    if first is None:
        raise ValueError("Empty input file!")
    towels = _parse_towels(first)
    next(lines, None)
    return towels, lines


def _possibility_checker(towels: list[str]) -> Callable[[str], bool]:
    @lru_cache(maxsize=None)
    def possible(sequence: str) -> bool:
        return any(
            sequence == towel
            or (sequence.startswith(towel) and possible(sequence[len(towel):]))
            for towel in towels
        )

    return possible


def _arrangement_counter(towels: list[str]) -> Callable[[str], int]:
    @lru_cache(maxsize=None)
    def count(sequence: str) -> int:
        total = 0
        for towel in towels:
            if sequence == towel:
                total += 1
            elif sequence.startswith(towel):
                total += count(sequence[len(towel):])
        return total

    return count


def run_a(text: str) -> int:
    towels, patterns = _read(text)
    possible = _possibility_checker(towels)
    return sum(1 for pattern in patterns if possible(pattern))


def run_b(text: str) -> int:
    towels, patterns = _read(text)
    count = _arrangement_counter(towels)
    return sum(count(pattern) for pattern in patterns)