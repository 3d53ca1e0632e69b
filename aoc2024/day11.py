"""Plutonian Pebbles: counting stones that split as you blink."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable


def _parse(text: str) -> list[int]:
    stones = []
    for word in text.split():
        if not (word.isascii() and word.isdigit()):
            raise ValueError(f"Invalid stone {word!r}")
        stones.append(int(word))
    return stones


def _blink(stone: int) -> tuple[int, ...]:
    if stone == 0:
        return (1,)
    digits = str(stone)
    if len(digits) % 2 == 0:
        half = len(digits) // 2
        return int(digits[:half]), int(digits[half:])
    return (stone * 2024,)


def count_stones(stones: Iterable[int], blinks: int) -> int:
    """Return how many stones there are after blinking ``blinks`` times."""
    counts = Counter(stones)
    for _ in range(blinks):
        following: Counter[int] = Counter()
        for stone, amount in counts.items():
            for result in _blink(stone):
                following[result] += amount
        counts = following
    return sum(counts.values())


def run_a(text: str) -> int:
    return count_stones(_parse(text), 25)


def run_b(text: str) -> int:
    return count_stones(_parse(text), 75)