"""Historian Hysteria: comparing two lists of location IDs."""

from collections import Counter


def _parse(text: str) -> tuple[list[int], list[int]]:
    left, right = [], []
    for line in text.splitlines():
        first, second = line.split()[:2]
        left.append(int(first))
        right.append(int(second))
    return left, right


def run_a(text: str) -> int:
    left, right = _parse(text)
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))


def run_b(text: str) -> int:
    left, right = _parse(text)
    counts = Counter(right)
    return sum(value * counts[value] for value in left)