"""Print Queue: ordering page updates by pairwise rules."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterator
from functools import cmp_to_key

Ruleset = dict[int, set[int]]


def _parse_rules(text: str) -> tuple[Ruleset, Ruleset, Iterator[str]]:
    """Return the after-rules, the before-rules and the remaining update lines."""
    after: defaultdict[int, set[int]] = defaultdict(set)
    before: defaultdict[int, set[int]] = defaultdict(set)
    lines = iter(text.splitlines())
    for line in lines:
        if not line:
            return dict(after), dict(before), lines
        left, right = line.split("|")[:2]
        first, second = int(left), int(right)
        after[first].add(second)
        before[second].add(first)
    raise ValueError("Rule section is not followed by a blank line")


def _parse_pages(line: str) -> list[int]:
    pages = []
    for symbol in line.split(","):
        try:
            pages.append(int(symbol))
        except ValueError:
            raise ValueError(f"Could not parse page {symbol}") from None
    return pages


def _sorted_pages(pages: list[int], after: Ruleset, before: Ruleset) -> list[int]:
    def compare(a: int, b: int) -> int:
        if b in after.get(a, ()):
            return -1
        if b in before.get(a, ()):
            return 1
        return 0

    return sorted(pages, key=cmp_to_key(compare))


def run_a(text: str) -> int:
    after, before, updates = _parse_rules(text)
    total = 0
    for line in updates:
        pages = _parse_pages(line)
        if _sorted_pages(pages, after, before) == pages:
            total += pages[len(pages) // 2]
    return total


def run_b(text: str) -> int:
    after, before, updates = _parse_rules(text)
    total = 0
    for line in updates:
        pages = _parse_pages(line)
        ordered = _sorted_pages(pages, after, before)
        if ordered != pages:
            total += ordered[len(ordered) // 2]
    return total