"""Resonant Collinearity: counting antinodes of same-frequency antennas."""

from __future__ import annotations

from collections import defaultdict
from itertools import combinations

Position = tuple[int, int]


def _parse(text: str) -> tuple[dict[str, list[Position]], int, int]:
    """Return antenna positions by frequency, the map width and its height.

    The width is taken from the last line of the map.
    """
    positions: defaultdict[str, list[Position]] = defaultdict(list)
    lines = text.splitlines()
    width = 0
    for y, line in enumerate(lines):
        width = len(line)
        for x, ch in enumerate(line):
            if ch != ".":
                positions[ch].append((x, y))
    return dict(positions), width, len(lines)


def run_a(text: str) -> int:
    antennas, width, height = _parse(text)
    antinodes: set[Position] = set()
    for group in antennas.values():
        for (x0, y0), (x1, y1) in combinations(group, 2):
            dx, dy = x1 - x0, y1 - y0
            ax, ay = x0 - dx, y0 - dy
            bx, by = x1 + dx, y1 + dy
            if ax >= 0 and ay >= 0 and ax < width and ax < height:
                antinodes.add((ax, ay))
            if bx >= 0 and by >= 0 and bx < width and by < height:
                antinodes.add((bx, by))
    return len(antinodes)


def _walk(x: int, y: int, dx: int, dy: int, width: int, height: int):
    """Yield positions from ``(x, y)`` in steps of ``(dx, dy)`` while on the map."""
    while 0 <= x < width and 0 <= y < height:
        yield x, y
        x += dx
        y += dy


def run_b(text: str) -> int:
    antennas, width, height = _parse(text)
    antinodes: set[Position] = set()
    for group in antennas.values():
        for (x0, y0), (x1, y1) in combinations(group, 2):
            dx, dy = x1 - x0, y1 - y0
            antinodes.update(_walk(x0, y0, -dx, -dy, width, height))
            antinodes.update(_walk(x1, y1, dx, dy, width, height))
    return len(antinodes)