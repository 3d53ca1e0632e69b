"""Hoof It: scoring and rating hiking trails on a topographic map."""

from __future__ import annotations

from collections.abc import Iterator

Grid = list[list[int]]

_STEPS = ((1, 0), (-1, 0), (0, 1), (0, -1))
_PEAK = 9


def _parse(text: str) -> Grid:
    grid: Grid = []
    for line in text.splitlines():
        row = []
        for ch in line:
            if not (ch.isascii() and ch.isdigit()):
                raise ValueError(f"Invalid height {ch!r}")
            row.append(int(ch))
        grid.append(row)
    return grid


def _uphill(grid: Grid, x: int, y: int, target: int) -> Iterator[tuple[int, int]]:
    for dx, dy in _STEPS:
        nx, ny = x + dx, y + dy
        if 0 <= ny < len(grid) and 0 <= nx < len(grid[ny]) and grid[ny][nx] == target:
            yield nx, ny


def _peaks(grid: Grid, x: int, y: int, height: int) -> set[tuple[int, int]]:
    if height == _PEAK:
        return {(x, y)}
    found: set[tuple[int, int]] = set()
    for nx, ny in _uphill(grid, x, y, height + 1):
        found |= _peaks(grid, nx, ny, height + 1)
    return found


def _rating(grid: Grid, x: int, y: int, height: int) -> int:
    if height == _PEAK:
        return 1
    return sum(
        _rating(grid, nx, ny, height + 1) for nx, ny in _uphill(grid, x, y, height + 1)
    )


def _trailheads(grid: Grid) -> Iterator[tuple[int, int]]:
    for y, row in enumerate(grid):
        for x, height in enumerate(row):
            if height == 0:
                yield x, y


def run_a(text: str) -> int:
    grid = _parse(text)
    return sum(len(_peaks(grid, x, y, 0)) for x, y in _trailheads(grid))


def run_b(text: str) -> int:
    grid = _parse(text)
    return sum(_rating(grid, x, y, 0) for x, y in _trailheads(grid))