"""Race Condition: counting shortcuts through the walls of a racetrack."""

from __future__ import annotations

from collections.abc import Iterator

from aoc2024.common import Direction, Grid, Point


def _next_open(grid: Grid[str], pos: Point) -> Point:
    direction = Direction.UP
    for _ in range(4):
        step = direction.offset_point(pos)
        if (
            step is not None
            and step.in_bounds(grid.width(), grid.height())
            and grid[step] != "#"
        ):
            return step
        direction = direction.left_from()
    raise ValueError(f"No opening from {pos}")


def _distance_markers(track: Grid[str]) -> dict[Point, int]:
    """Map each track cell to its distance from the start along the track."""
    grid = Grid([row[:] for row in track.rows()])
    cursor = grid.find("S")
    if cursor is None:
        raise ValueError("No starting position!")
    markers: dict[Point, int] = {}
    distance = 0
    while grid[cursor] != "E":
        grid[cursor] = "#"
        markers[cursor] = distance
        distance += 1
        cursor = _next_open(grid, cursor)
    markers[cursor] = distance
    return markers


def _surrounding_points(point: Point, radius: int) -> Iterator[Point]:
    """Points within Manhattan distance ``radius``, excluding the point itself."""
    for dy in range(-radius, radius + 1):
        span = radius - abs(dy)
        for dx in range(-span, span + 1):
            if dx == 0 and dy == 0:
                continue
            shifted = point.offset_by(dx, dy)
            if shifted is not None:
                yield shifted


def count_cheats(text: str, threshold: int, radius: int) -> int:
    """Count cheats of at most ``radius`` steps saving at least ``threshold``."""
    grid = Grid.parse(text)
    markers = _distance_markers(grid)
    count = 0
    for marker, current in markers.items():
        for point in _surrounding_points(marker, radius):
            if not point.in_bounds(grid.width(), grid.height()):
                continue
            target = markers.get(point)
            if target is None or target <= current:
                continue
            manhattan = abs(marker.x - point.x) + abs(marker.y - point.y)
            if target - current - manhattan >= threshold:
                count += 1
    return count


def run_a(text: str) -> int:
    return count_cheats(text, 100, 2)


def run_b(text: str) -> int:
    return count_cheats(text, 100, 20)