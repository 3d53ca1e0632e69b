"""RAM Run: escaping a memory grid as bytes fall into it."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator

from aoc2024.common import Direction, Grid, Point, extract_numbers

_SIZE = 71
_FALLEN = 1024


def _coordinates(line: str) -> Point:
    numbers = extract_numbers(line)
    if len(numbers) < 2:
        raise ValueError(f"Invalid coordinate line {line!r}")
    x, y = numbers[0], numbers[1]
    if x < 0 or y < 0:
        raise ValueError(f"Negative coordinate in {line!r}")
    return Point(x, y)


def _open_neighbours(maze: Grid[str], cursor: Point) -> Iterator[Point]:
    for direction in (Direction.LEFT, Direction.RIGHT, Direction.UP, Direction.DOWN):
        step = direction.offset_point(cursor)
        if (
            step is not None
            and step.in_bounds(maze.width(), maze.height())
            and maze[step] != "#"
        ):
            yield step


def _explore(maze: Grid[str]) -> Iterator[tuple[Point, int]]:
    """Breadth-first walk from the top-left corner, yielding cells with their distance."""
    start = Point(0, 0)
    if not start.in_bounds(maze.width(), maze.height()) or maze[start] == "#":
        return
    seen = {start}
    queue = deque([(start, 0)])
    while queue:
        cursor, steps = queue.popleft()
        yield cursor, steps
        for step in _open_neighbours(maze, cursor):
            if step not in seen:
                seen.add(step)
                queue.append((step, steps + 1))


def _distance_to_exit(maze: Grid[str]) -> int | None:
    return next((steps for cell, steps in _explore(maze) if maze[cell] == "E"), None)


def _drop(grid: Grid[str], lines: Iterable[str], count: int) -> None:
    for point in (_coordinates(line) for line in lines):
        grid[point] = "#"
        count -= 1
        if count <= 0:
            break


def shortest_path(text: str, width: int, height: int, iters: int) -> int:
    """Steps from the top-left to the bottom-right corner after ``iters`` bytes fall."""
    grid = Grid.of_size(width, height, ".")
    _drop(grid, text.splitlines(), iters)
    grid[(width - 1, height - 1)] = "E"
    steps = _distance_to_exit(grid)
    if steps is None:
        raise ValueError("No result!")
    return steps


def first_blocking_byte(text: str, width: int, height: int, iters: int) -> Point:
    """The first byte after the first ``iters`` that cuts the exit off."""
    grid = Grid.of_size(width, height, ".")
    lines = iter(text.splitlines())
    for _ in range(iters):
        line = next(lines, None)
        if line is None:
            raise ValueError("Ran out of coordinates!")
        grid[_coordinates(line)] = "#"
    grid[(width - 1, height - 1)] = "E"
    for line in lines:
        point = _coordinates(line)
        grid[point] = "#"
        if _distance_to_exit(grid) is None:
            return point
    raise ValueError("No solution!")


def run_a(text: str) -> int:
    return shortest_path(text, _SIZE, _SIZE, _FALLEN)


def run_b(text: str) -> str:
    point = first_blocking_byte(text, _SIZE, _SIZE, _FALLEN)
    return f"{point.x},{point.y}"