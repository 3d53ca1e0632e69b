"""Reindeer Maze: the lowest score for walking and turning through a maze."""

from __future__ import annotations

from collections.abc import Generator

from aoc2024.common import Direction, Grid, Point

_STEP_COST = 1
_TURN_COST = 1001

_Search = Generator[tuple[Point, Direction, int], "int | None", "int | None"]


def _search(
    maze: Grid[str],
    pos: Point,
    facing: Direction,
    steps: int,
    minima: dict[Point, int],
) -> _Search:
    """Depth-first search; yields child states and receives their results."""
    if maze[pos] == "E":
        return steps
    known = minima.get(pos)
    if known is not None and known <= steps:
        return None
    minima[pos] = steps
    best: int | None = None
    moves = (
        (facing, _STEP_COST),
        (facing.left_from(), _TURN_COST),
        (facing.right_from(), _TURN_COST),
    )
    for direction, cost in moves:
        nxt = direction.offset_point(pos)
        if nxt is None:
            raise IndexError("Out of bounds!")
        if nxt.in_bounds(maze.width(), maze.height()) and maze[nxt] != "#":
            found = yield (nxt, direction, steps + cost)
            if found is not None and (best is None or found < best):
                best = found
    return best


def _lowest_score(maze: Grid[str], start: Point) -> int | None:
    minima: dict[Point, int] = {}
    stack = [_search(maze, start, Direction.RIGHT, 0, minima)]
    value: int | None = None
    while stack:
        try:
            request = stack[-1].send(value)
        except StopIteration as stop:
            stack.pop()
            value = stop.value
            continue
        pos, facing, steps = request
        stack.append(_search(maze, pos, facing, steps, minima))
        value = None
    return value


def run_a(text: str) -> int:
    maze = Grid.parse(text)
    start = maze.find("S")
    if start is None:
        raise ValueError("No start tile!")
    score = _lowest_score(maze, start)
    if score is None:
        raise ValueError("No valid path through maze!")
    return score


def run_b(text: str) -> str:
    """The second part has no answer yet and reports an empty string."""
    return ""