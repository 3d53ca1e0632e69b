"""Garden Groups: pricing fences around regions of garden plots."""

from __future__ import annotations

from collections import defaultdict
from enum import IntEnum

Cell = tuple[int, int]

_NEIGHBOURS = ((1, 0), (0, 1), (-1, 0), (0, -1))


def _load(text: str) -> list[list[str]]:
    return [list(line) for line in text.splitlines()]


def _flood(grid: list[list[str]], x: int, y: int) -> list[Cell]:
    """Return every cell connected to ``(x, y)`` through the same letter."""
    letter = grid[y][x]
    seen = {(x, y)}
    stack = [(x, y)]
    cells = []
    while stack:
        cx, cy = stack.pop()
        cells.append((cx, cy))
        for dx, dy in _NEIGHBOURS:
            nx, ny = cx + dx, cy + dy
            if (
                0 <= ny < len(grid)
                and 0 <= nx < len(grid[ny])
                and grid[ny][nx] == letter
                and (nx, ny) not in seen
            ):
                seen.add((nx, ny))
                stack.append((nx, ny))
    return cells


def _perimeter(grid: list[list[str]], cells: list[Cell]) -> int:
    letter = grid[cells[0][1]][cells[0][0]]
    fences = 0
    for x, y in cells:
        for dx, dy in _NEIGHBOURS:
            nx, ny = x + dx, y + dy
            if not (0 <= ny < len(grid) and 0 <= nx < len(grid[ny])):
                fences += 1
            elif grid[ny][nx] != letter:
                fences += 1
    return fences


def run_a(text: str) -> int:
    grid = _load(text)
    visited: set[Cell] = set()
    total = 0
    for y, row in enumerate(grid):
        for x in range(len(row)):
            if (x, y) in visited:
                continue
            cells = _flood(grid, x, y)
            visited.update(cells)
            total += len(cells) * _perimeter(grid, cells)
    return total


class _Edge(IntEnum):
    """One side of a grid cell; walking along it goes clockwise round the cell."""

    TOP = 0
    RIGHT = 1
    BOTTOM = 2
    LEFT = 3

    def clockwise(self) -> _Edge:
        return _Edge((self + 1) % 4)

    def counter_clockwise(self) -> _Edge:
        return _Edge((self - 1) % 4)

    def adjacent_cell(self, x: int, y: int, max_x: int, max_y: int) -> Cell | None:
        """The cell on the other side of this edge, if it is on the grid."""
        if self is _Edge.TOP:
            return None if y == 0 else (x, y - 1)
        if self is _Edge.RIGHT:
            return None if x + 1 >= max_x else (x + 1, y)
        if self is _Edge.BOTTOM:
            return None if y + 1 >= max_y else (x, y + 1)
        return None if x == 0 else (x - 1, y)

    def next_along(self, x: int, y: int, max_x: int, max_y: int) -> Cell | None:
        """The next cell in the direction this edge runs, if it is on the grid."""
        if self is _Edge.TOP:
            return None if x + 1 >= max_x else (x + 1, y)
        if self is _Edge.RIGHT:
            return None if y + 1 >= max_y else (x, y + 1)
        if self is _Edge.BOTTOM:
            return None if x == 0 else (x - 1, y)
        return None if y == 0 else (x, y - 1)


def _scan_fence(
    region_grid: list[list[int]],
    region_id: int,
    start_x: int,
    start_y: int,
    visited_top_of: set[Cell],
) -> int:
    """Walk one closed fence starting on the top edge of a cell; count its sides."""
    max_y = len(region_grid)
    max_x = len(region_grid[0])

    def inside(cell: Cell | None) -> bool:
        return cell is not None and region_grid[cell[1]][cell[0]] == region_id

    edge = _Edge.TOP
    x, y = start_x, start_y
    sides = 0
    while True:
        next_cell = edge.next_along(x, y, max_x, max_y)
        adjacent = edge.adjacent_cell(x, y, max_x, max_y)
        front = (
            edge.next_along(adjacent[0], adjacent[1], max_x, max_y)
            if adjacent is not None
            else None
        )
        if edge is _Edge.TOP:
            visited_top_of.add((x, y))

        if inside(next_cell):
            if inside(front):
                # The fence runs into a wall: turn counter-clockwise.
                x, y = front
                edge = edge.counter_clockwise()
                sides += 1
            else:
                x, y = next_cell
        else:
            # The fence turns the corner of the current cell.
            edge = edge.clockwise()
            sides += 1
        if x == start_x and y == start_y and edge is _Edge.TOP:
            return sides


def run_b(text: str) -> int:
    grid = _load(text)
    region_grid = [[0] * len(row) for row in grid]
    areas: dict[int, int] = {}
    next_id = 1
    for y, row in enumerate(grid):
        for x in range(len(row)):
            if region_grid[y][x] != 0:
                continue
            cells = _flood(grid, x, y)
            for cx, cy in cells:
                region_grid[cy][cx] = next_id
            areas[next_id] = len(cells)
            next_id += 1

    counted: defaultdict[int, set[Cell]] = defaultdict(set)
    side_counts: dict[int, int] = {}
    for y, row in enumerate(region_grid):
        for x, region_id in enumerate(row):
            seen_tops = counted[region_id]
            if (x, y) in seen_tops:
                continue
            if y > 0 and region_grid[y - 1][x] == region_id:
                continue
            sides = _scan_fence(region_grid, region_id, x, y, seen_tops)
            side_counts[region_id] = side_counts.get(region_id, 0) + sides

    return sum(area * side_counts[region_id] for region_id, area in areas.items())