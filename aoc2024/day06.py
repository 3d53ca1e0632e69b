"""Guard Gallivant: tracing a patrolling guard and trapping it in loops."""

from __future__ import annotations

from dataclasses import dataclass

from aoc2024.common import Direction

Layout = list[list[str]]


def _in_bounds(layout: Layout, x: int, y: int) -> bool:
    return y < len(layout) and x < len(layout[y])


@dataclass
class _Guard:
    x: int
    y: int
    facing: Direction = Direction.UP
    visit_count: int = 0

    def step(self, layout: Layout) -> bool:
        """Mark the current cell and move or turn; False once the guard leaves."""
        target = self.facing.offset(self.x, self.y)
        if target is None:
            raise IndexError("Tried to move off screen!")
        new_x, new_y = target
        if layout[self.y][self.x] != "X":
            layout[self.y][self.x] = "X"
            self.visit_count += 1
        if not _in_bounds(layout, new_x, new_y):
            return False
        if layout[new_y][new_x] == "#":
            self.facing = self.facing.right_from()
        else:
            self.x, self.y = new_x, new_y
        return True

    def step_check_loop(self, layout: Layout) -> bool:
        """Advance while recording hit obstacles; False when the walk ends.

        A detected loop increments ``visit_count``.
        """
        target = self.facing.offset(self.x, self.y)
        if target is None:
            return False
        new_x, new_y = target
        if layout[self.y][self.x] == ".":
            layout[self.y][self.x] = "o"
        if not _in_bounds(layout, new_x, new_y):
            return False
        ahead = layout[new_y][new_x]
        own = self.facing.to_char()
        if ahead == "#" or self.facing.is_dir_char_other_than_own(ahead):
            if ahead == "#":
                layout[new_y][new_x] = own
            self.facing = self.facing.right_from()
        elif ahead == own:
            self.visit_count += 1
            return False
        else:
            self.x, self.y = new_x, new_y
        return True


def _parse_layout(text: str) -> tuple[Layout, _Guard]:
    layout = [list(line) for line in text.splitlines()]
    for y, row in enumerate(layout):
        if "^" in row:
            return layout, _Guard(row.index("^"), y)
    raise ValueError("No guard in layout")


def _traps_guard(layout: Layout, x: int, y: int) -> bool:
    guard = _Guard(x, y)
    while guard.step_check_loop(layout):
        pass
    return guard.visit_count > 0


def run_a(text: str) -> int:
    layout, guard = _parse_layout(text)
    while guard.step(layout):
        pass
    return guard.visit_count


def run_b(text: str) -> int:
    layout, guard = _parse_layout(text)
    start_x, start_y = guard.x, guard.y
    while guard.step(layout):
        pass
    loops = 0
    for y, row in enumerate(layout):
        for x, cell in enumerate(row):
            if cell != "X":
                continue
            mutated = [line[:] for line in layout]
            mutated[y][x] = "#"
            if _traps_guard(mutated, start_x, start_y):
                loops += 1
    return loops