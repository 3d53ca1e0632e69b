"""Restroom Redoubt: robots wandering on a wrapping grid."""

from __future__ import annotations

from dataclasses import dataclass

from aoc2024.common import extract_numbers


@dataclass
class _Robot:
    x: int
    y: int
    vx: int
    vy: int

    @classmethod
    def from_line(cls, line: str) -> _Robot:
        numbers = extract_numbers(line)
        if len(numbers) < 4:
            raise ValueError(f"Invalid robot line {line!r}")
        return cls(*numbers[:4])

    def travel(self, seconds: int, width: int, height: int) -> None:
        self.x = (self.x + self.vx * seconds) % width
        self.y = (self.y + self.vy * seconds) % height


def _parse(text: str) -> tuple[list[_Robot], int, int]:
    lines = text.splitlines()
    if not lines:
        raise ValueError("Empty file!")
    size = [int(word) for word in lines[0].split()]
    if len(size) < 2:
        raise ValueError("First line must give the width and height")
    width, height = size[0], size[1]
    return [_Robot.from_line(line) for line in lines[1:]], width, height


def _tally(robots: list[_Robot], width: int, height: int) -> tuple[int, int, int, int]:
    """Count robots per quadrant; robots on the middle lines are not counted."""
    left_max_x = width // 2 - 1
    upper_max_y = height // 2 - 1
    right_min_x = left_max_x + 2
    lower_min_y = upper_max_y + 2
    ul = ur = ll = lr = 0
    for robot in robots:
        if robot.x <= left_max_x and robot.y <= upper_max_y:
            ul += 1
        elif robot.x >= right_min_x and robot.y <= upper_max_y:
            ur += 1
        elif robot.x <= left_max_x and robot.y >= lower_min_y:
            ll += 1
        elif robot.x >= right_min_x and robot.y >= lower_min_y:
            lr += 1
    return ul, ur, ll, lr


def _safety(robots: list[_Robot], width: int, height: int) -> int:
    ul, ur, ll, lr = _tally(robots, width, height)
    return ul * ur * ll * lr


def run_a(text: str) -> int:
    robots, width, height = _parse(text)
    for robot in robots:
        robot.travel(100, width, height)
    return _safety(robots, width, height)


def run_b(text: str) -> int:
    """Return the first second at which the safety score is lowest."""
    robots, width, height = _parse(text)
    low_score: int | None = None
    low_second = 0
    for second in range(1, width * height):
        for robot in robots:
            robot.travel(1, width, height)
        score = _safety(robots, width, height)
        if low_score is None or score < low_score:
            low_score = score
            low_second = second
    return low_second