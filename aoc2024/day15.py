"""Warehouse Woes: a robot shoving boxes around a warehouse."""

from __future__ import annotations

from aoc2024.common import Direction, DirectionParseError, Grid, Point

_WIDENED = {"#": "##", "O": "[]", ".": "..", "@": "@."}
_BOX_HALVES = ("[", "]")


def _parse(text: str) -> tuple[Grid[str], list[Direction]]:
    lines = iter(text.splitlines())
    warehouse = Grid.parse_until(lines, lambda line: not line)
    commands = []
    for line in lines:
        for ch in line:
            try:
                commands.append(Direction.from_char(ch))
            except DirectionParseError:
                raise ValueError("Invalid command!") from None
    return warehouse, commands


def _find_robot(warehouse: Grid[str]) -> Point:
    robot = warehouse.find("@")
    if robot is None:
        raise ValueError("No robot!")
    return robot


def _robot_move(robot: Point, command: Direction, warehouse: Grid[str]) -> Point:
    target = command.offset_point(robot)
    if target is None:
        return robot
    if warehouse[target] == "#":
        return robot
    if warehouse[target] == ".":
        warehouse[robot] = "."
        warehouse[target] = "@"
        return target
    if warehouse[target] == "O":
        push = command.offset_point(target)
        while (
            push is not None
            and push.in_bounds(warehouse.width(), warehouse.height())
            and warehouse[push] == "O"
        ):
            push = command.offset_point(push)
        if push is None or warehouse[push] == "#":
            return robot
        if warehouse[push] == ".":
            warehouse[robot] = "."
            warehouse[target] = "@"
            warehouse[push] = "O"
            return target
    raise ValueError(f"Invalid character at robot target {warehouse[target]}")


def _score(warehouse: Grid[str], box: str) -> int:
    return sum(
        y * 100 + x
        for y, row in enumerate(warehouse.rows())
        for x, cell in enumerate(row)
        if cell == box
    )


def run_a(text: str) -> int:
    warehouse, commands = _parse(text)
    robot = _find_robot(warehouse)
    for command in commands:
        robot = _robot_move(robot, command, warehouse)
    return _score(warehouse, "O")


def _widen(warehouse: Grid[str]) -> Grid[str]:
    rows = []
    for row in warehouse.rows():
        new_row: list[str] = []
        for item in row:
            if item not in _WIDENED:
                raise ValueError("Invalid item in grid!")
            new_row.extend(_WIDENED[item])
        rows.append(new_row)
    return Grid(rows)


def _scan_box_parts(here: Point, warehouse: Grid[str], dy: int) -> list[tuple[Point, str]]:
    """Collect every box half that moves when ``here`` is pushed vertically by ``dy``."""
    parts: list[tuple[Point, str]] = []
    if warehouse[here] == "[":
        there = here.offset(1, 0)
        parts.append((here, "["))
        parts.append((there, "]"))
    elif warehouse[here] == "]":
        there = Point(here.x - 1, here.y)
        parts.append((here, "]"))
        parts.append((there, "["))
    else:
        return parts
    parts.extend(_scan_box_parts(Point(there.x, there.y + dy), warehouse, dy))
    beyond = Point(here.x, here.y + dy)
    if warehouse[beyond] in _BOX_HALVES:
        parts.extend(_scan_box_parts(beyond, warehouse, dy))
    return parts


def _robot_move_wide(robot: Point, command: Direction, warehouse: Grid[str]) -> Point:
    target = command.offset_point(robot)
    if target is None:
        return robot
    if warehouse[target] == "#":
        return robot
    if warehouse[target] == ".":
        warehouse[robot] = "."
        warehouse[target] = "@"
        return target
    if warehouse[target] not in _BOX_HALVES:
        raise ValueError(f"Invalid character at robot target {warehouse[target]}")

    push: Point | None = target
    while (
        push is not None
        and push.in_bounds(warehouse.width(), warehouse.height())
        and warehouse[push] in _BOX_HALVES
    ):
        push = command.offset_point(push)
    if push is None or warehouse[push] == "#":
        return robot

    if command in (Direction.LEFT, Direction.RIGHT):
        wave = target
        held = warehouse[robot]
        warehouse[robot] = "."
        while wave != push:
            held, warehouse[wave] = warehouse[wave], held
            next_wave = command.offset_point(wave)
            if next_wave is None:
                raise IndexError("Pushed a box off the grid")
            wave = next_wave
        warehouse[push] = held
        return target

    dy = -1 if command is Direction.UP else 1
    parts = _scan_box_parts(target, warehouse, dy)
    if any(warehouse[Point(point.x, point.y + dy)] == "#" for point, _ in parts):
        return robot
    moved = []
    for point, half in parts:
        warehouse[point] = "."
        moved.append((Point(point.x, point.y + dy), half))
    for point, half in moved:
        warehouse[point] = half
    warehouse[target] = "@"
    warehouse[robot] = "."
    return target


def run_b(text: str) -> int:
    narrow, commands = _parse(text)
    warehouse = _widen(narrow)
    robot = _find_robot(warehouse)
    for command in commands:
        robot = _robot_move_wide(robot, command, warehouse)
    return _score(warehouse, "[")