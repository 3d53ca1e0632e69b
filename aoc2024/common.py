"""Grid, point and direction helpers shared by the daily puzzles."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Generic, Iterable, TypeVar

T = TypeVar("T")

_NUMBER_CHARS = frozenset("0123456789-")


@dataclass(frozen=True)
class Point:
    """A position on a grid; ``x`` grows rightwards and ``y`` downwards."""

    x: int
    y: int

    def in_bounds(self, width: int, height: int) -> bool:
        return 0 <= self.x < width and 0 <= self.y < height

    def offset_by(self, x: int, y: int) -> Point | None:
        """Move back by ``(x, y)``; None if that leaves the non-negative quadrant."""
        new_x = self.x - x
        new_y = self.y - y
        if new_x < 0 or new_y < 0:
            return None
        return Point(new_x, new_y)

    def offset(self, x: int, y: int) -> Point:
        return Point(self.x + x, self.y + y)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


@dataclass
class Grid(Generic[T]):
    """A rectangular table of cells, indexed by ``(x, y)`` or by a Point."""

    cells: list[list[T]] = field(default_factory=list)

    def width(self) -> int:
        return len(self.cells[0])

    def height(self) -> int:
        return len(self.cells)

    def rows(self) -> list[list[T]]:
        return self.cells

    def find(self, item: T) -> Point | None:
        """Return the first position holding ``item``, scanning row by row."""
        for y, row in enumerate(self.cells):
            for x, value in enumerate(row):
                if value == item:
                    return Point(x, y)
        return None

    @classmethod
    def of_size(cls, width: int, height: int, filler: T) -> Grid[T]:
        return cls([[filler] * width for _ in range(height)])

    @classmethod
    def parse(cls, text: str) -> Grid[str]:
        return cls([list(line) for line in text.splitlines()])

    @classmethod
    def parse_until(
        cls, lines: Iterable[str], end_condition: Callable[[str], bool]
    ) -> Grid[str]:
        """Read rows from ``lines`` until one satisfies ``end_condition``.

        The terminating line is consumed; anything after it is left in ``lines``.
        """
        rows = []
        for line in lines:
            if end_condition(line):
                break
            rows.append(list(line))
        return cls(rows)

    @staticmethod
    def _locate(key: Point | tuple[int, int]) -> tuple[int, int]:
        if isinstance(key, Point):
            x, y = key.x, key.y
        else:
            x, y = key
        if x < 0 or y < 0:
            raise IndexError(f"negative grid index ({x}, {y})")
        return x, y

    def __getitem__(self, key: Point | tuple[int, int]) -> T:
        x, y = self._locate(key)
        return self.cells[y][x]

    def __setitem__(self, key: Point | tuple[int, int], value: T) -> None:
        x, y = self._locate(key)
        self.cells[y][x] = value

    def __str__(self) -> str:
        return "".join("".join(str(item) for item in row) + "\n" for row in self.cells)


class DirectionParseError(ValueError):
    """Raised when a character does not name a direction."""


class Direction(Enum):
    UP = "^"
    DOWN = "v"
    LEFT = "<"
    RIGHT = ">"

    def right_from(self) -> Direction:
        return _CLOCKWISE[self]

    def left_from(self) -> Direction:
        return _COUNTER_CLOCKWISE[self]

    def offset_point(self, point: Point) -> Point | None:
        coords = self.offset(point.x, point.y)
        if coords is None:
            return None
        return Point(*coords)

    def offset(self, x: int, y: int) -> tuple[int, int] | None:
        """Step one cell this way; None when stepping below zero."""
        if self is Direction.UP:
            return None if y == 0 else (x, y - 1)
        if self is Direction.RIGHT:
            return (x + 1, y)
        if self is Direction.DOWN:
            return (x, y + 1)
        return None if x == 0 else (x - 1, y)

    def to_char(self) -> str:
        return self.value

    @classmethod
    def from_char(cls, ch: str) -> Direction:
        try:
            return cls(ch)
        except ValueError:
            raise DirectionParseError("Invalid direction character") from None

    def is_dir_char_other_than_own(self, ch: str) -> bool:
        return ch != self.to_char() and ch in _DIRECTION_CHARS


_CLOCKWISE = {
    Direction.UP: Direction.RIGHT,
    Direction.RIGHT: Direction.DOWN,
    Direction.DOWN: Direction.LEFT,
    Direction.LEFT: Direction.UP,
}
_COUNTER_CLOCKWISE = {after: before for before, after in _CLOCKWISE.items()}
_DIRECTION_CHARS = frozenset(d.value for d in Direction)


def extract_numbers(line: str) -> list[int]:
    """Return every (possibly negative) integer embedded in ``line``."""
    cleaned = "".join(ch if ch in _NUMBER_CHARS else " " for ch in line)
    return [int(chunk) for chunk in cleaned.split()]