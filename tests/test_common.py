import pytest

from aoc2024.common import (
    Direction,
    DirectionParseError,
    Grid,
    Point,
    extract_numbers,
)


def test_point_str():
    assert str(Point(3, 7)) == "(3, 7)"


def test_point_in_bounds():
    assert Point(0, 0).in_bounds(1, 1)
    assert not Point(1, 0).in_bounds(1, 1)
    assert not Point(0, 1).in_bounds(1, 1)


def test_point_offset_and_offset_by_are_inverse():
    start = Point(4, 5)
    assert start.offset(2, 3).offset_by(2, 3) == start


def test_point_offset_by_below_zero_is_none():
    assert Point(1, 1).offset_by(2, 0) is None
    assert Point(1, 1).offset_by(0, 2) is None


def test_point_offset_by_negative_moves_forward():
    assert Point(1, 1).offset_by(-2, 0) == Point(3, 1)


def test_grid_parse_and_str_round_trip():
    text = "#.#\n.@.\n#.#\n"
    grid = Grid.parse(text)
    assert str(grid) == text
    assert grid.width() == 3
    assert grid.height() == 3


def test_grid_find():
    grid = Grid.parse("...\n..@\n...")
    assert grid.find("@") == Point(2, 1)
    assert grid.find("X") is None


def test_grid_indexing_by_tuple_and_point_agree():
    grid = Grid.parse("ab\ncd")
    assert grid[(1, 0)] == "b"
    assert grid[Point(0, 1)] == "c"
    grid[Point(1, 1)] = "z"
    assert grid[(1, 1)] == "z"
    assert grid.rows() == [["a", "b"], ["c", "z"]]


def test_grid_negative_index_raises():
    grid = Grid.parse("ab\ncd")
    with pytest.raises(IndexError):
        _ = grid[(-1, 0)]
    with pytest.raises(IndexError):
        grid[(0, -1)] = "z"
    assert grid.rows() == [["a", "b"], ["c", "d"]]


def test_grid_of_size():
    grid = Grid.of_size(4, 2, ".")
    assert grid.width() == 4
    assert grid.height() == 2
    assert str(grid) == "....\n....\n"


def test_grid_parse_until_leaves_remaining_lines():
    lines = iter(["##", "#.", "", "<>", "^v"])
    grid = Grid.parse_until(lines, lambda line: line == "")
    assert grid.rows() == [["#", "#"], ["#", "."]]
    assert list(lines) == ["<>", "^v"]


def test_rotations_are_inverse():
    order = [Direction.UP, Direction.RIGHT, Direction.DOWN, Direction.LEFT]
    assert [Direction.right_from(d) for d in order] == [
        Direction.RIGHT,
        Direction.DOWN,
        Direction.LEFT,
        Direction.UP,
    ]
    assert [Direction.left_from(d) for d in order] == [
        Direction.LEFT,
        Direction.UP,
        Direction.RIGHT,
        Direction.DOWN,
    ]
    assert [Direction.left_from(Direction.right_from(d)) for d in order] == order


def test_right_from_up_is_right():
    assert Direction.UP.right_from() is Direction.RIGHT


@pytest.mark.parametrize("direction", list(Direction))
def test_char_round_trip(direction):
    assert Direction.from_char(direction.to_char()) is direction


def test_from_char_rejects_other_characters():
    with pytest.raises(DirectionParseError):
        Direction.from_char("x")


def test_offset_at_edges():
    assert Direction.UP.offset(3, 0) is None
    assert Direction.LEFT.offset(0, 3) is None
    assert Direction.DOWN.offset_point(Point(2, 2)) == Point(2, 3)
    assert Direction.RIGHT.offset_point(Point(2, 2)) == Point(3, 2)


def test_is_dir_char_other_than_own():
    assert Direction.UP.is_dir_char_other_than_own(">")
    assert not Direction.UP.is_dir_char_other_than_own("^")
    assert not Direction.UP.is_dir_char_other_than_own("#")


def test_extract_numbers():
    assert extract_numbers("p=0,4 v=3,-3") == [0, 4, 3, -3]
    assert extract_numbers("no digits here") == []