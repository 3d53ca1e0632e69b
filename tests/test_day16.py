import pytest

from aoc2024.day16 import run_a, run_b

TINY = """\
#####
#S..#
###.#
###E#
#####
"""

EXAMPLE = """\
###############
#.......#....E#
#.#.###.#.###.#
#.....#.#...#.#
#.###.#####.#.#
#.#.#.......#.#
#.#.#####.###.#
#...........#.#
###.#.#####.#.#
#...#.....#.#.#
#.#.#.###.#.#.#
#.....#...#.#.#
#.###.#.#.#.#.#
#S..#.....#...#
###############
"""

EXAMPLE_2 = """\
#################
#...#...#...#..E#
#.#.#.#.#.#.#.#.#
#.#.#.#...#...#.#
#.#.#.#.###.#.#.#
#...#.#.#.....#.#
#.#.#.#.#.#####.#
#.#...#.#.#.....#
#.#.#####.#.###.#
#.#.#.......#...#
#.#.###.#####.###
#.#.#...#.....#.#
#.#.#.#####.###.#
#.#.#.........#.#
#.#.#.#########.#
#S#.............#
#################
"""


def test_a_tiny():
    assert run_a(TINY) == 1004


def test_a():
    assert run_a(EXAMPLE) == 7036


def test_a2():
    assert run_a(EXAMPLE_2) == 11048


def test_straight_corridor():
    assert run_a("#####\n#S.E#\n#####\n") == 2


def test_no_path():
    with pytest.raises(ValueError, match="No valid path"):
        run_a("#####\n#S#E#\n#####\n")


def test_no_start():
    with pytest.raises(ValueError, match="No start tile"):
        run_a("#####\n#..E#\n#####\n")


def test_b_reports_empty_answer():
    assert run_b(EXAMPLE) == ""