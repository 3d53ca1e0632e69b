import pytest

from aoc2024.day10 import run_a, run_b

SMALL = """\
0123
1234
8765
9876
"""

EXAMPLE = """\
89010123
78121874
87430965
96549874
45678903
32019012
01329801
10456732
"""


def test_small_a():
    assert run_a(SMALL) == 1


def test_a():
    assert run_a(EXAMPLE) == 36


def test_b():
    assert run_b(EXAMPLE) == 81


def test_no_trailheads():
    assert run_a("99\n99") == 0
    assert run_b("99\n99") == 0


def test_invalid_height():
    with pytest.raises(ValueError):
        run_a("0.\n12")