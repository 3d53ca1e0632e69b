import pytest

from aoc2024.day12 import run_a, run_b

EASY1 = "AAAA\nBBCD\nBBCC\nEEEC\n"

EASY2 = "OOOOO\nOXOXO\nOOOOO\nOXOXO\nOOOOO\n"

B1 = "EEEEE\nEXXXX\nEEEEE\nEXXXX\nEEEEE\n"

B2 = "AAAAAA\nAAABBA\nAAABBA\nABBAAA\nABBAAA\nAAAAAA\n"

LARGE = (
    "RRRRIICCFF\n"
    "RRRRIICCCF\n"
    "VVRRRCCFFF\n"
    "VVRCCCJFFF\n"
    "VVVVCJJCFE\n"
    "VVIVCCJJEE\n"
    "VVIIICJJEE\n"
    "MIIIIIJJEE\n"
    "MIIISIJEEE\n"
    "MMMISSJEEE\n"
)


def test_a1():
    assert run_a(EASY1) == 140


def test_a2():
    assert run_a(EASY2) == 772


def test_a3():
    assert run_a(LARGE) == 1930


@pytest.mark.parametrize(
    "text, expected",
    [
        ("00\n11", 16),
        ("11\n01", 22),
        ("111\n101\n111", 68),
    ],
)
def test_b_tiny(text, expected):
    assert run_b(text) == expected


def test_b1_abcde():
    assert run_b(EASY1) == 80


def test_b2_island_o():
    assert run_b(EASY2) == 436


def test_b3_big_e():
    assert run_b(B1) == 236


def test_b4_island_b():
    assert run_b(B2) == 368


def test_b5():
    assert run_b(LARGE) == 1206


def test_single_plot():
    assert run_a("A") == 4
    assert run_b("A") == 4


def test_discount_never_exceeds_full_price():
    for text in (EASY1, EASY2, B1, B2, LARGE):
        assert run_b(text) <= run_a(text)