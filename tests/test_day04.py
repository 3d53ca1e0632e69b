import pytest

from aoc2024.day04 import run_a, run_b

EXAMPLE = "\n".join(
    [
        "MMMSXXMASM",
        "MSAMXMSMSA",
        "AMXSXMAAMM",
        "MSAMASMSMX",
        "XMASAMXAMM",
        "XXAMMXXAMA",
        "SMSMSASXSS",
        "SAXAMASAAA",
        "MAMMMXMMMM",
        "MXMXAXMASX",
    ]
)


def test_a_example():
    assert run_a(EXAMPLE) == 18


def test_b_example():
    assert run_b(EXAMPLE) == 9


@pytest.mark.parametrize(
    ("grid", "expected"),
    [
        ("MSM\nMAM\nSSS", 1),
        ("SSS\nMAM\nMSM", 1),
        ("MSS\nMAM\nMSS", 1),
        ("SSM\nMAM\nSSM", 1),
        ("SSS\nMAM\nSSS", 0),
    ],
)
def test_b_crosses(grid, expected):
    assert run_b(grid) == expected


@pytest.mark.parametrize(
    ("grid", "expected"),
    [
        ("XMAS", 1),
        ("SAMX", 1),
        ("XMASAMX", 2),
        ("X\nM\nA\nS", 1),
        ("XMAS\nXMAS", 2),
        ("XABC\nAMCD\nABAE\nABCS", 1),
        ("ABCS\nABAE\nAMCD\nXABC", 1),
        ("XMA", 0),
    ],
)
def test_a_directions(grid, expected):
    assert run_a(grid) == expected


def test_b_empty_input():
    assert run_b("") == 0