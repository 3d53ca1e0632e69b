import pytest

from aoc2024.day07 import gen_pattern, run_a, run_b

EXAMPLE = "\n".join(
    [
        "190: 10 19",
        "3267: 81 40 27",
        "83: 17 5",
        "156: 15 6",
        "7290: 6 8 6 15",
        "161011: 16 10 13",
        "192: 17 8 14",
        "21037: 9 7 18 13",
        "292: 11 6 16 20",
    ]
)


def test_a_example():
    assert run_a(EXAMPLE) == 3749


def test_b_example():
    assert run_b(EXAMPLE) == 11387


def test_concat():
    assert run_b("100: 2 0 5") == 100


def test_pattern_gen():
    assert gen_pattern(7, 3) == "021"


@pytest.mark.parametrize(
    ("number", "width", "expected"),
    [(0, 2, "00"), (8, 2, "22"), (5, 0, ""), (1, 4, "0001")],
)
def test_pattern_gen_more(number, width, expected):
    assert gen_pattern(number, width) == expected


def test_concat_not_available_in_a():
    assert run_a("100: 2 0 5") == 0


def test_a_single_number_raises():
    with pytest.raises(ValueError):
        run_a("5: 5")


def test_b_single_number_matches_itself():
    assert run_b("5: 5") == 5


def test_b_skips_unusable_lines():
    assert run_b("5: 5\n7:") == 5


def test_a_bad_target_raises():
    with pytest.raises(ValueError, match="Can't parse"):
        run_a("x: 1 2")