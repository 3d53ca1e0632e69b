import pytest

from aoc2024.day05 import run_a, run_b

RULES = [
    "47|53",
    "97|13",
    "97|61",
    "97|47",
    "75|29",
    "61|13",
    "75|53",
    "29|13",
    "97|29",
    "53|29",
    "61|53",
    "97|53",
    "61|29",
    "47|13",
    "75|47",
    "97|75",
    "47|61",
    "75|61",
    "47|29",
    "75|13",
    "53|13",
]
UPDATES = [
    "75,47,61,53,29",
    "97,61,53,29,13",
    "75,29,13",
    "75,97,47,61,53",
    "61,13,29",
    "97,13,75,29,47",
]
EXAMPLE = "\n".join(RULES + [""] + UPDATES)


def test_a_example():
    assert run_a(EXAMPLE) == 143


def test_b_example():
    assert run_b(EXAMPLE) == 123


def test_single_ordered_update():
    text = "1|2\n2|3\n\n1,2,3"
    assert run_a(text) == 2
    assert run_b(text) == 0


def test_single_reordered_update():
    text = "1|2\n2|3\n\n3,2,1"
    assert run_a(text) == 0
    assert run_b(text) == 2


def test_missing_blank_line_raises():
    with pytest.raises(ValueError):
        run_a("1|2\n2|3")


def test_bad_page_raises():
    with pytest.raises(ValueError, match="Could not parse page x"):
        run_a("1|2\n\n1,x,2")