import pytest

from aoc2024.day09 import FREE, find_empty_space, run_a, run_b, whole_file_compact

EXAMPLE = "2333133121414131402"


def from_string(layout):
    return [FREE if ch == "." else int(ch) for ch in layout if ch == "." or ch.isdigit()]


def test_a():
    assert run_a(EXAMPLE) == 1928


def test_b():
    assert run_b(EXAMPLE) == 2858


def test_a_small():
    assert run_a("12345") == 60


def test_invalid_digit():
    with pytest.raises(ValueError):
        run_a("12x4")


@pytest.mark.parametrize(
    ("before", "after"),
    [
        ("000..1.22", "000221..."),
        ("000....1111111.22", "00022..1111111..."),
        ("000.1..222222.33", "0001.33222222..."),
        ("0.....1111.22..", "022...1111....."),
        ("0.1.2.3.4.5.6", "0615243......"),
        ("....0000", "0000...."),
    ],
)
def test_whole_file_compact(before, after):
    blocks = from_string(before)
    whole_file_compact(blocks)
    assert blocks == from_string(after)


def test_find_empty_space_found():
    assert find_empty_space(from_string("000..1.22"), 2, 5) == 3


def test_find_empty_space_missing():
    assert find_empty_space(from_string("000..1.22"), 2, 4) is None