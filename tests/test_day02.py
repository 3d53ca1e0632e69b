from aoc2024.day02 import run_a, run_b

EXAMPLE = """7 6 4 2 1
1 2 7 8 9
9 7 6 2 1
1 3 2 4 5
8 6 4 4 1
1 3 6 7 9
"""


def test_a():
    assert run_a(EXAMPLE) == 2


def test_a_tricky_case():
    assert run_a("29 28 27 29 32") == 0


def test_b():
    assert run_b(EXAMPLE) == 4


def test_b_tricky_case():
    assert run_b("29 28 30 31 32") == 1


def test_b_tricky_case_2():
    assert run_b("29 28 27 31 32") == 0