from aoc2024.day03 import run_a, run_b

EXAMPLE_A = "xmul(2,4)%&mul[3,7]!@^do_not_mul(5,5)+mul(32,64]then(mul(11,8)mul(8,5))"
EXAMPLE_B = "xmul(2,4)&mul[3,7]!^don't()_mul(5,5)+mul(32,64](mul(11,8)undo()?mul(8,5))"


def test_a():
    assert run_a(EXAMPLE_A) == 161


def test_b():
    assert run_b(EXAMPLE_B) == 48


def test_b_ignores_switches_in_part_a():
    assert run_a("don't()mul(2,3)") == 6
    assert run_b("don't()mul(2,3)") == 0


def test_b_reenables_after_do():
    assert run_b("don't()mul(2,3)do()mul(2,3)") == run_a("mul(2,3)")


def test_empty_operand_is_ignored():
    assert run_a("mul(,3)mul(2,)") == 0


def test_no_instructions():
    assert run_a("") == 0
    assert run_b("nothing here") == 0