"""Bridge Repair: choosing operators to hit calibration targets."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from itertools import product

Operator = Callable[[int, int], int]


def _add(a: int, b: int) -> int:
    return a + b


def _mul(a: int, b: int) -> int:
    return a * b


def _concat(a: int, b: int) -> int:
    return int(f"{a}{b}")


_OPERATORS_BY_DIGIT: dict[str, Operator] = {"0": _add, "1": _mul, "2": _concat}


def gen_pattern(pattern_number: int, width: int) -> str:
    """Render ``pattern_number`` as ``width`` base-3 digits, most significant first."""
    digits = []
    for _ in range(width):
        digits.append(str(pattern_number % 3))
        pattern_number //= 3
    return "".join(reversed(digits))


def _parse_line(line: str) -> tuple[int, list[int]]:
    head, tail = line.split(":")[:2]
    try:
        target = int(head)
    except ValueError:
        raise ValueError(f"Can't parse {head}") from None
    return target, [int(token) for token in tail.split()]


def _evaluate(numbers: Sequence[int], operators: Sequence[Operator]) -> int:
    result = numbers[0]
    for operator, number in zip(operators, numbers[1:]):
        result = operator(result, number)
    return result


def _solvable(target: int, numbers: Sequence[int], operators: Sequence[Operator]) -> bool:
    if not numbers:
        raise ValueError("Tried to test an empty expression!")
    return any(
        _evaluate(numbers, combo) == target
        for combo in product(operators, repeat=len(numbers) - 1)
    )


def _solvable_a(target: int, numbers: Sequence[int]) -> bool:
    if len(numbers) < 2:
        raise ValueError("Ran out of numbers to use!")
    return _solvable(target, numbers, (_add, _mul))


def _solvable_b(target: int, numbers: Sequence[int]) -> bool:
    return _solvable(target, numbers, (_add, _mul, _concat))


def run_a(text: str) -> int:
    total = 0
    for line in text.splitlines():
        target, numbers = _parse_line(line)
        if _solvable_a(target, numbers):
            total += target
    return total


def run_b(text: str) -> int:
    total = 0
    for line in text.splitlines():
        # Lines that cannot be evaluated contribute nothing.
        try:
            target, numbers = _parse_line(line)
            if _solvable_b(target, numbers):
                total += target
        except ValueError:
            continue
    return total