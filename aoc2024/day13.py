"""Claw Contraption: the cheapest button presses that reach each prize."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

_PRIZE_SHIFT = 10000000000000.0
_U64_MAX = 2**64 - 1


@dataclass
class _Machine:
    ax: float
    ay: float
    bx: float
    by: float
    px: float
    py: float


def _pair(line: str) -> tuple[float, float]:
    cleaned = "".join(
        ch for ch in line if (ch.isascii() and ch.isdigit()) or ch.isspace()
    )
    numbers = [float(word) for word in cleaned.split()]
    if len(numbers) < 2:
        raise ValueError(f"Expected two numbers in {line!r}")
    return numbers[0], numbers[1]


def _machines(text: str) -> Iterator[_Machine]:
    lines = iter(text.splitlines())
    while True:
        chunk = [next(lines, None) for _ in range(3)]
        next(lines, None)
        if None in chunk:
            return
        a_line, b_line, p_line = chunk
        ax, ay = _pair(a_line)
        bx, by = _pair(b_line)
        px, py = _pair(p_line)
        yield _Machine(ax, ay, bx, by, px, py)


def _to_u64(value: float) -> int:
    if value <= 0:
        return 0
    return min(int(value), _U64_MAX)


def _solve(m: _Machine) -> int | None:
    """Solve the two linear equations; None unless both press counts are whole."""
    det = m.by * m.ax - m.ay * m.bx
    if det == 0 or m.ax == 0:
        return None
    b = (m.ax * m.py - m.ay * m.px) / det
    a = (m.px - m.bx * b) / m.ax
    if a.is_integer() and b.is_integer():
        return 3 * _to_u64(a) + _to_u64(b)
    return None


def run_a(text: str) -> int:
    return sum(cost for m in _machines(text) if (cost := _solve(m)) is not None)


def run_b(text: str) -> int:
    total = 0
    for machine in _machines(text):
        machine.px += _PRIZE_SHIFT
        machine.py += _PRIZE_SHIFT
        cost = _solve(machine)
        if cost is not None:
            total += cost
    return total