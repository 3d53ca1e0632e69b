"""Chronospatial Computer: a tiny three-bit machine and its quine."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from aoc2024.common import extract_numbers

_I8_MIN, _I8_MAX = -128, 127


def _rem8(value: int) -> int:
    """Remainder by 8 with the sign of the dividend."""
    return -((-value) % 8) if value < 0 else value % 8


@dataclass
class Machine:
    """Three registers, an instruction pointer, a program and its output."""

    a: int
    b: int
    c: int
    program: list[int]
    output: list[int] = field(default_factory=list)
    ip: int = 0

    @classmethod
    def parse(cls, text: str) -> Machine:
        numbers = extract_numbers(text)
        if len(numbers) < 3:
            raise ValueError("Invalid machine schema!")
        a, b, c, *program = numbers
        if any(not _I8_MIN <= op <= _I8_MAX for op in program):
            raise ValueError("Invalid program!")
        return cls(a, b, c, program)

    def _literal(self) -> int:
        return self.program[self.ip + 1]

    def _combo(self) -> int:
        operand = self.program[self.ip + 1]
        if 0 <= operand <= 3:
            return operand
        if operand == 4:
            return self.a
        if operand == 5:
            return self.b
        if operand == 6:
            return self.c
        raise ValueError("Invalid combo operand!")

    def run(self) -> bool:
        """Execute one instruction; return whether the machine should keep running."""
        op = self.program[self.ip]
        jumped = False
        if op == 0:
            self.a >>= self._combo()
        elif op == 1:
            self.b ^= self._literal()
        elif op == 2:
            self.b = _rem8(self._combo())
        elif op == 3:
            if self.a != 0:
                jumped = True
                self.ip = self._literal()
        elif op == 4:
            self.b ^= self.c
        elif op == 5:
            self.output.append(_rem8(self._combo()))
        elif op == 6:
            self.b = self.a >> self._combo()
        elif op == 7:
            self.c = self.a >> self._combo()
        else:
            raise ValueError("Invalid opcode!")
        if not jumped:
            self.ip += 2
        return self.ip < len(self.program)

    def run_to_end(self) -> list[int]:
        """Run until the machine halts and return everything it output."""
        while self.run():
            pass
        return list(self.output)


def _format(output: Sequence[int]) -> str:
    return ",".join(str(value) for value in output)


def run_a(text: str) -> str:
    return _format(Machine.parse(text).run_to_end())


def get_output_digit(a: int) -> int:
    """The digit one pass of the puzzle program outputs for register A."""
    b = (a % 8) ^ 3
    c = a >> b
    b ^= 5
    b ^= c
    return b % 8


def _consume_output(outputs: Sequence[int], prior_a: int) -> int | None:
    if not outputs:
        return prior_a
    digit, rest = outputs[0], outputs[1:]
    for octet in range(8):
        partial_a = prior_a << 3 | octet
        if get_output_digit(partial_a) == digit:
            found = _consume_output(rest, partial_a)
            if found is not None:
                return found
    return None


def run_b(text: str) -> int:
    """Find the register A value that makes the program print itself.

    This relies on the structure of the puzzle's own program.
    """
    machine = Machine.parse(text)
    result = _consume_output(list(reversed(machine.program)), 0)
    return 0 if result is None else result