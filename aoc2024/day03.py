"""Mull It Over: summing products from corrupted ``mul(a,b)`` instructions."""

from __future__ import annotations

from enum import Enum, auto

_I32_MAX = 2**31 - 1


class _State(Enum):
    START = auto()
    DO = auto()
    DONT = auto()
    MUL = auto()
    FIRST = auto()
    SECOND = auto()


def _operand(digits: str) -> int | None:
    if not digits or not (digits.isascii() and digits.isdigit()):
        return None
    value = int(digits)
    return value if value <= _I32_MAX else None


class _MulScanner:
    """Character-by-character recogniser for ``mul(a,b)``."""

    def __init__(self) -> None:
        self.total = 0
        self.enabled = True
        self._reset()

    def _reset(self) -> None:
        self.state = _State.START
        self.matched = 0
        self.first = ""
        self.second = ""

    def feed(self, glyph: str) -> bool:
        """Process one character; False means it must be fed again."""
        if self.state in (_State.FIRST, _State.SECOND):
            return self._feed_operand(glyph)
        self._feed_keyword(glyph)
        return True

    def _feed_keyword(self, glyph: str) -> None:
        self._feed_mul(glyph)

    def _feed_mul(self, glyph: str) -> None:
        pattern = "mul("
        if glyph != pattern[self.matched]:
            self._reset()
            return
        self.matched += 1
        if self.matched >= len(pattern):
            self.state = _State.FIRST

    def _feed_operand(self, glyph: str) -> bool:
        if self.state is _State.FIRST:
            if glyph == ",":
                self.state = _State.SECOND
            elif glyph.isnumeric():
                self.first += glyph
            else:
                self._reset()
                return False
            return True
        if glyph == ")":
            product = self._product()
            if product is not None:
                self.total += product
            self._reset()
        elif glyph.isnumeric():
            self.second += glyph
        else:
            self._reset()
            return False
        return True

    def _product(self) -> int | None:
        if not self.enabled:
            return None
        a = _operand(self.first)
        b = _operand(self.second)
        if a is None or b is None:
            return None
        return a * b

    def scan(self, text: str) -> int:
        index = 0
        while index < len(text):
            if self.feed(text[index]):
                index += 1
        return self.total


class _ConditionalMulScanner(_MulScanner):
    """Also honours ``do()`` and ``don't()`` switches."""

    def _feed_keyword(self, glyph: str) -> None:
        if self.state is _State.START:
            if glyph == "d":
                self.state = _State.DO
                self.matched = 1
            elif glyph == "m":
                self.state = _State.MUL
                self.matched = 1
        elif self.state is _State.DO:
            pattern = "do()"
            if glyph != pattern[self.matched]:
                if self.matched == 2 and glyph == "n":
                    self.state = _State.DONT
                else:
                    self._reset()
                    return
            self.matched += 1
            if self.matched >= len(pattern):
                self.enabled = True
                self._reset()
        elif self.state is _State.DONT:
            pattern = "don't()"
            if glyph != pattern[self.matched]:
                self._reset()
                return
            self.matched += 1
            if self.matched >= len(pattern):
                self.enabled = False
                self._reset()
        else:
            self._feed_mul(glyph)


def run_a(text: str) -> int:
    return _MulScanner().scan(text)


def run_b(text: str) -> int:
    return _ConditionalMulScanner().scan(text)