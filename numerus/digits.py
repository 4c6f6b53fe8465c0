"""Lookup tables between roman numeral characters and their values."""

import enum
from typing import Mapping, Optional

__all__ = (
    "Digit",
    "HALF_DIGITS",
    "MAX_REPEATS",
    "CHAR_TO_DIGIT",
    "VALUE_TO_CHAR",
    "parse_roman_character",
    "digit_to_roman",
)


class Digit(enum.IntEnum):
    I = 1
    V = 5
    X = 10
    L = 50
    C = 100
    D = 500
    M = 1000

    @property
    def char(self) -> str:
        return self.name

    @property
    def is_half(self) -> bool:
        """V, L and D sit halfway between two powers of ten and may never repeat."""
        return self in HALF_DIGITS


HALF_DIGITS = frozenset((Digit.V, Digit.L, Digit.D))

# M is absent: it may repeat any number of times unless a parser caps it.
MAX_REPEATS: Mapping[Digit, int] = {
    Digit.I: 3,
    Digit.V: 1,
    Digit.X: 3,
    Digit.L: 1,
    Digit.C: 3,
    Digit.D: 1,
}

CHAR_TO_DIGIT: Mapping[str, Digit] = {digit.char: digit for digit in Digit}
VALUE_TO_CHAR: Mapping[int, str] = {int(digit): digit.char for digit in Digit}


def parse_roman_character(c: str) -> Optional[Digit]:
    """Return the digit denoted by a single character, or None if it is not a
    roman numeral."""
    return CHAR_TO_DIGIT.get(c)


def digit_to_roman(value: int) -> str:
    try:
        return VALUE_TO_CHAR[value]
    except KeyError:
        raise ValueError(f"{value} is not a roman digit value") from None
