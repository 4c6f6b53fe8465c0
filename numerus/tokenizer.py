"""Split a roman numeral into tokens.

A token is either a subtractive pair (the IV in MMDIV), a run of repeated
digits (the MM) or a lone digit (the D), which is treated as a run of one.
Malformed tokens such as LL or XM are rejected here; whether the tokens may
appear in the order given is decided later by the sequence rules.
"""

from typing import Iterator, Tuple

from .diagnostics import (
    InvalidCharacter,
    InvalidPair,
    InvalidRepeatCount,
    UnexpectedEndOfInput,
)
from .digits import Digit, parse_roman_character
from .rules import DEFAULT_RULES, RomanRules
from .tokens import Pair, Repeat, Token
from .types import NumeralError

LINE_TERMINATORS = ("\n",)


def at_end(text: str, pos: int) -> bool:
    """Return True if no input remains at pos. Input ends at the end of the
    string or at the first newline."""
    return pos >= len(text) or text[pos] in LINE_TERMINATORS


def decode(text: str, pos: int) -> Digit:
    digit = parse_roman_character(text[pos])
    if digit is None:
        raise NumeralError(InvalidCharacter(text[pos], pos))
    return digit


def consume_next_token(
    text: str, pos: int = 0, rules: RomanRules = DEFAULT_RULES
) -> Tuple[Token, int]:
    """Read the token starting at pos. Return the token and the number of
    characters it consumed, or raise NumeralError."""
    if at_end(text, pos):
        raise NumeralError(UnexpectedEndOfInput(pos))

    first = decode(text, pos)

    # The second character decides between a pair and a repeat
    if at_end(text, pos + 1):
        return Repeat(first, 1), 1

    second = decode(text, pos + 1)

    if first < second:
        if not rules.valid_pair(first, second):
            raise NumeralError(InvalidPair(text[pos], text[pos + 1], pos))
        return Pair(first, second), 2

    if first > second:
        # The second character is left for the next call
        return Repeat(first, 1), 1

    # Every character of the run equals the first one, which is already decoded
    end = pos + 2
    while not at_end(text, end) and text[end] == text[pos]:
        end += 1

    count = end - pos
    if not rules.valid_repeats(first, count):
        raise NumeralError(InvalidRepeatCount(text[pos], count, pos))

    return Repeat(first, count), count


def tokenize(
    text: str, rules: RomanRules = DEFAULT_RULES
) -> Iterator[Tuple[Token, int, int]]:
    """Yield (token, start, consumed) for every token in text, in order. Token
    ordering is not checked."""
    pos = 0
    while not at_end(text, pos):
        token, consumed = consume_next_token(text, pos, rules)
        yield token, pos, consumed
        pos += consumed
