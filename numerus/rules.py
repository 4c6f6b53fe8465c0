"""Grammar rules deciding which tokens are well-formed and which tokens may
follow one another.

Token ordering follows two observations:

1. The leading digit of consecutive tokens must strictly decrease. XXX may be
   followed by IX because I < X, but IX may not be followed by I.
2. If a token leads with V, L or D, the trailing digit of the next token must
   also be smaller. V may not be followed by IV because both end on V.

Expanded, with A+ meaning any of A, AA, AAA::

    I+ IV IX  are terminal
    V         can be followed by I+
    X+ XL XC  can be followed by I+ IV V IX
    L         can be followed by I+ IV V IX X+
    C+ CD CM  can be followed by I+ IV V IX X+ XL L XC
    D         can be followed by I+ IV V IX X+ XL L XC C+
    M+        can be followed by anything else

Runs such as XX followed by X never reach these rules because the tokenizer
groups them into a single XXX token.
"""

from dataclasses import dataclass
from typing import Optional

from .digits import MAX_REPEATS, Digit
from .tokens import Token


def valid_pair(prefix: int, suffix: int) -> bool:
    """IV is a valid pair but LC is not."""
    if suffix in (Digit.V, Digit.X):
        return prefix == Digit.I
    elif suffix in (Digit.L, Digit.C):
        return prefix == Digit.X
    elif suffix in (Digit.D, Digit.M):
        return prefix == Digit.C
    return False


def valid_repeats(digit: int, count: int, max_thousands: Optional[int] = None) -> bool:
    """III is a valid run but LL is not. Runs of M are only bounded by
    max_thousands, if given."""
    if count < 1:
        return False

    if digit == Digit.M:
        return max_thousands is None or count <= max_thousands

    try:
        return count <= MAX_REPEATS[Digit(digit)]
    except ValueError:
        return False


def valid_sequence(first: Token, second: Token) -> bool:
    """Check that two tokens can appear one after another: (C)(I) is valid
    but (IX)(I) is not."""
    if first.lead.is_half:
        return first.lead > second.trail

    return first.lead > second.lead


@dataclass(frozen=True)
class RomanRules:
    max_thousands: Optional[int] = None

    def __post_init__(self) -> None:
        if self.max_thousands is not None and self.max_thousands < 1:
            raise ValueError(
                f"max_thousands must be at least 1, not {self.max_thousands}"
            )

    def valid_pair(self, prefix: int, suffix: int) -> bool:
        return valid_pair(prefix, suffix)

    def valid_repeats(self, digit: int, count: int) -> bool:
        return valid_repeats(digit, count, self.max_thousands)

    def valid_sequence(self, first: Token, second: Token) -> bool:
        return valid_sequence(first, second)


DEFAULT_RULES = RomanRules()
STRICT_RULES = RomanRules(max_thousands=3)
