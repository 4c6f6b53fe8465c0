from dataclasses import dataclass
from typing import FrozenSet, Tuple, Union

from .digits import MAX_REPEATS, Digit, digit_to_roman

__all__ = ("Repeat", "Pair", "Token", "CANONICAL_PAIRS")

CANONICAL_PAIRS: FrozenSet[Tuple[Digit, Digit]] = frozenset(
    (
        (Digit.I, Digit.V),
        (Digit.I, Digit.X),
        (Digit.X, Digit.L),
        (Digit.X, Digit.C),
        (Digit.C, Digit.D),
        (Digit.C, Digit.M),
    )
)


@dataclass(frozen=True)
class Repeat:
    """One or more consecutive occurrences of the same digit. A lone digit is a
    repeat with a count of one."""

    digit: Digit
    count: int = 1

    def __post_init__(self) -> None:
        object.__setattr__(self, "digit", Digit(self.digit))
        if self.count < 1:
            raise ValueError(f"Repeat count must be positive: {self.count}")
        if self.count > MAX_REPEATS.get(self.digit, self.count):
            raise ValueError(
                f"{self.digit.char} cannot be repeated {self.count} times"
            )

    @property
    def lead(self) -> Digit:
        return self.digit

    @property
    def trail(self) -> Digit:
        return self.digit

    @property
    def value(self) -> int:
        return int(self.digit) * self.count

    def __len__(self) -> int:
        return self.count

    def __str__(self) -> str:
        return digit_to_roman(self.digit) * self.count


@dataclass(frozen=True)
class Pair:
    """A subtractive pair such as IV or CM."""

    prefix: Digit
    suffix: Digit

    def __post_init__(self) -> None:
        object.__setattr__(self, "prefix", Digit(self.prefix))
        object.__setattr__(self, "suffix", Digit(self.suffix))
        if (self.prefix, self.suffix) not in CANONICAL_PAIRS:
            raise ValueError(
                f"{self.prefix.char}{self.suffix.char} is not a subtractive pair"
            )

    @property
    def lead(self) -> Digit:
        return self.prefix

    @property
    def trail(self) -> Digit:
        return self.suffix

    @property
    def value(self) -> int:
        return int(self.suffix) - int(self.prefix)

    def __len__(self) -> int:
        return 2

    def __str__(self) -> str:
        return digit_to_roman(self.prefix) + digit_to_roman(self.suffix)


Token = Union[Repeat, Pair]