"""Parse roman numerals into integers.

A numeral is parsed in a single pass:

1. The numeral is tokenized. Invalid tokens (LL, XM) are rejected here.
2. Each token is checked against the one before it, since token ordering is
   strict: IVIV tokenizes cleanly as IV,IV but is rejected here.
3. The values of the tokens are added up.
"""

import enum
import logging
from dataclasses import dataclass
from typing import Optional

from .diagnostics import Diagnostic, EmptyInput, InvalidSequence
from .tokenizer import at_end, consume_next_token
from .types import NumeralError, ParserConfig

logger = logging.getLogger(__name__)


class State(enum.Enum):
    START = "start"
    HAVE_FIRST_TOKEN = "have_first_token"
    ACCUMULATING = "accumulating"
    SUCCESS = "success"
    FAILURE = "failure"


@dataclass(frozen=True)
class ParseResult:
    value: int
    diagnostic: Optional[Diagnostic] = None

    @property
    def ok(self) -> bool:
        return self.diagnostic is None

    @property
    def error(self) -> Optional[str]:
        """The description of why parsing failed, or None on success."""
        return None if self.diagnostic is None else self.diagnostic.message

    def unwrap(self) -> int:
        if self.diagnostic is not None:
            raise NumeralError(self.diagnostic)
        return self.value


class NumeralParser:
    def __init__(self, config: Optional[ParserConfig] = None) -> None:
        self.config = ParserConfig() if config is None else config
        self.rules = self.config.rules

    def parse(self, text: str) -> int:
        """Return the value of a numeral, raising NumeralError if it is
        malformed."""
        if self.config.strip_whitespace:
            text = text.strip()

        logger.debug("%s: %r", State.START.name, text)
        if at_end(text, 0):
            raise NumeralError(EmptyInput())

        prev, pos = consume_next_token(text, 0, self.rules)
        tally = prev.value
        logger.debug("%s: %r at 0", State.HAVE_FIRST_TOKEN.name, prev)

        while not at_end(text, pos):
            token, consumed = consume_next_token(text, pos, self.rules)
            assert consumed > 0

            if not self.rules.valid_sequence(prev, token):
                raise NumeralError(
                    InvalidSequence(str(prev), str(token), pos, pos + consumed)
                )

            logger.debug("%s: %r at %d", State.ACCUMULATING.name, token, pos)
            pos += consumed
            tally += token.value
            prev = token

        return tally

    def parse_roman_number(self, text: str) -> ParseResult:
        try:
            value = self.parse(text)
        except NumeralError as err:
            logger.debug("%s: %r rejected: %s", State.FAILURE.name, text, err)
            return ParseResult(0, err.diagnostic)

        logger.debug("%s: %r = %d", State.SUCCESS.name, text, value)
        return ParseResult(value)


_default_parser = NumeralParser()


def parse_roman_number(text: str) -> ParseResult:
    """Parse one line of input. On success the result holds the value; on
    failure it holds a description of the first problem found."""
    return _default_parser.parse_roman_number(text)


def parse(text: str) -> int:
    return _default_parser.parse(text)

