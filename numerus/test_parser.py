import logging
from typing import List, Tuple

import pytest

from . import parse, parse_roman_number
from .diagnostics import (
    EmptyInput,
    InvalidCharacter,
    InvalidPair,
    InvalidRepeatCount,
    InvalidSequence,
)
from .parser import NumeralParser, ParseResult
from .types import NumeralError, ParserConfig

STEPS: List[Tuple[int, str]] = [
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
]


def to_roman(value: int) -> str:
    """Render a value in canonical subtractive notation."""
    parts: List[str] = []
    for step, text in STEPS:
        while value >= step:
            parts.append(text)
            value -= step
    return "".join(parts)


def test_all_standard_numerals() -> None:
    for value in range(1, 4000):
        result = parse_roman_number(to_roman(value))
        assert result.ok, (value, result.error)
        assert result.value == value


def test_boundaries() -> None:
    assert parse_roman_number("I") == ParseResult(1)
    assert parse_roman_number("IV").value == 4
    assert parse_roman_number("MCMXCIV").value == 1994
    assert parse_roman_number("MMMCMXCIX").value == 3999
    assert parse_roman_number("MMMDCCCLXXXVIII").value == 3888

    # Runs of M are not capped by default
    assert parse_roman_number("MMMM").value == 4000
    assert parse_roman_number("MMMMMMMMMMCXI").value == 10111


def test_line_terminator() -> None:
    assert parse_roman_number("XIV\n").value == 14
    # Anything after the newline is ignored
    assert parse_roman_number("XIV\nfoo").value == 14


def test_empty() -> None:
    result = parse_roman_number("")
    assert not result.ok
    assert result.value == 0
    assert result.error == "input is empty"
    assert result.diagnostic == EmptyInput()

    assert parse_roman_number("\n").error == "input is empty"


def test_rejections() -> None:
    for text in ("LL", "XM", "IM", "VX", "IC", "IIII", "VV", "IVI", "IVIV", "VIV"):
        result = parse_roman_number(text)
        assert not result.ok, text
        assert result.error

    assert isinstance(parse_roman_number("LL").diagnostic, InvalidRepeatCount)
    assert isinstance(parse_roman_number("XM").diagnostic, InvalidPair)
    assert isinstance(parse_roman_number("IM").diagnostic, InvalidPair)
    assert isinstance(parse_roman_number("IC").diagnostic, InvalidPair)
    assert parse_roman_number("VV").error == "character V cannot appear 2 times in a row"
    assert parse_roman_number("IIII").error == "character I cannot appear 4 times in a row"


def test_sequence_errors() -> None:
    result = parse_roman_number("VIV")
    assert result.error == " V cannot be followed by IV"
    assert result.diagnostic == InvalidSequence("V", "IV", 1, 3)

    assert parse_roman_number("IVI").error == " IV cannot be followed by I"
    assert parse_roman_number("IVIV").error == " IV cannot be followed by IV"
    assert parse_roman_number("XXXIXX").error == " IX cannot be followed by X"
    assert parse_roman_number("CMM").error == " CM cannot be followed by M"
    assert parse_roman_number("LXL").error == " L cannot be followed by XL"

    # The first failure wins
    assert parse_roman_number("IVIXA").error == " IV cannot be followed by IX"


def test_invalid_characters() -> None:
    for text in ("A", "XIIA", "123", " X", "X ", "iv", "Mcm", "Ⅻ", "X-I"):
        result = parse_roman_number(text)
        assert isinstance(result.diagnostic, InvalidCharacter), text
        assert result.error is not None
        assert result.error.startswith("invalid character: ")

    assert parse_roman_number("XIIA").diagnostic == InvalidCharacter("A", 3)


def test_idempotent() -> None:
    for text in ("MCMXCIV", "IVI", "", "MMMMM", "ABC"):
        assert parse_roman_number(text) == parse_roman_number(text)


def test_parse() -> None:
    assert parse("XLII") == 42

    with pytest.raises(NumeralError) as excinfo:
        parse("IC")
    assert str(excinfo.value) == "invalid pair: IC"

    assert parse_roman_number("XC").unwrap() == 90
    with pytest.raises(NumeralError):
        parse_roman_number("").unwrap()


def test_configured_parser() -> None:
    strict = NumeralParser(ParserConfig(max_thousands=3))
    assert strict.parse_roman_number("MMMCMXCIX").value == 3999
    result = strict.parse_roman_number("MMMM")
    assert result.error == "character M cannot appear 4 times in a row"

    trimming = NumeralParser(ParserConfig(strip_whitespace=True))
    assert trimming.parse(" XIV \n") == 14
    assert trimming.parse_roman_number("   ").error == "input is empty"
    assert NumeralParser().parse_roman_number(" XIV").error == "invalid character:  "


def test_state_logging(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="numerus.parser"):
        assert parse_roman_number("MCMIV").value == 1904

    states = [message.split(":")[0] for message in caplog.messages]
    assert states == [
        "START",
        "HAVE_FIRST_TOKEN",
        "ACCUMULATING",
        "ACCUMULATING",
        "SUCCESS",
    ]

    caplog.clear()
    with caplog.at_level(logging.DEBUG, logger="numerus.parser"):
        parse_roman_number("VIV")
    assert caplog.messages[-1].startswith("FAILURE")
