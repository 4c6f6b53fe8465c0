"""Parse roman numerals, rejecting malformed ones with a reason."""

__version__ = "0.1.0"

from .parser import NumeralParser, ParseResult, parse, parse_roman_number
from .types import ConfigLoadError, NumeralError, NumerusError, ParserConfig

__all__ = (
    "__version__",
    "NumeralParser",
    "ParseResult",
    "parse",
    "parse_roman_number",
    "ConfigLoadError",
    "NumeralError",
    "NumerusError",
    "ParserConfig",
)
