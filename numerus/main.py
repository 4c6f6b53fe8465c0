"""Numerus.

Usage:
  numerus [options]
  numerus parse [options] <numeral>...
  numerus check [options] <path>

Options:
  -h --help                 Show this screen.
  --version                 Show the version.
  --config=<path>           Read parser settings from this numerus.toml file.
  --strict                  Allow at most three consecutive M.
  --trim                    Strip surrounding whitespace before parsing.
  -v --verbose              Log every token as it is parsed.

Environment variables:
  DIAGNOSTICS_FORMAT        JSON, text where text is default
  NUMERUS_PERF_SUMMARY      0, 1 where 0 is default

"""

import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, TextIO, Tuple

from docopt import docopt

from . import __version__
from .diagnostics import Diagnostic
from .parser import NumeralParser, ParseResult
from .types import ConfigLoadError, ParserConfig
from .util import PerformanceLogger

PROMPT = "Write a roman numeral: "
logger = logging.getLogger(__name__)

EXIT_STATUS_ERROR_DIAGNOSTICS = 2


class Reporter:
    def __init__(self, output: Optional[TextIO] = None) -> None:
        self.output = sys.stdout if output is None else output
        self.total_errors = 0
        self.total_diagnostics = 0
        self.total_numerals = 0

    @staticmethod
    def use_json() -> bool:
        return os.environ.get("DIAGNOSTICS_FORMAT", "text") == "JSON"

    def emit(self, line: str) -> None:
        print(line, file=self.output, flush=True)

    def on_result(self, text: str, result: ParseResult) -> None:
        self.total_numerals += 1
        if result.diagnostic is not None:
            self.total_errors += 1

        if self.use_json():
            document: Dict[str, Any] = {"input": text.rstrip("\n")}
            if result.diagnostic is None:
                document["value"] = result.value
            else:
                document["diagnostic"] = result.diagnostic.serialize()
            self.emit(json.dumps(document))
        elif result.diagnostic is None:
            self.emit(f"Result: {result.value}")
        else:
            self.emit(f"Invalid input: {result.error}")

    def on_diagnostics(
        self, path: str, lineno: int, diagnostics: List[Diagnostic]
    ) -> None:
        self.total_diagnostics += len(diagnostics)

        for diagnostic in diagnostics:
            info = diagnostic.serialize()
            info["path"] = path
            info["line"] = lineno

            if self.use_json():
                self.emit(json.dumps({"diagnostic": info}))
            else:
                self.emit("{severity}({path}:{line}:{start}): {message}".format(**info))

            if diagnostic.severity >= Diagnostic.Level.error:
                self.total_errors += 1


def repl(parser: NumeralParser, reporter: Reporter, stdin: TextIO) -> None:
    """Read numerals from stdin until it is exhausted. Malformed lines are
    reported and never end the loop."""
    while True:
        print(PROMPT, end="", file=reporter.output, flush=True)
        line = stdin.readline()
        if not line:
            break

        with PerformanceLogger.singleton().start("parse"):
            result = parser.parse_roman_number(line)
        reporter.on_result(line, result)


def parse_arguments(
    parser: NumeralParser, reporter: Reporter, numerals: List[str]
) -> None:
    for numeral in numerals:
        with PerformanceLogger.singleton().start("parse"):
            result = parser.parse_roman_number(numeral)
        reporter.on_result(numeral, result)


def check_file(parser: NumeralParser, reporter: Reporter, path: Path) -> None:
    """Parse every non-blank line of a file, reporting a diagnostic for each
    malformed numeral."""
    with PerformanceLogger.singleton().start("read"):
        # Undecodable bytes become U+FFFD and are reported as invalid characters
        text = path.read_text(encoding="utf-8", errors="replace")

    for lineno, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue

        reporter.total_numerals += 1
        with PerformanceLogger.singleton().start("parse"):
            result = parser.parse_roman_number(line)
        if result.diagnostic is not None:
            reporter.on_diagnostics(path.as_posix(), lineno, [result.diagnostic])


def load_config(args: Dict[str, Any]) -> Tuple[ParserConfig, List[Diagnostic]]:
    if args["--config"]:
        config, diagnostics = ParserConfig.load(Path(args["--config"]).expanduser())
    else:
        config, diagnostics = ParserConfig.open(Path.cwd())

    config = config.with_overrides(
        max_thousands=3 if args["--strict"] else None,
        strip_whitespace=True if args["--trim"] else None,
    )
    return config, diagnostics


def main(argv: Optional[List[str]] = None) -> None:
    # docopt will terminate here and display usage instructions if numerus is run improperly
    args = docopt(__doc__, argv=argv, version=__version__)

    logging.basicConfig(level=logging.DEBUG if args["--verbose"] else logging.INFO)
    logger.debug(f"Numerus {__version__} starting")

    try:
        config, config_diagnostics = load_config(args)
    except ConfigLoadError as err:
        logger.error(str(err))
        sys.exit(1)

    parser = NumeralParser(config)
    reporter = Reporter()

    for diagnostic in config_diagnostics:
        if diagnostic.severity >= Diagnostic.Level.error:
            logger.error(f"{diagnostic.severity_string}: {diagnostic.message}")
            reporter.total_errors += 1
        else:
            logger.warning(f"{diagnostic.severity_string}: {diagnostic.message}")

    try:
        if args["parse"]:
            parse_arguments(parser, reporter, args["<numeral>"])
        elif args["check"]:
            try:
                check_file(parser, reporter, Path(args["<path>"]))
            except OSError as err:
                logger.error(f"Error opening {args['<path>']}: {err}")
                sys.exit(1)
            print(
                f"{reporter.total_diagnostics} diagnostics; {reporter.total_numerals} numerals",
                file=sys.stderr,
            )
        else:
            repl(parser, reporter, sys.stdin)
    except KeyboardInterrupt:
        pass
    finally:
        if os.environ.get("NUMERUS_PERF_SUMMARY", "0") == "1":
            PerformanceLogger.singleton().print(sys.stderr)

    exit_code = 0
    if (args["parse"] or args["check"]) and reporter.total_errors > 0:
        exit_code = EXIT_STATUS_ERROR_DIAGNOSTICS

    sys.exit(exit_code)
