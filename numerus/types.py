import logging
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, ClassVar, Dict, List, Optional, Tuple

import tomli

from .diagnostics import Diagnostic, UnknownConfigOption, UnmarshallingError
from .rules import RomanRules

logger = logging.getLogger(__name__)


class NumerusError(Exception):
    pass


class NumeralError(NumerusError):
    """Raised when a numeral is rejected. Carries the diagnostic describing the
    first problem found."""

    def __init__(self, diagnostic: Diagnostic) -> None:
        super().__init__(diagnostic.message)
        self.diagnostic = diagnostic


class ConfigLoadError(NumerusError):
    pass


@dataclass(frozen=True)
class ParserConfig:
    max_thousands: Optional[int] = field(default=None)
    strip_whitespace: bool = field(default=False)

    CONFIG_FILENAME: ClassVar[str] = "numerus.toml"

    @property
    def rules(self) -> RomanRules:
        return RomanRules(max_thousands=self.max_thousands)

    @classmethod
    def open(cls, root: Path) -> Tuple["ParserConfig", List[Diagnostic]]:
        """Search root and its parents for a numerus.toml file. Fall back to the
        default configuration if there is none."""
        path = root.resolve()
        while True:
            candidate = path.joinpath(cls.CONFIG_FILENAME)
            if candidate.exists():
                return cls.load(candidate)

            if path.parent == path:
                break
            path = path.parent

        return cls(), []

    @classmethod
    def load(cls, path: Path) -> Tuple["ParserConfig", List[Diagnostic]]:
        try:
            with path.open("rb") as f:
                data = tomli.load(f)
        except FileNotFoundError as err:
            raise ConfigLoadError(f"Configuration file not found: {path}") from err
        except OSError as err:
            raise ConfigLoadError(f"Cannot read configuration file {path}: {err}") from err
        except tomli.TOMLDecodeError as err:
            logger.debug("Failed to decode %s", path)
            return cls(), [UnmarshallingError(str(err))]

        logger.debug("Loaded configuration from %s", path)
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Tuple["ParserConfig", List[Diagnostic]]:
        diagnostics: List[Diagnostic] = []
        known = {f.name for f in fields(cls)}
        values: Dict[str, Any] = {}

        for key, value in data.items():
            if key not in known:
                diagnostics.append(UnknownConfigOption(key))
                continue

            if key == "max_thousands":
                if (
                    not isinstance(value, int)
                    or isinstance(value, bool)
                    or value < 1
                ):
                    diagnostics.append(
                        UnmarshallingError(
                            f"max_thousands must be a positive integer, got {value!r}"
                        )
                    )
                    continue
            elif key == "strip_whitespace":
                if not isinstance(value, bool):
                    diagnostics.append(
                        UnmarshallingError(
                            f"strip_whitespace must be a boolean, got {value!r}"
                        )
                    )
                    continue

            values[key] = value

        return cls(**values), diagnostics

    def with_overrides(
        self,
        max_thousands: Optional[int] = None,
        strip_whitespace: Optional[bool] = None,
    ) -> "ParserConfig":
        result = self
        if max_thousands is not None:
            result = replace(result, max_thousands=max_thousands)
        if strip_whitespace is not None:
            result = replace(result, strip_whitespace=strip_whitespace)
        return result
