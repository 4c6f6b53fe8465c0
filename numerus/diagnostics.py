import enum
from typing import Dict, Optional, Union

SerializableType = Union[None, bool, str, int, float]
SerializedDiagnostic = Dict[str, SerializableType]


class Diagnostic:
    def __init__(self, message: str, start: int, end: Optional[int] = None) -> None:
        self.message = message
        self.start = start
        self.end = start + 1 if end is None else end

    class Level(enum.IntEnum):
        info = 1
        warning = 2
        error = 3

    @property
    def severity(self) -> "Diagnostic.Level":
        raise TypeError("Cannot access the severity of an abstract base Diagnostic")

    @property
    def severity_string(self) -> str:
        return self.severity.name.title()

    def serialize(self) -> SerializedDiagnostic:
        """Create dict containing diagnostic attributes for reporting diagnostics as JSON"""
        diag: SerializedDiagnostic = {}
        diag["severity"] = self.severity_string.upper()
        diag["start"] = self.start
        diag["message"] = self.message
        return diag

    def __eq__(self, other: object) -> bool:
        if type(self) != type(other):
            return False

        assert isinstance(other, Diagnostic)

        return (
            self.message == other.message
            and self.start == other.start
            and self.end == other.end
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({repr(self.message)}, {repr(self.start)})"


class EmptyInput(Diagnostic):
    severity = Diagnostic.Level.error

    def __init__(self) -> None:
        super().__init__("input is empty", 0, 0)


class UnexpectedEndOfInput(Diagnostic):
    severity = Diagnostic.Level.error

    def __init__(self, start: int) -> None:
        super().__init__("unexpected end of input", start, start)


class InvalidCharacter(Diagnostic):
    severity = Diagnostic.Level.error

    def __init__(self, character: str, start: int) -> None:
        super().__init__(f"invalid character: {character}", start)
        self.character = character


class InvalidPair(Diagnostic):
    severity = Diagnostic.Level.error

    def __init__(self, prefix: str, suffix: str, start: int) -> None:
        super().__init__(f"invalid pair: {prefix}{suffix}", start, start + 2)
        self.prefix = prefix
        self.suffix = suffix


class InvalidRepeatCount(Diagnostic):
    severity = Diagnostic.Level.error

    def __init__(self, character: str, count: int, start: int) -> None:
        super().__init__(
            f"character {character} cannot appear {count} times in a row",
            start,
            start + count,
        )
        self.character = character
        self.count = count


class InvalidSequence(Diagnostic):
    severity = Diagnostic.Level.error

    def __init__(
        self, previous: str, following: str, start: int, end: Optional[int] = None
    ) -> None:
        super().__init__(
            f" {previous} cannot be followed by {following}",
            start,
            start + len(following) if end is None else end,
        )
        self.previous = previous
        self.following = following


class UnmarshallingError(Diagnostic):
    severity = Diagnostic.Level.error

    def __init__(self, reason: str, start: int = 0) -> None:
        super().__init__(f"Unmarshalling Error: {reason}", start)
        self.reason = reason


class UnknownConfigOption(Diagnostic):
    severity = Diagnostic.Level.warning

    def __init__(self, name: str, start: int = 0) -> None:
        super().__init__(f'Unknown configuration option: "{name}"', start)
        self.name = name
