"""
Move Parser - Turns a raw input line into a command.

Accepted lines:
- "q" or "Q": quit
- "<x>,<y>": place at the coordinate, x and y unsigned base-10 integers

Only the whole line is stripped. Fields keep any inner whitespace
and fail integer parsing if they have it.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum

from .errors import (
    CoordinateError, FormatError, IntErrorKind, IntParseError, ParseMoveError,
)
from .state import Coordinate

# Fields are read as unsigned 64-bit values
MAX_FIELD_VALUE = 2**64 - 1

_DIGITS = frozenset("0123456789")


class CommandType(Enum):
    """Types of parsed commands."""
    QUIT = "quit"
    PLACE = "place"


@dataclass(frozen=True)
class Command:
    """A parsed input line."""
    command_type: CommandType
    coordinate: Coordinate | None = None

    @classmethod
    def quit(cls) -> Command:
        """Factory for quit command."""
        return cls(command_type=CommandType.QUIT)

    @classmethod
    def place(cls, coordinate: Coordinate) -> Command:
        """Factory for place command."""
        return cls(command_type=CommandType.PLACE, coordinate=coordinate)


@dataclass
class ParseResult:
    """Result of parsing one line: a command or a parse error."""
    success: bool
    command: Command | None = None
    error: ParseMoveError | None = None

    @classmethod
    def failure(cls, error: ParseMoveError) -> ParseResult:
        return cls(success=False, error=error)

    @classmethod
    def with_command(cls, command: Command) -> ParseResult:
        return cls(success=True, command=command)


def parse_unsigned(text: str) -> int | IntParseError:
    """
    Parse text as an unsigned integer.

    An optional leading '+' is allowed. Returns the value, or an
    IntParseError describing why it failed.
    """
    if not text:
        return IntParseError(IntErrorKind.EMPTY, text)

    digits = text[1:] if text[0] == "+" else text
    if not digits or not all(c in _DIGITS for c in digits):
        return IntParseError(IntErrorKind.INVALID_DIGIT, text)

    significant = digits.lstrip("0") or "0"
    if len(significant) > len(str(MAX_FIELD_VALUE)):
        return IntParseError(IntErrorKind.POS_OVERFLOW, text)

    value = int(significant)
    if value > MAX_FIELD_VALUE:
        return IntParseError(IntErrorKind.POS_OVERFLOW, text)
    return value


def parse_move(raw_line: str) -> ParseResult:
    """Parse a raw input line into a quit or place command."""
    line = raw_line.strip()
    if line in ("q", "Q"):
        return ParseResult.with_command(Command.quit())

    fields = line.split(",")
    if len(fields) != 2:
        return ParseResult.failure(FormatError())

    values = []
    for text in fields:
        parsed = parse_unsigned(text)
        if isinstance(parsed, IntParseError):
            return ParseResult.failure(CoordinateError(parsed))
        values.append(parsed)

    x, y = values
    return ParseResult.with_command(Command.place(Coordinate(x, y)))
