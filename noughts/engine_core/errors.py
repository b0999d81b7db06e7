"""
Error Values - The two failure domains of the engine.

Move legality (raised by the board):
- InvalidCoordinate: target lies outside the board
- InvalidMove: target cell already holds a mark

Input parsing (raised by the move parser):
- FormatError: line is not "x,y" or a quit command
- CoordinateError: a field is not an unsigned integer

These are plain values carried inside result objects, not exceptions.
Both families are closed: nothing else may appear in them.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from .state import Coordinate, Mark


# =============================================================================
# Move legality
# =============================================================================

@dataclass(frozen=True)
class InvalidCoordinate:
    """The coordinate falls outside the board."""
    coordinate: Coordinate

    def __str__(self) -> str:
        return f"{self.coordinate} is an invalid coordinate"


@dataclass(frozen=True)
class InvalidMove:
    """
    The target cell is already occupied.

    Carries both the mark that tried to move and the mark
    already sitting in the cell.
    """
    attempted: Mark
    occupant: Mark

    def __str__(self) -> str:
        return f"Cannot place {self.attempted.glyph} on a cell held by {self.occupant.glyph}"


MoveError = Union[InvalidCoordinate, InvalidMove]


# =============================================================================
# Input parsing
# =============================================================================

class IntErrorKind(Enum):
    """Why a field failed unsigned integer parsing."""
    EMPTY = "cannot parse integer from empty string"
    INVALID_DIGIT = "invalid digit found in string"
    POS_OVERFLOW = "number too large to fit in target type"


@dataclass(frozen=True)
class IntParseError:
    """Underlying numeric parse failure for one field."""
    kind: IntErrorKind
    text: str

    def __str__(self) -> str:
        return self.kind.value


@dataclass(frozen=True)
class FormatError:
    """Wrong number of comma separated fields."""

    def __str__(self) -> str:
        return "Invalid format, should be x,y or Q to quit"


@dataclass(frozen=True)
class CoordinateError:
    """A field could not be read as a coordinate."""
    cause: IntParseError

    def __str__(self) -> str:
        return f"Invalid coordinate due to {self.cause}"


ParseMoveError = Union[FormatError, CoordinateError]
