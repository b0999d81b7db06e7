"""
Engine Core - Board state, outcome detection and move parsing.

The engine is the rules side of the game:
1. Parses raw lines into commands
2. Validates placements against the board
3. Detects win/draw/ongoing after every placement
"""

from .state import BoardState, Coordinate, GameResult, Mark, MoveResult
from .action import Command, CommandType, ParseResult, parse_move
from .errors import (
    CoordinateError,
    FormatError,
    IntErrorKind,
    IntParseError,
    InvalidCoordinate,
    InvalidMove,
    MoveError,
    ParseMoveError,
)

__all__ = [
    "BoardState",
    "Coordinate",
    "GameResult",
    "Mark",
    "MoveResult",
    "Command",
    "CommandType",
    "ParseResult",
    "parse_move",
    "CoordinateError",
    "FormatError",
    "IntErrorKind",
    "IntParseError",
    "InvalidCoordinate",
    "InvalidMove",
    "MoveError",
    "ParseMoveError",
]
