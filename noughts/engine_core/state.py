"""
Board State - The N×N grid and its outcome detection.

Design principles:
- Single mutation point: place() is the only way a cell changes
- Failed placements leave the board untouched
- Outcome is derived after each placement, never stored
- Outcome detection only scans lines through the placed cell
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Iterator

from .errors import InvalidCoordinate, InvalidMove, MoveError

logger = logging.getLogger(__name__)


class Mark(Enum):
    """The two sides. Values are the default display glyphs."""
    NOUGHT = "O"
    CROSS = "X"

    @property
    def glyph(self) -> str:
        return self.value

    @property
    def opponent(self) -> Mark:
        return Mark.CROSS if self is Mark.NOUGHT else Mark.NOUGHT


class GameResult(Enum):
    """Outcome of the game after a placement."""
    ONGOING = "ongoing"
    DRAW = "draw"
    NOUGHT_WIN = "nought_win"
    CROSS_WIN = "cross_win"

    @classmethod
    def win_for(cls, mark: Mark) -> GameResult:
        return cls.NOUGHT_WIN if mark is Mark.NOUGHT else cls.CROSS_WIN

    @property
    def winner(self) -> Mark | None:
        if self is GameResult.NOUGHT_WIN:
            return Mark.NOUGHT
        if self is GameResult.CROSS_WIN:
            return Mark.CROSS
        return None

    @property
    def is_terminal(self) -> bool:
        return self is not GameResult.ONGOING

    def __str__(self) -> str:
        return _RESULT_TEXT[self]


_RESULT_TEXT = {
    GameResult.ONGOING: "Ongoing",
    GameResult.DRAW: "Draw!",
    GameResult.NOUGHT_WIN: "Noughts win!",
    GameResult.CROSS_WIN: "Crosses win!",
}


@dataclass(frozen=True)
class Coordinate:
    """
    A cell address, zero-indexed.

    Validity is relative to a board; only negatives are rejected here.
    """
    x: int
    y: int

    def __post_init__(self):
        if self.x < 0 or self.y < 0:
            raise ValueError(f"Coordinate components must be non-negative, got ({self.x}, {self.y})")

    def __str__(self) -> str:
        return f"{self.x},{self.y}"


@dataclass
class MoveResult:
    """
    Result of a placement attempt.

    Exactly one of outcome/error is set.
    """
    success: bool
    outcome: GameResult | None = None
    error: MoveError | None = None

    @classmethod
    def failure(cls, error: MoveError) -> MoveResult:
        """Create a failure result."""
        return cls(success=False, error=error)

    @classmethod
    def with_outcome(cls, outcome: GameResult) -> MoveResult:
        """Create a success result carrying the new outcome."""
        return cls(success=True, outcome=outcome)


@dataclass
class BoardState:
    """
    An N×N tic-tac-toe board.

    Usage:
        board = BoardState(3)
        result = board.place(Coordinate(0, 0), Mark.NOUGHT)
        if not result.success:
            print(result.error)
        elif result.outcome.is_terminal:
            print(result.outcome)

    With legacy_draw_threshold the draw is declared once N² - 1 cells
    are filled instead of when the board is full.
    """
    dimension: int
    legacy_draw_threshold: bool = False
    moves_made: int = field(default=0, init=False)
    _cells: list[Mark | None] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self):
        if self.dimension < 1:
            raise ValueError(f"Board dimension must be positive, got {self.dimension}")
        self._cells = [None] * (self.dimension * self.dimension)

    @property
    def max_moves(self) -> int:
        """Number of placements after which the game is drawn."""
        total = self.dimension * self.dimension
        return total - 1 if self.legacy_draw_threshold else total

    @property
    def occupied_count(self) -> int:
        return sum(1 for cell in self._cells if cell is not None)

    def is_valid(self, pos: Coordinate) -> bool:
        return pos.x < self.dimension and pos.y < self.dimension

    def get(self, pos: Coordinate) -> Mark | None:
        """Mark at pos, or None when empty. pos must be on the board."""
        if not self.is_valid(pos):
            raise IndexError(f"{pos} is outside a {self.dimension}x{self.dimension} board")
        return self._cells[self._index(pos)]

    def is_empty(self, pos: Coordinate) -> bool:
        return self.get(pos) is None

    def empty_cells(self) -> list[Coordinate]:
        return [pos for pos in self.coordinates() if self._cells[self._index(pos)] is None]

    def coordinates(self) -> Iterator[Coordinate]:
        """All cells in row-major order."""
        for y in range(self.dimension):
            for x in range(self.dimension):
                yield Coordinate(x, y)

    def rows(self) -> list[list[Mark | None]]:
        """Cell contents, one list per y."""
        n = self.dimension
        return [self._cells[y * n:(y + 1) * n] for y in range(n)]

    def place(self, pos: Coordinate, mark: Mark) -> MoveResult:
        """
        Put mark at pos and compute the resulting outcome.

        Returns a failure result (board unchanged) when pos is off the
        board or already occupied.
        """
        if not self.is_valid(pos):
            return MoveResult.failure(InvalidCoordinate(pos))

        index = self._index(pos)
        occupant = self._cells[index]
        if occupant is not None:
            return MoveResult.failure(InvalidMove(attempted=mark, occupant=occupant))

        self._cells[index] = mark
        self.moves_made += 1

        outcome = self._determine_result(pos, mark)
        logger.debug("%s placed at %s (move %d): %s", mark.name, pos, self.moves_made, outcome.value)
        return MoveResult.with_outcome(outcome)

    # -------------------------------------------------------------------------
    # Outcome detection
    # -------------------------------------------------------------------------

    def _index(self, pos: Coordinate) -> int:
        return pos.x + pos.y * self.dimension

    def _line_complete(self, mark: Mark, coord_for: Callable[[int], Coordinate]) -> bool:
        """True when every cell coord_for(0..N-1) holds mark."""
        for i in range(self.dimension):
            if self._cells[self._index(coord_for(i))] is not mark:
                return False
        return True

    def _determine_result(self, pos: Coordinate, mark: Mark) -> GameResult:
        n = self.dimension
        lines: list[Callable[[int], Coordinate]] = [
            lambda y: Coordinate(pos.x, y),  # column
            lambda x: Coordinate(x, pos.y),  # row
        ]
        if pos.x == pos.y:
            lines.append(lambda i: Coordinate(i, i))
        if pos.x + pos.y == n - 1:
            lines.append(lambda i: Coordinate(i, n - 1 - i))

        for coord_for in lines:
            if self._line_complete(mark, coord_for):
                return GameResult.win_for(mark)

        if self.moves_made == self.max_moves:
            return GameResult.DRAW

        return GameResult.ONGOING
