"""
Pytest fixtures for Noughts tests.
"""

import pytest

from ..engine_core.state import BoardState, Coordinate, Mark
from ..session import GameLoop, ScriptedInputSource


@pytest.fixture
def board() -> BoardState:
    """An empty 3x3 board."""
    return BoardState(3)


@pytest.fixture
def output_lines() -> list[str]:
    """Collects everything the game loop prints."""
    return []


@pytest.fixture
def make_loop(output_lines):
    """Build a game loop over a scripted source that records its output."""

    def _make(moves: list[str], dimension: int = 3, **board_kwargs) -> GameLoop:
        return GameLoop(
            BoardState(dimension, **board_kwargs),
            ScriptedInputSource(moves),
            output=output_lines.append,
        )

    return _make


def fill(board: BoardState, placements: list[tuple[int, int, Mark]]):
    """Place a sequence of (x, y, mark) and return the last result."""
    result = None
    for x, y, mark in placements:
        result = board.place(Coordinate(x, y), mark)
        assert result.success, result.error
    return result
