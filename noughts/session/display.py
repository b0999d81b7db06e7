"""
Board Display - Text rendering of the grid.

One string per row (y from 0 to N-1), one character per x:
the mark's glyph or a space for an empty cell.
"""

from __future__ import annotations

from ..engine_core.errors import InvalidMove, MoveError
from ..engine_core.state import BoardState, Mark

DEFAULT_GLYPHS = {mark: mark.glyph for mark in Mark}


class BoardRenderer:
    """Renders a board, and messages naming marks, with one glyph per mark."""

    def __init__(self, glyphs: dict[Mark, str] | None = None):
        self.glyphs = dict(glyphs) if glyphs else dict(DEFAULT_GLYPHS)

    def glyph(self, mark: Mark) -> str:
        return self.glyphs[mark]

    def render(self, board: BoardState) -> list[str]:
        return [
            "".join(self.glyphs[cell] if cell is not None else " " for cell in row)
            for row in board.rows()
        ]

    def describe(self, error: MoveError) -> str:
        """Move error text using this renderer's glyphs."""
        if isinstance(error, InvalidMove):
            return (
                f"Cannot place {self.glyph(error.attempted)} "
                f"on a cell held by {self.glyph(error.occupant)}"
            )
        return str(error)
