"""
Game Settings - Validated configuration for a game.

Settings come from the command line and are checked by pydantic
before any board is built.
"""

import logging
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from .engine_core.state import BoardState, Mark


class GameSettings(BaseModel):
    """Settings for one game."""
    dimension: int = Field(3, ge=1, description="Board side length N")
    legacy_draw: bool = Field(
        False,
        description="Declare a draw once N*N - 1 cells are filled",
    )
    nought_glyph: str = Field("O", min_length=1, max_length=1)
    cross_glyph: str = Field("X", min_length=1, max_length=1)
    log_level: str = "WARNING"
    log_file: Optional[str] = None

    model_config = {"frozen": True}

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value}")
        return level

    @model_validator(mode="after")
    def _distinct_glyphs(self):
        if self.nought_glyph == self.cross_glyph:
            raise ValueError("nought_glyph and cross_glyph must differ")
        return self

    def glyphs(self) -> dict[Mark, str]:
        return {Mark.NOUGHT: self.nought_glyph, Mark.CROSS: self.cross_glyph}

    def new_board(self) -> BoardState:
        return BoardState(self.dimension, legacy_draw_threshold=self.legacy_draw)
