"""
Session Module - Runs one game from start to finish.

A session is:
- A fresh board, created at game start
- An input source supplying raw lines
- The game loop that drives turns until quit, win, draw or end of input

Sessions are EPHEMERAL: nothing is persisted once the game ends.
"""

from .display import BoardRenderer
from .game_loop import GameLoop, GameReport, LoopState, TurnResult
from .input_source import InputSource, InteractiveInputSource, ScriptedInputSource

__all__ = [
    "BoardRenderer",
    "GameLoop",
    "GameReport",
    "LoopState",
    "TurnResult",
    "InputSource",
    "InteractiveInputSource",
    "ScriptedInputSource",
]
