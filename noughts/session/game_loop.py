"""
Game Loop - The turn-based text protocol.

Each iteration:
1. Prompt the side to move and pull a line from the input source
2. Parse it into a command
3. Quit, or place the current side's mark on the board
4. Flip sides while the game is ongoing, stop on win or draw

Bad input and illegal moves are reported and the same side is asked
again. Running out of input ends the game.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable

from ..engine_core.action import Command, CommandType, parse_move
from ..engine_core.errors import MoveError, ParseMoveError
from ..engine_core.state import BoardState, GameResult, Mark
from .display import BoardRenderer
from .input_source import InputSource

logger = logging.getLogger(__name__)

BANNER = "Let's play tic tac toe!"


class LoopState(Enum):
    """State of the game loop."""
    AWAITING_INPUT = "awaiting_input"
    QUIT = "quit"
    WON = "won"
    DRAW = "draw"
    INPUT_FAILURE = "input_failure"

    @property
    def is_terminal(self) -> bool:
        return self is not LoopState.AWAITING_INPUT


@dataclass
class TurnResult:
    """
    Result of one loop iteration.

    mark is the side that was asked to move. A turn is consumed only
    when a placement succeeded (outcome is set).
    """
    loop_state: LoopState
    mark: Mark
    raw_line: str | None = None
    command: Command | None = None
    outcome: GameResult | None = None
    parse_error: ParseMoveError | None = None
    move_error: MoveError | None = None

    # Text emitted during the iteration
    messages: list[str] = field(default_factory=list)

    @property
    def turn_consumed(self) -> bool:
        return self.outcome is not None


@dataclass
class GameReport:
    """Summary of a finished game."""
    final_state: LoopState
    winner: Mark | None = None
    outcomes: list[GameResult] = field(default_factory=list)
    turns: list[TurnResult] = field(default_factory=list)

    @property
    def lines_read(self) -> int:
        return sum(1 for turn in self.turns if turn.raw_line is not None)


class GameLoop:
    """
    The main game loop driver.

    Usage:
        loop = GameLoop(BoardState(3), ScriptedInputSource(["0,0", "q"]))
        report = loop.run()
        report.final_state  # LoopState.QUIT

    Noughts always move first.
    """

    def __init__(
        self,
        board: BoardState,
        input_source: InputSource,
        renderer: BoardRenderer | None = None,
        output: Callable[[str], None] = print,
    ):
        self.board = board
        self.input_source = input_source
        self.renderer = renderer or BoardRenderer()
        self.output = output

        self.state = LoopState.AWAITING_INPUT
        self.current_mark = Mark.NOUGHT
        self.winner: Mark | None = None

    def run(self) -> GameReport:
        """Play until a terminal state is reached."""
        self.output(BANNER)
        report = GameReport(final_state=self.state)

        while not self.state.is_terminal:
            turn = self.step()
            report.turns.append(turn)
            if turn.outcome is not None:
                report.outcomes.append(turn.outcome)

        report.final_state = self.state
        report.winner = self.winner
        logger.info("Game finished: %s", self.state.value)
        return report

    def step(self) -> TurnResult:
        """Run a single iteration of the loop."""
        if self.state.is_terminal:
            raise RuntimeError(f"Game is over ({self.state.value}), no more turns")

        mark = self.current_mark
        turn = TurnResult(loop_state=self.state, mark=mark)
        self._emit(
            turn,
            f"{self.renderer.glyph(mark)} play, enter x,y coordinate to pick tile or Q to quit!",
        )

        raw_line = self.input_source.read()
        if raw_line is None:
            self._emit(turn, "Failed to read input")
            return self._finish(turn, LoopState.INPUT_FAILURE)
        turn.raw_line = raw_line

        parsed = parse_move(raw_line)
        if not parsed.success:
            logger.debug("Rejected input %r: %s", raw_line, parsed.error)
            turn.parse_error = parsed.error
            self._emit(turn, str(parsed.error))
            return turn

        turn.command = parsed.command
        if parsed.command.command_type == CommandType.QUIT:
            self._emit(turn, "Quitting!")
            return self._finish(turn, LoopState.QUIT)

        result = self.board.place(parsed.command.coordinate, mark)
        if not result.success:
            logger.debug("Illegal move by %s: %s", mark.name, result.error)
            turn.move_error = result.error
            self._emit(turn, f"{self.renderer.describe(result.error)}, try again")
            return turn

        turn.outcome = result.outcome
        for row in self.renderer.render(self.board):
            self._emit(turn, row)

        if result.outcome == GameResult.ONGOING:
            self.current_mark = mark.opponent
            logger.debug("Turn passes to %s", self.current_mark.name)
            return turn

        self._emit(turn, str(result.outcome))
        if result.outcome == GameResult.DRAW:
            return self._finish(turn, LoopState.DRAW)
        self.winner = result.outcome.winner
        return self._finish(turn, LoopState.WON)

    def _finish(self, turn: TurnResult, state: LoopState) -> TurnResult:
        self.state = state
        turn.loop_state = state
        return turn

    def _emit(self, turn: TurnResult, message: str):
        turn.messages.append(message)
        self.output(message)
