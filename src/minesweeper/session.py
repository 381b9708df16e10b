"""
Game session module for Minesweeper.

Binds a board to player moves and tracks how long the game has run.
"""
import logging
import random
import time
from dataclasses import dataclass
from typing import Callable, Optional

from .board import Board, BoardConfig, GameState, RevealResult
from .commands import Command, Move

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TurnOutcome:
    """
    Result of applying one move.

    Attributes:
        command: Command that was applied.
        state: Game state after the move.
        reveal: Reveal result, for FREE moves only.
        flag_toggled: Whether a MINE move changed the cell.
    """

    command: Command
    state: GameState
    reveal: Optional[RevealResult] = None
    flag_toggled: bool = False


class GameSession:
    """
    One game from first move to win or loss.

    The timer starts on the first reveal, matching the moment mines
    are placed.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        rng: Optional[random.Random] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """
        Initialize the session.

        Args:
            config: Board configuration (default: 9x9 with 10 mines).
            rng: Random source for mine placement.
            clock: Function returning the current time in seconds.
        """
        self.config = config or BoardConfig()
        self.board = Board(self.config, rng)
        self._clock = clock
        self._start_time: Optional[float] = None

    def apply(self, move: Move) -> TurnOutcome:
        """
        Apply a move to the board.

        Args:
            move: Move with 0-based coordinates.

        Returns:
            TurnOutcome describing what happened.

        Raises:
            InvalidCoordinate: If the move is off the board.
            GameOverError: If the game has already ended.
        """
        if move.command is Command.MINE:
            toggled = self.board.toggle_flag(move.row, move.col)
            return TurnOutcome(
                command=move.command,
                state=self.board.game_state,
                flag_toggled=toggled,
            )

        starting = self.board.first_move
        result = self.board.reveal(move.row, move.col)
        if starting:
            self._start_time = self._clock()
            logger.debug("Timer started")
        return TurnOutcome(
            command=move.command,
            state=self.board.game_state,
            reveal=result,
        )

    def elapsed_seconds(self) -> int:
        """Whole seconds since the first reveal (0 before it)."""
        if self._start_time is None:
            return 0
        return int(self._clock() - self._start_time)

    @property
    def state(self) -> GameState:
        """Get current game state."""
        return self.board.game_state

    @property
    def is_over(self) -> bool:
        """Check if the game has been won or lost."""
        return not self.board.is_playing
