"""
Console Minesweeper.

Provides the board engine, turn parsing, rendering and the game session
used by the console front end.
"""
from .cell import TruthState, VisibleState
from .board import (
    Board,
    BoardConfig,
    GameState,
    RevealResult,
    EASY,
    MEDIUM,
    HARD,
    LEVELS,
    config_for_level,
)
from .commands import Command, Move, parse_move
from .errors import (
    MinesweeperError,
    ConfigurationError,
    InvalidCoordinate,
    InvalidCommand,
    GameOverError,
)
from .render import render_board
from .session import GameSession, TurnOutcome

__all__ = [
    "TruthState",
    "VisibleState",
    "Board",
    "BoardConfig",
    "GameState",
    "RevealResult",
    "EASY",
    "MEDIUM",
    "HARD",
    "LEVELS",
    "config_for_level",
    "Command",
    "Move",
    "parse_move",
    "MinesweeperError",
    "ConfigurationError",
    "InvalidCoordinate",
    "InvalidCommand",
    "GameOverError",
    "render_board",
    "GameSession",
    "TurnOutcome",
]
