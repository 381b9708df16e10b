"""
Error types for the Minesweeper engine.

Every error is raised before any grid is mutated, so a rejected
command leaves the game exactly as it was.
"""


class MinesweeperError(Exception):
    """Base class for all game errors."""


class ConfigurationError(MinesweeperError, ValueError):
    """Board dimensions or mine count are invalid."""


class InvalidCoordinate(MinesweeperError, ValueError):
    """Row or column lies outside the board."""

    def __init__(self, row: int, col: int) -> None:
        super().__init__(f"Coordinates out of range: row {row}, col {col}")
        self.row = row
        self.col = col


class InvalidCommand(MinesweeperError, ValueError):
    """Turn input could not be understood."""


class GameOverError(MinesweeperError):
    """A move was attempted after the game was won or lost."""
