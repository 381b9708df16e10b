"""
Turn input parsing for the console game.

A turn is typed as "<column> <row> <command>" with 1-based
coordinates and is converted to a 0-based Move for the board.
"""
from dataclasses import dataclass
from enum import Enum

from .errors import InvalidCommand


class Command(Enum):
    """Actions a player can take on a cell."""

    MINE = "mine"
    FREE = "free"

    @classmethod
    def parse(cls, text: str) -> "Command":
        """
        Parse a command word.

        Raises:
            InvalidCommand: If the word is not "mine" or "free".
        """
        try:
            return cls(text.strip().lower())
        except ValueError:
            raise InvalidCommand(
                f"Unknown command {text!r} (expected mine or free)"
            ) from None


@dataclass(frozen=True)
class Move:
    """
    A single player move.

    Attributes:
        row: 0-based row index.
        col: 0-based column index.
        command: What to do with the cell.
    """

    row: int
    col: int
    command: Command


def parse_move(line: str) -> Move:
    """
    Parse one line of player input.

    Args:
        line: Text such as "3 5 free" (column, row, command).

    Returns:
        Move with 0-based coordinates.

    Raises:
        InvalidCommand: If the line is malformed.
    """
    parts = line.split()
    if len(parts) != 3:
        raise InvalidCommand("Expected: <column> <row> <mine|free>")

    col_text, row_text, command_text = parts
    try:
        col = int(col_text)
        row = int(row_text)
    except ValueError:
        raise InvalidCommand(
            f"Coordinates must be integers, got {col_text!r} {row_text!r}"
        ) from None

    return Move(row=row - 1, col=col - 1, command=Command.parse(command_text))
