"""
Console rendering for the Minesweeper board.
"""
from typing import Dict, List

from .board import Board

SYMBOLS: Dict[int, str] = {
    -1: ".",
    -2: "*",
    0: "/",
    9: "X",
}


def cell_symbol(value: int) -> str:
    """Map an observation value to its display character."""
    return SYMBOLS.get(value, str(value))


def render_board(board: Board, reveal_mines: bool = False) -> str:
    """
    Render board as a framed ASCII grid.

    Columns are labelled 1..N along the top (last digit only, so wide
    boards stay aligned) and rows down the left side.

    Args:
        board: Board to draw.
        reveal_mines: Draw every mine as 'X', overriding flags.

    Returns:
        Multi-line string without a trailing newline.
    """
    obs = board.get_observation(reveal_mines=reveal_mines)
    height, width = obs.shape
    label_width = len(str(height))

    header = "".join(str((col + 1) % 10) for col in range(width))
    separator = "-" * label_width + "|" + "-" * width + "|"

    lines: List[str] = [" " * label_width + "|" + header + "|", separator]
    for row in range(height):
        row_str = "".join(cell_symbol(int(val)) for val in obs[row])
        lines.append(f"{row + 1:>{label_width}}|{row_str}|")
    lines.append(separator)

    return "\n".join(lines)
