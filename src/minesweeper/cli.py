"""
Console front end for Minesweeper.

Usage:
    minesweeper [--level {easy,medium,hard}] [--seed N] [--verbose]
"""
import argparse
import logging
import random
from typing import Callable, List, Optional

from .board import DEFAULT_LEVEL, LEVELS, BoardConfig, GameState, config_for_level
from .commands import parse_move
from .errors import InvalidCommand, InvalidCoordinate
from .render import render_board
from .session import GameSession

InputFn = Callable[[], str]


def _read_line(input_fn: InputFn) -> Optional[str]:
    """Read one line, or None at end of input."""
    try:
        return input_fn()
    except EOFError:
        return None


def choose_level(input_fn: InputFn = input) -> BoardConfig:
    """Prompt for a difficulty level and return its configuration."""
    print("Select difficulty level: easy, medium, hard")
    level = _read_line(input_fn) or ""
    if level.strip().lower() not in LEVELS:
        print("Invalid level, setting to easy.")
        return LEVELS[DEFAULT_LEVEL]
    return config_for_level(level)


def play(session: GameSession, input_fn: InputFn = input) -> GameState:
    """
    Run the interactive game loop until the game ends or input runs out.

    Args:
        session: Session to play.
        input_fn: Source of player input lines.

    Returns:
        Game state when the loop stopped.
    """
    print()
    print(render_board(session.board))

    while not session.is_over:
        print("\nEnter coordinates (column row) and command (mine/free):")
        line = _read_line(input_fn)
        if line is None:
            print("\nNo more input, leaving the game.")
            break

        try:
            outcome = session.apply(parse_move(line))
        except (InvalidCommand, InvalidCoordinate) as exc:
            print(f"Invalid move: {exc}")
            continue

        if outcome.state is GameState.LOST:
            print()
            print(render_board(session.board, reveal_mines=True))
            print("\nYou stepped on a mine and failed!")
            break

        print()
        print(render_board(session.board))

        if outcome.state is GameState.WON:
            print("\nCongratulations! You found all the mines!")
            print(f"Time taken: {session.elapsed_seconds()} seconds.")

    return session.state


def main(argv: Optional[List[str]] = None, input_fn: InputFn = input) -> int:
    """Parse arguments and run one game."""
    parser = argparse.ArgumentParser(description="Play Minesweeper in the console")
    parser.add_argument(
        "--level",
        choices=sorted(LEVELS),
        default=None,
        help="Difficulty level (prompted if omitted)",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Random seed for mine placement"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging"
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.level is None:
        config = choose_level(input_fn)
    else:
        config = config_for_level(args.level)

    session = GameSession(config, rng=random.Random(args.seed))
    play(session, input_fn)
    return 0
