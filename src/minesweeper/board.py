"""
Board module for Minesweeper game.

Implements the game board with lazy mine placement, flood-fill
revealing, flagging, and game state management.
"""
import logging
import random
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Dict, FrozenSet, List, Optional, Tuple

import numpy as np

from .cell import TruthState, VisibleState
from .errors import ConfigurationError, GameOverError, InvalidCoordinate

logger = logging.getLogger(__name__)

Position = Tuple[int, int]


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    NOT_STARTED = auto()
    IN_PROGRESS = auto()
    WON = auto()
    LOST = auto()


@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        num_mines: Total mines to place.
    """

    width: int = 9
    height: int = 9
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.width < 1 or self.height < 1:
            raise ConfigurationError("Board dimensions must be positive")
        if self.num_mines < 0:
            raise ConfigurationError("Number of mines cannot be negative")
        max_mines = self.width * self.height - 1
        if self.num_mines > max_mines:
            raise ConfigurationError(f"Too many mines (max {max_mines})")

    @property
    def total_cells(self) -> int:
        """Number of cells on the board."""
        return self.width * self.height


# Preset difficulty levels
EASY = BoardConfig(9, 9, 10)
MEDIUM = BoardConfig(9, 9, 20)
HARD = BoardConfig(9, 9, 30)

DEFAULT_LEVEL = "easy"
LEVELS: Dict[str, BoardConfig] = {
    "easy": EASY,
    "medium": MEDIUM,
    "hard": HARD,
}


def config_for_level(name: str) -> BoardConfig:
    """
    Look up the board configuration for a difficulty level.

    Args:
        name: Level name, matched case-insensitively.

    Returns:
        Configuration for the level, or the easy one if unknown.
    """
    key = name.strip().lower()
    if key not in LEVELS:
        logger.warning("Unknown level %r, falling back to %s", name, DEFAULT_LEVEL)
        return LEVELS[DEFAULT_LEVEL]
    return LEVELS[key]


@dataclass(frozen=True)
class RevealResult:
    """
    Outcome of a single reveal.

    Attributes:
        revealed: Cells newly revealed by this call, in visit order.
        lost: Whether the revealed cell was a mine.
        mines: Every mine position, filled in only on a loss.
    """

    revealed: Tuple[Position, ...] = ()
    lost: bool = False
    mines: FrozenSet[Position] = frozenset()


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Keeps a truth grid (mines and counts) and a visible grid (what the
    player sees) side by side. Mines are placed on the first reveal.
    """

    config: BoardConfig = field(default_factory=lambda: BoardConfig())
    rng: Optional[random.Random] = field(default=None, repr=False)
    _truth: List[List[TruthState]] = field(default_factory=list, repr=False)
    _visible: List[List[VisibleState]] = field(default_factory=list, repr=False)
    _visited: List[List[bool]] = field(default_factory=list, repr=False)
    _game_state: GameState = GameState.NOT_STARTED
    _first_move: bool = True

    def __post_init__(self) -> None:
        """Initialize the grids after dataclass creation."""
        if self.rng is None:
            self.rng = random.Random()
        self._init_grids()

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grids(self) -> None:
        """Create all-empty truth grid and all-hidden visible grid."""
        self._reset_truth()
        self._visible = [
            [VisibleState.HIDDEN for _ in range(self.config.width)]
            for _ in range(self.config.height)
        ]
        self._visited = [
            [False for _ in range(self.config.width)]
            for _ in range(self.config.height)
        ]

    def _reset_truth(self) -> None:
        self._truth = [
            [TruthState.EMPTY for _ in range(self.config.width)]
            for _ in range(self.config.height)
        ]

    def _place_mines(self, exclude: Position) -> None:
        """
        Place mines randomly, excluding a specific cell.

        Args:
            exclude: (row, col) position to keep mine-free.
        """
        positions = self._get_valid_mine_positions(exclude)
        mine_positions = self.rng.sample(positions, self.config.num_mines)
        for row, col in mine_positions:
            self._truth[row][col] = TruthState.MINE
        logger.debug(
            "Placed %d mines avoiding %s", len(mine_positions), exclude
        )

    def _get_valid_mine_positions(self, exclude: Position) -> List[Position]:
        """Get all valid positions for mine placement."""
        positions = []
        for row in range(self.config.height):
            for col in range(self.config.width):
                if (row, col) != exclude:
                    positions.append((row, col))
        return positions

    def _calculate_adjacent_mines(self) -> None:
        """Calculate adjacent mine counts for all non-mine cells."""
        for row in range(self.config.height):
            for col in range(self.config.width):
                if not self._truth[row][col].is_mine:
                    count = self._count_adjacent_mines(row, col)
                    self._truth[row][col] = TruthState.from_count(count)

    def _count_adjacent_mines(self, row: int, col: int) -> int:
        """Count mines adjacent to a specific cell."""
        count = 0
        for neighbor_row, neighbor_col in self._get_neighbors(row, col):
            if self._truth[neighbor_row][neighbor_col].is_mine:
                count += 1
        return count

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def _get_neighbors(self, row: int, col: int) -> List[Position]:
        """
        Get valid neighboring cell positions.

        Neighbors are scanned row by row from the top-left, and cells
        off the board are skipped (no wraparound).

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for valid neighbors.
        """
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self._is_valid_position(new_row, new_col):
                    neighbors.append((new_row, new_col))
        return neighbors

    def _is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.config.height and 0 <= col < self.config.width

    def _check_position(self, row: int, col: int) -> None:
        if not self._is_valid_position(row, col):
            raise InvalidCoordinate(row, col)

    def _check_not_over(self) -> None:
        if self._game_state in (GameState.WON, GameState.LOST):
            raise GameOverError(f"Game already {self._game_state.name.lower()}")

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self, row: int, col: int) -> RevealResult:
        """
        Reveal a cell at the given position.

        On the first reveal, places mines avoiding this cell. A flag on
        the cell is cleared before revealing. Empty cells (0 adjacent
        mines) open their neighbors; numbered cells stop the cascade.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            RevealResult with the newly revealed cells, or the mine
            positions if a mine was hit.

        Raises:
            InvalidCoordinate: If the position is off the board.
            GameOverError: If the game has already ended.
        """
        self._check_position(row, col)
        self._check_not_over()

        if self._first_move:
            self._handle_first_move(row, col)

        if self._truth[row][col].is_mine:
            self._game_state = GameState.LOST
            logger.debug("Mine hit at %s", (row, col))
            return RevealResult(lost=True, mines=self.mine_positions())

        revealed = self._flood_fill(row, col)
        logger.debug("Reveal at %s opened %d cells", (row, col), len(revealed))
        self._update_game_state()
        return RevealResult(revealed=tuple(revealed))

    def _handle_first_move(self, row: int, col: int) -> None:
        """Handle first reveal: place mines and calculate counts."""
        self._reset_truth()
        self._place_mines((row, col))
        self._calculate_adjacent_mines()
        self._first_move = False
        self._game_state = GameState.IN_PROGRESS

    def _flood_fill(self, row: int, col: int) -> List[Position]:
        """
        Reveal a cell and cascade through empty neighbors.

        Uses an explicit stack so large boards cannot exhaust the call
        stack. A cell is marked visited and revealed in the same step.

        Returns:
            Cells revealed, in visit order.
        """
        revealed = []
        stack = [(row, col)]
        while stack:
            current_row, current_col = stack.pop()
            if self._visited[current_row][current_col]:
                continue
            self._visited[current_row][current_col] = True
            self._visible[current_row][current_col] = VisibleState.REVEALED
            revealed.append((current_row, current_col))

            if not self._truth[current_row][current_col].is_empty:
                continue
            # Reversed so neighbors pop in scan order
            for neighbor in reversed(self._get_neighbors(current_row, current_col)):
                if not self._visited[neighbor[0]][neighbor[1]]:
                    stack.append(neighbor)
        return revealed

    def toggle_flag(self, row: int, col: int) -> bool:
        """
        Toggle flag on a cell.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            True if flag was toggled, False if the cell is revealed.

        Raises:
            InvalidCoordinate: If the position is off the board.
            GameOverError: If the game has already ended.
        """
        self._check_position(row, col)
        self._check_not_over()

        current = self._visible[row][col]
        new_state = current.toggled()
        if new_state is current:
            return False
        self._visible[row][col] = new_state
        self._update_game_state()
        return True

    def _update_game_state(self) -> None:
        """Move to WON once the win condition holds."""
        if self.has_won():
            self._game_state = GameState.WON
            logger.debug("Board solved")

    def has_won(self) -> bool:
        """
        Check the win condition.

        Every mine must be flagged and every other cell revealed. Always
        False before mines are placed.
        """
        if self._first_move:
            return False
        for row in range(self.config.height):
            for col in range(self.config.width):
                visible = self._visible[row][col]
                if self._truth[row][col].is_mine:
                    if visible is not VisibleState.FLAGGED:
                        return False
                elif visible is not VisibleState.REVEALED:
                    return False
        return True

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def game_state(self) -> GameState:
        """Get current game state."""
        return self._game_state

    @property
    def first_move(self) -> bool:
        """Check if mines are still waiting for the first reveal."""
        return self._first_move

    @property
    def is_playing(self) -> bool:
        """Check if moves are still accepted."""
        return self._game_state in (GameState.NOT_STARTED, GameState.IN_PROGRESS)

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self._game_state == GameState.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self._game_state == GameState.LOST

    def truth_at(self, row: int, col: int) -> TruthState:
        """Get the actual content of a cell."""
        self._check_position(row, col)
        return self._truth[row][col]

    def visible_at(self, row: int, col: int) -> VisibleState:
        """Get the player-facing state of a cell."""
        self._check_position(row, col)
        return self._visible[row][col]

    def mine_positions(self) -> FrozenSet[Position]:
        """Get every mine position (empty before the first reveal)."""
        return frozenset(
            (row, col)
            for row in range(self.config.height)
            for col in range(self.config.width)
            if self._truth[row][col].is_mine
        )

    def get_observation(self, reveal_mines: bool = False) -> np.ndarray:
        """
        Get board state as numpy array.

        Args:
            reveal_mines: Show every mine regardless of its visible state.

        Returns:
            2D numpy array where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = mine (only with reveal_mines)
        """
        obs = np.zeros((self.config.height, self.config.width), dtype=np.int8)
        for row in range(self.config.height):
            for col in range(self.config.width):
                truth = self._truth[row][col]
                if reveal_mines and truth.is_mine:
                    obs[row, col] = TruthState.MINE.value
                else:
                    obs[row, col] = self._visible[row][col].to_observation(truth)
        return obs
