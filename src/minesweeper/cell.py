"""
Cell state module for Minesweeper.

Defines the two per-cell enumerations the board keeps in parallel
grids: what a cell really contains and what the player can see.
"""
from enum import Enum, auto


# ============================================================================
# Truth States
# ============================================================================

class TruthState(Enum):
    """
    Actual content of a cell.

    Values 0-8 are adjacent mine counts (EMPTY is a count of zero),
    MINE is kept apart so a count can never be confused with a mine.
    """

    EMPTY = 0
    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    MINE = 9

    @classmethod
    def from_count(cls, count: int) -> "TruthState":
        """
        Get the state for an adjacent mine count.

        Args:
            count: Number of neighboring mines (0-8).

        Returns:
            Matching TruthState.

        Raises:
            ValueError: If count is outside 0-8.
        """
        if not 0 <= count <= 8:
            raise ValueError(f"Adjacent count must be 0-8, got {count}")
        return cls(count)

    @property
    def is_mine(self) -> bool:
        """Check if cell holds a mine."""
        return self is TruthState.MINE

    @property
    def is_empty(self) -> bool:
        """Check if cell has no neighboring mines."""
        return self is TruthState.EMPTY

    @property
    def adjacent_mines(self) -> int:
        """Adjacent mine count (0 for a mine cell)."""
        if self.is_mine:
            return 0
        return self.value


# ============================================================================
# Visible States
# ============================================================================

class VisibleState(Enum):
    """Player-facing state of a cell."""

    HIDDEN = auto()
    FLAGGED = auto()
    REVEALED = auto()

    def toggled(self) -> "VisibleState":
        """
        Get the state after a flag toggle.

        Returns:
            FLAGGED for a hidden cell, HIDDEN for a flagged one,
            and REVEALED unchanged.
        """
        if self is VisibleState.HIDDEN:
            return VisibleState.FLAGGED
        if self is VisibleState.FLAGGED:
            return VisibleState.HIDDEN
        return self

    def to_observation(self, truth: TruthState) -> int:
        """
        Convert cell to observation value.

        Args:
            truth: Actual content of the same cell.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Revealed cell with adjacent mine count
        """
        if self is VisibleState.HIDDEN:
            return -1
        if self is VisibleState.FLAGGED:
            return -2
        return truth.adjacent_mines
