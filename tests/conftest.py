"""
Pytest configuration and shared fixtures.
"""
import random
from typing import Iterable, List, Tuple

import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import Board, BoardConfig, GameSession


# ============================================================================
# Deterministic Mine Placement
# ============================================================================

class PresetRandom(random.Random):
    """Random source whose sample() returns a fixed list of mines."""

    def __init__(self, mines: Iterable[Tuple[int, int]]) -> None:
        super().__init__(0)
        self.mines: List[Tuple[int, int]] = list(mines)

    def sample(self, population, k, **kwargs):
        assert len(self.mines) == k
        for mine in self.mines:
            assert mine in population
        return list(self.mines)


def make_board(
    width: int, height: int, mines: Iterable[Tuple[int, int]]
) -> Board:
    """Build a board whose first reveal places exactly the given mines."""
    mines = list(mines)
    return Board(BoardConfig(width, height, len(mines)), PresetRandom(mines))


class FakeClock:
    """Manually advanced clock."""

    def __init__(self, now: float = 100.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def board_factory():
    """Factory building boards with preset mine positions."""
    return make_board


@pytest.fixture
def preset_random():
    """Factory building random sources with preset mine positions."""
    return PresetRandom


@pytest.fixture
def default_board() -> Board:
    """Create a default 9x9 board with 10 mines."""
    return Board()


@pytest.fixture
def seeded_board() -> Board:
    """Create a default board with reproducible mine placement."""
    return Board(BoardConfig(9, 9, 10), random.Random(1234))


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for cascade testing."""
    return Board(BoardConfig(5, 5, 0))


@pytest.fixture
def corner_mine_board() -> Board:
    """
    3x3 board with a single mine in the bottom-right corner.

    Truth grid after the first reveal:
        / / /
        / 1 1
        / 1 X
    """
    return make_board(3, 3, [(2, 2)])


@pytest.fixture
def ten_mine_board() -> Board:
    """9x9 board with 10 known mines, none near the top-left corner."""
    mines = [
        (0, 8), (1, 6), (2, 8), (3, 4), (4, 7),
        (5, 2), (6, 6), (7, 0), (8, 4), (8, 8),
    ]
    return make_board(9, 9, mines)


# ============================================================================
# Session Fixtures
# ============================================================================

@pytest.fixture
def fake_clock() -> FakeClock:
    """Clock that only moves when told to."""
    return FakeClock()


@pytest.fixture
def corner_mine_session(fake_clock: FakeClock) -> GameSession:
    """Session over the corner-mine layout with a fake clock."""
    return GameSession(
        BoardConfig(3, 3, 1), rng=PresetRandom([(2, 2)]), clock=fake_clock
    )


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, 10)
