"""
Pytest configuration and shared fixtures.
"""
import random
import pytest
import sys
from pathlib import Path

# Add src to path for imports, and the repo root for main.py
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
sys.path.insert(0, str(Path(__file__).parent.parent))

from minegrid import BoardConfig, BoardEngine, Cell, GameSession


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def rng() -> random.Random:
    """Seeded random source for reproducible boards."""
    return random.Random(1234)


@pytest.fixture
def easy_board(rng: random.Random) -> BoardEngine:
    """Create an easy 9x9 board with 10 mines."""
    return BoardEngine.from_difficulty("easy", rng=rng)


@pytest.fixture
def center_mine_board() -> BoardEngine:
    """3x3 board with a single mine in the middle."""
    return BoardEngine(BoardConfig(3, 3, 1), mine_positions=[(1, 1)])


@pytest.fixture
def empty_board() -> BoardEngine:
    """Create a board with no mines for cascade testing."""
    return BoardEngine(BoardConfig(5, 5, 0))


@pytest.fixture
def walled_board() -> BoardEngine:
    """
    5x5 board with a wall of mines down column 2.

        . . * . .
        . . * . .
        . . * . .
        . . * . .
        . . * . .
    """
    mines = [(row, 2) for row in range(5)]
    return BoardEngine(BoardConfig(5, 5, 5), mine_positions=mines)


@pytest.fixture
def corner_mine_board() -> BoardEngine:
    """
    4x4 board with one mine in the bottom-right corner.

    Expected counts:
        0 0 0 0
        0 0 0 0
        0 0 1 1
        0 0 1 *
    """
    return BoardEngine(BoardConfig(4, 4, 1), mine_positions=[(3, 3)])


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


# ============================================================================
# Session Fixtures
# ============================================================================

@pytest.fixture
def session(rng: random.Random) -> GameSession:
    """Easy game session with a seeded board."""
    return GameSession("easy", rng=rng)
