"""
Pytest configuration and shared fixtures.
"""
import random
import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import Board, BoardConfig, Cell, CellContent, Game, GameSession


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def rng() -> random.Random:
    """Seeded random source for reproducible layouts."""
    return random.Random(1234)


@pytest.fixture
def default_board(rng: random.Random) -> Board:
    """Create a default 9x9 board with 10 mines."""
    return Board(rng=rng)


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for cascade testing."""
    return Board(BoardConfig(5, 5, 0))


@pytest.fixture
def center_mine_board() -> Board:
    """3x3 board with its only mine in the middle."""
    return Board(BoardConfig(3, 3, 1), mine_positions=[(1, 1)])


# ============================================================================
# Game Fixtures
# ============================================================================

@pytest.fixture
def empty_game() -> Game:
    """5x5 game without mines."""
    return Game(5, 5, 0)


@pytest.fixture
def center_mine_game() -> Game:
    """3x3 game with a single mine at the center."""
    return Game(3, 3, 1, mine_positions=[(1, 1)])


@pytest.fixture
def corridor_game() -> Game:
    """
    5x5 game with a wall of mines in column 2.

    Columns 0 and 4 are empty, columns 1 and 3 are numbers.
    """
    return Game(5, 5, 5, mine_positions=[(2, row) for row in range(5)])


@pytest.fixture
def session() -> GameSession:
    """Session holding a 5x5 game with mines on the bottom row."""
    session = GameSession()
    session.new_game(5, 5, 5, mine_positions=[(c, 4) for c in range(5)])
    return session


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
    return Cell(content=CellContent.MINE)
