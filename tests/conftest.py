"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path
from typing import Iterable

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minefield.game import (
    Board,
    BoardConfig,
    Cell,
    Game,
    Mine,
    generate,
    random_source,
    sequence_source,
)


def board_with_mines(size: int, mines: Iterable[int]) -> Board:
    """Generate a board with mines at fixed indices."""
    mines = list(mines)
    return generate(BoardConfig(size, len(mines)), sequence_source(mines))


def game_with_mines(size: int, mines: Iterable[int]) -> Game:
    """Start a game whose first board has mines at fixed indices."""
    mines = list(mines)
    return Game(BoardConfig(size, len(mines)), sequence_source(mines))


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def corner_mines_board() -> Board:
    """3x3 board with mines in the top-left and bottom-right corners.

    Layout (x = mine):
        x 1 0
        1 2 1
        0 1 x
    """
    return board_with_mines(3, [0, 8])


@pytest.fixture
def walled_board() -> Board:
    """5x5 board with a wall of mines down the middle column.

    Layout (x = mine):
        0 2 x 2 0
        0 3 x 3 0
        0 3 x 3 0
        0 3 x 3 0
        0 2 x 2 0
    """
    return board_with_mines(5, [2, 7, 12, 17, 22])


@pytest.fixture
def empty_board() -> Board:
    """Create a 5x5 board with no mines for cascade testing."""
    return generate(BoardConfig(5, 0))


# ============================================================================
# Game Fixtures
# ============================================================================

@pytest.fixture
def corner_mines_game() -> Game:
    """Game on the corner_mines_board layout."""
    return game_with_mines(3, [0, 8])


@pytest.fixture
def seeded_game() -> Game:
    """5x5 game with 5 random mines, seeded."""
    return Game(BoardConfig(5, 5), random_source(42))


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def closed_cell() -> Cell:
    """Create a closed safe cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(kind=Mine())
