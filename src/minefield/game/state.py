"""
Game state machine.

Owns the board and game state of one round and turns player actions
(select, reset) into calls on the generator, reveal engine and win
evaluator.
"""
from enum import Enum, auto
from typing import List, Optional, Tuple

import numpy as np

from .board import Board, BoardConfig, DEFAULT_CONFIG
from .cell import CellKind
from .evaluator import is_won
from .generator import IndexSource, generate, random_source
from .reveal import open_all_mines, open_cell


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of a round."""

    IN_PROGRESS = auto()
    WON = auto()
    LOST = auto()


# ============================================================================
# Game Class
# ============================================================================

class Game:
    """
    A single player's minefield game.

    WON and LOST are terminal: select() does nothing until reset()
    builds a fresh board.
    """

    def __init__(
        self,
        config: BoardConfig = DEFAULT_CONFIG,
        source: Optional[IndexSource] = None,
    ) -> None:
        """
        Start a new round.

        Args:
            config: Board configuration, validated on construction.
            source: Index source for mine placement (default: random).
        """
        self.config = config
        self._source = source or random_source()
        self._board = generate(self.config, self._source)
        self._state = GameState.IN_PROGRESS

    # ========================================================================
    # Player Actions
    # ========================================================================

    def select(self, index: int) -> bool:
        """
        Open the cell at ``index``.

        Selecting a mine loses the round and opens every mine. Selecting
        a safe cell flood-fills from it and wins the round once every
        safe cell is open.

        Args:
            index: Flat cell index (row * size + col).

        Returns:
            True if the action was applied, False if the round is over.

        Raises:
            IndexError: If index is outside the board.
        """
        if not self._board.is_valid_index(index):
            raise IndexError(
                f"Cell index {index} out of range [0, {len(self._board)})"
            )
        if self._state != GameState.IN_PROGRESS:
            return False

        if self._board[index].is_mine:
            self._state = GameState.LOST
            open_all_mines(self._board)
            return True

        open_cell(self._board, index)
        if is_won(self._board):
            self._state = GameState.WON
        return True

    def reset(self) -> None:
        """Discard the current board and start a new round."""
        self._board = generate(self.config, self._source)
        self._state = GameState.IN_PROGRESS

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def board(self) -> Board:
        """Board of the current round. Read it, do not mutate it."""
        return self._board

    @property
    def state(self) -> GameState:
        """Get current game state."""
        return self._state

    @property
    def is_in_progress(self) -> bool:
        """Check if round is still being played."""
        return self._state == GameState.IN_PROGRESS

    @property
    def is_won(self) -> bool:
        """Check if round was won."""
        return self._state == GameState.WON

    @property
    def is_lost(self) -> bool:
        """Check if round was lost."""
        return self._state == GameState.LOST

    @property
    def opened_count(self) -> int:
        """Number of opened cells."""
        return sum(1 for cell in self._board if cell.is_opened)

    def view(self, index: int) -> Tuple[bool, CellKind]:
        """Snapshot of one cell as (is_opened, kind)."""
        cell = self._board[index]
        return cell.is_opened, cell.kind

    def get_observation(self) -> np.ndarray:
        """Board observation array, see Board.get_observation."""
        return self._board.get_observation()

    def get_valid_actions(self) -> List[int]:
        """Indices of cells that can still be selected."""
        return self._board.closed_indices()


def new_game(
    size: int,
    num_mines: int,
    source: Optional[IndexSource] = None,
) -> Game:
    """
    Create a game for an N x N board with M mines.

    Raises:
        ValueError: If the configuration is invalid (e.g. M >= N*N).
    """
    return Game(BoardConfig(size, num_mines), source)
