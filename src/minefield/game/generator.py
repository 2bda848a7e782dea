"""
Board generator.

Places mines by rejection sampling and keeps the adjacency counts of
the surrounding safe cells up to date as each mine lands.
"""
from typing import Callable, Iterable, Optional

import numpy as np

from .board import Board, BoardConfig


# An index source is called with the number of cells and returns an
# index in [0, total_cells).
IndexSource = Callable[[int], int]


# ============================================================================
# Index Sources
# ============================================================================

def random_source(seed: Optional[int] = None) -> IndexSource:
    """
    Create a uniform index source backed by numpy.

    Args:
        seed: Random seed for reproducibility.

    Returns:
        Callable drawing uniformly from [0, total_cells).
    """
    rng = np.random.default_rng(seed)

    def draw(total_cells: int) -> int:
        return int(rng.integers(total_cells))

    return draw


def sequence_source(indices: Iterable[int]) -> IndexSource:
    """
    Create an index source that replays fixed draws.

    Used to lay out mines at known positions. Repeated indices are
    rejected by the generator just like repeated random draws.

    Args:
        indices: Draws to return, in order.

    Returns:
        Callable returning the next index on each call.
    """
    iterator = iter(indices)

    def draw(total_cells: int) -> int:
        try:
            index = next(iterator)
        except StopIteration:
            raise ValueError("Index sequence exhausted") from None
        if not 0 <= index < total_cells:
            raise ValueError(
                f"Index {index} out of range for {total_cells} cells"
            )
        return index

    return draw


# ============================================================================
# Generation
# ============================================================================

def generate(
    config: BoardConfig,
    source: Optional[IndexSource] = None,
) -> Board:
    """
    Generate a board with exactly ``config.num_mines`` mines.

    Args:
        config: Validated board configuration.
        source: Index source for mine positions (default: unseeded random).

    Returns:
        Board with every cell closed and adjacency counts filled in.
    """
    draw = source or random_source()
    board = Board(config)
    total_cells = config.total_cells

    placed = 0
    while placed < config.num_mines:
        index = draw(total_cells)
        if board[index].is_mine:
            continue
        _place_mine(board, index)
        placed += 1

    return board


def _place_mine(board: Board, index: int) -> None:
    """Turn a cell into a mine and bump its safe neighbours' counts."""
    board[index].promote_to_mine()
    for neighbor in board.neighbors(index):
        board[neighbor].increment_count()
