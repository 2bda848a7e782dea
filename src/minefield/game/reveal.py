"""
Reveal engine.

Opens cells on a board in place. Opening a zero-count cell floods out
through its zero-count region and stops at the numbered cells that
border it.
"""
from typing import List

from .board import Board


def open_cell(board: Board, index: int) -> List[int]:
    """
    Open a cell and flood-fill from it.

    Depth-first with an explicit stack. Neighbours are pushed in reverse
    so they pop in NEIGHBOR_OFFSETS order, the same order a recursive
    fill would open them. A cell that is already opened is skipped,
    which is what bounds the fill.

    Args:
        board: Board to mutate.
        index: Flat index to open. Out-of-range indices are a no-op.

    Returns:
        Indices newly opened, in opening order.
    """
    opened: List[int] = []
    if not board.is_valid_index(index):
        return opened

    stack = [index]
    while stack:
        current = stack.pop()
        cell = board[current]
        if not cell.open():
            continue
        opened.append(current)

        if cell.is_mine or cell.adjacent_mines > 0:
            continue

        stack.extend(reversed(board.neighbors(current)))

    return opened


def open_all_mines(board: Board) -> List[int]:
    """
    Open every mine on the board, leaving safe cells as they are.

    Returns:
        Indices of mines that were closed and are now opened.
    """
    return [i for i in board.mine_indices() if board[i].open()]
