"""Win evaluator."""
from .board import Board


def is_won(board: Board) -> bool:
    """Check if all non-mine cells are opened. Mines are ignored."""
    return all(cell.is_opened for cell in board if not cell.is_mine)
