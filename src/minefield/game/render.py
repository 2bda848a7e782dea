"""
Text rendering for terminals.

Reads a board snapshot and never mutates it.
"""
from .board import Board
from .state import GameState


CLOSED_SYMBOL = "."
MINE_SYMBOL = "x"
EMPTY_SYMBOL = " "

STATUS_TEXT = {
    GameState.IN_PROGRESS: "",
    GameState.WON: "You win!",
    GameState.LOST: "You lose :(",
}


def cell_symbol(board: Board, index: int) -> str:
    """Single character shown for one cell."""
    cell = board[index]
    if not cell.is_opened:
        return CLOSED_SYMBOL
    if cell.is_mine:
        return MINE_SYMBOL
    if cell.adjacent_mines == 0:
        return EMPTY_SYMBOL
    return str(cell.adjacent_mines)


def render_board(board: Board, show_coords: bool = False) -> str:
    """
    Render board as ASCII string, one line per row.

    Args:
        board: Board to draw.
        show_coords: Prefix rows and add a header with column numbers.
    """
    width = len(str(board.size - 1))
    lines = []

    if show_coords:
        header = " ".join(f"{col:>{width}}" for col in range(board.size))
        lines.append(" " * (width + 1) + header)

    for row in range(board.size):
        symbols = [
            f"{cell_symbol(board, board.index_of(row, col)):>{width}}"
            for col in range(board.size)
        ]
        line = " ".join(symbols)
        if show_coords:
            line = f"{row:>{width}} " + line
        lines.append(line)

    return "\n".join(lines)


def status_text(state: GameState) -> str:
    """Label shown under the board for a game state."""
    return STATUS_TEXT[state]
