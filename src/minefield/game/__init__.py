"""
Minefield game module.

Provides the board engine: cells, board generation, flood-fill
reveal, win evaluation and the game state machine.
"""
from .cell import Cell, CellKind, Mine, SafeWithCount
from .board import Board, BoardConfig, DEFAULT_CONFIG
from .generator import IndexSource, generate, random_source, sequence_source
from .reveal import open_cell, open_all_mines
from .evaluator import is_won
from .state import Game, GameState, new_game
from .render import render_board, status_text
from .environment import MinesweeperEnv

__all__ = [
    "Cell",
    "CellKind",
    "Mine",
    "SafeWithCount",
    "Board",
    "BoardConfig",
    "DEFAULT_CONFIG",
    "IndexSource",
    "generate",
    "random_source",
    "sequence_source",
    "open_cell",
    "open_all_mines",
    "is_won",
    "Game",
    "GameState",
    "new_game",
    "render_board",
    "status_text",
    "MinesweeperEnv",
]
