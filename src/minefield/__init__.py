"""Minefield: a Minesweeper-style puzzle game."""

__version__ = "0.1.0"
