"""
Cell module for the minefield board.

Represents individual grid positions with their opened flag and
content (mine or safe with an adjacent mine count).
"""
from dataclasses import dataclass, field
from typing import Union


# ============================================================================
# Cell Kinds
# ============================================================================

@dataclass(frozen=True)
class Mine:
    """A cell that holds a mine."""


@dataclass(frozen=True)
class SafeWithCount:
    """
    A safe cell.

    Attributes:
        count: Number of mines among the up-to-8 neighbouring cells (0-8).
    """

    count: int = 0


CellKind = Union[Mine, SafeWithCount]


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the minefield grid.

    Attributes:
        is_opened: Whether the player has revealed this cell.
        kind: Mine or SafeWithCount; fixed once the board is generated.
    """

    is_opened: bool = False
    kind: CellKind = field(default_factory=SafeWithCount)

    def open(self) -> bool:
        """
        Open this cell.

        Returns:
            True if the cell was closed and is now opened, False if it
            was already opened.
        """
        if self.is_opened:
            return False
        self.is_opened = True
        return True

    def promote_to_mine(self) -> None:
        """Turn this cell into a mine."""
        self.kind = Mine()

    def increment_count(self) -> None:
        """Add one to the adjacent mine count. Mines are left untouched."""
        if isinstance(self.kind, SafeWithCount):
            self.kind = SafeWithCount(self.kind.count + 1)

    @property
    def is_mine(self) -> bool:
        """Check if cell holds a mine."""
        return isinstance(self.kind, Mine)

    @property
    def adjacent_mines(self) -> int:
        """Adjacent mine count, 0 for a mine."""
        if isinstance(self.kind, SafeWithCount):
            return self.kind.count
        return 0

    def to_observation(self) -> int:
        """
        Convert cell to observation value for agents.

        Returns:
            -1: Closed cell
            0-8: Opened safe cell with adjacent mine count
            9: Opened mine (game over state)
        """
        if not self.is_opened:
            return -1
        if self.is_mine:
            return 9
        return self.adjacent_mines
