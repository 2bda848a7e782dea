"""
Board module for the minefield game.

Holds the square grid of cells as a flat list indexed by
``row * size + col``, plus the configuration it was generated from.
"""
from dataclasses import dataclass, field
from typing import Iterator, List, Tuple

import numpy as np

from .cell import Cell


# Neighbour offsets in visiting order: up, up-right, right, down-right,
# down, down-left, left, up-left.
NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = (
    (-1, 0),
    (-1, 1),
    (0, 1),
    (1, 1),
    (1, 0),
    (1, -1),
    (0, -1),
    (-1, -1),
)


# ============================================================================
# Configuration
# ============================================================================

@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a minefield board.

    Attributes:
        size: Side of the square grid (N).
        num_mines: Total mines to place (M).
    """

    size: int = 10
    num_mines: int = 20

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.size < 1:
            raise ValueError("Board size must be positive")
        if self.num_mines < 0:
            raise ValueError("Number of mines cannot be negative")
        max_mines = self.total_cells - 1
        if self.num_mines > max_mines:
            raise ValueError(f"Too many mines (max {max_mines})")

    @property
    def total_cells(self) -> int:
        """Number of cells on the board."""
        return self.size * self.size


DEFAULT_CONFIG = BoardConfig(10, 20)


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minefield board.

    Owns the cells of one round. Mine placement lives in the generator,
    opening in the reveal engine; the board only knows its geometry.
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    cells: List[Cell] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        """Create closed, empty cells if none were given."""
        if not self.cells:
            self.cells = [Cell() for _ in range(self.config.total_cells)]
        if len(self.cells) != self.config.total_cells:
            raise ValueError(
                f"Expected {self.config.total_cells} cells, "
                f"got {len(self.cells)}"
            )

    # ========================================================================
    # Geometry
    # ========================================================================

    @property
    def size(self) -> int:
        """Side of the square grid."""
        return self.config.size

    def index_of(self, row: int, col: int) -> int:
        """Convert (row, col) position to flat index."""
        return row * self.size + col

    def position_of(self, index: int) -> Tuple[int, int]:
        """Convert flat index to (row, col) position."""
        return divmod(index, self.size)

    def is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.size and 0 <= col < self.size

    def is_valid_index(self, index: int) -> bool:
        """Check if flat index addresses a cell."""
        return 0 <= index < len(self.cells)

    def neighbors(self, index: int) -> List[int]:
        """
        Get in-bounds neighbouring indices.

        Args:
            index: Flat index of the centre cell.

        Returns:
            Up to 8 indices, in NEIGHBOR_OFFSETS order, clipped at the
            grid edges.
        """
        row, col = self.position_of(index)
        result = []
        for delta_row, delta_col in NEIGHBOR_OFFSETS:
            new_row = row + delta_row
            new_col = col + delta_col
            if self.is_valid_position(new_row, new_col):
                result.append(self.index_of(new_row, new_col))
        return result

    # ========================================================================
    # Accessors
    # ========================================================================

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.cells)

    def __getitem__(self, index: int) -> Cell:
        # Negative indices must not wrap round to the end of the grid.
        if not self.is_valid_index(index):
            raise IndexError(
                f"Cell index {index} out of range [0, {len(self.cells)})"
            )
        return self.cells[index]

    def mine_indices(self) -> List[int]:
        """Indices of all mine cells."""
        return [i for i, cell in enumerate(self.cells) if cell.is_mine]

    def opened_indices(self) -> List[int]:
        """Indices of all opened cells."""
        return [i for i, cell in enumerate(self.cells) if cell.is_opened]

    def closed_indices(self) -> List[int]:
        """Indices of all cells not yet opened."""
        return [i for i, cell in enumerate(self.cells) if not cell.is_opened]

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array.

        Returns:
            2D array of shape (size, size) where:
                -1 = closed
                0-8 = opened with adjacent count
                9 = opened mine
        """
        flat = np.fromiter(
            (cell.to_observation() for cell in self.cells),
            dtype=np.int8,
            count=len(self.cells),
        )
        return flat.reshape(self.size, self.size)
