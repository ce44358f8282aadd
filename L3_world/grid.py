# =============================================================================
# L3 World Model - Occupancy Grid
# =============================================================================
# Fixed-size 2D cell map. Cells are indexed [x, y] with x in [0, width)
# and y in [0, height). Reads outside the grid report OBSTACLE, writes
# outside the grid are ignored.
# =============================================================================

import numpy as np
from enum import IntEnum
from typing import Tuple

from .config import DEFAULT_GRID_WIDTH, DEFAULT_GRID_HEIGHT


class CellType(IntEnum):
    """Cell state of the occupancy grid."""
    FREE = 0
    OBSTACLE = 1
    GOAL = 2
    AGENT = 3


class OccupancyGrid:
    """
    Occupancy grid with one CellType per cell.

    Single writer, single reader: the owner (navigator or scenario harness)
    clears and repopulates it every detection cycle.
    """

    def __init__(self, width: int = DEFAULT_GRID_WIDTH, height: int = DEFAULT_GRID_HEIGHT):
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid size must be positive, got {width}x{height}")
        self.width = int(width)
        self.height = int(height)
        self._cells = np.zeros((self.width, self.height), dtype=np.uint8)

    @property
    def shape(self) -> Tuple[int, int]:
        return self.width, self.height

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def set_cell(self, x: int, y: int, state: CellType):
        if self.in_bounds(x, y):
            self._cells[x, y] = state

    def get_cell(self, x: int, y: int) -> CellType:
        if self.in_bounds(x, y):
            return CellType(int(self._cells[x, y]))
        return CellType.OBSTACLE

    def clear(self):
        self._cells.fill(CellType.FREE)

    def fill_rect(self, x_start: int, x_stop: int, y_start: int, y_stop: int,
                  state: CellType):
        """
        Set every cell in [x_start, x_stop) x [y_start, y_stop).

        The rectangle is clipped to the grid, so the part outside is ignored
        just like a single out-of-bounds set_cell().
        """
        x0 = max(0, x_start)
        y0 = max(0, y_start)
        x1 = min(self.width, x_stop)
        y1 = min(self.height, y_stop)
        if x0 < x1 and y0 < y1:
            self._cells[x0:x1, y0:y1] = state

    def count(self, state: CellType) -> int:
        return int(np.count_nonzero(self._cells == state))

    def cells_of(self, state: CellType) -> np.ndarray:
        """Return an (N, 2) integer array of [x, y] indices holding `state`."""
        return np.argwhere(self._cells == state)

    def as_array(self) -> np.ndarray:
        """Copy of the raw cell array, shape (width, height)."""
        return self._cells.copy()

    def __eq__(self, other) -> bool:
        if not isinstance(other, OccupancyGrid):
            return NotImplemented
        return self.shape == other.shape and np.array_equal(self._cells, other._cells)

    def __repr__(self) -> str:
        return (f"OccupancyGrid({self.width}x{self.height}, "
                f"obstacles={self.count(CellType.OBSTACLE)})")
