"""
Dense 2D grid container for Conway's Game of Life

Cells are stored row-major in a flat list (index = y * width + x).
Every accessor goes through coordinate_to_index(), which is the only
place bounds are checked:

    try_get(x, y)  -> value or None, never raises
    get(x, y)      -> value, raises GridIndexError when out of bounds
    set(x, y, v)   -> raises GridIndexError when out of bounds
"""

import logging
from enum import IntEnum
from typing import Generic, Iterable, Iterator, TypeVar

import numpy as np

logger = logging.getLogger(__name__)

T = TypeVar("T")


class CellState(IntEnum):
    """State of a single cell. Dead is the default."""

    DEAD = 0
    ALIVE = 1


class GridIndexError(IndexError):
    """Raised by the asserting accessors on out-of-bounds coordinates."""


class Dense2DGrid(Generic[T]):
    """Fixed-size row-major grid of copyable values."""

    def __init__(self, width: int, height: int, fill: T = CellState.DEAD):
        if width < 0 or height < 0:
            raise ValueError(f"Grid dimensions must be non-negative, got {width}x{height}")

        self.width = int(width)     # cells per row
        self.height = int(height)   # number of rows
        self.fill_value = fill      # default cell value
        self.cells: list[T] = [fill] * (self.width * self.height)

    @classmethod
    def from_iterable(cls, width: int, height: int, values: Iterable[T],
                      fill: T = CellState.DEAD) -> "Dense2DGrid[T]":
        """Build a grid from exactly width * height row-major values."""
        grid = cls(width, height, fill)
        cells = list(values)
        if len(cells) != len(grid.cells):
            raise ValueError(f"Expected {len(grid.cells)} values for a {width}x{height} grid, got {len(cells)}")
        grid.cells = cells
        return grid

    @classmethod
    def from_array(cls, array: np.ndarray) -> "Dense2DGrid[CellState]":
        """Build a CellState grid from a (height, width) array of 0/1 values."""
        if array.ndim != 2:
            raise ValueError(f"Expected a 2D array, got shape {array.shape}")
        height, width = array.shape
        grid = cls(width, height, CellState.DEAD)
        grid.load_array(array)
        return grid

    def dimensions(self) -> tuple[int, int]:
        return self.width, self.height

    def coordinate_to_index(self, x: int, y: int) -> int | None:
        """
        Convert (x, y) to a storage index.

        This is the bounds check for the whole grid: it returns None for
        anything outside 0 <= x < width, 0 <= y < height (negatives included).
        """
        if 0 <= x < self.width and 0 <= y < self.height:
            return y * self.width + x
        return None

    def index_to_coordinate(self, index: int) -> tuple[int, int] | None:
        """Inverse of coordinate_to_index(); None when index is out of range."""
        if 0 <= index < len(self.cells):
            return index % self.width, index // self.width
        return None

    def try_get(self, x: int, y: int) -> T | None:
        i = self.coordinate_to_index(x, y)
        if i is None:
            return None
        return self.cells[i]

    def _checked_index(self, x: int, y: int) -> int:
        i = self.coordinate_to_index(x, y)
        if i is None:
            raise GridIndexError(f"Index ({x}, {y}) out of range for {self.width}x{self.height} grid")
        return i

    def get(self, x: int, y: int) -> T:
        return self.cells[self._checked_index(x, y)]

    def set(self, x: int, y: int, value: T) -> None:
        self.cells[self._checked_index(x, y)] = value

    def __getitem__(self, pos: tuple[int, int]) -> T:
        return self.get(*pos)

    def __setitem__(self, pos: tuple[int, int], value: T) -> None:
        self.set(pos[0], pos[1], value)

    def __iter__(self) -> Iterator[T]:
        # A fresh iterator on every call, so iteration can be restarted
        return iter(self.cells)

    def __len__(self) -> int:
        return len(self.cells)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Dense2DGrid):
            return NotImplemented
        return self.dimensions() == other.dimensions() and self.cells == other.cells

    def __repr__(self) -> str:
        return f"Dense2DGrid(width={self.width}, height={self.height})"

    def fill(self, value: T) -> None:
        """Overwrite every cell with value."""
        self.cells = [value] * len(self.cells)

    def count(self, value: T) -> int:
        return self.cells.count(value)

    def copy_from(self, other: "Dense2DGrid[T]") -> None:
        """Element-wise overwrite from a grid of the same dimensions."""
        if other.dimensions() != self.dimensions():
            raise ValueError(f"Cannot copy a {other.width}x{other.height} grid "
                             f"into a {self.width}x{self.height} grid")
        self.cells[:] = other.cells

    def to_array(self) -> np.ndarray:
        """Export as a (height, width) uint8 array, 1 = alive."""
        return np.array(self.cells, dtype=np.uint8).reshape((self.height, self.width))

    def load_array(self, array: np.ndarray) -> None:
        """Overwrite cells from a (height, width) array of 0/1 values."""
        if array.shape != (self.height, self.width):
            raise ValueError(f"Shape mismatch: expected {(self.height, self.width)}, got {array.shape}")
        self.cells = [CellState.ALIVE if v else CellState.DEAD for v in array.ravel().tolist()]
        logger.debug("Loaded %dx%d array into grid", self.width, self.height)
