"""
Conway's Game of Life - Generation Stepper

Rules:
1. Any live cell with fewer than two live neighbors dies (underpopulation)
2. Any live cell with two or three live neighbors lives on
3. Any live cell with more than three live neighbors dies (overpopulation)
4. Any dead cell with exactly three live neighbors becomes alive (reproduction)

The grid is finite: cells outside it count as dead, nothing wraps around.
Every step reads the live grid, writes a scratch grid, then copies the
scratch grid back, so no cell sees a neighbor that was already updated.
"""

import logging

import numpy as np

from gridlife.dense_grid import CellState, Dense2DGrid

logger = logging.getLogger(__name__)

# Moore neighborhood, center excluded
NEIGHBOR_OFFSETS = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)

METHODS = ("reference", "numpy")


def count_neighbors(grid: Dense2DGrid[CellState], x: int, y: int) -> int:
    """
    Count live neighbors for a cell at position (x, y).
    Off-grid neighbors are absent and contribute nothing.
    """
    count = 0
    for dx, dy in NEIGHBOR_OFFSETS:
        if grid.try_get(x + dx, y + dy) == CellState.ALIVE:
            count += 1
    return count


def next_state(current: CellState, alive_neighbors: int) -> CellState:
    if current == CellState.ALIVE:
        return CellState.ALIVE if alive_neighbors in (2, 3) else CellState.DEAD
    return CellState.ALIVE if alive_neighbors == 3 else CellState.DEAD


def game_of_life_step_numpy(current_grid: np.ndarray) -> np.ndarray:
    """
    Compute the next generation using NumPy operations.

    The grid is padded with one ring of dead cells and the neighbor count
    is the sum of the eight shifted views of the padded array.

    Args:
        current_grid: (height, width) array of 0/1 values

    Returns:
        New (height, width) uint8 array; the input is left untouched
    """
    height, width = current_grid.shape
    alive = current_grid != 0
    padded = np.pad(alive.astype(np.uint8), 1, mode="constant", constant_values=0)

    neighbors = np.zeros((height, width), dtype=np.uint8)
    for dx, dy in NEIGHBOR_OFFSETS:
        neighbors += padded[1 + dy:1 + dy + height, 1 + dx:1 + dx + width]

    # Birth: dead cell with exactly 3 neighbors
    birth = ~alive & (neighbors == 3)
    # Survival: live cell with 2 or 3 neighbors
    survive = alive & ((neighbors == 2) | (neighbors == 3))

    return (birth | survive).astype(np.uint8)


class LifeStepper:
    """
    Advances a CellState grid by exactly one generation per step() call.

    One stepper keeps one scratch grid and reuses it while the dimensions
    of the stepped grid stay the same. The stepped grid itself is never
    retained between calls.
    """

    def __init__(self, method: str = "reference"):
        if method not in METHODS:
            raise ValueError(f"Unknown step method {method!r}, expected one of {METHODS}")
        self.method = method
        self._scratch: Dense2DGrid[CellState] | None = None

    def _scratch_for(self, grid: Dense2DGrid[CellState]) -> Dense2DGrid[CellState]:
        if self._scratch is None or self._scratch.dimensions() != grid.dimensions():
            width, height = grid.dimensions()
            logger.debug("Allocating %dx%d scratch grid", width, height)
            self._scratch = Dense2DGrid(width, height, CellState.DEAD)
        return self._scratch

    def step(self, grid: Dense2DGrid[CellState]) -> None:
        """Replace the contents of grid with its next generation."""
        if self.method == "numpy":
            grid.load_array(game_of_life_step_numpy(grid.to_array()))
            return

        scratch = self._scratch_for(grid)
        width, height = grid.dimensions()

        for y in range(height):
            for x in range(width):
                neighbors = count_neighbors(grid, x, y)
                scratch.set(x, y, next_state(grid.get(x, y), neighbors))

        grid.copy_from(scratch)


def step(grid: Dense2DGrid[CellState]) -> None:
    """Step grid once with a throwaway reference stepper."""
    LifeStepper().step(grid)
