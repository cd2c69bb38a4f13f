"""
Host-side owner of Game of Life grids.

GridWorld stands in for the per-frame update loop of a host engine: it
owns every grid, pairs each with its own LifeStepper (so scratch buffers
are reused per grid) and steps all of them once per tick.
"""

import logging

from gridlife.dense_grid import CellState, Dense2DGrid
from gridlife.life_stepper import LifeStepper

logger = logging.getLogger(__name__)


class GridWorld:
    def __init__(self, method: str = "reference"):
        self.method = method
        self.generation = 0
        self._grids: dict[str, Dense2DGrid[CellState]] = {}
        self._steppers: dict[str, LifeStepper] = {}

    def add_grid(self, name: str, grid: Dense2DGrid[CellState]) -> Dense2DGrid[CellState]:
        if name in self._grids:
            raise ValueError(f"Grid {name!r} already exists")
        self._grids[name] = grid
        self._steppers[name] = LifeStepper(self.method)
        logger.debug("Added grid %r (%dx%d)", name, grid.width, grid.height)
        return grid

    def remove_grid(self, name: str) -> Dense2DGrid[CellState]:
        grid = self._grids.pop(name)
        del self._steppers[name]
        logger.debug("Removed grid %r", name)
        return grid

    def grid(self, name: str) -> Dense2DGrid[CellState]:
        return self._grids[name]

    def names(self) -> list[str]:
        return list(self._grids)

    def tick(self) -> None:
        """Advance every grid by one generation."""
        for name, grid in self._grids.items():
            self._steppers[name].step(grid)
        self.generation += 1

    def run(self, ticks: int) -> None:
        for _ in range(ticks):
            self.tick()

    def population(self) -> dict[str, int]:
        return {name: grid.count(CellState.ALIVE) for name, grid in self._grids.items()}
