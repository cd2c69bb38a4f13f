"""Conway's Game of Life on a bounded dense grid."""

from gridlife.dense_grid import CellState, Dense2DGrid, GridIndexError
from gridlife.life_stepper import LifeStepper, game_of_life_step_numpy, step
from gridlife.world import GridWorld

__all__ = [
    "CellState",
    "Dense2DGrid",
    "GridIndexError",
    "GridWorld",
    "LifeStepper",
    "game_of_life_step_numpy",
    "step",
]
