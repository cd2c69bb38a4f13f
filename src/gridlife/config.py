"""
Configuration settings for gridlife simulations and benchmarks.
"""

from pathlib import Path

BENCHMARK_SIZES = [32, 64, 128, 256, 512, 1024, 2048]
REFERENCE_MAX_SIZE = 256  # pure-Python stepper is too slow beyond this
BENCHMARK_DIR = Path("benchmarks")


class SimulationConfig:
    """Defaults for a single simulation run"""

    GRID_WIDTH = 512  # cells per row
    GRID_HEIGHT = 512  # rows
    DENSITY = 0.3  # probability a cell starts alive
    SEED = 42  # random seed for reproducible runs
    GENERATIONS = 100
    METHOD = "numpy"  # "numpy" (vectorized) or "reference" (per-cell)
