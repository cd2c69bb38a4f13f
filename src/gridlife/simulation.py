"""
Conway's Game of Life - Simulation Runner and Benchmark

Usage: gridlife [width] [height] [generations] [method]
       gridlife --benchmark [method]

method is "numpy" (vectorized, default) or "reference" (per-cell stepper).
"""

import sys
import time
from pathlib import Path

from gridlife.config import BENCHMARK_DIR, BENCHMARK_SIZES, REFERENCE_MAX_SIZE, SimulationConfig
from gridlife.dense_grid import CellState, Dense2DGrid
from gridlife.life_stepper import METHODS, LifeStepper
from gridlife.patterns import init_random

USAGE = __doc__.strip().splitlines()[2:4]


def count_live_cells(grid: Dense2DGrid[CellState]) -> int:
    """Count total live cells in the grid."""
    return grid.count(CellState.ALIVE)


def run_simulation(width: int, height: int, generations: int,
                   method: str = "numpy", seed: int | None = None,
                   density: float = SimulationConfig.DENSITY, verbose: bool = True) -> dict:
    """
    Run the Game of Life simulation.

    Args:
        width: Grid width
        height: Grid height
        generations: Number of generations to simulate
        method: "numpy" (vectorized) or "reference" (per-cell)
        seed: Random seed for reproducibility
        density: Probability that a cell starts alive
        verbose: Print the run report

    Returns:
        Dictionary with timing and statistics
    """
    if generations < 1:
        raise ValueError(f"generations must be at least 1, got {generations}")

    grid = init_random(width, height, density=density, seed=seed)
    stepper = LifeStepper(method)

    initial_live = count_live_cells(grid)

    if verbose:
        print(f"Game of Life Simulation")
        print(f"Grid size: {width} x {height}")
        print(f"Generations: {generations}")
        print(f"Using {method} stepper")
        print()
        print(f"Initial live cells: {initial_live}")

    start_time = time.perf_counter()
    for _ in range(generations):
        stepper.step(grid)
    elapsed_ms = (time.perf_counter() - start_time) * 1000
    # guard against a zero reading on tiny grids
    elapsed_ms = max(elapsed_ms, 1e-6)

    final_live = count_live_cells(grid)
    cells_per_second_million = width * height * generations / elapsed_ms / 1000

    if verbose:
        print(f"\nSimulation complete!")
        print(f"Final live cells: {final_live}")
        print(f"Total time: {elapsed_ms:.2f} ms")
        print(f"Time per generation: {elapsed_ms / generations:.4f} ms")
        print(f"Cells processed per second: {cells_per_second_million:.2f} million")

    return {
        "width": width,
        "height": height,
        "generations": generations,
        "method": method,
        "initial_live_cells": initial_live,
        "final_live_cells": final_live,
        "total_time_ms": elapsed_ms,
        "time_per_generation_ms": elapsed_ms / generations,
        "cells_per_second_million": cells_per_second_million,
    }


def benchmark(sizes: list[int] | None = None, generations: int = 100, seed: int = 42,
              method: str = "numpy", csv_file: Path | str | None = None,
              verbose: bool = True) -> list[dict]:
    """
    Run benchmarks for different grid sizes and save them as CSV.

    Args:
        sizes: List of grid sizes to test
        generations: Number of generations per test
        seed: Random seed for reproducibility
        method: Stepper to benchmark
        csv_file: Output path, defaults to benchmarks/benchmark_<method>.csv
        verbose: If True, print detailed output for each size
    """
    if sizes is None:
        sizes = BENCHMARK_SIZES
        if method == "reference":
            sizes = [s for s in sizes if s <= REFERENCE_MAX_SIZE]

    print("=" * 60)
    print(f"BENCHMARK: {method} Game of Life")
    print("=" * 60)
    print()

    results = []

    for size in sizes:
        if verbose:
            print(f"\n--- Grid size: {size}x{size} ---")
        result = run_simulation(size, size, generations, method=method, seed=seed, verbose=verbose)
        if verbose:
            print()
        else:
            print(f"Size {size:>5}x{size:<5} done: {result['total_time_ms']:>10.2f} ms")
        results.append(result)

    # Summary table
    print("\n" + "=" * 60)
    print("SUMMARY")
    print("=" * 60)
    print(f"{'Size':>10} | {'Total (ms)':>12} | {'Per Gen (ms)':>14} | {'M cells/s':>12}")
    print("-" * 60)
    for r in results:
        print(f"{r['width']:>10} | {r['total_time_ms']:>12.2f} | "
              f"{r['time_per_generation_ms']:>14.4f} | {r['cells_per_second_million']:>12.2f}")
    print("=" * 60)

    if csv_file is None:
        csv_file = BENCHMARK_DIR / f"benchmark_{method}.csv"
    csv_file = Path(csv_file)
    csv_file.parent.mkdir(parents=True, exist_ok=True)
    with open(csv_file, "w") as f:
        f.write("size,generations,total_time_ms,time_per_generation_ms,cells_per_second_million\n")
        for r in results:
            f.write(f"{r['width']},{r['generations']},{r['total_time_ms']:.4f},"
                    f"{r['time_per_generation_ms']:.6f},{r['cells_per_second_million']:.4f}\n")
    print(f"\nResults saved to {csv_file}")

    return results


def usage_error(message: str) -> None:
    print(f"Error: {message}", file=sys.stderr)
    for line in USAGE:
        print(line.strip(), file=sys.stderr)
    sys.exit(2)


def main(argv: list[str] | None = None) -> None:
    args = sys.argv[1:] if argv is None else argv

    # Check for benchmark mode first
    if args and args[0] == "--benchmark":
        method = args[1] if len(args) > 1 else SimulationConfig.METHOD
        if method not in METHODS:
            usage_error(f"unknown method {method!r}")
        benchmark(method=method, seed=SimulationConfig.SEED)
        return

    # Default parameters
    width = SimulationConfig.GRID_WIDTH
    height = SimulationConfig.GRID_HEIGHT
    generations = SimulationConfig.GENERATIONS
    method = SimulationConfig.METHOD

    # Parse command line arguments
    try:
        if len(args) > 0:
            width = int(args[0])
        if len(args) > 1:
            height = int(args[1])
        if len(args) > 2:
            generations = int(args[2])
    except ValueError as e:
        usage_error(str(e))
    if len(args) > 3:
        method = args[3]

    if width < 0 or height < 0 or generations < 1:
        usage_error("width and height must be non-negative and generations at least 1")
    if method not in METHODS:
        usage_error(f"unknown method {method!r}")

    run_simulation(width, height, generations, method=method, seed=SimulationConfig.SEED)


if __name__ == "__main__":
    main()
