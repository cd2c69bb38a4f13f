"""
Initial patterns for Game of Life grids.

Patterns are written as rows of text ('O' or '#' alive, '.' dead) and
parsed into lists of (x, y) offsets. Lines starting with '!' are comments.
"""

import numpy as np

from gridlife.dense_grid import CellState, Dense2DGrid

BLOCK = """
OO
OO
"""

BLINKER = """
.O.
.O.
.O.
"""

#   #
#     #
# # # #
GLIDER = """
.O.
..O
OOO
"""

GOSPER_GLIDER_GUN = """
! Gosper glider gun, period 30
........................O...........
......................O.O...........
............OO......OO............OO
...........O...O....OO............OO
OO........O.....O...OO..............
OO........O...O.OO....O.O...........
..........O.....O.......O...........
...........O...O....................
............OO......................
"""


def parse_pattern(text: str) -> list[tuple[int, int]]:
    """Return the (x, y) offsets of the alive cells in a text pattern."""
    cells = []
    rows = [line.strip() for line in text.splitlines()]
    rows = [row for row in rows if row and not row.startswith("!")]
    for y, row in enumerate(rows):
        for x, ch in enumerate(row):
            if ch in "O#":
                cells.append((x, y))
            elif ch != ".":
                raise ValueError(f"Unexpected character {ch!r} in pattern row {y}")
    return cells


def pattern_size(cells: list[tuple[int, int]]) -> tuple[int, int]:
    if not cells:
        return 0, 0
    return max(x for x, _ in cells) + 1, max(y for _, y in cells) + 1


def stamp(grid: Dense2DGrid[CellState], cells, origin: tuple[int, int] = (0, 0)) -> None:
    """
    Set every offset in cells alive, relative to origin.

    Uses the asserting accessor: a pattern that does not fit raises
    GridIndexError.
    """
    ox, oy = origin
    for x, y in cells:
        grid.set(ox + x, oy + y, CellState.ALIVE)


def alive_cells(grid: Dense2DGrid[CellState]) -> set[tuple[int, int]]:
    """Coordinates of all alive cells."""
    return {grid.index_to_coordinate(i) for i, v in enumerate(grid) if v == CellState.ALIVE}


def init_random(width: int, height: int, density: float = 0.3, seed: int | None = None) -> Dense2DGrid[CellState]:
    """Initialize grid with random values."""
    rng = np.random.default_rng(seed)
    array = (rng.random((height, width)) < density).astype(np.uint8)
    return Dense2DGrid.from_array(array)


def init_pattern(width: int, height: int, text: str, origin: tuple[int, int] = (0, 0)) -> Dense2DGrid[CellState]:
    grid = Dense2DGrid(width, height, CellState.DEAD)
    stamp(grid, parse_pattern(text), origin)
    return grid


def init_glider(width: int, height: int, start_x: int = 1, start_y: int = 1) -> Dense2DGrid[CellState]:
    """Initialize grid with a glider pattern."""
    return init_pattern(width, height, GLIDER, (start_x, start_y))


def init_glider_gun(width: int, height: int) -> Dense2DGrid[CellState]:
    """Initialize grid with a Gosper Glider Gun, one dead cell of margin on each side."""
    gun_width, gun_height = pattern_size(parse_pattern(GOSPER_GLIDER_GUN))
    if width < gun_width + 2 or height < gun_height + 2:
        raise ValueError(f"Grid too small for glider gun, need at least {gun_width + 2}x{gun_height + 2}")
    return init_pattern(width, height, GOSPER_GLIDER_GUN, (1, 1))
