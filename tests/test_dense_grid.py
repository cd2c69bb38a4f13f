import numpy as np
import pytest

from gridlife.dense_grid import CellState, Dense2DGrid, GridIndexError


def test_new_grid_is_dead_filled():
    grid = Dense2DGrid(4, 3)
    assert grid.dimensions() == (4, 3)
    assert len(grid) == 12
    assert all(cell == CellState.DEAD for cell in grid)


def test_negative_dimensions_rejected():
    with pytest.raises(ValueError):
        Dense2DGrid(-1, 3)


@pytest.mark.parametrize("width,height", [(0, 0), (0, 3), (3, 0), (1, 1), (3, 2), (4, 5)])
def test_bounds_invariant_and_round_trip(width, height):
    """coordinate_to_index is defined exactly on the grid and inverts index_to_coordinate."""
    grid = Dense2DGrid(width, height)
    for y in range(-2, height + 2):
        for x in range(-2, width + 2):
            i = grid.coordinate_to_index(x, y)
            inside = 0 <= x < width and 0 <= y < height
            assert (i is not None) == inside
            if inside:
                assert i == y * width + x
                assert grid.index_to_coordinate(i) == (x, y)


def test_index_to_coordinate_out_of_range():
    grid = Dense2DGrid(3, 2)
    assert grid.index_to_coordinate(5) == (2, 1)
    assert grid.index_to_coordinate(6) is None
    assert grid.index_to_coordinate(-1) is None


def test_try_get_never_raises():
    grid = Dense2DGrid(2, 2)
    grid.set(1, 1, CellState.ALIVE)
    assert grid.try_get(1, 1) == CellState.ALIVE
    assert grid.try_get(-1, 0) is None
    assert grid.try_get(0, 2) is None
    assert grid.try_get(2, 0) is None


def test_asserting_accessors_raise_out_of_range():
    grid = Dense2DGrid(2, 2)
    with pytest.raises(GridIndexError):
        grid.get(2, 0)
    with pytest.raises(IndexError):
        grid.set(0, -1, CellState.ALIVE)
    with pytest.raises(GridIndexError):
        grid[5, 5]


def test_item_access_is_row_major():
    grid = Dense2DGrid(3, 2)
    grid[2, 1] = CellState.ALIVE
    assert grid[2, 1] == CellState.ALIVE
    assert grid.cells[5] == CellState.ALIVE
    assert list(grid).index(CellState.ALIVE) == 5


def test_iteration_is_restartable():
    grid = Dense2DGrid.from_iterable(2, 2, [1, 2, 3, 4], fill=0)
    assert list(grid) == [1, 2, 3, 4]
    assert list(grid) == [1, 2, 3, 4]


def test_generic_values():
    """Grids hold any copyable value, e.g. per-cell ages."""
    ages = Dense2DGrid(3, 3, fill=0)
    ages.set(1, 1, 7)
    assert ages.get(1, 1) == 7
    assert ages.count(0) == 8


def test_from_iterable_length_mismatch():
    with pytest.raises(ValueError):
        Dense2DGrid.from_iterable(2, 2, [CellState.DEAD] * 3)


def test_array_export_and_load():
    grid = Dense2DGrid(3, 2)
    grid.set(2, 0, CellState.ALIVE)
    array = grid.to_array()
    assert array.shape == (2, 3)
    assert array.dtype == np.uint8
    assert array[0, 2] == 1
    assert array.sum() == 1

    other = Dense2DGrid.from_array(array)
    assert other == grid
    assert other.get(2, 0) is CellState.ALIVE


def test_load_array_shape_mismatch():
    grid = Dense2DGrid(3, 2)
    with pytest.raises(ValueError):
        grid.load_array(np.zeros((3, 2), dtype=np.uint8))


def test_copy_from():
    src = Dense2DGrid(2, 2)
    src.fill(CellState.ALIVE)
    dst = Dense2DGrid(2, 2)
    dst.copy_from(src)
    assert dst == src
    src.set(0, 0, CellState.DEAD)
    assert dst.get(0, 0) == CellState.ALIVE

    with pytest.raises(ValueError):
        dst.copy_from(Dense2DGrid(2, 3))


def test_empty_grid_exports():
    grid = Dense2DGrid(0, 4)
    assert list(grid) == []
    assert grid.to_array().shape == (4, 0)
