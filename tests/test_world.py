import pytest

from gridlife.dense_grid import CellState, Dense2DGrid
from gridlife.patterns import BLINKER, BLOCK, alive_cells, init_pattern
from gridlife.world import GridWorld


def test_tick_steps_every_grid_once():
    world = GridWorld()
    world.add_grid("block", init_pattern(4, 4, BLOCK, origin=(1, 1)))
    world.add_grid("blinker", init_pattern(5, 5, BLINKER, origin=(1, 1)))

    world.tick()

    assert world.generation == 1
    assert alive_cells(world.grid("block")) == {(1, 1), (2, 1), (1, 2), (2, 2)}
    assert alive_cells(world.grid("blinker")) == {(1, 2), (2, 2), (3, 2)}


def test_run_and_population():
    world = GridWorld(method="numpy")
    world.add_grid("blinker", init_pattern(5, 5, BLINKER, origin=(1, 1)))
    world.add_grid("empty", Dense2DGrid(0, 0))

    world.run(4)

    assert world.generation == 4
    assert world.population() == {"blinker": 3, "empty": 0}
    assert alive_cells(world.grid("blinker")) == {(2, 1), (2, 2), (2, 3)}


def test_each_grid_gets_its_own_stepper():
    world = GridWorld()
    world.add_grid("a", Dense2DGrid(3, 3))
    world.add_grid("b", Dense2DGrid(4, 2))
    world.tick()
    assert world._steppers["a"] is not world._steppers["b"]
    assert world._steppers["a"]._scratch.dimensions() == (3, 3)
    assert world._steppers["b"]._scratch.dimensions() == (4, 2)


def test_duplicate_and_unknown_names():
    world = GridWorld()
    world.add_grid("g", Dense2DGrid(2, 2))
    with pytest.raises(ValueError):
        world.add_grid("g", Dense2DGrid(2, 2))
    with pytest.raises(KeyError):
        world.grid("missing")


def test_remove_grid():
    world = GridWorld()
    grid = world.add_grid("g", Dense2DGrid(2, 2, CellState.ALIVE))
    assert world.names() == ["g"]
    assert world.remove_grid("g") is grid
    assert world.names() == []
    world.tick()
    assert world.population() == {}
