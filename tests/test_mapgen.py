import random

import pytest

from blastgrid.grid import CollisionInfo, SquareType
from blastgrid.mapgen import MapGenerator


@pytest.fixture
def generated():
    gen = MapGenerator(11, 9, random.Random(42))
    return gen, CollisionInfo(gen.generate(), gen.width)


def test_size(generated):
    gen, grid = generated
    assert len(grid.squares) == gen.width * gen.height


def test_perimeter_is_wall(generated):
    gen, grid = generated
    for x in range(gen.width):
        assert grid[(x, 0)] is SquareType.WALL
        assert grid[(x, gen.height - 1)] is SquareType.WALL
    for y in range(gen.height):
        assert grid[(0, y)] is SquareType.WALL
        assert grid[(gen.width - 1, y)] is SquareType.WALL


def test_even_pillars_are_walls(generated):
    gen, grid = generated
    for y in range(0, gen.height, 2):
        for x in range(0, gen.width, 2):
            assert grid[(x, y)] is SquareType.WALL


def test_start_corner_is_clear(generated):
    _, grid = generated
    assert grid[(1, 1)] is SquareType.EMPTY
    assert grid[(2, 1)] is SquareType.EMPTY
    assert grid[(1, 2)] is SquareType.EMPTY


def test_only_basic_squares(generated):
    _, grid = generated
    assert set(grid.squares) <= {SquareType.WALL, SquareType.BRICK, SquareType.EMPTY}


def test_seeded_generation_is_deterministic():
    a = MapGenerator(15, 15, random.Random(7)).generate()
    b = MapGenerator(15, 15, random.Random(7)).generate()
    assert a == b


def test_default_dimensions_used():
    gen = MapGenerator()
    assert len(gen.generate()) == gen.width * gen.height