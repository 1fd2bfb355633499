import pytest

from blastgrid.geometry import Vec2
from blastgrid.grid import CollisionInfo, SquareType


@pytest.fixture
def grid():
    squares = [
        SquareType.WALL, SquareType.WALL, SquareType.WALL,
        SquareType.WALL, SquareType.EMPTY, SquareType.BRICK,
        SquareType.WALL, SquareType.WALL, SquareType.WALL,
    ]
    return CollisionInfo(squares, 3)


def test_read_inside(grid):
    assert grid[(1, 1)] is SquareType.EMPTY
    assert grid[Vec2(2.7, 1.2)] is SquareType.BRICK


@pytest.mark.parametrize("coords", [(-1, 0), (0, -1), (3, 0), (0, 3), (10, 10)])
def test_out_of_bounds_reads_as_wall(grid, coords):
    assert grid[coords] is SquareType.WALL


def test_negative_fraction_truncates_toward_zero(grid):
    grid[(1, 0)] = SquareType.EMPTY
    assert grid[(1.5, -0.5)] is SquareType.EMPTY


def test_write_inside(grid):
    grid[Vec2(1.5, 1.5)] = SquareType.BOMB
    assert grid[(1, 1)] is SquareType.BOMB


def test_write_out_of_bounds_is_ignored(grid):
    before = list(grid.squares)
    grid[(-5, 2)] = SquareType.EMPTY
    assert grid.squares == before
    assert grid[(-5, 2)] is SquareType.WALL


def test_coords_of_round_trip(grid):
    for index in range(len(grid.squares)):
        x, y = grid.coords_of(index)
        assert grid._index((x, y)) == index


def test_height(grid):
    assert grid.height == len(grid.squares) // grid.width
    assert CollisionInfo().height == 0


def test_square_values_match_digits():
    assert SquareType(0) is SquareType.EMPTY
    assert SquareType(1) is SquareType.WALL