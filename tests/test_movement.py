import copy
import random

import pytest

from twentyfortyeight.movement import (
    Direction,
    Down,
    Left,
    Movement,
    Right,
    Up,
    movement_for,
)


def _random_grid(seed, size=4):
    rng = random.Random(seed)
    choices = [0, 0, 0, 2, 2, 4, 4, 8, 16]
    return [[rng.choice(choices) for _ in range(size)] for _ in range(size)]


def _mirror(grid):
    return [list(reversed(row)) for row in grid]


def _transpose(grid):
    return [list(col) for col in zip(*grid)]


def _apply(movement_cls, grid):
    grid = copy.deepcopy(grid)
    points = movement_cls().move_tiles(grid)
    return grid, points


def test_left_worked_example():
    grid = [
        [2, 2, 4, 0],
        [0, 0, 0, 0],
        [2, 0, 2, 0],
        [8, 4, 4, 0],
    ]
    Left().move_tiles(grid)
    assert grid == [
        [4, 4, 0, 0],
        [0, 0, 0, 0],
        [4, 0, 0, 0],
        [8, 8, 0, 0],
    ]


def test_each_tile_merges_at_most_once():
    grid = [[2, 2, 2, 2], [0] * 4, [0] * 4, [0] * 4]
    points = Left().move_tiles(grid)
    assert grid[0] == [4, 4, 0, 0]
    assert points == 8


@pytest.mark.parametrize("cls", [Up, Down, Left, Right])
@pytest.mark.parametrize("seed", range(20))
def test_total_value_preserved(cls, seed):
    grid = _random_grid(seed)
    before = sum(map(sum, grid))
    moved, _ = _apply(cls, grid)
    assert sum(map(sum, moved)) == before


@pytest.mark.parametrize("seed", range(20))
def test_right_is_mirrored_left(seed):
    grid = _random_grid(seed)
    right = copy.deepcopy(grid)
    right_points = Right().move_tiles(right)
    left = _mirror(grid)
    left_points = Left().move_tiles(left)
    assert right == _mirror(left)
    assert right_points == left_points


@pytest.mark.parametrize("seed", range(20))
def test_up_is_transposed_left(seed):
    grid = _random_grid(seed)
    up = copy.deepcopy(grid)
    up_points = Up().move_tiles(up)
    left = _transpose(grid)
    left_points = Left().move_tiles(left)
    assert up == _transpose(left)
    assert up_points == left_points


@pytest.mark.parametrize("seed", range(20))
def test_down_is_transposed_right(seed):
    grid = _random_grid(seed)
    down = copy.deepcopy(grid)
    down_points = Down().move_tiles(down)
    right = _transpose(grid)
    right_points = Right().move_tiles(right)
    assert down == _transpose(right)
    assert down_points == right_points


@pytest.mark.parametrize("seed", range(20))
def test_left_packs_tiles_to_front(seed):
    moved = _random_grid(seed)
    Left().move_tiles(moved)
    for row in moved:
        nonzero = [v for v in row if v]
        assert row == nonzero + [0] * (len(row) - len(nonzero))


@pytest.mark.parametrize("seed", range(20))
def test_points_equal_value_of_removed_tiles(seed):
    grid = _random_grid(seed)
    moved = copy.deepcopy(grid)
    points = Left().move_tiles(moved)
    tiles_before = sum(1 for row in grid for v in row if v)
    tiles_after = sum(1 for row in moved for v in row if v)
    assert points >= 0
    assert (points == 0) == (tiles_before == tiles_after)


@pytest.mark.parametrize("cls", [Up, Down, Left, Right])
def test_empty_grid_unchanged(cls):
    grid = [[0] * 4 for _ in range(4)]
    points = cls().move_tiles(grid)
    assert grid == [[0] * 4 for _ in range(4)]
    assert points == 0


def test_packed_distinct_row_unchanged():
    grid = [[2, 4, 8, 16], [0] * 4, [0] * 4, [0] * 4]
    points = Left().move_tiles(grid)
    assert grid[0] == [2, 4, 8, 16]
    assert points == 0


def test_points_accumulate_across_calls():
    first = _random_grid(1)
    second = _random_grid(2)
    _, fresh_first = _apply(Left, first)
    _, fresh_second = _apply(Left, second)
    movement = Left()
    assert movement.move_tiles(copy.deepcopy(first)) == fresh_first
    assert movement.move_tiles(copy.deepcopy(second)) == fresh_first + fresh_second
    assert movement.points == fresh_first + fresh_second


@pytest.mark.parametrize(
    "direction, cls",
    [
        (Direction.UP, Up),
        (Direction.DOWN, Down),
        (Direction.LEFT, Left),
        (Direction.RIGHT, Right),
        ("A", Up),
        ("B", Down),
        ("C", Right),
        ("D", Left),
    ],
)
def test_movement_for(direction, cls):
    movement = movement_for(direction)
    assert type(movement) is cls
    assert movement.points == 0


def test_movement_for_unknown_direction():
    with pytest.raises(ValueError):
        movement_for("Z")


def test_movement_is_abstract():
    with pytest.raises(TypeError):
        Movement()