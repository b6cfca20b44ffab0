import random

import pytest

from maze_adventure.maze import OFFSETS, generate_maze
from maze_adventure.movement import ARROW_KEYS, direction_for_key, try_move


@pytest.fixture
def serpentine(first_choice):
    return generate_maze(10, first_choice)


def test_open_step_moves(serpentine):
    assert try_move(serpentine, (0, 0), 'E') == (1, 0)
    assert try_move(serpentine, (9, 0), 'S') == (9, 1)
    assert try_move(serpentine, (9, 9), 'W') == (8, 9)


def test_blocked_step_is_noop(serpentine):
    assert try_move(serpentine, (0, 0), 'S') == (0, 0)
    assert try_move(serpentine, (3, 4), 'E') == (3, 4)


def test_outward_through_doorways_is_noop(serpentine):
    assert try_move(serpentine, serpentine.entrance, 'W') == serpentine.entrance
    assert try_move(serpentine, serpentine.entrance, 'N') == serpentine.entrance
    assert try_move(serpentine, serpentine.exit, 'S') == serpentine.exit


def test_random_walk_stays_inside_and_respects_walls():
    rng = random.Random(99)
    for size in (10, 15, 20):
        grid = generate_maze(size, rng)
        position = grid.entrance
        for _ in range(2000):
            direction = rng.choice('NESW')
            new_position = try_move(grid, position, direction)
            x, y = new_position
            assert 0 <= x < size and 0 <= y < size
            if new_position != position:
                dx, dy = OFFSETS[direction]
                assert new_position == (position[0] + dx, position[1] + dy)
                assert not grid.cell(*position).walls[direction]
            else:
                px, py = position
                dx, dy = OFFSETS[direction]
                assert grid.cell(px, py).walls[direction] or not grid.in_bounds(px + dx, py + dy)
            position = new_position


def test_unknown_direction_rejected(serpentine):
    with pytest.raises(ValueError):
        try_move(serpentine, (0, 0), 'up')


def test_arrow_keys():
    assert ARROW_KEYS == {'up': 'N', 'right': 'E', 'down': 'S', 'left': 'W'}
    assert direction_for_key('left') == 'W'
    assert direction_for_key('q') is None


@pytest.mark.parametrize('position', [(9, -1), (10, 0), (-1, 0), (0, 10)])
def test_position_outside_grid_rejected(serpentine, position):
    with pytest.raises(ValueError):
        try_move(serpentine, position, 'S')
    with pytest.raises(ValueError):
        try_move(serpentine, position, 'W')


def test_non_integer_position_rejected(serpentine):
    with pytest.raises(ValueError):
        try_move(serpentine, (0.5, 0), 'E')
