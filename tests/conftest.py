import random

import matplotlib
import pytest

matplotlib.use('Agg')

from maze_adventure.maze import Grid, OPPOSITE


class FirstChoice:
    """Random source that always carves towards the first candidate."""

    def choice(self, seq):
        return seq[0]


def open_all(grid):
    for cell in grid:
        for direction, nx, ny in grid.neighbours(cell.x, cell.y):
            cell.walls[direction] = False
            grid.cell(nx, ny).walls[OPPOSITE[direction]] = False
    return grid


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def first_choice():
    return FirstChoice()


@pytest.fixture
def closed_grid():
    return Grid(3)


@pytest.fixture
def open_grid():
    return open_all(Grid(2))
