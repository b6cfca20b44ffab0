import random

import numpy as np

from maze_adventure.errors import InvalidSizeError
from maze_adventure.settings import MAX_MAZE_SIZE


DIRECTIONS = [('N', 0, -1), ('E', 1, 0), ('S', 0, 1), ('W', -1, 0)]
OFFSETS = {direction: (dx, dy) for direction, dx, dy in DIRECTIONS}
OPPOSITE = {'N': 'S', 'E': 'W', 'S': 'N', 'W': 'E'}
WALL_BITS = {'N': 1, 'E': 2, 'S': 4, 'W': 8}

ENTRANCE_DOORWAY = 'W'
EXIT_DOORWAY = 'S'


class Cell:
    def __init__(self, x, y):
        self.x = x
        self.y = y
        self.walls = {'N': True, 'E': True, 'S': True, 'W': True}
        self.is_entrance = False
        self.is_exit = False

    @property
    def position(self):
        return (self.x, self.y)

    def __repr__(self):
        closed = ''.join(d for d, _, _ in DIRECTIONS if self.walls[d])
        return f"Cell({self.x}, {self.y}, walls={closed or '-'})"


class Grid:
    """Square maze of ``size`` x ``size`` cells, indexed ``cells[y][x]``.

    The entrance is always the top-left cell and the exit the bottom-right
    one. Walls are stored per cell; an open passage clears the matching flag
    on both sides.
    """

    def __init__(self, size):
        self.size = size
        self.cells = [[Cell(x, y) for x in range(size)] for y in range(size)]
        self.entrance = (0, 0)
        self.exit = (size - 1, size - 1)

    def __iter__(self):
        for row in self.cells:
            yield from row

    def cell(self, x, y):
        return self.cells[y][x]

    def in_bounds(self, x, y):
        return 0 <= x < self.size and 0 <= y < self.size

    def neighbours(self, x, y):
        """In-bounds neighbours of (x, y) as (direction, nx, ny), top, right, bottom, left."""
        result = []
        for direction, dx, dy in DIRECTIONS:
            nx, ny = x + dx, y + dy
            if self.in_bounds(nx, ny):
                result.append((direction, nx, ny))
        return result

    def check_position(self, position, name='position'):
        """Return ``position`` as an (x, y) tuple, or raise ValueError if it is not a cell."""
        x, y = position
        for value in (x, y):
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise ValueError(f"{name} {position} must have integer coordinates")
        if not self.in_bounds(x, y):
            raise ValueError(f"{name} {position} lies outside a {self.size}x{self.size} maze")
        return (int(x), int(y))

    def is_open(self, position, direction):
        x, y = position
        return not self.cells[y][x].walls[direction]

    def remove_wall_between(self, x, y, direction):
        dx, dy = OFFSETS[direction]
        self.cells[y][x].walls[direction] = False
        self.cells[y + dy][x + dx].walls[OPPOSITE[direction]] = False

    def open_edges(self):
        """Open passages between two cells, each listed once."""
        edges = []
        for cell in self:
            for direction in ('E', 'S'):
                dx, dy = OFFSETS[direction]
                nx, ny = cell.x + dx, cell.y + dy
                if self.in_bounds(nx, ny) and not cell.walls[direction]:
                    edges.append(((cell.x, cell.y), (nx, ny)))
        return edges

    def wall_bitmap(self):
        bitmap = np.zeros((self.size, self.size), dtype=np.uint8)
        for cell in self:
            for direction, bit in WALL_BITS.items():
                if cell.walls[direction]:
                    bitmap[cell.y, cell.x] |= bit
        return bitmap

    def __repr__(self):
        return f"Grid(size={self.size})"


def validate_size(size):
    if isinstance(size, bool) or not isinstance(size, (int, np.integer)):
        raise InvalidSizeError(f"Maze size must be an integer, got {size!r}")
    if not 1 <= size <= MAX_MAZE_SIZE:
        raise InvalidSizeError(f"Maze size must be between 1 and {MAX_MAZE_SIZE}, got {size}")
    return int(size)


def carve_passages(grid, visited, rng):
    """Randomized depth-first backtracker starting from the entrance.

    ``visited`` is a scratch boolean array of shape (size, size), indexed
    [y, x]; it is filled in place.
    """
    start_x, start_y = grid.entrance
    visited[start_y, start_x] = True
    stack = [(start_x, start_y)]
    while stack:
        x, y = stack[-1]
        unvisited_neighbours = [(direction, nx, ny) for direction, nx, ny in grid.neighbours(x, y)
                                if not visited[ny, nx]]
        if not unvisited_neighbours:
            stack.pop()
            continue
        direction, nx, ny = rng.choice(unvisited_neighbours)
        grid.remove_wall_between(x, y, direction)
        visited[ny, nx] = True
        stack.append((nx, ny))


def generate_maze(size, rng=None):
    size = validate_size(size)
    if rng is None:
        rng = random.Random()
    grid = Grid(size)
    visited = np.zeros((size, size), dtype=bool)
    carve_passages(grid, visited, rng)

    entrance_x, entrance_y = grid.entrance
    exit_x, exit_y = grid.exit
    entrance = grid.cell(entrance_x, entrance_y)
    exit_cell = grid.cell(exit_x, exit_y)
    entrance.walls[ENTRANCE_DOORWAY] = False
    exit_cell.walls[EXIT_DOORWAY] = False
    entrance.is_entrance = True
    exit_cell.is_exit = True
    return grid
