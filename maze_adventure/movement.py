from maze_adventure.maze import OFFSETS


ARROW_KEYS = {
    'up': 'N',
    'right': 'E',
    'down': 'S',
    'left': 'W',
}


def direction_for_key(key):
    return ARROW_KEYS.get(key)


def try_move(grid, position, direction):
    """Step one cell in ``direction`` if no wall blocks it.

    A blocked or out-of-bounds step is not an error: the original position is
    returned unchanged.
    """
    if direction not in OFFSETS:
        raise ValueError(f"Unknown direction {direction!r}; expected one of N, E, S, W")
    x, y = grid.check_position(position)
    dx, dy = OFFSETS[direction]
    nx, ny = x + dx, y + dy
    if grid.in_bounds(nx, ny) and grid.is_open((x, y), direction):
        return (nx, ny)
    return position
