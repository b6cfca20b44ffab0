from collections import deque

import numpy as np

from maze_adventure.maze import DIRECTIONS


def _check_endpoints(grid, start_pos, end_pos):
    return grid.check_position(start_pos, 'start position'), grid.check_position(end_pos, 'end position')


def solve_maze_dfs(grid, start_pos, end_pos):
    """Depth-first search from ``start_pos`` to ``end_pos``.

    Returns the first path found as a list of (x, y) tuples, or an empty list
    when ``end_pos`` cannot be reached. Neighbours are pushed top, right,
    bottom, left, so the left branch is explored first. The grid is not
    modified.
    """
    start_pos, end_pos = _check_endpoints(grid, start_pos, end_pos)
    visited = np.zeros((grid.size, grid.size), dtype=bool)
    stack = [(start_pos, [start_pos])]
    while stack:
        current_pos, path = stack.pop()
        if current_pos == end_pos:
            return path
        x, y = current_pos
        if visited[y, x]:
            continue
        visited[y, x] = True
        for direction, dx, dy in DIRECTIONS:
            nx, ny = x + dx, y + dy
            if grid.in_bounds(nx, ny) and not visited[ny, nx] and grid.is_open(current_pos, direction):
                stack.append(((nx, ny), path + [(nx, ny)]))
    return []


def solve_maze_bfs(grid, start_pos, end_pos):
    """Shortest path by breadth-first search, or an empty list."""
    start_pos, end_pos = _check_endpoints(grid, start_pos, end_pos)
    queue = deque([start_pos])
    visited = {start_pos}
    came_from = {}
    while queue:
        current_pos = queue.popleft()
        if current_pos == end_pos:
            final_path = []
            temp_pos = current_pos
            while temp_pos in came_from:
                final_path.append(temp_pos)
                temp_pos = came_from[temp_pos]
            final_path.append(start_pos)
            final_path.reverse()
            return final_path
        x, y = current_pos
        for direction, dx, dy in DIRECTIONS:
            nx, ny = x + dx, y + dy
            if grid.in_bounds(nx, ny) and (nx, ny) not in visited and grid.is_open(current_pos, direction):
                visited.add((nx, ny))
                came_from[(nx, ny)] = current_pos
                queue.append((nx, ny))
    return []
