from maze_adventure.errors import InvalidSizeError, MazeError, UnreachableError
from maze_adventure.game import CancelToken, MazeGame, SolutionPlayback
from maze_adventure.maze import Cell, Grid, generate_maze
from maze_adventure.movement import try_move
from maze_adventure.settings import Difficulty
from maze_adventure.solver import solve_maze_bfs, solve_maze_dfs

__version__ = '1.0.0'
