import random

from maze_adventure.errors import UnreachableError
from maze_adventure.maze import generate_maze
from maze_adventure.movement import direction_for_key, try_move
from maze_adventure.settings import Difficulty
from maze_adventure.solver import solve_maze_bfs, solve_maze_dfs


class CancelToken:
    def __init__(self):
        self.cancelled = False

    def cancel(self):
        self.cancelled = True


class SolutionPlayback:
    """Walks the game's avatar along ``path`` one step per ``step()`` call.

    The owner schedules the calls (a GUI timer, a test loop). Once the token
    is cancelled no further position is written.
    """

    def __init__(self, game, path, token):
        self.game = game
        self.path = list(path)
        self.token = token
        self.index = 0
        if self.path:
            game.avatar = self.path[0]

    @property
    def finished(self):
        return self.token.cancelled or self.index >= len(self.path) - 1

    def step(self):
        if self.finished:
            return False
        self.index += 1
        self.game.avatar = self.path[self.index]
        return not self.finished

    def cancel(self):
        self.token.cancel()


class MazeGame:
    def __init__(self, difficulty=Difficulty.EASY, rng=None):
        self.difficulty = Difficulty.from_value(difficulty)
        self.rng = rng if rng is not None else random.Random()
        self.grid = None
        self.avatar = (0, 0)
        self.playback = None
        self.new_game()

    @property
    def size(self):
        return self.grid.size

    @property
    def is_won(self):
        return self.avatar == self.grid.exit

    def cancel_playback(self):
        if self.playback is not None:
            self.playback.cancel()
            self.playback = None

    def new_game(self, difficulty=None):
        self.cancel_playback()
        if difficulty is not None:
            self.difficulty = Difficulty.from_value(difficulty)
        self.grid = generate_maze(self.difficulty.size, self.rng)
        self.avatar = self.grid.entrance
        return self.grid

    def move(self, direction):
        if self.is_won:
            return self.avatar
        self.avatar = try_move(self.grid, self.avatar, direction)
        return self.avatar

    def handle_key(self, key):
        direction = direction_for_key(key)
        if direction is None:
            return None
        return self.move(direction)

    def solve(self):
        path = solve_maze_dfs(self.grid, self.grid.entrance, self.grid.exit)
        if not path:
            raise UnreachableError(self.grid.entrance, self.grid.exit)
        return path

    def hint(self):
        path = solve_maze_bfs(self.grid, self.avatar, self.grid.exit)
        if not path:
            raise UnreachableError(self.avatar, self.grid.exit)
        return path

    def start_solution(self):
        self.cancel_playback()
        path = self.solve()
        self.playback = SolutionPlayback(self, path, CancelToken())
        return self.playback
