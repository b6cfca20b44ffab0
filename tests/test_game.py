import random

import pytest

from maze_adventure.errors import InvalidSizeError, UnreachableError
from maze_adventure.game import CancelToken, MazeGame, SolutionPlayback
from maze_adventure.maze import Grid
from maze_adventure.settings import Difficulty


@pytest.fixture
def game():
    return MazeGame(Difficulty.EASY, rng=random.Random(3))


def walk(game, path):
    keys = {(0, -1): 'up', (1, 0): 'right', (0, 1): 'down', (-1, 0): 'left'}
    for (x, y), (nx, ny) in zip(path, path[1:]):
        game.handle_key(keys[(nx - x, ny - y)])


def test_new_game_resets_avatar(game):
    game.move('E')
    game.move('S')
    grid = game.grid
    game.new_game()
    assert game.grid is not grid
    assert game.avatar == game.grid.entrance


def test_new_game_changes_difficulty(game):
    game.new_game(Difficulty.HARD)
    assert game.size == 20
    game.new_game('medium')
    assert game.difficulty is Difficulty.MEDIUM
    assert game.size == 15


def test_unsupported_difficulty(game):
    with pytest.raises(InvalidSizeError):
        game.new_game(12)
    with pytest.raises(InvalidSizeError):
        MazeGame('impossible')


def test_walking_the_solution_wins(game):
    path = game.solve()
    assert not game.is_won
    walk(game, path)
    assert game.avatar == game.grid.exit
    assert game.is_won


def test_moves_ignored_after_win(game):
    walk(game, game.solve())
    assert game.move('N') == game.grid.exit
    assert game.move('W') == game.grid.exit


def test_handle_key_ignores_other_keys(game):
    assert game.handle_key('x') is None
    assert game.avatar == game.grid.entrance


def test_hint_starts_from_avatar(game):
    path = game.solve()
    walk(game, path[:4])
    hint = game.hint()
    assert hint[0] == game.avatar
    assert hint[-1] == game.grid.exit
    assert hint == path[3:]


def test_solve_unreachable_raises(game):
    game.grid = Grid(game.size)
    with pytest.raises(UnreachableError):
        game.solve()
    with pytest.raises(UnreachableError):
        game.hint()


def test_playback_walks_to_exit(game):
    playback = game.start_solution()
    assert game.avatar == game.grid.entrance
    steps = 0
    while playback.step():
        steps += 1
    assert game.avatar == game.grid.exit
    assert steps == len(playback.path) - 2
    assert game.is_won
    assert not playback.step()


def test_new_game_cancels_playback(game):
    playback = game.start_solution()
    playback.step()
    playback.step()
    game.new_game()
    assert playback.token.cancelled
    assert not playback.step()
    assert game.avatar == game.grid.entrance


def test_new_solution_cancels_previous(game):
    first = game.start_solution()
    first.step()
    second = game.start_solution()
    assert first.token.cancelled
    assert not second.token.cancelled
    assert game.avatar == game.grid.entrance


def test_cancelled_token_blocks_writes(game):
    token = CancelToken()
    playback = SolutionPlayback(game, [(0, 0), (1, 0), (2, 0)], token)
    token.cancel()
    assert not playback.step()
    assert game.avatar == (0, 0)
    assert playback.finished
