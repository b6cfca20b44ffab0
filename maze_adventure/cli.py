import argparse
import os
import random

from tqdm import tqdm

from maze_adventure.errors import MazeError
from maze_adventure.game import MazeGame
from maze_adventure.render import export_snapshot, record_solution, render_ascii
from maze_adventure.settings import Difficulty


def parse_args(argv=None):
    p = argparse.ArgumentParser(prog='maze-adventure', description="Maze generator, solver and game")
    sub = p.add_subparsers(dest='command', required=True)

    def add_common(parser):
        parser.add_argument('--difficulty', default='easy',
                            help='easy (10x10), medium (15x15) or hard (20x20); a size also works')
        parser.add_argument('--seed', type=int, default=None, help='random seed for a reproducible maze')

    play = sub.add_parser('play', help='open the interactive maze window')
    add_common(play)

    export = sub.add_parser('export', help='save maze snapshots as PNG images')
    add_common(export)
    export.add_argument('--count', type=int, default=1, help='number of mazes to export')
    export.add_argument('--output', default='.', help='directory the images are written to')

    solve = sub.add_parser('solve', help='print a maze and its depth-first solution')
    add_common(solve)
    solve.add_argument('--record', default=None, metavar='FILE.gif', help='also save the walk as a GIF')
    return p.parse_args(argv)


def run_play(game):
    from maze_adventure.window import MazeWindow

    print(f"🧩 Opening {game.difficulty.label} maze... (close the window to quit)")
    MazeWindow(game).show()


def run_export(game, count, output):
    if count < 1:
        raise MazeError(f"--count must be at least 1, got {count}")
    written = []
    for index in tqdm(range(count), desc="Exporting mazes", unit="maze", ncols=100):
        if index:
            game.new_game()
        filename = os.path.join(output, f"maze_{game.size}x{game.size}_{index + 1:03d}.png")
        written.append(export_snapshot(game.grid, filename))
    print(f"✅ Saved {len(written)} maze(s) to {os.path.abspath(output)}")
    return written


def run_solve(game, record):
    print(f"🔍 Solving {game.difficulty.label} maze with depth-first search...")
    path = game.solve()
    print(render_ascii(game.grid, path))
    print(f"✅ Path found: {len(path)} cells from {game.grid.entrance} to {game.grid.exit}")
    if record:
        print(f"💾 Saving animation to {record}...")
        record_solution(game.grid, path, record)
        print(f"✅ Animation saved successfully to {record}")
    return path


def main(argv=None):
    args = parse_args(argv)
    try:
        difficulty = Difficulty.from_value(args.difficulty)
        rng = random.Random(args.seed)
        print(f"🧩 Generating maze using Recursive Backtracker ({difficulty.size}x{difficulty.size})...")
        game = MazeGame(difficulty, rng=rng)
        if args.command == 'play':
            run_play(game)
        elif args.command == 'export':
            run_export(game, args.count, args.output)
        elif args.command == 'solve':
            run_solve(game, args.record)
    except MazeError as e:
        print(f"❌ {e}")
        return 1
    return 0
