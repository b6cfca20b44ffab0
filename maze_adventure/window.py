import matplotlib.pyplot as plt

from maze_adventure.errors import MazeError
from maze_adventure.render import draw_maze, export_snapshot
from maze_adventure.settings import (
    BG_COLOR,
    DEFAULT_SNAPSHOT_NAME,
    DIFFICULTY_LABELS,
    Difficulty,
    END_COLOR,
    FIG_HEIGHT,
    FIG_WIDTH,
    HINT_COLOR,
    STEP_INTERVAL_MS,
)


DIFFICULTY_KEYS = {'1': Difficulty.EASY, '2': Difficulty.MEDIUM, '3': Difficulty.HARD}
COMMAND_KEYS = ['up', 'down', 'left', 'right', 'n', 's', 'h', 'd', '1', '2', '3']

HELP_TEXT = "Arrows: move   S: solve   H: hint   N: new maze   D: download   1/2/3: size"


def release_keymaps(keys=COMMAND_KEYS):
    """Drop matplotlib's default bindings for the keys the game uses."""
    for name in list(plt.rcParams):
        if name.startswith('keymap.'):
            plt.rcParams[name] = [key for key in plt.rcParams[name] if key not in keys]


class MazeWindow:
    """Matplotlib front end: draws the game and feeds it keyboard input."""

    def __init__(self, game, snapshot_path=DEFAULT_SNAPSHOT_NAME):
        self.game = game
        self.snapshot_path = snapshot_path
        self.hint_path = None
        self.timer = None
        self.status = ''
        self.fig, self.axes = plt.subplots(figsize=(FIG_WIDTH, FIG_HEIGHT))
        self.fig.patch.set_facecolor(BG_COLOR)
        self.status_text = self.fig.text(0.5, 0.04, HELP_TEXT, ha='center', fontsize=9)
        self.fig.canvas.mpl_connect('key_press_event', self.on_key)
        self.redraw()

    def redraw(self):
        self.axes.clear()
        draw_maze(self.axes, self.game.grid, avatar=self.game.avatar, path=self.hint_path, path_color=HINT_COLOR)
        self.axes.set_title(f"Maze Adventure - {DIFFICULTY_LABELS[self.game.difficulty]}", fontsize=14, weight='bold')
        self.status_text.set_text(self.status or HELP_TEXT)
        if self.game.is_won:
            self.axes.text(self.game.size / 2, self.game.size / 2,
                           "Congratulations!\nPress N to start a new game",
                           ha='center', va='center', fontsize=16, weight='bold', color=END_COLOR,
                           bbox=dict(facecolor='white', alpha=0.9, boxstyle='round'), zorder=50)
        self.fig.canvas.draw_idle()

    def stop_timer(self):
        if self.timer is not None:
            self.timer.stop()
            self.timer = None

    def new_game(self, difficulty=None):
        self.stop_timer()
        self.hint_path = None
        self.status = ''
        self.game.new_game(difficulty)
        self.redraw()

    def start_solution(self):
        self.stop_timer()
        self.hint_path = None
        try:
            playback = self.game.start_solution()
        except MazeError as e:
            self.status = f"❌ {e}"
            self.redraw()
            return None
        self.timer = self.fig.canvas.new_timer(interval=STEP_INTERVAL_MS)
        self.timer.add_callback(self.advance, playback)
        self.timer.start()
        self.redraw()
        return playback

    def advance(self, playback):
        if playback.token.cancelled:
            self.stop_timer()
            return
        if not playback.step():
            self.stop_timer()
        self.redraw()

    def show_hint(self):
        try:
            self.hint_path = self.game.hint()
        except MazeError as e:
            self.status = f"❌ {e}"
        self.redraw()

    def download(self):
        filename = export_snapshot(self.game.grid, self.snapshot_path)
        self.status = f"💾 Saved {filename}"
        print(f"💾 Maze saved to {filename}")
        self.redraw()
        return filename

    def on_key(self, event):
        key = event.key
        if key in DIFFICULTY_KEYS:
            self.new_game(DIFFICULTY_KEYS[key])
        elif key == 'n':
            self.new_game()
        elif key == 's':
            self.start_solution()
        elif key == 'h':
            self.show_hint()
        elif key == 'd':
            self.download()
        else:
            before = self.game.avatar
            if self.game.handle_key(key) is None:
                return
            if self.game.avatar != before:
                self.stop_timer()
                self.game.cancel_playback()
                self.hint_path = None
            self.redraw()

    def show(self):
        release_keymaps()
        plt.show()
