import os

import matplotlib.animation as animation
import matplotlib.patches as patches
import matplotlib.pyplot as plt
from PIL import Image, ImageDraw
from tqdm import tqdm

from maze_adventure.maze import DIRECTIONS
from maze_adventure.settings import (
    AVATAR_COLOR,
    BG_COLOR,
    CELL_PIXELS,
    DEFAULT_SNAPSHOT_NAME,
    DPI,
    END_COLOR,
    FIG_WIDTH,
    GIF_FPS,
    MARGIN_PIXELS,
    PATH_COLOR,
    START_COLOR,
    STEP_INTERVAL_MS,
    WALL_COLOR,
    WALL_WIDTH,
)


def wall_segments(grid):
    """Closed walls as ((x0, y0), (x1, y1)) segments in cell units, y down."""
    corners = {
        'N': ((0, 0), (1, 0)),
        'E': ((1, 0), (1, 1)),
        'S': ((0, 1), (1, 1)),
        'W': ((0, 0), (0, 1)),
    }
    segments = []
    for cell in grid:
        for direction, _, _ in DIRECTIONS:
            if cell.walls[direction]:
                (ax0, ay0), (ax1, ay1) = corners[direction]
                segments.append(((cell.x + ax0, cell.y + ay0), (cell.x + ax1, cell.y + ay1)))
    return segments


def draw_maze(axes, grid, avatar=None, path=None, path_color=PATH_COLOR):
    size = grid.size
    axes.set_xlim(-0.5, size + 0.5)
    axes.set_ylim(size + 0.5, -0.5)
    axes.set_aspect('equal')
    axes.set_facecolor(BG_COLOR)
    axes.axis('off')

    for (x0, y0), (x1, y1) in wall_segments(grid):
        axes.plot([x0, x1], [y0, y1], color=WALL_COLOR, linewidth=1.5, solid_capstyle='round', zorder=30)

    entrance_x, entrance_y = grid.entrance
    exit_x, exit_y = grid.exit
    axes.text(entrance_x + 0.5, entrance_y + 0.5, '→', color=START_COLOR, fontsize=14,
              ha='center', va='center', weight='bold', zorder=10)
    axes.text(exit_x + 0.5, exit_y + 0.5, '↓', color=END_COLOR, fontsize=14,
              ha='center', va='center', weight='bold', zorder=10)

    artists = {'avatar': None, 'path': None}
    if path:
        xs = [x + 0.5 for x, _ in path]
        ys = [y + 0.5 for _, y in path]
        artists['path'], = axes.plot(xs, ys, color=path_color, linewidth=3, alpha=0.6, zorder=15)
    if avatar is not None:
        artists['avatar'] = patches.Circle((avatar[0] + 0.5, avatar[1] + 0.5), 0.32,
                                           color=AVATAR_COLOR, zorder=40)
        axes.add_patch(artists['avatar'])
    return artists


def render_snapshot(grid, cell_size=CELL_PIXELS, margin=MARGIN_PIXELS):
    """Raster image of the maze without the avatar."""
    side = grid.size * cell_size + 2 * margin
    image = Image.new('RGB', (side, side), BG_COLOR)
    draw = ImageDraw.Draw(image)

    def to_pixels(point):
        return (margin + point[0] * cell_size, margin + point[1] * cell_size)

    for start, end in wall_segments(grid):
        draw.line([to_pixels(start), to_pixels(end)], fill=WALL_COLOR, width=WALL_WIDTH)

    marker = cell_size * 0.22
    cx, cy = to_pixels((grid.entrance[0] + 0.5, grid.entrance[1] + 0.5))
    draw.polygon([(cx - marker, cy - marker), (cx + marker, cy), (cx - marker, cy + marker)], fill=START_COLOR)
    cx, cy = to_pixels((grid.exit[0] + 0.5, grid.exit[1] + 0.5))
    draw.polygon([(cx - marker, cy - marker), (cx + marker, cy - marker), (cx, cy + marker)], fill=END_COLOR)
    return image


def export_snapshot(grid, filename=DEFAULT_SNAPSHOT_NAME, cell_size=CELL_PIXELS):
    directory = os.path.dirname(filename)
    if directory and not os.path.exists(directory):
        os.makedirs(directory)
    render_snapshot(grid, cell_size=cell_size).save(filename)
    return filename


def render_ascii(grid, path=None):
    on_path = set(path or [])
    lines = []
    for row in grid.cells:
        top = '+'
        middle = '|' if row[0].walls['W'] else ' '
        for cell in row:
            top += ('---' if cell.walls['N'] else '   ') + '+'
            middle += ' * ' if (cell.x, cell.y) in on_path else '   '
            middle += '|' if cell.walls['E'] else ' '
        lines.append(top)
        lines.append(middle)
    bottom = '+'
    for cell in grid.cells[-1]:
        bottom += ('---' if cell.walls['S'] else '   ') + '+'
    lines.append(bottom)
    return '\n'.join(lines)


class TqdmProgressCallback:
    def __init__(self, total):
        self.pbar = tqdm(total=total, desc="Saving GIF", unit="frame", ncols=100)

    def __call__(self, current_frame, total_frames):
        self.pbar.update(1)

    def close(self):
        self.pbar.close()


def record_solution(grid, path, filename):
    """Save a GIF of the avatar walking ``path``, one frame per step."""
    if not path:
        raise ValueError("Cannot record an empty path")
    fig, axes = plt.subplots(figsize=(FIG_WIDTH, FIG_WIDTH), dpi=DPI)
    fig.patch.set_facecolor(BG_COLOR)
    artists = draw_maze(axes, grid, avatar=path[0])
    trail, = axes.plot([], [], color=PATH_COLOR, linewidth=3, alpha=0.6, zorder=15)
    avatar = artists['avatar']

    def update(i):
        x, y = path[i]
        avatar.center = (x + 0.5, y + 0.5)
        trail.set_data([px + 0.5 for px, _ in path[:i + 1]], [py + 0.5 for _, py in path[:i + 1]])
        return avatar, trail

    ani = animation.FuncAnimation(
        fig,
        update,
        frames=len(path),
        blit=False,
        interval=STEP_INTERVAL_MS,
        repeat=False
    )
    writer = animation.PillowWriter(fps=GIF_FPS, metadata=dict(artist='Maze Adventure'))
    progress_bar = TqdmProgressCallback(len(path))
    try:
        ani.save(filename, writer=writer, dpi=DPI, progress_callback=progress_bar)
    finally:
        progress_bar.close()
        plt.close(fig)
    return filename
