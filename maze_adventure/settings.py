from enum import Enum

from maze_adventure.errors import InvalidSizeError


MAX_MAZE_SIZE = 64

STEP_INTERVAL_MS = 100

BG_COLOR = '#F3F4F6'
WALL_COLOR = '#9CA3AF'
PATH_COLOR = '#3B82F6'
HINT_COLOR = '#A855F7'
START_COLOR = '#16A34A'
END_COLOR = '#DC2626'
AVATAR_COLOR = '#F97316'

CELL_PIXELS = 40
MARGIN_PIXELS = 10
WALL_WIDTH = 3

FIG_WIDTH = 6
FIG_HEIGHT = 6.8
DPI = 100
GIF_FPS = 1000 // STEP_INTERVAL_MS

DEFAULT_SNAPSHOT_NAME = 'maze_without_avatar.png'


class Difficulty(Enum):
    EASY = 10
    MEDIUM = 15
    HARD = 20

    @property
    def size(self):
        return self.value

    @property
    def label(self):
        return DIFFICULTY_LABELS[self]

    @classmethod
    def from_value(cls, value):
        """Accept a Difficulty, a grid size or a name such as 'hard'."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().upper()
            if key in cls.__members__:
                return cls[key]
            if key.isdigit():
                value = int(key)
        if isinstance(value, int) and not isinstance(value, bool):
            for difficulty in cls:
                if difficulty.value == value:
                    return difficulty
        supported = ', '.join(f"{d.name.lower()} ({d.value})" for d in cls)
        raise InvalidSizeError(f"Unsupported difficulty {value!r}; choose one of {supported}")


DIFFICULTY_LABELS = {
    Difficulty.EASY: '10x10 (Easy Peasy!)',
    Difficulty.MEDIUM: '15x15 (Getting Tricky!)',
    Difficulty.HARD: '20x20 (Super Challenge!)',
}
