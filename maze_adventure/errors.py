class MazeError(Exception):
    """Base class for every error raised by the maze engine."""


class InvalidSizeError(MazeError, ValueError):
    """The requested grid size or difficulty is not supported."""


class UnreachableError(MazeError):
    """No passage connects the two requested cells."""

    def __init__(self, start, end):
        super().__init__(f"No path from {start} to {end}")
        self.start = start
        self.end = end
