import sys

from maze_adventure.cli import main


if __name__ == "__main__":
    sys.exit(main())
