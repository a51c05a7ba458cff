"""
Game constants for the terminal snake simulation.
"""

from enum import Enum
from typing import Dict, Tuple


class Direction(str, Enum):
    """Movement directions. Values double as the plain-string names."""

    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"


# Movement directions
UP = Direction.UP
DOWN = Direction.DOWN
LEFT = Direction.LEFT
RIGHT = Direction.RIGHT
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

# Non-directional command that ends the session
QUIT = "QUIT"

# (dx, dy) per direction. Row 0 is the top of the board, so UP decreases y.
DIRECTION_DELTAS: Dict[Direction, Tuple[int, int]] = {
    UP: (0, -1),
    DOWN: (0, 1),
    LEFT: (-1, 0),
    RIGHT: (1, 0),
}

# Board markers
EMPTY_MARKER = "."
SNAKE_MARKER = "S"
FOOD_MARKER = "F"
