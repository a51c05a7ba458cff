"""
Board entity - the square, wrap-around extent every coordinate lives in.
"""

from dataclasses import dataclass
from typing import Iterator

from .constants import DIRECTION_DELTAS, Direction
from .coordinate import Coordinate
from .errors import InvalidConfiguration


def wrap(value: int, axis_size: int) -> int:
    """Wrap ``value`` into ``[0, axis_size)``; -1 becomes ``axis_size - 1``."""
    return value % axis_size


def require_positive_int(value, name: str) -> int:
    """
    Validate a size parameter.

    Raises:
        InvalidConfiguration: if ``value`` is not an int (bools rejected) or is <= 0.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidConfiguration(f"{name} must be an integer, got {value!r}.")
    if value <= 0:
        raise InvalidConfiguration(f"{name} must be positive, got {value}.")
    return value


@dataclass(frozen=True)
class Board:
    """
    A square toroidal board.

    Attributes:
        size: number of cells along each axis
    """

    size: int

    def __post_init__(self):
        require_positive_int(self.size, "Board size")

    def wrap(self, value: int) -> int:
        return wrap(value, self.size)

    def step(self, coordinate: Coordinate, direction: Direction) -> Coordinate:
        """Return the neighbour of ``coordinate`` in ``direction``, wrapping at the edges."""
        dx, dy = DIRECTION_DELTAS[direction]
        return Coordinate(self.wrap(coordinate.x + dx), self.wrap(coordinate.y + dy))

    def contains(self, coordinate: Coordinate) -> bool:
        return 0 <= coordinate.x < self.size and 0 <= coordinate.y < self.size

    def cells(self) -> Iterator[Coordinate]:
        """Every coordinate on the board, row by row."""
        for y in range(self.size):
            for x in range(self.size):
                yield Coordinate(x, y)
