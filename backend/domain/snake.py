"""
Snake entity for the simulation core.
"""

from collections import Counter, deque
from enum import Enum
from typing import Iterable, Optional, Tuple

from .board import Board, require_positive_int
from .constants import Direction
from .coordinate import Coordinate
from .errors import EmptyBody, InvalidConfiguration, SimulationTerminated


class MoveResult(str, Enum):
    MOVED = "moved"
    SELF_COLLISION = "self_collision"


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        positions: deque of Coordinate from head at index 0 to tail at the end
        board: the wrap-around board the snake moves on
        alive: whether this snake is still alive
        death_reason: 'self' once the snake has run into its own body
    """

    def __init__(self, positions: Iterable[Coordinate], board_size: int):
        self.board = Board(board_size)
        self.positions = deque(positions)
        if not self.positions:
            raise InvalidConfiguration("A snake needs at least one segment.")
        for segment in self.positions:
            if not self.board.contains(segment):
                raise InvalidConfiguration(
                    f"Segment {segment} is outside a board of size {board_size}."
                )

        # Occupancy count per cell, kept in step with `positions` so the
        # collision test is a dict lookup instead of a scan of the body.
        self._occupancy = Counter(self.positions)
        self.alive = True
        self.death_reason: Optional[str] = None

    @classmethod
    def spawn(cls, initial_size: int, board_size: int) -> "Snake":
        """
        Create a vertical snake at x=0 with its head at the top (y=0).

        Raises:
            InvalidConfiguration: if either size is not a positive integer.
        """
        require_positive_int(initial_size, "Initial snake size")
        require_positive_int(board_size, "Board size")
        return cls(
            [Coordinate(0, y % board_size) for y in range(initial_size)],
            board_size,
        )

    @property
    def head(self) -> Coordinate:
        """Return the head position (first element)."""
        if not self.positions:
            raise EmptyBody("Snake has no segments.")
        return self.positions[0]

    @property
    def tail(self) -> Coordinate:
        return self.positions[-1]

    @property
    def body(self) -> Tuple[Coordinate, ...]:
        return tuple(self.positions)

    def __len__(self):
        return len(self.positions)

    def occupies(self, coordinate: Coordinate) -> bool:
        return self._occupancy[coordinate] > 0

    def move(self, direction: Direction) -> MoveResult:
        """
        Advance one cell in ``direction``.

        The new head is prepended and the tail dropped before the collision
        check, so a head that lands on the cell the tail just left is safe.
        On collision the body keeps its post-move shape, with the colliding
        head in front.
        """
        if not self.alive:
            raise SimulationTerminated("Snake has already collided and cannot move.")

        new_head = self.board.step(self.head, direction)
        self.positions.appendleft(new_head)
        self._occupancy[new_head] += 1

        old_tail = self.positions.pop()
        self._occupancy[old_tail] -= 1
        if not self._occupancy[old_tail]:
            del self._occupancy[old_tail]

        if self._occupancy[new_head] > 1:
            self.alive = False
            self.death_reason = "self"
            return MoveResult.SELF_COLLISION
        return MoveResult.MOVED

    def grow(self):
        """Duplicate the tail segment; the copy separates on the next move."""
        tail = self.tail
        self.positions.append(tail)
        self._occupancy[tail] += 1

    def __repr__(self):
        return f"<Snake head={self.head} length={len(self)} alive={self.alive}>"
