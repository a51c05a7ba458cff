"""
GameState entity - a snapshot of the simulation at a point in time.
"""

from typing import Dict, Optional, Tuple

from .constants import EMPTY_MARKER, FOOD_MARKER, SNAKE_MARKER


class GameState:
    """
    A snapshot of the simulation after a specific turn.

    Attributes:
        size: board size (the board is size x size)
        snake_body: tuple of (x, y), head first
        food_position: (x, y) of the food
        status: 'running' or 'terminated'
        termination_reason: 'user_quit' or 'collision' once terminated
        turn_number: number of turns that moved the snake
    """

    def __init__(
        self,
        size: int,
        snake_body: Tuple[Tuple[int, int], ...],
        food_position: Tuple[int, int],
        status: str,
        termination_reason: Optional[str] = None,
        turn_number: int = 0,
    ):
        self.size = size
        self.snake_body = tuple(snake_body)
        self.food_position = food_position
        self.status = status
        self.termination_reason = termination_reason
        self.turn_number = turn_number

    @property
    def head(self) -> Tuple[int, int]:
        return self.snake_body[0]

    @property
    def is_running(self) -> bool:
        return self.status == "running"

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        S = snake segment
        F = food
        Row 0 is printed first. Food is drawn after the snake, so food lying
        under the body shows as F.
        """
        board = [[EMPTY_MARKER for _ in range(self.size)] for _ in range(self.size)]

        for x, y in self.snake_body:
            board[y][x] = SNAKE_MARKER

        fx, fy = self.food_position
        board[fy][fx] = FOOD_MARKER

        return "\n".join(" ".join(row) for row in board)

    def to_dict(self) -> Dict:
        return {
            "size": self.size,
            "snake_body": [list(segment) for segment in self.snake_body],
            "food_position": list(self.food_position),
            "status": self.status,
            "termination_reason": self.termination_reason,
            "turn_number": self.turn_number,
        }

    def __eq__(self, other):
        if not isinstance(other, GameState):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self):
        return (
            f"<GameState turn={self.turn_number}, status={self.status}, "
            f"length={len(self.snake_body)}, food={self.food_position}>"
        )
