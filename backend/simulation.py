"""
Simulation controller for the terminal snake game.

Owns the board, the snake and the food, and applies one turn at a time.
Turn outcomes (including invalid input and self-collision) are returned
as values; only construction raises.
"""

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from domain import (
    QUIT,
    Board,
    Direction,
    Food,
    GameState,
    MoveResult,
    Snake,
)

logger = logging.getLogger(__name__)


class SimulationStatus(str, Enum):
    RUNNING = "running"
    TERMINATED = "terminated"


class TerminationReason(str, Enum):
    USER_QUIT = "user_quit"
    COLLISION = "collision"


class TurnStatus(str, Enum):
    CONTINUED = "continued"
    GREW = "grew"
    TERMINATED = "terminated"
    INVALID_INPUT = "invalid_input"


@dataclass(frozen=True)
class TurnResult:
    """Outcome of one ``apply_turn`` call. ``reason`` is set only when terminated."""

    status: TurnStatus
    reason: Optional[TerminationReason] = None

    @property
    def terminated(self) -> bool:
        return self.status == TurnStatus.TERMINATED


Command = Union[Direction, str, None]


def parse_direction(command: Command) -> Optional[Direction]:
    """
    Map a turn command to a Direction.

    Accepts Direction members or their names in any case. Returns None for
    anything else.
    """
    if isinstance(command, Direction):
        return command
    if not isinstance(command, str):
        return None
    try:
        return Direction(command.strip().upper())
    except ValueError:
        return None


def _is_quit(command: Command) -> bool:
    return isinstance(command, str) and command.strip().upper() == QUIT


class Simulation:
    """
    Manages:
      - Board (size x size, wrap-around)
      - Snake
      - Food
      - Running / terminated status
      - Turn counter
    """

    def __init__(
        self,
        board_size: int,
        initial_snake_size: int,
        rng: Optional[random.Random] = None,
        food_avoids_snake: bool = False,
    ):
        self.board = Board(board_size)
        self.snake = Snake.spawn(initial_snake_size, board_size)
        self.food = Food(board_size, rng)
        self.food_avoids_snake = food_avoids_snake
        self.status = SimulationStatus.RUNNING
        self.termination_reason: Optional[TerminationReason] = None
        self.turn_number = 0

        logger.info(
            "New simulation: board %dx%d, snake length %d, food at %s",
            board_size, board_size, initial_snake_size, self.food.position,
        )

    @property
    def is_running(self) -> bool:
        return self.status == SimulationStatus.RUNNING

    def apply_turn(self, command: Command) -> TurnResult:
        """
        Execute one turn:
          1) If the simulation is over, do nothing
          2) Quit ends the simulation
          3) Anything that is not a direction is reported as invalid input
          4) Move the snake; a self-collision ends the simulation
          5) If the head is on the food, grow and relocate the food
        """
        if not self.is_running:
            logger.warning("Simulation already terminated (%s); ignoring turn.", self.termination_reason.value)
            return TurnResult(TurnStatus.TERMINATED, self.termination_reason)

        if _is_quit(command):
            return self._terminate(TerminationReason.USER_QUIT)

        direction = parse_direction(command)
        if direction is None:
            logger.debug("Invalid input %r; state unchanged.", command)
            return TurnResult(TurnStatus.INVALID_INPUT)

        move_result = self.snake.move(direction)
        self.turn_number += 1
        logger.debug("Turn %d: moved %s, head now %s", self.turn_number, direction.value, self.snake.head)

        if move_result == MoveResult.SELF_COLLISION:
            return self._terminate(TerminationReason.COLLISION)

        if self.snake.head == self.food.position:
            self.snake.grow()
            avoid = self.snake.body if self.food_avoids_snake else None
            self.food.reposition(self.board.size, avoid=avoid)
            logger.info(
                "Turn %d: food eaten, length now %d, new food at %s",
                self.turn_number, len(self.snake), self.food.position,
            )
            return TurnResult(TurnStatus.GREW)

        return TurnResult(TurnStatus.CONTINUED)

    def _terminate(self, reason: TerminationReason) -> TurnResult:
        self.status = SimulationStatus.TERMINATED
        self.termination_reason = reason
        logger.info("Simulation terminated after %d turns: %s", self.turn_number, reason.value)
        return TurnResult(TurnStatus.TERMINATED, reason)

    def snapshot(self) -> GameState:
        """
        Return a snapshot of the current board as a GameState.
        """
        return GameState(
            size=self.board.size,
            snake_body=tuple(segment.as_tuple() for segment in self.snake.positions),
            food_position=self.food.position.as_tuple(),
            status=self.status.value,
            termination_reason=self.termination_reason.value if self.termination_reason else None,
            turn_number=self.turn_number,
        )

    def print_board(self):
        """
        Prints a visual representation of the current board state.
        """
        print("\n" + self.snapshot().print_board() + "\n")


def new_simulation(
    board_size: int,
    initial_snake_size: int,
    rng: Optional[random.Random] = None,
    food_avoids_snake: bool = False,
) -> Simulation:
    """
    Build a running simulation.

    Raises:
        InvalidConfiguration: if either size is not a positive integer.
    """
    return Simulation(
        board_size,
        initial_snake_size,
        rng=rng,
        food_avoids_snake=food_avoids_snake,
    )
