"""
Domain entities for the terminal snake simulation.

This module contains the core game entities that are independent of
input and output concerns (keyboard, terminal rendering, configuration).
"""

from .constants import (
    Direction,
    UP, DOWN, LEFT, RIGHT, VALID_MOVES, QUIT,
    DIRECTION_DELTAS,
    EMPTY_MARKER, SNAKE_MARKER, FOOD_MARKER,
)
from .errors import SnakeSimError, InvalidConfiguration, EmptyBody, SimulationTerminated
from .coordinate import Coordinate
from .board import Board, wrap
from .food import Food
from .snake import Snake, MoveResult
from .game_state import GameState

__all__ = [
    'Direction',
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'QUIT',
    'DIRECTION_DELTAS',
    'EMPTY_MARKER', 'SNAKE_MARKER', 'FOOD_MARKER',
    'SnakeSimError', 'InvalidConfiguration', 'EmptyBody', 'SimulationTerminated',
    'Coordinate',
    'Board', 'wrap',
    'Food',
    'Snake', 'MoveResult',
    'GameState',
]
