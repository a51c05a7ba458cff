"""
Random player implementation - picks random safe moves on the wrap-around board.
"""

import random
from typing import List, Optional

from domain.constants import DIRECTION_DELTAS, VALID_MOVES, Direction
from domain.game_state import GameState
from .base import Player


class RandomPlayer(Player):
    """
    A random AI that picks a direction that avoids self-collisions.

    There are no walls: moves wrap around the board edges.
    """

    name = "random"

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()

    def get_move(self, game_state: GameState) -> Direction:
        snake_positions = game_state.snake_body
        head_x, head_y = snake_positions[0]
        size = game_state.size

        # The tail cell is vacated by the move, so it is safe to enter
        blocked = set(snake_positions[:-1])

        safe_moves: List[Direction] = []
        for move in sorted(VALID_MOVES, key=lambda d: d.value):
            dx, dy = DIRECTION_DELTAS[move]
            new_cell = ((head_x + dx) % size, (head_y + dy) % size)
            if new_cell not in blocked:
                safe_moves.append(move)

        # If no safe moves, just return a random move (we'll die anyway)
        if not safe_moves:
            return self.rng.choice(sorted(VALID_MOVES, key=lambda d: d.value))

        return self.rng.choice(safe_moves)
