"""
Food entity - a single randomly placed cell.
"""

import random
from typing import Iterable, Optional

from .coordinate import Coordinate


class Food:
    """
    The food item on the board.

    Attributes:
        position: current cell; replaced (never mutated) on every reposition
        rng: random source used for placement, seedable for reproducible runs
    """

    def __init__(self, board_size: int, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()
        self.position: Coordinate = self._random_cell(board_size)

    def reposition(self, board_size: int, avoid: Optional[Iterable[Coordinate]] = None) -> Coordinate:
        """
        Move the food to a new random cell and return it.

        By default any cell may be chosen, including ones under the snake.
        When ``avoid`` is given the cell is drawn from the cells not in it;
        if every cell is occupied the whole board is used instead.
        """
        if avoid is None:
            self.position = self._random_cell(board_size)
            return self.position

        occupied = set(avoid)
        free_cells = [
            Coordinate(x, y)
            for y in range(board_size)
            for x in range(board_size)
            if Coordinate(x, y) not in occupied
        ]
        if free_cells:
            self.position = self.rng.choice(free_cells)
        else:
            self.position = self._random_cell(board_size)
        return self.position

    def _random_cell(self, board_size: int) -> Coordinate:
        return Coordinate(
            self.rng.randrange(board_size),
            self.rng.randrange(board_size),
        )
