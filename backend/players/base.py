"""
Base player interface for the simulation.
"""

from domain.game_state import GameState


class Player:
    """
    Base class/interface for player logic.

    Each player is responsible for returning a command for the snake
    given the current game state.
    """

    name = "player"

    def get_move(self, game_state: GameState):
        """
        Return the command for the next turn given the current game state.

        Args:
            game_state: Current state of the game

        Returns:
            A Direction, QUIT, or any other value (treated as invalid input)
        """
        raise NotImplementedError
