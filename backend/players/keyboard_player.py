"""
Keyboard player - reads one line per turn and maps its first character.
"""

import logging
from typing import Callable, Dict, Optional, Union

from domain.constants import DOWN, LEFT, QUIT, RIGHT, UP, Direction
from domain.game_state import GameState
from .base import Player

logger = logging.getLogger(__name__)

PROMPT = "Enter direction (WASD or Q to quit): "

KEY_BINDINGS: Dict[str, Union[Direction, str]] = {
    "W": UP,
    "A": LEFT,
    "S": DOWN,
    "D": RIGHT,
    "Q": QUIT,
}


def command_from_key(line: str) -> Optional[Union[Direction, str]]:
    """
    Map typed text to a command using its first non-blank character.

    Returns None when the text is empty or the key is not bound.
    """
    stripped = line.strip()
    if not stripped:
        return None
    return KEY_BINDINGS.get(stripped[0].upper())


class KeyboardPlayer(Player):
    """
    Human player typing W/A/S/D to steer and Q to quit.

    ``input_fn`` defaults to the built-in ``input``; end of input is
    treated as quitting.
    """

    name = "keyboard"

    def __init__(self, input_fn: Callable[[str], str] = input):
        self.input_fn = input_fn

    def get_move(self, game_state: GameState):
        try:
            line = self.input_fn(PROMPT)
        except EOFError:
            logger.info("End of input; quitting.")
            return QUIT
        return command_from_key(line)
