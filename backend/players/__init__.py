"""
Player implementations for the snake simulation.

This module contains the player abstractions and implementations
that decide the command for each turn.
"""

from .base import Player
from .keyboard_player import KeyboardPlayer, command_from_key, KEY_BINDINGS
from .random_player import RandomPlayer
from .variant_registry import get_player_class, list_variants, AVAILABLE_VARIANTS

__all__ = [
    'Player',
    'KeyboardPlayer',
    'command_from_key',
    'KEY_BINDINGS',
    'RandomPlayer',
    'get_player_class',
    'list_variants',
    'AVAILABLE_VARIANTS',
]
