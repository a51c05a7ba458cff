"""
Registry for player variants.

Maps variant keys (e.g. 'keyboard', 'random') to player classes so the CLI
can pick who steers the snake.
"""

from typing import Callable, Dict, List, Optional, Type

from .base import Player


def _get_keyboard_player() -> Type[Player]:
    from .keyboard_player import KeyboardPlayer
    return KeyboardPlayer


def _get_random_player() -> Type[Player]:
    from .random_player import RandomPlayer
    return RandomPlayer


PLAYER_VARIANT_LOADERS: Dict[str, Callable[[], Type[Player]]] = {
    "keyboard": _get_keyboard_player,
    "random": _get_random_player,
}

DEFAULT_VARIANT = "keyboard"

# Canonical list of available variant keys (for CLI choices)
AVAILABLE_VARIANTS = list(PLAYER_VARIANT_LOADERS.keys())


def get_player_class(variant_key: Optional[str] = None) -> Type[Player]:
    """
    Get the player class for a given variant key.

    Args:
        variant_key: One of AVAILABLE_VARIANTS. If None or empty, returns the keyboard player.

    Raises:
        ValueError: If variant_key is not recognized.
    """
    if not variant_key or variant_key.strip() == "":
        variant_key = DEFAULT_VARIANT

    variant_key = variant_key.strip().lower()

    if variant_key not in PLAYER_VARIANT_LOADERS:
        available = ", ".join(AVAILABLE_VARIANTS)
        raise ValueError(
            f"Unknown player variant '{variant_key}'. Available variants: {available}"
        )

    return PLAYER_VARIANT_LOADERS[variant_key]()


def list_variants() -> List[Dict[str, str]]:
    """
    Return metadata about all available player variants.
    """
    return [
        {"key": "keyboard", "description": "Human player typing W/A/S/D (Q quits)"},
        {"key": "random", "description": "Picks a random direction that avoids its own body"},
    ]
