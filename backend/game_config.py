"""
Runtime settings for the snake simulation.

Values come from the environment (a local .env file is loaded first) and
can be overridden by command-line flags in cli/play.py.

Variables:
    SNAKE_BOARD_SIZE          board size; prompted for when unset
    SNAKE_INITIAL_LENGTH      initial snake length; prompted for when unset
    SNAKE_SEED                integer seed for food placement
    SNAKE_FOOD_AVOIDS_SNAKE   never place food under the snake (1/true/yes/on)
    SNAKE_MAX_TURNS           turn limit for autoplay runs
    LOG_LEVEL                 logging level name (default WARNING)
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

from domain import InvalidConfiguration

load_dotenv()

DEFAULT_MAX_TURNS = 500
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


@dataclass
class GameSettings:
    board_size: Optional[int] = None
    initial_length: Optional[int] = None
    seed: Optional[int] = None
    food_avoids_snake: bool = False
    max_turns: int = DEFAULT_MAX_TURNS
    log_level: str = DEFAULT_LOG_LEVEL


def _get_int(env: Mapping[str, str], name: str, positive: bool = True) -> Optional[int]:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return None
    try:
        value = int(raw.strip())
    except ValueError:
        raise InvalidConfiguration(f"{name} must be an integer, got {raw!r}.") from None
    if positive and value <= 0:
        raise InvalidConfiguration(f"{name} must be positive, got {value}.")
    return value


def _get_bool(env: Mapping[str, str], name: str) -> bool:
    raw = env.get(name, "").strip().lower()
    if raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    raise InvalidConfiguration(f"{name} must be a boolean flag, got {raw!r}.")


def parse_log_level(raw: str) -> str:
    """Normalise a level name such as "info"; raises InvalidConfiguration if unknown."""
    level = raw.strip().upper() or DEFAULT_LOG_LEVEL
    if not isinstance(logging.getLevelName(level), int):
        raise InvalidConfiguration(f"{level!r} is not a logging level.")
    return level


def load_settings(env: Optional[Mapping[str, str]] = None) -> GameSettings:
    """
    Read settings from ``env`` (defaults to ``os.environ``).

    Raises:
        InvalidConfiguration: if a variable is set but malformed.
    """
    if env is None:
        env = os.environ

    max_turns = _get_int(env, "SNAKE_MAX_TURNS")
    return GameSettings(
        board_size=_get_int(env, "SNAKE_BOARD_SIZE"),
        initial_length=_get_int(env, "SNAKE_INITIAL_LENGTH"),
        seed=_get_int(env, "SNAKE_SEED", positive=False),
        food_avoids_snake=_get_bool(env, "SNAKE_FOOD_AVOIDS_SNAKE"),
        max_turns=max_turns if max_turns is not None else DEFAULT_MAX_TURNS,
        log_level=parse_log_level(env.get("LOG_LEVEL", DEFAULT_LOG_LEVEL)),
    )


def configure_logging(level: str = DEFAULT_LOG_LEVEL):
    logging.basicConfig(level=level, format=LOG_FORMAT)
