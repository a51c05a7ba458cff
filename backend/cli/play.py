#!/usr/bin/env python3
"""
Play the wrap-around snake simulation in the terminal.

Usage:
    # Prompt for board size and snake length, steer with W/A/S/D, Q quits
    python backend/cli/play.py

    # Fixed board, reproducible food placement
    python backend/cli/play.py --size 10 --length 3 --seed 42

    # Let the random player drive for at most 200 turns
    python backend/cli/play.py --size 8 --length 4 --player random --max-turns 200
"""

import argparse
import os
import random
import sys
from typing import Callable, Optional

# Add parent directory to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from domain import InvalidConfiguration  # noqa: E402
from game_config import configure_logging, load_settings, parse_log_level  # noqa: E402
from players import AVAILABLE_VARIANTS, Player, RandomPlayer, get_player_class, list_variants  # noqa: E402
from simulation import Simulation, TerminationReason, TurnStatus, new_simulation  # noqa: E402

INVALID_INPUT_MESSAGE = "Invalid input! Use W, A, S, D, or Q to quit."
GAME_OVER_MESSAGES = {
    TerminationReason.USER_QUIT: "Game Over: You quit the game!",
    TerminationReason.COLLISION: "Game Over: Snake hit its own tail!",
}

EXIT_OK = 0
EXIT_NO_INPUT = 1
EXIT_BAD_CONFIG = 2


def prompt_positive_int(prompt: str, input_fn: Callable[[str], str] = input) -> int:
    """
    Ask until a positive integer is entered.

    EOFError from ``input_fn`` propagates to the caller.
    """
    while True:
        raw = input_fn(prompt)
        try:
            value = int(raw.strip())
        except ValueError:
            print(f"Please enter a whole number, got {raw.strip()!r}.", file=sys.stderr)
            continue
        if value <= 0:
            print(f"Please enter a positive number, got {value}.", file=sys.stderr)
            continue
        return value


def build_player(variant: str, seed: Optional[int], input_fn: Callable[[str], str] = input) -> Player:
    player_cls = get_player_class(variant)
    if issubclass(player_cls, RandomPlayer):
        return player_cls(rng=random.Random(seed))
    return player_cls(input_fn=input_fn)


def play(simulation: Simulation, player: Player, max_turns: Optional[int] = None) -> Optional[TerminationReason]:
    """
    Drive the simulation until it terminates or ``max_turns`` moves were made.

    Returns:
        The termination reason, or None if the turn limit stopped the game.
    """
    while simulation.is_running:
        if max_turns is not None and simulation.turn_number >= max_turns:
            simulation.print_board()
            print(f"Stopped after reaching the turn limit ({max_turns}).")
            return None

        simulation.print_board()
        command = player.get_move(simulation.snapshot())
        result = simulation.apply_turn(command)

        if result.status == TurnStatus.INVALID_INPUT:
            print(INVALID_INPUT_MESSAGE)

    reason = simulation.termination_reason
    if reason == TerminationReason.COLLISION:
        # Show the board with the colliding head in place
        simulation.print_board()
    print(GAME_OVER_MESSAGES[reason])
    return reason


def main(argv=None, input_fn: Callable[[str], str] = input) -> int:
    parser = argparse.ArgumentParser(
        description="Play snake on a wrap-around board in the terminal."
    )
    parser.add_argument("--size", type=int, default=None,
                        help="Board size N (the board is N x N). Prompted for if omitted.")
    parser.add_argument("--length", type=int, default=None,
                        help="Initial snake length. Prompted for if omitted.")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for food placement (and the random player).")
    parser.add_argument("--player", choices=AVAILABLE_VARIANTS, default="keyboard",
                        help="Who steers the snake (default: keyboard).")
    parser.add_argument("--max-turns", type=int, default=None,
                        help="Turn limit for the random player (default: SNAKE_MAX_TURNS or 500).")
    parser.add_argument("--food-avoids-snake", action="store_true", default=None,
                        help="Never place new food under the snake's body.")
    parser.add_argument("--log-level", type=str, default=None,
                        help="Logging level (default: LOG_LEVEL or WARNING).")
    parser.add_argument("--list-players", action="store_true",
                        help="List available player variants and exit.")

    args = parser.parse_args(argv)

    if args.list_players:
        for variant in list_variants():
            print(f"{variant['key']:<10} {variant['description']}")
        return EXIT_OK

    try:
        settings = load_settings()

        if args.size is not None:
            settings.board_size = args.size
        if args.length is not None:
            settings.initial_length = args.length
        if args.seed is not None:
            settings.seed = args.seed
        if args.food_avoids_snake is not None:
            settings.food_avoids_snake = args.food_avoids_snake
        if args.max_turns is not None:
            if args.max_turns <= 0:
                raise InvalidConfiguration(f"--max-turns must be positive, got {args.max_turns}.")
            settings.max_turns = args.max_turns
        if args.log_level is not None:
            settings.log_level = parse_log_level(args.log_level)
    except InvalidConfiguration as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_BAD_CONFIG

    configure_logging(settings.log_level)

    try:
        if settings.board_size is None:
            settings.board_size = prompt_positive_int("Enter board size: ", input_fn)
        if settings.initial_length is None:
            settings.initial_length = prompt_positive_int("Enter initial snake size: ", input_fn)
    except EOFError:
        print("\nNo input; exiting.", file=sys.stderr)
        return EXIT_NO_INPUT

    try:
        simulation = new_simulation(
            settings.board_size,
            settings.initial_length,
            rng=random.Random(settings.seed),
            food_avoids_snake=settings.food_avoids_snake,
        )
    except InvalidConfiguration as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_BAD_CONFIG

    player = build_player(args.player, settings.seed, input_fn)
    max_turns = settings.max_turns if isinstance(player, RandomPlayer) else None

    play(simulation, player, max_turns=max_turns)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
