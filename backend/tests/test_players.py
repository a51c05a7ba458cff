"""
Tests for the player implementations and the variant registry.
"""

import os
import random
import sys

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain import GameState, QUIT, UP, DOWN, LEFT, RIGHT, VALID_MOVES
from players import (
    AVAILABLE_VARIANTS,
    KeyboardPlayer,
    Player,
    RandomPlayer,
    command_from_key,
    get_player_class,
    list_variants,
)
from players.keyboard_player import PROMPT


def make_state(snake_body, size=5, food=(4, 4)):
    return GameState(
        size=size,
        snake_body=tuple(snake_body),
        food_position=food,
        status="running",
    )


class TestPlayerBase:
    def test_get_move_not_implemented(self):
        with pytest.raises(NotImplementedError):
            Player().get_move(make_state([(0, 0)]))


class TestCommandFromKey:
    """Tests for the W/A/S/D/Q key mapping."""

    @pytest.mark.parametrize("line, expected", [
        ("w", UP),
        ("W", UP),
        ("a", LEFT),
        ("s", DOWN),
        ("d", RIGHT),
        ("q", QUIT),
        ("Q", QUIT),
        ("  s  ", DOWN),
        ("dance", RIGHT),
    ])
    def test_bound_keys(self, line, expected):
        assert command_from_key(line) == expected

    @pytest.mark.parametrize("line", ["", "   ", "x", "1", "up"])
    def test_unbound_keys(self, line):
        assert command_from_key(line) is None


class TestKeyboardPlayer:
    """Tests for KeyboardPlayer."""

    def test_reads_one_line_per_turn(self):
        lines = iter(["w", "x", "q"])
        prompts = []

        def fake_input(prompt):
            prompts.append(prompt)
            return next(lines)

        player = KeyboardPlayer(input_fn=fake_input)
        state = make_state([(0, 0)])

        assert player.get_move(state) == UP
        assert player.get_move(state) is None
        assert player.get_move(state) == QUIT
        assert prompts == [PROMPT] * 3

    def test_end_of_input_quits(self):
        def closed_input(prompt):
            raise EOFError

        player = KeyboardPlayer(input_fn=closed_input)
        assert player.get_move(make_state([(0, 0)])) == QUIT


class TestRandomPlayer:
    """Tests for the RandomPlayer class."""

    def test_random_player_returns_valid_move(self):
        player = RandomPlayer(rng=random.Random(0))
        move = player.get_move(make_state([(2, 2)]))
        assert move in VALID_MOVES

    def test_random_player_avoids_own_body(self):
        """Only RIGHT leads to a free cell."""
        player = RandomPlayer(rng=random.Random(1))
        body = [(2, 2), (2, 1), (1, 1), (1, 2), (1, 3), (2, 3), (3, 3)]
        for _ in range(30):
            assert player.get_move(make_state(body)) == RIGHT

    def test_random_player_may_enter_tail_cell(self):
        player = RandomPlayer(rng=random.Random(2))
        body = [(0, 0), (1, 0), (1, 1), (0, 1)]
        moves = {player.get_move(make_state(body)) for _ in range(100)}
        assert moves == {UP, LEFT, DOWN}

    def test_random_player_checks_wrapped_neighbours(self):
        player = RandomPlayer(rng=random.Random(3))
        body = [(0, 0), (2, 0), (2, 2), (0, 2), (1, 2)]
        moves = {player.get_move(make_state(body, size=3)) for _ in range(100)}
        assert moves == {RIGHT, DOWN}

    def test_random_player_with_no_safe_move_still_moves(self):
        player = RandomPlayer(rng=random.Random(4))
        body = [(1, 1), (1, 0), (0, 0), (0, 1), (0, 2), (1, 2), (2, 2), (2, 1), (2, 0)]
        move = player.get_move(make_state(body, size=3))
        assert move in VALID_MOVES


class TestVariantRegistry:
    """Tests for get_player_class() and list_variants()."""

    def test_default_is_keyboard(self):
        assert get_player_class() is KeyboardPlayer
        assert get_player_class("") is KeyboardPlayer

    def test_lookup_is_case_and_space_insensitive(self):
        assert get_player_class(" RANDOM ") is RandomPlayer

    def test_unknown_variant_raises(self):
        with pytest.raises(ValueError, match="Unknown player variant"):
            get_player_class("llm")

    def test_list_variants_matches_registry(self):
        assert [v["key"] for v in list_variants()] == AVAILABLE_VARIANTS
