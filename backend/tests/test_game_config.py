"""
Tests for game_config.py - environment-backed settings.
"""

import os
import sys

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain import InvalidConfiguration
from game_config import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_MAX_TURNS,
    GameSettings,
    load_settings,
    parse_log_level,
)


class TestLoadSettings:
    def test_defaults_with_empty_environment(self):
        assert load_settings({}) == GameSettings()
        settings = load_settings({})
        assert settings.board_size is None
        assert settings.initial_length is None
        assert settings.seed is None
        assert settings.food_avoids_snake is False
        assert settings.max_turns == DEFAULT_MAX_TURNS
        assert settings.log_level == DEFAULT_LOG_LEVEL

    def test_all_values_parsed(self):
        settings = load_settings({
            "SNAKE_BOARD_SIZE": "12",
            "SNAKE_INITIAL_LENGTH": " 4 ",
            "SNAKE_SEED": "-3",
            "SNAKE_FOOD_AVOIDS_SNAKE": "Yes",
            "SNAKE_MAX_TURNS": "50",
            "LOG_LEVEL": "debug",
        })
        assert settings == GameSettings(
            board_size=12,
            initial_length=4,
            seed=-3,
            food_avoids_snake=True,
            max_turns=50,
            log_level="DEBUG",
        )

    def test_blank_values_count_as_unset(self):
        settings = load_settings({"SNAKE_BOARD_SIZE": "", "SNAKE_SEED": "  "})
        assert settings.board_size is None
        assert settings.seed is None

    @pytest.mark.parametrize("env", [
        {"SNAKE_BOARD_SIZE": "ten"},
        {"SNAKE_BOARD_SIZE": "0"},
        {"SNAKE_INITIAL_LENGTH": "-2"},
        {"SNAKE_SEED": "1.5"},
        {"SNAKE_MAX_TURNS": "0"},
        {"SNAKE_FOOD_AVOIDS_SNAKE": "maybe"},
        {"LOG_LEVEL": "LOUD"},
    ])
    def test_malformed_values_raise(self, env):
        with pytest.raises(InvalidConfiguration):
            load_settings(env)

    @pytest.mark.parametrize("raw", ["0", "false", "No", "off"])
    def test_false_flags(self, raw):
        assert load_settings({"SNAKE_FOOD_AVOIDS_SNAKE": raw}).food_avoids_snake is False

    def test_reads_process_environment_by_default(self, monkeypatch):
        monkeypatch.setenv("SNAKE_BOARD_SIZE", "9")
        assert load_settings().board_size == 9


class TestParseLogLevel:
    def test_normalises_case(self):
        assert parse_log_level(" info ") == "INFO"

    def test_blank_uses_default(self):
        assert parse_log_level("") == DEFAULT_LOG_LEVEL

    def test_unknown_level_raises(self):
        with pytest.raises(InvalidConfiguration):
            parse_log_level("verbose")
