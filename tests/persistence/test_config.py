"""Tests for configuration classes."""

import os
from unittest.mock import patch

from config import AppConfig, GameConfig, StorageConfig
from blackjack_practice.strategy import TableSettings


class TestGameConfig:
    """Tests for GameConfig class."""

    def test_game_defaults(self):
        """Test default game values with no environment overrides."""
        with patch.dict(os.environ, {}, clear=True):
            config = GameConfig()

            assert config.num_decks == 6
            assert config.penetration == 0.75
            assert config.dealer_hits_soft_17 is True
            assert config.starting_balance == 10000
            assert config.min_bet == 10
            assert config.max_bet == 100_000

    def test_game_reads_env_vars(self):
        """Test that deck count, penetration and H17 come from the environment."""
        env = {
            "BLACKJACK_DECKS": "2",
            "BLACKJACK_PENETRATION": "0.5",
            "BLACKJACK_DEALER_HITS_SOFT_17": "false",
            "BLACKJACK_STARTING_BALANCE": "500",
        }
        with patch.dict(os.environ, env, clear=True):
            config = GameConfig()

            assert config.num_decks == 2
            assert config.penetration == 0.5
            assert config.dealer_hits_soft_17 is False
            assert config.starting_balance == 500

    def test_settings_from_config(self):
        """Test that table settings start from the game config."""
        with patch.dict(os.environ, {"BLACKJACK_DECKS": "8"}, clear=True):
            settings = TableSettings.from_config(GameConfig())

            assert settings.num_decks == 8
            assert settings.max_hands == 4


class TestStorageConfig:
    """Tests for StorageConfig class."""

    def test_storage_default_path(self):
        """Test that the default save file lives in the home directory."""
        with patch.dict(os.environ, {"HOME": "/home/player"}, clear=True):
            config = StorageConfig()

            assert config.path == "/home/player/.blackjack_practice.json"

    def test_storage_path_from_env(self, tmp_path):
        """Test overriding the save file location."""
        target = str(tmp_path / "save.json")
        with patch.dict(os.environ, {"BLACKJACK_DATA_PATH": target}):
            config = StorageConfig()

            assert config.path == target

    def test_app_config_groups_sections(self):
        """Test the top-level configuration."""
        config = AppConfig()

        assert isinstance(config.game, GameConfig)
        assert isinstance(config.storage, StorageConfig)
