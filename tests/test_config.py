"""Tests for configuration module."""

import pytest
from pydantic import ValidationError

from outbreak import config
from outbreak.config import GameConfig, GameConfigManager


def test_player_constants():
    """Test player starting constants."""
    assert config.PLAYER_MAX_HEALTH == 100
    assert config.PLAYER_MAX_HUNGER == 100
    assert config.PLAYER_STARTING_AMMO == 6


def test_default_log_format():
    """Test log format has the expected placeholders."""
    assert "%(name)" in config.DEFAULT_LOG_FORMAT
    assert "%(message)s" in config.DEFAULT_LOG_FORMAT


def test_log_level_is_upper_case():
    """Test the log level name is normalized."""
    assert config.DEFAULT_LOG_LEVEL == config.DEFAULT_LOG_LEVEL.upper()


class TestGameConfigManager:
    """Test suite for GameConfigManager."""

    def test_defaults(self):
        """Test manager starts from module defaults."""
        manager = GameConfigManager()
        assert manager.config.seed == (int(config.DEFAULT_SEED) if config.DEFAULT_SEED else None)
        assert manager.config.log_level == config.DEFAULT_LOG_LEVEL

    def test_initial_config(self):
        """Test an explicit initial config is used."""
        manager = GameConfigManager(GameConfig(seed=7, show_log=True))
        assert manager.config.seed == 7
        assert manager.config.show_log is True

    def test_update_config(self):
        """Test updating configuration."""
        manager = GameConfigManager()
        manager.update_config(GameConfig(seed=99, log_level="DEBUG"))
        assert manager.config.seed == 99
        assert manager.config.log_level == "DEBUG"


class TestGameConfig:
    """Test suite for GameConfig validation."""

    def test_numeric_seed_string_is_coerced(self):
        """Test a seed read as text becomes an integer."""
        assert GameConfig(seed="12").seed == 12

    def test_non_numeric_seed_rejected(self):
        """Test a non-numeric seed raises ValidationError."""
        with pytest.raises(ValidationError):
            GameConfig(seed="abc")
