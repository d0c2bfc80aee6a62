"""Central configuration defaults and constants for Outbreak Survivor."""

import os
from typing import Optional

from pydantic import BaseModel, Field

# Logging Defaults
DEFAULT_LOG_LEVEL = os.getenv("OUTBREAK_LOG_LEVEL", "WARNING").upper()
DEFAULT_LOG_FORMAT = os.getenv("OUTBREAK_LOG_FORMAT", "[%(name)-19s - %(levelname)5s] %(message)s")
DEFAULT_SHOW_LOG = os.getenv("OUTBREAK_SHOW_LOG", "false").lower() in ("true", "1", "yes", "on")

# Random source seed - unset means a fresh, unseeded game; validated by GameConfig
DEFAULT_SEED = os.getenv("OUTBREAK_SEED") or None

# Player starting stats
PLAYER_MAX_HEALTH = 100
PLAYER_MAX_HUNGER = 100
PLAYER_STARTING_AMMO = 6


class GameConfig(BaseModel):
    """Runtime settings for a single game session."""

    seed: Optional[int] = Field(
        default=DEFAULT_SEED, validate_default=True, description="Seed for the random source (None = unseeded)"
    )
    log_level: str = Field(default=DEFAULT_LOG_LEVEL, description="Logging level name")
    log_format: str = Field(default=DEFAULT_LOG_FORMAT, description="Logging format string")
    show_log: bool = Field(default=DEFAULT_SHOW_LOG, description="Print the event log when the game ends")


class GameConfigManager:
    """Manages game configuration."""

    def __init__(self, initial_config: Optional[GameConfig] = None) -> None:
        """Initialize with optional config."""
        self._config = initial_config or GameConfig()

    @property
    def config(self) -> GameConfig:
        """Get current config."""
        return self._config

    def update_config(self, new_config: GameConfig) -> None:
        """Update configuration."""
        self._config = new_config
