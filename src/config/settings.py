"""
Pig Dice - Application Settings

Loads configuration from environment variables using Pydantic Settings.
Every variable is prefixed with ``PIG_`` (e.g. ``PIG_LOG_LEVEL=DEBUG``).
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    debug: bool = False
    log_level: str = "INFO"

    # Players
    player_one_name: str = Field(default="Player 1", min_length=1, max_length=30)
    player_two_name: str = Field(default="Player 2", min_length=1, max_length=30)
    computer_name: str = Field(default="Computer", min_length=1, max_length=30)

    # Computer opponent pacing, in seconds between steps
    computer_step_delay: float = Field(default=0.7, ge=0)

    model_config = {
        "env_prefix": "PIG_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached singleton settings instance."""
    return Settings()
