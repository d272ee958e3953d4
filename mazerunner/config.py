"""Application configuration using Pydantic settings."""

import logging
import os
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Project root directory
BASE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Application settings loaded from MAZERUNNER_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="MAZERUNNER_",
        env_file=os.path.join(BASE_DIR, ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Maze Runner"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # Solver
    default_strategy: str = "right-hand"
    step_limit_factor: int = Field(2, ge=1)

    # API
    max_maze_chars: int = 1_000_000
    rate_limit_requests: int = 100  # requests per minute for solve endpoint

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and validate the logging level name."""
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
