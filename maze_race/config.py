"""Application configuration using Pydantic settings."""

import os
from functools import lru_cache
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Project root directory
BASE_DIR = Path(__file__).resolve().parent.parent

KNOWN_ALGORITHMS = ("bfs", "dfs", "astar")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=os.path.join(BASE_DIR, ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "Maze Race"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # CORS - comma-separated list of allowed origins
    cors_origins: str = "http://localhost:3000,http://localhost:8080,http://127.0.0.1:5500"

    # Rate limiting
    rate_limit_requests: int = 100  # requests per minute for maze endpoints

    # Maze generation
    default_maze_size: int = 51
    max_maze_size: int = 201

    # Solving
    default_algorithm: str = "bfs"

    @field_validator("default_algorithm")
    @classmethod
    def validate_default_algorithm(cls, v: str) -> str:
        """Only algorithms the solver knows can be the default."""
        v = v.lower()
        if v not in KNOWN_ALGORITHMS:
            raise ValueError(
                f"DEFAULT_ALGORITHM must be one of: {', '.join(KNOWN_ALGORITHMS)}"
            )
        return v

    @field_validator("max_maze_size")
    @classmethod
    def validate_max_maze_size(cls, v: int) -> int:
        """The cap has to leave room for the smallest maze."""
        if v < 3:
            raise ValueError("MAX_MAZE_SIZE must be at least 3")
        return v

    @property
    def cors_origins_list(self) -> list[str]:
        """Get CORS origins as a list."""
        if self.debug:
            return ["*"]
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
