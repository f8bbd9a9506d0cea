"""
Application configuration using Pydantic Settings.
All configuration is loaded from environment variables.
"""
from functools import lru_cache
from typing import List, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

STORAGE_BACKENDS = ("memory", "file", "redis")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "Campus Placement Portal"
    app_version: str = "1.0.0"
    debug: bool = False
    environment: str = "development"  # development, staging, production

    # API
    api_prefix: str = "/api/v1"
    cors_origins: List[str] = ["http://localhost:5173", "http://localhost:3000"]

    # Storage medium
    storage_backend: str = "memory"  # memory, file, redis
    storage_dir: str = "./data"
    redis_url: str = "redis://localhost:6379/0"
    storage_key_prefix: str = "cs_"

    # Collections written to the configured medium; the rest live for the process only
    persistent_collections: List[str] = ["mentorships"]

    # Seed data (None = fixtures bundled with the package)
    fixtures_dir: Optional[str] = None

    # Multiplier for the simulated I/O delays; 0 disables them
    latency_scale: float = 1.0

    @field_validator("storage_backend")
    @classmethod
    def _known_backend(cls, value: str) -> str:
        value = value.lower()
        if value not in STORAGE_BACKENDS:
            raise ValueError(
                f"storage_backend must be one of {', '.join(STORAGE_BACKENDS)}"
            )
        return value

    @field_validator("latency_scale")
    @classmethod
    def _non_negative_latency(cls, value: float) -> float:
        if value < 0:
            raise ValueError("latency_scale must be >= 0")
        return value


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
