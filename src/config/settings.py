"""
Centralized settings management using pydantic-settings.

All environment variables and configuration values are defined here.
Use get_settings() to access the singleton settings instance.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Nothing is required; every value has a working default so the
    library runs out of the box with an in-memory profile store.

    Optional environment variables:
        - ENVIRONMENT: development, staging, production
        - LOG_LEVEL / JSON_LOGS: logging output
        - PROFILE_STORE_BACKEND: memory, file or redis
        - PROFILE_STORE_DIR: directory for the file backend
        - REDIS_URL: Redis connection URL for the redis backend
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ==========================================================================
    # Environment
    # ==========================================================================
    environment: str = Field(default="development", description="Environment name")
    debug: bool = Field(default=False, description="Debug mode")

    @property
    def is_development(self) -> bool:
        return self.environment.lower() in ("development", "dev", "local")

    @property
    def is_production(self) -> bool:
        return self.environment.lower() in ("production", "prod")

    # ==========================================================================
    # Logging
    # ==========================================================================
    log_level: str = Field(default="INFO", description="Minimum log level")
    json_logs: bool = Field(default=False, description="Emit JSON log lines")

    @field_validator("log_level", mode="before")
    @classmethod
    def parse_log_level(cls, v):
        level = str(v).strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v}")
        return level

    # ==========================================================================
    # Passion profile storage
    # ==========================================================================
    profile_store_backend: Literal["memory", "file", "redis"] = Field(
        default="memory",
        description="Key-value backend holding passion selections"
    )
    profile_store_dir: Path = Field(
        default=Path(".passion_profiles"),
        description="Directory used by the file backend"
    )
    profile_storage_key: str = Field(
        default="hotelFinder_passions",
        description="Well-known key the selection is stored under"
    )

    @field_validator("profile_store_backend", mode="before")
    @classmethod
    def parse_backend(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("profile_store_dir", mode="before")
    @classmethod
    def parse_store_dir(cls, v):
        if isinstance(v, str):
            return Path(v).expanduser()
        return v

    # ==========================================================================
    # Redis Configuration
    # ==========================================================================
    redis_url: str = Field(
        default="redis://localhost:6379/0",
        description="Redis connection URL"
    )
    redis_key_prefix: str = Field(
        default="passion-match:",
        description="Prefix prepended to every Redis key"
    )
    profile_ttl_seconds: int = Field(
        default=0,
        ge=0,
        description="Expiry for stored selections in seconds (0 keeps them forever)"
    )


@lru_cache
def get_settings() -> Settings:
    """
    Get the application settings singleton.

    Uses lru_cache to ensure only one instance is created.
    Settings are loaded from environment variables and the project .env file.
    """
    env_file = Path(__file__).parent.parent.parent / ".env"
    return Settings(_env_file=env_file if env_file.exists() else None)


def get_settings_for_testing(**overrides) -> Settings:
    """
    Create a settings instance for testing with optional overrides.

    This bypasses the cache and any .env file so tests see only the
    defaults plus what they pass in.
    """
    test_defaults = {
        "environment": "testing",
        "debug": True,
    }
    test_defaults.update(overrides)

    return Settings(_env_file=None, **test_defaults)
