"""
Configuration management using Pydantic Settings.

This module provides type-safe, validated configuration loading from environment
variables. Every local store is optional: a store whose location is not
configured is treated as unavailable in the current runtime and reported as
such by its adapter during a purge pass.

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables
- Type validation via Pydantic

Usage:
    from src.core.config import settings

    # Access config
    cache_dir = settings.response_cache_dir
    timeout = settings.store_clear_timeout_seconds

    # Environment detection
    if settings.is_development:
        # Dev-specific behavior
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.core.constants import AUTH_TIMEOUT_DEFAULT, STORE_CLEAR_TIMEOUT_DEFAULT
from src.core.enums import Environment, PurgeStrategy


class Settings(BaseSettings):
    """
    Main application settings (flat structure).

    Configuration precedence:
        1. Environment variables
        2. Default values (only for non-sensitive config)

    Returns:
        Settings: Application configuration loaded from environment.
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development, testing, ci, production)",
    )

    # Core application settings
    debug: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # Application metadata
    app_name: str = Field(
        default="Half Trip",
        description="Application name",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version",
    )

    # Offline database (structured local cache of trips, expenses, notes)
    offline_database_url: str | None = Field(
        default=None,
        description="Offline cache URL (e.g., sqlite+aiosqlite:///~/.halftrip/offline.db). "
        "Unset means no offline database in this runtime.",
    )
    offline_database_echo: bool = Field(
        default=False,
        description="Log all SQL issued against the offline cache",
    )

    # Local key-value storage (expense templates, preferences, flags)
    local_storage_url: str | None = Field(
        default=None,
        description="Redis URL backing local key-value storage (e.g., redis://localhost:6379/3). "
        "Unset means local storage is disabled.",
    )
    local_storage_namespace: str = Field(
        default="halftrip",
        description="Key prefix owned by the client inside local storage",
    )

    # Network response cache
    response_cache_dir: Path | None = Field(
        default=None,
        description="Directory holding named response cache buckets. "
        "Unset means no response cache in this runtime.",
    )

    # Purge configuration
    purge_strategy: PurgeStrategy = Field(
        default=PurgeStrategy.SEQUENTIAL,
        description="Run store clears one after another or concurrently",
    )
    store_clear_timeout_seconds: float = Field(
        default=STORE_CLEAR_TIMEOUT_DEFAULT,
        description="Upper bound for a single I/O-backed store clear",
    )

    # Auth provider
    auth_base_url: str = Field(
        default="http://localhost:54321",
        description="Auth provider base URL (e.g., https://project.supabase.co)",
    )
    auth_api_key: str | None = Field(
        default=None,
        description="Public API key sent with auth provider requests",
    )
    auth_timeout_seconds: float = Field(
        default=AUTH_TIMEOUT_DEFAULT,
        description="Timeout for auth provider HTTP calls",
    )

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("store_clear_timeout_seconds", "auth_timeout_seconds")
    @classmethod
    def validate_positive_timeout(cls, v: float) -> float:
        """
        Validate timeouts are strictly positive.

        Args:
            v: Timeout in seconds.

        Returns:
            float: Validated timeout.

        Raises:
            ValueError: If timeout is zero or negative.
        """
        if v <= 0:
            raise ValueError("timeouts must be greater than 0 seconds")
        return v

    @field_validator("auth_base_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """
        Remove trailing slashes from URLs.

        Args:
            v: URL string.

        Returns:
            str: URL without trailing slash.
        """
        return v.rstrip("/")

    @field_validator("local_storage_namespace")
    @classmethod
    def validate_namespace(cls, v: str) -> str:
        """
        Reject namespaces that would match every key in the storage.

        Args:
            v: Namespace prefix.

        Returns:
            str: Namespace without surrounding whitespace or trailing colons.

        Raises:
            ValueError: If namespace is empty or contains glob characters.
        """
        namespace = v.strip().rstrip(":")
        if not namespace:
            raise ValueError("local_storage_namespace must not be empty")
        if any(ch in namespace for ch in "*?[]"):
            raise ValueError("local_storage_namespace must not contain glob characters")
        return namespace

    # Convenience properties for environment checks
    @property
    def is_development(self) -> bool:
        """
        Check if running in development environment.

        Returns:
            bool: True if environment is DEVELOPMENT, False otherwise.
        """
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        """
        Check if running in testing environment.

        Returns:
            bool: True if environment is TESTING, False otherwise.
        """
        return self.environment == Environment.TESTING

    @property
    def is_ci(self) -> bool:
        """
        Check if running in CI environment.

        Returns:
            bool: True if environment is CI, False otherwise.
        """
        return self.environment == Environment.CI

    @property
    def is_production(self) -> bool:
        """
        Check if running in production environment.

        Returns:
            bool: True if environment is PRODUCTION, False otherwise.
        """
        return self.environment == Environment.PRODUCTION


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are loaded only once per process.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()


# Global settings instance (singleton pattern)
settings = get_settings()
