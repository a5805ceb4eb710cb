"""Centralized configuration for TrailerHub.

Configuration strategy:
- CRITICAL settings (security secret): require explicit .env configuration.
- Everything else (logging, ingestion constants, catalog paging, API ports)
  ships with safe defaults, overridable via .env.

Usage:
    from trailerhub.settings import settings

    settings.tmdb.api_key
    settings.ingestion.target_count
"""

from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from trailerhub.settings.api import APISettings, CORSSettings, SecuritySettings
from trailerhub.settings.base import LoggingSettings, PathsSettings
from trailerhub.settings.catalog import CatalogSettings
from trailerhub.settings.database import DatabaseSettings
from trailerhub.settings.ingestion import IngestionSettings
from trailerhub.settings.sources import TMDBSettings

__all__ = [
    "Settings",
    "settings",
    "PathsSettings",
    "LoggingSettings",
    "DatabaseSettings",
    "APISettings",
    "SecuritySettings",
    "CORSSettings",
    "TMDBSettings",
    "IngestionSettings",
    "CatalogSettings",
    "get_masked_settings",
]


# =============================================================================
# GLOBAL SETTINGS
# =============================================================================


class Settings(BaseSettings):
    """Global application settings.

    Aggregates all configuration sections into a single object.
    Access via the singleton: `from trailerhub.settings import settings`
    """

    environment: str = Field(default="development", alias="ENVIRONMENT")
    debug: bool = Field(default=False, alias="DEBUG")

    paths: PathsSettings = Field(default_factory=PathsSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    tmdb: TMDBSettings = Field(default_factory=TMDBSettings)
    ingestion: IngestionSettings = Field(default_factory=IngestionSettings)
    catalog: CatalogSettings = Field(default_factory=CatalogSettings)

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)

    api: APISettings = Field(default_factory=APISettings)
    security: SecuritySettings = Field(default_factory=SecuritySettings)
    cors: CORSSettings = Field(default_factory=CORSSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment value."""
        valid_envs = {"development", "production", "test"}
        v_lower = v.lower()
        if v_lower not in valid_envs:
            raise ValueError(f"Invalid ENVIRONMENT. Valid: {valid_envs}")
        return v_lower

    def model_post_init(self, _: Any) -> None:
        """Initialize directories after settings are loaded."""
        self.paths.ensure_directories()


# =============================================================================
# SINGLETON INSTANCE
# =============================================================================

settings = Settings()


# =============================================================================
# UTILITY FUNCTIONS
# =============================================================================


def get_masked_settings() -> dict[str, Any]:
    """Return settings dict with sensitive values masked.

    Returns:
        Configuration dictionary safe for logging.
    """
    config = settings.model_dump()
    mask = "***MASKED***"

    secrets = [
        ("tmdb", "api_key"),
        ("database", "password"),
        ("database", "url"),
        ("security", "jwt_secret_key"),
    ]

    for section, key in secrets:
        if section in config and key in config[section] and config[section][key]:
            config[section][key] = mask

    return config
