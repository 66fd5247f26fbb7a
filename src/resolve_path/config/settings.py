"""Pydantic Settings for path resolution."""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Resolver settings with support for env vars and .env files.

    Only resolver behaviour is configured here. The home and working
    directories are always read from the environment provider.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Default for resolve_in(..., file_base=...)
    file_base: bool = Field(
        default=False,
        alias="RESOLVE_PATH_FILE_BASE",
        description="Anchor relative paths to a base file's parent directory",
    )


# Global settings instance (lazy-loaded)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or create the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset the global settings instance (useful for testing)."""
    global _settings
    _settings = None
