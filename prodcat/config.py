"""Catalogue configuration using pydantic-settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CatalogueSettings(BaseSettings):
    """Catalogue configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PRODCAT_",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    title: str = Field(
        default="Product Catalogue",
        description="Title given to catalogues built by the command line",
    )

    # Logging configuration
    log_level: str = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    log_format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log message format string",
    )


def get_settings() -> CatalogueSettings:
    """Get the catalogue settings instance."""
    return CatalogueSettings()
