"""Catalog settings loaded from the environment."""

from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class CatalogSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="BIKECATALOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["json", "console"] = "console"


_settings: Optional[CatalogSettings] = None


def get_settings() -> CatalogSettings:
    global _settings
    if _settings is None:
        _settings = CatalogSettings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
