"""
Application settings.

Loaded from environment variables prefixed ``WEATHER_GLANCE_`` and an
optional ``.env`` file in the working directory, e.g.::

    WEATHER_GLANCE_API_KEY=abc123
    WEATHER_GLANCE_HOME_LAT=51.5
    WEATHER_GLANCE_HOME_LON=-0.12
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path  # noqa: TC003

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration for the client and CLI."""

    model_config = SettingsConfigDict(
        env_prefix="WEATHER_GLANCE_",
        env_file=".env",
        extra="ignore",
    )

    app_name: str = "weather-glance"
    app_env: str = "development"
    debug: bool = False

    # weatherapi.com
    api_key: str = ""
    base_url: str = "https://api.weatherapi.com/v1/"
    request_timeout: float | None = Field(default=None, gt=0)

    # None means the mapping bundled with the package
    icon_mapping_path: Path | None = None

    # Used by the ``locate`` command in place of a device location
    home_lat: float | None = Field(default=None, ge=-90, le=90)
    home_lon: float | None = Field(default=None, ge=-180, le=180)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
