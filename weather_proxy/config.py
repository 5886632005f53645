"""Configuration management using Pydantic Settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Listener; an empty host means every interface, IPv6 included
    host: str = ""
    port: int = 8081

    # Credential file holding {"OpenWeatherMapApiKey": "..."}, relative to the cwd
    api_config_path: str = ".apiConfig"

    # Upstream
    openweathermap_url: str = "https://api.openweathermap.org/data/2.5/weather"
    # Seconds; None leaves the upstream call unbounded
    upstream_timeout: float | None = 15.0

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
