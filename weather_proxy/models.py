"""Pydantic models for credentials and weather responses."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Credentials(BaseModel):
    # Only the alias is recognized; a bare "api_key" entry is ignored.
    api_key: str = Field(default="", alias="OpenWeatherMapApiKey")


class MainReadings(BaseModel):
    # Out-of-range values such as 1e400 decode to inf and are not JSON-serializable.
    model_config = ConfigDict(allow_inf_nan=False)

    temp: float


class WeatherReport(BaseModel):
    """Reduced view of an OpenWeatherMap current-weather payload.

    Unknown upstream fields are ignored on validation, so dumping a report
    only ever yields ``{"name": ..., "main": {"temp": ...}}``.
    """

    name: str
    main: MainReadings
