"""OpenWeatherMap current-weather API client."""

from __future__ import annotations

import json

import httpx
import structlog
from pydantic import ValidationError

from weather_proxy.config import Settings
from weather_proxy.credentials import load_credentials
from weather_proxy.errors import DecodeError, UpstreamRequestError, UpstreamStatusError
from weather_proxy.models import Credentials, WeatherReport

logger = structlog.get_logger()


class WeatherClient:
    """Async client for the OpenWeatherMap "current weather by city name" endpoint.

    Each lookup opens its own ``httpx.AsyncClient``; the client itself holds
    configuration only and is safe to share between concurrent requests.
    """

    def __init__(
        self,
        settings: Settings,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.url = settings.openweathermap_url
        self.timeout = settings.upstream_timeout
        self.credentials_path = settings.api_config_path
        self._transport = transport

    async def current_weather(self, city: str) -> WeatherReport:
        """Load credentials from disk and fetch the current weather for ``city``.

        Raises:
            ConfigError: If the credential file cannot be used. No upstream
                call is attempted in that case.
        """
        credentials = load_credentials(self.credentials_path)
        return await self.fetch(city, credentials)

    async def fetch(self, city: str, credentials: Credentials) -> WeatherReport:
        """Issue one GET for ``city`` and reduce the body to a WeatherReport.

        The city is forwarded as given; httpx percent-encodes it.
        """
        params = {"q": city, "appid": credentials.api_key}

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                async with client.stream("GET", self.url, params=params) as resp:
                    body = await resp.aread()
        except httpx.RequestError as e:
            logger.error("openweathermap_request_error", city=city, error=str(e))
            raise UpstreamRequestError(f"Failed to connect to OpenWeatherMap API: {e}") from e

        if resp.is_error:
            detail = _upstream_message(body)
            logger.error("openweathermap_http_error", city=city, status=resp.status_code, detail=detail)
            message = f"OpenWeatherMap API error: {resp.status_code}"
            if detail:
                message = f"{message} ({detail})"
            raise UpstreamStatusError(message, resp.status_code)

        try:
            return WeatherReport.model_validate_json(body)
        except ValidationError as e:
            logger.error("openweathermap_decode_error", city=city, error_count=e.error_count())
            raise DecodeError(f"Unexpected OpenWeatherMap response: {_describe(e)}") from e


def _upstream_message(body: bytes) -> str | None:
    """Pull the ``message`` field out of an OpenWeatherMap error body, if any."""
    try:
        data = json.loads(body)
    except ValueError:
        return None
    if isinstance(data, dict) and isinstance(data.get("message"), str):
        return data["message"]
    return None


def _describe(e: ValidationError) -> str:
    err = e.errors(include_url=False)[0]
    loc = ".".join(str(part) for part in err["loc"])
    return f"{loc}: {err['msg']}" if loc else err["msg"]
