"""Exception hierarchy for the weather lookup path.

Every error the route handler turns into a 500 derives from
``WeatherProxyError``; anything else propagates to FastAPI.
"""

from __future__ import annotations


class WeatherProxyError(RuntimeError):
    """Base class for failures while serving a weather lookup."""


class ConfigError(WeatherProxyError):
    """The local credential file could not be used."""


class CredentialsReadError(ConfigError):
    """The credential file is missing or unreadable."""


class CredentialsParseError(ConfigError):
    """The credential file is not a JSON object of the expected shape."""


class UpstreamRequestError(WeatherProxyError):
    """The upstream request could not be sent or did not complete."""


class UpstreamStatusError(UpstreamRequestError):
    """The upstream answered with a non-2xx status."""

    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.status_code = status_code


class DecodeError(WeatherProxyError):
    """The upstream body is not JSON or lacks the expected fields."""
