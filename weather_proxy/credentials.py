"""Load the upstream API key from the local credential file."""

from __future__ import annotations

from pathlib import Path

import structlog
from pydantic import ValidationError

from weather_proxy.errors import CredentialsParseError, CredentialsReadError
from weather_proxy.models import Credentials

logger = structlog.get_logger()


def load_credentials(path: str | Path) -> Credentials:
    """Read and decode the credential file at ``path``.

    The file is read on every call; nothing is cached.

    Raises:
        CredentialsReadError: If the file is missing or unreadable.
        CredentialsParseError: If the content is not a JSON object with a
            string ``OpenWeatherMapApiKey``.
    """
    try:
        raw = Path(path).read_bytes()
    except OSError as e:
        logger.error("credentials_load_failed", path=str(path), error=str(e))
        raise CredentialsReadError(f"open {path}: {e.strerror or e}") from e

    try:
        return Credentials.model_validate_json(raw)
    except ValidationError as e:
        logger.error("credentials_load_failed", path=str(path), error_count=e.error_count())
        raise CredentialsParseError(f"invalid credential file {path}: {_first_error(e)}") from e


def _first_error(e: ValidationError) -> str:
    err = e.errors(include_url=False)[0]
    return err["msg"]
