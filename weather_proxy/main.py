"""Weather proxy — FastAPI service."""

from __future__ import annotations

import socket
import sys

import structlog
import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from weather_proxy import __version__
from weather_proxy.client import WeatherClient
from weather_proxy.config import Settings, get_settings
from weather_proxy.errors import WeatherProxyError

logger = structlog.get_logger()

GREETING = "Hello, World!\n"

# Both routes answer any method, like a plain net/http handler.
ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "DELETE", "PATCH", "OPTIONS"]


def configure_logging() -> None:
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ],
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build an isolated application with its own WeatherClient."""
    settings = settings or get_settings()

    app = FastAPI(title="Weather Proxy", version=__version__)
    app.state.weather_client = WeatherClient(settings)

    @app.api_route("/hello", methods=ALL_METHODS, response_class=PlainTextResponse)
    async def hello():
        return PlainTextResponse(GREETING)

    @app.api_route("/weather/{city:path}", methods=ALL_METHODS)
    async def weather(city: str, request: Request):
        """Current weather for ``city``, reduced to name and temperature."""
        if not city:
            return PlainTextResponse("City name not provided\n", status_code=400)

        client: WeatherClient = request.app.state.weather_client
        try:
            report = await client.current_weather(city)
        except WeatherProxyError as e:
            logger.warning("weather_lookup_failed", city=city, error_type=type(e).__name__)
            return PlainTextResponse(f"{e}\n", status_code=500)

        logger.info("weather_lookup", city=city, name=report.name)
        return JSONResponse(content=report.model_dump())

    return app


def bind_socket(settings: Settings) -> socket.socket:
    """Bind the listening socket, terminating the process if that fails.

    An empty host listens on every interface, IPv6 included where the
    platform supports dual-stack sockets.
    """
    try:
        if not settings.host and socket.has_dualstack_ipv6():
            return socket.create_server(
                ("::", settings.port), family=socket.AF_INET6, dualstack_ipv6=True
            )
        return socket.create_server((settings.host or "0.0.0.0", settings.port))
    except OSError as e:
        logger.critical("server_bind_failed", host=settings.host, port=settings.port, error=str(e))
        sys.exit(1)


def main(settings: Settings | None = None) -> None:
    configure_logging()
    settings = settings or get_settings()
    app = create_app(settings)

    sock = bind_socket(settings)
    logger.info("server_listening", url=f"http://localhost:{settings.port}", host=settings.host)

    config = uvicorn.Config(app, log_level="info")
    server = uvicorn.Server(config)
    server.run(sockets=[sock])


if __name__ == "__main__":
    main()
