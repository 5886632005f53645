"""Test fixtures and mock data for weather proxy tests."""

from __future__ import annotations

import json

import httpx

API_KEY = "test-api-key"

CREDENTIALS = {"OpenWeatherMapApiKey": API_KEY}

CURRENT_WEATHER_RESPONSE = {
    "coord": {"lon": -0.1257, "lat": 51.5085},
    "weather": [{"id": 803, "main": "Clouds", "description": "broken clouds", "icon": "04d"}],
    "base": "stations",
    "main": {
        "temp": 288.5,
        "feels_like": 287.9,
        "temp_min": 287.1,
        "temp_max": 289.8,
        "pressure": 1012,
        "humidity": 72,
    },
    "visibility": 10000,
    "wind": {"speed": 4.1, "deg": 230},
    "dt": 1771156800,
    "sys": {"country": "GB", "sunrise": 1771140900, "sunset": 1771177500},
    "timezone": 0,
    "id": 2643743,
    "name": "London",
    "cod": 200,
}

UNAUTHORIZED_RESPONSE = {
    "cod": 401,
    "message": "Invalid API key. Please see https://openweathermap.org/faq#error401 for more info.",
}

CITY_NOT_FOUND_RESPONSE = {"cod": "404", "message": "city not found"}

MISSING_TEMP_RESPONSE = {"name": "London", "main": {"humidity": 72}}


class TrackingStream(httpx.AsyncByteStream):
    """Response body that records whether it was closed."""

    def __init__(self, body: bytes):
        self.body = body
        self.closed = False

    async def __aiter__(self):
        yield self.body

    async def aclose(self) -> None:
        self.closed = True


class UpstreamStub:
    """httpx.MockTransport handler that serves one canned response.

    Records every request it sees and every stream it hands out.
    """

    def __init__(self, status_code: int = 200, payload: object = None, body: bytes | None = None):
        self.status_code = status_code
        if body is None:
            body = json.dumps(CURRENT_WEATHER_RESPONSE if payload is None else payload).encode()
        self.body = body
        self.requests: list[httpx.Request] = []
        self.streams: list[TrackingStream] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        stream = TrackingStream(self.body)
        self.streams.append(stream)
        return httpx.Response(
            self.status_code,
            headers={"Content-Type": "application/json; charset=utf-8"},
            stream=stream,
        )

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)
