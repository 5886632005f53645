"""weather-proxy: a small FastAPI proxy for the OpenWeatherMap current-weather API."""

__version__ = "1.0.0"
