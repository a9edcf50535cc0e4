"""owm — Typed Python client for the OpenWeatherMap API."""

from owm.client import AsyncWeatherClient, WeatherClient
from owm.exceptions import (
    NotFoundError,
    TransportError,
    WeatherAPIError,
    WeatherConnectionError,
    WeatherError,
    WeatherTimeoutError,
    WeatherValidationError,
)

__all__ = [
    "AsyncWeatherClient",
    "NotFoundError",
    "TransportError",
    "WeatherAPIError",
    "WeatherClient",
    "WeatherConnectionError",
    "WeatherError",
    "WeatherTimeoutError",
    "WeatherValidationError",
]

__version__ = "0.1.0"
