"""Custom exceptions for the OpenWeatherMap client."""

from __future__ import annotations


class WeatherError(Exception):
    """Base exception for all weather client errors."""


class NotFoundError(WeatherError):
    """Raised when geocoding returns no match for a place name."""

    def __init__(self, query: str) -> None:
        self.query = query
        super().__init__("City not found")


class TransportError(WeatherError):
    """Raised when a request cannot complete or returns a non-success status."""

    status_code: int | None = None

    @property
    def is_unauthorized(self) -> bool:
        """True when the upstream rejected the API credential."""
        return False


class WeatherConnectionError(TransportError):
    """Raised when the client cannot connect to the API."""


class WeatherTimeoutError(TransportError):
    """Raised when a request to the API times out."""


class WeatherAPIError(TransportError):
    """Raised when the API returns an error response (4xx/5xx)."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"HTTP {status_code}: {message}")

    @property
    def is_unauthorized(self) -> bool:
        return self.status_code == 401 or "invalid api key" in self.message.lower()


class WeatherValidationError(WeatherError):
    """Raised when API response data fails model validation."""
