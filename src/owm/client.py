"""Public client classes for the OpenWeatherMap API."""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from owm._http import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, AsyncTransport, SyncTransport
from owm.exceptions import NotFoundError, WeatherValidationError
from owm.models.current import CurrentConditions
from owm.models.forecast import ForecastSeries
from owm.models.geocoding import Coordinates

GEOCODING_ENDPOINT = "/geo/1.0/direct"
CURRENT_ENDPOINT = "/data/2.5/weather"
FORECAST_ENDPOINT = "/data/2.5/forecast"

T = TypeVar("T", bound=BaseModel)


def _validate(model_type: type[T], data: Any) -> T:
    """Validate a decoded JSON payload against a Pydantic model."""
    try:
        return model_type.model_validate(data)
    except ValidationError as exc:
        raise WeatherValidationError(
            f"Failed to validate {model_type.__name__} response: {exc}"
        ) from exc


def _geocode_params(city_name: str) -> dict[str, str | int | float]:
    query = city_name.strip()
    if not query:
        raise ValueError("city_name must not be blank")
    return {"q": query, "limit": 1}


def _first_match(city_name: str, data: Any) -> Coordinates:
    if not isinstance(data, list) or not data:
        raise NotFoundError(city_name)
    return _validate(Coordinates, data[0])


class _ClientBase:
    def __init__(self, units: str, lang: str | None) -> None:
        self.units = units
        self.lang = lang

    def _point_params(self, lat: float, lon: float) -> dict[str, str | int | float]:
        params: dict[str, str | int | float] = {"lat": lat, "lon": lon, "units": self.units}
        if self.lang:
            params["lang"] = self.lang
        return params


class WeatherClient(_ClientBase):
    """Synchronous client for the OpenWeatherMap API.

    Usage:
        with WeatherClient(api_key="...") as owm:
            coords = owm.resolve_coordinates("Chennai")
            current = owm.fetch_current_conditions(coords.lat, coords.lon)
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        units: str = "metric",
        lang: str | None = None,
    ) -> None:
        super().__init__(units, lang)
        self._transport = SyncTransport(api_key=api_key, base_url=base_url, timeout=timeout)

    def __enter__(self) -> WeatherClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP connection."""
        self._transport.close()

    # ── Endpoints ──────────────────────────────────────────────

    def resolve_coordinates(self, city_name: str) -> Coordinates:
        """Resolve a city name to the coordinates of its first match."""
        data = self._transport.get(GEOCODING_ENDPOINT, _geocode_params(city_name))
        return _first_match(city_name, data)

    def fetch_current_conditions(self, lat: float, lon: float) -> CurrentConditions:
        """Get current conditions at a coordinate."""
        data = self._transport.get(CURRENT_ENDPOINT, self._point_params(lat, lon))
        return _validate(CurrentConditions, data)

    def fetch_forecast(self, lat: float, lon: float) -> ForecastSeries:
        """Get the 3-hourly forecast at a coordinate."""
        data = self._transport.get(FORECAST_ENDPOINT, self._point_params(lat, lon))
        return _validate(ForecastSeries, data)


class AsyncWeatherClient(_ClientBase):
    """Asynchronous client for the OpenWeatherMap API.

    Usage:
        async with AsyncWeatherClient(api_key="...") as owm:
            coords = await owm.resolve_coordinates("Chennai")
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        units: str = "metric",
        lang: str | None = None,
    ) -> None:
        super().__init__(units, lang)
        self._transport = AsyncTransport(api_key=api_key, base_url=base_url, timeout=timeout)

    async def __aenter__(self) -> AsyncWeatherClient:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP connection."""
        await self._transport.close()

    # ── Endpoints ──────────────────────────────────────────────

    async def resolve_coordinates(self, city_name: str) -> Coordinates:
        """Resolve a city name to the coordinates of its first match."""
        data = await self._transport.get(GEOCODING_ENDPOINT, _geocode_params(city_name))
        return _first_match(city_name, data)

    async def fetch_current_conditions(self, lat: float, lon: float) -> CurrentConditions:
        """Get current conditions at a coordinate."""
        data = await self._transport.get(CURRENT_ENDPOINT, self._point_params(lat, lon))
        return _validate(CurrentConditions, data)

    async def fetch_forecast(self, lat: float, lon: float) -> ForecastSeries:
        """Get the 3-hourly forecast at a coordinate."""
        data = await self._transport.get(FORECAST_ENDPOINT, self._point_params(lat, lon))
        return _validate(ForecastSeries, data)
