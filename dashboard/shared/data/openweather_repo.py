"""OpenWeatherMap API repository implementation."""

from __future__ import annotations

from owm import AsyncWeatherClient
from owm.models import Coordinates, CurrentConditions, ForecastSeries

from ..api_logging import log_api_call
from ..config import Settings
from .base import WeatherRepository


class OpenWeatherRepository(WeatherRepository):
    """Thin logged pass-through to ``AsyncWeatherClient``; errors propagate untouched.

    Usage:
        async with OpenWeatherRepository.from_settings(settings) as repo:
            coords = await repo.resolve_coordinates("Paris")
    """

    def __init__(self, client: AsyncWeatherClient) -> None:
        self._client = client

    @classmethod
    def from_settings(cls, settings: Settings) -> OpenWeatherRepository:
        return cls(
            AsyncWeatherClient(
                api_key=settings.api_key,
                base_url=settings.base_url,
                timeout=settings.timeout,
            )
        )

    async def __aenter__(self) -> OpenWeatherRepository:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self._client.close()

    @log_api_call
    async def resolve_coordinates(self, city_name: str) -> Coordinates:
        return await self._client.resolve_coordinates(city_name)

    @log_api_call
    async def fetch_current_conditions(self, lat: float, lon: float) -> CurrentConditions:
        return await self._client.fetch_current_conditions(lat, lon)

    @log_api_call
    async def fetch_forecast(self, lat: float, lon: float) -> ForecastSeries:
        return await self._client.fetch_forecast(lat, lon)
