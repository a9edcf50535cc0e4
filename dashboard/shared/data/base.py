"""Abstract base repository for weather data access."""

from __future__ import annotations

from abc import ABC, abstractmethod

from owm.models import Coordinates, CurrentConditions, ForecastSeries


class WeatherRepository(ABC):
    """Source-agnostic async interface used by the search service."""

    @abstractmethod
    async def resolve_coordinates(self, city_name: str) -> Coordinates: ...

    @abstractmethod
    async def fetch_current_conditions(self, lat: float, lon: float) -> CurrentConditions: ...

    @abstractmethod
    async def fetch_forecast(self, lat: float, lon: float) -> ForecastSeries: ...
