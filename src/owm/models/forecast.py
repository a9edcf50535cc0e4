"""Forecast series models (``/data/2.5/forecast``)."""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, field_validator

from owm.models.common import Clouds, Coord, Reading, WeatherCondition, Wind


class ForecastPoint(BaseModel):
    """One future prediction."""

    model_config = ConfigDict(frozen=True)

    dt: int
    main: Reading
    weather: list[WeatherCondition] = Field(min_length=1)
    clouds: Clouds
    wind: Wind
    visibility: int | None = None
    pop: float = Field(default=0.0, ge=0, le=1)
    dt_txt: str

    @property
    def condition(self) -> WeatherCondition:
        return self.weather[0]

    @property
    def time(self) -> datetime:
        return datetime.fromtimestamp(self.dt, tz=timezone.utc)


class ForecastCity(BaseModel):
    """Place identity shared by every point of a forecast."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    coord: Coord
    country: str | None = None
    population: int | None = None
    timezone: int = 0
    sunrise: int | None = None
    sunset: int | None = None


class ForecastSeries(BaseModel):
    """Place plus its forecast points, nearest first.

    The upstream JSON key for the points is ``list``; it is exposed here as
    ``points``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    city: ForecastCity
    points: list[ForecastPoint] = Field(alias="list")

    @field_validator("points")
    @classmethod
    def _sort_by_time(cls, points: list[ForecastPoint]) -> list[ForecastPoint]:
        return sorted(points, key=lambda p: p.dt)
