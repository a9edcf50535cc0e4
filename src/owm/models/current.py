"""Current conditions model."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from pydantic import BaseModel, ConfigDict, Field

from owm.models.common import Clouds, Coord, Reading, WeatherCondition, Wind


class CurrentSys(BaseModel):
    model_config = ConfigDict(frozen=True)

    country: str | None = None
    sunrise: int | None = None
    sunset: int | None = None
    type: int | None = None
    id: int | None = None


def _local(timestamp: int, offset: int) -> datetime:
    return datetime.fromtimestamp(timestamp, tz=timezone(timedelta(seconds=offset)))


class CurrentConditions(BaseModel):
    """Current weather at a place (``/data/2.5/weather``)."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    coord: Coord
    weather: list[WeatherCondition] = Field(min_length=1)
    main: Reading
    visibility: int | None = None
    wind: Wind
    clouds: Clouds
    dt: int
    timezone: int = 0
    sys: CurrentSys

    @property
    def condition(self) -> WeatherCondition:
        """The authoritative (first) condition descriptor."""
        return self.weather[0]

    @property
    def country(self) -> str | None:
        return self.sys.country

    @property
    def observed_at(self) -> datetime:
        return datetime.fromtimestamp(self.dt, tz=timezone.utc)

    @property
    def local_time(self) -> datetime:
        """Observation time in the place's own UTC offset."""
        return _local(self.dt, self.timezone)

    @property
    def sunrise_local(self) -> datetime | None:
        if self.sys.sunrise is None:
            return None
        return _local(self.sys.sunrise, self.timezone)

    @property
    def sunset_local(self) -> datetime | None:
        if self.sys.sunset is None:
            return None
        return _local(self.sys.sunset, self.timezone)
