"""Building blocks shared by the current-conditions and forecast models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

ICON_URL = "https://openweathermap.org/img/wn/{icon}@2x.png"


class Coord(BaseModel):
    model_config = ConfigDict(frozen=True)

    lat: float = Field(ge=-90, le=90)
    lon: float = Field(ge=-180, le=180)


class WeatherCondition(BaseModel):
    """Condition descriptor (code, category, description, icon)."""

    model_config = ConfigDict(frozen=True)

    id: int
    main: str
    description: str
    icon: str

    @property
    def icon_url(self) -> str:
        return ICON_URL.format(icon=self.icon)


class Reading(BaseModel):
    """Point-in-time temperature, pressure and humidity reading."""

    model_config = ConfigDict(frozen=True)

    temp: float
    feels_like: float
    temp_min: float
    temp_max: float
    pressure: float
    humidity: float
    sea_level: float | None = None
    grnd_level: float | None = None
    temp_kf: float | None = None


class Wind(BaseModel):
    model_config = ConfigDict(frozen=True)

    speed: float
    deg: int | None = None
    gust: float | None = None


class Clouds(BaseModel):
    model_config = ConfigDict(frozen=True)

    all: int
