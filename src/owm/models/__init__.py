"""OpenWeatherMap data models."""

from owm.models.common import Clouds, Coord, Reading, WeatherCondition, Wind
from owm.models.current import CurrentConditions, CurrentSys
from owm.models.forecast import ForecastCity, ForecastPoint, ForecastSeries
from owm.models.geocoding import Coordinates

__all__ = [
    "Clouds",
    "Coord",
    "Coordinates",
    "CurrentConditions",
    "CurrentSys",
    "ForecastCity",
    "ForecastPoint",
    "ForecastSeries",
    "Reading",
    "WeatherCondition",
    "Wind",
]
