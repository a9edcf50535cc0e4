"""Data layer — repository interface and the OpenWeatherMap implementation."""

from __future__ import annotations

from .base import WeatherRepository
from .openweather_repo import OpenWeatherRepository

__all__ = [
    "OpenWeatherRepository",
    "WeatherRepository",
]
