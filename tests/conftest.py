"""Shared test fixtures and sample API responses."""

from __future__ import annotations

import pytest

BASE_URL = "https://api.openweathermap.org"
API_KEY = "test-key"


SAMPLE_GEOCODE = [
    {
        "name": "Paris",
        "local_names": {"fr": "Paris", "en": "Paris"},
        "lat": 48.8588897,
        "lon": 2.3200410,
        "country": "FR",
        "state": "Ile-de-France",
    },
    {
        "name": "Paris",
        "lat": 33.6617962,
        "lon": -95.555513,
        "country": "US",
        "state": "Texas",
    },
]

SAMPLE_CONDITION = {"id": 800, "main": "Clear", "description": "clear sky", "icon": "01d"}

SAMPLE_CURRENT = {
    "coord": {"lon": 2.32, "lat": 48.8589},
    "weather": [SAMPLE_CONDITION],
    "base": "stations",
    "main": {
        "temp": 18.4,
        "feels_like": 17.9,
        "temp_min": 16.8,
        "temp_max": 19.6,
        "pressure": 1019,
        "humidity": 63,
    },
    "visibility": 10000,
    "wind": {"speed": 3.6, "deg": 250},
    "clouds": {"all": 0},
    "dt": 1717243200,
    "sys": {"type": 2, "id": 2041230, "country": "FR", "sunrise": 1717213690, "sunset": 1717271530},
    "timezone": 7200,
    "id": 6545270,
    "name": "Palais-Royal",
    "cod": 200,
}


def _forecast_point(dt: int, temp: float, dt_txt: str) -> dict:
    return {
        "dt": dt,
        "main": {
            "temp": temp,
            "feels_like": temp - 0.5,
            "temp_min": temp - 1,
            "temp_max": temp + 1,
            "pressure": 1019,
            "sea_level": 1019,
            "grnd_level": 1009,
            "humidity": 60,
            "temp_kf": 0.4,
        },
        "weather": [SAMPLE_CONDITION],
        "clouds": {"all": 5},
        "wind": {"speed": 3.1, "deg": 245, "gust": 5.0},
        "visibility": 10000,
        "pop": 0.1,
        "sys": {"pod": "d"},
        "dt_txt": dt_txt,
    }


SAMPLE_FORECAST = {
    "cod": "200",
    "message": 0,
    "cnt": 3,
    # deliberately out of order
    "list": [
        _forecast_point(1717257600, 19.0, "2024-06-01 16:00:00"),
        _forecast_point(1717246800, 18.0, "2024-06-01 13:00:00"),
        _forecast_point(1717268400, 16.5, "2024-06-01 19:00:00"),
    ],
    "city": {
        "id": 6545270,
        "name": "Palais-Royal",
        "coord": {"lat": 48.8589, "lon": 2.32},
        "country": "FR",
        "population": 3000,
        "timezone": 7200,
        "sunrise": 1717213690,
        "sunset": 1717271530,
    },
}

UNAUTHORIZED_BODY = {
    "cod": 401,
    "message": "Invalid API key. Please see https://openweathermap.org/faq#error401 for more info.",
}


@pytest.fixture
def base_url() -> str:
    return BASE_URL
