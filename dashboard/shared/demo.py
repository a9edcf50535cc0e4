"""Canned demonstration data served without touching the network.

Each recognized key maps to a :class:`DemoScenario`; a single generator turns a
scenario into an upstream-shaped current/forecast pair. Forecast readings are
the base reading plus uniform noise within the scenario's ``JitterBounds``.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any

from owm.models import CurrentConditions, ForecastSeries


@dataclass(frozen=True)
class JitterBounds:
    """Half-widths of the uniform noise applied to each forecast point."""

    temp: float = 3.0
    feels_like: float = 3.0
    humidity: float = 10.0


@dataclass(frozen=True)
class DemoScenario:
    city_id: int
    name: str
    country: str
    lat: float
    lon: float
    timezone: int
    sunrise: int
    sunset: int
    temp: float
    feels_like: float
    temp_min: float
    temp_max: float
    pressure: float
    humidity: float
    condition: dict[str, Any]
    wind_speed: float
    wind_deg: int
    wind_gust: float
    clouds: int
    visibility: int
    pop: float
    population: int
    jitter: JitterBounds = field(default_factory=JitterBounds)
    points: int = 8


CHENNAI = DemoScenario(
    city_id=1264527,
    name="Chennai",
    country="IN",
    lat=13.0827,
    lon=80.2707,
    timezone=19800,
    sunrise=1640645400,
    sunset=1640686800,
    temp=32,
    feels_like=38,
    temp_min=29,
    temp_max=35,
    pressure=1008,
    humidity=68,
    condition={"id": 802, "main": "Clouds", "description": "scattered clouds", "icon": "03d"},
    wind_speed=4.5,
    wind_deg=210,
    wind_gust=6.2,
    clouds=40,
    visibility=8000,
    pop=0.2,
    population=4646732,
    jitter=JitterBounds(temp=2.0, feels_like=2.0, humidity=7.5),
)

LONDON = DemoScenario(
    city_id=2643743,
    name="London",
    country="GB",
    lat=51.5085,
    lon=-0.1257,
    timezone=0,
    sunrise=1640678400,
    sunset=1640706900,
    temp=12,
    feels_like=10,
    temp_min=10,
    temp_max=14,
    pressure=1015,
    humidity=80,
    condition={"id": 803, "main": "Clouds", "description": "broken clouds", "icon": "04d"},
    wind_speed=5.1,
    wind_deg=240,
    wind_gust=7.4,
    clouds=75,
    visibility=10000,
    pop=0.4,
    population=8961989,
)

# "demo" is the generic key and shows Chennai.
DEMO_SCENARIOS: dict[str, DemoScenario] = {
    "chennai": CHENNAI,
    "london": LONDON,
    "demo": CHENNAI,
}


def find_scenario(normalized: str) -> DemoScenario | None:
    """Return the scenario for an already trimmed, lower-cased query."""
    return DEMO_SCENARIOS.get(normalized)


def _jitter(rng: random.Random, base: float, bound: float) -> float:
    return round(base + rng.uniform(-bound, bound), 1)


def _reading(s: DemoScenario, temp: float, feels_like: float, humidity: float) -> dict[str, Any]:
    return {
        "temp": temp,
        "feels_like": feels_like,
        "temp_min": s.temp_min,
        "temp_max": s.temp_max,
        "pressure": s.pressure,
        "humidity": humidity,
    }


def _current_payload(s: DemoScenario, epoch: int) -> dict[str, Any]:
    return {
        "id": s.city_id,
        "name": s.name,
        "coord": {"lat": s.lat, "lon": s.lon},
        "weather": [dict(s.condition)],
        "main": _reading(s, s.temp, s.feels_like, s.humidity),
        "visibility": s.visibility,
        "wind": {"speed": s.wind_speed, "deg": s.wind_deg},
        "clouds": {"all": s.clouds},
        "dt": epoch,
        "timezone": s.timezone,
        "sys": {"country": s.country, "sunrise": s.sunrise, "sunset": s.sunset},
    }


def _forecast_payload(s: DemoScenario, rng: random.Random, now: datetime) -> dict[str, Any]:
    points = []
    for i in range(s.points):
        at = now + timedelta(hours=i + 1)
        humidity = min(100.0, max(0.0, _jitter(rng, s.humidity, s.jitter.humidity)))
        main = _reading(
            s,
            _jitter(rng, s.temp, s.jitter.temp),
            _jitter(rng, s.feels_like, s.jitter.feels_like),
            humidity,
        )
        main.update(sea_level=s.pressure, grnd_level=s.pressure, temp_kf=0)
        points.append({
            "dt": int(at.timestamp()),
            "main": main,
            "weather": [dict(s.condition)],
            "clouds": {"all": s.clouds},
            "wind": {"speed": s.wind_speed, "deg": s.wind_deg, "gust": s.wind_gust},
            "visibility": s.visibility,
            "pop": s.pop,
            "dt_txt": at.strftime("%Y-%m-%d %H:%M:%S"),
        })
    return {
        "city": {
            "id": s.city_id,
            "name": s.name,
            "coord": {"lat": s.lat, "lon": s.lon},
            "country": s.country,
            "population": s.population,
            "timezone": s.timezone,
            "sunrise": s.sunrise,
            "sunset": s.sunset,
        },
        "list": points,
    }


def build_demo_result(
    scenario: DemoScenario,
    rng: random.Random | None = None,
    now: datetime | None = None,
) -> tuple[CurrentConditions, ForecastSeries]:
    """Build a synthetic current/forecast pair for *scenario*.

    Args:
        scenario: Place and base reading to synthesize from.
        rng: Noise source; pass a seeded ``random.Random`` for repeatable output.
        now: Invocation time (UTC). Point ``i`` is stamped ``now + (i + 1)`` hours.
    """
    rng = rng or random.Random()
    now = (now or datetime.now(tz=timezone.utc)).replace(microsecond=0)
    current = CurrentConditions.model_validate(_current_payload(scenario, int(now.timestamp())))
    forecast = ForecastSeries.model_validate(_forecast_payload(scenario, rng, now))
    return current, forecast
