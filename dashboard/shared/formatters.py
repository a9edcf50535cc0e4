"""Formatting helpers for the weather dashboard."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

_COMPASS = ["N", "NE", "E", "SE", "S", "SW", "W", "NW"]


def format_temperature(value: float | None) -> str:
    """Format a temperature as a rounded whole degree, or '—' if None."""
    if value is None:
        return "—"
    return f"{round(value)}°"


def format_percent(value: float | None) -> str:
    if value is None:
        return "—"
    return f"{round(value)}%"


def format_local_datetime(timestamp: int, offset: int) -> str:
    """Format an epoch time shifted by a UTC offset, e.g. 'Monday, March 4, 2024, 14:05'."""
    local = datetime.fromtimestamp(timestamp, tz=timezone(timedelta(seconds=offset)))
    return f"{local:%A, %B} {local.day}, {local:%Y, %H:%M}"


def format_hour(timestamp: int, offset: int = 0) -> str:
    """Format an epoch time as 24h HH:MM."""
    local = datetime.fromtimestamp(timestamp, tz=timezone(timedelta(seconds=offset)))
    return f"{local:%H:%M}"


def compass_point(degrees: int | None) -> str | None:
    if degrees is None:
        return None
    return _COMPASS[round((degrees % 360) / 45) % 8]


def format_wind(speed: float | None, degrees: int | None = None) -> str:
    """Format wind as 'speed m/s' with an optional compass direction."""
    if speed is None:
        return "—"
    direction = compass_point(degrees)
    text = f"{speed:.1f} m/s"
    return f"{text} {direction}" if direction else text
