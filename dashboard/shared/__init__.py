"""Shared dashboard utilities."""

# --- Constants, config & formatting ---
from .config import Settings
from .constants import FORECAST_CARD_SLICE, HUMIDITY_COLOR, PLOTLY_LAYOUT_DEFAULTS, TEMP_COLOR
from .formatters import (
    format_hour,
    format_local_datetime,
    format_percent,
    format_temperature,
    format_wind,
)

# --- Data layer ---
from .data import OpenWeatherRepository, WeatherRepository
from .demo import DEMO_SCENARIOS
from .errors import InvalidQueryError, MissingCredentialsError, SearchError, UnclassifiedError

# --- Service layer ---
from .services import SearchResult, SearchService, SearchState, SearchStatus

__all__ = [
    "DEMO_SCENARIOS",
    "FORECAST_CARD_SLICE",
    "HUMIDITY_COLOR",
    "InvalidQueryError",
    "MissingCredentialsError",
    "OpenWeatherRepository",
    "PLOTLY_LAYOUT_DEFAULTS",
    "SearchError",
    "SearchResult",
    "SearchService",
    "SearchState",
    "SearchStatus",
    "Settings",
    "TEMP_COLOR",
    "UnclassifiedError",
    "WeatherRepository",
    "format_hour",
    "format_local_datetime",
    "format_percent",
    "format_temperature",
    "format_wind",
]
