"""Shared fixtures for dashboard tests."""

from __future__ import annotations

import random
import sys
from datetime import datetime, timezone
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

# ── Mock streamlit before any dashboard imports ──────────────────────────────

_mock_st = MagicMock()
_mock_st.session_state = {}
sys.modules.setdefault("streamlit", _mock_st)

# Add dashboard to path so `shared` is importable
_dashboard_dir = str(Path(__file__).resolve().parent.parent.parent / "dashboard")
if _dashboard_dir not in sys.path:
    sys.path.insert(0, _dashboard_dir)

from owm.models import Coordinates, CurrentConditions, ForecastSeries  # noqa: E402
from shared.data.base import WeatherRepository  # noqa: E402
from tests.conftest import SAMPLE_CURRENT, SAMPLE_FORECAST  # noqa: E402

FIXED_NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def paris() -> Coordinates:
    return Coordinates(lat=48.8589, lon=2.32, name="Paris", country="FR")


@pytest.fixture
def sample_current() -> CurrentConditions:
    return CurrentConditions.model_validate(SAMPLE_CURRENT)


@pytest.fixture
def sample_forecast() -> ForecastSeries:
    return ForecastSeries.model_validate(SAMPLE_FORECAST)


@pytest.fixture
def mock_repo(paris, sample_current, sample_forecast):
    """Repository whose three calls succeed with sample data."""
    repo = MagicMock(spec=WeatherRepository)
    repo.resolve_coordinates = AsyncMock(return_value=paris)
    repo.fetch_current_conditions = AsyncMock(return_value=sample_current)
    repo.fetch_forecast = AsyncMock(return_value=sample_forecast)
    return repo


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture(autouse=True)
def log_dir(tmp_path):
    """Reset the module-level logger and redirect log output to tmp_path."""
    import logging

    import shared.api_logging as mod

    old_logger = mod._logger
    old_dir = mod._LOG_DIR
    old_file = mod._LOG_FILE

    named_logger = logging.getLogger("weather_dashboard.api")
    named_logger.handlers.clear()

    mod._logger = None
    mod._LOG_DIR = str(tmp_path)
    mod._LOG_FILE = str(tmp_path / "api_calls.log")

    yield tmp_path

    # Close file handlers to release file locks (important on Windows)
    for h in named_logger.handlers[:]:
        h.close()
        named_logger.removeHandler(h)
    mod._logger = old_logger
    mod._LOG_DIR = old_dir
    mod._LOG_FILE = old_file
