"""City search service: demo lookup, live fan-out/join and error classification."""

from __future__ import annotations

import asyncio
import random
from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum
from typing import Callable, Literal

from owm.exceptions import TransportError
from owm.models import CurrentConditions, ForecastSeries

from ..api_logging import log_service_call
from ..data.base import WeatherRepository
from ..demo import build_demo_result, find_scenario
from ..errors import InvalidQueryError, MissingCredentialsError, SearchError, UnclassifiedError


@dataclass(frozen=True)
class SearchResult:
    current: CurrentConditions
    forecast: ForecastSeries
    source: Literal["demo", "live"]


class SearchStatus(str, Enum):
    IDLE = "idle"
    SEARCHING = "searching"
    SUCCESS = "success"
    FAILED = "failed"


@dataclass(frozen=True)
class SearchState:
    """What the page shows for the latest search.

    Every transition returns a new state; a finished search is never resumed.
    """

    status: SearchStatus = SearchStatus.IDLE
    query: str | None = None
    result: SearchResult | None = None
    error: str | None = None

    def begin(self, query: str) -> SearchState:
        """Start a fresh search. The previous result stays visible until replaced."""
        return SearchState(SearchStatus.SEARCHING, query=query, result=self.result)

    def succeed(self, result: SearchResult) -> SearchState:
        return SearchState(SearchStatus.SUCCESS, query=self.query, result=result)

    def fail(self, error: SearchError) -> SearchState:
        return SearchState(SearchStatus.FAILED, query=self.query, error=str(error))

    def clear_error(self) -> SearchState:
        """Dismiss an error and wait for the next submission; nothing is replayed."""
        if self.status is not SearchStatus.FAILED:
            return self
        return replace(self, status=SearchStatus.IDLE, error=None)


def normalize_query(raw: str) -> str:
    """Comparison form of a query: trimmed and lower-cased."""
    return raw.strip().lower()


def classify_error(exc: Exception) -> SearchError:
    """Map any failure from the live path to a user-facing ``SearchError``."""
    if isinstance(exc, SearchError):
        return exc
    if isinstance(exc, TransportError) and exc.is_unauthorized:
        return MissingCredentialsError()
    return UnclassifiedError(str(exc) or type(exc).__name__)


class SearchService:
    """Resolve a city query into current conditions plus forecast.

    Recognized demo keys are answered from canned data. Anything else goes to
    the repository: coordinates first, then current conditions and forecast
    concurrently.
    """

    def __init__(
        self,
        repo: WeatherRepository,
        rng: random.Random | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._repo = repo
        self._rng = rng
        self._clock = clock

    @log_service_call
    async def search(self, raw_input: str) -> SearchResult:
        """Run one search.

        Raises:
            InvalidQueryError: the query is blank.
            MissingCredentialsError: upstream rejected the API key.
            UnclassifiedError: any other failure, message preserved.
        """
        query = raw_input.strip()
        if not query:
            raise InvalidQueryError()

        scenario = find_scenario(normalize_query(query))
        if scenario is not None:
            now = self._clock() if self._clock else None
            current, forecast = build_demo_result(scenario, rng=self._rng, now=now)
            return SearchResult(current, forecast, source="demo")

        try:
            return await self._live(query)
        except Exception as exc:
            raise classify_error(exc) from exc

    async def _live(self, query: str) -> SearchResult:
        coords = await self._repo.resolve_coordinates(query)
        # Both fetches start before either is awaited; the first failure wins.
        current, forecast = await asyncio.gather(
            self._repo.fetch_current_conditions(coords.lat, coords.lon),
            self._repo.fetch_forecast(coords.lat, coords.lon),
        )
        return SearchResult(current, forecast, source="live")
