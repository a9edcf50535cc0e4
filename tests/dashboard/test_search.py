"""Tests for shared/services/search.py — demo branch, fan-out/join, classification."""

from __future__ import annotations

import asyncio
import random
from datetime import timedelta

import pytest

from owm.exceptions import NotFoundError, WeatherAPIError, WeatherConnectionError
from shared.data.base import WeatherRepository
from shared.errors import (
    MISSING_CREDENTIALS_MESSAGE,
    InvalidQueryError,
    MissingCredentialsError,
    SearchError,
    UnclassifiedError,
)
from shared.services.search import (
    SearchResult,
    SearchService,
    SearchState,
    SearchStatus,
    classify_error,
    normalize_query,
)


@pytest.fixture
def service(mock_repo, seeded_rng, fixed_now):
    return SearchService(mock_repo, rng=seeded_rng, clock=lambda: fixed_now)


class _GatedRepo(WeatherRepository):
    """Each fetch waits until its sibling has started; sequencing them deadlocks."""

    def __init__(self, coords, current, forecast) -> None:
        self.events: list[str] = []
        self._coords = coords
        self._current = current
        self._forecast = forecast
        self._current_started = asyncio.Event()
        self._forecast_started = asyncio.Event()

    async def resolve_coordinates(self, city_name):
        self.events.append("resolve")
        return self._coords

    async def fetch_current_conditions(self, lat, lon):
        self.events.append("current:start")
        self._current_started.set()
        await asyncio.wait_for(self._forecast_started.wait(), timeout=1)
        self.events.append("current:end")
        return self._current

    async def fetch_forecast(self, lat, lon):
        self.events.append("forecast:start")
        self._forecast_started.set()
        await asyncio.wait_for(self._current_started.wait(), timeout=1)
        self.events.append("forecast:end")
        return self._forecast


class TestNormalizeQuery:
    def test_trims_and_lowers(self):
        assert normalize_query("  ChEnNaI \t") == "chennai"

    def test_blank(self):
        assert normalize_query("   ") == ""


class TestDemoBranch:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("query", ["Chennai", "  CHENNAI ", "chennai", "demo", "London"])
    async def test_no_network(self, service, mock_repo, query):
        result = await service.search(query)
        assert result.source == "demo"
        assert result.current.weather
        assert result.forecast.points
        mock_repo.resolve_coordinates.assert_not_called()
        mock_repo.fetch_current_conditions.assert_not_called()
        mock_repo.fetch_forecast.assert_not_called()

    @pytest.mark.asyncio
    async def test_chennai_scenario(self, service, fixed_now):
        result = await service.search("Chennai")
        assert result.current.name == "Chennai"
        assert result.current.country == "IN"
        assert len(result.forecast.points) == 8
        for i, point in enumerate(result.forecast.points):
            expected = fixed_now + timedelta(hours=i + 1)
            assert point.dt == int(expected.timestamp())

    @pytest.mark.asyncio
    async def test_demo_key_shows_chennai(self, service):
        result = await service.search("demo")
        assert result.current.name == "Chennai"

    @pytest.mark.asyncio
    async def test_repeated_identity_is_stable(self, mock_repo):
        service = SearchService(mock_repo)
        first = await service.search("chennai")
        second = await service.search("chennai")
        assert first.current.id == second.current.id
        assert first.current.coord == second.current.coord
        assert first.forecast.city == second.forecast.city


class TestValidation:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("query", ["", "  ", "\t\n"])
    async def test_blank_rejected_before_dispatch(self, service, mock_repo, query):
        with pytest.raises(InvalidQueryError):
            await service.search(query)
        mock_repo.resolve_coordinates.assert_not_called()


class TestLiveBranch:
    @pytest.mark.asyncio
    async def test_success(self, service, mock_repo, paris, sample_current, sample_forecast):
        result = await service.search("  Paris ")
        assert isinstance(result, SearchResult)
        assert result.source == "live"
        assert result.current is sample_current
        assert result.forecast is sample_forecast
        mock_repo.resolve_coordinates.assert_awaited_once_with("Paris")
        mock_repo.fetch_current_conditions.assert_awaited_once_with(paris.lat, paris.lon)
        mock_repo.fetch_forecast.assert_awaited_once_with(paris.lat, paris.lon)

    @pytest.mark.asyncio
    async def test_fetches_run_concurrently(self, paris, sample_current, sample_forecast):
        repo = _GatedRepo(paris, sample_current, sample_forecast)
        result = await SearchService(repo).search("Paris")
        assert result.source == "live"
        assert repo.events[0] == "resolve"
        assert set(repo.events[1:3]) == {"current:start", "forecast:start"}

    @pytest.mark.asyncio
    async def test_resolution_failure_skips_fetches(self, service, mock_repo):
        mock_repo.resolve_coordinates.side_effect = NotFoundError("Atlantis")
        with pytest.raises(UnclassifiedError, match="City not found"):
            await service.search("Atlantis")
        mock_repo.fetch_current_conditions.assert_not_called()
        mock_repo.fetch_forecast.assert_not_called()

    @pytest.mark.asyncio
    async def test_current_failure_discards_forecast(self, service, mock_repo):
        mock_repo.fetch_current_conditions.side_effect = WeatherAPIError(500, "boom")
        with pytest.raises(UnclassifiedError) as exc_info:
            await service.search("Paris")
        assert str(exc_info.value) == "HTTP 500: boom"
        mock_repo.fetch_forecast.assert_called_once()

    @pytest.mark.asyncio
    async def test_unauthorized_maps_to_missing_credentials(self, service, mock_repo):
        mock_repo.resolve_coordinates.side_effect = WeatherAPIError(401, "Invalid API key")
        with pytest.raises(MissingCredentialsError) as exc_info:
            await service.search("Paris")
        assert str(exc_info.value) == MISSING_CREDENTIALS_MESSAGE
        assert isinstance(exc_info.value.__cause__, WeatherAPIError)

    @pytest.mark.asyncio
    async def test_forecast_unauthorized(self, service, mock_repo):
        mock_repo.fetch_forecast.side_effect = WeatherAPIError(401, "Invalid API key")
        with pytest.raises(MissingCredentialsError):
            await service.search("Paris")


class TestClassifyError:
    def test_401(self):
        assert isinstance(classify_error(WeatherAPIError(401, "nope")), MissingCredentialsError)

    def test_invalid_key_message(self):
        err = classify_error(WeatherAPIError(400, "Invalid API key. Please see ..."))
        assert isinstance(err, MissingCredentialsError)

    def test_transport_failure_preserves_message(self):
        err = classify_error(WeatherConnectionError("connection refused"))
        assert isinstance(err, UnclassifiedError)
        assert str(err) == "connection refused"

    def test_unexpected_exception(self):
        err = classify_error(RuntimeError("weird"))
        assert isinstance(err, UnclassifiedError)
        assert str(err) == "weird"

    def test_empty_message_falls_back_to_type(self):
        assert str(classify_error(KeyError())) == "KeyError"

    def test_search_error_passthrough(self):
        original = InvalidQueryError()
        assert classify_error(original) is original


class TestSearchState:
    def test_initial(self):
        state = SearchState()
        assert state.status is SearchStatus.IDLE

    def test_success_flow(self, sample_current, sample_forecast):
        result = SearchResult(sample_current, sample_forecast, source="live")
        state = SearchState().begin("Paris")
        assert state.status is SearchStatus.SEARCHING
        assert state.query == "Paris"
        state = state.succeed(result)
        assert state.status is SearchStatus.SUCCESS
        assert state.result is result
        assert state.error is None

    def test_failure_replaces_result(self, sample_current, sample_forecast):
        result = SearchResult(sample_current, sample_forecast, source="live")
        state = SearchState().begin("Paris").succeed(result).begin("Nowhere")
        state = state.fail(UnclassifiedError("City not found"))
        assert state.status is SearchStatus.FAILED
        assert state.result is None
        assert state.error == "City not found"

    def test_clear_error_does_not_replay(self):
        state = SearchState().begin("Paris").fail(MissingCredentialsError())
        cleared = state.clear_error()
        assert cleared.status is SearchStatus.IDLE
        assert cleared.error is None
        assert cleared.query == "Paris"

    def test_clear_error_noop_when_not_failed(self):
        state = SearchState()
        assert state.clear_error() is state

    def test_new_search_after_failure_starts_fresh(self):
        state = SearchState().begin("a").fail(SearchError("x")).begin("b")
        assert state.status is SearchStatus.SEARCHING
        assert state.query == "b"
        assert state.error is None


class TestLogging:
    @pytest.mark.asyncio
    async def test_search_logged(self, service, log_dir):
        await service.search("chennai")
        content = (log_dir / "api_calls.log").read_text()
        assert "SERVICE CALL: SearchService.search('chennai')" in content
        assert "SERVICE OK: SearchService.search" in content

    @pytest.mark.asyncio
    async def test_classified_failure_logged(self, service, log_dir):
        with pytest.raises(InvalidQueryError):
            await service.search(" ")
        content = (log_dir / "api_calls.log").read_text()
        assert "SERVICE FAIL: SearchService.search -> InvalidQueryError" in content


def test_rng_injection_is_repeatable(mock_repo, fixed_now):
    async def run(seed):
        service = SearchService(mock_repo, rng=random.Random(seed), clock=lambda: fixed_now)
        return await service.search("london")

    a = asyncio.run(run(7))
    b = asyncio.run(run(7))
    assert a.forecast == b.forecast
