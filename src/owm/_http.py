"""Low-level HTTP transport layer wrapping httpx."""

from __future__ import annotations

from typing import Any

import httpx

from owm.exceptions import (
    WeatherAPIError,
    WeatherConnectionError,
    WeatherTimeoutError,
)

DEFAULT_BASE_URL = "https://api.openweathermap.org"
DEFAULT_TIMEOUT = 10.0


def _error_message(response: httpx.Response) -> str:
    """Return the upstream error message, preferring the JSON ``message`` field."""
    try:
        body = response.json()
    except ValueError:
        return response.text
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return response.text


def _handle_response(response: httpx.Response) -> Any:
    """Validate response status and return parsed JSON."""
    if not response.is_success:
        raise WeatherAPIError(
            status_code=response.status_code,
            message=_error_message(response),
        )
    try:
        return response.json()
    except ValueError as exc:
        raise WeatherAPIError(
            status_code=response.status_code,
            message=f"Invalid JSON response: {response.text[:200]}",
        ) from exc


class SyncTransport:
    """Synchronous HTTP transport using httpx.Client.

    The API key is attached to every request as the ``appid`` query parameter.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._client = httpx.Client(
            base_url=base_url,
            timeout=timeout,
            params={"appid": api_key},
            headers={"Accept": "application/json"},
        )

    def get(self, endpoint: str, params: dict[str, str | int | float]) -> Any:
        """Perform a GET request and return parsed JSON."""
        try:
            response = self._client.get(endpoint, params=params)
        except httpx.ConnectError as exc:
            raise WeatherConnectionError(str(exc)) from exc
        except httpx.TimeoutException as exc:
            raise WeatherTimeoutError(str(exc)) from exc
        except httpx.TransportError as exc:
            raise WeatherConnectionError(str(exc) or type(exc).__name__) from exc
        return _handle_response(response)

    def close(self) -> None:
        self._client.close()


class AsyncTransport:
    """Asynchronous HTTP transport using httpx.AsyncClient."""

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            params={"appid": api_key},
            headers={"Accept": "application/json"},
        )

    async def get(self, endpoint: str, params: dict[str, str | int | float]) -> Any:
        """Perform an async GET request and return parsed JSON."""
        try:
            response = await self._client.get(endpoint, params=params)
        except httpx.ConnectError as exc:
            raise WeatherConnectionError(str(exc)) from exc
        except httpx.TimeoutException as exc:
            raise WeatherTimeoutError(str(exc)) from exc
        except httpx.TransportError as exc:
            raise WeatherConnectionError(str(exc) or type(exc).__name__) from exc
        return _handle_response(response)

    async def close(self) -> None:
        await self._client.aclose()
