"""User-facing search errors. The UI catches only ``SearchError``."""

from __future__ import annotations

MISSING_CREDENTIALS_MESSAGE = (
    "Please add your OpenWeatherMap API key to get real weather data. "
    'Type "demo" to see sample data.'
)


class SearchError(Exception):
    """Base class for classified search failures."""


class InvalidQueryError(SearchError):
    """The query was blank after trimming; nothing was sent upstream."""

    def __init__(self, message: str = "Please enter a city name.") -> None:
        super().__init__(message)


class MissingCredentialsError(SearchError):
    """The upstream rejected the API key."""

    def __init__(self, message: str = MISSING_CREDENTIALS_MESSAGE) -> None:
        super().__init__(message)


class UnclassifiedError(SearchError):
    """Any other failure, carrying the underlying message verbatim."""
