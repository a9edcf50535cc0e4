"""Environment-driven settings for the weather dashboard."""

from __future__ import annotations

import os
from dataclasses import dataclass

from owm._http import DEFAULT_BASE_URL, DEFAULT_TIMEOUT

PLACEHOLDER_API_KEY = "demo-key"


def _env(name: str, default: str) -> str:
    value = os.environ.get(name, "").strip()
    return value or default


@dataclass(frozen=True)
class Settings:
    api_key: str = PLACEHOLDER_API_KEY
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT

    @property
    def has_real_key(self) -> bool:
        return self.api_key != PLACEHOLDER_API_KEY

    @classmethod
    def from_env(cls) -> Settings:
        """Read settings from ``OPENWEATHER_*`` environment variables."""
        timeout = _env("OPENWEATHER_TIMEOUT", str(DEFAULT_TIMEOUT))
        try:
            timeout_s = float(timeout)
        except ValueError as exc:
            raise ValueError(f"OPENWEATHER_TIMEOUT must be a number, got {timeout!r}") from exc
        return cls(
            api_key=_env("OPENWEATHER_API_KEY", PLACEHOLDER_API_KEY),
            base_url=_env("OPENWEATHER_BASE_URL", DEFAULT_BASE_URL),
            timeout=timeout_s,
        )
