"""Configuration helpers for the JSON HTTP client."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

import httpx

DEFAULT_WEATHER_URL = (
    "https://samples.openweathermap.org/data/2.5/forecast"
    "?id=524901&appid=b1b15e88fa797225412429c1c50c122a1"
)


def _bool_env(var_name: str, default: bool) -> bool:
    value = os.getenv(var_name)
    if value is None:
        return default
    return value.strip().lower() not in {"0", "false", "no", "off"}


@dataclass(slots=True)
class ClientConfig:
    """Client configuration, optionally read from environment variables."""

    weather_url: str = DEFAULT_WEATHER_URL
    access_token: Optional[str] = None
    timeout: float = 30.0
    verify_ssl: bool = True
    follow_redirects: bool = True

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """Create a :class:`ClientConfig` using environment variables."""

        return cls(
            weather_url=os.getenv("WEATHER_API_URL", DEFAULT_WEATHER_URL),
            access_token=os.getenv("JSON_HTTP_ACCESS_TOKEN") or None,
            timeout=float(os.getenv("JSON_HTTP_TIMEOUT", "30")),
            verify_ssl=_bool_env("JSON_HTTP_VERIFY_SSL", True),
            follow_redirects=_bool_env("JSON_HTTP_FOLLOW_REDIRECTS", True),
        )


def create_client(config: Optional[ClientConfig] = None, **kwargs) -> httpx.AsyncClient:
    """Return an :class:`httpx.AsyncClient` configured from ``config``.

    Extra keyword arguments are passed to the client, e.g. ``transport=`` in tests.
    """

    config = config or ClientConfig()
    return httpx.AsyncClient(
        timeout=config.timeout,
        verify=config.verify_ssl,
        follow_redirects=config.follow_redirects,
        **kwargs,
    )


__all__ = ["ClientConfig", "DEFAULT_WEATHER_URL", "create_client"]
