"""Console sample fetching the OpenWeatherMap sample forecast."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Optional

import httpx

from .config import ClientConfig, create_client
from .http import get_json
from .logger import ErrorLogger, StdlibErrorLogger
from .models import Forecast

LOGGER = logging.getLogger(__name__)


async def get_weather(
    client: httpx.AsyncClient,
    config: Optional[ClientConfig] = None,
    logger: Optional[ErrorLogger] = None,
) -> Any:
    """Return the raw decoded forecast document, or ``None`` on failure."""

    config = config or ClientConfig()
    return await get_json(client, config.weather_url, token=config.access_token, logger=logger)


async def get_forecast(
    client: httpx.AsyncClient,
    config: Optional[ClientConfig] = None,
    logger: Optional[ErrorLogger] = None,
) -> Optional[Forecast]:
    """Return the forecast as a :class:`~json_http.models.Forecast`."""

    config = config or ClientConfig()
    return await get_json(
        client, config.weather_url, token=config.access_token, logger=logger, model=Forecast
    )


async def run(config: Optional[ClientConfig] = None) -> Any:
    """Fetch the forecast twice on one client, printing the first result."""

    config = config or ClientConfig()
    logger = StdlibErrorLogger(LOGGER)
    async with create_client(config) as client:
        content = await get_weather(client, config, logger)
        print(content)
        # Second fetch on the same client reuses its connection.
        return await get_weather(client, config, logger)


def main() -> None:
    """Fetch the sample forecast and print it."""

    logging.basicConfig(level=logging.INFO)
    print("Hello World!")
    asyncio.run(run())


__all__ = ["get_forecast", "get_weather", "main", "run"]


if __name__ == "__main__":
    main()
