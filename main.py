"""Entry point printing the sample weather forecast."""

import asyncio
import logging

from json_http import ClientConfig, JsonHttpClient, StdlibErrorLogger, create_client
from json_http.models import Forecast


async def fetch() -> None:
    config = ClientConfig()
    logger = StdlibErrorLogger(logging.getLogger("weather"))
    async with JsonHttpClient(create_client(config), token=config.access_token, logger=logger) as api:
        content = await api.get_json(config.weather_url)
        print(content)

        forecast = await api.get_json(config.weather_url, model=Forecast)
        if forecast is not None:
            print(forecast.summary())


def main() -> None:
    """Fetch the forecast once raw and once typed."""

    logging.basicConfig(level=logging.INFO)
    print("Hello World!")
    asyncio.run(fetch())


if __name__ == "__main__":
    main()
