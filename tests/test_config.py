import asyncio

import httpx

from json_http.config import DEFAULT_WEATHER_URL, ClientConfig, create_client
from json_http.http import get_json
from json_http.logger import MemoryLogger


def test_defaults_point_at_sample_forecast() -> None:
    config = ClientConfig()
    assert config.weather_url == DEFAULT_WEATHER_URL
    assert config.access_token is None
    assert config.timeout == 30.0


def test_from_env_reads_overrides(monkeypatch) -> None:
    monkeypatch.setenv("WEATHER_API_URL", "https://weather.test/forecast")
    monkeypatch.setenv("JSON_HTTP_ACCESS_TOKEN", "abc")
    monkeypatch.setenv("JSON_HTTP_TIMEOUT", "5")
    monkeypatch.setenv("JSON_HTTP_VERIFY_SSL", "false")

    config = ClientConfig.from_env()

    assert config.weather_url == "https://weather.test/forecast"
    assert config.access_token == "abc"
    assert config.timeout == 5.0
    assert config.verify_ssl is False


def test_from_env_treats_empty_token_as_missing(monkeypatch) -> None:
    monkeypatch.delenv("WEATHER_API_URL", raising=False)
    monkeypatch.setenv("JSON_HTTP_ACCESS_TOKEN", "")
    config = ClientConfig.from_env()
    assert config.access_token is None
    assert config.weather_url == DEFAULT_WEATHER_URL


def test_create_client_applies_timeout() -> None:
    async def run():
        async with create_client(ClientConfig(timeout=2.5)) as client:
            return client.timeout

    timeout = asyncio.run(run())
    assert isinstance(timeout, httpx.Timeout)
    assert timeout.read == 2.5


def test_create_client_follows_redirects() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/old":
            return httpx.Response(302, headers={"Location": "https://api.test/new"})
        return httpx.Response(200, json={"moved": True})

    async def run():
        async with create_client(ClientConfig(), transport=httpx.MockTransport(handler)) as client:
            return await get_json(client, "https://api.test/old", logger=logger)

    logger = MemoryLogger()
    assert asyncio.run(run()) == {"moved": True}
    assert logger.errors == []


def test_from_env_can_disable_redirects(monkeypatch) -> None:
    monkeypatch.setenv("JSON_HTTP_FOLLOW_REDIRECTS", "false")
    assert ClientConfig.from_env().follow_redirects is False
