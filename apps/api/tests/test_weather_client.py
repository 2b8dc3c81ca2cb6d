from __future__ import annotations

import httpx
import pytest

from api.clients.weather_client import OpenWeatherClient, parse_observation
from api.errors import ApiError


def build_client(handler):
    transport = httpx.MockTransport(handler)
    return OpenWeatherClient(
        api_key="test-key",
        base_url="https://weather.example.com/data/2.5/weather",
        timeout_seconds=5.0,
        client_factory=lambda: httpx.AsyncClient(transport=transport, timeout=5.0),
    )


@pytest.mark.asyncio
async def test_weather_client_requests_imperial_units_and_parses_payload() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/data/2.5/weather"
        assert request.url.params["units"] == "imperial"
        assert request.url.params["appid"] == "test-key"
        assert request.url.params["lat"] == "40.7"
        assert request.url.params["lon"] == "-74.0"
        return httpx.Response(
            status_code=200,
            json={
                "weather": [{"id": 601, "description": "snow"}],
                "main": {"temp": 28.4},
                "name": "New York",
            },
        )

    observation = await build_client(handler).fetch_current(40.7, -74.0)

    assert observation.condition_code == 601
    assert observation.temperature_f == 28.4
    assert observation.description == "snow"
    assert observation.city_name == "New York"


@pytest.mark.asyncio
async def test_weather_client_maps_http_error() -> None:
    def handler(_: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code=401, json={"message": "Invalid API key"})

    with pytest.raises(ApiError) as exc_info:
        await build_client(handler).fetch_current(40.7, -74.0)

    assert exc_info.value.code == "UPSTREAM_HTTP_ERROR"
    assert exc_info.value.is_upstream


@pytest.mark.asyncio
async def test_weather_client_maps_timeout() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("too slow", request=request)

    with pytest.raises(ApiError) as exc_info:
        await build_client(handler).fetch_current(40.7, -74.0)

    assert exc_info.value.code == "UPSTREAM_TIMEOUT"


@pytest.mark.asyncio
async def test_weather_client_maps_connection_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    with pytest.raises(ApiError) as exc_info:
        await build_client(handler).fetch_current(40.7, -74.0)

    assert exc_info.value.code == "UPSTREAM_FAILURE"


@pytest.mark.asyncio
async def test_weather_client_rejects_non_json_body() -> None:
    def handler(_: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code=200, content=b"<html>maintenance</html>")

    with pytest.raises(ApiError) as exc_info:
        await build_client(handler).fetch_current(40.7, -74.0)

    assert exc_info.value.code == "UPSTREAM_MALFORMED"


def test_parse_observation_fills_missing_fields() -> None:
    observation = parse_observation({})

    assert observation.condition_code == 800
    assert observation.temperature_f == 70.0
    assert observation.description == "unknown"
    assert observation.city_name == "Unknown"


def test_parse_observation_keeps_zero_temperature() -> None:
    observation = parse_observation({"weather": [{"id": 800}], "main": {"temp": 0}})

    assert observation.temperature_f == 0.0
