from __future__ import annotations

from collections.abc import Callable
from typing import Any

import httpx
from zone_engine.models import WeatherObservation

from api.errors import ApiError

OPENWEATHER_CURRENT_URL = "https://api.openweathermap.org/data/2.5/weather"

DEFAULT_CONDITION_CODE = 800
DEFAULT_TEMPERATURE_F = 70.0


class OpenWeatherClient:
    def __init__(
        self,
        api_key: str,
        base_url: str = OPENWEATHER_CURRENT_URL,
        timeout_seconds: float = 5.0,
        client_factory: Callable[[], httpx.AsyncClient] | None = None,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout_seconds = timeout_seconds
        self._client_factory = client_factory

    async def fetch_current(self, lat: float, lng: float) -> WeatherObservation:
        params: dict[str, Any] = {
            "lat": lat,
            "lon": lng,
            "appid": self._api_key,
            "units": "imperial",
        }
        try:
            factory = self._client_factory or (lambda: httpx.AsyncClient(timeout=self._timeout_seconds))
            async with factory() as client:
                response = await client.get(self._base_url, params=params)
                response.raise_for_status()
        except httpx.TimeoutException as exc:
            raise ApiError("UPSTREAM_TIMEOUT", "Weather provider timeout", 504) from exc
        except httpx.HTTPStatusError as exc:
            raise ApiError("UPSTREAM_HTTP_ERROR", "Weather provider returned error", 502) from exc
        except httpx.HTTPError as exc:
            raise ApiError("UPSTREAM_FAILURE", "Weather provider request failed", 502) from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise ApiError("UPSTREAM_MALFORMED", "Weather provider sent invalid JSON", 502) from exc
        return parse_observation(payload)


def parse_observation(payload: Any) -> WeatherObservation:
    if not isinstance(payload, dict):
        raise ApiError("UPSTREAM_MALFORMED", "Weather payload is not an object", 502)
    conditions = payload.get("weather") or []
    condition = conditions[0] if isinstance(conditions, list) and conditions else {}
    main = payload.get("main") or {}
    if not isinstance(condition, dict) or not isinstance(main, dict):
        raise ApiError("UPSTREAM_MALFORMED", "Weather payload has unexpected shape", 502)

    code = condition.get("id")
    temperature = main.get("temp")
    try:
        return WeatherObservation(
            condition_code=DEFAULT_CONDITION_CODE if code is None else int(code),
            temperature_f=DEFAULT_TEMPERATURE_F if temperature is None else float(temperature),
            description=str(condition.get("description") or "unknown"),
            city_name=str(payload.get("name") or "Unknown"),
        )
    except (TypeError, ValueError) as exc:
        raise ApiError("UPSTREAM_MALFORMED", "Weather payload has non-numeric fields", 502) from exc
