from __future__ import annotations

import asyncio
import logging

from zone_engine.models import NEUTRAL_WEATHER, WeatherObservation, WeatherSnapshot
from zone_engine.weather import calculate_weather_severity, weather_cell_key

from api.cache import WeatherCache
from api.clients.weather_client import OpenWeatherClient
from api.errors import ApiError
from api.observability import WeatherOutcomeMetrics, get_trace_id

logger = logging.getLogger(__name__)


class WeatherService:
    """Weather severity per location, degraded to a neutral value on any failure.

    Concurrent misses for the same cell each call the upstream once; the last
    writer wins in the cache.
    """

    def __init__(
        self,
        client: OpenWeatherClient | None,
        cache: WeatherCache,
        timeout_seconds: float = 5.0,
        metrics: WeatherOutcomeMetrics | None = None,
    ) -> None:
        self._client = client
        self._cache = cache
        self._timeout_seconds = timeout_seconds
        self._metrics = metrics

    @property
    def is_configured(self) -> bool:
        return self._client is not None

    async def get_weather_score(self, lat: float, lng: float) -> WeatherSnapshot:
        try:
            observation = await self.get_current_weather(lat, lng)
        except Exception:
            logger.exception(
                "weather_score_failed",
                extra={"component": "weather", "trace_id": get_trace_id(), "lat": lat, "lng": lng},
            )
            observation = None
        if observation is None:
            self._record("neutral")
            return NEUTRAL_WEATHER
        return WeatherSnapshot(
            score=calculate_weather_severity(observation),
            description=observation.description,
        )

    async def get_current_weather(self, lat: float, lng: float) -> WeatherObservation | None:
        if self._client is None:
            logger.warning("weather_api_key_missing", extra={"component": "weather", "trace_id": get_trace_id()})
            return None

        cache_key = weather_cell_key(lat, lng)
        cached = await self._cache.get_fresh(cache_key)
        if cached is not None:
            self._record("fresh")
            return cached

        try:
            observation = await asyncio.wait_for(
                self._client.fetch_current(lat, lng),
                timeout=self._timeout_seconds,
            )
        except Exception as exc:
            logger.warning(
                "weather_fetch_failed",
                extra={
                    "component": "weather",
                    "trace_id": get_trace_id(),
                    "cache_key": cache_key,
                    "reason": _failure_reason(exc),
                },
            )
            stale = await self._cache.get_stale(cache_key)
            if stale is not None:
                self._record("stale")
                logger.info(
                    "weather_stale_cache_used",
                    extra={"component": "weather", "trace_id": get_trace_id(), "cache_key": cache_key},
                )
            return stale

        await self._cache.set(cache_key, observation)
        self._record("fetched")
        return observation

    async def clear_cache(self) -> int:
        return await self._cache.clear()

    def _record(self, outcome: str) -> None:
        if self._metrics is not None:
            self._metrics.record(outcome)


def _failure_reason(exc: Exception) -> str:
    if isinstance(exc, ApiError) and exc.is_upstream:
        return exc.code
    if isinstance(exc, TimeoutError):
        return "UPSTREAM_TIMEOUT"
    return type(exc).__name__
