from __future__ import annotations

import redis.asyncio as redis

from devkit.config import ServiceSettings, load_settings

from api.cache import CacheStore, InMemoryCacheStore, RedisCacheStore, WeatherCache
from api.clients.weather_client import OpenWeatherClient
from api.observability import WeatherOutcomeMetrics
from api.repositories.zone_repository import GridZoneResolver
from api.services.weather_service import WeatherService
from api.services.zone_service import ZoneService

IN_MEMORY_WEATHER_CELLS = 100

_settings = load_settings("zone-api")

_weather_cache_store: CacheStore
if _settings.REDIS_URL:
    try:
        _redis_client = redis.from_url(_settings.REDIS_URL, encoding="utf-8", decode_responses=True)
        _weather_cache_store = RedisCacheStore(_redis_client)
    except Exception:
        _weather_cache_store = InMemoryCacheStore(max_entries=IN_MEMORY_WEATHER_CELLS)
else:
    _weather_cache_store = InMemoryCacheStore(max_entries=IN_MEMORY_WEATHER_CELLS)

_weather_cache = WeatherCache(
    store=_weather_cache_store,
    ttl_seconds=_settings.WEATHER_CACHE_TTL_SECONDS,
    stale_multiplier=_settings.WEATHER_STALE_TTL_MULTIPLIER,
)
if _settings.OPENWEATHER_API_KEY:
    _weather_client: OpenWeatherClient | None = OpenWeatherClient(
        api_key=_settings.OPENWEATHER_API_KEY,
        base_url=_settings.OPENWEATHER_BASE_URL,
        timeout_seconds=_settings.WEATHER_TIMEOUT_SECONDS,
    )
else:
    _weather_client = None
_weather_metrics = WeatherOutcomeMetrics()
_weather_service = WeatherService(
    client=_weather_client,
    cache=_weather_cache,
    timeout_seconds=_settings.WEATHER_TIMEOUT_SECONDS,
    metrics=_weather_metrics,
)
_zone_service = ZoneService(
    weather_service=_weather_service,
    resolver=GridZoneResolver(radius=_settings.ZONE_GRID_RADIUS),
)


def get_settings() -> ServiceSettings:
    return _settings


def get_weather_metrics() -> WeatherOutcomeMetrics:
    return _weather_metrics


def get_zone_service() -> ZoneService:
    return _zone_service
