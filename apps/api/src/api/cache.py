from __future__ import annotations

import json
import logging
import time
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import asdict, dataclass, field
from typing import Any, Protocol

from zone_engine.models import WeatherObservation

logger = logging.getLogger(__name__)

WEATHER_KEY_PREFIX = "weather:"


class CacheStore(ABC):
    @abstractmethod
    async def get(self, key: str) -> dict[str, Any] | None:
        raise NotImplementedError

    @abstractmethod
    async def set(self, key: str, value: dict[str, Any], ttl_seconds: int) -> None:
        raise NotImplementedError

    @abstractmethod
    async def invalidate_prefix(self, prefix: str) -> int:
        raise NotImplementedError


class RedisLikeCacheClient(Protocol):
    async def get(self, key: str) -> str | None: ...

    async def setex(self, key: str, seconds: int, value: str) -> bool: ...

    async def keys(self, pattern: str) -> list[str]: ...

    async def delete(self, *keys: str) -> int: ...


class InMemoryCacheStore(CacheStore):
    """Process-local store. Expired entries are pruned once ``max_entries`` is exceeded."""

    def __init__(self, clock: Callable[[], float] = time.time, max_entries: int | None = None) -> None:
        self._clock = clock
        self._max_entries = max_entries
        self._items: dict[str, tuple[float, dict[str, Any]]] = {}

    async def get(self, key: str) -> dict[str, Any] | None:
        item = self._items.get(key)
        if not item:
            return None
        expires_at, value = item
        if expires_at <= self._clock():
            self._items.pop(key, None)
            return None
        return value

    async def set(self, key: str, value: dict[str, Any], ttl_seconds: int) -> None:
        self._items[key] = (self._clock() + ttl_seconds, value)
        if self._max_entries is not None and len(self._items) > self._max_entries:
            self._prune_expired()

    async def invalidate_prefix(self, prefix: str) -> int:
        keys = [key for key in self._items if key.startswith(prefix)]
        for key in keys:
            self._items.pop(key, None)
        return len(keys)

    def __len__(self) -> int:
        return len(self._items)

    def _prune_expired(self) -> None:
        now = self._clock()
        expired = [key for key, (expires_at, _) in self._items.items() if expires_at <= now]
        for key in expired:
            self._items.pop(key, None)


class RedisCacheStore(CacheStore):
    def __init__(self, client: RedisLikeCacheClient) -> None:
        self._client = client

    async def get(self, key: str) -> dict[str, Any] | None:
        raw = await self._client.get(key)
        if not raw:
            return None
        return json.loads(raw)

    async def set(self, key: str, value: dict[str, Any], ttl_seconds: int) -> None:
        payload = json.dumps(value, ensure_ascii=True)
        await self._client.setex(key, ttl_seconds, payload)

    async def invalidate_prefix(self, prefix: str) -> int:
        keys = await self._client.keys(f"{prefix}*")
        if not keys:
            return 0
        return await self._client.delete(*keys)


@dataclass
class WeatherCache:
    """Weather observations per grid cell.

    Entries are fresh for ``ttl_seconds`` and kept for ``stale_multiplier``
    times as long, so a failed upstream call can still fall back to them.
    """

    store: CacheStore
    ttl_seconds: int = 900
    stale_multiplier: int = 4
    clock: Callable[[], float] = field(default=time.time)

    @property
    def retention_seconds(self) -> int:
        return self.ttl_seconds * self.stale_multiplier

    async def get_fresh(self, key: str) -> WeatherObservation | None:
        return await self._read(key, max_age_seconds=self.ttl_seconds)

    async def get_stale(self, key: str) -> WeatherObservation | None:
        return await self._read(key, max_age_seconds=self.retention_seconds)

    async def set(self, key: str, observation: WeatherObservation) -> None:
        payload = {"cached_at": self.clock(), "observation": asdict(observation)}
        await self.store.set(key, payload, self.retention_seconds)

    async def clear(self) -> int:
        return await self.store.invalidate_prefix(WEATHER_KEY_PREFIX)

    async def _read(self, key: str, max_age_seconds: int) -> WeatherObservation | None:
        payload = await self.store.get(key)
        if payload is None:
            return None
        try:
            cached_at = float(payload["cached_at"])
            observation = WeatherObservation(**payload["observation"])
        except (KeyError, TypeError, ValueError):
            logger.warning("weather_cache_entry_invalid", extra={"component": "weather", "cache_key": key})
            return None
        if self.clock() - cached_at > max_age_seconds:
            return None
        return observation
