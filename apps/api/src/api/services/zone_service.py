from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta

from zone_engine.labels import score_label
from zone_engine.models import GeoPoint
from zone_engine.scoring import NEUTRAL_WEATHER_BOOST, calculate_score

from api.repositories.zone_repository import ZoneResolver
from api.schemas.zones import ZoneItem, ZoneListResult, ZoneScoreFactors, ZoneScoreResult
from api.services.weather_service import WeatherService

REFRESH_INTERVAL_MINUTES = 15


def _utc_now() -> datetime:
    return datetime.now(UTC)


def next_refresh_at(moment: datetime, interval_minutes: int = REFRESH_INTERVAL_MINUTES) -> datetime:
    """First interval boundary strictly after ``moment``."""
    floored = moment.replace(
        minute=(moment.minute // interval_minutes) * interval_minutes,
        second=0,
        microsecond=0,
    )
    return floored + timedelta(minutes=interval_minutes)


class ZoneService:
    def __init__(
        self,
        weather_service: WeatherService,
        resolver: ZoneResolver,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._weather_service = weather_service
        self._resolver = resolver
        self._clock = clock

    async def current_score(
        self,
        timezone: str = "UTC",
        lat: float | None = None,
        lng: float | None = None,
        timestamp: datetime | None = None,
    ) -> ZoneScoreResult:
        moment = timestamp or self._clock()
        weather_boost = NEUTRAL_WEATHER_BOOST
        weather_description = None
        if lat is not None and lng is not None:
            snapshot = await self._weather_service.get_weather_score(lat, lng)
            weather_boost = snapshot.score
            weather_description = snapshot.description

        result = calculate_score(moment, timezone, weather_boost)
        return ZoneScoreResult(
            score=result.score,
            label=score_label(result.score),
            factors=ZoneScoreFactors(**result.factors.as_dict()),
            calculated_at=moment,
            timezone=timezone,
            next_refresh=next_refresh_at(moment),
            weather_description=weather_description,
        )

    async def zones_near(
        self,
        lat: float,
        lng: float,
        timezone: str = "UTC",
        timestamp: datetime | None = None,
    ) -> ZoneListResult:
        current = await self.current_score(timezone=timezone, lat=lat, lng=lng, timestamp=timestamp)
        zones = await self._resolver.zones_near(GeoPoint(lat=lat, lng=lng))
        return ZoneListResult(
            items=[
                ZoneItem(
                    zone_id=zone_id,
                    lat=point.lat,
                    lng=point.lng,
                    score=current.score,
                    label=current.label,
                )
                for zone_id, point in zones
            ],
            current_score=current,
        )
