from __future__ import annotations

from datetime import datetime, timezone

import pytest
from zone_engine.models import WeatherSnapshot

from api.repositories.zone_repository import GridZoneResolver
from api.services.zone_service import ZoneService, next_refresh_at


class StubWeatherService:
    def __init__(self, snapshot: WeatherSnapshot) -> None:
        self._snapshot = snapshot
        self.calls: list[tuple[float, float]] = []

    async def get_weather_score(self, lat: float, lng: float) -> WeatherSnapshot:
        self.calls.append((lat, lng))
        return self._snapshot


TUESDAY_DINNER = datetime(2026, 1, 6, 19, 0, tzinfo=timezone.utc)


def build_service(weather: StubWeatherService, radius: int = 1) -> ZoneService:
    return ZoneService(
        weather_service=weather,
        resolver=GridZoneResolver(radius=radius),
        clock=lambda: TUESDAY_DINNER,
    )


@pytest.mark.asyncio
async def test_current_score_without_location_uses_neutral_weather() -> None:
    weather = StubWeatherService(WeatherSnapshot(score=90, description="snow"))
    service = build_service(weather)

    result = await service.current_score(timezone="UTC")

    assert weather.calls == []
    assert result.factors.weatherBoost == 20
    assert result.score == 71
    assert result.label == "Busy"
    assert result.weather_description is None
    assert result.calculated_at == TUESDAY_DINNER


@pytest.mark.asyncio
async def test_current_score_with_location_blends_weather() -> None:
    weather = StubWeatherService(WeatherSnapshot(score=90, description="snow"))
    service = build_service(weather)

    result = await service.current_score(timezone="UTC", lat=39.74, lng=-104.99)

    assert weather.calls == [(39.74, -104.99)]
    assert result.factors.weatherBoost == 90
    # 70.5 + 0.15 * 70
    assert result.score == 81
    assert result.label == "Hot"
    assert result.weather_description == "snow"


@pytest.mark.asyncio
async def test_zones_near_attaches_score_to_every_cell() -> None:
    weather = StubWeatherService(WeatherSnapshot(score=20, description="clear sky"))
    service = build_service(weather, radius=1)

    result = await service.zones_near(lat=30.27, lng=-97.74, timezone="UTC")

    assert len(result.items) == 9
    assert len({item.zone_id for item in result.items}) == 9
    assert all(item.score == result.current_score.score for item in result.items)
    assert "cell:30.2700:-97.7400" in {item.zone_id for item in result.items}


def test_next_refresh_is_next_quarter_hour() -> None:
    assert next_refresh_at(datetime(2026, 1, 6, 19, 7, 30, tzinfo=timezone.utc)) == datetime(
        2026, 1, 6, 19, 15, tzinfo=timezone.utc
    )
    assert next_refresh_at(datetime(2026, 1, 6, 19, 15, tzinfo=timezone.utc)) == datetime(
        2026, 1, 6, 19, 30, tzinfo=timezone.utc
    )
    assert next_refresh_at(datetime(2026, 1, 6, 23, 50, tzinfo=timezone.utc)) == datetime(
        2026, 1, 7, 0, 0, tzinfo=timezone.utc
    )


def test_grid_resolver_rejects_negative_radius() -> None:
    with pytest.raises(ValueError):
        GridZoneResolver(radius=-1)
