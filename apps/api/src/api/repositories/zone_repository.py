from __future__ import annotations

from typing import Protocol

from zone_engine.models import GeoPoint


class ZoneResolver(Protocol):
    async def zones_near(self, center: GeoPoint) -> list[tuple[str, GeoPoint]]: ...


class GridZoneResolver:
    """Square grid of cells around the center, ``step_degrees`` apart (~1 km at 0.01)."""

    def __init__(self, radius: int = 3, step_degrees: float = 0.01) -> None:
        if radius < 0:
            raise ValueError("radius must be >= 0")
        self._radius = radius
        self._step_degrees = step_degrees

    async def zones_near(self, center: GeoPoint) -> list[tuple[str, GeoPoint]]:
        zones: list[tuple[str, GeoPoint]] = []
        for row in range(-self._radius, self._radius + 1):
            for col in range(-self._radius, self._radius + 1):
                point = GeoPoint(
                    lat=round(center.lat + row * self._step_degrees, 4),
                    lng=round(center.lng + col * self._step_degrees, 4),
                )
                zones.append((f"cell:{point.lat:.4f}:{point.lng:.4f}", point))
        return zones
