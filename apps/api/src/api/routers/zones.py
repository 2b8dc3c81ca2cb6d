from __future__ import annotations

from datetime import datetime

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_zone_service
from api.errors import ApiError
from api.response import success_response
from api.services.zone_service import ZoneService

router = APIRouter(prefix="/v1/zones", tags=["zones"])


@router.get("/score")
async def current_score(
    timezone: str = Query(default="UTC", min_length=1, max_length=64),
    lat: float | None = Query(default=None, ge=-90, le=90),
    lng: float | None = Query(default=None, ge=-180, le=180),
    timestamp: datetime | None = None,
    service: ZoneService = Depends(get_zone_service),
) -> dict:
    if (lat is None) != (lng is None):
        raise ApiError("VALIDATION_ERROR", "lat and lng must be provided together", 422)
    result = await service.current_score(timezone=timezone, lat=lat, lng=lng, timestamp=timestamp)
    return success_response(result.model_dump(mode="json"), meta={})


@router.get("")
async def zones_near(
    lat: float = Query(..., ge=-90, le=90),
    lng: float = Query(..., ge=-180, le=180),
    timezone: str = Query(default="UTC", min_length=1, max_length=64),
    service: ZoneService = Depends(get_zone_service),
) -> dict:
    result = await service.zones_near(lat=lat, lng=lng, timezone=timezone)
    return success_response(
        result.model_dump(mode="json"),
        meta={"center": {"lat": lat, "lng": lng}, "total_zones": len(result.items)},
    )
