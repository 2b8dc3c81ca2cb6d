from datetime import datetime

from pydantic import BaseModel


class ZoneScoreFactors(BaseModel):
    mealTimeBoost: int
    peakHourBoost: int
    weekendBoost: int
    weatherBoost: int
    baseScore: int


class ZoneScoreResult(BaseModel):
    score: int
    label: str
    factors: ZoneScoreFactors
    calculated_at: datetime
    timezone: str
    next_refresh: datetime
    weather_description: str | None = None


class ZoneItem(BaseModel):
    zone_id: str
    lat: float
    lng: float
    score: int
    label: str


class ZoneListResult(BaseModel):
    items: list[ZoneItem]
    current_score: ZoneScoreResult
