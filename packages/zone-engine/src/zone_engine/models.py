from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GeoPoint:
    lat: float
    lng: float


@dataclass(frozen=True)
class ScoreFactors:
    meal_time_boost: int
    peak_hour_boost: int
    weekend_boost: int
    weather_boost: int
    base_score: int

    def as_dict(self) -> dict[str, int]:
        return {
            "mealTimeBoost": self.meal_time_boost,
            "peakHourBoost": self.peak_hour_boost,
            "weekendBoost": self.weekend_boost,
            "weatherBoost": self.weather_boost,
            "baseScore": self.base_score,
        }


@dataclass(frozen=True)
class ScoreResult:
    score: int
    factors: ScoreFactors


@dataclass(frozen=True)
class TimeContext:
    local_hour: float
    day_of_week: int  # 0 = Sunday
    is_weekend: bool
    localized: bool = True


@dataclass(frozen=True)
class WeatherObservation:
    condition_code: int
    temperature_f: float
    description: str
    city_name: str


@dataclass(frozen=True)
class WeatherSnapshot:
    score: int
    description: str


NEUTRAL_WEATHER = WeatherSnapshot(score=20, description="Weather unavailable")
