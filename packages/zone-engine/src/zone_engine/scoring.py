from __future__ import annotations

import math
from datetime import datetime

from zone_engine.meal_windows import meal_time_score, round_half_up
from zone_engine.models import ScoreFactors, ScoreResult
from zone_engine.time_context import build_time_context

NEUTRAL_WEATHER_BOOST = 20
BASE_SCORE = 50

# percentages, summing to 100
WEIGHTS = {
    "meal_time": 25,
    "peak_hour": 25,
    "weekend": 15,
    "weather": 15,
    "base": 20,
}


def peak_hour_score(hour: float) -> int:
    int_hour = math.floor(hour)
    if 11 <= int_hour < 14:
        return 90
    if 17 <= int_hour < 21:
        return 100
    if 7 <= int_hour < 10:
        return 70
    if 21 <= int_hour < 23:
        return 50
    if int_hour >= 23 or int_hour < 6:
        return 10
    return 40


def weekend_score(day_of_week: int) -> int:
    if day_of_week == 0:
        return 80
    if day_of_week == 5:
        return 70
    if day_of_week == 6:
        return 90
    return 50


def weighted_score(factors: ScoreFactors) -> int:
    total = (
        factors.meal_time_boost * WEIGHTS["meal_time"]
        + factors.peak_hour_boost * WEIGHTS["peak_hour"]
        + factors.weekend_boost * WEIGHTS["weekend"]
        + factors.weather_boost * WEIGHTS["weather"]
        + factors.base_score * WEIGHTS["base"]
    ) / 100
    return round_half_up(max(0.0, min(100.0, total)))


def calculate_score(
    timestamp: datetime,
    timezone: str = "UTC",
    weather_boost: int = NEUTRAL_WEATHER_BOOST,
) -> ScoreResult:
    """Score how good ``timestamp`` is for delivery work in ``timezone``.

    Unknown timezones are read as UTC. The result only depends on the
    arguments; no clock is consulted.
    """
    context = build_time_context(timestamp, timezone)
    factors = ScoreFactors(
        meal_time_boost=meal_time_score(context.local_hour, context.is_weekend),
        peak_hour_boost=peak_hour_score(context.local_hour),
        weekend_boost=weekend_score(context.day_of_week),
        weather_boost=weather_boost,
        base_score=BASE_SCORE,
    )
    return ScoreResult(score=weighted_score(factors), factors=factors)
