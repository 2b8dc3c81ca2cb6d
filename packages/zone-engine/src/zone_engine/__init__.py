"""Zone demand scoring core package."""

from zone_engine.labels import score_label
from zone_engine.meal_windows import MEAL_WINDOWS, MealSegment, MealWindow, build_segments, interpolate, meal_time_score
from zone_engine.models import (
    NEUTRAL_WEATHER,
    GeoPoint,
    ScoreFactors,
    ScoreResult,
    TimeContext,
    WeatherObservation,
    WeatherSnapshot,
)
from zone_engine.scoring import NEUTRAL_WEATHER_BOOST, calculate_score, peak_hour_score, weekend_score
from zone_engine.time_context import build_time_context, try_localize
from zone_engine.weather import calculate_weather_severity, weather_cell_key

__all__ = [
    "GeoPoint",
    "MEAL_WINDOWS",
    "MealSegment",
    "MealWindow",
    "NEUTRAL_WEATHER",
    "NEUTRAL_WEATHER_BOOST",
    "ScoreFactors",
    "ScoreResult",
    "TimeContext",
    "WeatherObservation",
    "WeatherSnapshot",
    "build_segments",
    "build_time_context",
    "calculate_score",
    "calculate_weather_severity",
    "interpolate",
    "meal_time_score",
    "peak_hour_score",
    "score_label",
    "try_localize",
    "weather_cell_key",
    "weekend_score",
]
