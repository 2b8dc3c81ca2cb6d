from __future__ import annotations

import math
from dataclasses import dataclass

from zone_engine.models import WeatherObservation

BASELINE_SEVERITY = 20
EXTREME_COLD_F = 32.0
EXTREME_HEAT_F = 95.0
EXTREME_TEMPERATURE_BOOST = 20


@dataclass(frozen=True)
class ConditionBand:
    name: str
    min_code: int
    max_code: int
    score: int

    def matches(self, code: int) -> bool:
        return self.min_code <= code <= self.max_code


# OpenWeather condition groups, most severe first
CONDITION_BANDS: tuple[ConditionBand, ...] = (
    ConditionBand("snow", 600, 622, 70),
    ConditionBand("thunderstorm", 200, 232, 60),
    ConditionBand("rain", 500, 531, 50),
    ConditionBand("drizzle", 300, 321, 35),
    ConditionBand("atmosphere", 700, 781, 25),
)


def condition_severity(condition_code: int) -> int:
    for band in CONDITION_BANDS:
        if band.matches(condition_code):
            return band.score
    return BASELINE_SEVERITY


def calculate_weather_severity(observation: WeatherObservation) -> int:
    score = condition_severity(observation.condition_code)
    if observation.temperature_f < EXTREME_COLD_F or observation.temperature_f > EXTREME_HEAT_F:
        score = min(100, score + EXTREME_TEMPERATURE_BOOST)
    return score


def _round_one_decimal(value: float) -> float:
    scaled = abs(value) * 10
    rounded = math.floor(scaled + 0.5) / 10
    return math.copysign(rounded, value) if rounded else 0.0


def weather_cell_key(lat: float, lng: float) -> str:
    return f"weather:{_round_one_decimal(lat):.1f}:{_round_one_decimal(lng):.1f}"
