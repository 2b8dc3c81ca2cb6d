"""Meal-time demand curve.

Meal windows compile into an ordered table of segments covering ``[0, 24)``.
Every segment is evaluated by the same clamped-linear :func:`interpolate`, so a
plateau is simply a segment whose two ends carry the same score. Smoothed
windows spend their first and last half hour ramping from/to whatever their
neighbour presents at that edge: a flat adjacent window's score, otherwise the
off-peak score. The resulting weekday curve has no jumps at window boundaries.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

OFF_PEAK_SCORE = 20
TRANSITION_HOURS = 0.5


@dataclass(frozen=True)
class MealWindow:
    name: str
    start: float
    end: float
    score: int
    smoothed: bool = True
    weekend_multiplier_pct: int = 100


@dataclass(frozen=True)
class MealSegment:
    start: float
    end: float
    from_score: int
    to_score: int
    window: MealWindow | None = None

    def contains(self, hour: float) -> bool:
        return self.start <= hour < self.end


MEAL_WINDOWS: tuple[MealWindow, ...] = (
    MealWindow("breakfast", 7.0, 10.0, 40, weekend_multiplier_pct=110),
    MealWindow("lunch", 11.0, 14.0, 80),
    MealWindow("dinner", 17.0, 21.0, 100, weekend_multiplier_pct=120),
    MealWindow("late_night", 21.0, 24.0, 50, smoothed=False),
)


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def interpolate(hour: float, start: float, end: float, from_score: float, to_score: float) -> int:
    progress = (hour - start) / (end - start)
    clamped = max(0.0, min(1.0, progress))
    return round_half_up(from_score + (to_score - from_score) * clamped)


def _edge_score(windows: tuple[MealWindow, ...], hour: float, off_peak: int) -> int:
    for window in windows:
        if not window.smoothed and (window.start == hour or window.end == hour):
            return window.score
    return off_peak


def build_segments(
    windows: tuple[MealWindow, ...] = MEAL_WINDOWS,
    off_peak: int = OFF_PEAK_SCORE,
    transition_hours: float = TRANSITION_HOURS,
) -> tuple[MealSegment, ...]:
    segments: list[MealSegment] = []
    for window in windows:
        if not window.smoothed:
            segments.append(MealSegment(window.start, window.end, window.score, window.score, window))
            continue
        entry_end = window.start + transition_hours
        exit_start = window.end - transition_hours
        segments.append(
            MealSegment(window.start, entry_end, _edge_score(windows, window.start, off_peak), window.score, window)
        )
        segments.append(MealSegment(entry_end, exit_start, window.score, window.score, window))
        segments.append(
            MealSegment(exit_start, window.end, window.score, _edge_score(windows, window.end, off_peak), window)
        )
    segments.sort(key=lambda segment: segment.start)

    filled: list[MealSegment] = []
    cursor = 0.0
    for segment in segments:
        if segment.start > cursor:
            filled.append(MealSegment(cursor, segment.start, off_peak, off_peak))
        filled.append(segment)
        cursor = segment.end
    if cursor < 24.0:
        filled.append(MealSegment(cursor, 24.0, off_peak, off_peak))
    return tuple(filled)


MEAL_SEGMENTS = build_segments()


def segment_at(hour: float, segments: tuple[MealSegment, ...] = MEAL_SEGMENTS) -> MealSegment:
    for segment in segments:
        if segment.contains(hour):
            return segment
    # hour is expected in [0, 24); anything else reads as the last segment
    return segments[-1]


def meal_time_score(hour: float, is_weekend: bool = False) -> int:
    segment = segment_at(hour)
    value = interpolate(hour, segment.start, segment.end, segment.from_score, segment.to_score)
    window = segment.window
    if is_weekend and window is not None and window.weekend_multiplier_pct != 100:
        return min(100, round_half_up(value * window.weekend_multiplier_pct / 100))
    return value
