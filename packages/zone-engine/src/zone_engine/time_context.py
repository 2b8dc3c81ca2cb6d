from __future__ import annotations

from datetime import datetime, timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from zone_engine.models import TimeContext


def _as_utc(instant: datetime) -> datetime:
    if instant.tzinfo is None:
        return instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(timezone.utc)


def try_localize(instant: datetime, timezone_name: str) -> datetime | None:
    """Return ``instant`` as wall-clock time in ``timezone_name``, or None for unknown zones."""
    try:
        zone = ZoneInfo(timezone_name)
    except (ZoneInfoNotFoundError, ValueError, OSError):
        return None
    return _as_utc(instant).astimezone(zone)


def build_time_context(instant: datetime, timezone_name: str) -> TimeContext:
    local = try_localize(instant, timezone_name)
    localized = local is not None
    if local is None:
        local = _as_utc(instant)
    # datetime.weekday() is Monday-based
    day_of_week = (local.weekday() + 1) % 7
    return TimeContext(
        local_hour=local.hour + local.minute / 60,
        day_of_week=day_of_week,
        is_weekend=day_of_week in (0, 6),
        localized=localized,
    )
