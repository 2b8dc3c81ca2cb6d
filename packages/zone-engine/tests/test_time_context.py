from datetime import datetime, timezone

import pytest

from zone_engine.time_context import build_time_context, try_localize


def test_try_localize_converts_to_wall_clock() -> None:
    instant = datetime(2026, 7, 1, 12, 0, tzinfo=timezone.utc)

    local = try_localize(instant, "America/Los_Angeles")

    assert local is not None
    assert (local.hour, local.minute) == (5, 0)


@pytest.mark.parametrize("name", ["Not/AZone", "../etc/passwd", "Mars/Olympus_Mons"])
def test_try_localize_rejects_unknown_zone(name: str) -> None:
    instant = datetime(2026, 7, 1, 12, 0, tzinfo=timezone.utc)

    assert try_localize(instant, name) is None


def test_unknown_zone_falls_back_to_utc_components() -> None:
    instant = datetime(2026, 1, 6, 19, 45, tzinfo=timezone.utc)

    context = build_time_context(instant, "Not/AZone")

    assert context.localized is False
    assert context.local_hour == 19.75
    assert context.day_of_week == 2
    assert context.is_weekend is False


def test_naive_instant_is_read_as_utc() -> None:
    naive = datetime(2026, 1, 6, 19, 45)
    aware = naive.replace(tzinfo=timezone.utc)

    assert build_time_context(naive, "Asia/Tokyo") == build_time_context(aware, "Asia/Tokyo")


def test_local_date_decides_the_weekend() -> None:
    # Friday evening in Los Angeles is already Saturday in UTC
    instant = datetime(2026, 1, 10, 3, 0, tzinfo=timezone.utc)

    utc_context = build_time_context(instant, "UTC")
    la_context = build_time_context(instant, "America/Los_Angeles")

    assert utc_context.day_of_week == 6
    assert utc_context.is_weekend is True
    assert la_context.day_of_week == 5
    assert la_context.is_weekend is False
    assert la_context.local_hour == 19.0


def test_seconds_are_ignored_for_the_fractional_hour() -> None:
    instant = datetime(2026, 1, 6, 11, 15, 59, tzinfo=timezone.utc)

    assert build_time_context(instant, "UTC").local_hour == 11.25
