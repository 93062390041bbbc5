"""Unit tests for calendar helpers."""
import pytest
from datetime import date, datetime, timedelta, timezone
from zoneinfo import ZoneInfo

from backend.core.calendar import (
    in_window,
    instant,
    local_date,
    localize,
    on_or_after,
    week_bounds,
    week_start,
    window_start,
)
from tests.fakes import NOW


@pytest.mark.unit
class TestLocalDate:

    def test_converts_aware_moment_to_zone(self):
        moment = datetime(2024, 1, 17, 3, 0, tzinfo=timezone.utc)
        assert local_date(moment, ZoneInfo("America/New_York")) == date(2024, 1, 16)

    def test_without_zone_uses_moment_as_given(self):
        moment = datetime(2024, 1, 17, 23, 30, tzinfo=timezone(timedelta(hours=-5)))
        assert local_date(moment) == date(2024, 1, 17)

    def test_naive_moment_taken_as_local(self):
        assert local_date(datetime(2024, 1, 17, 23, 30), timezone.utc) == date(2024, 1, 17)


@pytest.mark.unit
class TestWeekBounds:

    @pytest.mark.parametrize("day,monday", [
        (date(2024, 1, 15), date(2024, 1, 15)),
        (date(2024, 1, 17), date(2024, 1, 15)),
        (date(2024, 1, 21), date(2024, 1, 15)),
        (date(2024, 1, 22), date(2024, 1, 22)),
    ])
    def test_week_start_is_monday(self, day, monday):
        assert week_start(day) == monday

    def test_bounds_are_monday_to_next_monday(self):
        start, end = week_bounds(NOW)
        assert start == datetime(2024, 1, 15, tzinfo=timezone.utc)
        assert end == datetime(2024, 1, 22, tzinfo=timezone.utc)

    def test_bounds_carry_now_zone(self):
        tz = ZoneInfo("Asia/Tokyo")
        start, end = week_bounds(datetime(2024, 1, 21, 23, 59, tzinfo=tz))
        assert start.tzinfo is tz
        assert start == datetime(2024, 1, 15, tzinfo=tz)

    def test_window_is_half_open(self):
        start, end = week_bounds(NOW)
        assert in_window(start, start, end)
        assert in_window(end - timedelta(microseconds=1), start, end)
        assert not in_window(end, start, end)


@pytest.mark.unit
def test_window_start_subtracts_days():
    assert window_start(NOW, 7) == NOW - timedelta(days=7)


@pytest.mark.unit
class TestMixedAwareness:
    """Naive moments are read as local to the reference zone."""

    def test_localize_attaches_zone_to_naive(self):
        tz = ZoneInfo("Europe/Berlin")
        assert localize(datetime(2024, 1, 17, 9, 0), tz) == datetime(2024, 1, 17, 9, 0, tzinfo=tz)

    def test_localize_converts_aware(self):
        tz = ZoneInfo("America/New_York")
        moment = datetime(2024, 1, 17, 3, 0, tzinfo=timezone.utc)
        assert localize(moment, tz).date() == date(2024, 1, 16)

    def test_localize_to_naive_reference_keeps_wall_time(self):
        moment = datetime(2024, 1, 17, 9, 0, tzinfo=timezone(timedelta(hours=2)))
        assert localize(moment, None) == datetime(2024, 1, 17, 9, 0)

    def test_local_date_of_naive_moment_with_zone(self):
        assert local_date(datetime(2024, 1, 17, 23, 30), ZoneInfo("Asia/Tokyo")) == date(2024, 1, 17)

    def test_in_window_naive_moment_aware_bounds(self):
        start, end = week_bounds(NOW)
        assert in_window(datetime(2024, 1, 16, 10, 0), start, end)
        assert not in_window(datetime(2024, 1, 14, 23, 0), start, end)

    def test_in_window_aware_moment_naive_bounds(self):
        start, end = week_bounds(datetime(2024, 1, 17, 18, 0))
        assert in_window(datetime(2024, 1, 15, 0, 30, tzinfo=timezone.utc), start, end)

    def test_on_or_after_mixed(self):
        since = window_start(NOW, 7)
        assert on_or_after(datetime(2024, 1, 12, 0, 0), since)
        assert not on_or_after(datetime(2024, 1, 10, 0, 0), since)

    def test_instant_reads_naive_as_utc(self):
        assert instant(datetime(2024, 1, 17, 9, 0)) == datetime(2024, 1, 17, 9, 0, tzinfo=timezone.utc)
