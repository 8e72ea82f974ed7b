"""Tests for local time derivation."""

from datetime import UTC, datetime, timedelta, timezone

import pytest

from weathersphere.services.local_clock import (
    derive_local_time,
    format_local_date,
    format_local_time,
    utc_offset_label,
)

PLUS_TWO = timezone(timedelta(hours=2))


class TestDeriveLocalTime:
    """Tests for derive_local_time."""

    def test_shows_target_zone_not_viewer_zone(self):
        """Test a UTC location viewed from UTC+2 at 12:00 local shows 10:00."""
        now = datetime(2026, 10, 18, 12, 0, 0, tzinfo=PLUS_TWO)
        assert format_local_time(0, now) == "10:00"

    def test_independent_of_viewer_zone(self):
        """Test the same instant gives the same answer from any zone."""
        instant = datetime(2026, 10, 18, 10, 0, 0, tzinfo=UTC)
        for hours in (-8, 0, 2, 9):
            viewer = instant.astimezone(timezone(timedelta(hours=hours)))
            assert derive_local_time(19800, viewer) == datetime(2026, 10, 18, 15, 30)

    def test_negative_offset_crosses_midnight(self):
        """Test offsets west of UTC roll back to the previous day."""
        now = datetime(2026, 10, 18, 2, 0, tzinfo=UTC)
        assert derive_local_time(-5 * 3600, now) == datetime(2026, 10, 17, 21, 0)

    def test_result_is_naive(self):
        """Test the derived wall time carries no zone."""
        now = datetime(2026, 10, 18, 12, 0, tzinfo=UTC)
        assert derive_local_time(3600, now).tzinfo is None

    def test_defaults_to_current_time(self):
        """Test omitting now uses the real clock."""
        before = datetime.now(UTC).replace(tzinfo=None)
        derived = derive_local_time(0)
        after = datetime.now(UTC).replace(tzinfo=None)
        assert before <= derived <= after


class TestFormatting:
    """Tests for display formatting."""

    @pytest.mark.parametrize(
        "offset,expected",
        [(0, "12:34"), (3600, "13:34"), (-3600, "11:34"), (12 * 3600, "00:34")],
    )
    def test_time_is_24_hour_minute_resolution(self, offset, expected):
        """Test HH:MM output with seconds dropped."""
        now = datetime(2026, 10, 18, 12, 34, 56, tzinfo=UTC)
        assert format_local_time(offset, now) == expected

    def test_date(self):
        """Test the long date format."""
        now = datetime(2026, 10, 18, 12, 0, tzinfo=UTC)
        assert format_local_date(0, now) == "Sunday, October 18, 2026"

    def test_date_follows_target_zone(self):
        """Test the date rolls over with the target offset."""
        now = datetime(2026, 10, 18, 23, 30, tzinfo=UTC)
        assert format_local_date(3600, now) == "Monday, October 19, 2026"

    @pytest.mark.parametrize(
        "offset,expected",
        [(0, "UTC+00:00"), (19800, "UTC+05:30"), (-18000, "UTC-05:00"), (-12600, "UTC-03:30")],
    )
    def test_offset_label(self, offset, expected):
        assert utc_offset_label(offset) == expected
