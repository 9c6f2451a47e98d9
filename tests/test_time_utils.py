"""
Tests for the time primitives and calendar-day helpers.

- Minute-of-day extraction
- Step snapping (nearest, down, up)
- Calendar-day comparison and labels
"""

import pytest
from datetime import datetime
import sys
import os

# Add parent directory to path to import modules
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from dayview import (
    MINUTES_PER_STEP,
    minutes_since_start_of_day,
    snap_to_step,
    snap_down,
    snap_up,
    is_same_day,
    is_same_month,
    start_of_day,
    end_of_day,
    get_month_year,
    get_day_with_date
)


class TestMinutesSinceStartOfDay:
    """Test minute-of-day extraction."""

    def test_minutes(self):
        """Test 10:30 is 630 minutes into the day."""
        assert minutes_since_start_of_day(datetime(2023, 10, 27, 10, 30)) == 630

    def test_midnight(self):
        """Test midnight is minute 0."""
        assert minutes_since_start_of_day(datetime(2023, 10, 27, 0, 0)) == 0

    def test_seconds_are_fractional_minutes(self):
        """Test seconds contribute a fraction of a minute."""
        assert minutes_since_start_of_day(datetime(2023, 10, 27, 10, 30, 30)) == pytest.approx(630.5)

    def test_last_minute_of_day(self):
        """Test 23:59 is just under a full day."""
        assert minutes_since_start_of_day(datetime(2023, 10, 27, 23, 59)) == 1439


class TestSnapping:
    """Test snapping values onto the step grid."""

    def test_snap_to_nearest_default_step(self):
        """Test snapping to the nearest multiple of the default step."""
        assert MINUTES_PER_STEP == 5
        assert snap_to_step(3) == 5
        assert snap_to_step(2) == 0
        assert snap_to_step(5) == 5
        assert snap_to_step(7) == 5

    def test_snap_to_nearest_custom_step(self):
        """Test snapping with an explicit step."""
        assert snap_to_step(12, 5) == 10
        assert snap_to_step(13, 5) == 15
        assert snap_to_step(12, 10) == 10
        assert snap_to_step(18, 10) == 20

    def test_half_rounds_up(self):
        """Test exact halves round up rather than to even."""
        assert snap_to_step(12.5, 5) == 15
        assert snap_to_step(7.5, 5) == 10

    def test_snap_down(self):
        """Test flooring to the step grid."""
        assert snap_down(12, 5) == 10
        assert snap_down(10, 5) == 10
        assert snap_down(14.9, 5) == 10

    def test_snap_up(self):
        """Test ceiling to the step grid."""
        assert snap_up(12, 5) == 15
        assert snap_up(10, 5) == 10
        assert snap_up(10.1, 5) == 15

    def test_snap_down_negative(self):
        """Test flooring goes away from zero for negative values."""
        assert snap_down(-20, 5) == -20
        assert snap_down(-22, 5) == -25


class TestCalendarDays:
    """Test calendar-day comparison and labels."""

    def test_same_day(self):
        """Test two times on the same date are the same day."""
        assert is_same_day(datetime(2023, 10, 27, 10, 0), datetime(2023, 10, 27, 15, 30))

    def test_different_day(self):
        """Test adjacent dates are different days."""
        assert not is_same_day(datetime(2023, 10, 27), datetime(2023, 10, 28))

    def test_different_month_same_day_number(self):
        """Test the same day number in another month is a different day."""
        assert not is_same_day(datetime(2023, 10, 27), datetime(2023, 11, 27))

    def test_different_year(self):
        """Test the same date in another year is a different day."""
        assert not is_same_day(datetime(2023, 10, 27), datetime(2024, 10, 27))

    def test_calendar_day_not_24_hours(self):
        """Test times a minute apart across midnight are different days."""
        assert not is_same_day(datetime(2023, 10, 27, 23, 59), datetime(2023, 10, 28, 0, 0))

    def test_same_month(self):
        """Test first and last of a month are the same month."""
        assert is_same_month(datetime(2023, 10, 1), datetime(2023, 10, 31))
        assert not is_same_month(datetime(2023, 10, 1), datetime(2023, 11, 1))
        assert not is_same_month(datetime(2023, 10, 1), datetime(2024, 10, 1))

    def test_start_and_end_of_day(self):
        """Test the inclusive bounds of a day."""
        day = datetime(2023, 10, 27, 14, 45)
        assert start_of_day(day) == datetime(2023, 10, 27, 0, 0, 0)
        assert end_of_day(day) == datetime(2023, 10, 27, 23, 59, 59, 999000)

    def test_month_year_label(self):
        """Test the month header label."""
        assert get_month_year(datetime(2023, 10, 27)) == "October 2023"

    def test_day_with_date_label(self):
        """Test the day column label."""
        assert get_day_with_date(datetime(2023, 10, 27)) == "Friday 27"
