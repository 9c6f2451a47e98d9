"""Time arithmetic primitives and calendar-day helpers for the day view."""

import math
from datetime import datetime, time

MINUTES_PER_STEP = 5
PIXELS_PER_STEP = 25
DAY_START = 0
DAY_END = 24 * 60
WINDOW_PADDING_MINUTES = 30


def minutes_since_start_of_day(instant: datetime) -> float:
    """Minutes elapsed since local midnight of the instant's own day."""
    return instant.hour * 60 + instant.minute + instant.second / 60


def snap_to_step(value: float, step: int = MINUTES_PER_STEP) -> int:
    """
    Round a value to the nearest multiple of step, halves rounding up.

    snap_to_step(12, 5) == 10, snap_to_step(13, 5) == 15, snap_to_step(12.5, 5) == 15
    """
    return int(math.floor(value / step + 0.5)) * step


def snap_down(value: float, step: int = MINUTES_PER_STEP) -> int:
    return int(math.floor(value / step)) * step


def snap_up(value: float, step: int = MINUTES_PER_STEP) -> int:
    return int(math.ceil(value / step)) * step


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(value, high))


def is_same_day(a: datetime, b: datetime) -> bool:
    return a.year == b.year and a.month == b.month and a.day == b.day


def is_same_month(a: datetime, b: datetime) -> bool:
    return a.year == b.year and a.month == b.month


def start_of_day(day: datetime) -> datetime:
    return datetime.combine(day.date(), time.min, tzinfo=day.tzinfo)


def end_of_day(day: datetime) -> datetime:
    """Last representable millisecond of the day (23:59:59.999)."""
    return datetime.combine(day.date(), time(23, 59, 59, 999000), tzinfo=day.tzinfo)


def get_month_year(day: datetime) -> str:
    """Header label, e.g. 'October 2023'."""
    return day.strftime('%B %Y')


def get_day_with_date(day: datetime) -> str:
    """Column label, e.g. 'Friday 27'."""
    return f"{day.strftime('%A')} {day.day}"
