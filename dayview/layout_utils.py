"""Layout functions for rendering a single day column of a calendar."""

import logging
import math
from collections.abc import Mapping
from datetime import datetime, time, timedelta
from typing import Any, Optional

import pydantic

from .config import DEFAULT_GRID, GridSettings
from .time_utils import (
    DAY_END,
    DAY_START,
    clamp,
    end_of_day,
    is_same_day,
    minutes_since_start_of_day,
    start_of_day,
)

logger = logging.getLogger(__name__)

# Used when padding collapses the window, e.g. an event ending before it starts
FALLBACK_LEAD_MINUTES = 60
FALLBACK_SPAN_MINUTES = 120


class Appointment(pydantic.BaseModel):
    start: datetime
    end: datetime


class Task(pydantic.BaseModel):
    due: datetime


class DayWindow(pydantic.BaseModel):
    window_start: int
    window_end: int

    @pydantic.model_validator(mode='after')
    def validate_bounds(self) -> 'DayWindow':
        if self.window_start < DAY_START or self.window_end > DAY_END:
            raise ValueError('window must lie within the day')
        if self.window_end <= self.window_start:
            raise ValueError('window_end must be after window_start')
        return self


class PositionResult(pydantic.BaseModel):
    top_px: float
    height_px: float


class LayoutResult(pydantic.BaseModel):
    event: Any
    column_index: int
    columns_count: int
    top_px: float
    height_px: float


class DayView(pydantic.BaseModel):
    day: datetime
    window: DayWindow
    total_height_px: float
    all_day_events: list[Any]
    timed_events: list[LayoutResult]
    now_top_px: Optional[float] = None


def _field(item: Any, name: str) -> Optional[datetime]:
    """Read a timestamp from a dict-like record or an object attribute."""
    if isinstance(item, Mapping):
        return item.get(name)
    return getattr(item, name, None)


def _ends_at_next_midnight(start: datetime, end: datetime) -> bool:
    return end.time() == time.min and end.date() > start.date()


def _window_end_minutes(event: Any) -> float:
    # A raw end of 0 means the event runs to the end of the day
    end_min = minutes_since_start_of_day(_field(event, 'end'))
    return DAY_END if end_min == 0 else end_min


def get_day_window(events: list, grid: Optional[GridSettings] = None) -> DayWindow:
    """
    Compute the visible minute range for a day column.

    The range covers the earliest start and latest end of the events, padded
    on both sides, rounded outward to whole minutes, then clamped to the day.
    A window shorter than one step is stretched to a full step. An empty day
    renders in full.

    Args:
        events: Time-bounded records with start and end
        grid: Grid resolution, defaults to DEFAULT_GRID

    Returns:
        A window with 0 <= window_start < window_end <= 1440
    """
    grid = grid or DEFAULT_GRID
    if not events:
        return DayWindow(window_start=DAY_START, window_end=DAY_END)

    padding = grid.window_padding_minutes
    min_start = min(minutes_since_start_of_day(_field(e, 'start')) for e in events)
    max_end = max(_window_end_minutes(e) for e in events)

    window_start = int(clamp(math.floor(min_start - padding), DAY_START, DAY_END))
    window_end = int(clamp(math.ceil(max_end + padding), DAY_START, DAY_END))

    if window_end <= window_start:
        logger.debug(
            'Padded window collapsed (%s >= %s); using fallback window',
            window_start, window_end,
        )
        window_start = math.floor(max(DAY_START, min_start - FALLBACK_LEAD_MINUTES))
        window_start = min(window_start, DAY_END - FALLBACK_SPAN_MINUTES)
        window_end = window_start + FALLBACK_SPAN_MINUTES

    # The minimum-height sliver must fit inside the window
    if window_end - window_start < grid.minutes_per_step:
        window_end = min(window_start + grid.minutes_per_step, DAY_END)
        window_start = max(DAY_START, window_end - grid.minutes_per_step)

    return DayWindow(window_start=window_start, window_end=window_end)


def get_total_window_height_px(window_start: int, window_end: int,
                               grid: Optional[GridSettings] = None) -> float:
    grid = grid or DEFAULT_GRID
    return grid.minutes_to_px(window_end - window_start)


def compute_vertical_position_px(event: Any, window_start: int, window_end: int,
                                 grid: Optional[GridSettings] = None) -> PositionResult:
    """
    Map one event's time span onto pixel offsets within a window.

    Both ends are clamped into the window. The height never drops below one
    step, so zero-length and out-of-window events still render as a sliver at
    the nearest boundary. A sliver that would overflow the bottom of the window
    is moved up to sit inside it.

    An end at midnight on a later day than the start is minute 1440, not 0,
    matching how get_day_window reads such events.

    The window must be at least one step long, as every window from
    get_day_window is. In a shorter window the one-step sliver is taller than
    the window itself.
    """
    grid = grid or DEFAULT_GRID
    start = _field(event, 'start')
    end = _field(event, 'end')

    end_min = minutes_since_start_of_day(end)
    if _ends_at_next_midnight(start, end):
        end_min = DAY_END

    start_min = clamp(minutes_since_start_of_day(start), window_start, window_end)
    end_min = clamp(end_min, window_start, window_end)

    top_px = grid.minutes_to_px(start_min - window_start)
    height_px = max(grid.minutes_to_px(end_min - start_min), grid.pixels_per_step)

    total_px = get_total_window_height_px(window_start, window_end, grid=grid)
    if top_px + height_px > total_px:
        top_px = max(0.0, total_px - height_px)

    return PositionResult(top_px=top_px, height_px=height_px)


def _close_cluster(assignments: list[list[int]], pending: list[int], max_col: int) -> None:
    for index in pending:
        assignments[index][1] = max_col + 1


def layout_day_events(events: list, window_start: int = DAY_START, window_end: int = DAY_END,
                      grid: Optional[GridSettings] = None) -> list[LayoutResult]:
    """
    Assign side-by-side columns to overlapping events.

    Events are swept in start order (ties keep input order). Each event takes
    the first column whose occupant has already ended, or opens a new one.
    A cluster closes when the next event starts at or after every active
    column's end; every member of the cluster then gets the same
    columns_count, the number of columns the cluster needed.

    Events whose end is not after their start never overlap anything and are
    placed alone in column 0 without disturbing the sweep.

    Time complexity: O(n log n + n × c), c = columns in the widest cluster

    Args:
        events: Time-bounded records with start and end
        window_start: Start of the visible window in minutes
        window_end: End of the visible window in minutes
        grid: Grid resolution, defaults to DEFAULT_GRID

    Returns:
        One LayoutResult per event, in start order
    """
    if not events:
        return []

    ordered = sorted(events, key=lambda e: _field(e, 'start'))

    # [column_index, columns_count] per event in sweep order
    assignments = [[0, 1] for _ in ordered]
    columns: list[datetime] = []  # end time of each column's current occupant
    pending: list[int] = []
    max_col = 0

    for index, event in enumerate(ordered):
        start = _field(event, 'start')
        end = _field(event, 'end')

        if end <= start:
            logger.debug('Event starting %s has no positive duration; placing it alone', start)
            continue

        if pending and all(column_end <= start for column_end in columns):
            _close_cluster(assignments, pending, max_col)
            columns = []
            pending = []
            max_col = 0

        for column, column_end in enumerate(columns):
            if column_end <= start:
                columns[column] = end
                break
        else:
            column = len(columns)
            columns.append(end)

        assignments[index][0] = column
        pending.append(index)
        max_col = max(max_col, column)

    if pending:
        _close_cluster(assignments, pending, max_col)

    results = []
    for event, (column_index, columns_count) in zip(ordered, assignments):
        position = compute_vertical_position_px(event, window_start, window_end, grid=grid)
        results.append(LayoutResult(
            event=event,
            column_index=column_index,
            columns_count=columns_count,
            top_px=position.top_px,
            height_px=position.height_px,
        ))

    return results


def get_now_top_px_for_window(target_date: datetime, window_start: int, window_end: int,
                              now: datetime, grid: Optional[GridSettings] = None) -> Optional[float]:
    """
    Pixel offset of the current-time line, or None when target_date is not today.

    The current time is clamped into the window, so a "now" before the window
    sits at 0 and one after it sits at the window's full height.
    """
    if not is_same_day(target_date, now):
        return None

    grid = grid or DEFAULT_GRID
    now_min = clamp(minutes_since_start_of_day(now), window_start, window_end)
    return grid.minutes_to_px(now_min - window_start)


def is_all_day_for_date(event: Any, day: datetime) -> bool:
    """True only for an event running exactly 00:00:00.000 to 23:59:59.999 on day."""
    return _field(event, 'start') == start_of_day(day) and _field(event, 'end') == end_of_day(day)


def _spans_day(start: datetime, end: datetime, day: datetime) -> bool:
    first = start.date()
    last = end.date()
    if _ends_at_next_midnight(start, end):
        last -= timedelta(days=1)
    if last < first:
        last = first
    return first <= day.date() <= last


def events_for_day(items: list, day: datetime) -> list:
    """
    Keep the records that fall on the given calendar day.

    Task-like records (with a due timestamp) match on the due date.
    Appointment-like records match when their calendar span includes the day.
    Records with neither are skipped.
    """
    kept = []
    for item in items:
        due = _field(item, 'due')
        if due is not None:
            if is_same_day(due, day):
                kept.append(item)
            continue

        start = _field(item, 'start')
        if start is None:
            continue
        end = _field(item, 'end') or start
        if _spans_day(start, end, day):
            kept.append(item)

    return kept


def split_all_day_events(events: list, day: datetime) -> tuple[list, list]:
    """Partition events into (all_day, timed) for the day, keeping order."""
    all_day = []
    timed = []
    for event in events:
        if is_all_day_for_date(event, day):
            all_day.append(event)
        else:
            timed.append(event)
    return all_day, timed


def build_day_view(events: list, day: datetime, now: datetime,
                   grid: Optional[GridSettings] = None) -> DayView:
    """
    Produce everything a day column needs to render.

    Algorithm:
    1. Keep the appointment-like events that fall on the day
    2. Move all-day events out of the timed grid
    3. Compute the window and its pixel height from the timed events
    4. Lay out the timed events in that window
    5. Place the now-line, if the day is today

    Args:
        events: Appointment-like records with start and end
        day: Any instant on the day to render
        now: The current instant, supplied by the caller
        grid: Grid resolution, defaults to DEFAULT_GRID
    """
    todays_events = events_for_day(events, day)
    all_day, timed = split_all_day_events(todays_events, day)

    window = get_day_window(timed, grid=grid)
    total_height_px = get_total_window_height_px(window.window_start, window.window_end, grid=grid)
    laid_out = layout_day_events(timed, window.window_start, window.window_end, grid=grid)
    now_top_px = get_now_top_px_for_window(day, window.window_start, window.window_end, now, grid=grid)

    return DayView(
        day=day,
        window=window,
        total_height_px=total_height_px,
        all_day_events=all_day,
        timed_events=laid_out,
        now_top_px=now_top_px,
    )
