"""Layout engine for a calendar's single-day view."""

from .config import DEFAULT_GRID, GridSettings, load_grid_settings
from .layout_utils import (
    Appointment,
    Task,
    DayWindow,
    PositionResult,
    LayoutResult,
    DayView,
    get_day_window,
    compute_vertical_position_px,
    layout_day_events,
    get_total_window_height_px,
    get_now_top_px_for_window,
    is_all_day_for_date,
    events_for_day,
    split_all_day_events,
    build_day_view
)
from .time_utils import (
    MINUTES_PER_STEP,
    PIXELS_PER_STEP,
    DAY_START,
    DAY_END,
    WINDOW_PADDING_MINUTES,
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

__all__ = [
    'DEFAULT_GRID',
    'GridSettings',
    'load_grid_settings',
    'Appointment',
    'Task',
    'DayWindow',
    'PositionResult',
    'LayoutResult',
    'DayView',
    'get_day_window',
    'compute_vertical_position_px',
    'layout_day_events',
    'get_total_window_height_px',
    'get_now_top_px_for_window',
    'is_all_day_for_date',
    'events_for_day',
    'split_all_day_events',
    'build_day_view',
    'MINUTES_PER_STEP',
    'PIXELS_PER_STEP',
    'DAY_START',
    'DAY_END',
    'WINDOW_PADDING_MINUTES',
    'minutes_since_start_of_day',
    'snap_to_step',
    'snap_down',
    'snap_up',
    'is_same_day',
    'is_same_month',
    'start_of_day',
    'end_of_day',
    'get_month_year',
    'get_day_with_date'
]
