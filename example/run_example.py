#!/usr/bin/env python3
"""
Simple example laying out a clinic's day column.
Prints the window, each appointment's box and the now-line.
"""

from datetime import datetime
import json
import logging
import sys
import os

# Add parent directory to path so we can import dayview
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from dayview import Appointment, build_day_view, get_day_with_date, load_grid_settings


def configure_logging() -> None:
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter('%(levelname)s %(name)s: %(message)s'))
    logger = logging.getLogger('dayview')
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)


def main():
    configure_logging()
    grid = load_grid_settings()

    day = datetime(2025, 11, 10)

    events = [
        # Vaccination and a dental overlapping it, then a consult running into both
        Appointment(start=datetime(2025, 11, 10, 9, 0), end=datetime(2025, 11, 10, 10, 0)),
        Appointment(start=datetime(2025, 11, 10, 9, 15), end=datetime(2025, 11, 10, 9, 45)),
        Appointment(start=datetime(2025, 11, 10, 9, 30), end=datetime(2025, 11, 10, 10, 30)),
        # Surgery later in the morning, on its own
        Appointment(start=datetime(2025, 11, 10, 11, 0), end=datetime(2025, 11, 10, 12, 0)),
        # Boarding all day
        Appointment(start=datetime(2025, 11, 10, 0, 0), end=datetime(2025, 11, 10, 23, 59, 59, 999000)),
        # Tomorrow, filtered out
        Appointment(start=datetime(2025, 11, 11, 9, 0), end=datetime(2025, 11, 11, 9, 30)),
    ]

    # The caller owns the clock
    view = build_day_view(events, day, now=datetime.now(), grid=grid)

    print(f"{get_day_with_date(day)}: window {view.window.window_start}-{view.window.window_end} min, "
          f"{view.total_height_px:.0f}px tall")
    print(f"{len(view.all_day_events)} all-day event(s)")

    output = []
    for laid_out in view.timed_events:
        output.append({
            'start': laid_out.event.start.strftime('%H:%M'),
            'end': laid_out.event.end.strftime('%H:%M'),
            'column': f"{laid_out.column_index + 1}/{laid_out.columns_count}",
            'top_px': laid_out.top_px,
            'height_px': laid_out.height_px
        })

    print(json.dumps(output, indent=2))

    if view.now_top_px is None:
        print("Not today, no now-line")
    else:
        print(f"Now-line at {view.now_top_px:.0f}px")


if __name__ == '__main__':
    main()
