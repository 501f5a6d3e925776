# File: booking_calendar/processors/placement_processor.py
"""
Geometric placement module.
Maps overlap-annotated events to rectangles on the 8-column week grid.
"""

import datetime
from typing import Iterable, List, Tuple

from booking_calendar.core.config_manager import Config
from booking_calendar.models import CalendarEvent, EventRect, HourRange, PlacedEvent, WeekWindow
from booking_calendar.processors.overlap_processor import process_events
from booking_calendar.utils.logger import setup_logger

logger = setup_logger(__name__)

COLUMN_WIDTH = 100 / Config.GRID_COLUMNS


def day_index_for(value: datetime.datetime) -> int:
    """Column of a day within the week: Monday = 0 ... Sunday = 6."""
    return value.weekday()


def fractional_hour(value: datetime.datetime) -> float:
    """Hour of day with minutes as a fraction, e.g. 9:30 -> 9.5."""
    return value.hour + value.minute / 60


def vertical_position(
    start: datetime.datetime,
    end: datetime.datetime,
    hour_range: HourRange
) -> Tuple[float, float]:
    """
    Top and height in percent of the grid height.

    The divisor is the hour-label count (time_end - time_start + 1), not the
    hour span.
    """
    span = hour_range.span
    start_hour = fractional_hour(start)
    end_hour = fractional_hour(end)

    top = (start_hour - hour_range.time_start) / span * 100
    height = (end_hour - start_hour) / span * 100
    return top, height


def horizontal_position(day_index: int, overlap_index: int = 0, overlap_total: int = 1) -> Tuple[float, float, float]:
    """
    Left edge, overlap offset and width in percent of the grid width.

    Column 0 holds the hour labels, so day columns start at index 1.
    """
    left = COLUMN_WIDTH * (day_index + 1)
    width = (COLUMN_WIDTH * Config.OVERLAP_SHRINK) / max(1, overlap_total)
    overlap_offset = overlap_index * width
    return left, overlap_offset, width


def compute_rect(
    event: CalendarEvent,
    hour_range: HourRange,
    overlap_index: int = 0,
    overlap_total: int = 1
) -> EventRect:
    """Rectangle of a single event."""
    top, height = vertical_position(event.start, event.end, hour_range)
    left, overlap_offset, width = horizontal_position(
        day_index_for(event.start), overlap_index, overlap_total
    )
    return EventRect(top=top, height=height, left=left, overlap_offset=overlap_offset, width=width)


def place_events(
    events: Iterable[CalendarEvent],
    week: WeekWindow,
    hour_range: HourRange
) -> List[PlacedEvent]:
    """
    Place events on the week grid.

    Overlap grouping runs over every event; placement then keeps only those
    whose start date is one of the seven visible days.

    Args:
        events: Events with start/end already in display time
        week: Visible week
        hour_range: Visible hour bounds

    Returns:
        Placed events in grouping order
    """
    if hour_range.is_degenerate():
        logger.warning(
            f"Hour range {hour_range.time_start}-{hour_range.time_end} is empty, nothing placed"
        )
        return []

    placed: List[PlacedEvent] = []
    dropped = 0

    for event, index, total in process_events(events):
        if event.start.date() not in week:
            dropped += 1
            continue

        placed.append(PlacedEvent(
            event=event,
            day_index=day_index_for(event.start),
            overlap_index=index,
            overlap_total=total,
            rect=compute_rect(event, hour_range, index, total),
        ))

    logger.debug(
        f"Placed {len(placed)} events in week {week.start} - {week.end} "
        f"({dropped} outside the week)"
    )
    return placed
