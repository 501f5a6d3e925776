# File: booking_calendar/processors/week_processor.py
"""
Week/grid builder.
Derives the Monday-anchored week and the visible hour rows from a reference date.
"""

import datetime
from dataclasses import replace
from typing import Iterable, List, Optional, Union

from booking_calendar.models import CalendarEvent, HourRange, NavigationDirection, WeekWindow
from booking_calendar.utils.logger import setup_logger

logger = setup_logger(__name__)

DAYS_IN_WEEK = 7


def _as_date(reference: Union[datetime.date, datetime.datetime]) -> datetime.date:
    if isinstance(reference, datetime.datetime):
        return reference.date()
    return reference


def compute_week(reference: Union[datetime.date, datetime.datetime]) -> WeekWindow:
    """
    Build the week containing ``reference``.

    The week starts on the Monday on or before the reference date and ends on
    the following Sunday.

    Example:
        >>> compute_week(datetime.date(2025, 3, 5)).start
        datetime.date(2025, 3, 3)
    """
    day = _as_date(reference)
    start = day - datetime.timedelta(days=day.weekday())
    days = tuple(start + datetime.timedelta(days=i) for i in range(DAYS_IN_WEEK))
    return WeekWindow(start=start, end=days[-1], days=days)


def compute_hours(time_start: int, time_end: int) -> List[int]:
    """Hour labels from time_start to time_end inclusive (empty when inverted)."""
    return HourRange(time_start, time_end).hours


def shift_week(
    reference: Union[datetime.date, datetime.datetime],
    direction: Union[NavigationDirection, str]
) -> Union[datetime.date, datetime.datetime]:
    """Move the reference date one week back or forward."""
    direction = NavigationDirection(direction)
    step = -DAYS_IN_WEEK if direction is NavigationDirection.PREV else DAYS_IN_WEEK
    return reference + datetime.timedelta(days=step)


def today(tz: Optional[datetime.tzinfo] = None) -> datetime.date:
    """Current date, in ``tz`` when one is given."""
    if tz is None:
        return datetime.date.today()
    return datetime.datetime.now(tz).date()


def localize_datetime(value: datetime.datetime, tz: Optional[datetime.tzinfo]) -> datetime.datetime:
    """
    Express a datetime in the display timezone.

    Naive datetimes are taken to be wall-clock time in ``tz`` and get it
    attached; aware ones are converted. Without ``tz`` the value is returned
    unchanged.
    """
    if tz is None:
        return value
    if value.tzinfo is None:
        # pytz zones need localize() to pick the right DST offset
        if hasattr(tz, 'localize'):
            return tz.localize(value)
        return value.replace(tzinfo=tz)
    return value.astimezone(tz)


def localize_events(events: Iterable[CalendarEvent], tz: Optional[datetime.tzinfo]) -> List[CalendarEvent]:
    """Copies of ``events`` with start/end expressed in ``tz``."""
    if tz is None:
        return list(events)
    return [
        replace(event, start=localize_datetime(event.start, tz), end=localize_datetime(event.end, tz))
        for event in events
    ]
