# File: booking_calendar/utils/formatting.py
"""
Display strings for the week calendar (titles, hour labels, tooltips).
"""

import datetime
from typing import Optional

from booking_calendar.models import CalendarEvent, DayHeader, WeekWindow


def format_hour_label(hour: int) -> str:
    """12 -> '12 PM', 8 -> '8 AM', 14 -> '2 PM'."""
    if hour == 12:
        return "12 PM"
    if hour < 12:
        return f"{hour} AM"
    return f"{hour - 12} PM"


def _month_day(day: datetime.date) -> str:
    return f"{day.strftime('%B')} {day.day}"


def format_week_title(week: WeekWindow) -> str:
    """'March 3 - March 9, 2025'."""
    return f"{_month_day(week.start)} - {_month_day(week.end)}, {week.end.year}"


def format_day_header(day: datetime.date, today: Optional[datetime.date] = None) -> DayHeader:
    return DayHeader(
        date=day,
        label=day.strftime('%a'),
        number=str(day.day),
        aria_label=f"{day.strftime('%A')}, {_month_day(day)}, {day.year}",
        is_today=today is not None and day == today,
    )


def format_time(value: datetime.datetime) -> str:
    """'9:05 AM' style, no leading zero on the hour."""
    hour = value.hour % 12 or 12
    return f"{hour}:{value.minute:02d} {'AM' if value.hour < 12 else 'PM'}"


def format_time_range(event: CalendarEvent) -> str:
    return f"{format_time(event.start)} - {format_time(event.end)}"


def format_footer(event_count: int) -> str:
    return f"{event_count} events • Click on a day or event for details"
