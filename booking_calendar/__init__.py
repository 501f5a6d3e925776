"""Week calendar layout for resource bookings."""

__version__ = "0.1.0"

from booking_calendar.core.week_calendar import WeekCalendar, render_week
from booking_calendar.models import CalendarEvent, CalendarSettings, CalendarView, PlacedEvent
from booking_calendar.processors.placement_processor import place_events
from booking_calendar.processors.week_processor import compute_hours, compute_week

__all__ = [
    "WeekCalendar",
    "render_week",
    "CalendarEvent",
    "CalendarSettings",
    "CalendarView",
    "PlacedEvent",
    "place_events",
    "compute_hours",
    "compute_week",
]
