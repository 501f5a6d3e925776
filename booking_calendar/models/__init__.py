from .enums import NavigationDirection, ActivationKey
from .common import parse_iso_datetime, format_number
from .calendar import CalendarEvent, calendar_event_from_dict
from .grid import WeekWindow, HourRange
from .placement import OverlapGroup, EventRect, PlacedEvent
from .view import DayHeader, CalendarView
from .config import CalendarSettings

__all__ = [
    "NavigationDirection",
    "ActivationKey",
    "parse_iso_datetime",
    "format_number",
    "CalendarEvent",
    "calendar_event_from_dict",
    "WeekWindow",
    "HourRange",
    "OverlapGroup",
    "EventRect",
    "PlacedEvent",
    "DayHeader",
    "CalendarView",
    "CalendarSettings",
]
