# File: booking_calendar/models/config.py
"""
Data models for calendar display configuration.
"""

from dataclasses import dataclass
from typing import Optional

import pytz

from .grid import HourRange

@dataclass
class CalendarSettings:
    """Per-render calendar settings."""
    time_start: int = 8
    time_end: int = 20
    timezone: Optional[str] = None
    default_color: str = "hsl(var(--primary))"

    def __post_init__(self):
        """Coerce hour bounds and reject unknown timezones."""
        self.time_start = int(self.time_start)
        self.time_end = int(self.time_end)
        if self.timezone and self.timezone not in pytz.all_timezones_set:
            raise ValueError(f"Unknown timezone: {self.timezone}")

    @property
    def hour_range(self) -> HourRange:
        return HourRange(self.time_start, self.time_end)

    @property
    def tzinfo(self):
        """pytz timezone, or None to keep event datetimes as given."""
        return pytz.timezone(self.timezone) if self.timezone else None

    @classmethod
    def from_dict(cls, data: dict) -> 'CalendarSettings':
        """Create settings from a dictionary (e.g., loaded from JSON)."""
        return cls(
            time_start=data.get('time_start', 8),
            time_end=data.get('time_end', 20),
            timezone=data.get('timezone'),
            default_color=data.get('default_color', "hsl(var(--primary))"),
        )

    @classmethod
    def from_config(cls) -> 'CalendarSettings':
        """Create settings from the environment-backed Config."""
        from booking_calendar.core.config_manager import Config

        return cls(
            time_start=Config.TIME_START,
            time_end=Config.TIME_END,
            timezone=Config.TIMEZONE,
            default_color=Config.DEFAULT_COLOR,
        )
