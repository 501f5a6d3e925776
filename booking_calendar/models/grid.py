# File: booking_calendar/models/grid.py
"""
Data models for the week grid: the seven visible days and the hour rows.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import List, Tuple


@dataclass(frozen=True)
class WeekWindow:
    """Monday-anchored week derived from a reference date."""
    start: date
    end: date
    days: Tuple[date, ...] = field(default_factory=tuple)

    def __contains__(self, day: date) -> bool:
        return day in self.days


@dataclass(frozen=True)
class HourRange:
    """Inclusive [time_start, time_end] bounds of the visible grid."""
    time_start: int = 8
    time_end: int = 20

    @property
    def span(self) -> int:
        # Matches the number of hour labels, so the grid is one hour taller
        # than time_end - time_start.
        return self.time_end - self.time_start + 1

    @property
    def hours(self) -> List[int]:
        return list(range(self.time_start, self.time_end + 1))

    def is_degenerate(self) -> bool:
        return self.span <= 0
