# File: booking_calendar/models/view.py

import json
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List

from .grid import HourRange, WeekWindow
from .placement import PlacedEvent

@dataclass(frozen=True)
class DayHeader:
    """Header cell of a day column."""
    date: date
    label: str        # "Mon"
    number: str       # "3"
    aria_label: str   # "Monday, March 3, 2025"
    is_today: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            'date': self.date.isoformat(),
            'label': self.label,
            'number': self.number,
            'aria_label': self.aria_label,
            'is_today': self.is_today,
        }


@dataclass
class CalendarView:
    """Everything needed to draw one week of the calendar."""
    title: str
    week: WeekWindow
    hour_range: HourRange
    days: List[DayHeader] = field(default_factory=list)
    hours: List[int] = field(default_factory=list)
    hour_labels: List[str] = field(default_factory=list)
    placed_events: List[PlacedEvent] = field(default_factory=list)
    event_count: int = 0
    footer: str = ""
    default_color: str = "hsl(var(--primary))"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            'title': self.title,
            'week_start': self.week.start.isoformat(),
            'week_end': self.week.end.isoformat(),
            'time_start': self.hour_range.time_start,
            'time_end': self.hour_range.time_end,
            'days': [d.to_dict() for d in self.days],
            'hours': list(self.hours),
            'hour_labels': list(self.hour_labels),
            'events': [
                dict(p.to_dict(), style=p.to_style(self.default_color))
                for p in self.placed_events
            ],
            'event_count': self.event_count,
            'footer': self.footer,
        }

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)
