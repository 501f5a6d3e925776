# File: booking_calendar/models/calendar.py

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from .common import parse_iso_datetime

@dataclass
class CalendarEvent:
    """A time-ranged entry shown on the week calendar (usually a room booking)."""
    id: str
    title: str
    start: datetime
    end: datetime
    booking_id: Optional[str] = None
    color: Optional[str] = None

    def is_valid(self) -> bool:
        """True when the event ends strictly after it starts."""
        return self.end > self.start

    def duration_minutes(self) -> int:
        """Calculate event duration in minutes."""
        return int((self.end - self.start).total_seconds() / 60)

    def overlaps_with(self, other: 'CalendarEvent') -> bool:
        """Check if this event overlaps with another."""
        return self.start < other.end and self.end > other.start

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-ready dictionary."""
        return {
            'id': self.id,
            'booking_id': self.booking_id,
            'title': self.title,
            'start': self.start.isoformat(),
            'end': self.end.isoformat(),
            'color': self.color,
        }


def calendar_event_from_dict(data: dict) -> CalendarEvent:
    """Create CalendarEvent from dictionary."""
    start = parse_iso_datetime(data.get('start'))
    end = parse_iso_datetime(data.get('end'))
    if start is None or end is None:
        raise ValueError(f"Event {data.get('id')!r} needs parseable start and end times")

    return CalendarEvent(
        id=str(data['id']),
        title=str(data.get('title', 'Untitled')),
        start=start,
        end=end,
        booking_id=data.get('booking_id') or data.get('bookingId'),
        color=data.get('color'),
    )
