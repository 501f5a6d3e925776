"""
Pytest configuration and shared fixtures.
Provides reusable events and bookings for all tests.
"""

import pytest
from datetime import date, datetime
from pathlib import Path
import sys

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from booking_calendar.models import CalendarEvent, HourRange
from booking_calendar.processors.week_processor import compute_week


# ==================== Date Fixtures ====================

@pytest.fixture
def monday():
    """Monday of the reference week."""
    return date(2025, 3, 3)


@pytest.fixture
def wednesday():
    return date(2025, 3, 5)


@pytest.fixture
def week(wednesday):
    """The week of 3-9 March 2025."""
    return compute_week(wednesday)


@pytest.fixture
def hour_range():
    """Default visible hours, 8 AM to 8 PM."""
    return HourRange(8, 20)


# ==================== Event Fixtures ====================

@pytest.fixture
def make_event():
    """Factory for events on a given day, times as (hour, minute) tuples."""
    counter = {'n': 0}

    def _make(day, start, end, title=None, **kwargs):
        counter['n'] += 1
        event_id = kwargs.pop('id', f"e{counter['n']}")
        return CalendarEvent(
            id=event_id,
            title=title or f"Event {event_id}",
            start=datetime(day.year, day.month, day.day, *start),
            end=datetime(day.year, day.month, day.day, *end),
            **kwargs
        )

    return _make


@pytest.fixture
def overlapping_pair(make_event, wednesday):
    """09:00-10:00 and 09:30-10:30 on the same day."""
    return [
        make_event(wednesday, (9, 0), (10, 0), id="a"),
        make_event(wednesday, (9, 30), (10, 30), id="b"),
    ]


@pytest.fixture
def chained_triple(make_event, wednesday):
    """A overlaps B, B overlaps C, A does not overlap C."""
    return [
        make_event(wednesday, (9, 0), (10, 0), id="A"),
        make_event(wednesday, (9, 30), (10, 30), id="B"),
        make_event(wednesday, (10, 15), (11, 0), id="C"),
    ]


# ==================== Booking Fixtures ====================

@pytest.fixture
def sample_bookings():
    """Bookings as returned by the booking store."""
    return [
        {
            'id': 'b1',
            'startTime': '2025-03-03T09:00:00Z',
            'endTime': '2025-03-03T10:00:00Z',
            'roomId': 'r1',
            'room': {'id': 'r1', 'name': 'Board Room', 'buildingId': 'hq'},
            'user': {'name': 'Alice'},
        },
        {
            'id': 'b2',
            'startTime': '2025-03-03T09:30:00Z',
            'endTime': '2025-03-03T11:00:00Z',
            'roomId': 'r2',
            'room': {'id': 'r2', 'name': 'Meeting Room 2', 'buildingId': 'hq'},
            'user': {'name': 'Bob'},
        },
        {
            'id': 'b3',
            'startTime': '2025-03-07T14:00:00Z',
            'endTime': '2025-03-07T15:30:00Z',
            'roomId': 'r3',
            'room': {'id': 'r3', 'name': 'Lab', 'buildingId': 'annex'},
            'user': None,
        },
        {
            'id': 'b4',
            'startTime': '2025-03-12T09:00:00Z',
            'endTime': '2025-03-12T10:00:00Z',
            'roomId': 'r1',
            'room': {'id': 'r1', 'name': 'Board Room', 'buildingId': 'hq'},
            'user': {'name': 'Carol'},
        },
    ]
