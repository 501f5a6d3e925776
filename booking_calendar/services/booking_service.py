# File: booking_calendar/services/booking_service.py
"""
Turns booking records from the booking store into calendar events.
"""

import datetime
from typing import Any, Dict, Iterable, List, Optional

from booking_calendar.core.config_manager import Config
from booking_calendar.models import CalendarEvent, parse_iso_datetime
from booking_calendar.processors.week_processor import localize_datetime
from booking_calendar.utils.logger import LoggerMixin

Booking = Dict[str, Any]


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def color_for_id(identifier: str) -> str:
    """
    Stable palette colour for an id, so a room always gets the same colour.

    Uses the 32-bit ``h * 31 + code_unit`` string hash over UTF-16 code units.
    """
    raw = str(identifier).encode('utf-16-le')
    hash_value = 0
    for i in range(0, len(raw), 2):
        code_unit = raw[i] | (raw[i + 1] << 8)
        hash_value = _to_int32((hash_value << 5) - hash_value + code_unit)
    return Config.ROOM_COLORS[abs(hash_value) % len(Config.ROOM_COLORS)]


def booking_detail_path(event: CalendarEvent) -> str:
    """Host route for an activated event."""
    return Config.BOOKING_DETAIL_PATH.format(booking_id=event.booking_id or event.id)


def new_booking_path(day: datetime.date) -> str:
    """Host route for an activated day."""
    return Config.NEW_BOOKING_PATH.format(date=day.strftime("%Y-%m-%d"))


def _room_of(booking: Booking) -> Dict[str, Any]:
    return booking.get('room') or {}


def _room_id(booking: Booking) -> Optional[str]:
    return booking.get('roomId') or booking.get('room_id') or _room_of(booking).get('id')


def _building_id(booking: Booking) -> Optional[str]:
    room = _room_of(booking)
    return room.get('buildingId') or room.get('building_id')


class BookingService(LoggerMixin):
    """Prepares booking records for the week calendar."""

    def __init__(self, timezone: Optional[datetime.tzinfo] = None):
        """
        Args:
            timezone: Display timezone (pytz); aware booking times are converted to it
        """
        self.timezone = timezone

    def deduplicate(self, *booking_lists: Iterable[Booking]) -> List[Booking]:
        """Merge booking lists by id; a later copy replaces an earlier one in place."""
        unique: Dict[Any, Booking] = {}
        for bookings in booking_lists:
            for booking in bookings:
                unique[booking.get('id')] = booking
        return list(unique.values())

    def structure(self, bookings: Iterable[Booking]) -> Dict[str, Dict[str, List[Booking]]]:
        """Nest bookings as {building_id: {room_id: [bookings]}}."""
        structured: Dict[str, Dict[str, List[Booking]]] = {}
        skipped = 0
        for booking in bookings:
            building_id = _building_id(booking)
            room_id = _room_id(booking)
            if not building_id or not room_id:
                skipped += 1
                continue
            structured.setdefault(building_id, {}).setdefault(room_id, []).append(booking)

        if skipped:
            self.logger.debug(f"Skipped {skipped} bookings without building or room")
        return structured

    def filter(
        self,
        bookings: Iterable[Booking],
        building_id: Optional[str] = None,
        room_id: Optional[str] = None
    ) -> List[Booking]:
        """Keep bookings matching the selected building and room (empty selection matches all)."""
        selected = []
        for booking in bookings:
            if building_id and _building_id(booking) != building_id:
                continue
            if room_id and _room_id(booking) != room_id:
                continue
            selected.append(booking)
        return selected

    def to_event(self, booking: Booking) -> Optional[CalendarEvent]:
        """
        Convert one booking to a CalendarEvent.

        Returns:
            The event, or None when the booking has no usable times
        """
        room = _room_of(booking)
        room_id = _room_id(booking)
        booking_id = str(booking.get('id', ''))

        start = parse_iso_datetime(booking.get('startTime') or booking.get('start_time'))
        end = parse_iso_datetime(booking.get('endTime') or booking.get('end_time'))
        if start is None or end is None:
            self.logger.warning(f"Skipping booking {booking_id!r}: missing or unparseable start/end")
            return None

        start = localize_datetime(start, self.timezone)
        end = localize_datetime(end, self.timezone)
        if end <= start:
            self.logger.warning(f"Booking {booking_id!r} ends at or before its start ({start} - {end})")

        user_name = (booking.get('user') or {}).get('name') or "Unknown"
        room_name = room.get('name') or room_id or "Room"

        return CalendarEvent(
            # Compound key: the same booking may show up once per room
            id=f"{booking_id}-{room_id}",
            booking_id=booking_id,
            title=f"{room_name} - {user_name}",
            start=start,
            end=end,
            color=color_for_id(room_id) if room_id else None,
        )

    def to_events(self, bookings: Iterable[Booking]) -> List[CalendarEvent]:
        events = []
        for booking in bookings:
            event = self.to_event(booking)
            if event is not None:
                events.append(event)
        return events

    def events_for(
        self,
        bookings: Iterable[Booking],
        building_id: Optional[str] = None,
        room_id: Optional[str] = None
    ) -> List[CalendarEvent]:
        """Deduplicate, filter and convert bookings for one calendar render."""
        bookings = self.deduplicate(bookings)
        selected = self.filter(bookings, building_id, room_id)
        structured = self.structure(selected)

        events: List[CalendarEvent] = []
        for rooms in structured.values():
            for room_bookings in rooms.values():
                events.extend(self.to_events(room_bookings))

        self.logger.info(
            f"Prepared {len(events)} calendar events from {len(bookings)} bookings "
            f"(building={building_id or 'all'}, room={room_id or 'all'})"
        )
        return events
