# File: booking_calendar/core/orchestrator.py
"""
Pipeline that turns a bookings export into a rendered week view.

Steps: load bookings -> convert to events -> lay out the week -> save JSON.
"""

import datetime
import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from booking_calendar.core.config_manager import Config
from booking_calendar.core.week_calendar import WeekCalendar
from booking_calendar.models import CalendarSettings, CalendarView
from booking_calendar.services.booking_service import BookingService
from booking_calendar.utils.formatting import format_time_range
from booking_calendar.utils.logger import LoggerMixin, setup_logger

logger = setup_logger(__name__)


class CalendarOrchestrator(LoggerMixin):
    """Coordinates loading, conversion, layout and output of one week."""

    def __init__(self, settings: Optional[CalendarSettings] = None):
        self.settings = settings or CalendarSettings.from_config()
        self.booking_service = BookingService(self.settings.tzinfo)

    def load_bookings(self, filepath: Path = Config.BOOKINGS_FILE) -> List[Dict[str, Any]]:
        """
        Read bookings from a JSON file.

        The file holds either a list of bookings or an object with a
        ``bookings`` list.

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the content is not a bookings list
        """
        filepath = Path(filepath)
        if not filepath.exists():
            raise FileNotFoundError(2, "Bookings file not found", str(filepath))

        with open(filepath, 'r', encoding='utf-8') as f:
            data = json.load(f)

        bookings = data.get('bookings') if isinstance(data, dict) else data
        if not isinstance(bookings, list):
            raise ValueError(f"{filepath} does not contain a list of bookings")

        self.logger.info(f"Loaded {len(bookings)} bookings from {filepath}")
        return bookings

    def build_view(
        self,
        bookings: List[Dict[str, Any]],
        reference_date: Optional[datetime.date] = None,
        building_id: Optional[str] = None,
        room_id: Optional[str] = None
    ) -> CalendarView:
        events = self.booking_service.events_for(bookings, building_id, room_id)
        calendar = WeekCalendar(events, current_date=reference_date, settings=self.settings)
        view = calendar.render()
        self.logger.info(
            f"{view.title}: {len(view.placed_events)} of {view.event_count} events placed"
        )
        return view

    def save_view(self, view: CalendarView, filepath: Path = Config.VIEW_OUTPUT_FILE) -> bool:
        """
        Save the rendered view as JSON.

        Returns:
            True if successful, False otherwise
        """
        try:
            filepath = Path(filepath)
            filepath.parent.mkdir(parents=True, exist_ok=True)
            filepath.write_text(view.to_json(), encoding='utf-8')
            self.logger.info(f"Week view saved to {filepath}")
            return True
        except OSError as e:
            self.logger.error(f"Could not save week view: {e}", exc_info=True)
            return False

    def run(
        self,
        bookings_file: Path = Config.BOOKINGS_FILE,
        output_file: Path = Config.VIEW_OUTPUT_FILE,
        reference_date: Optional[datetime.date] = None,
        building_id: Optional[str] = None,
        room_id: Optional[str] = None
    ) -> bool:
        self.logger.info("=" * 60)
        self.logger.info("Rendering week calendar")
        self.logger.info("=" * 60)

        bookings = self.load_bookings(bookings_file)
        view = self.build_view(bookings, reference_date, building_id, room_id)
        log_view(view)
        return self.save_view(view, output_file)


def log_view(view: CalendarView) -> None:
    """Print a day-by-day summary of a rendered week."""
    logger.info(view.title)
    for index, day in enumerate(view.days):
        day_events = [p for p in view.placed_events if p.day_index == index]
        logger.info(f"  {day.label} {day.number}: {len(day_events)} events")
        for placed in sorted(day_events, key=lambda p: p.event.start):
            slot = f" [{placed.overlap_index + 1}/{placed.overlap_total}]" if placed.overlap_total > 1 else ""
            logger.info(f"    {format_time_range(placed.event)}  {placed.event.title}{slot}")
    logger.info(view.footer)
