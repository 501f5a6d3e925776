# File: booking_calendar/core/week_calendar.py
"""
Week calendar component.
Holds the selected date, handles navigation and user activation, and
recomputes the full view on every render.
"""

import datetime
from typing import Callable, List, Optional, Sequence, Union

from booking_calendar.models import (
    ActivationKey,
    CalendarEvent,
    CalendarSettings,
    CalendarView,
    NavigationDirection,
)
from booking_calendar.processors.placement_processor import place_events
from booking_calendar.processors.week_processor import (
    compute_week,
    localize_events,
    shift_week,
    today,
)
from booking_calendar.utils.formatting import (
    format_day_header,
    format_footer,
    format_hour_label,
    format_week_title,
)
from booking_calendar.utils.logger import LoggerMixin

DateLike = Union[datetime.date, datetime.datetime]


class WeekCalendar(LoggerMixin):
    """
    Monday-to-Sunday calendar of bookings.

    The only state kept between calls is the selected reference date; days,
    hours and event geometry are derived from scratch in ``render``.
    """

    def __init__(
        self,
        events: Optional[Sequence[CalendarEvent]] = None,
        current_date: Optional[DateLike] = None,
        on_event_click: Optional[Callable[[CalendarEvent], None]] = None,
        on_day_click: Optional[Callable[[datetime.date], None]] = None,
        on_navigate: Optional[Callable[[DateLike], None]] = None,
        settings: Optional[CalendarSettings] = None,
    ):
        self.settings = settings or CalendarSettings()
        self.events: List[CalendarEvent] = list(events or [])
        self.selected_date: DateLike = current_date if current_date is not None else self._today()
        self.on_event_click = on_event_click
        self.on_day_click = on_day_click
        self.on_navigate = on_navigate

    def _today(self) -> datetime.date:
        return today(self.settings.tzinfo)

    # ---------------------------------------------------------
    # Navigation
    # ---------------------------------------------------------

    def navigate(self, direction: Union[NavigationDirection, str]) -> DateLike:
        """Move one week back or forward and notify the host."""
        self.selected_date = shift_week(self.selected_date, direction)
        self.logger.debug(f"Navigated {NavigationDirection(direction).value} to {self.selected_date}")
        if self.on_navigate:
            self.on_navigate(self.selected_date)
        return self.selected_date

    def previous_week(self) -> DateLike:
        return self.navigate(NavigationDirection.PREV)

    def next_week(self) -> DateLike:
        return self.navigate(NavigationDirection.NEXT)

    def go_to_today(self) -> datetime.date:
        """Jump back to the current week. The host is not notified."""
        self.selected_date = self._today()
        return self.selected_date

    # ---------------------------------------------------------
    # Activation
    # ---------------------------------------------------------

    def click_day(self, day: datetime.date) -> None:
        if self.on_day_click:
            self.on_day_click(day)

    def key_down(self, day: datetime.date, key: str) -> bool:
        """Enter and Space activate a day header; returns whether the key was handled."""
        if key not in (ActivationKey.ENTER.value, ActivationKey.SPACE.value):
            return False
        self.click_day(day)
        return True

    def click_event(self, event: CalendarEvent) -> None:
        if self.on_event_click:
            self.on_event_click(event)

    # ---------------------------------------------------------
    # Rendering
    # ---------------------------------------------------------

    def set_events(self, events: Sequence[CalendarEvent]) -> None:
        self.events = list(events)

    def render(self) -> CalendarView:
        """Compute days, hour rows and event placement for the selected week."""
        week = compute_week(self.selected_date)
        hour_range = self.settings.hour_range
        current_day = self._today()

        events = localize_events(self.events, self.settings.tzinfo)
        placed = place_events(events, week, hour_range)

        return CalendarView(
            title=format_week_title(week),
            week=week,
            hour_range=hour_range,
            days=[format_day_header(day, current_day) for day in week.days],
            hours=hour_range.hours,
            hour_labels=[format_hour_label(h) for h in hour_range.hours],
            placed_events=placed,
            event_count=len(self.events),
            footer=format_footer(len(self.events)),
            default_color=self.settings.default_color,
        )


def render_week(
    events: Sequence[CalendarEvent],
    reference_date: DateLike,
    time_start: int = 8,
    time_end: int = 20,
    timezone: Optional[str] = None,
) -> CalendarView:
    """One-shot render without keeping a WeekCalendar around."""
    settings = CalendarSettings(time_start=time_start, time_end=time_end, timezone=timezone)
    return WeekCalendar(events, current_date=reference_date, settings=settings).render()
