# File: tests/integration/test_week_calendar.py
"""
Integration tests for the WeekCalendar component.
Covers navigation, activation callbacks and full renders.
"""

import json

import pytest
from datetime import date
from unittest.mock import Mock

from booking_calendar import WeekCalendar, render_week
from booking_calendar.models import CalendarSettings, NavigationDirection


@pytest.fixture
def callbacks():
    return {
        'on_event_click': Mock(),
        'on_day_click': Mock(),
        'on_navigate': Mock(),
    }


@pytest.fixture
def calendar(callbacks, wednesday, overlapping_pair):
    return WeekCalendar(overlapping_pair, current_date=wednesday, **callbacks)


class TestNavigation:

    def test_previous_week_notifies_host(self, calendar, callbacks):
        new_date = calendar.previous_week()

        assert new_date == date(2025, 2, 26)
        callbacks['on_navigate'].assert_called_once_with(date(2025, 2, 26))

    def test_next_week_accepts_string_direction(self, calendar, callbacks):
        calendar.navigate("next")
        calendar.navigate(NavigationDirection.NEXT)

        assert calendar.selected_date == date(2025, 3, 19)
        assert callbacks['on_navigate'].call_count == 2

    def test_today_resets_without_notifying(self, calendar, callbacks):
        calendar.next_week()
        callbacks['on_navigate'].reset_mock()

        assert calendar.go_to_today() == date.today()
        callbacks['on_navigate'].assert_not_called()

    def test_navigation_without_callback(self, wednesday):
        calendar = WeekCalendar(current_date=wednesday)

        assert calendar.next_week() == date(2025, 3, 12)

    def test_defaults_to_today(self):
        assert WeekCalendar().selected_date == date.today()


class TestActivation:

    def test_click_day(self, calendar, callbacks, monday):
        calendar.click_day(monday)

        callbacks['on_day_click'].assert_called_once_with(monday)

    @pytest.mark.parametrize("key", ["Enter", " "])
    def test_activation_keys(self, calendar, callbacks, monday, key):
        assert calendar.key_down(monday, key) is True
        callbacks['on_day_click'].assert_called_once_with(monday)

    def test_other_keys_ignored(self, calendar, callbacks, monday):
        assert calendar.key_down(monday, "Tab") is False
        callbacks['on_day_click'].assert_not_called()

    def test_click_event_passes_full_event(self, calendar, callbacks, overlapping_pair):
        calendar.click_event(overlapping_pair[1])

        callbacks['on_event_click'].assert_called_once_with(overlapping_pair[1])

    def test_missing_callbacks_are_no_ops(self, wednesday, overlapping_pair):
        calendar = WeekCalendar(overlapping_pair, current_date=wednesday)

        calendar.click_day(wednesday)
        calendar.click_event(overlapping_pair[0])


class TestRender:

    def test_grid(self, calendar):
        view = calendar.render()

        assert view.title == "March 3 - March 9, 2025"
        assert [d.date for d in view.days][0] == date(2025, 3, 3)
        assert len(view.days) == 7
        assert view.hours == list(range(8, 21))
        assert view.hour_labels[0] == "8 AM"
        assert view.hour_labels[4] == "12 PM"

    def test_overlapping_pair_scenario(self, calendar):
        view = calendar.render()

        assert [(p.event.id, p.overlap_index, p.overlap_total) for p in view.placed_events] == [
            ("a", 0, 2),
            ("b", 1, 2),
        ]
        for placed in view.placed_events:
            assert placed.rect.width == pytest.approx(100 / 8 * 0.9 / 2)

    def test_event_count_includes_events_outside_week(self, calendar, make_event, overlapping_pair):
        outside = make_event(date(2025, 4, 1), (9, 0), (10, 0))
        calendar.set_events(overlapping_pair + [outside])

        view = calendar.render()

        assert view.event_count == 3
        assert len(view.placed_events) == 2
        assert view.footer.startswith("3 events")

    def test_navigation_changes_placement(self, calendar):
        calendar.next_week()

        view = calendar.render()

        assert view.week.start == date(2025, 3, 10)
        assert view.placed_events == []

    def test_render_is_deterministic(self, calendar):
        assert calendar.render().to_json() == calendar.render().to_json()

    def test_to_dict_is_json_ready(self, calendar):
        data = json.loads(calendar.render().to_json())

        assert data['week_start'] == "2025-03-03"
        assert data['events'][0]['style']['left'].endswith("+ 4px)")
        assert data['events'][0]['style']['backgroundColor'] == "hsl(var(--primary))"

    def test_empty_calendar(self, wednesday):
        view = WeekCalendar(current_date=wednesday).render()

        assert view.placed_events == []
        assert view.event_count == 0

    @pytest.mark.parametrize("time_start, time_end", [(12, 12), (20, 8), (9, 8)])
    def test_narrow_or_inverted_hour_ranges_do_not_raise(self, overlapping_pair, wednesday, time_start, time_end):
        view = render_week(overlapping_pair, wednesday, time_start=time_start, time_end=time_end)

        assert len(view.hours) == max(0, time_end - time_start + 1)

    def test_timezone_moves_late_events_into_next_week(self, wednesday):
        from booking_calendar.models import calendar_event_from_dict

        late = calendar_event_from_dict({
            'id': 'late',
            'title': 'Late',
            'start': '2025-03-09T23:30:00Z',
            'end': '2025-03-10T00:30:00Z',
        })

        in_utc = render_week([late], wednesday, timezone="UTC")
        in_amsterdam = render_week([late], wednesday, timezone="Europe/Amsterdam")

        assert [p.day_index for p in in_utc.placed_events] == [6]
        assert in_amsterdam.placed_events == []

    def test_settings_drive_hour_range(self, wednesday, overlapping_pair):
        settings = CalendarSettings(time_start=9, time_end=10)

        view = WeekCalendar(overlapping_pair, current_date=wednesday, settings=settings).render()

        assert view.hours == [9, 10]
        assert view.placed_events[0].rect.top == 0
        assert view.placed_events[0].rect.height == pytest.approx(50)
