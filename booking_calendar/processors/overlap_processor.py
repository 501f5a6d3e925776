# File: booking_calendar/processors/overlap_processor.py
"""
Overlap grouping module.
Splits each day's events into groups that are drawn side by side.

The grouping is a greedy chain sweep, not interval-graph colouring: an event
joins the first group whose most recently added event it overlaps. A chain
A-B-C where only neighbours overlap therefore ends up in one group of three,
and consumers rely on that exact column assignment.
"""

import datetime
from typing import Dict, Iterable, List, Tuple

from booking_calendar.models import CalendarEvent, OverlapGroup
from booking_calendar.utils.logger import setup_logger

logger = setup_logger(__name__)


def group_events_by_day(events: Iterable[CalendarEvent]) -> Dict[datetime.date, List[CalendarEvent]]:
    """Bucket events by the calendar date of their start, keeping first-seen day order."""
    events_by_day: Dict[datetime.date, List[CalendarEvent]] = {}
    for event in events:
        events_by_day.setdefault(event.start.date(), []).append(event)
    return events_by_day


def build_overlap_groups(day_events: Iterable[CalendarEvent]) -> List[OverlapGroup]:
    """
    Run the chain sweep over one day's events.

    Args:
        day_events: Events starting on the same calendar day

    Returns:
        Groups in creation order; members are in arrival (start-time) order
    """
    # sorted() is stable, so events with equal starts keep their input order
    ordered = sorted(day_events, key=lambda e: e.start)

    groups: List[OverlapGroup] = []
    for event in ordered:
        if not event.is_valid():
            logger.warning(f"Event '{event.title}' ({event.id}) does not end after it starts")

        for group in groups:
            if group.can_accept(event):
                group.add(event)
                break
        else:
            groups.append(OverlapGroup(events=[event]))

    return groups


def process_events(events: Iterable[CalendarEvent]) -> List[Tuple[CalendarEvent, int, int]]:
    """
    Annotate every event with its overlap slot.

    Returns:
        (event, index, total) triples, day by day, group by group
    """
    processed: List[Tuple[CalendarEvent, int, int]] = []
    events_by_day = group_events_by_day(events)

    for day, day_events in events_by_day.items():
        groups = build_overlap_groups(day_events)
        logger.debug(f"{day}: {len(day_events)} events in {len(groups)} overlap groups")

        for group in groups:
            for index, event in enumerate(group.events):
                processed.append((event, index, group.size))

    return processed
