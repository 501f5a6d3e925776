# File: booking_calendar/models/placement.py
"""
Data models for overlap grouping and event placement.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from booking_calendar.core.config_manager import Config

from .calendar import CalendarEvent
from .common import format_number


@dataclass
class OverlapGroup:
    """Same-day events that share a column, in arrival order."""
    events: List[CalendarEvent] = field(default_factory=list)

    @property
    def size(self) -> int:
        return len(self.events)

    @property
    def last(self) -> Optional[CalendarEvent]:
        """Most recently added event."""
        return self.events[-1] if self.events else None

    def can_accept(self, event: CalendarEvent) -> bool:
        """Chain rule: the candidate only has to overlap the last added event."""
        last = self.last
        return last is not None and event.start < last.end

    def add(self, event: CalendarEvent) -> None:
        self.events.append(event)


@dataclass(frozen=True)
class EventRect:
    """Event rectangle in percent of the full grid (before pixel margins)."""
    top: float
    height: float
    left: float
    overlap_offset: float
    width: float

    def to_style(self, inset_px: Optional[int] = None, margin_px: Optional[int] = None) -> Dict[str, str]:
        """CSS positioning with the cosmetic pixel margins applied (defaults from Config)."""
        if inset_px is None:
            inset_px = Config.EVENT_INSET_PX
        if margin_px is None:
            margin_px = Config.EVENT_MARGIN_PX
        return {
            'position': 'absolute',
            'top': f"{format_number(self.top)}%",
            'height': f"{format_number(self.height)}%",
            'left': (
                f"calc({format_number(self.left)}% + "
                f"{format_number(self.overlap_offset)}% + {inset_px}px)"
            ),
            'width': f"calc({format_number(self.width)}% - {margin_px}px)",
        }

    def to_dict(self) -> Dict[str, float]:
        return {
            'top': self.top,
            'height': self.height,
            'left': self.left,
            'overlap_offset': self.overlap_offset,
            'width': self.width,
        }


@dataclass(frozen=True)
class PlacedEvent:
    """A CalendarEvent annotated with its column, overlap slot and rectangle."""
    event: CalendarEvent
    day_index: int
    overlap_index: int
    overlap_total: int
    rect: EventRect

    def to_style(self, default_color: str = "hsl(var(--primary))",
                 inset_px: Optional[int] = None, margin_px: Optional[int] = None) -> Dict[str, Any]:
        style: Dict[str, Any] = self.rect.to_style(inset_px, margin_px)
        style['backgroundColor'] = self.event.color or default_color
        style['zIndex'] = 10
        return style

    def to_dict(self) -> Dict[str, Any]:
        data = self.event.to_dict()
        data.update({
            'day_index': self.day_index,
            'overlap_index': self.overlap_index,
            'overlap_total': self.overlap_total,
            'rect': self.rect.to_dict(),
        })
        return data
