# File: booking_calendar/models/enums.py

from enum import Enum

class NavigationDirection(Enum):
    """Week navigation steps."""
    PREV = "prev"
    NEXT = "next"


class ActivationKey(Enum):
    """Keys that activate a focused day header."""
    ENTER = "Enter"
    SPACE = " "
