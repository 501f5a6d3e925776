# File: booking_calendar/core/config_manager.py
"""
Centralized configuration management for the booking calendar.
Loads settings from environment variables and the optional .env file.
"""

import os
from pathlib import Path
from typing import List

import pytz
from dotenv import load_dotenv

from booking_calendar.utils.logger import setup_logger

# Load environment variables
load_dotenv()

logger = setup_logger(__name__)


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"{name}={raw!r} is not an integer, using {default}")
        return default


class Config:
    """Application configuration singleton."""

    # Base directories
    BASE_DIR = Path(__file__).parent.parent.parent  # Go up 3 levels from booking_calendar/core/

    OUTPUT_DIR = Path(os.getenv("OUTPUT_DIR", BASE_DIR / "output"))
    LOGS_DIR = Path(os.getenv("LOGS_DIR", BASE_DIR / "logs"))

    # Files
    BOOKINGS_FILE = Path(os.getenv("BOOKINGS_FILE", BASE_DIR / "data" / "bookings.json"))
    VIEW_OUTPUT_FILE = OUTPUT_DIR / "week_view.json"
    ENV_FILE = BASE_DIR / ".env"

    # Visible hour range (inclusive)
    TIME_START = _env_int("CALENDAR_TIME_START", 8)
    TIME_END = _env_int("CALENDAR_TIME_END", 20)

    # Display settings
    TIMEZONE = os.getenv("CALENDAR_TIMEZONE", "UTC")
    DEFAULT_COLOR = os.getenv("CALENDAR_DEFAULT_COLOR", "hsl(var(--primary))")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Grid geometry: one hour-label column followed by seven day columns
    GRID_COLUMNS = 8
    OVERLAP_SHRINK = 0.9
    EVENT_INSET_PX = 4
    EVENT_MARGIN_PX = 8

    # Room palette, indexed by a hash of the room id
    ROOM_COLORS: List[str] = [
        "#3b82f6",  # Blue
        "#ef4444",  # Red
        "#10b981",  # Green
        "#f59e0b",  # Amber
        "#8b5cf6",  # Purple
        "#ec4899",  # Pink
        "#06b6d4",  # Cyan
        "#f97316",  # Orange
        "#14b8a6",  # Teal
        "#6366f1",  # Indigo
    ]

    # Navigation targets in the host application
    BOOKING_DETAIL_PATH = "/bookings/{booking_id}"
    NEW_BOOKING_PATH = "/bookings/new?date={date}"

    @classmethod
    def validate(cls) -> bool:
        """Validate that the calendar configuration is usable."""
        errors = []

        for name, value in (("CALENDAR_TIME_START", cls.TIME_START), ("CALENDAR_TIME_END", cls.TIME_END)):
            if not 0 <= value <= 23:
                errors.append(f"{name} must be between 0 and 23, got {value}")

        if cls.TIME_END < cls.TIME_START:
            errors.append(
                f"CALENDAR_TIME_END ({cls.TIME_END}) is before CALENDAR_TIME_START ({cls.TIME_START})"
            )

        if cls.TIMEZONE not in pytz.all_timezones_set:
            errors.append(f"Unknown timezone: {cls.TIMEZONE}")

        if errors:
            for error in errors:
                logger.error(f"Configuration Error: {error}")
            return False

        return True
