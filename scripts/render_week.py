"""
Week calendar entry point.
Lays out one week of bookings and writes the computed view as JSON.

Usage:
    python scripts/render_week.py bookings.json --date 2025-03-05 --room r1
"""

import argparse
import datetime
import sys
import time
from pathlib import Path

# Add project root to Python path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from booking_calendar.core.config_manager import Config
from booking_calendar.core.orchestrator import CalendarOrchestrator
from booking_calendar.models import CalendarSettings
from booking_calendar.utils.logger import setup_logger

logger = setup_logger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render a week of room bookings")
    parser.add_argument("bookings", nargs="?", type=Path, default=Config.BOOKINGS_FILE,
                        help="JSON file with the bookings (default: %(default)s)")
    parser.add_argument("--date", type=datetime.date.fromisoformat, default=None,
                        help="Any date in the week to show, YYYY-MM-DD (default: today)")
    parser.add_argument("--building", default=None, help="Only show this building id")
    parser.add_argument("--room", default=None, help="Only show this room id")
    parser.add_argument("--start", type=int, default=Config.TIME_START, help="First visible hour")
    parser.add_argument("--end", type=int, default=Config.TIME_END, help="Last visible hour")
    parser.add_argument("--timezone", default=Config.TIMEZONE, help="Display timezone")
    parser.add_argument("--output", type=Path, default=Config.VIEW_OUTPUT_FILE,
                        help="Where to write the view JSON (default: %(default)s)")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """
    Main execution function.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    start_time = time.time()
    args = parse_args(argv)

    try:
        settings = CalendarSettings(
            time_start=args.start,
            time_end=args.end,
            timezone=args.timezone,
            default_color=Config.DEFAULT_COLOR,
        )
        orchestrator = CalendarOrchestrator(settings)
        success = orchestrator.run(
            bookings_file=args.bookings,
            output_file=args.output,
            reference_date=args.date,
            building_id=args.building,
            room_id=args.room,
        )
        return 0 if success else 1

    except FileNotFoundError as e:
        logger.error(f"Could not find: {e.filename}")
        return 1

    except ValueError as e:
        logger.error(f"Invalid input: {e}")
        return 1

    except KeyboardInterrupt:
        logger.warning("Rendering interrupted by user")
        return 1

    finally:
        elapsed = time.time() - start_time
        logger.info(f"Total execution time: {elapsed:.2f} seconds")


if __name__ == "__main__":
    sys.exit(main())
