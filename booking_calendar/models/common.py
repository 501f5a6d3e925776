# File: booking_calendar/models/common.py

from datetime import date, datetime
from typing import Optional, Union

def parse_iso_datetime(value: Union[str, datetime, None]) -> Optional[datetime]:
    """Robustly parse ISO date strings with 'Z' or offsets."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    try:
        # fromisoformat only accepts the 'Z' suffix from Python 3.11
        return datetime.fromisoformat(str(value).replace('Z', '+00:00'))
    except ValueError:
        try:
            return datetime.strptime(str(value), "%Y-%m-%d")
        except ValueError:
            return None


def format_number(value: float) -> str:
    """Render a float the way a browser prints it: 25.0 -> '25', 12.5 -> '12.5'."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)
