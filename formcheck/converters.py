"""
Formcheck Converters

Value normalization helpers used by the time, coordinate, date and numeric checks.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import math
import re

from datetime import date, datetime, time, timezone
from decimal import Decimal, InvalidOperation
from typing import Any, Literal

# Local ----------------------------------------------------------------------------------------------------------------
from .tools import fmt_type, fmt_value


# Constants ------------------------------------------------------------------------------------------------------------

_TIME_12H = re.compile(r"(\d{1,2}):(\d{2})(?::(\d{2}))?\s*([AaPp][Mm])", re.ASCII)


# Methods --------------------------------------------------------------------------------------------------------------

def to_24_hour(time12h: str) -> str:
    """
    Normalize a 12-hour clock string to a zero-padded 24-hour one.

    Hour 12 maps to 00 first, then 12 is added for PM: "12:xx AM" becomes "00:xx" and
    "12:xx PM" stays "12:xx". The meridiem is case-insensitive and may follow the clock
    value with or without whitespace. Seconds are kept when present.

    Raises:
        TypeError: If time12h is not a string.
        ValueError: If time12h is not in "H:MM[:SS] AM|PM" form.

    Examples:
        >>> to_24_hour("9:05 AM")
        '09:05'
        >>> to_24_hour("12:30:15 am")
        '00:30:15'
        >>> to_24_hour("1:45 PM")
        '13:45'
    """
    if not isinstance(time12h, str):
        raise TypeError(f"time must be a string, got {fmt_type(time12h)}")

    m = _TIME_12H.fullmatch(time12h.strip())
    if not m:
        raise ValueError(f"invalid 12-hour time format: {fmt_value(time12h)}")

    hours_str, minutes, seconds, meridiem = m.groups()
    hours = int(hours_str)
    if hours == 12:
        hours = 0
    if meridiem.upper() == "PM":
        hours += 12

    result = f"{hours:02d}:{minutes}"
    if seconds is not None:
        result += f":{seconds}"
    return result


def to_dms(decimal: float, axis: Literal["lat", "lng"]) -> str:
    """
    Render a decimal degree as degrees, minutes and seconds.

    Seconds are rendered with two decimal places. The direction letter comes from the
    sign and the axis: N/S for latitude, E/W for longitude; zero counts as positive.

    Examples:
        >>> to_dms(45.123456, "lat")
        '45°7\\'24.44"N'
        >>> to_dms(-122.654321, "lng")
        '122°39\\'15.56"W'
    """
    if axis not in ("lat", "lng"):
        raise ValueError(f"axis must be 'lat' or 'lng', got {fmt_value(axis)}")

    absolute = abs(decimal)
    degrees = math.floor(absolute)
    minutes_full = (absolute - degrees) * 60
    minutes = math.floor(minutes_full)
    seconds = (minutes_full - minutes) * 60

    if axis == "lat":
        direction = "N" if decimal >= 0 else "S"
    else:
        direction = "E" if decimal >= 0 else "W"

    return f"{degrees}°{minutes}'{seconds:.2f}\"{direction}"


def decimal_places(value: float | int | Decimal) -> int:
    """
    Count fractional digits of the shortest decimal string representing value.

    Trailing zeros do not count, so 2.50 and 5.0 have 1 and 0 places respectively.

    Examples:
        >>> decimal_places(0.1)
        1
        >>> decimal_places(12.345)
        3
        >>> decimal_places(100)
        0
    """
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        raise TypeError(f"value must be a number, got {fmt_type(value)}")

    try:
        exponent = Decimal(repr(value) if isinstance(value, float) else value).normalize().as_tuple().exponent
    except InvalidOperation as e:
        raise ValueError(f"cannot count decimal places of {fmt_value(value)}") from e

    if not isinstance(exponent, int):
        # NaN and infinities
        return 0
    return max(0, -exponent)


def to_datetime(value: Any, fmt: str | None = None) -> datetime | None:
    """
    Coerce a date-like value into a timezone-aware datetime.

    Accepts datetime, date (midnight) and strings, parsed with fmt when given or as
    ISO 8601 otherwise. Naive values are interpreted in local time.

    Returns:
        The aware datetime, or None when value cannot be interpreted as a date or
        falls outside the local time range.

    Examples:
        >>> to_datetime("2024-02-30") is None
        True
        >>> to_datetime("2024-01-15T10:00:00Z").isoformat()
        '2024-01-15T10:00:00+00:00'
    """
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, date):
        dt = datetime.combine(value, time())
    elif isinstance(value, str):
        text = value.strip()
        try:
            dt = datetime.strptime(text, fmt) if fmt else datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None

    try:
        local = dt.astimezone()
    except (OverflowError, OSError):
        # Out of the platform's local time range
        return None
    return local if dt.tzinfo is None else dt


def resolve_now(now: Any = None) -> datetime:
    """
    Return the reference instant as an aware datetime, defaulting to the current time.

    Raises:
        ValueError: If now is given but cannot be interpreted as a date.
    """
    if now is None:
        return datetime.now(timezone.utc)

    dt = to_datetime(now)
    if dt is None:
        raise ValueError(f"now must be a date, datetime or ISO 8601 string, got {fmt_value(now)}")
    return dt
