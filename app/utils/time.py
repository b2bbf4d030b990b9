"""Clock-time utilities (local HH:MM, minutes since midnight)."""

import re
from datetime import datetime
from zoneinfo import ZoneInfo

from app.config import settings

MINUTES_PER_HOUR = 60
MINUTES_PER_DAY = 24 * MINUTES_PER_HOUR

CLOCK_TIME_PATTERN = r"^([0-1]?[0-9]|2[0-3]):[0-5][0-9]$"
_CLOCK_TIME_RE = re.compile(CLOCK_TIME_PATTERN)

LOCAL_TZ = ZoneInfo(settings.TIMEZONE)


def parse_clock_time(value: str) -> int:
    """
    Parse an ``HH:MM`` 24h clock time into minutes since midnight (0-1439).

    Raises:
        ValueError: if the string is not a valid clock time
    """
    if not isinstance(value, str) or not _CLOCK_TIME_RE.fullmatch(value):
        raise ValueError(f"Invalid clock time {value!r}, expected HH:MM (00:00-23:59)")
    hour, minute = value.split(":")
    return int(hour) * MINUTES_PER_HOUR + int(minute)


def format_clock_time(minutes: int) -> str:
    """Format minutes since midnight as zero-padded ``HH:MM``, wrapping at 24h."""
    minutes %= MINUTES_PER_DAY
    return f"{minutes // MINUTES_PER_HOUR:02d}:{minutes % MINUTES_PER_HOUR:02d}"


def format_clock_display(minutes: int) -> str:
    """12h display label, e.g. 0 -> '12:00 AM', 810 -> '1:30 PM'."""
    minutes %= MINUTES_PER_DAY
    hour, minute = divmod(minutes, MINUTES_PER_HOUR)
    suffix = "AM" if hour < 12 else "PM"
    display_hour = hour % 12 or 12
    return f"{display_hour}:{minute:02d} {suffix}"


def minutes_until(start_minutes: int, end_minutes: int) -> int:
    """
    Forward wall-clock interval from start to end in minutes.

    When end is earlier in the day than start it is taken to be on the
    following day, so the result is always in [0, 1440).
    """
    elapsed = end_minutes - start_minutes
    if elapsed < 0:
        elapsed += MINUTES_PER_DAY
    return elapsed


def hour_of_day(minutes: int) -> int:
    return (minutes % MINUTES_PER_DAY) // MINUTES_PER_HOUR


def now_local_naive() -> datetime:
    """
    Current time in the configured zone, returned as naive datetime for DB storage.
    """
    return datetime.now(LOCAL_TZ).replace(tzinfo=None)


def to_local_iso_db(dt: datetime) -> str:
    """
    DB timestamps are stored as naive local time; attach the zone and
    return an ISO string with offset.
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=LOCAL_TZ)
    return dt.astimezone(LOCAL_TZ).isoformat()
