import datetime
import logging
import re

import pytz

from .errors import MalformedTimeError

MINUTES_PER_DAY = 24 * 60

# GTFS times: hours may run past 23 for trips that finish after midnight
GTFS_TIME_PATTERN = re.compile(r'^(\d{1,3}):([0-5]\d)(?::([0-5]\d))?$')


def parse_gtfs_time(time_str) -> int:
    """
    Parse an "HH:MM" or "HH:MM:SS" schedule time into minutes since
    midnight of the service day. Seconds are dropped.

    "25:10" parses to 1510, i.e. 01:10 on the following calendar day.

    Raises:
        MalformedTimeError: If the string is not a schedule time.
    """
    if not isinstance(time_str, str):
        raise MalformedTimeError(time_str)
    match = GTFS_TIME_PATTERN.match(time_str.strip())
    if not match:
        raise MalformedTimeError(time_str)
    hours, minutes = int(match.group(1)), int(match.group(2))
    return hours * 60 + minutes


def minutes_between(start_minutes: int, end_minutes: int) -> int:
    """
    Minutes from start to end. An end earlier than the start is read as
    falling on the next day, so the result is never negative.
    """
    diff = end_minutes - start_minutes
    if diff < 0:
        diff += MINUTES_PER_DAY
    return diff


def format_minutes(total_minutes: int) -> str:
    """Format minutes since midnight back into "HH:MM" (hours may exceed 23)."""
    return f"{total_minutes // 60:02d}:{total_minutes % 60:02d}"


def format_time_12h(time_str) -> str:
    """Format a schedule time for display, e.g. "08:10:00" -> "8:10 AM"."""
    try:
        total = parse_gtfs_time(time_str)
    except MalformedTimeError:
        return "N/A"
    hour = (total // 60) % 24
    minute = total % 60
    if hour == 0:
        return f"12:{minute:02d} AM"
    if hour < 12:
        return f"{hour}:{minute:02d} AM"
    if hour == 12:
        return f"12:{minute:02d} PM"
    return f"{hour - 12}:{minute:02d} PM"


def format_duration(minutes) -> str:
    hours, mins = divmod(int(minutes), 60)
    if hours > 0:
        return f"{hours}h {mins}m"
    return f"{mins}m"


def current_time(tz_name: str) -> str:
    """Current wall-clock time in the given timezone as "HH:MM"."""
    try:
        tz = pytz.timezone(tz_name)
    except pytz.UnknownTimeZoneError:
        logging.warning(f"Unknown timezone '{tz_name}', falling back to UTC")
        tz = pytz.utc
    now = datetime.datetime.now(tz)
    return now.strftime("%H:%M")
