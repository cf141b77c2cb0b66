"""
Datetime utilities for grid snapping and business-day arithmetic.

Snapping and business-day helpers preserve the tzinfo of their input;
callers resolve timezones before handing instants to the engine.
"""

from datetime import date, datetime, time, timedelta

SATURDAY = 5
SUNDAY = 6


def snap_to_minutes(dt: datetime, step: int = 15) -> datetime:
    """
    Round the minute component to the nearest multiple of ``step``.

    Halves round up, and 60 rolls over into the next hour. Seconds and
    microseconds are discarded before rounding.

    Example:
        >>> snap_to_minutes(datetime(2024, 1, 20, 9, 7))
        datetime(2024, 1, 20, 9, 0)
        >>> snap_to_minutes(datetime(2024, 1, 20, 9, 53))
        datetime(2024, 1, 20, 10, 0)
    """
    rounded = ((2 * dt.minute + step) // (2 * step)) * step
    hour_start = dt.replace(minute=0, second=0, microsecond=0)
    return hour_start + timedelta(minutes=rounded)


def next_business_day(day: date) -> date:
    """
    Return the first weekday strictly after ``day``.

    Friday and Saturday both land on Monday, Sunday lands on Monday.
    """
    candidate = day + timedelta(days=1)
    if candidate.weekday() == SATURDAY:
        candidate += timedelta(days=2)
    elif candidate.weekday() == SUNDAY:
        candidate += timedelta(days=1)
    return candidate


def at_hour(day: date, hour: int, tzinfo=None) -> datetime:
    """Combine a calendar day with a whole hour, keeping the given tzinfo."""
    return datetime.combine(day, time(hour=hour), tzinfo=tzinfo)
