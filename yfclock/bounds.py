"""Calendar arithmetic for year and day boundaries.

All functions take timezone-aware datetimes and work in the instant's own
UTC offset, frozen into a fixed ``timezone`` so that boundary arithmetic is
plain subtraction. Year lengths come from calendar subtraction, so leap
years yield 366-day durations without a lookup table.
"""

from datetime import datetime, timedelta, timezone

from yfclock.errors import CalendarRangeError
from yfclock.util import DAY, DAY_DURATION


def require_aware(instant: datetime) -> None:
    """Raise TypeError unless the instant carries a UTC offset."""
    if instant.tzinfo is None or instant.utcoffset() is None:
        raise TypeError(
            f"Instant must be a timezone-aware datetime.\n"
            f"Got naive datetime: {instant!r}\n"
            f"Hint: Add timezone info:\n"
            f"  dt = datetime(..., tzinfo=timezone.utc)\n"
            f"  # Or use the local offset:\n"
            f"  dt = datetime.now().astimezone()"
        )


def fixed_offset(instant: datetime) -> timezone:
    """Return the instant's current UTC offset as a fixed timezone."""
    require_aware(instant)
    offset = instant.utcoffset()
    assert offset is not None
    return timezone(offset)


def year_bounds(instant: datetime) -> tuple[datetime, timedelta]:
    """Return the start of the instant's year and the length of that year.

    The start is January 1 00:00:00 in the instant's offset; the length is
    the exact span to January 1 00:00:00 of the following year.

    Raises:
        TypeError: If the instant is naive
        CalendarRangeError: If the following January 1 is not representable
    """
    tz = fixed_offset(instant)
    year = instant.year
    try:
        start = datetime(year, 1, 1, tzinfo=tz)
        end = datetime(year + 1, 1, 1, tzinfo=tz)
    except ValueError as e:
        raise CalendarRangeError(
            f"Year {year} has no representable end boundary.\n"
            f"Supported years: 1 to 9998"
        ) from e
    return start, end - start


def day_bounds(instant: datetime) -> tuple[datetime, timedelta]:
    """Return midnight of the instant's calendar day and the day length."""
    tz = fixed_offset(instant)
    start = datetime(instant.year, instant.month, instant.day, tzinfo=tz)
    return start, DAY_DURATION


def day_ordinal(instant: datetime) -> int:
    """Return the 0-based day of the year (January 1 is day 0)."""
    return instant.timetuple().tm_yday - 1


def days_in_year(duration: timedelta) -> int:
    """Return the number of whole days in a year duration."""
    return duration // DAY


def fraction_of(instant: datetime, start: datetime, duration: timedelta) -> float:
    """Return how far ``instant`` is through ``[start, start + duration)``.

    The result is exactly 0.0 at ``start`` and stays below 1.0 for any
    instant inside the span.
    """
    return (instant - start) / duration
