"""Turn user-supplied date/time text into timezone-aware instants.

Backed by python-dateutil's parser, so ISO 8601 strings as well as looser
forms like ``"Jan 5 2021 3pm"`` are accepted. Text without an offset is read
as local time; text without a time of day is read as local midnight. A
leading "yesterday", "today" or "tomorrow" picks the date relative to now.
"""

from datetime import datetime, time

from dateutil import parser
from dateutil.relativedelta import relativedelta

from yfclock.errors import InstantParseError
from yfclock.sources import InstantSource, SystemClock

_NOW = "now"

# Leading words that shift the default date, e.g. "tomorrow 8pm"
_RELATIVE_DAYS = {"yesterday": -1, "today": 0, "tomorrow": 1}


def parse_instant(text: str, source: InstantSource | None = None) -> datetime:
    """Parse ``text`` into a timezone-aware datetime.

    Args:
        text: Offset date-time, date-time without offset, bare date, "now",
              or a time optionally led by yesterday/today/tomorrow
        source: Supplies "now" and today's date for partial input
                (defaults to the system clock)

    Returns:
        Timezone-aware datetime

    Raises:
        InstantParseError: If the text is empty or not a recognizable date

    Example:
        >>> parse_instant("2020-12-31T23:59:59+00:00")
        datetime.datetime(2020, 12, 31, 23, 59, 59, tzinfo=tzutc())
        >>> parse_instant("2020-01-01").time()
        datetime.time(0, 0)
    """
    source = source or SystemClock()
    cleaned = text.strip()
    if not cleaned:
        raise InstantParseError(
            f"Empty date/time.\n"
            f"Examples: 2021-03-14, '2021-03-14 15:09', 2021-03-14T15:09:26+01:00"
        )
    if cleaned.lower() == _NOW:
        return source.now()

    day = source.now().date()
    head, _, rest = cleaned.partition(" ")
    if head.lower() in _RELATIVE_DAYS:
        day += relativedelta(days=_RELATIVE_DAYS[head.lower()])
        cleaned = rest.strip()

    default = datetime.combine(day, time.min)
    try:
        parsed = parser.parse(cleaned, default=default) if cleaned else default
    except (ValueError, OverflowError) as e:
        raise InstantParseError(
            f"Invalid date/time {text!r}: {e}\n"
            f"Examples: 2021-03-14, '2021-03-14 15:09', 2021-03-14T15:09:26+01:00"
        ) from e

    if parsed.tzinfo is None or parsed.utcoffset() is None:
        # Naive input is local wall time
        parsed = parsed.astimezone()
    return parsed
