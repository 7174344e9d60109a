"""Tests for date/time text parsing."""

from datetime import date, datetime, timedelta, timezone

import pytest

from yfclock.errors import InstantParseError
from yfclock.parsing import parse_instant
from yfclock.sources import FixedInstant

NOW = FixedInstant(datetime(2021, 5, 5, 10, 30, tzinfo=timezone.utc))


def test_parse_full_offset_datetime():
    parsed = parse_instant("2020-12-31T23:59:59+00:00")

    assert parsed == datetime(2020, 12, 31, 23, 59, 59, tzinfo=timezone.utc)
    assert parsed.utcoffset() == timedelta(0)


def test_parse_keeps_non_utc_offset():
    parsed = parse_instant("2021-03-14T15:09:26+01:00")

    assert parsed.utcoffset() == timedelta(hours=1)
    assert (parsed.hour, parsed.minute, parsed.second) == (15, 9, 26)


def test_parse_datetime_without_offset_is_local():
    """Test that missing offsets are filled with the local offset."""
    parsed = parse_instant("2020-01-01 12:30")

    assert parsed.tzinfo is not None
    assert parsed.utcoffset() is not None
    assert (parsed.hour, parsed.minute) == (12, 30)


def test_parse_bare_date_is_local_midnight():
    parsed = parse_instant("2020-01-01")

    assert parsed.date() == date(2020, 1, 1)
    assert (parsed.hour, parsed.minute, parsed.second) == (0, 0, 0)
    assert parsed.utcoffset() is not None


def test_parse_time_only_uses_source_date():
    parsed = parse_instant("3pm", source=NOW)

    assert parsed.date() == date(2021, 5, 5)
    assert parsed.hour == 15


def test_parse_now_returns_source_instant():
    assert parse_instant(" NOW ", source=NOW) == NOW.now()


@pytest.mark.parametrize("text", ["not a date", "2021-13-45", "", "   "])
def test_parse_rejects_garbage(text: str):
    with pytest.raises(InstantParseError):
        parse_instant(text, source=NOW)


def test_parse_error_is_value_error():
    with pytest.raises(ValueError, match="Invalid date/time"):
        parse_instant("tomorrowish", source=NOW)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("yesterday", date(2021, 5, 4)),
        ("Today", date(2021, 5, 5)),
        ("tomorrow", date(2021, 5, 6)),
    ],
)
def test_parse_relative_day_is_local_midnight(text: str, expected: date):
    parsed = parse_instant(text, source=NOW)

    assert parsed.date() == expected
    assert (parsed.hour, parsed.minute) == (0, 0)
    assert parsed.utcoffset() is not None


def test_parse_relative_day_with_time():
    """Test that a time after the relative word lands on the shifted date."""
    parsed = parse_instant("tomorrow 8pm", source=NOW)

    assert parsed.date() == date(2021, 5, 6)
    assert parsed.hour == 20


def test_parse_relative_day_rejects_bad_time():
    with pytest.raises(InstantParseError, match="yesterday"):
        parse_instant("yesterday nonsense", source=NOW)
