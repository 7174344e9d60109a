from dataclasses import dataclass
from datetime import datetime, timedelta, tzinfo

from yfclock.bounds import day_bounds, day_ordinal, days_in_year, year_bounds
from yfclock.precision import Precision, second_ish_precision


@dataclass(frozen=True, kw_only=True)
class YearContext:
    """Cached start, length and display precision of one calendar year."""

    year: int
    start: datetime
    duration: timedelta
    precision: Precision

    @classmethod
    def containing(cls, instant: datetime) -> "YearContext":
        start, duration = year_bounds(instant)
        return cls(
            year=instant.year,
            start=start,
            duration=duration,
            precision=second_ish_precision(duration),
        )

    @property
    def days(self) -> int:
        return days_in_year(self.duration)

    def matches(self, instant: datetime) -> bool:
        # A new UTC offset (e.g. a DST change) moves Jan 1 00:00, so it invalidates too
        return (
            instant.year == self.year
            and instant.utcoffset() == self.start.utcoffset()
        )


@dataclass(frozen=True, kw_only=True)
class DayContext:
    """Cached start of one calendar day, labelled by year and 0-based ordinal."""

    year: int
    ordinal: int
    start: datetime

    @classmethod
    def containing(cls, instant: datetime) -> "DayContext":
        start, _ = day_bounds(instant)
        return cls(year=instant.year, ordinal=day_ordinal(instant), start=start)

    def matches(self, instant: datetime) -> bool:
        # Compare labels, not fractions, so boundaries never depend on float equality
        return (
            instant.year == self.year
            and day_ordinal(instant) == self.ordinal
            and instant.utcoffset() == self.start.utcoffset()
        )

    def __str__(self) -> str:
        return f"DayContext({self.year}/{self.ordinal}, from {self.start.isoformat()})"


@dataclass(frozen=True, kw_only=True)
class Basis:
    """Absolute readings captured once and subtracted from later readings."""

    year_value: float
    day_value: float
    tz: tzinfo
