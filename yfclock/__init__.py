__version__ = "0.2.0"

from .bounds import day_bounds, day_ordinal, days_in_year, fraction_of, year_bounds
from .context import Basis, DayContext, YearContext
from .core import Sample, YearFractionClock
from .errors import (
    BasisAlreadySetError,
    CalendarRangeError,
    ClockStateError,
    InstantParseError,
    YfclockError,
)
from .parsing import parse_instant
from .precision import DAY_PRECISION, Precision, second_ish_precision
from .sources import FixedInstant, InstantSource, SystemClock

__all__ = [
    "year_bounds",
    "day_bounds",
    "day_ordinal",
    "days_in_year",
    "fraction_of",
    "second_ish_precision",
    "Precision",
    "DAY_PRECISION",
    "YearContext",
    "DayContext",
    "Basis",
    "YearFractionClock",
    "Sample",
    "InstantSource",
    "SystemClock",
    "FixedInstant",
    "parse_instant",
    "YfclockError",
    "CalendarRangeError",
    "InstantParseError",
    "ClockStateError",
    "BasisAlreadySetError",
]
