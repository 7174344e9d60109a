"""The year-fraction clock engine.

``YearFractionClock`` turns instants into ``"<year fraction> <day fraction>"``
readings and tells the caller how long it may wait before the next reading
could differ. Year and day contexts are cached and only recomputed when an
instant's calendar label (year, or year and day ordinal, plus the
UTC offset) no longer matches.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta

from yfclock.bounds import fixed_offset, fraction_of, require_aware
from yfclock.context import Basis, DayContext, YearContext
from yfclock.errors import BasisAlreadySetError, ClockStateError
from yfclock.precision import DAY_PRECISION, Precision
from yfclock.util import DAY_DURATION

logger = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class Sample:
    """One formatted reading plus the delay until the next one is due."""

    text: str
    delay: timedelta


class YearFractionClock:
    """Stateful clock with lazily recomputed year and day contexts.

    Each context is invalidated independently: a new day refreshes only the
    day context, a new year refreshes both. Nothing is recomputed on a timer;
    the first reading after a boundary pays for the refresh.

    Example:
        >>> from datetime import timezone
        >>> clock = YearFractionClock()
        >>> clock.format(datetime(2021, 1, 1, tzinfo=timezone.utc))
        '2021.00000000 0.00000'
        >>> clock.sample_delay()
        datetime.timedelta(microseconds=157680)
    """

    def __init__(self) -> None:
        self._year: YearContext | None = None
        self._day: DayContext | None = None
        self._day_precision: Precision = DAY_PRECISION
        self._basis: Basis | None = None

    @property
    def basis(self) -> Basis | None:
        return self._basis

    @property
    def year_precision(self) -> Precision:
        return self._require_year().precision

    @property
    def day_precision(self) -> Precision:
        return self._day_precision

    def recalculate(self, instant: datetime) -> None:
        """Refresh whichever cached context no longer contains ``instant``."""
        instant = self._localize(instant)
        if self._year is None or not self._year.matches(instant):
            self._year = YearContext.containing(instant)
            logger.debug(
                "Year context %d: starts %s, lasts %s, %s",
                self._year.year,
                self._year.start.isoformat(),
                self._year.duration,
                self._year.precision,
            )
        if self._day is None or not self._day.matches(instant):
            self._day = DayContext.containing(instant)
            logger.debug("Day context refreshed: %s", self._day)

    def year_value(self, instant: datetime) -> float:
        """Return year number plus the elapsed fraction of that year.

        With a basis set, the basis reading is subtracted.
        """
        value = self._absolute_year_value(self._localize(instant))
        if self._basis is not None:
            value -= self._basis.year_value
        return value

    def day_value(self, instant: datetime) -> float:
        """Return the 0-based day of year plus the elapsed fraction of that day.

        With a basis set, the basis reading is subtracted; a negative result
        wraps by the current year's length in days.
        """
        value = self._absolute_day_value(self._localize(instant))
        if self._basis is not None:
            value -= self._basis.day_value
            if value < 0:
                value %= self._require_year().days
        return value

    def format(self, instant: datetime) -> str:
        # Both readings recalculate first, so the digit counts below are current
        year = self.year_value(instant)
        day = self.day_value(instant)
        year_digits = self._require_year().precision.digits
        day_digits = self._day_precision.digits
        return f"{year:.{year_digits}f} {day:.{day_digits}f}"

    def sample_delay(self) -> timedelta:
        """Return half the period of the faster-changing displayed digit.

        Only valid for the most recently recalculated context.

        Raises:
            ClockStateError: If no reading has been taken yet
        """
        year_quantum = self._require_year().precision.quantum
        return min(year_quantum, self._day_precision.quantum) / 2

    def sample(self, instant: datetime) -> Sample:
        text = self.format(instant)
        return Sample(text=text, delay=self.sample_delay())

    def set_basis(self, instant: datetime) -> Basis:
        """Subtract the readings at ``instant`` from every later reading.

        The instant's offset is kept, and later instants are read in that
        offset so both sides of the subtraction share one calendar.

        Raises:
            BasisAlreadySetError: If a basis was already set this session
        """
        if self._basis is not None:
            raise BasisAlreadySetError(
                f"Basis is already set (year {self._basis.year_value}, "
                f"day {self._basis.day_value}).\n"
                f"A basis can only be set once per clock; create a new "
                f"YearFractionClock to use a different one."
            )
        tz = fixed_offset(instant)
        instant = instant.astimezone(tz)
        self._basis = Basis(
            year_value=self._absolute_year_value(instant),
            day_value=self._absolute_day_value(instant),
            tz=tz,
        )
        logger.info(
            "Basis set at %s (year %r, day %r)",
            instant.isoformat(),
            self._basis.year_value,
            self._basis.day_value,
        )
        return self._basis

    def _localize(self, instant: datetime) -> datetime:
        require_aware(instant)
        if self._basis is not None:
            return instant.astimezone(self._basis.tz)
        return instant

    def _absolute_year_value(self, instant: datetime) -> float:
        self.recalculate(instant)
        ctx = self._require_year()
        return ctx.year + fraction_of(instant, ctx.start, ctx.duration)

    def _absolute_day_value(self, instant: datetime) -> float:
        self.recalculate(instant)
        assert self._day is not None
        ctx = self._day
        return ctx.ordinal + fraction_of(instant, ctx.start, DAY_DURATION)

    def _require_year(self) -> YearContext:
        if self._year is None:
            raise ClockStateError(
                f"No year context yet.\n"
                f"Hint: Take a reading first, e.g. clock.format(instant), "
                f"before asking for precision or sample_delay()."
            )
        return self._year
