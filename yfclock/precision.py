"""Display precision for a 0..1 fraction of a duration.

A fraction of a year shown with 8 decimal places changes roughly every
0.3 seconds; with 9 it would change faster than the eye could follow.
``second_ish_precision`` finds that cut-off for any duration.
"""

from dataclasses import dataclass
from datetime import timedelta

from yfclock.util import DAY_DURATION, SECOND


@dataclass(frozen=True, kw_only=True)
class Precision:
    """Digits worth showing for a fraction, and how long one last-digit step lasts."""

    digits: int
    quantum: timedelta

    def __post_init__(self) -> None:
        if self.digits < 0:
            raise ValueError(f"Precision digits must be >= 0, got {self.digits}")

    def __str__(self) -> str:
        return f"Precision({self.digits} digits, {self.quantum.total_seconds()}s)"


def second_ish_precision(duration: timedelta) -> Precision:
    """Return the digit count at which a fraction of ``duration`` ticks about once a second.

    Starting from zero digits, one more decimal place is added while one unit
    in the last place still spans more than a second. The returned quantum is
    ``duration / 10**digits`` computed in one step, so it round-trips exactly.

    Args:
        duration: Positive span the fraction is taken of

    Returns:
        Precision whose quantum is at most one second

    Raises:
        ValueError: If duration is not positive

    Example:
        >>> second_ish_precision(timedelta(days=1))
        Precision(digits=5, quantum=datetime.timedelta(microseconds=864000))
    """
    if duration <= timedelta(0):
        raise ValueError(f"duration must be positive, got {duration!r}")

    digits = 0
    while duration > SECOND * 10**digits:
        digits += 1
    return Precision(digits=digits, quantum=duration / 10**digits)


# Every day is 24 hours, so the day field's precision never changes
DAY_PRECISION = second_ish_precision(DAY_DURATION)
