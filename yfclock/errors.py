class YfclockError(Exception):
    """Base error."""


class CalendarRangeError(YfclockError, ValueError):
    """Raised when a year or day boundary falls outside the datetime range."""


class InstantParseError(YfclockError, ValueError):
    """Raised when a date/time string cannot be turned into an instant."""


class ClockStateError(YfclockError, RuntimeError):
    """Raised when the clock is used out of order."""


class BasisAlreadySetError(ClockStateError):
    """Raised when a basis is set a second time in one session."""
