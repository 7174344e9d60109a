"""Where instants come from.

The clock engine never reads the system time itself; the driver asks an
``InstantSource`` for each sample. Tests and one-shot mode swap in a
``FixedInstant``.
"""

from abc import ABC, abstractmethod
from datetime import datetime

from typing_extensions import override

from yfclock.bounds import require_aware


class InstantSource(ABC):

    @abstractmethod
    def now(self) -> datetime:
        """Return the current timezone-aware instant."""
        pass


class SystemClock(InstantSource):
    """Current system time in the local UTC offset."""

    @override
    def now(self) -> datetime:
        return datetime.now().astimezone()


class FixedInstant(InstantSource):
    """Always returns the same instant."""

    def __init__(self, instant: datetime):
        require_aware(instant)
        self.instant: datetime = instant

    @override
    def now(self) -> datetime:
        return self.instant
