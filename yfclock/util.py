"""Utility constants for yfclock.

Durations are ``timedelta`` values so they can be added to and subtracted
from timezone-aware datetimes directly.
"""

from datetime import timedelta

# Time unit constants
SECOND = timedelta(seconds=1)
DAY = timedelta(days=1)

# Leap seconds are not modeled, so every day is exactly 24 hours
DAY_DURATION = DAY
