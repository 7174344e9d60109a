"""Cooperative polling loop that keeps the clock line up to date."""

import logging
import time
from collections.abc import Callable

from yfclock.core import YearFractionClock
from yfclock.display import LineDisplay
from yfclock.sources import InstantSource

logger = logging.getLogger(__name__)


def run(
    clock: YearFractionClock,
    source: InstantSource,
    display: LineDisplay,
    sleep: Callable[[float], None] = time.sleep,
    max_samples: int | None = None,
) -> int:
    """Sample the clock forever, redrawing only when the text changes.

    The wait between samples is the clock's current ``sample_delay()``, so
    polling slows down or speeds up as the displayed precision changes.

    Args:
        clock: Engine to read from
        source: Supplies the instant for each sample
        display: Receives changed readings
        sleep: Blocking wait, in seconds
        max_samples: Stop after this many samples (unbounded when None)

    Returns:
        Number of samples taken
    """
    last_text: str | None = None
    samples = 0
    logger.info("Clock loop started")
    while max_samples is None or samples < max_samples:
        sample = clock.sample(source.now())
        samples += 1
        if sample.text != last_text:
            display.show(sample.text)
            last_text = sample.text
        sleep(sample.delay.total_seconds())
    logger.info("Clock loop stopped after %d samples", samples)
    return samples
