"""Tests for the display precision estimator."""

from datetime import timedelta

import pytest

from yfclock.precision import DAY_PRECISION, Precision, second_ish_precision
from yfclock.util import DAY, SECOND


def test_day_precision_round_trips():
    """Test that a 24-hour day needs 5 digits, each worth 0.864 seconds."""
    precision = second_ish_precision(DAY)

    assert precision.digits == 5
    assert precision.quantum == timedelta(milliseconds=864)
    assert precision.quantum <= SECOND
    assert DAY / 10**precision.digits == precision.quantum


def test_day_precision_constant_matches_estimate():
    assert DAY_PRECISION == second_ish_precision(DAY)


def test_year_precision_for_common_and_leap_years():
    """Test that both year lengths need 8 digits, leap years ticking slower."""
    common = second_ish_precision(timedelta(days=365))
    leap = second_ish_precision(timedelta(days=366))

    assert common.digits == 8
    assert common.quantum == timedelta(microseconds=315360)
    assert leap.digits == 8
    assert leap.quantum == timedelta(microseconds=316224)
    assert leap.quantum > common.quantum


def test_precision_is_minimal():
    """Test that one fewer digit would tick slower than once per second."""
    for duration in (DAY, timedelta(days=365), timedelta(hours=1), timedelta(seconds=7)):
        precision = second_ish_precision(duration)
        assert precision.quantum <= SECOND
        if precision.digits:
            assert duration / 10 ** (precision.digits - 1) > SECOND


@pytest.mark.parametrize(
    "duration, digits",
    [
        (SECOND, 0),
        (timedelta(milliseconds=999), 0),
        (timedelta(seconds=10), 1),
        (timedelta(seconds=11), 2),
    ],
)
def test_precision_near_one_second(duration: timedelta, digits: int):
    assert second_ish_precision(duration).digits == digits


def test_precision_rejects_non_positive_duration():
    with pytest.raises(ValueError, match="positive"):
        second_ish_precision(timedelta(0))

    with pytest.raises(ValueError, match="positive"):
        second_ish_precision(-DAY)


def test_precision_rejects_negative_digits():
    with pytest.raises(ValueError, match="digits"):
        Precision(digits=-1, quantum=SECOND)
