"""Unit tests for current-year lookup."""

import time

import pytest

from vitae.contexts.reporting.clock import CLOCK_ERROR_MESSAGE, current_year
from vitae.contexts.reporting.exceptions import ClockError


@pytest.mark.unit
def test_current_year_matches_local_time():
    """Test the default clock returns the local year."""
    assert current_year() in (time.localtime().tm_year, time.localtime().tm_year + 1)


@pytest.mark.unit
def test_current_year_from_injected_clock():
    """Test the year is taken from the injected timestamp."""
    mid_2020 = time.mktime((2020, 6, 15, 12, 0, 0, 0, 0, -1))
    assert current_year(lambda: mid_2020) == 2020


@pytest.mark.unit
@pytest.mark.parametrize("error", [OSError("clock unavailable"), OverflowError("out of range")])
def test_clock_failure_raises_clock_error(error):
    """Test clock failures are wrapped in ClockError with the cause attached."""

    def failing_clock():
        raise error

    with pytest.raises(ClockError, match="Failed to retrieve local time") as exc_info:
        current_year(failing_clock)

    assert exc_info.value.original_error is error
    assert exc_info.value.__cause__ is error
    assert exc_info.value.message == CLOCK_ERROR_MESSAGE


@pytest.mark.unit
def test_unrepresentable_timestamp_raises_clock_error():
    """Test a timestamp localtime() cannot convert is reported as a clock failure."""
    with pytest.raises(ClockError):
        current_year(lambda: 1e300)
