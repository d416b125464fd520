"""
Current-year lookup from the local system clock.
"""

import time
from typing import Callable, Optional

from vitae.contexts.reporting.exceptions import ClockError

CLOCK_ERROR_MESSAGE = "Failed to retrieve local time."


def current_year(now: Optional[Callable[[], float]] = None) -> int:
    """
    Get the current calendar year from local time.

    Args:
        now: Optional callable returning a POSIX timestamp (defaults to time.time)

    Returns:
        Current local year (e.g., 2025)

    Raises:
        ClockError: If the clock cannot be read or converted to local time
    """
    try:
        timestamp = (now or time.time)()
        return time.localtime(timestamp).tm_year
    except (OverflowError, OSError, ValueError) as e:
        raise ClockError(CLOCK_ERROR_MESSAGE, original_error=e) from e
