"""Custom exceptions for the reporting context."""

from typing import Optional


class ClockError(RuntimeError):
    """
    Exception raised when the current local date cannot be read.

    Attributes:
        message: Error description
        original_error: The underlying error from the time functions
    """

    def __init__(self, message: str, original_error: Optional[Exception] = None):
        self.message = message
        self.original_error = original_error
        super().__init__(message)


class InvalidTimelineError(ValueError):
    """
    Exception raised when a position table breaks the timeline rules.

    A timeline must be non-empty, strictly increasing by start year, with
    unique keys. The table is fixed in code, so this is a programming error
    and is never caught by the reporter.
    """

    pass
