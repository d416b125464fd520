"""
Reporting Context

Responsibilities:
- Holds the built-in position history
- Derives end years and year spans
- Prints the position lines and the total years of experience

Owns: position timeline, report formatting, current-year lookup
Never: Reads positions from files, settings or the network
"""

from vitae.contexts.reporting.clock import current_year
from vitae.contexts.reporting.exceptions import ClockError, InvalidTimelineError
from vitae.contexts.reporting.positions import POSITIONS, Position, Timeline
from vitae.contexts.reporting.reporter import ReportResult, ResumeReporter, run_report

__all__ = [
    "ClockError",
    "InvalidTimelineError",
    "POSITIONS",
    "Position",
    "ReportResult",
    "ResumeReporter",
    "Timeline",
    "current_year",
    "run_report",
]
