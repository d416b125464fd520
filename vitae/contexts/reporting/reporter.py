"""
Resume Reporter

Prints the position history, oldest first, followed by the total years of
professional experience up to the current year. Output in 2026:

    2001-2003: Babylon Software
    2003-2010: CS, Virtual-Reality Dpt
    2010-2012: Diginext (CS Group);
    2012-    : CS, Space Dpt
    25 years of professional experience

The spans telescope, so the total is always current year minus the first
start year.
"""

import sys
from dataclasses import dataclass
from typing import Callable, List, Optional, TextIO

from vitae.contexts.reporting.clock import current_year
from vitae.contexts.reporting.defaults import DEFAULT_CAPTION, YEAR_WIDTH
from vitae.contexts.reporting.exceptions import ClockError
from vitae.contexts.reporting.logger import (
    _log_debug,
    _log_warning,
    log_report_result,
    log_report_start,
)
from vitae.contexts.reporting.positions import POSITIONS, Position, Timeline
from vitae.utils.report_formatter import Column, ReportFormatter


@dataclass
class ReportResult:
    """
    Result of a report run.

    Attributes:
        success: Whether the report was printed
        total_years: Total years of experience (None if failed)
        current_year: Year used as the end of the current position (None if failed)
        error: Error description (None if succeeded)
    """

    success: bool
    total_years: Optional[int] = None
    current_year: Optional[int] = None
    error: Optional[str] = None


class ResumeReporter:
    """Formats and prints a position timeline with its total years."""

    def __init__(
        self,
        timeline: Timeline = POSITIONS,
        caption: str = DEFAULT_CAPTION,
        year_source: Callable[[], int] = current_year,
    ):
        """
        Args:
            timeline: Positions to report, oldest first
            caption: Text following the total on the summary line
            year_source: Callable returning the current year (may raise ClockError)
        """
        self.timeline = timeline
        self.caption = caption
        self.year_source = year_source
        self._end_column = Column(width=YEAR_WIDTH, align=">")

    def format_position(self, position: Position) -> str:
        """
        Format one position line.

        The end year is right-aligned in a 4-character field and left blank
        for the current position.
        """
        end = self._end_column.format_value(self.timeline.end_year(position))
        return f"{position.start_year}-{end}: {position.name}"

    def position_lines(self) -> List[str]:
        """Lines for every position, oldest first. Independent of the current year."""
        return [self.format_position(position) for position in self.timeline]

    def summary_line(self, total_years: int) -> str:
        return f"{total_years} {self.caption}"

    def render(self, year: int) -> str:
        """
        Render the full report for a given current year.

        Args:
            year: Year used as the end of the current position

        Returns:
            Report text, one line per position plus the summary line
        """
        return self._render_total(self.timeline.total_years(year))

    def _render_total(self, total_years: int) -> str:
        return (
            ReportFormatter()
            .add_lines(self.position_lines())
            .add_summary(self.summary_line(total_years))
            .render()
        )

    def report(self, stream: Optional[TextIO] = None) -> int:
        """
        Print the report and return the total years.

        The clock is read before anything is written, so a ClockError leaves
        the stream untouched.

        Args:
            stream: Output stream (defaults to sys.stdout)

        Returns:
            Total years of experience

        Raises:
            ClockError: If the current year cannot be determined
        """
        return self.write_report(self.year_source(), stream)

    def write_report(self, year: int, stream: Optional[TextIO] = None) -> int:
        """Print the report for a known current year and return the total years."""
        log_report_start(len(self.timeline), year)

        last = self.timeline.last()
        if year < last.start_year:
            _log_warning(
                f"Current year {year} is before the start of '{last.key}' ({last.start_year})"
            )

        total = self.timeline.total_years(year)

        out = stream if stream is not None else sys.stdout
        out.write(self._render_total(total))
        out.flush()

        return total


def run_report(reporter: ResumeReporter, stream: Optional[TextIO] = None) -> ReportResult:
    """
    Run a report, turning a clock failure into a failed result.

    Args:
        reporter: Configured ResumeReporter
        stream: Output stream (defaults to sys.stdout)

    Returns:
        ReportResult with success status and totals
    """
    try:
        year = reporter.year_source()
    except ClockError as e:
        result = ReportResult(success=False, error=str(e))
        if e.original_error is not None:
            _log_debug(f"  Cause: {e.original_error!r}")
    else:
        total = reporter.write_report(year, stream)
        result = ReportResult(success=True, total_years=total, current_year=year)

    log_report_result(result)
    return result
