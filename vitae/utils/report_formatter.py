"""
Utility functions for formatting fixed-width text reports.

Provides consistent column alignment for line-oriented reports.
"""

from typing import Any, List


class Column:
    """Column definition for fixed-width formatting."""

    def __init__(self, width: int, align: str = "<"):
        """
        Args:
            width: Column width in characters
            align: Alignment ('<' left, '>' right, '^' center)
        """
        self.width = width
        self.align = align

    def format_value(self, value: Any) -> str:
        """Format column value with alignment. None renders as blank padding."""
        if value is None:
            value = ""
        return f"{value:{self.align}{self.width}}"


class ReportFormatter:
    """Builder for line-based text reports."""

    def __init__(self):
        self.lines: List[str] = []

    def add_lines(self, lines: List[str]) -> "ReportFormatter":
        """
        Add several text lines in order.

        Returns:
            Self for method chaining
        """
        self.lines.extend(lines)
        return self

    def add_summary(self, text: str) -> "ReportFormatter":
        """
        Add summary line (typically after the data lines).

        Args:
            text: Summary text

        Returns:
            Self for method chaining
        """
        self.lines.append(text)
        return self

    def render(self) -> str:
        """
        Render accumulated lines to string, one line per entry.

        Returns:
            Formatted report string ending with a newline (empty if no lines)
        """
        if not self.lines:
            return ""
        return "\n".join(self.lines) + "\n"
