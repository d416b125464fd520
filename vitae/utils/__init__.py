"""
Shared utilities for vitae.

Common functionality used across contexts:
- Logger setup
- Settings resolution
- Text report formatting
"""

from vitae.utils.report_formatter import Column, ReportFormatter
from vitae.utils.settings import load_settings

__all__ = ["Column", "ReportFormatter", "load_settings"]
