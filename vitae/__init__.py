"""
vitae - Position history and experience reporter

Prints a fixed, built-in list of job positions, oldest first, and the total
years of professional experience up to the current year.

Architecture:
- Reporting Context: position timeline, year spans and report output
- Utils: logging setup, settings resolution, text report formatting
"""

__version__ = "0.1.0"
