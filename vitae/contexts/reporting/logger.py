"""
Reporting context logger.

Provides logging interface for reporting context with automatic [report] prefix.
All reporting modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path
from typing import Optional

from loguru import logger
from omegaconf import DictConfig

from vitae.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[report]"


def setup_reporting_logger(settings: DictConfig) -> Optional[Path]:
    """
    Setup logger for reporting context.

    Args:
        settings: Settings from vitae.utils.settings.load_settings()

    Returns:
        Path to log file, or None if logging.dir is unset

    Example:
        from vitae.contexts.reporting.logger import setup_reporting_logger, _log_info

        log_file = setup_reporting_logger(load_settings())
        _log_info("Starting report...")
    """
    log_dir = settings.logging.dir
    return _setup_logger(
        context_name="report",
        log_dir=Path(log_dir) if log_dir else None,
        level=settings.logging.level,
        extra_provenance={"Caption": settings.report.caption},
    )


# Wrapper functions with automatic [report] prefix


def _log_info(message: str) -> None:
    """Log info message with [report] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [report] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [report] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [report] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level reporting-specific logging helpers


def log_report_start(position_count: int, current_year: int) -> None:
    """Log start of a report with context."""
    _log_info(f"Reporting {position_count} positions")
    _log_debug(f"  Current year: {current_year}")


def log_report_result(result) -> None:  # ReportResult
    """
    Log report result.

    Failures are logged at DEBUG: the CLI prints the one user-facing error line.

    Args:
        result: ReportResult from run_report()
    """
    if result.success:
        _log_success(f"Report complete: {result.total_years} years (as of {result.current_year})")
    else:
        _log_debug(f"Report failed: {result.error}")
