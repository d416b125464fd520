"""
Default values for the reporting context.

Provides the summary caption and the settings tree that
vitae.utils.settings merges environment overrides into.
"""

from typing import Any, Dict

DEFAULT_CAPTION = "years of professional experience"

# Width of the year fields in a position line ("2001-2003: ...")
YEAR_WIDTH = 4

# Environment variable -> dotted settings key
ENV_SETTINGS = {
    "VITAE_CAPTION": "report.caption",
    "VITAE_LOG_LEVEL": "logging.level",
    "VITAE_LOG_DIR": "logging.dir",
}


def get_default_settings() -> Dict[str, Any]:
    """
    Get the complete default settings structure.

    Returns:
        Dict with report and logging settings; logging.dir is None (no log file)
    """
    return {
        "report": {
            "caption": DEFAULT_CAPTION,
        },
        "logging": {
            "level": "WARNING",
            "dir": None,
        },
    }
