"""
Settings resolution for vitae.

Builds a read-only OmegaConf config from the built-in defaults, environment
variables (a local .env file is honored) and explicit overrides, applied in
that order.

Examples:
    >>> settings = load_settings()
    >>> settings.report.caption
    'years of professional experience'

    >>> load_settings({"logging": {"level": "DEBUG"}}).logging.level
    'DEBUG'
"""

import os
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from omegaconf import DictConfig, OmegaConf

from vitae.contexts.reporting.defaults import ENV_SETTINGS, get_default_settings


def settings_from_environment() -> Dict[str, Any]:
    """
    Collect settings from VITAE_* environment variables.

    Unset and empty variables are skipped so they never mask a default.

    Returns:
        Nested dict containing only the keys present in the environment
    """
    load_dotenv()

    env_conf = OmegaConf.create()
    for variable, key in ENV_SETTINGS.items():
        value = os.getenv(variable)
        if value:
            OmegaConf.update(env_conf, key, value)

    return OmegaConf.to_container(env_conf)


def load_settings(overrides: Optional[Dict[str, Any]] = None) -> DictConfig:
    """
    Load settings: defaults, then environment, then overrides.

    Args:
        overrides: Optional nested dict applied last

    Returns:
        Read-only DictConfig
    """
    settings = OmegaConf.merge(
        OmegaConf.create(get_default_settings()),
        settings_from_environment(),
        overrides or {},
    )
    OmegaConf.set_readonly(settings, True)
    return settings
