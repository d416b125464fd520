"""Shared pytest fixtures."""

import pytest
from loguru import logger

from vitae.contexts.reporting.positions import Position, Timeline


@pytest.fixture(autouse=True)
def reset_loguru():
    """Remove loguru sinks added during a test so they never outlive its streams."""
    yield
    logger.remove()


@pytest.fixture
def abc_timeline():
    """Three positions: A (2001), B (2003), C (2010)."""
    return Timeline(
        [
            Position(key="a", start_year=2001, name="A"),
            Position(key="b", start_year=2003, name="B"),
            Position(key="c", start_year=2010, name="C"),
        ]
    )


@pytest.fixture
def clean_env(monkeypatch):
    """Unset VITAE_* variables so settings resolve to defaults."""
    for variable in ("VITAE_CAPTION", "VITAE_LOG_LEVEL", "VITAE_LOG_DIR"):
        monkeypatch.delenv(variable, raising=False)
    monkeypatch.setattr("vitae.utils.settings.load_dotenv", lambda *args, **kwargs: False)
