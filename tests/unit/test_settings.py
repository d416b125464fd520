"""Unit tests for settings resolution."""

import pytest
from omegaconf.errors import ReadonlyConfigError

from vitae.contexts.reporting.defaults import DEFAULT_CAPTION
from vitae.utils.settings import load_settings, settings_from_environment


@pytest.mark.unit
def test_defaults(clean_env):
    """Test settings resolve to defaults with no environment."""
    settings = load_settings()
    assert settings.report.caption == DEFAULT_CAPTION
    assert settings.logging.level == "WARNING"
    assert settings.logging.dir is None


@pytest.mark.unit
def test_environment_overrides_defaults(clean_env, monkeypatch, tmp_path):
    """Test VITAE_* variables override defaults."""
    monkeypatch.setenv("VITAE_CAPTION", "years of professional C++ :)")
    monkeypatch.setenv("VITAE_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("VITAE_LOG_DIR", str(tmp_path))

    settings = load_settings()

    assert settings.report.caption == "years of professional C++ :)"
    assert settings.logging.level == "DEBUG"
    assert settings.logging.dir == str(tmp_path)


@pytest.mark.unit
def test_empty_environment_value_is_ignored(clean_env, monkeypatch):
    """Test an empty variable does not mask the default."""
    monkeypatch.setenv("VITAE_CAPTION", "")
    assert settings_from_environment() == {}
    assert load_settings().report.caption == DEFAULT_CAPTION


@pytest.mark.unit
def test_overrides_applied_last(clean_env, monkeypatch):
    """Test explicit overrides win over the environment."""
    monkeypatch.setenv("VITAE_LOG_LEVEL", "INFO")
    settings = load_settings({"logging": {"level": "ERROR"}})
    assert settings.logging.level == "ERROR"


@pytest.mark.unit
def test_settings_are_read_only(clean_env):
    """Test loaded settings cannot be modified."""
    settings = load_settings()
    with pytest.raises(ReadonlyConfigError):
        settings.report.caption = "changed"
