"""
Tests for objaide/config/settings.py

**Testing philosophy**: settings are read from the process environment, so
each test sets the variables it needs with monkeypatch and starts from a reset
singleton (see conftest.py).
"""

from unittest.mock import patch

import pytest

from objaide.config import settings as settings_module
from objaide.config.settings import (
    ENV_PATH,
    ObjaideSettings,
    get_settings,
    parse_bool,
    reset_settings,
)


def test_defaults():
    """Test that validation is enabled by default."""
    assert ObjaideSettings().validate_arguments is True


def test_from_env_defaults_when_unset(monkeypatch):
    """Test that a missing variable falls back to the default."""
    monkeypatch.delenv("OBJAIDE_VALIDATE_ARGUMENTS", raising=False)
    assert ObjaideSettings.from_env().validate_arguments is True


@pytest.mark.parametrize("raw", ["false", "0", "NO", " off "])
def test_from_env_reads_false_values(monkeypatch, raw):
    """Test the accepted spellings of false."""
    monkeypatch.setenv("OBJAIDE_VALIDATE_ARGUMENTS", raw)
    assert ObjaideSettings.from_env().validate_arguments is False


def test_from_env_rejects_garbage(monkeypatch):
    """Test that an unrecognised value fails fast with the variable name."""
    monkeypatch.setenv("OBJAIDE_VALIDATE_ARGUMENTS", "maybe")
    with pytest.raises(ValueError, match="OBJAIDE_VALIDATE_ARGUMENTS"):
        ObjaideSettings.from_env()


def test_post_init_rejects_non_bool():
    """Test that the dataclass validates its field type."""
    with pytest.raises(ValueError, match="validate_arguments"):
        ObjaideSettings(validate_arguments="yes")


def test_parse_bool_true_values():
    """Test the accepted spellings of true."""
    for raw in ["1", "true", "Yes", "ON"]:
        assert parse_bool("X", raw) is True


def test_get_settings_caches_until_reset(monkeypatch):
    """Test singleton caching and reset."""
    monkeypatch.setenv("OBJAIDE_VALIDATE_ARGUMENTS", "true")
    first = get_settings()
    assert get_settings() is first

    monkeypatch.setenv("OBJAIDE_VALIDATE_ARGUMENTS", "false")
    assert get_settings().validate_arguments is True

    reset_settings()
    assert get_settings().validate_arguments is False


def test_dotenv_loaded_by_from_env_not_on_import():
    """Test that the .env file is read when settings load, from the project root."""
    with patch.object(settings_module, "load_dotenv") as load:
        reset_settings()
        load.assert_not_called()

        get_settings()
        load.assert_called_once_with(dotenv_path=ENV_PATH)
