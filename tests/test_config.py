"""Tests for runtime settings."""

import pytest

from stardate_converter.config import EPOCH_YEAR, UNITS_PER_YEAR, Settings


def test_formula_constants():
    assert EPOCH_YEAR == 2323
    assert UNITS_PER_YEAR == 1000


def test_defaults_from_empty_environment():
    assert Settings.from_env({}) == Settings(mode="auto", log_level="WARNING")


def test_values_are_normalised():
    settings = Settings.from_env({"STARDATE_MODE": " CLI ", "STARDATE_LOG_LEVEL": "debug"})
    assert settings == Settings(mode="cli", log_level="DEBUG")


def test_blank_values_fall_back_to_defaults():
    assert Settings.from_env({"STARDATE_MODE": "", "STARDATE_LOG_LEVEL": " "}) == Settings()


@pytest.mark.parametrize(
    "environ",
    [{"STARDATE_MODE": "web"}, {"STARDATE_LOG_LEVEL": "chatty"}],
)
def test_unknown_values_are_rejected(environ):
    with pytest.raises(ValueError):
        Settings.from_env(environ)


def test_override_prefers_command_line():
    settings = Settings(mode="gui", log_level="ERROR").override(mode="cli", log_level="info")
    assert settings == Settings(mode="cli", log_level="INFO")


def test_override_keeps_unset_values():
    settings = Settings(mode="gui", log_level="ERROR")
    assert settings.override() == settings
