"""Tests covering the package settings and environment presets."""

import pytest

from domix_problem.config.settings import (
    ENVIRONMENT_DEFAULTS,
    Environment,
    get_settings,
    load_settings,
)


def test_environment_defaults_provide_expected_overrides() -> None:
    """Environment presets should adjust the log level per tier."""
    assert ENVIRONMENT_DEFAULTS[Environment.DEV]["logging"]["level"] == "DEBUG"
    assert ENVIRONMENT_DEFAULTS[Environment.PROD]["logging"]["level"] == "WARNING"


def test_environment_enum_covers_supported_values() -> None:
    """`Environment` enum should expose the supported deployment tiers."""
    assert {env.value for env in Environment} == {"dev", "staging", "prod"}


def test_load_settings_applies_environment_preset(monkeypatch) -> None:
    monkeypatch.delenv("PROBLEM_LOGGING__LEVEL", raising=False)
    settings = load_settings("staging")
    assert settings.environment is Environment.STAGING
    assert settings.logging.level == "INFO"
    assert "password" in settings.logging.scrub_fields


def test_explicit_environment_variables_win_over_presets(monkeypatch) -> None:
    monkeypatch.setenv("PROBLEM_LOGGING__LEVEL", "ERROR")
    settings = load_settings("prod")
    assert settings.logging.level == "ERROR"


def test_get_settings_reads_environment_name(monkeypatch) -> None:
    monkeypatch.setenv("PROBLEM_ENV", "prod")
    monkeypatch.delenv("PROBLEM_LOGGING__LEVEL", raising=False)
    settings = get_settings()
    assert settings.environment is Environment.PROD
    assert settings.logging.level == "WARNING"
    assert get_settings() is settings


def test_load_settings_rejects_unknown_environment() -> None:
    with pytest.raises(ValueError):
        load_settings("qa")
