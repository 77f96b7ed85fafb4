# ============================================================================
# FILE: tests/unit/test_configuration.py
# ============================================================================
"""
Unit tests for settings loading
"""

import pytest
from pydantic import ValidationError

from medicine_burden.config import (
    base_settings,
    logging_settings,
    resolver_settings,
    threshold_settings,
)
from medicine_burden.config.resolver_config import ResolverSettings
from medicine_burden.config.thresholds_config import ThresholdSettings


def test_defaults_loaded():
    """Global settings instances load with sane defaults"""
    assert base_settings.APP_NAME == "Medicine Burden Visualizer"
    assert "http://localhost:3000" in base_settings.CORS_ORIGINS
    assert resolver_settings.OPENROUTER_BASE_URL.startswith("https://")
    assert resolver_settings.RESOLVER_TEMPERATURE == 0.0
    assert logging_settings.LOG_LEVEL


def test_threshold_defaults():
    assert threshold_settings.ACCEPT_CONFIDENCE_THRESHOLD == 0.70
    assert threshold_settings.VERIFY_CONFIDENCE_THRESHOLD == 0.40


def test_thresholds_must_be_ordered():
    with pytest.raises(ValidationError):
        ThresholdSettings(ACCEPT_CONFIDENCE_THRESHOLD=0.3, VERIFY_CONFIDENCE_THRESHOLD=0.5)


def test_thresholds_bounded():
    with pytest.raises(ValidationError):
        ThresholdSettings(ACCEPT_CONFIDENCE_THRESHOLD=1.5)


def test_resolver_settings_from_environment(monkeypatch):
    monkeypatch.setenv("OPENROUTER_API_KEY", "sk-or-env")
    monkeypatch.setenv("OPENROUTER_MODEL", "some/other-model")
    monkeypatch.setenv("RESOLVER_TIMEOUT", "15")

    settings = ResolverSettings()

    assert settings.OPENROUTER_API_KEY == "sk-or-env"
    assert settings.OPENROUTER_MODEL == "some/other-model"
    assert settings.RESOLVER_TIMEOUT == 15


def test_resolver_timeout_positive():
    with pytest.raises(ValidationError):
        ResolverSettings(RESOLVER_TIMEOUT=0)
