"""Settings loading and startup validation."""

import pytest

from paint_analyzer.core.config import get_settings, validate_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    for name in (
        "ANALYSIS_DELAY_SECONDS",
        "SUGGESTION_HIDE_DELAY",
        "SESSION_TTL_SECONDS",
        "SESSION_MAX_COUNT",
        "RATE_LIMIT_ANALYSIS",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestValidateSettings:
    def test_defaults_are_valid(self):
        validate_settings()
        settings = get_settings()
        assert settings.analysis_delay_seconds == 1.5
        assert settings.suggestion_hide_delay == 0.15

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("ANALYSIS_DELAY_SECONDS", "0")
        monkeypatch.setenv("RATE_LIMIT_ANALYSIS", "5/minute")
        settings = get_settings()
        assert settings.analysis_delay_seconds == 0.0
        assert settings.rate_limit_analysis == "5/minute"

    def test_negative_delay_rejected(self, monkeypatch):
        monkeypatch.setenv("ANALYSIS_DELAY_SECONDS", "-1")
        with pytest.raises(ValueError, match="ANALYSIS_DELAY_SECONDS must not be negative"):
            validate_settings()

    def test_zero_ttl_rejected(self, monkeypatch):
        monkeypatch.setenv("SESSION_TTL_SECONDS", "0")
        with pytest.raises(ValueError, match="SESSION_TTL_SECONDS must be positive"):
            validate_settings()

    def test_errors_are_collected(self, monkeypatch):
        monkeypatch.setenv("SUGGESTION_HIDE_DELAY", "-0.5")
        monkeypatch.setenv("SESSION_MAX_COUNT", "0")
        with pytest.raises(ValueError) as exc_info:
            validate_settings()
        message = str(exc_info.value)
        assert message.startswith("Configuration errors:")
        assert "SUGGESTION_HIDE_DELAY" in message
        assert "SESSION_MAX_COUNT" in message
