"""Tests for environment-backed settings."""

import pytest

from career_compass.config import Settings, settings
from career_compass.services.career_advisor import AdvisorConfig


class TestSettings:

    def test_defaults_validate(self):
        settings.validate()

    def test_non_positive_timeout_is_rejected(self, monkeypatch):
        monkeypatch.setattr(Settings, "GEMINI_TIMEOUT_MS", 0)
        with pytest.raises(ValueError, match="GEMINI_TIMEOUT_MS"):
            Settings.validate()

    def test_missing_model_is_rejected(self, monkeypatch):
        monkeypatch.setattr(Settings, "GEMINI_MODEL", "")
        with pytest.raises(ValueError, match="GEMINI_MODEL"):
            Settings.validate()

    def test_missing_api_key_is_not_an_error(self, monkeypatch):
        monkeypatch.setattr(Settings, "GEMINI_API_KEY", "")
        Settings.validate()

    def test_advisor_config(self, monkeypatch):
        monkeypatch.setattr(Settings, "GEMINI_API_KEY", "env-key")
        monkeypatch.setattr(Settings, "GEMINI_MODEL", "gemini-test")
        monkeypatch.setattr(Settings, "GEMINI_BASE_URL", "")
        monkeypatch.setattr(Settings, "GEMINI_TIMEOUT_MS", 1500)
        monkeypatch.setattr(Settings, "GEMINI_THINKING_BUDGET", "0")

        config = Settings.advisor_config()

        assert config == AdvisorConfig(
            default_api_key="env-key",
            model="gemini-test",
            base_url=None,
            api_version=Settings.GEMINI_API_VERSION,
            timeout_ms=1500,
        )

    def test_environment_checks(self):
        assert settings.is_production() is False
        assert settings.is_development() is False

    def test_thinking_budget_defaults_to_disabled(self, monkeypatch):
        monkeypatch.setattr(Settings, "GEMINI_THINKING_BUDGET", "0")
        assert Settings.advisor_config().thinking_budget == 0

    def test_blank_thinking_budget_leaves_model_default(self, monkeypatch):
        monkeypatch.setattr(Settings, "GEMINI_THINKING_BUDGET", "  ")
        assert Settings.advisor_config().thinking_budget is None
