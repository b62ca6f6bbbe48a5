"""Tests for environment-driven settings."""

from __future__ import annotations

import logging

import pytest

from servest.config import Settings, configure_logging, get_settings


class TestSettingsFromEnv:
    def test_defaults(self) -> None:
        settings = Settings.from_env({})
        assert settings.currency == "AED"
        assert settings.currency_decimals == 0
        assert settings.log_level == "INFO"
        assert settings.cors_origins == ("http://localhost:3000",)

    def test_overrides(self) -> None:
        settings = Settings.from_env(
            {
                "SERVEST_CURRENCY": "usd",
                "SERVEST_CURRENCY_DECIMALS": "2",
                "SERVEST_LOG_LEVEL": "debug",
                "SERVEST_CORS_ORIGINS": "https://a.example, https://b.example,",
            }
        )
        assert settings.currency == "USD"
        assert settings.currency_decimals == 2
        assert settings.log_level == "DEBUG"
        assert settings.cors_origins == ("https://a.example", "https://b.example")

    def test_bad_decimals(self) -> None:
        with pytest.raises(ValueError, match="SERVEST_CURRENCY_DECIMALS"):
            Settings.from_env({"SERVEST_CURRENCY_DECIMALS": "two"})

    def test_get_settings_reads_process_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SERVEST_CURRENCY", "SAR")
        assert get_settings().currency == "SAR"


class TestConfigureLogging:
    def test_sets_root_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        calls: list[dict[str, object]] = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
        configure_logging(Settings(log_level="DEBUG"))
        assert calls[0]["level"] == "DEBUG"
