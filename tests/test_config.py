"""Tests for Settings loading via pydantic-settings."""

from __future__ import annotations

import pytest

from src.config import Settings, get_settings


class TestSettings:
    def test_defaults(self) -> None:
        cfg = Settings(_env_file=None)  # type: ignore[call-arg]
        assert cfg.api_port == 8000
        assert cfg.log_level == "INFO"
        assert cfg.timezone == "UTC"
        assert cfg.llm_model

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TIMEZONE", "Europe/London")
        monkeypatch.setenv("API_PORT", "9001")
        cfg = Settings(_env_file=None)  # type: ignore[call-arg]
        assert cfg.timezone == "Europe/London"
        assert cfg.api_port == 9001

    def test_invalid_port_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("API_PORT", "not-a-port")
        with pytest.raises(ValueError):
            Settings(_env_file=None)  # type: ignore[call-arg]

    def test_get_settings_is_cached(self) -> None:
        assert get_settings() is get_settings()
