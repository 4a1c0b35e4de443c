"""Tests for application settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from rimsave.config import Settings


def test_defaults():
    settings = Settings()
    assert settings.log_level == "INFO"
    assert settings.max_loaded_saves > 0
    assert settings.max_upload_bytes > 0


def test_environment_override(monkeypatch):
    monkeypatch.setenv("MAX_LOADED_SAVES", "2")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    settings = Settings()
    assert settings.max_loaded_saves == 2
    assert settings.log_level == "DEBUG"


def test_limits_must_be_positive():
    with pytest.raises(ValidationError):
        Settings(max_upload_bytes=0)
    with pytest.raises(ValidationError):
        Settings(max_loaded_saves=0)
