# tests/test_config.py
from __future__ import annotations

import pytest

from app.core.config import Settings


def make_settings(**overrides) -> Settings:
    # _env_file=None keeps a developer's local .env out of the test
    return Settings(_env_file=None, **overrides)


def test_defaults_allow_local_react_app():
    s = make_settings()

    assert s.ENVIRONMENT == "development"
    assert s.LOG_LEVEL == "INFO"
    assert s.CORS_ALLOW_ORIGINS == ["http://localhost:3000"]


def test_values_are_normalized():
    s = make_settings(ENVIRONMENT=" Production ", LOG_LEVEL="debug")

    assert s.ENVIRONMENT == "production"
    assert s.is_production
    assert s.LOG_LEVEL == "DEBUG"


def test_unknown_environment_is_rejected():
    with pytest.raises(ValueError):
        make_settings(ENVIRONMENT="qa")


def test_unknown_log_level_is_rejected():
    with pytest.raises(ValueError):
        make_settings(LOG_LEVEL="LOUD")


def test_wildcard_origin_rejected_in_production():
    with pytest.raises(ValueError):
        make_settings(ENVIRONMENT="production", CORS_ALLOW_ORIGINS=["*"])


def test_cors_origins_from_env(monkeypatch):
    monkeypatch.setenv("CORS_ALLOW_ORIGINS", '["https://calc.example.com"]')

    assert make_settings().CORS_ALLOW_ORIGINS == ["https://calc.example.com"]
