#!/usr/bin/env python3
import logging
import os
import sys

# Add server root to import path (matches existing test style in this repo)
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from playerhub.config import get_settings, parse_log_level
from playerhub.main import create_app


def test_log_level_is_upper_cased():
    assert parse_log_level("debug") == "DEBUG"
    assert parse_log_level(" warning ") == "WARNING"


def test_missing_log_level_defaults_to_info():
    assert parse_log_level(None) == "INFO"
    assert parse_log_level("") == "INFO"


def test_unknown_log_level_falls_back_to_info(caplog):
    with caplog.at_level(logging.WARNING, logger="playerhub.config"):
        assert parse_log_level("verbose") == "INFO"
    assert "verbose" in caplog.text


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "error")
    monkeypatch.setenv("API_PREFIX", "/v2")
    monkeypatch.setenv("CORS_ORIGINS", "https://a.example, https://b.example")
    monkeypatch.delenv("COMPLETION_CATEGORIES_FILE", raising=False)

    settings = get_settings()
    assert settings.log_level == "ERROR"
    assert settings.api_prefix == "/v2"
    assert settings.cors_origins == ["https://a.example", "https://b.example"]
    assert settings.completion_categories_file is None


def test_app_starts_with_unknown_log_level(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "verbose")
    monkeypatch.delenv("COMPLETION_CATEGORIES_FILE", raising=False)

    settings = get_settings()
    assert settings.log_level == "INFO"
    assert len(create_app(settings).state.category_table) == 5
