"""Tests for settings and the package logger."""

import logging

import pytest
from pydantic import ValidationError

from filter_dsl.config import Settings
from filter_dsl.utils.logging import logger


def test_settings_defaults():
    settings = Settings()
    assert settings.date_format == "%Y-%m-%d"
    assert settings.default_page_size >= 0
    assert isinstance(settings.compare_updates, bool)


def test_logging_level_by_name():
    assert Settings(logging_level="debug").logging_level == logging.DEBUG
    assert Settings(logging_level="20").logging_level == logging.INFO


def test_logging_level_invalid():
    with pytest.raises(ValidationError):
        Settings(logging_level="loud")


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("FILTER_DSL_DEFAULT_PAGE_SIZE", "50")
    monkeypatch.setenv("FILTER_DSL_COMPARE_UPDATES", "false")
    settings = Settings()
    assert settings.default_page_size == 50
    assert settings.compare_updates is False


def test_package_logger():
    assert logger.name == "filter_dsl"
    assert logger.propagate is False
    assert logger.handlers
