"""Tests for groupcal.config — settings validation."""

import os

import pytest
from pydantic import ValidationError

from groupcal.config import Settings, settings


class TestSettings:
    def test_defaults(self):
        s = Settings()
        assert s.LOG_LEVEL == "INFO"
        assert s.MAX_RULE_INTERVAL == 52
        assert s.DATA_PATH == "data/events.json"

    def test_log_level_normalised(self):
        assert Settings(LOG_LEVEL=" debug ").LOG_LEVEL == "DEBUG"

    def test_unknown_log_level(self):
        with pytest.raises(ValidationError):
            Settings(LOG_LEVEL="chatty")

    def test_max_interval_from_string(self):
        assert Settings(MAX_RULE_INTERVAL="8").MAX_RULE_INTERVAL == 8

    def test_max_interval_must_be_positive(self):
        with pytest.raises(ValidationError):
            Settings(MAX_RULE_INTERVAL="0")

    def test_singleton_loaded_from_environment(self):
        assert settings.LOG_LEVEL == os.environ["LOG_LEVEL"].strip().upper()
        assert settings.MAX_RULE_INTERVAL == int(os.environ["MAX_RULE_INTERVAL"])
