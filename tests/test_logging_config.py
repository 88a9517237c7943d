"""Tests for structured logging configuration."""

import json
import logging

import structlog

from echovault_mood.logging_config import setup_logging


class TestLoggingConfig:
    """Test structlog setup modes."""

    def teardown_method(self):
        structlog.reset_defaults()
        logging.getLogger().handlers.clear()

    def test_level_filtering(self):
        setup_logging(json_mode=False, level="WARNING")
        assert logging.getLogger().level == logging.WARNING

    def test_unknown_level_defaults_to_info(self):
        setup_logging(level="chatty")
        assert logging.getLogger().level == logging.INFO

    def test_json_mode(self, capsys):
        """JSON mode renders one parseable object per line."""
        setup_logging(json_mode=True, level="DEBUG")
        structlog.get_logger("test_json").info("mood_recorded", emotion="joy")

        line = capsys.readouterr().err.strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["event"] == "mood_recorded"
        assert payload["emotion"] == "joy"
        assert payload["level"] == "info"
