"""
Unit tests for logging configuration.
"""
import logging
import os
import sys
import uuid
from unittest.mock import patch

from logger_config import LOG_FORMAT, get_logger


def unique_name():
    return f'test-logger-{uuid.uuid4()}'


class TestGetLogger:
    """Tests for get_logger."""

    @patch.dict(os.environ, {}, clear=True)
    def test_default_level(self):
        """Test INFO is used when LOG_LEVEL is unset."""
        logger = get_logger(unique_name())
        assert logger.level == logging.INFO
        assert logger.propagate is False

    @patch.dict(os.environ, {'LOG_LEVEL': 'debug'})
    def test_level_from_env(self):
        """Test LOG_LEVEL is honoured case-insensitively."""
        assert get_logger(unique_name()).level == logging.DEBUG

    @patch.dict(os.environ, {'LOG_LEVEL': 'NOT_A_LEVEL'})
    def test_invalid_level_falls_back(self):
        """Test unknown levels fall back to INFO."""
        assert get_logger(unique_name()).level == logging.INFO

    def test_handler_added_once(self):
        """Test repeated calls do not stack handlers."""
        name = unique_name()
        first = get_logger(name)
        second = get_logger(name)
        assert first is second
        assert len(second.handlers) == 1
        assert second.handlers[0].formatter._fmt == LOG_FORMAT

    def test_handler_writes_to_stdout(self):
        """Test output goes to stdout rather than stderr."""
        handler = get_logger(unique_name()).handlers[0]
        assert isinstance(handler, logging.StreamHandler)
        assert handler.stream is sys.stdout
