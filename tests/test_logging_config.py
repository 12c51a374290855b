"""
Tests for logging setup.
"""

import logging
import sys
from pathlib import Path

import pytest

from logalerts.logging_config import get_logger, setup_logging


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_console_handler_on_stderr(self) -> None:
        """Test that console logs go to stderr, not stdout."""
        logger = setup_logging(level="debug")

        assert logger.name == "logalerts"
        assert logger.level == logging.DEBUG
        assert logger.propagate is False
        assert len(logger.handlers) == 1
        assert logger.handlers[0].stream is sys.stderr

    def test_repeat_call_replaces_handlers(self) -> None:
        """Test that calling setup twice does not duplicate output."""
        setup_logging()
        logger = setup_logging(level="WARNING")

        assert len(logger.handlers) == 1
        assert logger.level == logging.WARNING

    def test_log_file_directory_created(self, tmp_path: Path) -> None:
        """Test that the log file's directory is created."""
        log_file = tmp_path / "var" / "log" / "logalerts.log"

        logger = setup_logging(log_file=log_file)
        get_logger("runner").warning("Skipping %s", "/var/log/missing.log")
        for handler in logger.handlers:
            handler.flush()

        assert "Skipping /var/log/missing.log" in log_file.read_text(encoding="utf-8")
        setup_logging()

    def test_unknown_level(self) -> None:
        """Test that a misspelled level is rejected."""
        with pytest.raises(ValueError, match="Unknown log level"):
            setup_logging(level="LOUD")


def test_get_logger_nests_under_package() -> None:
    """Test that module names map onto the package logger tree."""
    assert get_logger("logalerts.runner") is get_logger("runner")
    assert get_logger("runner").name == "logalerts.runner"
