"""Tests for logging setup."""

import pytest

from hz_catalog.core.logging import get_logger, setup_logging


@pytest.mark.unit
class TestSetupLogging:
    def test_setup_without_errors(self):
        setup_logging()

    def test_setup_verbose(self):
        setup_logging(verbose=True)

    def test_setup_not_verbose(self):
        setup_logging(verbose=False)


@pytest.mark.unit
class TestGetLogger:
    def test_get_logger_without_name(self):
        setup_logging()
        log = get_logger()
        assert log is not None

    def test_get_logger_with_name(self):
        """Get logger with a bound name."""
        setup_logging()
        log = get_logger("test_module")
        assert log is not None


@pytest.mark.unit
class TestLogOutput:
    def test_log_to_stderr(self, capsys):
        """Log output goes to stderr, not stdout."""
        setup_logging(verbose=True)
        log = get_logger()
        log.info("test message")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "test message" in captured.err

    def test_debug_suppressed_when_not_verbose(self, capsys):
        setup_logging(verbose=False)
        log = get_logger()
        log.debug("hidden detail")

        captured = capsys.readouterr()
        assert "hidden detail" not in captured.err
