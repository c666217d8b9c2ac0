"""Tests for the logging and console helpers."""

import logging

import pytest

from zonemanifest.utils.logging import (
    get_console,
    get_logger,
    print_error,
    print_info,
    print_success,
    print_warning,
    setup_logging,
)


@pytest.fixture(autouse=True)
def reset_logging():
    """Put the quiet default setup back after each test."""
    yield
    setup_logging(level="WARNING", file_enabled=False)


class TestGetLogger:
    """Tests for get_logger and setup_logging."""

    def test_child_logger(self):
        """Test named loggers hang below the package logger."""
        assert get_logger("scanner").name == "zonemanifest.scanner"
        assert get_logger().name == "zonemanifest"

    def test_setup_level(self):
        """Test setup_logging applies the level."""
        setup_logging(level="debug", file_enabled=False)
        assert get_logger().level == logging.DEBUG

    def test_file_handler(self, tmp_path):
        """Test file logging writes to the rotating log file."""
        setup_logging(level="INFO", log_dir=tmp_path, console_enabled=False)
        get_logger("test").info("manifest written")

        for handler in get_logger().handlers:
            handler.flush()

        assert "manifest written" in (tmp_path / "zonemanifest.log").read_text(encoding="utf-8")

    def test_setup_kept_by_get_logger(self):
        """Test get_logger does not reset a configured logger."""
        setup_logging(level="ERROR", file_enabled=False)
        get_logger("other")
        assert get_logger().level == logging.ERROR


class TestConsoleHelpers:
    """Tests for the themed console print helpers."""

    def test_console_is_shared(self):
        """Test the same console is returned every time."""
        assert get_console() is get_console()

    @pytest.mark.parametrize(
        "helper, marker",
        [
            (print_success, "✓"),
            (print_error, "✗"),
            (print_info, "ℹ"),
            (print_warning, "⚠"),
        ],
    )
    def test_helpers_print_marker(self, helper, marker):
        """Test each helper prints its marker and message."""
        with get_console().capture() as capture:
            helper("zone done")
        assert f"{marker} zone done" in capture.get()
