"""Tests for logging setup."""

import logging

from pathlib import Path

from shortcode_stripper.logging_config import setup_logging


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_configures_package_logger(self):
        """Test level and a single console handler."""
        logger = setup_logging(logging.WARNING)

        assert logger.name == "shortcode_stripper"
        assert logger.level == logging.WARNING
        assert len(logger.handlers) == 1

    def test_string_level(self):
        """Test level names are accepted."""
        assert setup_logging("debug").level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self):
        """Test that an unknown level name means INFO."""
        assert setup_logging("chatty").level == logging.INFO

    def test_repeated_setup_does_not_duplicate(self):
        """Test that handlers are replaced, not added."""
        setup_logging()
        logger = setup_logging()

        assert len(logger.handlers) == 1

    def test_log_file(self, tmp_path: Path):
        """Test that messages are also written to the log file."""
        log_file = tmp_path / "run.log"
        logger = setup_logging(logging.INFO, str(log_file))

        logging.getLogger("shortcode_stripper.core.runner").info("hello file")
        for handler in logger.handlers:
            handler.flush()

        assert "hello file" in log_file.read_text(encoding="utf-8")
