"""Tests for logging setup."""

import logging

from rich.logging import RichHandler

from code_harmonizer.logging_config import ROOT_LOGGER, get_logger, setup_logging


class TestSetupLogging:
    def test_default_level(self):
        logger = setup_logging()
        assert logger.name == ROOT_LOGGER
        assert logger.level == logging.WARNING

    def test_verbose(self):
        assert setup_logging(verbose=True).level == logging.DEBUG

    def test_quiet_wins(self):
        assert setup_logging(verbose=True, quiet=True).level == logging.ERROR

    def test_rich_handler(self):
        setup_logging()
        assert any(isinstance(h, RichHandler) for h in logging.getLogger().handlers)

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "harmonizer.log"
        logger = setup_logging(log_file=str(log_file))
        logger.warning("disk almost full")
        for handler in logging.getLogger().handlers:
            handler.flush()
        assert "disk almost full" in log_file.read_text()
        for handler in list(logging.getLogger().handlers):
            if isinstance(handler, logging.FileHandler):
                handler.close()
                logging.getLogger().removeHandler(handler)


class TestGetLogger:
    def test_root(self):
        assert get_logger().name == "code_harmonizer"

    def test_namespaced(self):
        assert get_logger("analysis.engine").name == "code_harmonizer.analysis.engine"

    def test_already_namespaced(self):
        assert get_logger("code_harmonizer.api").name == "code_harmonizer.api"
