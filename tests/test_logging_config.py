"""
Tests for Logging Configuration
"""

import logging

from purpose.logging_config import LOGGER_NAME, level_from_env, setup_logging


class TestLevelFromEnv:

    def test_default_when_unset(self, monkeypatch):
        monkeypatch.delenv("PURPOSE_LOG_LEVEL", raising=False)
        assert level_from_env() == logging.WARNING

    def test_named_level(self, monkeypatch):
        monkeypatch.setenv("PURPOSE_LOG_LEVEL", "debug")
        assert level_from_env() == logging.DEBUG

    def test_unknown_level_falls_back(self, monkeypatch):
        monkeypatch.setenv("PURPOSE_LOG_LEVEL", "chatty")
        assert level_from_env(logging.ERROR) == logging.ERROR


class TestSetupLogging:

    def test_configures_package_logger(self):
        logger = setup_logging("DEBUG")
        assert logger.name == LOGGER_NAME
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1

    def test_repeated_setup_does_not_stack_handlers(self):
        setup_logging(logging.INFO)
        logger = setup_logging(logging.INFO)
        assert len(logger.handlers) == 1

    def test_log_file(self, tmp_path):
        path = tmp_path / "purpose.log"
        logger = setup_logging(logging.INFO, log_file=str(path))
        logging.getLogger("purpose.core.dedication").info("toggled")
        for handler in logger.handlers:
            handler.flush()
        assert "toggled" in path.read_text()
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()

    def test_bad_level_name_defaults_to_info(self):
        logger = setup_logging("LOUD")
        assert logger.level == logging.INFO
