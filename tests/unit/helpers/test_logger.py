"""Unit tests for logging setup."""

import logging
import sys

import pytest

from build_server.helpers.logger import PACKAGE_LOGGER, get_logger, setup_logger


@pytest.fixture
def package_logger():
    package = logging.getLogger(PACKAGE_LOGGER)
    saved = (package.level, list(package.handlers), package.propagate)
    yield package
    package.level, package.propagate = saved[0], saved[2]
    package.handlers[:] = saved[1]


class TestSetupLogger:
    """Test package logger configuration."""

    def test_level_reaches_existing_module_loggers(self, package_logger):
        module_logger = get_logger("pipeline.executor")

        setup_logger("DEBUG", json_output=False)

        assert module_logger.getEffectiveLevel() == logging.DEBUG
        assert module_logger.handlers == []

    def test_level_from_environment(self, package_logger, monkeypatch):
        monkeypatch.setenv("BUILD_SERVER_LOG_LEVEL", "WARNING")

        setup_logger(json_output=False)

        assert package_logger.level == logging.WARNING

    def test_json_output_logs_to_stderr(self, package_logger):
        setup_logger("INFO", json_output=True)

        assert len(package_logger.handlers) == 1
        assert package_logger.handlers[0].stream is sys.stderr

    def test_unknown_level_defaults_to_info(self, package_logger):
        setup_logger("chatty", json_output=False)
        assert package_logger.level == logging.INFO


def test_get_logger_name():
    assert get_logger("shell").name == "build_server.shell"
